"""
轻量级 RBAC 权限判定（apps.auth.rbac）

设计目标：
- 权限标识采用 "模块:资源:动作" 三段式（如 system:user:list），与菜单 perms 字段一致
- "*:*:*" 表示拥有全部权限；超级管理员用户（settings.SUPER_ADMIN_ID）直接放行
- 角色判定同理：拥有 admin 角色视为拥有全部角色
- 判定函数只依赖传入的权限/角色集合，不查询数据库
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from django.conf import settings

from apps.common.constants import ALL_PERMISSION, SUPER_ADMIN_ROLE_KEY
from apps.common.exceptions import PermissionDeniedError


@dataclass(frozen=True)
class PermissionDef:
    """权限定义数据结构"""

    code: str  # 形如 "system:user:list"
    category: str  # 所属业务大类
    action: str  # 动作（中文）


# =============================
# 权限清单（按业务模块梳理）
# =============================
PERMISSIONS: Tuple[PermissionDef, ...] = (
    # 用户管理
    PermissionDef("system:user:list", "用户管理", "用户查询"),
    PermissionDef("system:user:query", "用户管理", "用户详情"),
    PermissionDef("system:user:add", "用户管理", "用户新增"),
    PermissionDef("system:user:edit", "用户管理", "用户修改"),
    PermissionDef("system:user:remove", "用户管理", "用户删除"),
    PermissionDef("system:user:export", "用户管理", "用户导出"),
    PermissionDef("system:user:import", "用户管理", "用户导入"),
    PermissionDef("system:user:resetPwd", "用户管理", "重置密码"),

    # 角色管理
    PermissionDef("system:role:list", "角色管理", "角色查询"),
    PermissionDef("system:role:query", "角色管理", "角色详情"),
    PermissionDef("system:role:add", "角色管理", "角色新增"),
    PermissionDef("system:role:edit", "角色管理", "角色修改"),
    PermissionDef("system:role:remove", "角色管理", "角色删除"),
    PermissionDef("system:role:export", "角色管理", "角色导出"),

    # 菜单管理
    PermissionDef("system:menu:list", "菜单管理", "菜单查询"),
    PermissionDef("system:menu:query", "菜单管理", "菜单详情"),
    PermissionDef("system:menu:add", "菜单管理", "菜单新增"),
    PermissionDef("system:menu:edit", "菜单管理", "菜单修改"),
    PermissionDef("system:menu:remove", "菜单管理", "菜单删除"),

    # 部门管理
    PermissionDef("system:dept:list", "部门管理", "部门查询"),
    PermissionDef("system:dept:query", "部门管理", "部门详情"),
    PermissionDef("system:dept:add", "部门管理", "部门新增"),
    PermissionDef("system:dept:edit", "部门管理", "部门修改"),
    PermissionDef("system:dept:remove", "部门管理", "部门删除"),

    # 岗位管理
    PermissionDef("system:post:list", "岗位管理", "岗位查询"),
    PermissionDef("system:post:query", "岗位管理", "岗位详情"),
    PermissionDef("system:post:add", "岗位管理", "岗位新增"),
    PermissionDef("system:post:edit", "岗位管理", "岗位修改"),
    PermissionDef("system:post:remove", "岗位管理", "岗位删除"),
    PermissionDef("system:post:export", "岗位管理", "岗位导出"),

    # 字典管理
    PermissionDef("system:dict:list", "字典管理", "字典查询"),
    PermissionDef("system:dict:query", "字典管理", "字典详情"),
    PermissionDef("system:dict:add", "字典管理", "字典新增"),
    PermissionDef("system:dict:edit", "字典管理", "字典修改"),
    PermissionDef("system:dict:remove", "字典管理", "字典删除"),
    PermissionDef("system:dict:export", "字典管理", "字典导出"),

    # 参数设置
    PermissionDef("system:config:list", "参数设置", "参数查询"),
    PermissionDef("system:config:query", "参数设置", "参数详情"),
    PermissionDef("system:config:add", "参数设置", "参数新增"),
    PermissionDef("system:config:edit", "参数设置", "参数修改"),
    PermissionDef("system:config:remove", "参数设置", "参数删除"),
    PermissionDef("system:config:export", "参数设置", "参数导出"),

    # 日志监控
    PermissionDef("monitor:logininfor:list", "日志管理", "登录日志查询"),
    PermissionDef("monitor:logininfor:remove", "日志管理", "登录日志删除"),
    PermissionDef("monitor:logininfor:export", "日志管理", "登录日志导出"),
    PermissionDef("monitor:logininfor:unlock", "日志管理", "账户解锁"),
    PermissionDef("monitor:operlog:list", "日志管理", "操作日志查询"),
    PermissionDef("monitor:operlog:query", "日志管理", "操作日志详情"),
    PermissionDef("monitor:operlog:remove", "日志管理", "操作日志删除"),
    PermissionDef("monitor:operlog:export", "日志管理", "操作日志导出"),
)

PERMISSION_CODES = frozenset(p.code for p in PERMISSIONS)


def is_super_admin(user_id: int) -> bool:
    """超级管理员用户判定"""
    return user_id == getattr(settings, "SUPER_ADMIN_ID", 1)


def has_perm(user_id: int, perms: Iterable[str], required: str) -> bool:
    """用户是否拥有指定权限（超级管理员与 *:*:* 直接放行）"""
    if is_super_admin(user_id):
        return True
    owned = set(perms)
    return ALL_PERMISSION in owned or required in owned


def lacks_perm(user_id: int, perms: Iterable[str], required: str) -> bool:
    """与 has_perm 相反"""
    return not has_perm(user_id, perms, required)


def has_any_perm(user_id: int, perms: Iterable[str], required: Iterable[str]) -> bool:
    """用户是否拥有 required 中任意一个权限"""
    if is_super_admin(user_id):
        return True
    owned = set(perms)
    if ALL_PERMISSION in owned:
        return True
    return any(code in owned for code in required)


def has_role(user_id: int, role_keys: Iterable[str], required: str) -> bool:
    """用户是否拥有指定角色（超级管理员与 admin 角色直接放行）"""
    if is_super_admin(user_id):
        return True
    owned = set(role_keys)
    return SUPER_ADMIN_ROLE_KEY in owned or required in owned


def lacks_role(user_id: int, role_keys: Iterable[str], required: str) -> bool:
    """与 has_role 相反"""
    return not has_role(user_id, role_keys, required)


def require_perm(user_id: int, perms: Iterable[str], required: str) -> None:
    """
    缺少权限时抛出 PermissionDeniedError

    extra 中带上缺失的权限标识，便于前端提示与审计
    """
    if lacks_perm(user_id, perms, required):
        raise PermissionDeniedError(extra={"required": required})
