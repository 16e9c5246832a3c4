"""
认证与权限模块：登录/注册请求 DTO 与校验、基于权限标识的 RBAC 判定
"""

from .rbac import (  # noqa: F401
    PERMISSION_CODES,
    PERMISSIONS,
    PermissionDef,
    has_any_perm,
    has_perm,
    has_role,
    is_super_admin,
    lacks_perm,
    lacks_role,
    require_perm,
)
