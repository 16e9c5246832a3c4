# -*- coding: utf-8 -*-
"""
用户管理 Schema 定义：请求（新增/修改/授权/个人中心/导入）与响应（列表/详情/导出）
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Mapping, Optional

from apps.accounts.validators import (
    validate_change_user_status,
    validate_create_user,
    validate_import_user,
    validate_reset_user_pwd,
    validate_update_profile,
    validate_update_profile_pwd,
    validate_update_user,
)
from apps.auth.rbac import is_super_admin
from apps.common.base.base_schema import BaseSchema, ExportSchema, RequestSchema
from apps.common.constants import SEX_LABELS, STATUS_LABELS
from apps.common.pagination import PageRequest
from apps.common.utils.helpers import string_to_int_list
from apps.depts.schemas import DeptDetailResponse
from apps.roles.schemas import RoleListResponse


# ======================
# 请求
# ======================

@dataclass
class SaveUser(BaseSchema):
    """用户写库结构（服务层组装后交给持久层）"""

    user_id: int = 0
    dept_id: int = 0
    user_name: str = ""
    nick_name: str = ""
    user_type: str = ""
    email: str = ""
    phonenumber: str = ""
    sex: str = ""
    avatar: str = ""
    password: str = ""
    login_ip: str = ""
    login_date: Optional[datetime] = None
    status: str = ""
    create_by: str = ""
    update_by: str = ""
    remark: str = ""


@dataclass
class UserListRequest(PageRequest):
    """用户列表查询条件；begin_time/end_time 对应 params[beginTime]/params[endTime]"""

    ALIASES = {"params[beginTime]": "begin_time", "params[endTime]": "end_time"}

    user_name: str = ""
    phonenumber: str = ""
    status: str = ""
    dept_id: int = 0
    begin_time: str = ""
    end_time: str = ""


@dataclass
class CreateUserRequest(RequestSchema):
    dept_id: int = 0
    user_name: str = ""
    nick_name: str = ""
    email: str = ""
    phonenumber: str = ""
    sex: str = ""
    password: str = ""
    status: str = ""
    remark: str = ""
    post_ids: List[int] = field(default_factory=list)
    role_ids: List[int] = field(default_factory=list)

    validator = staticmethod(validate_create_user)


@dataclass
class UpdateUserRequest(RequestSchema):
    user_id: int = 0
    dept_id: int = 0
    user_name: str = ""
    nick_name: str = ""
    email: str = ""
    phonenumber: str = ""
    sex: str = ""
    password: str = ""
    status: str = ""
    remark: str = ""
    post_ids: List[int] = field(default_factory=list)
    role_ids: List[int] = field(default_factory=list)

    validator = staticmethod(validate_update_user)


@dataclass
class ChangeUserStatusRequest(RequestSchema):
    """修改用户状态"""

    user_id: int = 0
    status: str = ""

    validator = staticmethod(validate_change_user_status)


@dataclass
class ResetUserPwdRequest(RequestSchema):
    """管理员重置用户密码"""

    user_id: int = 0
    password: str = ""

    validator = staticmethod(validate_reset_user_pwd)


@dataclass
class AddUserAuthRoleRequest(BaseSchema):
    """
    用户授权角色
    - role_ids 为逗号分隔的角色 ID 串，例如 "1,2,3"
    """

    user_id: int = 0
    role_ids: str = ""

    def role_id_list(self) -> List[int]:
        return string_to_int_list(self.role_ids)


@dataclass
class UpdateProfileRequest(RequestSchema):
    """个人中心：修改基本资料"""

    nick_name: str = ""
    email: str = ""
    phonenumber: str = ""
    sex: str = ""

    validator = staticmethod(validate_update_profile)


@dataclass
class UserProfileUpdatePwdRequest(RequestSchema):
    """个人中心：修改密码"""

    old_password: str = ""
    new_password: str = ""

    validator = staticmethod(validate_update_profile_pwd)


@dataclass
class UserImportRequest(RequestSchema, ExportSchema):
    """用户导入行：表头与导出模板一致"""

    HEADERS = {
        "dept_id": "部门编号",
        "user_name": "登录名称",
        "nick_name": "用户名称",
        "email": "用户邮箱",
        "phonenumber": "手机号码",
        "sex": "用户性别",
        "status": "帐号状态",
    }
    REPLACE = {"sex": SEX_LABELS, "status": STATUS_LABELS}

    dept_id: int = 0
    user_name: str = ""
    nick_name: str = ""
    email: str = ""
    phonenumber: str = ""
    sex: str = ""
    status: str = ""

    validator = staticmethod(validate_import_user)


# ======================
# 响应
# ======================

@dataclass
class UserTokenResponse(BaseSchema):
    """
    登录态中缓存的用户信息
    - password 仅供服务层比对，输出时需排除
    """

    user_id: int = 0
    dept_id: int = 0
    user_name: str = ""
    nick_name: str = ""
    user_type: str = ""
    password: str = ""
    status: str = ""
    dept_name: str = ""

    def to_dict(self, *, exclude_none: bool = False, exclude=None, by_alias: bool = False) -> dict[str, Any]:
        return super().to_dict(
            exclude_none=exclude_none,
            exclude={"password", *(exclude or ())},
            by_alias=by_alias,
        )


@dataclass
class UserDeptSummary(BaseSchema):
    """用户列表中内嵌的部门摘要"""

    dept_id: int = 0
    dept_name: str = ""
    leader: str = ""


@dataclass
class UserListResponse(BaseSchema):
    user_id: int = 0
    dept_id: int = 0
    user_name: str = ""
    nick_name: str = ""
    email: str = ""
    phonenumber: str = ""
    sex: str = ""
    login_ip: str = ""
    login_date: Optional[datetime] = None
    status: str = ""
    create_time: Optional[datetime] = None
    dept: Optional[UserDeptSummary] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "UserListResponse":
        """
        由联表查询的扁平行构造：dept_name / leader 折叠进 dept 摘要
        """
        item = cls.from_dict(row)
        item.dept = UserDeptSummary(
            dept_id=item.dept_id,
            dept_name=row.get("dept_name", "") or "",
            leader=row.get("leader", "") or "",
        )
        return item


@dataclass
class UserDetailResponse(BaseSchema):
    """
    用户详情
    - admin：是否超级管理员，由 user_id 推导
    """

    user_id: int = 0
    dept_id: int = 0
    user_name: str = ""
    nick_name: str = ""
    user_type: str = ""
    email: str = ""
    phonenumber: str = ""
    sex: str = ""
    avatar: str = ""
    login_ip: str = ""
    login_date: Optional[datetime] = None
    status: str = ""
    create_time: Optional[datetime] = None
    admin: bool = False

    def __post_init__(self):
        self.admin = is_super_admin(self.user_id)


@dataclass
class AuthUserInfoResponse(UserDetailResponse):
    """当前登录用户信息：详情 + 所属部门 + 角色列表"""

    dept: Optional[DeptDetailResponse] = None
    roles: List[RoleListResponse] = field(default_factory=list)


@dataclass
class UserExportResponse(ExportSchema):
    HEADERS = {
        "user_id": "用户序号",
        "user_name": "登录名称",
        "nick_name": "用户名称",
        "email": "用户邮箱",
        "phonenumber": "手机号码",
        "sex": "用户性别",
        "status": "帐号状态",
        "login_ip": "最后登录IP",
        "login_date": "最后登录时间",
        "dept_name": "部门名称",
        "dept_leader": "部门负责人",
    }
    REPLACE = {"sex": SEX_LABELS, "status": STATUS_LABELS}

    user_id: int = 0
    user_name: str = ""
    nick_name: str = ""
    email: str = ""
    phonenumber: str = ""
    sex: str = ""
    status: str = ""
    login_ip: str = ""
    login_date: str = ""
    dept_name: str = ""
    dept_leader: str = ""
