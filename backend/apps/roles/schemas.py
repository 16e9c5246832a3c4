# -*- coding: utf-8 -*-
"""
角色管理 Schema 定义
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from apps.common.base.base_schema import BaseSchema, ExportSchema, RequestSchema
from apps.common.constants import DATA_SCOPE_LABELS, STATUS_LABELS
from apps.common.pagination import PageRequest
from apps.common.utils.helpers import safe_int, string_to_int_list
from apps.roles.validators import (
    validate_change_role_status,
    validate_create_role,
    validate_update_role,
)


@dataclass
class SaveRole(BaseSchema):
    """
    角色写库结构
    - menu_check_strictly / dept_check_strictly 为 None 时表示不更新该列
    """

    role_id: int = 0
    role_name: str = ""
    role_key: str = ""
    role_sort: int = 0
    data_scope: str = ""
    menu_check_strictly: Optional[int] = None
    dept_check_strictly: Optional[int] = None
    status: str = ""
    create_by: str = ""
    update_by: str = ""
    remark: str = ""


@dataclass
class RoleListRequest(PageRequest):
    ALIASES = {"params[beginTime]": "begin_time", "params[endTime]": "end_time"}

    role_name: str = ""
    role_key: str = ""
    status: str = ""
    begin_time: str = ""
    end_time: str = ""


@dataclass
class CreateRoleRequest(RequestSchema):
    role_name: str = ""
    role_key: str = ""
    role_sort: int = 0
    menu_check_strictly: bool = False
    dept_check_strictly: bool = False
    status: str = ""
    remark: str = ""
    menu_ids: List[int] = field(default_factory=list)

    validator = staticmethod(validate_create_role)


@dataclass
class UpdateRoleRequest(RequestSchema):
    """修改角色；数据权限分配同样复用此结构（data_scope + dept_ids）"""

    role_id: int = 0
    role_name: str = ""
    role_key: str = ""
    role_sort: int = 0
    data_scope: str = ""
    menu_check_strictly: bool = False
    dept_check_strictly: bool = False
    status: str = ""
    remark: str = ""
    menu_ids: List[int] = field(default_factory=list)
    dept_ids: List[int] = field(default_factory=list)

    validator = staticmethod(validate_update_role)


@dataclass
class ChangeRoleStatusRequest(RequestSchema):
    role_id: int = 0
    status: str = ""

    validator = staticmethod(validate_change_role_status)


@dataclass
class RoleAuthUserAllocatedListRequest(PageRequest):
    """角色已分配/未分配用户列表查询"""

    role_id: int = 0
    user_name: str = ""
    phonenumber: str = ""


@dataclass
class RoleAuthUserSelectAllRequest(BaseSchema):
    """批量授权用户；user_ids 为逗号分隔串"""

    role_id: int = 0
    user_ids: str = ""

    def user_id_list(self) -> List[int]:
        return string_to_int_list(self.user_ids)


@dataclass
class RoleAuthUserCancelRequest(BaseSchema):
    """取消单个用户授权；前端以字符串提交 roleId"""

    role_id: int = 0
    user_id: int = 0

    def __post_init__(self):
        self.role_id = safe_int(self.role_id)


@dataclass
class RoleAuthUserCancelAllRequest(BaseSchema):
    role_id: int = 0
    user_ids: str = ""

    def user_id_list(self) -> List[int]:
        return string_to_int_list(self.user_ids)


@dataclass
class RoleListResponse(BaseSchema):
    """
    角色列表
    - flag：用户授权页面中该角色是否已被当前用户持有
    """

    role_id: int = 0
    role_name: str = ""
    role_key: str = ""
    role_sort: int = 0
    data_scope: str = ""
    menu_check_strictly: bool = False
    dept_check_strictly: bool = False
    status: str = ""
    create_time: Optional[datetime] = None
    flag: bool = False


@dataclass
class RoleDetailResponse(BaseSchema):
    role_id: int = 0
    role_name: str = ""
    role_key: str = ""
    role_sort: int = 0
    data_scope: str = ""
    menu_check_strictly: bool = False
    dept_check_strictly: bool = False
    status: str = ""
    remark: str = ""


@dataclass
class RoleExportResponse(ExportSchema):
    HEADERS = {
        "role_id": "角色序号",
        "role_name": "角色名称",
        "role_key": "角色权限",
        "role_sort": "角色排序",
        "data_scope": "数据范围",
        "status": "角色状态",
    }
    REPLACE = {"data_scope": DATA_SCOPE_LABELS, "status": STATUS_LABELS}

    role_id: int = 0
    role_name: str = ""
    role_key: str = ""
    role_sort: int = 0
    data_scope: str = ""
    status: str = ""
