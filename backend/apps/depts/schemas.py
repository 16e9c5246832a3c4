# -*- coding: utf-8 -*-
"""
部门管理 Schema 定义
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from apps.common.base.base_schema import BaseSchema, RequestSchema
from apps.common.schemas import SelectTree
from apps.depts.validators import validate_create_dept, validate_update_dept


@dataclass
class SaveDept(BaseSchema):
    dept_id: int = 0
    parent_id: int = 0
    ancestors: str = ""
    dept_name: str = ""
    order_num: int = 0
    leader: str = ""
    phone: str = ""
    email: str = ""
    status: str = ""
    create_by: str = ""
    update_by: str = ""


@dataclass
class DeptListRequest(BaseSchema):
    """部门列表不分页"""

    dept_name: str = ""
    status: str = ""


@dataclass
class CreateDeptRequest(RequestSchema):
    parent_id: int = 0
    dept_name: str = ""
    order_num: int = 0
    leader: str = ""
    phone: str = ""
    email: str = ""
    status: str = ""

    validator = staticmethod(validate_create_dept)


@dataclass
class UpdateDeptRequest(RequestSchema):
    dept_id: int = 0
    parent_id: int = 0
    ancestors: str = ""
    dept_name: str = ""
    order_num: int = 0
    leader: str = ""
    phone: str = ""
    email: str = ""
    status: str = ""

    validator = staticmethod(validate_update_dept)


@dataclass
class DeptListResponse(BaseSchema):
    dept_id: int = 0
    parent_id: int = 0
    ancestors: str = ""
    dept_name: str = ""
    order_num: int = 0
    status: str = ""
    create_time: Optional[datetime] = None

    def ancestor_ids(self) -> List[str]:
        """ancestors 形如 "0,100,101"，拆分为字符串 ID 列表"""
        return [piece for piece in self.ancestors.split(",") if piece]


@dataclass
class DeptTreeListResponse(DeptListResponse):
    children: List["DeptTreeListResponse"] = field(default_factory=list)


@dataclass
class DeptDetailResponse(BaseSchema):
    dept_id: int = 0
    parent_id: int = 0
    ancestors: str = ""
    dept_name: str = ""
    order_num: int = 0
    leader: str = ""
    phone: str = ""
    email: str = ""
    status: str = ""
    create_time: Optional[datetime] = None


@dataclass
class DeptTreeResponse(SelectTree):
    """角色数据权限页面使用的部门树；结构与下拉选择树一致"""
