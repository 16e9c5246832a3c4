# -*- coding: utf-8 -*-
"""
菜单管理 Schema 定义：菜单请求/响应、菜单树、前端路由树
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from apps.common.base.base_schema import BaseSchema, RequestSchema
from apps.common.constants import MENU_NO_FRAME
from apps.common.schemas import SelectTree  # noqa: F401  菜单选择树与部门选择树共用
from apps.common.utils.helpers import safe_int
from apps.menus.validators import validate_create_menu, validate_update_menu


@dataclass
class SaveMenu(BaseSchema):
    """
    菜单写库结构
    - is_frame / is_cache 为 None 时表示不更新该列（0 是合法取值）
    """

    menu_id: int = 0
    menu_name: str = ""
    parent_id: int = 0
    order_num: int = 0
    path: str = ""
    component: str = ""
    query: str = ""
    route_name: str = ""
    is_frame: Optional[int] = None
    is_cache: Optional[int] = None
    menu_type: str = ""
    visible: str = ""
    perms: str = ""
    icon: str = ""
    status: str = ""
    create_by: str = ""
    update_by: str = ""
    remark: str = ""


@dataclass
class MenuListRequest(BaseSchema):
    menu_name: str = ""
    status: str = ""


@dataclass
class _MenuBody(RequestSchema):
    """
    新增/修改共用字段
    - is_frame：0 外链，1 非外链（默认）；前端可能以字符串提交
    - is_cache：0 缓存，1 不缓存
    """

    menu_name: str = ""
    parent_id: int = 0
    order_num: int = 0
    path: str = ""
    component: str = ""
    query: str = ""
    route_name: str = ""
    is_frame: int = MENU_NO_FRAME
    is_cache: int = 0
    menu_type: str = ""
    visible: str = ""
    perms: str = ""
    icon: str = ""
    status: str = ""

    def __post_init__(self):
        self.is_frame = safe_int(self.is_frame, MENU_NO_FRAME)
        self.is_cache = safe_int(self.is_cache)


@dataclass
class CreateMenuRequest(_MenuBody):
    validator = staticmethod(validate_create_menu)


@dataclass
class UpdateMenuRequest(_MenuBody):
    menu_id: int = 0

    validator = staticmethod(validate_update_menu)


@dataclass
class MenuListResponse(BaseSchema):
    menu_id: int = 0
    menu_name: str = ""
    parent_id: int = 0
    order_num: int = 0
    path: str = ""
    component: str = ""
    query: str = ""
    route_name: str = ""
    is_frame: int = MENU_NO_FRAME
    is_cache: int = 0
    menu_type: str = ""
    visible: str = ""
    perms: str = ""
    icon: str = ""
    status: str = ""
    create_time: Optional[datetime] = None


@dataclass
class MenuListTreeResponse(MenuListResponse):
    children: List["MenuListTreeResponse"] = field(default_factory=list)


@dataclass
class MenuMetaResponse(BaseSchema):
    """前端路由 meta：标题、图标、外链地址、是否不缓存"""

    title: str = ""
    icon: str = ""
    link: str = ""
    no_cache: bool = False


@dataclass
class MenuMetaTreeResponse(BaseSchema):
    """前端路由节点"""

    name: str = ""
    path: str = ""
    redirect: str = ""
    component: str = ""
    hidden: bool = False
    always_show: bool = False
    meta: MenuMetaResponse = field(default_factory=MenuMetaResponse)
    children: List["MenuMetaTreeResponse"] = field(default_factory=list)
    query: str = ""


@dataclass
class MenuDetailResponse(BaseSchema):
    menu_id: int = 0
    menu_name: str = ""
    parent_id: int = 0
    order_num: int = 0
    path: str = ""
    component: str = ""
    query: str = ""
    route_name: str = ""
    is_frame: int = MENU_NO_FRAME
    is_cache: int = 0
    menu_type: str = ""
    visible: str = ""
    perms: str = ""
    icon: str = ""
    status: str = ""
