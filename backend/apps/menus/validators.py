"""
菜单管理请求校验

规则顺序：
- 新增：菜单名称 -> 目录/菜单类型的路由地址 -> 外链地址前缀
- 修改：菜单 ID -> 上级菜单不能是自己 -> 其余同新增
"""

from __future__ import annotations

from typing import Optional

from apps.common.constants import MENU_TYPE_DIRECTORY, MENU_TYPE_MENU, MENU_YES_FRAME
from apps.common.errors import (
    ERR_MENU_NAME_EMPTY,
    ERR_MENU_PARENT_SELF,
    ERR_MENU_PATH_EMPTY,
    ERR_MENU_PATH_HTTP_PREFIX,
    ERR_PARAM,
)
from apps.common.exceptions import BizError
from apps.common.utils.validators import is_blank

# 需要路由地址的菜单类型（按钮不需要）
ROUTABLE_MENU_TYPES = (MENU_TYPE_DIRECTORY, MENU_TYPE_MENU)


def _check_menu_fields(param, action: str) -> Optional[BizError]:
    if is_blank(param.menu_name):
        return ERR_MENU_NAME_EMPTY
    if param.menu_type in ROUTABLE_MENU_TYPES and is_blank(param.path):
        return ERR_MENU_PATH_EMPTY
    if param.is_frame == MENU_YES_FRAME and not (param.path or "").startswith("http"):
        return ERR_MENU_PATH_HTTP_PREFIX.wrap(
            f"{action}菜单'{param.menu_name}'失败，地址必须以http(s)://开头",
            menu_name=param.menu_name,
        )
    return None


def validate_create_menu(param) -> Optional[BizError]:
    return _check_menu_fields(param, "新增")


def validate_update_menu(param) -> Optional[BizError]:
    if param.menu_id <= 0:
        return ERR_PARAM
    if param.parent_id == param.menu_id:
        return ERR_MENU_PARENT_SELF
    return _check_menu_fields(param, "修改")
