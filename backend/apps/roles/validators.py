"""
角色管理请求校验：按声明顺序返回第一个错误哨兵，全部通过返回 None
"""

from __future__ import annotations

from typing import Iterable, Optional

from apps.common.errors import (
    ERR_PARAM,
    ERR_ROLE_IN_USE_DELETE,
    ERR_ROLE_KEY_EMPTY,
    ERR_ROLE_NAME_EMPTY,
    ERR_ROLE_STATUS_EMPTY,
    ERR_ROLE_SUPER_ADMIN_DELETE,
)
from apps.common.exceptions import BizError
from apps.common.utils.validators import is_blank

# 超级管理员角色 ID
SUPER_ADMIN_ROLE_ID = 1


def validate_create_role(param) -> Optional[BizError]:
    if is_blank(param.role_name):
        return ERR_ROLE_NAME_EMPTY
    if is_blank(param.role_key):
        return ERR_ROLE_KEY_EMPTY
    return None


def validate_update_role(param) -> Optional[BizError]:
    if param.role_id <= 0:
        return ERR_PARAM
    if is_blank(param.role_name):
        return ERR_ROLE_NAME_EMPTY
    if is_blank(param.role_key):
        return ERR_ROLE_KEY_EMPTY
    return None


def validate_remove_role(role_ids: Iterable[int], role_id: int, role_name: str) -> Optional[BizError]:
    """
    删除角色前置检查

    参数：
    - role_ids：待删除的角色 ID
    - role_id / role_name：已分配给用户、不允许删除的角色
    """
    ids = set(role_ids)
    if SUPER_ADMIN_ROLE_ID in ids:
        return ERR_ROLE_SUPER_ADMIN_DELETE
    if role_id in ids:
        return ERR_ROLE_IN_USE_DELETE.wrap(f"{role_name}已分配，不能删除", role_id=role_id)
    return None


def validate_change_role_status(param) -> Optional[BizError]:
    if param.role_id <= 0:
        return ERR_PARAM
    if is_blank(param.status):
        return ERR_ROLE_STATUS_EMPTY
    return None
