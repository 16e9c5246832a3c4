"""
登录 / 注册请求校验

按声明顺序检查，返回第一个不满足的规则对应的错误哨兵；全部通过返回 None
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from django.conf import settings

from apps.common.errors import (
    ERR_PASSWORD_EMPTY,
    ERR_PASSWORD_LENGTH,
    ERR_PASSWORDS_NOT_MATCH,
    ERR_USERNAME_EMPTY,
    ERR_USERNAME_LENGTH,
)
from apps.common.exceptions import BizError
from apps.common.utils.validators import is_blank

if TYPE_CHECKING:
    from apps.auth.schemas import LoginRequest, RegisterRequest


def _length_between(value: str, min_name: str, min_default: int, max_name: str, max_default: int) -> bool:
    lower = getattr(settings, min_name, min_default)
    upper = getattr(settings, max_name, max_default)
    return lower <= len(value) <= upper


def validate_register(param: "RegisterRequest") -> Optional[BizError]:
    if is_blank(param.username):
        return ERR_USERNAME_EMPTY
    if is_blank(param.password):
        return ERR_PASSWORD_EMPTY
    if param.confirm_password != param.password:
        return ERR_PASSWORDS_NOT_MATCH
    if not _length_between(param.username, "USERNAME_MIN_LENGTH", 2, "USERNAME_MAX_LENGTH", 20):
        return ERR_USERNAME_LENGTH
    if not _length_between(param.password, "PASSWORD_MIN_LENGTH", 5, "PASSWORD_MAX_LENGTH", 20):
        return ERR_PASSWORD_LENGTH
    return None


def validate_login(param: "LoginRequest") -> Optional[BizError]:
    if is_blank(param.username):
        return ERR_USERNAME_EMPTY
    if is_blank(param.password):
        return ERR_PASSWORD_EMPTY
    return None
