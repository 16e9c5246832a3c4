"""
用户管理相关的请求校验

约定：
- 每个函数按固定顺序检查字段，返回第一个不满足规则的错误哨兵，全部通过返回 None；
- 邮箱/手机号在新增、修改、导入场景下为选填，只有填写了才校验格式；
- 个人资料修改场景下邮箱/手机号必须合法（前端表单为必填项）
"""

from __future__ import annotations

from typing import Iterable, Optional

from django.conf import settings

from apps.common.errors import (
    ERR_PARAM,
    ERR_USER_CURRENT_USER_DELETE,
    ERR_USER_EMAIL_FORMAT,
    ERR_USER_NAME_EMPTY,
    ERR_USER_NEW_PASSWORD_EMPTY,
    ERR_USER_NICKNAME_EMPTY,
    ERR_USER_OLD_PASSWORD_EMPTY,
    ERR_USER_PASSWORD_EMPTY,
    ERR_USER_PHONE_FORMAT,
    ERR_USER_STATUS_EMPTY,
    ERR_USER_SUPER_ADMIN_DELETE,
)
from apps.common.exceptions import BizError
from apps.common.utils.validators import is_blank, is_valid_email, is_valid_phone


def _check_contact(phonenumber: str, email: str) -> Optional[BizError]:
    """选填的手机号/邮箱：非空时才校验格式"""
    if not is_blank(phonenumber) and not is_valid_phone(phonenumber):
        return ERR_USER_PHONE_FORMAT
    if not is_blank(email) and not is_valid_email(email):
        return ERR_USER_EMAIL_FORMAT
    return None


def validate_update_profile(param) -> Optional[BizError]:
    if is_blank(param.nick_name):
        return ERR_USER_NICKNAME_EMPTY
    if not is_valid_email(param.email or ""):
        return ERR_USER_EMAIL_FORMAT
    if not is_valid_phone(param.phonenumber or ""):
        return ERR_USER_PHONE_FORMAT
    return None


def validate_update_profile_pwd(param) -> Optional[BizError]:
    if is_blank(param.old_password):
        return ERR_USER_OLD_PASSWORD_EMPTY
    if is_blank(param.new_password):
        return ERR_USER_NEW_PASSWORD_EMPTY
    return None


def validate_create_user(param) -> Optional[BizError]:
    if is_blank(param.nick_name):
        return ERR_USER_NICKNAME_EMPTY
    if is_blank(param.user_name):
        return ERR_USER_NAME_EMPTY
    if is_blank(param.password):
        return ERR_USER_PASSWORD_EMPTY
    return _check_contact(param.phonenumber, param.email)


def validate_update_user(param) -> Optional[BizError]:
    if param.user_id <= 0:
        return ERR_PARAM
    if is_blank(param.nick_name):
        return ERR_USER_NICKNAME_EMPTY
    return _check_contact(param.phonenumber, param.email)


def validate_remove_user(user_ids: Iterable[int], auth_user_id: int) -> Optional[BizError]:
    """
    删除用户前置检查：
    - 包含超级管理员时拒绝（无论列表中是否还有其他用户）
    - 包含当前登录用户时拒绝
    """
    ids = set(user_ids)
    if getattr(settings, "SUPER_ADMIN_ID", 1) in ids:
        return ERR_USER_SUPER_ADMIN_DELETE
    if auth_user_id in ids:
        return ERR_USER_CURRENT_USER_DELETE
    return None


def validate_change_user_status(param) -> Optional[BizError]:
    if param.user_id <= 0:
        return ERR_PARAM
    if is_blank(param.status):
        return ERR_USER_STATUS_EMPTY
    return None


def validate_reset_user_pwd(param) -> Optional[BizError]:
    if param.user_id <= 0:
        return ERR_PARAM
    if is_blank(param.password):
        return ERR_USER_PASSWORD_EMPTY
    return None


def validate_import_user(param) -> Optional[BizError]:
    """导入行不带密码，密码由导入服务统一设置初始值"""
    if is_blank(param.nick_name):
        return ERR_USER_NICKNAME_EMPTY
    if is_blank(param.user_name):
        return ERR_USER_NAME_EMPTY
    return _check_contact(param.phonenumber, param.email)
