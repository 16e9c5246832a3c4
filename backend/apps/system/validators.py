"""
系统管理请求校验：参数设置、字典类型/字典数据、岗位

修改类请求统一先检查主键（<= 0 视为参数错误），再按新增规则检查字段
"""

from __future__ import annotations

from typing import Optional

from apps.common.errors import (
    ERR_CONFIG_KEY_EMPTY,
    ERR_CONFIG_NAME_EMPTY,
    ERR_CONFIG_VALUE_EMPTY,
    ERR_DICT_LABEL_EMPTY,
    ERR_DICT_NAME_EMPTY,
    ERR_DICT_TYPE_EMPTY,
    ERR_DICT_VALUE_EMPTY,
    ERR_PARAM,
    ERR_POST_CODE_EMPTY,
    ERR_POST_NAME_EMPTY,
)
from apps.common.exceptions import BizError
from apps.common.utils.validators import is_blank


# ======================
# 参数设置
# ======================

def validate_create_config(param) -> Optional[BizError]:
    if is_blank(param.config_name):
        return ERR_CONFIG_NAME_EMPTY
    if is_blank(param.config_key):
        return ERR_CONFIG_KEY_EMPTY
    if is_blank(param.config_value):
        return ERR_CONFIG_VALUE_EMPTY
    return None


def validate_update_config(param) -> Optional[BizError]:
    if param.config_id <= 0:
        return ERR_PARAM
    return validate_create_config(param)


# ======================
# 字典类型 / 字典数据
# ======================

def validate_create_dict_type(param) -> Optional[BizError]:
    if is_blank(param.dict_name):
        return ERR_DICT_NAME_EMPTY
    if is_blank(param.dict_type):
        return ERR_DICT_TYPE_EMPTY
    return None


def validate_update_dict_type(param) -> Optional[BizError]:
    if param.dict_id <= 0:
        return ERR_PARAM
    return validate_create_dict_type(param)


def validate_create_dict_data(param) -> Optional[BizError]:
    if is_blank(param.dict_label):
        return ERR_DICT_LABEL_EMPTY
    if is_blank(param.dict_value):
        return ERR_DICT_VALUE_EMPTY
    return None


def validate_update_dict_data(param) -> Optional[BizError]:
    if param.dict_code <= 0:
        return ERR_PARAM
    return validate_create_dict_data(param)


# ======================
# 岗位
# ======================

def validate_create_post(param) -> Optional[BizError]:
    if is_blank(param.post_code):
        return ERR_POST_CODE_EMPTY
    if is_blank(param.post_name):
        return ERR_POST_NAME_EMPTY
    return None


def validate_update_post(param) -> Optional[BizError]:
    if param.post_id <= 0:
        return ERR_PARAM
    return validate_create_post(param)
