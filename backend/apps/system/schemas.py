# -*- coding: utf-8 -*-
"""
系统管理 Schema 定义：参数设置、字典类型、字典数据、岗位
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from apps.common.base.base_schema import BaseSchema, ExportSchema, RequestSchema
from apps.common.constants import IS_DEFAULT_YES, STATUS_LABELS, YES_NO_LABELS
from apps.common.pagination import PageRequest
from apps.system.validators import (
    validate_create_config,
    validate_create_dict_data,
    validate_create_dict_type,
    validate_create_post,
    validate_update_config,
    validate_update_dict_data,
    validate_update_dict_type,
    validate_update_post,
)

_TIME_RANGE_ALIASES = {"params[beginTime]": "begin_time", "params[endTime]": "end_time"}


# ======================
# 参数设置
# ======================

@dataclass
class SaveConfig(BaseSchema):
    config_id: int = 0
    config_name: str = ""
    config_key: str = ""
    config_value: str = ""
    config_type: str = ""
    create_by: str = ""
    update_by: str = ""
    remark: str = ""


@dataclass
class ConfigListRequest(PageRequest):
    ALIASES = _TIME_RANGE_ALIASES

    config_name: str = ""
    config_key: str = ""
    config_type: str = ""
    begin_time: str = ""
    end_time: str = ""


@dataclass
class CreateConfigRequest(RequestSchema):
    """config_type：Y 系统内置，N 否"""

    config_name: str = ""
    config_key: str = ""
    config_value: str = ""
    config_type: str = ""
    remark: str = ""

    validator = staticmethod(validate_create_config)


@dataclass
class UpdateConfigRequest(RequestSchema):
    config_id: int = 0
    config_name: str = ""
    config_key: str = ""
    config_value: str = ""
    config_type: str = ""
    remark: str = ""

    validator = staticmethod(validate_update_config)


@dataclass
class ConfigListResponse(BaseSchema):
    config_id: int = 0
    config_name: str = ""
    config_key: str = ""
    config_value: str = ""
    config_type: str = ""
    create_time: Optional[datetime] = None
    remark: str = ""


@dataclass
class ConfigDetailResponse(BaseSchema):
    config_id: int = 0
    config_name: str = ""
    config_key: str = ""
    config_value: str = ""
    config_type: str = ""
    remark: str = ""


@dataclass
class ConfigExportResponse(ExportSchema):
    HEADERS = {
        "config_id": "参数主键",
        "config_name": "参数名称",
        "config_key": "参数键名",
        "config_value": "参数键值",
        "config_type": "系统内置",
    }
    REPLACE = {"config_type": YES_NO_LABELS}

    config_id: int = 0
    config_name: str = ""
    config_key: str = ""
    config_value: str = ""
    config_type: str = ""


# ======================
# 字典类型
# ======================

@dataclass
class SaveDictType(BaseSchema):
    dict_id: int = 0
    dict_name: str = ""
    dict_type: str = ""
    status: str = ""
    create_by: str = ""
    update_by: str = ""
    remark: str = ""


@dataclass
class DictTypeListRequest(PageRequest):
    ALIASES = _TIME_RANGE_ALIASES

    dict_name: str = ""
    dict_type: str = ""
    status: str = ""
    begin_time: str = ""
    end_time: str = ""


@dataclass
class CreateDictTypeRequest(RequestSchema):
    dict_name: str = ""
    dict_type: str = ""
    status: str = ""
    remark: str = ""

    validator = staticmethod(validate_create_dict_type)


@dataclass
class UpdateDictTypeRequest(RequestSchema):
    dict_id: int = 0
    dict_name: str = ""
    dict_type: str = ""
    status: str = ""
    remark: str = ""

    validator = staticmethod(validate_update_dict_type)


@dataclass
class DictTypeListResponse(BaseSchema):
    dict_id: int = 0
    dict_name: str = ""
    dict_type: str = ""
    status: str = ""
    create_time: Optional[datetime] = None
    remark: str = ""


@dataclass
class DictTypeDetailResponse(BaseSchema):
    dict_id: int = 0
    dict_name: str = ""
    dict_type: str = ""
    status: str = ""
    remark: str = ""


@dataclass
class DictTypeExportResponse(ExportSchema):
    HEADERS = {
        "dict_id": "字典主键",
        "dict_name": "字典名称",
        "dict_type": "字典类型",
        "status": "状态",
    }
    REPLACE = {"status": STATUS_LABELS}

    dict_id: int = 0
    dict_name: str = ""
    dict_type: str = ""
    status: str = ""


# ======================
# 字典数据
# ======================

@dataclass
class SaveDictData(BaseSchema):
    dict_code: int = 0
    dict_sort: int = 0
    dict_label: str = ""
    dict_value: str = ""
    dict_type: str = ""
    css_class: str = ""
    list_class: str = ""
    is_default: str = ""
    status: str = ""
    create_by: str = ""
    update_by: str = ""
    remark: str = ""


@dataclass
class DictDataListRequest(PageRequest):
    dict_type: str = ""
    dict_label: str = ""
    status: str = ""


@dataclass
class CreateDictDataRequest(RequestSchema):
    dict_sort: int = 0
    dict_label: str = ""
    dict_value: str = ""
    dict_type: str = ""
    css_class: str = ""
    list_class: str = ""
    is_default: str = ""
    status: str = ""
    remark: str = ""

    validator = staticmethod(validate_create_dict_data)


@dataclass
class UpdateDictDataRequest(RequestSchema):
    dict_code: int = 0
    dict_sort: int = 0
    dict_label: str = ""
    dict_value: str = ""
    dict_type: str = ""
    css_class: str = ""
    list_class: str = ""
    is_default: str = ""
    status: str = ""
    remark: str = ""

    validator = staticmethod(validate_update_dict_data)


@dataclass
class DictDataListResponse(BaseSchema):
    """default：是否默认选项，由 is_default == "Y" 推导"""

    dict_code: int = 0
    dict_sort: int = 0
    dict_label: str = ""
    dict_value: str = ""
    dict_type: str = ""
    css_class: str = ""
    list_class: str = ""
    is_default: str = ""
    status: str = ""
    create_time: Optional[datetime] = None
    default: bool = False

    def __post_init__(self):
        self.default = self.is_default == IS_DEFAULT_YES


@dataclass
class DictDataDetailResponse(BaseSchema):
    dict_code: int = 0
    dict_sort: int = 0
    dict_label: str = ""
    dict_value: str = ""
    dict_type: str = ""
    css_class: str = ""
    list_class: str = ""
    is_default: str = ""
    status: str = ""
    default: bool = False

    def __post_init__(self):
        self.default = self.is_default == IS_DEFAULT_YES


@dataclass
class DictDataExportResponse(ExportSchema):
    HEADERS = {
        "dict_code": "字典编码",
        "dict_sort": "字典排序",
        "dict_label": "字典标签",
        "dict_value": "字典键值",
        "dict_type": "字典类型",
        "is_default": "是否默认",
        "status": "状态",
    }
    REPLACE = {"is_default": YES_NO_LABELS, "status": STATUS_LABELS}

    dict_code: int = 0
    dict_sort: int = 0
    dict_label: str = ""
    dict_value: str = ""
    dict_type: str = ""
    is_default: str = ""
    status: str = ""


# ======================
# 岗位
# ======================

@dataclass
class SavePost(BaseSchema):
    post_id: int = 0
    post_code: str = ""
    post_name: str = ""
    post_sort: int = 0
    status: str = ""
    create_by: str = ""
    update_by: str = ""
    remark: str = ""


@dataclass
class PostListRequest(PageRequest):
    post_code: str = ""
    post_name: str = ""
    status: str = ""


@dataclass
class CreatePostRequest(RequestSchema):
    post_code: str = ""
    post_name: str = ""
    post_sort: int = 0
    status: str = ""
    remark: str = ""

    validator = staticmethod(validate_create_post)


@dataclass
class UpdatePostRequest(RequestSchema):
    post_id: int = 0
    post_code: str = ""
    post_name: str = ""
    post_sort: int = 0
    status: str = ""
    remark: str = ""

    validator = staticmethod(validate_update_post)


@dataclass
class PostListResponse(BaseSchema):
    post_id: int = 0
    post_code: str = ""
    post_name: str = ""
    post_sort: int = 0
    status: str = ""
    create_time: Optional[datetime] = None


@dataclass
class PostDetailResponse(BaseSchema):
    post_id: int = 0
    post_code: str = ""
    post_name: str = ""
    post_sort: int = 0
    status: str = ""
    remark: str = ""


@dataclass
class PostExportResponse(ExportSchema):
    HEADERS = {
        "post_id": "岗位序号",
        "post_code": "岗位编码",
        "post_name": "岗位名称",
        "post_sort": "岗位排序",
        "status": "状态",
    }
    REPLACE = {"status": STATUS_LABELS}

    post_id: int = 0
    post_code: str = ""
    post_name: str = ""
    post_sort: int = 0
    status: str = ""
