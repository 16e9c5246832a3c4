# -*- coding: utf-8 -*-
"""
日志监控 Schema 定义：登录日志、操作日志
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from apps.common.base.base_schema import BaseSchema, ExportSchema
from apps.common.constants import BUSINESS_TYPE_LABELS, LOGIN_STATUS_LABELS, OPER_STATUS_LABELS
from apps.common.pagination import PageRequest, parse_sort

_TIME_RANGE_ALIASES = {"params[beginTime]": "begin_time", "params[endTime]": "end_time"}


# ======================
# 登录日志
# ======================

@dataclass
class LogininforListRequest(PageRequest):
    """
    登录日志查询
    - order_by_column / is_asc：前端表格排序参数，默认按登录时间倒序
    """

    ALIASES = _TIME_RANGE_ALIASES

    ipaddr: str = ""
    user_name: str = ""
    status: str = ""
    begin_time: str = ""
    end_time: str = ""
    order_by_column: str = ""
    is_asc: str = ""

    def order_rule(self) -> Tuple[str, str]:
        """返回 (ASC|DESC, 列名)"""
        return parse_sort(self.is_asc, self.order_by_column, "login_time")


@dataclass
class SaveLogininforRequest(BaseSchema):
    """status：0 成功，1 失败"""

    user_name: str = ""
    ipaddr: str = ""
    login_location: str = ""
    browser: str = ""
    os: str = ""
    status: str = ""
    msg: str = ""
    login_time: Optional[datetime] = None


@dataclass
class LogininforListResponse(BaseSchema):
    info_id: int = 0
    user_name: str = ""
    ipaddr: str = ""
    login_location: str = ""
    browser: str = ""
    os: str = ""
    status: str = ""
    msg: str = ""
    login_time: Optional[datetime] = None


@dataclass
class LogininforExportResponse(ExportSchema):
    HEADERS = {
        "info_id": "序号",
        "user_name": "用户账号",
        "status": "登录状态",
        "ipaddr": "登录地址",
        "login_location": "登录地点",
        "browser": "浏览器",
        "os": "操作系统",
        "msg": "提示消息",
        "login_time": "访问时间",
    }
    REPLACE = {"status": LOGIN_STATUS_LABELS}

    info_id: int = 0
    user_name: str = ""
    status: str = ""
    ipaddr: str = ""
    login_location: str = ""
    browser: str = ""
    os: str = ""
    msg: str = ""
    login_time: str = ""


# ======================
# 操作日志
# ======================

@dataclass
class SaveOperLogRequest(BaseSchema):
    """
    操作日志写库结构
    - business_type：见 constants.BusinessType
    - status：0 正常，1 异常
    - cost_time：耗时（毫秒）
    """

    title: str = ""
    business_type: int = 0
    method: str = ""
    request_method: str = ""
    oper_name: str = ""
    dept_name: str = ""
    oper_url: str = ""
    oper_ip: str = ""
    oper_location: str = ""
    oper_param: str = ""
    json_result: str = ""
    status: int = 0
    error_msg: str = ""
    oper_time: Optional[datetime] = None
    cost_time: int = 0


@dataclass
class OperLogListRequest(PageRequest):
    """操作日志查询，默认按操作时间倒序"""

    ALIASES = _TIME_RANGE_ALIASES

    oper_ip: str = ""
    title: str = ""
    business_type: str = ""
    oper_name: str = ""
    status: str = ""
    begin_time: str = ""
    end_time: str = ""
    order_by_column: str = ""
    is_asc: str = ""

    def order_rule(self) -> Tuple[str, str]:
        return parse_sort(self.is_asc, self.order_by_column, "oper_time")


@dataclass
class OperLogListResponse(BaseSchema):
    oper_id: int = 0
    title: str = ""
    business_type: int = 0
    method: str = ""
    request_method: str = ""
    oper_name: str = ""
    dept_name: str = ""
    oper_url: str = ""
    oper_ip: str = ""
    oper_location: str = ""
    oper_param: str = ""
    json_result: str = ""
    status: int = 0
    error_msg: str = ""
    oper_time: Optional[datetime] = None
    cost_time: int = 0


@dataclass
class OperLogExportResponse(ExportSchema):
    HEADERS = {
        "oper_id": "操作序号",
        "title": "操作模块",
        "business_type": "业务类型",
        "method": "请求方法",
        "request_method": "请求方式",
        "oper_name": "操作人员",
        "dept_name": "部门名称",
        "oper_url": "请求地址",
        "oper_ip": "操作地址",
        "oper_location": "操作地点",
        "oper_param": "请求参数",
        "json_result": "返回参数",
        "status": "状态",
        "error_msg": "错误消息",
        "oper_time": "操作时间",
        "cost_time": "消耗时间",
    }
    REPLACE = {"business_type": BUSINESS_TYPE_LABELS, "status": OPER_STATUS_LABELS}

    oper_id: int = 0
    title: str = ""
    business_type: int = 0
    method: str = ""
    request_method: str = ""
    oper_name: str = ""
    dept_name: str = ""
    oper_url: str = ""
    oper_ip: str = ""
    oper_location: str = ""
    oper_param: str = ""
    json_result: str = ""
    status: int = 0
    error_msg: str = ""
    oper_time: str = ""
    cost_time: str = ""
