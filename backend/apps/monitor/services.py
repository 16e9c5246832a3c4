"""
登录日志 / 操作日志记录构造（apps.monitor.services）

设计目标：
- 视图或中间件在请求结束后调用，只负责把请求信息与统一响应转换为待写库结构；
- 请求参数写入前过滤敏感字段（密码、验证码等）；
- 统一响应 code 非 0 时记为失败/异常，并记录提示语
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Mapping, Optional

from django.utils import timezone
from rest_framework.utils.encoders import JSONEncoder

from apps.common.constants import BusinessType, EXCEPTION_STATUS, NORMAL_STATUS
from apps.common.exceptions import BizError
from apps.common.infra.logger import get_logger, sanitize_extra
from apps.common.response import is_success_payload
from apps.monitor.schemas import SaveLogininforRequest, SaveOperLogRequest

logger = get_logger(__name__)

LOGIN_SUCCESS_MSG = "登录成功"

# 操作日志 status 取值
OPER_STATUS_NORMAL = 0
OPER_STATUS_EXCEPTION = 1


def _dumps(value: Any) -> str:
    if value is None:
        return ""
    return json.dumps(value, cls=JSONEncoder, ensure_ascii=False)


def build_logininfor(
        username: str,
        ip: str,
        *,
        location: str = "",
        browser: str = "",
        os: str = "",
        error: Optional[BizError] = None,
        login_time: Optional[datetime] = None,
) -> SaveLogininforRequest:
    """
    构造登录日志

    - error 为空：状态 0，提示“登录成功”
    - error 非空：状态 1，提示取错误提示语
    """
    record = SaveLogininforRequest(
        user_name=username,
        ipaddr=ip,
        login_location=location,
        browser=browser,
        os=os,
        status=NORMAL_STATUS if error is None else EXCEPTION_STATUS,
        msg=LOGIN_SUCCESS_MSG if error is None else error.message,
        login_time=login_time or timezone.now(),
    )
    if error is not None:
        logger.info(f"登录失败: username={username} ip={ip} reason={error.message}")
    return record


def build_oper_log(
        title: str,
        business_type: BusinessType | int,
        *,
        method: str = "",
        request_method: str = "",
        oper_name: str = "",
        dept_name: str = "",
        oper_url: str = "",
        oper_ip: str = "",
        oper_location: str = "",
        params: Optional[Mapping[str, Any]] = None,
        result_payload: Optional[Mapping[str, Any]] = None,
        cost_ms: int = 0,
        oper_time: Optional[datetime] = None,
) -> SaveOperLogRequest:
    """
    构造操作日志

    参数：
    - params：请求参数（body + query），敏感字段以 *** 代替
    - result_payload：统一响应字典 {"code", "message", "data"}
    - cost_ms：请求耗时（毫秒）
    """
    record = SaveOperLogRequest(
        title=title,
        business_type=int(business_type),
        method=method,
        request_method=request_method.upper(),
        oper_name=oper_name,
        dept_name=dept_name,
        oper_url=oper_url,
        oper_ip=oper_ip,
        oper_location=oper_location,
        oper_param=_dumps(sanitize_extra(dict(params or {}))),
        json_result=_dumps(result_payload),
        status=OPER_STATUS_NORMAL,
        oper_time=oper_time or timezone.now(),
        cost_time=max(0, int(cost_ms)),
    )
    if not is_success_payload(result_payload):
        record.status = OPER_STATUS_EXCEPTION
        record.error_msg = str(result_payload.get("message", ""))
        logger.warning(f"操作异常: {title} {record.request_method} {oper_url} -> {record.error_msg}")
    return record
