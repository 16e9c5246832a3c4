# -*- coding: utf-8 -*-
from __future__ import annotations

import json
from datetime import datetime

from django.test import SimpleTestCase

from apps.common.constants import BusinessType
from apps.common.errors import ERR_CAPTCHA
from apps.common.response import build_payload, payload_from_biz_error
from apps.monitor.schemas import (
    LogininforExportResponse,
    LogininforListRequest,
    OperLogExportResponse,
    OperLogListRequest,
)
from apps.monitor.services import build_logininfor, build_oper_log


class LogininforTests(SimpleTestCase):
    """登录日志构造与查询参数"""

    def test_success_record(self):
        when = datetime(2024, 5, 1, 12, 0, 0)
        record = build_logininfor("admin", "127.0.0.1", browser="Chrome", os="Mac OS X", login_time=when)
        self.assertEqual(record.status, "0")
        self.assertEqual(record.msg, "登录成功")
        self.assertEqual(record.login_time, when)
        self.assertEqual(record.browser, "Chrome")

    def test_failure_record(self):
        record = build_logininfor("admin", "127.0.0.1", error=ERR_CAPTCHA)
        self.assertEqual(record.status, "1")
        self.assertEqual(record.msg, ERR_CAPTCHA.message)
        self.assertIsNotNone(record.login_time)

    def test_order_rule(self):
        req = LogininforListRequest.from_dict({"orderByColumn": "loginTime", "isAsc": "ascending"})
        self.assertEqual(req.order_rule(), ("ASC", "login_time"))
        self.assertEqual(LogininforListRequest().order_rule(), ("DESC", "login_time"))

    def test_export_row(self):
        row = LogininforExportResponse(info_id=1, user_name="admin", status="1").to_row()
        self.assertEqual(row["登录状态"], "失败")


class OperLogTests(SimpleTestCase):
    """操作日志构造：敏感参数脱敏、失败响应记为异常"""

    def test_success_record(self):
        record = build_oper_log(
            "用户管理",
            BusinessType.INSERT,
            request_method="post",
            oper_url="/system/user",
            params={"userName": "tester", "password": "123456"},
            result_payload=build_payload(data={"userId": 3}),
            cost_ms=12,
        )
        self.assertEqual(record.business_type, 1)
        self.assertEqual(record.request_method, "POST")
        self.assertEqual(record.status, 0)
        self.assertEqual(record.error_msg, "")
        self.assertEqual(json.loads(record.oper_param), {"userName": "tester", "password": "***"})
        self.assertEqual(json.loads(record.json_result)["data"], {"userId": 3})
        self.assertEqual(record.cost_time, 12)

    def test_failure_record(self):
        record = build_oper_log(
            "角色管理",
            BusinessType.DELETE,
            params={"roleIds": [1]},
            result_payload=payload_from_biz_error(ERR_CAPTCHA),
        )
        self.assertEqual(record.status, 1)
        self.assertEqual(record.error_msg, ERR_CAPTCHA.message)

    def test_empty_params_and_result(self):
        record = build_oper_log("其他", 0, cost_ms=-5)
        self.assertEqual(record.oper_param, "{}")
        self.assertEqual(record.json_result, "")
        self.assertEqual(record.status, 0)
        self.assertEqual(record.cost_time, 0)

    def test_datetime_params_serialized(self):
        record = build_oper_log("其他", 0, params={"at": datetime(2024, 1, 1)})
        self.assertIn("2024-01-01", record.oper_param)

    def test_list_request_and_export(self):
        req = OperLogListRequest.from_dict({"title": "用户", "businessType": "1"})
        self.assertEqual(req.order_rule(), ("DESC", "oper_time"))
        self.assertEqual(req.business_type, "1")
        row = OperLogExportResponse(oper_id=1, business_type=3, status=1).to_row()
        self.assertEqual((row["业务类型"], row["状态"]), ("删除", "异常"))
