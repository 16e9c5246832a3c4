# -*- coding: utf-8 -*-
"""
公共模块单测：
- 错误哨兵的身份匹配与包装
- 工具函数（掩码、ID 串解析、格式校验、树组装）
- 分页/排序参数、统一响应、DTO 基类
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import List

from django.test import SimpleTestCase, override_settings
from rest_framework import status

from apps.common.base.base_schema import BaseSchema, ExportSchema, camel_to_snake, coerce_field, snake_to_camel
from apps.common.errors import CATALOG, ERR_DEPT_NAME_EMPTY, ERR_PARAM, ERR_ROLE_IN_USE_DELETE
from apps.common.exceptions import BizError, ValidationError, is_error, raise_if, require
from apps.common.infra.logger import PlainFormatter, sanitize_extra
from apps.common.pagination import PageRequest, parse_sort
from apps.common.response import (
    build_page_extra,
    build_payload,
    is_success_payload,
    payload_from_biz_error,
    response_from_biz_error,
)
from apps.common.utils.helpers import desensitize, mask_email, mask_mobile, safe_int, string_to_int_list
from apps.common.utils.request_context import clear_request_context, get_request_context, set_request_context
from apps.common.utils.tree import build_tree
from apps.common.utils.validators import check_regex, is_blank, is_valid_email, is_valid_phone


class ErrorSentinelTests(SimpleTestCase):
    """错误哨兵：按身份匹配，包装后仍可识别"""

    def test_identity_not_message(self):
        same_text = ValidationError(ERR_PARAM.message, code=ERR_PARAM.code)
        self.assertFalse(is_error(same_text, ERR_PARAM))
        self.assertTrue(is_error(ERR_PARAM, ERR_PARAM))

    def test_wrap_preserves_identity(self):
        wrapped = ERR_ROLE_IN_USE_DELETE.wrap("管理员已分配，不能删除", role_id=2)
        self.assertIsNot(wrapped, ERR_ROLE_IN_USE_DELETE)
        self.assertTrue(is_error(wrapped, ERR_ROLE_IN_USE_DELETE))
        self.assertFalse(is_error(wrapped, ERR_PARAM))
        self.assertEqual(wrapped.code, ERR_ROLE_IN_USE_DELETE.code)
        self.assertEqual(wrapped.extra, {"role_id": 2})
        self.assertIs(wrapped.origin, ERR_ROLE_IN_USE_DELETE)

    def test_double_wrap_points_to_origin(self):
        twice = ERR_PARAM.wrap("a").wrap("b")
        self.assertIs(twice.sentinel, ERR_PARAM)
        self.assertTrue(is_error(twice, ERR_PARAM))

    def test_is_error_none(self):
        self.assertFalse(is_error(None, ERR_PARAM))

    def test_raise_if_raises_copy(self):
        raise_if(None)
        with self.assertRaises(BizError) as ctx:
            raise_if(ERR_DEPT_NAME_EMPTY)
        self.assertIsNot(ctx.exception, ERR_DEPT_NAME_EMPTY)
        self.assertTrue(is_error(ctx.exception, ERR_DEPT_NAME_EMPTY))

    def test_require(self):
        require(True, ERR_PARAM)
        with self.assertRaises(ValidationError):
            require(False, ERR_PARAM)

    def test_catalog_codes_are_unique(self):
        sentinels = [err for group in CATALOG.values() for err in group]
        codes = [err.code for err in sentinels]
        self.assertEqual(len(codes), len(set(codes)))
        self.assertIn("upload", CATALOG)


class HelperTests(SimpleTestCase):
    """掩码与 ID 串解析"""

    def test_desensitize(self):
        self.assertEqual(desensitize("123456789", 2, 5), "12****789")
        self.assertEqual(desensitize("123456789", 0, 8), "*********")
        self.assertEqual(desensitize("abc", 0, 10), "***")
        self.assertEqual(desensitize("", 0, 3), "")

    def test_desensitize_invalid_bounds(self):
        self.assertEqual(desensitize("123456789", -1, 3), "123456789")
        self.assertEqual(desensitize("123456789", 5, 2), "123456789")

    def test_mask(self):
        self.assertEqual(mask_mobile("13812345678"), "138****5678")
        self.assertEqual(mask_email("alice@example.com"), "a***e@example.com")
        self.assertEqual(mask_email("invalid"), "invalid")

    def test_safe_int(self):
        self.assertEqual(safe_int("12"), 12)
        self.assertEqual(safe_int("x", 7), 7)
        self.assertEqual(safe_int(None), 0)

    def test_string_to_int_list(self):
        self.assertEqual(string_to_int_list("1,2, 3"), [1, 2, 3])
        self.assertEqual(string_to_int_list(""), [])

    def test_string_to_int_list_bad_piece(self):
        with self.assertRaises(ValidationError) as ctx:
            string_to_int_list("1,a")
        self.assertTrue(is_error(ctx.exception, ERR_PARAM))
        self.assertIn("a", ctx.exception.message)


class FormatValidatorTests(SimpleTestCase):
    def test_phone(self):
        self.assertTrue(is_valid_phone("13812345678"))
        self.assertFalse(is_valid_phone("12812345678"))
        self.assertFalse(is_valid_phone("1381234567"))
        self.assertFalse(is_valid_phone(""))
        self.assertFalse(is_valid_phone("13812345678\n"))
        self.assertFalse(is_valid_phone(" 13812345678"))

    def test_email(self):
        self.assertTrue(is_valid_email("ry@163.com"))
        self.assertFalse(is_valid_email("ry163.com"))
        self.assertFalse(is_valid_email(""))

    def test_check_regex_invalid_pattern(self):
        self.assertFalse(check_regex("([", "abc"))
        self.assertTrue(check_regex(r"^a", "abc"))

    def test_is_blank(self):
        self.assertTrue(is_blank(None))
        self.assertTrue(is_blank(""))
        self.assertFalse(is_blank("  "))
        self.assertFalse(is_blank("x"))

    def test_sanitize_extra(self):
        masked = sanitize_extra({"Password": "p", "userName": "ry", "uuid": "u"})
        self.assertEqual(masked, {"Password": "***", "userName": "ry", "uuid": "***"})
        self.assertEqual(sanitize_extra(None), {})


@dataclass
class _Node:
    id: int
    parent_id: int
    children: List["_Node"]


class BuildTreeTests(SimpleTestCase):
    """扁平列表组装为树"""

    def _build(self, rows, root=0):
        return build_tree(
            rows,
            root,
            id_of=lambda r: r[0],
            parent_of=lambda r: r[1],
            make=lambda r, children: _Node(r[0], r[1], children),
        )

    def test_nested_order_preserved(self):
        tree = self._build([(1, 0), (3, 1), (2, 1), (4, 0)])
        self.assertEqual([n.id for n in tree], [1, 4])
        self.assertEqual([n.id for n in tree[0].children], [3, 2])
        self.assertEqual(tree[1].children, [])

    def test_orphans_are_dropped(self):
        tree = self._build([(1, 0), (5, 99)])
        self.assertEqual([n.id for n in tree], [1])

    def test_cycle_terminates(self):
        tree = self._build([(1, 2), (2, 1)], root=1)
        self.assertEqual([n.id for n in tree], [2])
        self.assertEqual([n.id for n in tree[0].children], [1])
        self.assertEqual(tree[0].children[0].children, [])


class PaginationTests(SimpleTestCase):
    def test_defaults(self):
        page = PageRequest()
        self.assertEqual(page.normalized_page_num(), 1)
        self.assertEqual(page.normalized_page_size(), 10)
        self.assertEqual(page.offset, 0)

    @override_settings(PAGE_SIZE_MAX=50)
    def test_page_size_capped(self):
        page = PageRequest.from_dict({"pageNum": 3, "pageSize": 500})
        self.assertEqual(page.normalized_page_size(), 50)
        self.assertEqual(page.offset, 100)

    def test_invalid_page_num(self):
        self.assertEqual(PageRequest(page_num=-4, page_size=20).normalized_page_num(), 1)

    def test_parse_sort(self):
        self.assertEqual(parse_sort("ascending", "loginTime", "info_id"), ("ASC", "login_time"))
        self.assertEqual(parse_sort("descending", "", "info_id"), ("DESC", "info_id"))
        self.assertEqual(parse_sort("", "userName", "x"), ("DESC", "user_name"))


class ResponseTests(SimpleTestCase):
    def test_build_payload(self):
        self.assertEqual(build_payload(data=[1]), {"code": 0, "message": "OK", "data": [1]})
        self.assertIn("extra", build_payload(extra={"a": 1}))

    def test_payload_from_biz_error(self):
        payload = payload_from_biz_error(ERR_PARAM.wrap("x 转换失败", value="x"))
        self.assertEqual(payload["code"], ERR_PARAM.code)
        self.assertEqual(payload["message"], "x 转换失败")
        self.assertEqual(payload["extra"], {"value": "x"})
        self.assertFalse(is_success_payload(payload))
        self.assertTrue(is_success_payload(None))

    def test_response_from_biz_error(self):
        resp = response_from_biz_error(ERR_DEPT_NAME_EMPTY)
        self.assertEqual(resp.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(resp.data["code"], ERR_DEPT_NAME_EMPTY.code)

    def test_page_extra(self):
        extra = build_page_extra(page=2, page_size=10, total=25)
        self.assertEqual(extra["total_pages"], 3)
        self.assertTrue(extra["has_next"])
        self.assertTrue(extra["has_previous"])
        self.assertEqual(build_page_extra(page=1, page_size=0, total=5)["total_pages"], 0)


@dataclass
class _Sample(BaseSchema):
    ALIASES = {"params[beginTime]": "begin_time"}

    dept_id: int = 0
    dept_name: str = ""
    begin_time: str = ""


@dataclass
class _SampleRow(ExportSchema):
    HEADERS = {"dept_id": "编号", "status": "状态"}
    REPLACE = {"status": {"0": "正常", "1": "停用"}}

    dept_id: int = 0
    status: str = ""


class BaseSchemaTests(SimpleTestCase):
    """DTO 基类的字段名转换与导出行"""

    def test_name_conversion(self):
        self.assertEqual(camel_to_snake("deptId"), "dept_id")
        self.assertEqual(camel_to_snake("dept_id"), "dept_id")
        self.assertEqual(snake_to_camel("order_by_column"), "orderByColumn")

    def test_from_dict_camel_and_alias(self):
        item = _Sample.from_dict({"deptId": 7, "deptName": "研发", "params[beginTime]": "2024-01-01", "x": 1})
        self.assertEqual(item, _Sample(7, "研发", "2024-01-01"))

    def test_from_dict_coerces_declared_types(self):
        item = _Sample.from_dict({"deptId": "12", "deptName": None, "params[beginTime]": 20240101})
        self.assertEqual(item, _Sample(12, "", "20240101"))
        self.assertEqual(_Sample.from_dict({"deptId": None}).dept_id, 0)
        self.assertEqual(_Sample.from_dict({"deptId": "abc"}).dept_id, 0)

    def test_coerce_uses_int_default(self):
        page_num = {f.name: f for f in fields(PageRequest)}["page_num"]
        self.assertEqual(coerce_field(page_num, None), 1)
        self.assertEqual(coerce_field(page_num, "3"), 3)

    def test_from_model(self):
        class _Dept:
            dept_id = 5
            name = "研发"
            unrelated = "x"

        item = _Sample.from_model(_Dept(), field_map={"dept_name": "name"}, extra={"begin_time": "2024-01-01"})
        self.assertEqual(item, _Sample(5, "研发", "2024-01-01"))

    def test_to_dict_by_alias(self):
        data = _Sample(1, "a").to_dict(by_alias=True, exclude={"begin_time"})
        self.assertEqual(data, {"deptId": 1, "deptName": "a"})

    def test_export_row_round_trip(self):
        row = _SampleRow(3, "1").to_row()
        self.assertEqual(row, {"编号": 3, "状态": "停用"})
        self.assertEqual(_SampleRow.from_row(row), _SampleRow(3, "1"))


class RequestContextLoggingTests(SimpleTestCase):
    """请求上下文注入日志行"""

    def tearDown(self):
        clear_request_context()

    def test_context_roundtrip(self):
        set_request_context(user_id=1, username="admin", path="/system/user", method="GET", ip="127.0.0.1")
        ctx = get_request_context()
        self.assertEqual(len(ctx["request_id"]), 12)
        self.assertEqual((ctx["user_id"], ctx["username"]), (1, "admin"))
        clear_request_context()
        self.assertEqual(get_request_context()["request_id"], "")

    def test_plain_formatter_suffix(self):
        record = logging.LogRecord("apps.depts", logging.INFO, __file__, 1, "部门树构建完成", None, None)
        self.assertTrue(PlainFormatter().format(record).endswith("部门树构建完成 [-|-|-|-]"))
        set_request_context(user_id=1, username="admin", path="/system/dept", ip="127.0.0.1")
        self.assertTrue(PlainFormatter().format(record).endswith("[admin|1|127.0.0.1|/system/dept]"))
