"""
校验工具集合：提供常用字段格式判定

与 Go/Java 风格的“返回错误”不同，这里只做布尔判定，
具体返回哪个错误哨兵由各模块的校验函数决定。
"""

from __future__ import annotations

import re

from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import validate_email as django_validate_email

# 中国大陆手机号：1 开头，第二位 3-9，共 11 位；\Z 不允许末尾换行
PHONE_REGEX = re.compile(r"^1[3-9]\d{9}\Z")


def check_regex(pattern: str | re.Pattern, content: str) -> bool:
    """正则判定；非法表达式视为不匹配"""
    try:
        compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
    except re.error:
        return False
    return compiled.search(content or "") is not None


def is_valid_email(email: str) -> bool:
    """复用 Django 内置邮箱校验规则"""
    try:
        django_validate_email(email)
    except DjangoValidationError:
        return False
    return True


def is_valid_phone(phone: str) -> bool:
    """手机号格式判定"""
    return check_regex(PHONE_REGEX, phone)


def is_blank(value: str | None) -> bool:
    """None 或空串视为未填写；纯空白算已填写，交由格式校验处理"""
    return value is None or value == ""
