# -*- coding: utf-8 -*-
"""
认证请求 Schema 定义：注册、登录
"""

from dataclasses import dataclass

from apps.auth.validators import validate_login, validate_register
from apps.common.base.base_schema import RequestSchema


@dataclass
class RegisterRequest(RequestSchema):
    """
    注册请求
    - code / uuid：图形验证码输入值与其缓存 key
    """

    username: str = ""
    password: str = ""
    confirm_password: str = ""
    code: str = ""
    uuid: str = ""

    validator = staticmethod(validate_register)


@dataclass
class LoginRequest(RequestSchema):
    """登录请求"""

    username: str = ""
    password: str = ""
    code: str = ""
    uuid: str = ""

    validator = staticmethod(validate_login)
