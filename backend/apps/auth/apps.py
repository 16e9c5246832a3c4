# -*- coding: utf-8 -*-
from django.apps import AppConfig


class AuthConfig(AppConfig):
    """
    认证与权限（轻量级 RBAC）应用配置
    - label 设置为 rbac_auth 以避免与 django.contrib.auth 冲突
    - 只承载登录/注册请求校验与权限判定，不建表
    """

    name = "apps.auth"
    label = "rbac_auth"
    verbose_name = "Authentication And Authorization"
