from django.apps import AppConfig


class AccountsConfig(AppConfig):
    """
    用户管理模块应用配置：
    - 承载用户请求/响应 DTO、个人中心与导入导出行结构
    - 只做校验与结构转换，不建表
    """

    # 应用全路径：与 Django INSTALLED_APPS 保持一致
    name = "apps.accounts"
    # 应用标签：用于 Django 内部标识，区分其他 app
    label = "accounts"
    verbose_name = "Accounts"
