from django.apps import AppConfig


class MenusConfig(AppConfig):
    """菜单管理模块：菜单 DTO、校验、菜单树与前端路由组装"""

    name = "apps.menus"
    label = "menus"
    verbose_name = "Menus"
