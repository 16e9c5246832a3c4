from django.apps import AppConfig


class RolesConfig(AppConfig):
    """角色管理模块：角色请求/响应 DTO 与校验"""

    name = "apps.roles"
    label = "roles"
    verbose_name = "Roles"
