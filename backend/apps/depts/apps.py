from django.apps import AppConfig


class DeptsConfig(AppConfig):
    """部门管理模块：部门 DTO、校验与部门树组装"""

    name = "apps.depts"
    label = "depts"
    verbose_name = "Departments"
