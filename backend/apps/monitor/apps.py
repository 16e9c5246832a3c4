from django.apps import AppConfig


class MonitorConfig(AppConfig):
    """日志监控模块：登录日志、操作日志 DTO 与日志记录构造"""

    name = "apps.monitor"
    label = "monitor"
    verbose_name = "Monitor"
