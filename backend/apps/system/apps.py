from django.apps import AppConfig


class SystemConfig(AppConfig):
    """
    系统管理模块 AppConfig

    职责：
    1. 承载参数设置、字典、岗位的 DTO 与校验
    2. Django 启动时初始化日志系统（所有模块共用）
    """

    name = "apps.system"
    label = "system"
    verbose_name = "System"

    def ready(self):
        """
        Django 启动完成后的钩子：初始化日志系统
        - 只读取 settings，不访问数据库
        """
        from apps.common.infra.logger import (
            configure_logging,
            get_logger,
            get_log_path_from_settings,
        )

        configure_logging(
            force=True,
            log_file_path=get_log_path_from_settings(),
        )
        get_logger(__name__).info("日志系统初始化完成")
