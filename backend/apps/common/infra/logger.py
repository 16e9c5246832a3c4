"""
日志封装：提供统一的日志记录器

- 通过 settings.LOG_PATH 配置日志目录，输出 {LOG_PATH}/system.log
- PLAIN 格式（人类可读，易于 grep），按日期自动轮转
- 自动注入请求上下文（request_id、user_id、username、ip、path）
- 提供敏感字段过滤工具，避免密码/验证码写入日志或审计记录
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from datetime import datetime
from pathlib import Path
from typing import Optional

from django.conf import settings as django_settings

_configured = False


class PlainFormatter(logging.Formatter):
    """
    PLAIN 格式化器

    格式：{timestamp} {level} {logger} {message} [{username}|{user_id}|{ip_address}|{request_path}]

    输出示例：
    2026-10-19 16:57:25 INFO apps.menus.services 路由菜单构建完成 [admin|1|127.0.0.1|/getRouters]
    """

    def format(self, record: logging.LogRecord) -> str:
        from apps.common.utils.request_context import get_request_context

        ctx = get_request_context()

        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")

        username = ctx.get("username") or "-"
        user_id = str(ctx.get("user_id")) if ctx.get("user_id") is not None else "-"
        ip_address = ctx.get("ip") or "-"
        request_path = ctx.get("path") or "-"
        context_info = f"[{username}|{user_id}|{ip_address}|{request_path}]"

        log_line = f"{timestamp} {record.levelname} {record.name} {record.getMessage()} {context_info}"

        if record.exc_info:
            log_line += "\n" + self.formatException(record.exc_info)

        return log_line


def _setting(name: str, default):
    """settings 未配置（脚本直接导入）时回落到默认值"""
    if not django_settings.configured:
        return default
    return getattr(django_settings, name, default)


def get_log_path_from_settings() -> str:
    """基于 settings.LOG_PATH 生成日志文件路径，默认 logs/system.log"""
    log_dir_path = Path(_setting("LOG_PATH", "logs"))
    log_dir_path.mkdir(parents=True, exist_ok=True)
    return str(log_dir_path / "system.log")


def _resolve_level(level: Optional[int]) -> int:
    if level is not None:
        return level
    name = str(_setting("LOG_LEVEL", "INFO")).upper()
    return getattr(logging, name, logging.INFO)


def configure_logging(force: bool = False, *, level: Optional[int] = None, log_file_path: Optional[str] = None) -> None:
    """
    配置日志系统

    配置内容：
    - 使用 PLAIN 格式
    - 按日期自动轮转（每天午夜），保留 30 天
    - DEBUG 环境变量为 true 时同时输出到控制台

    参数：
        force: 是否强制重新配置（默认只配置一次）
    """
    global _configured
    if _configured and not force:
        return

    log_level = _resolve_level(level)
    log_file_path = log_file_path if log_file_path is not None else get_log_path_from_settings()

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # 清除已有的 handlers，同时关闭旧文件避免资源告警
    for handler in list(root_logger.handlers):
        handler.close()
    root_logger.handlers.clear()

    file_handler = logging.handlers.TimedRotatingFileHandler(
        filename=log_file_path,
        when="midnight",
        interval=1,
        backupCount=30,
        encoding="utf-8",
        delay=True,
    )
    file_handler.suffix = "%Y-%m-%d"  # 轮转文件后缀：system.log.2026-10-19
    file_handler.setLevel(log_level)

    formatter = PlainFormatter()
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    if os.getenv("DEBUG", "False").lower() == "true":
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    _configured = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    获取 logger 实例

    使用方式：
        logger = get_logger(__name__)
        logger.info("部门树构建完成")
        logger.debug("UpdateDeptRequest 校验未通过: [41103] 上级部门不能是自己")
    """
    if not _configured and django_settings.configured:
        configure_logging()

    return logging.getLogger(name)


SENSITIVE_KEYS = {
    "password",
    "old_password",
    "new_password",
    "confirm_password",
    "oldpassword",
    "newpassword",
    "confirmpassword",
    "token",
    "code",
    "captcha",
    "uuid",
}


def sanitize_extra(extra: Optional[dict] = None) -> dict:
    """
    过滤敏感字段，避免在日志或操作日志中泄露密码/验证码

    敏感字段列表：password、token、code、captcha、uuid 等（大小写不敏感）
    """
    if not extra:
        return {}
    sanitized = {}
    for k, v in extra.items():
        if str(k).lower() in SENSITIVE_KEYS:
            sanitized[k] = "***"
        else:
            sanitized[k] = v
    return sanitized
