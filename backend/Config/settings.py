"""
Django 配置（Config.settings）

- 本项目只承载 DTO 与校验规则，不访问数据库；DATABASES 仅为满足测试运行器
- 可覆盖项统一通过环境变量读取，业务参数使用 getattr(settings, NAME, 默认值) 访问
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

# -----------------------------------------------------------------------------
# 安全与核心
# -----------------------------------------------------------------------------
SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "django-insecure-rbac-console-dev-key")
DEBUG = os.getenv("DJANGO_DEBUG", "False").lower() == "true"
ALLOWED_HOSTS = os.getenv("DJANGO_ALLOWED_HOSTS", "*").split(",")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "apps.system",
    "apps.auth",
    "apps.accounts",
    "apps.roles",
    "apps.menus",
    "apps.depts",
    "apps.monitor",
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "zh-hans"
TIME_ZONE = "Asia/Shanghai"
USE_I18N = True
USE_TZ = True

# -----------------------------------------------------------------------------
# 日志
# -----------------------------------------------------------------------------
LOG_PATH = os.getenv("LOG_PATH", str(BASE_DIR / "logs"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# -----------------------------------------------------------------------------
# 业务参数
# -----------------------------------------------------------------------------
# 超级管理员用户 ID（禁止删除，拥有全部权限）
SUPER_ADMIN_ID = 1
# 顶级部门 ID（允许没有上级部门）
ROOT_DEPT_ID = 100

# 注册账户与密码长度区间（闭区间）
USERNAME_MIN_LENGTH = 2
USERNAME_MAX_LENGTH = 20
PASSWORD_MIN_LENGTH = 5
PASSWORD_MAX_LENGTH = 20

# 分页
PAGE_SIZE_DEFAULT = 10
PAGE_SIZE_MAX = 100
