"""
部门管理请求校验

修改场景下先检查部门 ID，再检查“上级部门不能是自己”，
保证只要 ID 合法，自引用就优先于其他字段错误被报告
"""

from __future__ import annotations

from typing import Optional

from django.conf import settings

from apps.common.errors import (
    ERR_DEPT_NAME_EMPTY,
    ERR_DEPT_PARENT_SELF,
    ERR_PARAM,
    ERR_PARENT_DEPT_EMPTY,
)
from apps.common.exceptions import BizError
from apps.common.utils.validators import is_blank


def validate_create_dept(param) -> Optional[BizError]:
    if param.parent_id <= 0:
        return ERR_PARENT_DEPT_EMPTY
    if is_blank(param.dept_name):
        return ERR_DEPT_NAME_EMPTY
    return None


def validate_update_dept(param) -> Optional[BizError]:
    if param.dept_id <= 0:
        return ERR_PARAM
    if param.parent_id == param.dept_id:
        return ERR_DEPT_PARENT_SELF
    # 根部门没有上级
    if param.dept_id != getattr(settings, "ROOT_DEPT_ID", 100) and param.parent_id <= 0:
        return ERR_PARENT_DEPT_EMPTY
    if is_blank(param.dept_name):
        return ERR_DEPT_NAME_EMPTY
    return None
