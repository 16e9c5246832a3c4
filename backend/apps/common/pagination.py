"""
分页与排序参数（apps.common.pagination）

设计目标：
- 列表类请求 DTO 统一继承 PageRequest，获得 page_num / page_size；
- 控制默认分页大小/最大分页大小，防止一次拉取过多数据；
- 解析前端排序参数（isAsc / orderByColumn），输出 ASC/DESC 与 snake_case 列名
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Tuple

from django.conf import settings

from apps.common.base.base_schema import BaseSchema

_UPPER = re.compile(r"([A-Z])")


@dataclass
class PageRequest(BaseSchema):
    """
    分页请求基类

    参数说明：
    - page_num：页码（从 1 开始，非法值按 1 处理）
    - page_size：每页条数（非法值按默认值处理，超出上限按上限处理）
    """

    page_num: int = 1
    page_size: int = 0

    def normalized_page_num(self) -> int:
        return max(1, int(self.page_num or 1))

    def normalized_page_size(self) -> int:
        default = getattr(settings, "PAGE_SIZE_DEFAULT", 10)
        maximum = getattr(settings, "PAGE_SIZE_MAX", 100)
        size = int(self.page_size or 0)
        if size <= 0:
            size = default
        return min(size, maximum)

    @property
    def offset(self) -> int:
        """SQL OFFSET：(page_num - 1) * page_size"""
        return (self.normalized_page_num() - 1) * self.normalized_page_size()


def parse_sort(is_asc: str, order_by_column: str, default_order_by: str) -> Tuple[str, str]:
    """
    解析排序参数

    - is_asc 以 "asc" 开头（ascending / asc）时为 ASC，否则 DESC
    - order_by_column 为空时使用 default_order_by
    - 列名从 camelCase 转为 snake_case：loginTime -> login_time
    """
    order_rule = "ASC" if (is_asc or "").startswith("asc") else "DESC"
    column = order_by_column or default_order_by
    column = _UPPER.sub(r"_\1", column).lower()
    return order_rule, column
