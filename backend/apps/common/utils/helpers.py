"""
通用辅助函数：
- 提供掩码、类型安全转换、ID 串解析等纯工具方法，避免重复代码
- 不包含业务逻辑，便于在各模块安全复用
"""

from __future__ import annotations

from typing import Any

from apps.common.errors import ERR_PARAM


def desensitize(content: str, start: int, end: int) -> str:
    """
    将 [start, end] 区间（按字符，含两端）替换为 *

    - start/end 为负或 start > end 时原样返回
    - end 超出长度时只替换到末尾
    """
    if start < 0 or end < 0 or start > end:
        return content
    return "".join("*" if start <= index <= end else char for index, char in enumerate(content))


def mask_email(email: str) -> str:
    """对邮箱做简单掩码，保护隐私"""
    if "@" not in email:
        return email
    name, domain = email.split("@", 1)
    if len(name) <= 2:
        masked = name[:1] + "*" * (len(name) - 1)
    else:
        masked = name[0] + "*" * (len(name) - 2) + name[-1]
    return f"{masked}@{domain}"


def mask_mobile(mobile: str) -> str:
    """对手机号做中间掩码"""
    if len(mobile) < 7:
        return mobile
    return mobile[:3] + "****" + mobile[-4:]


def safe_int(value: Any, default: int = 0) -> int:
    """安全转换为 int，失败则返回默认值"""
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def string_to_int_list(param: str, sep: str = ",") -> list[int]:
    """
    将 "1,2,3" 解析为 [1, 2, 3]

    - 空串返回空列表
    - 任一片段无法转换时抛出 ERR_PARAM 的包装错误，提示具体片段
    """
    if not param:
        return []
    result: list[int] = []
    for piece in param.split(sep):
        try:
            result.append(int(piece.strip()))
        except ValueError as exc:
            raise ERR_PARAM.wrap(f"{piece} 转换失败", value=piece) from exc
    return result
