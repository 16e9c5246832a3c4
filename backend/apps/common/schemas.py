# -*- coding: utf-8 -*-
"""
跨模块共用的 Schema：下拉选择树
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from apps.common.base.base_schema import BaseSchema


@dataclass
class SelectTree(BaseSchema):
    """
    下拉选择树节点（部门选择、菜单选择共用）
    - parent_id 只用于组装树，不对外输出
    """

    id: int = 0
    label: str = ""
    children: List["SelectTree"] = field(default_factory=list)
    parent_id: int = 0

    def to_dict(self, *, exclude_none: bool = False, exclude=None, by_alias: bool = False) -> Dict[str, Any]:
        data = super().to_dict(exclude_none=exclude_none, exclude=exclude, by_alias=by_alias)
        return _drop_parent_id(data)


def _drop_parent_id(node: Dict[str, Any]) -> Dict[str, Any]:
    node.pop("parent_id", None)
    node.pop("parentId", None)
    node["children"] = [_drop_parent_id(child) for child in node.get("children", [])]
    return node
