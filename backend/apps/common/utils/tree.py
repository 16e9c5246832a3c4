"""
树形结构组装：把扁平的 (id, parent_id) 列表组装为嵌套 children，供部门树、菜单树等使用
"""

from __future__ import annotations

from collections import defaultdict
from typing import Callable, Hashable, Iterable, List, TypeVar

Item = TypeVar("Item")
Node = TypeVar("Node")


def build_tree(
        items: Iterable[Item],
        parent_id: Hashable,
        *,
        id_of: Callable[[Item], Hashable],
        parent_of: Callable[[Item], Hashable],
        make: Callable[[Item, List[Node]], Node],
) -> List[Node]:
    """
    从 parent_id 开始向下组装树

    - 同级节点保持输入顺序（上游已按 order_num 排好序）
    - 父节点不在列表中的节点不会出现在结果里
    - 已访问过的节点不再展开，数据中存在环时也能终止
    """
    children_of: dict[Hashable, list[Item]] = defaultdict(list)
    for item in items:
        children_of[parent_of(item)].append(item)

    visited: set[Hashable] = set()

    def _build(pid: Hashable) -> List[Node]:
        nodes: List[Node] = []
        for item in children_of.get(pid, []):
            node_id = id_of(item)
            if node_id in visited:
                continue
            visited.add(node_id)
            nodes.append(make(item, _build(node_id)))
        return nodes

    return _build(parent_id)
