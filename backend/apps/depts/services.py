"""
部门树组装与祖级链拼接

这里只处理已查询出的扁平列表，不访问数据库
"""

from __future__ import annotations

from typing import Iterable, List

from apps.common.infra.logger import get_logger
from apps.common.schemas import SelectTree
from apps.common.utils.tree import build_tree
from apps.depts.schemas import DeptListResponse, DeptTreeListResponse

logger = get_logger(__name__)


def dept_select_to_tree(depts: Iterable[SelectTree], parent_id: int = 0) -> List[SelectTree]:
    """部门下拉列表 -> 选择树"""
    return build_tree(
        depts,
        parent_id,
        id_of=lambda d: d.id,
        parent_of=lambda d: d.parent_id,
        make=lambda d, children: d.__class__(id=d.id, label=d.label, parent_id=d.parent_id, children=children),
    )


def depts_to_tree(depts: Iterable[DeptListResponse], parent_id: int = 0) -> List[DeptTreeListResponse]:
    """部门列表 -> 带 children 的部门树"""
    return build_tree(
        depts,
        parent_id,
        id_of=lambda d: d.dept_id,
        parent_of=lambda d: d.parent_id,
        make=lambda d, children: DeptTreeListResponse(
            dept_id=d.dept_id,
            parent_id=d.parent_id,
            ancestors=d.ancestors,
            dept_name=d.dept_name,
            order_num=d.order_num,
            status=d.status,
            create_time=d.create_time,
            children=children,
        ),
    )


def build_ancestors(parent_ancestors: str, parent_id: int) -> str:
    """
    拼接新部门的祖级链：父部门祖级链 + 父部门 ID

    例：父部门 ancestors="0,100"、dept_id=101 -> "0,100,101"
    """
    if not parent_ancestors:
        return str(parent_id)
    return f"{parent_ancestors},{parent_id}"


def exclude_dept_subtree(depts: Iterable[DeptListResponse], dept_id: int) -> List[DeptListResponse]:
    """
    修改部门时可选的上级部门：排除部门自身及其所有下级
    """
    target = str(dept_id)
    result = [d for d in depts if d.dept_id != dept_id and target not in d.ancestor_ids()]
    logger.debug(f"部门 {dept_id} 可选上级部门数量: {len(result)}")
    return result
