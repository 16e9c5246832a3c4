# -*- coding: utf-8 -*-
from __future__ import annotations

from django.test import SimpleTestCase

from apps.common.errors import ERR_DEPT_NAME_EMPTY, ERR_DEPT_PARENT_SELF, ERR_PARAM, ERR_PARENT_DEPT_EMPTY
from apps.common.schemas import SelectTree
from apps.depts.schemas import (
    CreateDeptRequest,
    DeptListResponse,
    DeptTreeResponse,
    UpdateDeptRequest,
)
from apps.depts.services import build_ancestors, dept_select_to_tree, depts_to_tree, exclude_dept_subtree
from apps.depts.validators import validate_create_dept, validate_update_dept


class DeptValidatorTests(SimpleTestCase):
    """
    部门校验：
    - 新增：上级部门 -> 部门名称
    - 修改：部门 ID -> 上级不能是自己 -> 上级部门（根部门除外）-> 部门名称
    """

    def test_create(self):
        self.assertIsNone(validate_create_dept(CreateDeptRequest(parent_id=100, dept_name="研发部门")))
        self.assertIs(validate_create_dept(CreateDeptRequest(dept_name="研发部门")), ERR_PARENT_DEPT_EMPTY)
        self.assertIs(validate_create_dept(CreateDeptRequest(parent_id=100)), ERR_DEPT_NAME_EMPTY)

    def test_update_missing_id(self):
        self.assertIs(validate_update_dept(UpdateDeptRequest(dept_id=0, parent_id=0)), ERR_PARAM)

    def test_parent_self_wins_over_other_fields(self):
        self.assertIs(validate_update_dept(UpdateDeptRequest(dept_id=101, parent_id=101)), ERR_DEPT_PARENT_SELF)
        self.assertIs(
            validate_update_dept(UpdateDeptRequest(dept_id=101, parent_id=101, dept_name="x")),
            ERR_DEPT_PARENT_SELF,
        )

    def test_root_dept_may_have_no_parent(self):
        self.assertIsNone(validate_update_dept(UpdateDeptRequest(dept_id=100, parent_id=0, dept_name="总公司")))
        self.assertIs(
            validate_update_dept(UpdateDeptRequest(dept_id=101, parent_id=0, dept_name="深圳总公司")),
            ERR_PARENT_DEPT_EMPTY,
        )

    def test_update_name(self):
        self.assertIs(validate_update_dept(UpdateDeptRequest(dept_id=101, parent_id=100)), ERR_DEPT_NAME_EMPTY)
        self.assertIsNone(validate_update_dept(UpdateDeptRequest(dept_id=101, parent_id=100, dept_name="a")))

    def test_id_from_json_payload(self):
        payload = {"parentId": 100, "deptName": "研发部门"}
        self.assertIs(UpdateDeptRequest.from_dict({**payload, "deptId": None}).check(), ERR_PARAM)
        self.assertIs(UpdateDeptRequest.from_dict({**payload, "deptId": "x"}).check(), ERR_PARAM)
        self.assertIsNone(UpdateDeptRequest.from_dict({**payload, "deptId": "101"}).check())
        self.assertIs(
            UpdateDeptRequest.from_dict({"deptId": "101", "parentId": "101", "deptName": None}).check(),
            ERR_DEPT_PARENT_SELF,
        )
        self.assertIs(CreateDeptRequest.from_dict({"parentId": None, "deptName": "a"}).check(), ERR_PARENT_DEPT_EMPTY)


class DeptTreeTests(SimpleTestCase):
    """部门树组装"""

    def setUp(self):
        self.depts = [
            DeptListResponse(dept_id=100, parent_id=0, ancestors="0", dept_name="若依科技"),
            DeptListResponse(dept_id=101, parent_id=100, ancestors="0,100", dept_name="深圳总公司"),
            DeptListResponse(dept_id=103, parent_id=101, ancestors="0,100,101", dept_name="研发部门"),
            DeptListResponse(dept_id=102, parent_id=100, ancestors="0,100", dept_name="长沙分公司"),
        ]

    def test_depts_to_tree(self):
        tree = depts_to_tree(self.depts)
        self.assertEqual(len(tree), 1)
        root = tree[0]
        self.assertEqual([c.dept_id for c in root.children], [101, 102])
        self.assertEqual(root.children[0].children[0].dept_name, "研发部门")

    def test_depts_to_tree_from_sub_root(self):
        self.assertEqual([d.dept_id for d in depts_to_tree(self.depts, 101)], [103])

    def test_select_tree(self):
        options = [
            SelectTree(id=100, label="若依科技", parent_id=0),
            SelectTree(id=101, label="深圳总公司", parent_id=100),
        ]
        tree = dept_select_to_tree(options)
        self.assertEqual(tree[0].children[0].label, "深圳总公司")
        self.assertEqual(tree[0].to_dict(), {"id": 100, "label": "若依科技", "children": [
            {"id": 101, "label": "深圳总公司", "children": []},
        ]})

    def test_dept_tree_response_keeps_type(self):
        tree = dept_select_to_tree([DeptTreeResponse(id=100, label="若依科技")])
        self.assertIsInstance(tree[0], DeptTreeResponse)

    def test_build_ancestors(self):
        self.assertEqual(build_ancestors("0,100", 101), "0,100,101")
        self.assertEqual(build_ancestors("", 0), "0")

    def test_exclude_subtree(self):
        remaining = exclude_dept_subtree(self.depts, 101)
        self.assertEqual([d.dept_id for d in remaining], [100, 102])
