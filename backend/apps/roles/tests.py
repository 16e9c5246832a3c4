# -*- coding: utf-8 -*-
from __future__ import annotations

from django.test import SimpleTestCase

from apps.common.errors import (
    ERR_PARAM,
    ERR_ROLE_IN_USE_DELETE,
    ERR_ROLE_KEY_EMPTY,
    ERR_ROLE_NAME_EMPTY,
    ERR_ROLE_STATUS_EMPTY,
    ERR_ROLE_SUPER_ADMIN_DELETE,
)
from apps.common.exceptions import RoleError, is_error
from apps.roles.schemas import (
    ChangeRoleStatusRequest,
    CreateRoleRequest,
    RoleAuthUserCancelRequest,
    RoleAuthUserSelectAllRequest,
    RoleExportResponse,
    RoleListRequest,
    UpdateRoleRequest,
)
from apps.roles.validators import (
    validate_change_role_status,
    validate_create_role,
    validate_remove_role,
    validate_update_role,
)


class RoleValidatorTests(SimpleTestCase):
    """角色新增/修改/状态校验"""

    def test_create(self):
        self.assertIsNone(validate_create_role(CreateRoleRequest(role_name="普通角色", role_key="common")))
        self.assertIs(validate_create_role(CreateRoleRequest()), ERR_ROLE_NAME_EMPTY)
        self.assertIs(validate_create_role(CreateRoleRequest(role_name="普通角色")), ERR_ROLE_KEY_EMPTY)

    def test_update_id_first(self):
        self.assertIs(validate_update_role(UpdateRoleRequest()), ERR_PARAM)
        self.assertIs(validate_update_role(UpdateRoleRequest(role_id=2)), ERR_ROLE_NAME_EMPTY)
        self.assertIs(validate_update_role(UpdateRoleRequest(role_id=2, role_name="r")), ERR_ROLE_KEY_EMPTY)
        self.assertIsNone(validate_update_role(UpdateRoleRequest(role_id=2, role_name="r", role_key="k")))

    def test_change_status(self):
        self.assertIs(validate_change_role_status(ChangeRoleStatusRequest(0, "1")), ERR_PARAM)
        self.assertIs(validate_change_role_status(ChangeRoleStatusRequest(2, "")), ERR_ROLE_STATUS_EMPTY)
        self.assertIsNone(validate_change_role_status(ChangeRoleStatusRequest(2, "1")))

    def test_schema_validate(self):
        with self.assertRaises(RoleError) as ctx:
            CreateRoleRequest.from_dict({"roleName": "r", "roleKey": None}).validate()
        self.assertTrue(is_error(ctx.exception, ERR_ROLE_KEY_EMPTY))


class RemoveRoleValidatorTests(SimpleTestCase):
    """删除角色：超级管理员角色与已分配角色不可删除"""

    def test_super_admin_role(self):
        self.assertIs(validate_remove_role([1], 2, "普通角色"), ERR_ROLE_SUPER_ADMIN_DELETE)
        self.assertIs(validate_remove_role([2, 1], 2, "普通角色"), ERR_ROLE_SUPER_ADMIN_DELETE)

    def test_role_in_use_is_wrapped(self):
        err = validate_remove_role([2, 3], 3, "测试角色")
        self.assertIsNotNone(err)
        self.assertIsNot(err, ERR_ROLE_IN_USE_DELETE)
        self.assertTrue(is_error(err, ERR_ROLE_IN_USE_DELETE))
        self.assertIn("测试角色", err.message)
        self.assertEqual(err.extra["role_id"], 3)

    def test_allowed(self):
        self.assertIsNone(validate_remove_role([2, 3], 4, "其他"))


class RoleSchemaTests(SimpleTestCase):
    def test_list_request(self):
        req = RoleListRequest.from_dict({"roleKey": "common", "params[endTime]": "2024-12-31", "pageNum": 2})
        self.assertEqual((req.role_key, req.end_time, req.page_num), ("common", "2024-12-31", 2))

    def test_user_id_list(self):
        self.assertEqual(RoleAuthUserSelectAllRequest(role_id=2, user_ids="3,4").user_id_list(), [3, 4])

    def test_cancel_role_id_from_string(self):
        self.assertEqual(RoleAuthUserCancelRequest.from_dict({"roleId": "2", "userId": 3}).role_id, 2)

    def test_export_row(self):
        row = RoleExportResponse(role_id=2, role_name="普通角色", data_scope="2", status="1").to_row()
        self.assertEqual(row["数据范围"], "自定数据权限")
        self.assertEqual(row["角色状态"], "停用")
