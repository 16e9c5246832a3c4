# -*- coding: utf-8 -*-
from __future__ import annotations

from django.test import SimpleTestCase, override_settings

from apps.auth.rbac import (
    PERMISSION_CODES,
    has_any_perm,
    has_perm,
    has_role,
    lacks_perm,
    lacks_role,
    require_perm,
)
from apps.auth.schemas import LoginRequest, RegisterRequest
from apps.auth.validators import validate_login, validate_register
from apps.common.errors import (
    ERR_PASSWORD_EMPTY,
    ERR_PASSWORD_LENGTH,
    ERR_PASSWORDS_NOT_MATCH,
    ERR_USERNAME_EMPTY,
    ERR_USERNAME_LENGTH,
)
from apps.common.exceptions import AuthError, PermissionDeniedError, is_error


class RegisterValidatorTests(SimpleTestCase):
    """
    注册校验：
    - 按 用户名 -> 密码 -> 确认密码 -> 用户名长度 -> 密码长度 的顺序返回第一个错误
    """

    def _req(self, **overrides) -> RegisterRequest:
        data = {"username": "alice", "password": "secret1", "confirm_password": "secret1"}
        data.update(overrides)
        return RegisterRequest(**data)

    def test_valid_register(self):
        self.assertIsNone(validate_register(self._req()))

    def test_username_empty(self):
        self.assertIs(validate_register(self._req(username="")), ERR_USERNAME_EMPTY)

    def test_username_empty_wins_over_password_empty(self):
        self.assertIs(validate_register(self._req(username="", password="")), ERR_USERNAME_EMPTY)

    def test_password_empty(self):
        self.assertIs(validate_register(self._req(password="", confirm_password="")), ERR_PASSWORD_EMPTY)

    def test_whitespace_counts_as_filled(self):
        self.assertIsNone(validate_register(self._req(password="     ", confirm_password="     ")))
        self.assertIs(validate_register(self._req(username=" ")), ERR_USERNAME_LENGTH)

    def test_passwords_not_match(self):
        self.assertIs(validate_register(self._req(confirm_password="other")), ERR_PASSWORDS_NOT_MATCH)

    def test_username_length(self):
        self.assertIs(validate_register(self._req(username="a")), ERR_USERNAME_LENGTH)
        self.assertIs(validate_register(self._req(username="a" * 21)), ERR_USERNAME_LENGTH)
        self.assertIsNone(validate_register(self._req(username="ab")))
        self.assertIsNone(validate_register(self._req(username="a" * 20)))

    def test_password_length(self):
        self.assertIs(validate_register(self._req(password="1234", confirm_password="1234")), ERR_PASSWORD_LENGTH)
        long_pwd = "p" * 21
        self.assertIs(validate_register(self._req(password=long_pwd, confirm_password=long_pwd)), ERR_PASSWORD_LENGTH)

    @override_settings(USERNAME_MIN_LENGTH=6)
    def test_length_bounds_follow_settings(self):
        self.assertIs(validate_register(self._req(username="alice")), ERR_USERNAME_LENGTH)

    def test_schema_validate_raises_wrapped_sentinel(self):
        req = RegisterRequest.from_dict({"username": "alice", "password": "secret1", "confirmPassword": "x"})
        with self.assertRaises(AuthError) as ctx:
            req.validate()
        self.assertIsNot(ctx.exception, ERR_PASSWORDS_NOT_MATCH)
        self.assertTrue(is_error(ctx.exception, ERR_PASSWORDS_NOT_MATCH))


class LoginValidatorTests(SimpleTestCase):
    """登录校验：用户名 -> 密码"""

    def test_valid_login(self):
        self.assertIsNone(validate_login(LoginRequest(username="admin", password="admin123")))
        self.assertIsNone(LoginRequest(username="admin", password="admin123").check())

    def test_missing_fields(self):
        self.assertIs(validate_login(LoginRequest(password="x")), ERR_USERNAME_EMPTY)
        self.assertIs(validate_login(LoginRequest(username="admin")), ERR_PASSWORD_EMPTY)
        self.assertIs(validate_login(LoginRequest()), ERR_USERNAME_EMPTY)


class RbacTests(SimpleTestCase):
    """权限/角色判定"""

    def test_super_admin_user_has_everything(self):
        self.assertTrue(has_perm(1, [], "system:user:list"))
        self.assertTrue(has_role(1, [], "common"))
        self.assertTrue(has_any_perm(1, [], ["system:user:add"]))

    def test_all_permission_marker(self):
        self.assertTrue(has_perm(2, ["*:*:*"], "system:role:remove"))
        self.assertTrue(has_any_perm(2, ["*:*:*"], ["whatever"]))

    def test_exact_permission(self):
        perms = ["system:user:list", "system:user:query"]
        self.assertTrue(has_perm(2, perms, "system:user:list"))
        self.assertFalse(has_perm(2, perms, "system:user:remove"))
        self.assertTrue(lacks_perm(2, perms, "system:user:remove"))

    def test_any_permission(self):
        perms = ["system:menu:list"]
        self.assertTrue(has_any_perm(2, perms, ["system:user:list", "system:menu:list"]))
        self.assertFalse(has_any_perm(2, perms, ["system:user:list"]))
        self.assertFalse(has_any_perm(2, perms, []))

    def test_roles(self):
        self.assertTrue(has_role(2, ["admin"], "common"))
        self.assertTrue(has_role(2, ["common"], "common"))
        self.assertFalse(has_role(2, ["common"], "auditor"))
        self.assertTrue(lacks_role(2, ["common"], "auditor"))

    @override_settings(SUPER_ADMIN_ID=9)
    def test_super_admin_id_from_settings(self):
        self.assertTrue(has_perm(9, [], "system:user:list"))
        self.assertFalse(has_perm(1, [], "system:user:list"))

    def test_permission_catalog_codes_are_unique(self):
        self.assertIn("system:user:resetPwd", PERMISSION_CODES)
        self.assertIn("monitor:operlog:export", PERMISSION_CODES)

    def test_require_perm(self):
        require_perm(2, ["system:user:list"], "system:user:list")
        with self.assertRaises(PermissionDeniedError) as ctx:
            require_perm(2, ["system:user:list"], "system:user:remove")
        self.assertEqual(ctx.exception.http_status, 403)
        self.assertEqual(ctx.exception.extra, {"required": "system:user:remove"})
