# -*- coding: utf-8 -*-
from __future__ import annotations

from datetime import datetime

from django.test import SimpleTestCase, override_settings

from apps.accounts.schemas import (
    AddUserAuthRoleRequest,
    AuthUserInfoResponse,
    ChangeUserStatusRequest,
    CreateUserRequest,
    ResetUserPwdRequest,
    UpdateProfileRequest,
    UpdateUserRequest,
    UserDetailResponse,
    UserExportResponse,
    UserImportRequest,
    UserListRequest,
    UserListResponse,
    UserProfileUpdatePwdRequest,
    UserTokenResponse,
)
from apps.accounts.validators import (
    validate_change_user_status,
    validate_create_user,
    validate_import_user,
    validate_remove_user,
    validate_reset_user_pwd,
    validate_update_profile,
    validate_update_profile_pwd,
    validate_update_user,
)
from apps.common.errors import (
    ERR_PARAM,
    ERR_USER_CURRENT_USER_DELETE,
    ERR_USER_EMAIL_FORMAT,
    ERR_USER_NAME_EMPTY,
    ERR_USER_NEW_PASSWORD_EMPTY,
    ERR_USER_NICKNAME_EMPTY,
    ERR_USER_OLD_PASSWORD_EMPTY,
    ERR_USER_PASSWORD_EMPTY,
    ERR_USER_PHONE_FORMAT,
    ERR_USER_STATUS_EMPTY,
    ERR_USER_SUPER_ADMIN_DELETE,
)
from apps.common.exceptions import UserError, ValidationError, is_error
from apps.depts.schemas import DeptDetailResponse
from apps.roles.schemas import RoleListResponse


class ProfileValidatorTests(SimpleTestCase):
    """
    个人中心：
    - 昵称必填
    - 邮箱、手机号始终校验格式（空值视为格式错误）
    """

    def _profile(self, **overrides) -> UpdateProfileRequest:
        data = {"nick_name": "若依", "email": "ry@163.com", "phonenumber": "15888888888", "sex": "1"}
        data.update(overrides)
        return UpdateProfileRequest(**data)

    def test_valid_profile(self):
        self.assertIsNone(validate_update_profile(self._profile()))

    def test_nickname_first(self):
        self.assertIs(validate_update_profile(self._profile(nick_name="", email="bad")), ERR_USER_NICKNAME_EMPTY)

    def test_email_always_checked(self):
        self.assertIs(validate_update_profile(self._profile(email="")), ERR_USER_EMAIL_FORMAT)
        self.assertIs(validate_update_profile(self._profile(email="not-an-email")), ERR_USER_EMAIL_FORMAT)

    def test_phone_always_checked(self):
        self.assertIs(validate_update_profile(self._profile(phonenumber="")), ERR_USER_PHONE_FORMAT)
        self.assertIs(validate_update_profile(self._profile(phonenumber="1234")), ERR_USER_PHONE_FORMAT)

    def test_update_pwd(self):
        self.assertIsNone(validate_update_profile_pwd(UserProfileUpdatePwdRequest("old", "new")))
        self.assertIs(validate_update_profile_pwd(UserProfileUpdatePwdRequest("", "")), ERR_USER_OLD_PASSWORD_EMPTY)
        self.assertIs(validate_update_profile_pwd(UserProfileUpdatePwdRequest("old", "")), ERR_USER_NEW_PASSWORD_EMPTY)


class CreateUserValidatorTests(SimpleTestCase):
    """新增用户：昵称 -> 账号 -> 密码 -> 手机号（选填）-> 邮箱（选填）"""

    def _req(self, **overrides) -> CreateUserRequest:
        data = {"nick_name": "测试", "user_name": "tester", "password": "123456"}
        data.update(overrides)
        return CreateUserRequest(**data)

    def test_valid_without_contact(self):
        self.assertIsNone(validate_create_user(self._req()))

    def test_valid_with_contact(self):
        self.assertIsNone(validate_create_user(self._req(phonenumber="13800000000", email="t@example.com")))

    def test_required_fields_in_order(self):
        self.assertIs(validate_create_user(self._req(nick_name="", user_name="")), ERR_USER_NICKNAME_EMPTY)
        self.assertIs(validate_create_user(self._req(user_name="", password="")), ERR_USER_NAME_EMPTY)
        self.assertIs(validate_create_user(self._req(password="")), ERR_USER_PASSWORD_EMPTY)

    def test_optional_contact_checked_when_present(self):
        self.assertIs(validate_create_user(self._req(phonenumber="abc", email="bad")), ERR_USER_PHONE_FORMAT)
        self.assertIs(validate_create_user(self._req(email="bad")), ERR_USER_EMAIL_FORMAT)

    def test_whitespace_contact_is_checked(self):
        self.assertIs(validate_create_user(self._req(phonenumber="   ")), ERR_USER_PHONE_FORMAT)
        self.assertIs(validate_create_user(self._req(email="   ")), ERR_USER_EMAIL_FORMAT)
        self.assertIs(validate_create_user(self._req(phonenumber="13812345678\n")), ERR_USER_PHONE_FORMAT)

    def test_whitespace_password_is_filled(self):
        self.assertIsNone(validate_create_user(self._req(password="     ")))
        self.assertIsNone(validate_reset_user_pwd(ResetUserPwdRequest(2, "     ")))

    def test_validate_raises_user_error(self):
        req = CreateUserRequest.from_dict({"nickName": "测试", "userName": "tester", "password": "x", "email": "bad"})
        with self.assertRaises(UserError) as ctx:
            req.validate()
        self.assertTrue(is_error(ctx.exception, ERR_USER_EMAIL_FORMAT))


class UpdateUserValidatorTests(SimpleTestCase):
    def test_missing_id_before_nickname(self):
        self.assertIs(validate_update_user(UpdateUserRequest(user_id=0, nick_name="")), ERR_PARAM)

    def test_id_from_json(self):
        self.assertIs(UpdateUserRequest.from_dict({"userId": None, "nickName": "a"}).check(), ERR_PARAM)
        self.assertIs(UpdateUserRequest.from_dict({"userId": "abc", "nickName": "a"}).check(), ERR_PARAM)
        self.assertIsNone(UpdateUserRequest.from_dict({"userId": "2", "nickName": "a", "phonenumber": None}).check())

    def test_update_rules(self):
        self.assertIs(validate_update_user(UpdateUserRequest(user_id=2)), ERR_USER_NICKNAME_EMPTY)
        self.assertIs(
            validate_update_user(UpdateUserRequest(user_id=2, nick_name="a", phonenumber="1")),
            ERR_USER_PHONE_FORMAT,
        )
        self.assertIsNone(validate_update_user(UpdateUserRequest(user_id=2, nick_name="a")))

    def test_change_status(self):
        self.assertIs(validate_change_user_status(ChangeUserStatusRequest(0, "0")), ERR_PARAM)
        self.assertIs(validate_change_user_status(ChangeUserStatusRequest(2, "")), ERR_USER_STATUS_EMPTY)
        self.assertIsNone(ChangeUserStatusRequest(2, "1").check())

    def test_reset_pwd(self):
        self.assertIs(validate_reset_user_pwd(ResetUserPwdRequest(-1, "x")), ERR_PARAM)
        self.assertIs(validate_reset_user_pwd(ResetUserPwdRequest(2, "")), ERR_USER_PASSWORD_EMPTY)
        self.assertIsNone(validate_reset_user_pwd(ResetUserPwdRequest(2, "654321")))


class RemoveUserValidatorTests(SimpleTestCase):
    """删除用户：超级管理员与当前用户不可删除"""

    def test_super_admin_always_rejected(self):
        self.assertIs(validate_remove_user([1], 5), ERR_USER_SUPER_ADMIN_DELETE)
        self.assertIs(validate_remove_user([3, 4, 1], 3), ERR_USER_SUPER_ADMIN_DELETE)

    def test_current_user_rejected(self):
        self.assertIs(validate_remove_user([2, 3], 3), ERR_USER_CURRENT_USER_DELETE)

    def test_others_allowed(self):
        self.assertIsNone(validate_remove_user([2, 3], 5))
        self.assertIsNone(validate_remove_user([], 5))

    @override_settings(SUPER_ADMIN_ID=10)
    def test_super_admin_from_settings(self):
        self.assertIs(validate_remove_user([10], 5), ERR_USER_SUPER_ADMIN_DELETE)
        self.assertIsNone(validate_remove_user([1], 5))


class ImportUserTests(SimpleTestCase):
    """导入行：不校验密码，联系方式选填"""

    def test_import_rules(self):
        self.assertIsNone(validate_import_user(UserImportRequest(user_name="u1", nick_name="用户1")))
        self.assertIs(validate_import_user(UserImportRequest(user_name="u1")), ERR_USER_NICKNAME_EMPTY)
        self.assertIs(validate_import_user(UserImportRequest(nick_name="n")), ERR_USER_NAME_EMPTY)
        self.assertIs(
            validate_import_user(UserImportRequest(user_name="u1", nick_name="n", phonenumber="1")),
            ERR_USER_PHONE_FORMAT,
        )

    def test_from_excel_row(self):
        row = {"部门编号": 103, "登录名称": "u1", "用户名称": "用户1", "用户性别": "女", "帐号状态": "停用"}
        item = UserImportRequest.from_row(row)
        self.assertEqual((item.dept_id, item.user_name, item.sex, item.status), (103, "u1", "1", "1"))
        self.assertIsNone(item.check())


class UserSchemaTests(SimpleTestCase):
    def test_list_request_aliases(self):
        req = UserListRequest.from_dict({"userName": "ad", "params[beginTime]": "2024-01-01", "pageSize": 20})
        self.assertEqual(req.user_name, "ad")
        self.assertEqual(req.begin_time, "2024-01-01")
        self.assertEqual(req.normalized_page_size(), 20)

    def test_auth_role_ids(self):
        self.assertEqual(AddUserAuthRoleRequest(user_id=2, role_ids="2,3").role_id_list(), [2, 3])
        with self.assertRaises(ValidationError):
            AddUserAuthRoleRequest(user_id=2, role_ids="2,x").role_id_list()

    def test_list_response_folds_dept(self):
        item = UserListResponse.from_row({"user_id": 2, "dept_id": 105, "dept_name": "测试部门", "leader": "若依"})
        self.assertEqual(item.dept.dept_name, "测试部门")
        self.assertEqual(item.to_dict(by_alias=True)["dept"], {"deptId": 105, "deptName": "测试部门", "leader": "若依"})

    def test_detail_admin_flag(self):
        self.assertTrue(UserDetailResponse(user_id=1).admin)
        self.assertFalse(UserDetailResponse(user_id=2).admin)

    def test_auth_user_info(self):
        info = AuthUserInfoResponse(
            user_id=1,
            dept=DeptDetailResponse(dept_id=103, dept_name="研发部门"),
            roles=[RoleListResponse(role_id=1, role_key="admin")],
        )
        data = info.to_dict(by_alias=True)
        self.assertTrue(data["admin"])
        self.assertEqual(data["dept"]["deptName"], "研发部门")
        self.assertEqual(data["roles"][0]["roleKey"], "admin")

    def test_token_response_hides_password(self):
        data = UserTokenResponse(user_id=2, password="hash").to_dict()
        self.assertNotIn("password", data)

    def test_export_row(self):
        row = UserExportResponse(user_id=1, user_name="admin", sex="0", status="0", login_date="2024-01-01 00:00:00").to_row()
        self.assertEqual(row["用户性别"], "男")
        self.assertEqual(row["帐号状态"], "正常")
        self.assertEqual(list(row)[0], "用户序号")

    def test_datetime_kept_in_dict(self):
        when = datetime(2024, 1, 1, 8, 0, 0)
        self.assertEqual(UserDetailResponse(user_id=2, create_time=when).to_dict()["create_time"], when)
