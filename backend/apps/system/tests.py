# -*- coding: utf-8 -*-
"""
系统管理单测：参数设置、字典、岗位的请求校验与 DTO 行为
"""
from __future__ import annotations

from django.test import SimpleTestCase

from apps.common.errors import (
    ERR_CONFIG_KEY_EMPTY,
    ERR_CONFIG_NAME_EMPTY,
    ERR_CONFIG_VALUE_EMPTY,
    ERR_DICT_LABEL_EMPTY,
    ERR_DICT_NAME_EMPTY,
    ERR_DICT_TYPE_EMPTY,
    ERR_DICT_VALUE_EMPTY,
    ERR_PARAM,
    ERR_POST_CODE_EMPTY,
    ERR_POST_NAME_EMPTY,
)
from apps.common.exceptions import PostError, is_error
from apps.system.schemas import (
    ConfigExportResponse,
    ConfigListRequest,
    CreateConfigRequest,
    CreateDictDataRequest,
    CreateDictTypeRequest,
    CreatePostRequest,
    DictDataDetailResponse,
    DictDataExportResponse,
    DictDataListResponse,
    UpdateConfigRequest,
    UpdateDictDataRequest,
    UpdateDictTypeRequest,
    UpdatePostRequest,
)
from apps.system.validators import (
    validate_create_config,
    validate_create_dict_data,
    validate_create_dict_type,
    validate_create_post,
    validate_update_config,
    validate_update_dict_data,
    validate_update_dict_type,
    validate_update_post,
)


class ConfigValidatorTests(SimpleTestCase):
    """参数设置：名称 -> 键名 -> 键值；修改先检查主键"""

    def test_create(self):
        ok = CreateConfigRequest(config_name="主框架页-默认皮肤", config_key="sys.index.skinName", config_value="skin-blue")
        self.assertIsNone(validate_create_config(ok))
        self.assertIs(validate_create_config(CreateConfigRequest()), ERR_CONFIG_NAME_EMPTY)
        self.assertIs(validate_create_config(CreateConfigRequest(config_name="a")), ERR_CONFIG_KEY_EMPTY)
        self.assertIs(
            validate_create_config(CreateConfigRequest(config_name="a", config_key="b")),
            ERR_CONFIG_VALUE_EMPTY,
        )

    def test_update_id_first(self):
        self.assertIs(validate_update_config(UpdateConfigRequest()), ERR_PARAM)
        self.assertIs(validate_update_config(UpdateConfigRequest(config_id=1)), ERR_CONFIG_NAME_EMPTY)
        self.assertIsNone(
            validate_update_config(UpdateConfigRequest(config_id=1, config_name="a", config_key="b", config_value="c"))
        )

    def test_list_request_aliases(self):
        req = ConfigListRequest.from_dict({"configKey": "sys", "params[beginTime]": "2024-01-01"})
        self.assertEqual((req.config_key, req.begin_time), ("sys", "2024-01-01"))

    def test_export_row(self):
        row = ConfigExportResponse(config_id=1, config_type="Y").to_row()
        self.assertEqual(row["系统内置"], "是")


class DictValidatorTests(SimpleTestCase):
    """字典类型：名称 -> 类型；字典数据：标签 -> 键值"""

    def test_dict_type(self):
        self.assertIsNone(validate_create_dict_type(CreateDictTypeRequest(dict_name="用户性别", dict_type="sys_user_sex")))
        self.assertIs(validate_create_dict_type(CreateDictTypeRequest()), ERR_DICT_NAME_EMPTY)
        self.assertIs(validate_create_dict_type(CreateDictTypeRequest(dict_name="a")), ERR_DICT_TYPE_EMPTY)
        self.assertIs(validate_update_dict_type(UpdateDictTypeRequest(dict_name="a", dict_type="b")), ERR_PARAM)
        self.assertIsNone(validate_update_dict_type(UpdateDictTypeRequest(dict_id=1, dict_name="a", dict_type="b")))

    def test_dict_data(self):
        self.assertIsNone(validate_create_dict_data(CreateDictDataRequest(dict_label="男", dict_value="0")))
        self.assertIs(validate_create_dict_data(CreateDictDataRequest(dict_value="0")), ERR_DICT_LABEL_EMPTY)
        self.assertIs(validate_create_dict_data(CreateDictDataRequest(dict_label="男")), ERR_DICT_VALUE_EMPTY)
        self.assertIs(validate_update_dict_data(UpdateDictDataRequest(dict_label="男", dict_value="0")), ERR_PARAM)
        self.assertIsNone(
            validate_update_dict_data(UpdateDictDataRequest(dict_code=1, dict_label="男", dict_value="0"))
        )

    def test_default_flag(self):
        self.assertTrue(DictDataListResponse(is_default="Y").default)
        self.assertFalse(DictDataListResponse(is_default="N").default)
        self.assertTrue(DictDataDetailResponse.from_dict({"isDefault": "Y"}).default)

    def test_dict_data_export(self):
        row = DictDataExportResponse(dict_code=1, is_default="N", status="0").to_row()
        self.assertEqual((row["是否默认"], row["状态"]), ("否", "正常"))


class PostValidatorTests(SimpleTestCase):
    """岗位：编码 -> 名称"""

    def test_create(self):
        self.assertIsNone(validate_create_post(CreatePostRequest(post_code="ceo", post_name="董事长")))
        self.assertIs(validate_create_post(CreatePostRequest(post_name="董事长")), ERR_POST_CODE_EMPTY)
        self.assertIs(validate_create_post(CreatePostRequest(post_code="ceo")), ERR_POST_NAME_EMPTY)

    def test_update(self):
        self.assertIs(validate_update_post(UpdatePostRequest(post_code="", post_name="")), ERR_PARAM)
        self.assertIs(validate_update_post(UpdatePostRequest(post_id=1, post_name="x")), ERR_POST_CODE_EMPTY)
        self.assertIsNone(validate_update_post(UpdatePostRequest(post_id=1, post_code="ceo", post_name="x")))

    def test_schema_validate(self):
        with self.assertRaises(PostError) as ctx:
            CreatePostRequest.from_dict({"postCode": "se"}).validate()
        self.assertTrue(is_error(ctx.exception, ERR_POST_NAME_EMPTY))
