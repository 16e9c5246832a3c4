"""
错误哨兵目录（apps.common.errors）

每个常量对应一个确定的失败原因，校验函数直接返回这些实例：
- 调用方用 `err is ERR_XXX` 或 `is_error(err, ERR_XXX)` 区分失败种类
- 提示语仅供展示，不参与匹配
- 需要动态提示语时使用 ERR_XXX.wrap("...")，身份匹配不受影响
"""

from __future__ import annotations

from apps.common.exceptions import (
    AuthError,
    CaptchaValidationError,
    ConfigError,
    DeptError,
    DictError,
    InternalError,
    MenuError,
    NotImplementedBizError,
    PostError,
    RoleError,
    UploadError,
    UserError,
    ValidationError,
)

# ======================
# 文件上传
# ======================
ERR_UNSUPPORTED_FILE_TYPE = UploadError("不支持的文件类型", code=41701)
ERR_UPLOAD_DOMAIN_NOT_FOUND = UploadError("未配置访问域名，无法生成文件访问地址", code=41702)
ERR_UPLOAD_FILE_INCOMPLETE = UploadError("上传文件数据不完整，无法保存", code=41703)
ERR_UPLOAD_FILE_MISSING_SUFFIX = UploadError("文件缺少后缀名", code=41704)
ERR_UPLOAD_FILE_SIZE_EXCEEDS_LIMIT = UploadError("文件大小超出限制", code=41705)
ERR_UPLOAD_INVALID_FILE_FORMAT = UploadError("文件格式不正确", code=41706)

# ======================
# 验证码
# ======================
ERR_MISMATCHED_PASSWORD = CaptchaValidationError("用户名或密码错误", code=40105)
ERR_CAPTCHA = CaptchaValidationError("验证码错误", code=40106)

# ======================
# 通用
# ======================
ERR_PARAM = ValidationError("参数错误", code=40003)

# ======================
# 认证（登录 / 注册）
# ======================
ERR_USERNAME_EMPTY = AuthError("用户名不能为空", code=40110)
ERR_PASSWORD_EMPTY = AuthError("密码不能为空", code=40111)
ERR_PASSWORDS_NOT_MATCH = AuthError("两次输入的密码不一致", code=40112)
ERR_USERNAME_LENGTH = AuthError("账户长度必须在2到20个字符之间", code=40113)
ERR_PASSWORD_LENGTH = AuthError("密码长度必须在5到20个字符之间", code=40114)

# ======================
# 参数配置
# ======================
ERR_CONFIG_NAME_EMPTY = ConfigError("请输入参数名称", code=41001)
ERR_CONFIG_KEY_EMPTY = ConfigError("请输入参数键名", code=41002)
ERR_CONFIG_VALUE_EMPTY = ConfigError("请输入参数键值", code=41003)

# ======================
# 部门
# ======================
ERR_PARENT_DEPT_EMPTY = DeptError("请选择上级部门", code=41101)
ERR_DEPT_NAME_EMPTY = DeptError("请输入部门名称", code=41102)
ERR_DEPT_PARENT_SELF = DeptError("上级部门不能是自己", code=41103)

# ======================
# 字典
# ======================
ERR_DICT_NAME_EMPTY = DictError("请输入字典名称", code=41201)
ERR_DICT_TYPE_EMPTY = DictError("请输入字典类型", code=41202)
ERR_DICT_LABEL_EMPTY = DictError("请输入数据标签", code=41203)
ERR_DICT_VALUE_EMPTY = DictError("请输入数据键值", code=41204)

# ======================
# 菜单
# ======================
ERR_MENU_NAME_EMPTY = MenuError("请输入菜单名称", code=41301)
ERR_MENU_PATH_EMPTY = MenuError("请输入路由地址", code=41302)
ERR_MENU_PATH_HTTP_PREFIX = MenuError("地址必须以http(s)://开头", code=41303)
ERR_MENU_PARENT_SELF = MenuError("上级菜单不能选择自己", code=41304)

# ======================
# 岗位
# ======================
ERR_POST_CODE_EMPTY = PostError("请输入岗位编码", code=41401)
ERR_POST_NAME_EMPTY = PostError("请输入岗位名称", code=41402)

# ======================
# 角色
# ======================
ERR_ROLE_NAME_EMPTY = RoleError("请输入角色名称", code=41501)
ERR_ROLE_KEY_EMPTY = RoleError("请输入权限字符", code=41502)
ERR_ROLE_SUPER_ADMIN_DELETE = RoleError("超级管理员角色不能删除", code=41503)
ERR_ROLE_IN_USE_DELETE = RoleError("角色已分配，不能删除", code=41504)
ERR_ROLE_STATUS_EMPTY = RoleError("请选择状态", code=41505)

# ======================
# 用户
# ======================
ERR_USER_NICKNAME_EMPTY = UserError("请输入用户昵称", code=41601)
ERR_USER_EMAIL_FORMAT = UserError("邮箱格式不正确", code=41602)
ERR_USER_PHONE_FORMAT = UserError("手机号码格式不正确", code=41603)
ERR_USER_OLD_PASSWORD_EMPTY = UserError("请输入旧密码", code=41604)
ERR_USER_NEW_PASSWORD_EMPTY = UserError("请输入新密码", code=41605)
ERR_USER_NAME_EMPTY = UserError("请输入用户名称", code=41606)
ERR_USER_PASSWORD_EMPTY = UserError("请输入用户密码", code=41607)
ERR_USER_SUPER_ADMIN_DELETE = UserError("超级管理员不能删除", code=41608)
ERR_USER_CURRENT_USER_DELETE = UserError("当前用户不能删除", code=41609)
ERR_USER_STATUS_EMPTY = UserError("请选择状态", code=41610)

# ======================
# 通用系统错误
# ======================
ERR_NOT_IMPLEMENTED = NotImplementedBizError("功能尚未实现", code=40010)
ERR_INTERNAL = InternalError("服务器内部错误", code=50000)


#: 按领域分组的目录，便于文档展示与一致性检查
CATALOG: dict[str, tuple] = {
    "upload": (
        ERR_UNSUPPORTED_FILE_TYPE,
        ERR_UPLOAD_DOMAIN_NOT_FOUND,
        ERR_UPLOAD_FILE_INCOMPLETE,
        ERR_UPLOAD_FILE_MISSING_SUFFIX,
        ERR_UPLOAD_FILE_SIZE_EXCEEDS_LIMIT,
        ERR_UPLOAD_INVALID_FILE_FORMAT,
    ),
    "captcha": (ERR_MISMATCHED_PASSWORD, ERR_CAPTCHA),
    "common": (ERR_PARAM,),
    "auth": (
        ERR_USERNAME_EMPTY,
        ERR_PASSWORD_EMPTY,
        ERR_PASSWORDS_NOT_MATCH,
        ERR_USERNAME_LENGTH,
        ERR_PASSWORD_LENGTH,
    ),
    "config": (ERR_CONFIG_NAME_EMPTY, ERR_CONFIG_KEY_EMPTY, ERR_CONFIG_VALUE_EMPTY),
    "dept": (ERR_PARENT_DEPT_EMPTY, ERR_DEPT_NAME_EMPTY, ERR_DEPT_PARENT_SELF),
    "dict": (ERR_DICT_NAME_EMPTY, ERR_DICT_TYPE_EMPTY, ERR_DICT_LABEL_EMPTY, ERR_DICT_VALUE_EMPTY),
    "menu": (ERR_MENU_NAME_EMPTY, ERR_MENU_PATH_EMPTY, ERR_MENU_PATH_HTTP_PREFIX, ERR_MENU_PARENT_SELF),
    "post": (ERR_POST_CODE_EMPTY, ERR_POST_NAME_EMPTY),
    "role": (
        ERR_ROLE_NAME_EMPTY,
        ERR_ROLE_KEY_EMPTY,
        ERR_ROLE_SUPER_ADMIN_DELETE,
        ERR_ROLE_IN_USE_DELETE,
        ERR_ROLE_STATUS_EMPTY,
    ),
    "user": (
        ERR_USER_NICKNAME_EMPTY,
        ERR_USER_EMAIL_FORMAT,
        ERR_USER_PHONE_FORMAT,
        ERR_USER_OLD_PASSWORD_EMPTY,
        ERR_USER_NEW_PASSWORD_EMPTY,
        ERR_USER_NAME_EMPTY,
        ERR_USER_PASSWORD_EMPTY,
        ERR_USER_SUPER_ADMIN_DELETE,
        ERR_USER_CURRENT_USER_DELETE,
        ERR_USER_STATUS_EMPTY,
    ),
    "general": (ERR_NOT_IMPLEMENTED, ERR_INTERNAL),
}
