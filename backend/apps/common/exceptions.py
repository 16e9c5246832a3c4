"""
业务异常体系（BizError）

约定与作用：
- 所有“预期内的业务错误”都继承 BizError，避免直接抛框架异常
- 统一错误码/HTTP 状态/提示语，便于前后端对齐
- 具体失败原因以“哨兵实例”形式登记在 apps.common.errors 中，调用方按身份（is）比较
- 系统级错误（代码 bug、数据库故障等）由上层按 500 处理

错误码规范：
- 0                : 成功（只出现在正常响应里）
- 40000~40099      : 通用请求 / 参数错误（Validation、BadRequest）
- 40100~40199      : 认证错误（登录、注册、验证码）
- 40300~40399      : 权限错误
- 41000~41099      : 参数配置（系统参数）
- 41100~41199      : 部门
- 41200~41299      : 字典
- 41300~41399      : 菜单
- 41400~41499      : 岗位
- 41500~41599      : 角色
- 41600~41699      : 用户
- 41700~41799      : 文件上传
- 50000~50099      : 系统内部错误

使用方式：
- 校验函数返回哨兵（或 None）；业务层用 raise_if 抛出包装后的副本
- 包装（wrap）后的异常仍可通过 is_error 与原哨兵匹配
"""

from __future__ import annotations

from typing import Optional


class BizError(Exception):
    """
    所有业务异常的基类

    设计要点：
    - 不耦合 DRF / Response，只是纯数据和语义；
    - 子类只需覆盖 default_code / default_message / http_status；
    - 也可以在 __init__ 时传入自定义 message / code / extra 做覆盖；
    - sentinel 指向被包装的原始哨兵，保证包装后仍能按身份匹配
    """

    #: 子类可覆盖的默认错误码
    default_code: int = 40000

    #: 子类可覆盖的默认提示信息
    default_message: str = "业务错误"

    #: 子类可覆盖的建议 HTTP 状态码（交给异常处理器用）
    http_status: int = 400

    def __init__(self, message: str | None = None, code: int | None = None, *, extra: dict | None = None):
        self.code = code if code is not None else self.default_code
        self.message = message if message is not None else self.default_message
        self.extra = extra or {}
        self.sentinel: Optional[BizError] = None
        super().__init__(self.message)

    def __str__(self) -> str:  # 方便日志输出
        return f"[{self.code}] {self.message}"

    def wrap(self, message: str | None = None, **extra) -> "BizError":
        """
        基于当前错误构造一个新的同类错误：
        - 可替换提示语、追加 extra
        - 新错误的 sentinel 指向最初的哨兵，__cause__ 指向当前错误
        """
        wrapped = self.__class__(
            message if message is not None else self.message,
            code=self.code,
            extra={**self.extra, **extra},
        )
        wrapped.sentinel = self.origin
        wrapped.__cause__ = self
        return wrapped

    @property
    def origin(self) -> "BizError":
        """返回最初的哨兵；未被包装时即自身"""
        return self.sentinel if self.sentinel is not None else self


# ======================
# 通用类错误
# ======================

class ValidationError(BizError):
    """
    参数校验 / 请求数据不合法：
    - 缺少必要字段
    - 字段格式错误
    """
    default_code = 40002
    default_message = "请求参数不合法"
    http_status = 400


class NotImplementedBizError(BizError):
    """功能尚未实现"""
    default_code = 40010
    default_message = "功能尚未实现"
    http_status = 501


# ======================
# 认证 / 授权相关
# ======================

class AuthError(BizError):
    """
    认证相关错误（登录、注册等）：
    - 统一归类为 401xx
    """
    default_code = 40100
    default_message = "认证失败"
    http_status = 401


class CaptchaValidationError(AuthError):
    """
    登录/注册的图形验证码或口令比对错误
    """
    default_code = 40104
    default_message = "验证码错误，请刷新后重试"
    http_status = 400


class PermissionDeniedError(BizError):
    """
    权限不足：
    - 缺少接口要求的权限标识或角色
    """
    default_code = 40300
    default_message = "无权限进行该操作"
    http_status = 403


# ======================
# 系统管理领域错误
# ======================

class ConfigError(ValidationError):
    """参数配置相关错误基类"""
    default_code = 41000
    default_message = "参数配置相关错误"


class DeptError(ValidationError):
    """部门相关错误基类"""
    default_code = 41100
    default_message = "部门相关错误"


class DictError(ValidationError):
    """字典相关错误基类"""
    default_code = 41200
    default_message = "字典相关错误"


class MenuError(ValidationError):
    """菜单相关错误基类"""
    default_code = 41300
    default_message = "菜单相关错误"


class PostError(ValidationError):
    """岗位相关错误基类"""
    default_code = 41400
    default_message = "岗位相关错误"


class RoleError(ValidationError):
    """角色相关错误基类"""
    default_code = 41500
    default_message = "角色相关错误"


class UserError(ValidationError):
    """用户相关错误基类"""
    default_code = 41600
    default_message = "用户相关错误"


class UploadError(ValidationError):
    """文件上传相关错误基类"""
    default_code = 41700
    default_message = "文件上传相关错误"


# ======================
# 系统内部错误
# ======================

class InternalError(BizError):
    """
    系统内部错误：
    - 非预期状态，提示语不暴露内部细节
    """
    default_code = 50000
    default_message = "服务器内部错误"
    http_status = 500


# ======================
# 工具函数
# ======================

def is_error(error: BaseException | None, target: BizError) -> bool:
    """
    判断 error 是否为（或包装自）哨兵 target：
    - 沿 sentinel 与 __cause__ 链逐级比较身份
    - 不比较提示语文本
    """
    seen: set[int] = set()
    current = error
    while current is not None and id(current) not in seen:
        if current is target:
            return True
        seen.add(id(current))
        if isinstance(current, BizError) and current.sentinel is target:
            return True
        current = current.__cause__
    return False


def raise_if(error: BizError | None) -> None:
    """
    校验结果桥接：有错误则抛出其包装副本，保持哨兵本身不被修改

    用法：
        raise_if(validate_create_dept(payload))
    """
    if error is not None:
        raise error.wrap()


def require(condition: bool, error: BizError) -> None:
    """
    小工具：用于在业务代码中快速断言业务条件

    用法：
        require(user_ids, ERR_PARAM)
    """
    if not condition:
        raise error.wrap()
