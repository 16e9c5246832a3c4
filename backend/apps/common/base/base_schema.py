# apps/common/base/base_schema.py

from __future__ import annotations

import re
from abc import ABC
from dataclasses import Field, asdict, dataclass, fields
from typing import Any, Callable, ClassVar, Dict, Iterable, Mapping, Optional, TypeVar

from apps.common.exceptions import BizError, raise_if
from apps.common.infra.logger import get_logger
from apps.common.utils.helpers import safe_int

logger = get_logger(__name__)

SchemaType = TypeVar("SchemaType", bound="BaseSchema")

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def camel_to_snake(name: str) -> str:
    """deptId -> dept_id；已是 snake_case 的保持不变"""
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def snake_to_camel(name: str) -> str:
    """dept_id -> deptId"""
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def coerce_field(field: Field, value: Any) -> Any:
    """
    按声明类型规整外部输入：
    - int 字段：数字串转 int，null 或无法转换时取字段默认值（默认值非 int 时取 0）
    - str 字段：null 视为空串，数字转为字符串
    """
    if field.type in ("int", int):
        default = field.default if isinstance(field.default, int) else 0
        return safe_int(value, default)
    if field.type in ("str", str):
        if value is None:
            return ""
        if isinstance(value, (int, float)):
            return str(value)
    return value


@dataclass
class BaseSchema(ABC):
    """
    DTO 基类

    目的：
        - 描述接口请求体 / 响应体的结构，纯数据，不访问数据库；
        - 兼容前端 camelCase 字段名（deptId）与内部 snake_case 字段名（dept_id）；
        - 提供通用的字典化与 Model/行数据映射能力

    子类示例：
        @dataclass
        class CreatePostRequest(RequestSchema):
            post_code: str = ""
            post_name: str = ""

            validator = staticmethod(validate_create_post)
    """

    #: 字段别名映射：外部字段名 -> 内部字段名（不符合 camelCase 规则的特殊字段）
    ALIASES: ClassVar[dict[str, str]] = {}

    # ------------------------
    # 校验钩子
    # ------------------------

    def validate(self) -> None:
        """
        响应类 DTO 无需校验；请求类 DTO 由 RequestSchema 覆盖
        """

    # ------------------------
    # 数据转换
    # ------------------------

    def to_dict(
            self,
            *,
            exclude_none: bool = False,
            exclude: Iterable[str] | None = None,
            by_alias: bool = False,
    ) -> Dict[str, Any]:
        """
        将 Schema 转为 dict，支持过滤 None、移除指定字段、输出 camelCase 键名
        """
        data = asdict(self)
        if exclude_none:
            data = {key: value for key, value in data.items() if value is not None}
        if exclude:
            for key in exclude:
                data.pop(key, None)
        if by_alias:
            data = _camelize(data)
        return data

    # ------------------------
    # 构建方法
    # ------------------------

    @classmethod
    def from_dict(
            cls: type[SchemaType],
            data: Mapping[str, Any],
            *,
            auto_validate: bool = False,
    ) -> SchemaType:
        """
        将外部 payload 转为 Schema：
        - 先套用 ALIASES，再把 camelCase 键转换为 snake_case
        - 未声明的字段直接忽略（前端经常携带额外字段）
        - int / str 字段按声明类型规整（见 coerce_field）
        """
        known = {f.name: f for f in fields(cls)}
        normalized: Dict[str, Any] = {}
        for key, value in dict(data).items():
            target = cls.ALIASES.get(key) or camel_to_snake(key)
            if target in known and target not in normalized:
                normalized[target] = coerce_field(known[target], value)
        instance = cls(**normalized)  # type: ignore[arg-type]
        if auto_validate:
            instance.validate()
        return instance

    @classmethod
    def from_model(
            cls: type[SchemaType],
            model: Any,
            *,
            field_map: Mapping[str, str] | None = None,
            extra: Dict[str, Any] | None = None,
    ) -> SchemaType:
        """
        将 Model 实例（或任意带属性的对象）转换为 Schema，可通过 field_map 指定属性映射
        """
        payload: Dict[str, Any] = {}
        attr_map = field_map or {}
        for field in fields(cls):
            target_attr = attr_map.get(field.name, field.name)
            if hasattr(model, target_attr):
                payload[field.name] = getattr(model, target_attr)
        if extra:
            payload.update(extra)
        return cls(**payload)


def _camelize(value: Any) -> Any:
    """递归把字典键转换为 camelCase，兼容嵌套 DTO / 列表"""
    if isinstance(value, dict):
        return {snake_to_camel(k) if isinstance(k, str) else k: _camelize(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_camelize(item) for item in value]
    return value


@dataclass
class RequestSchema(BaseSchema):
    """
    请求 DTO 基类：绑定一个纯函数校验器

    - check()：返回第一个不满足的规则对应的错误哨兵，全部通过返回 None
    - validate()：check() 有结果时抛出其包装副本
    """

    #: 子类绑定的校验函数：(schema) -> Optional[BizError]
    validator: ClassVar[Optional[Callable[[Any], Optional[BizError]]]] = None

    def check(self) -> Optional[BizError]:
        if self.validator is None:
            return None
        return self.validator(self)

    def validate(self) -> None:
        error = self.check()
        if error is not None:
            logger.debug(f"{self.__class__.__name__} 校验未通过: {error}")
        raise_if(error)


@dataclass
class ExportSchema(BaseSchema):
    """
    导出行 DTO 基类：
    - HEADERS：字段 -> 列标题
    - REPLACE：字段 -> {原值: 展示文本}
    """

    HEADERS: ClassVar[dict[str, str]] = {}
    REPLACE: ClassVar[dict[str, Mapping[Any, str]]] = {}

    def to_row(self) -> Dict[str, Any]:
        """按 HEADERS 顺序输出 {列标题: 展示值}"""
        data = asdict(self)
        row: Dict[str, Any] = {}
        for name, title in self.HEADERS.items():
            value = data.get(name)
            mapping = self.REPLACE.get(name)
            if mapping is not None:
                value = mapping.get(value, value)
            row[title] = value
        return row

    @classmethod
    def from_row(cls: type[SchemaType], row: Mapping[str, Any]) -> SchemaType:
        """to_row 的逆过程：按列标题取值并把展示文本还原为原值（导入场景）"""
        known = {f.name: f for f in fields(cls)}
        payload: Dict[str, Any] = {}
        for name, title in cls.HEADERS.items():
            if name not in known or title not in row:
                continue
            value = row[title]
            mapping = cls.REPLACE.get(name)
            if mapping is not None:
                reverse = {text: raw for raw, text in mapping.items()}
                value = reverse.get(value, value)
            payload[name] = coerce_field(known[name], value)
        return cls(**payload)
