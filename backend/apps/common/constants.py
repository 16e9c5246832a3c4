"""
全局常量：状态位、菜单类型、前端组件名、操作日志业务类型等
"""

from __future__ import annotations

from enum import IntEnum

# 正常 / 异常状态（用户、角色、菜单、日志等共用）
NORMAL_STATUS = "0"
EXCEPTION_STATUS = "1"

# 是否系统默认
IS_DEFAULT_YES = "Y"
IS_DEFAULT_NO = "N"

# 菜单是否外链：0 是，1 否
MENU_YES_FRAME = 0
MENU_NO_FRAME = 1

# 菜单类型：M 目录，C 菜单，F 按钮
MENU_TYPE_DIRECTORY = "M"
MENU_TYPE_MENU = "C"
MENU_TYPE_BUTTON = "F"

# 前端组件标识
LAYOUT_COMPONENT = "Layout"
PARENT_VIEW_COMPONENT = "ParentView"
INNER_LINK_COMPONENT = "InnerLink"

# 目录带子菜单时的重定向占位
NO_REDIRECT = "noRedirect"

# 所有权限标识 / 超级管理员角色标识
ALL_PERMISSION = "*:*:*"
SUPER_ADMIN_ROLE_KEY = "admin"


class BusinessType(IntEnum):
    """操作日志业务类型"""

    OTHER = 0
    INSERT = 1
    UPDATE = 2
    DELETE = 3
    GRANT = 4
    EXPORT = 5
    IMPORT = 6
    FORCE = 7
    GENCODE = 8
    CLEAN = 9

    @property
    def label(self) -> str:
        return BUSINESS_TYPE_LABELS[self]


BUSINESS_TYPE_LABELS: dict[BusinessType, str] = {
    BusinessType.OTHER: "其他",
    BusinessType.INSERT: "新增",
    BusinessType.UPDATE: "修改",
    BusinessType.DELETE: "删除",
    BusinessType.GRANT: "授权",
    BusinessType.EXPORT: "导出",
    BusinessType.IMPORT: "导入",
    BusinessType.FORCE: "强退",
    BusinessType.GENCODE: "生成代码",
    BusinessType.CLEAN: "清空数据",
}

# 角色数据范围
DATA_SCOPE_LABELS: dict[str, str] = {
    "1": "全部数据权限",
    "2": "自定数据权限",
    "3": "本部门数据权限",
    "4": "本部门及以下数据权限",
    "5": "仅本人数据权限",
}

# 导出时使用的枚举替换（取值 -> 展示文本）
STATUS_LABELS: dict[str, str] = {NORMAL_STATUS: "正常", EXCEPTION_STATUS: "停用"}
SEX_LABELS: dict[str, str] = {"0": "男", "1": "女", "2": "未知"}
YES_NO_LABELS: dict[str, str] = {IS_DEFAULT_YES: "是", IS_DEFAULT_NO: "否"}
LOGIN_STATUS_LABELS: dict[str, str] = {NORMAL_STATUS: "成功", EXCEPTION_STATUS: "失败"}
OPER_STATUS_LABELS: dict[int, str] = {0: "正常", 1: "异常"}
