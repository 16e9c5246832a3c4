"""
菜单树与前端路由组装（apps.menus.services）

职责：
- 菜单列表 -> 菜单树（菜单管理页面）、菜单选择树（角色分配菜单）
- 菜单树 -> 前端路由表（侧边栏）：目录、内嵌菜单、内链三种形态
- 路由名称/路由地址/组件名的推导规则

输入均为已查询、已按 parent_id/order_num 排序的列表，不访问数据库
"""

from __future__ import annotations

from dataclasses import fields
from typing import Iterable, List

from apps.common.constants import (
    INNER_LINK_COMPONENT,
    LAYOUT_COMPONENT,
    MENU_NO_FRAME,
    MENU_TYPE_DIRECTORY,
    MENU_TYPE_MENU,
    NO_REDIRECT,
    PARENT_VIEW_COMPONENT,
)
from apps.common.infra.logger import get_logger
from apps.common.schemas import SelectTree
from apps.common.utils.tree import build_tree
from apps.menus.schemas import (
    MenuListResponse,
    MenuListTreeResponse,
    MenuMetaResponse,
    MenuMetaTreeResponse,
)

logger = get_logger(__name__)

# 隐藏菜单的 visible 取值
HIDDEN_VISIBLE = "1"


# ======================
# 树组装
# ======================

def menus_to_tree(menus: Iterable[MenuListResponse], parent_id: int = 0) -> List[MenuListTreeResponse]:
    """菜单列表 -> 菜单树"""
    return build_tree(
        menus,
        parent_id,
        id_of=lambda m: m.menu_id,
        parent_of=lambda m: m.parent_id,
        make=lambda m, children: MenuListTreeResponse(
            **{f.name: getattr(m, f.name) for f in fields(MenuListResponse)},
            children=children,
        ),
    )


def menu_select_to_tree(menus: Iterable[SelectTree], parent_id: int = 0) -> List[SelectTree]:
    """菜单下拉列表 -> 选择树"""
    return build_tree(
        menus,
        parent_id,
        id_of=lambda m: m.id,
        parent_of=lambda m: m.parent_id,
        make=lambda m, children: SelectTree(id=m.id, label=m.label, parent_id=m.parent_id, children=children),
    )


# ======================
# 路由组装
# ======================

def _meta(menu: MenuListResponse, *, link: str = "", with_cache: bool = True) -> MenuMetaResponse:
    return MenuMetaResponse(
        title=menu.menu_name,
        icon=menu.icon,
        link=link,
        no_cache=with_cache and menu.is_cache == 1,
    )


def build_router_menus(menus: Iterable[MenuListTreeResponse]) -> List[MenuMetaTreeResponse]:
    """
    菜单树 -> 前端路由表

    - 有子节点的目录：alwaysShow + noRedirect，递归组装子路由
    - 一级内嵌菜单（is_menu_frame）：外层 Layout，真实页面作为唯一子路由
    - 一级内链：外层路径为 "/"，子路由使用 InnerLink 组件并在 meta.link 中携带原地址
    """
    routers: List[MenuMetaTreeResponse] = []
    for menu in menus:
        router = MenuMetaTreeResponse(
            name=get_route_name(menu),
            path=get_route_path(menu),
            component=get_component(menu),
            hidden=menu.visible == HIDDEN_VISIBLE,
            meta=_meta(menu),
        )
        if menu.children and menu.menu_type == MENU_TYPE_DIRECTORY:
            router.always_show = True
            router.redirect = NO_REDIRECT
            router.children = build_router_menus(menu.children)
        elif is_menu_frame(menu):
            router.children.append(
                MenuMetaTreeResponse(
                    name=get_route_name_or_default(menu.route_name, menu.path),
                    path=menu.path,
                    component=menu.component,
                    meta=_meta(menu),
                    query=menu.query,
                )
            )
        elif menu.parent_id == 0 and is_inner_link(menu):
            router.meta = _meta(menu, with_cache=False)
            router.path = "/"
            router.children.append(
                MenuMetaTreeResponse(
                    name=get_route_name_or_default(menu.route_name, menu.path),
                    path=inner_link_replace_path(menu.path),
                    component=INNER_LINK_COMPONENT,
                    meta=_meta(menu, link=menu.path, with_cache=False),
                )
            )
        routers.append(router)
    return routers


def get_route_name(menu: MenuListResponse) -> str:
    """内嵌菜单的外层路由不设置名称"""
    if is_menu_frame(menu):
        return ""
    return get_route_name_or_default(menu.route_name, menu.path)


def get_route_name_or_default(name: str, path: str) -> str:
    """未配置路由名称时取路由地址，首字母大写"""
    name = name or path
    if not name:
        logger.warning("菜单缺少路由名称与路由地址，无法生成路由名称")
        return ""
    return name[0].upper() + name[1:]


def get_route_path(menu: MenuListResponse) -> str:
    route_path = menu.path
    # 非一级菜单：地址中的 . 和 : 统一改写为 /
    if menu.parent_id != 0 and not is_inner_link(menu):
        route_path = inner_link_replace_path(route_path)
    if menu.parent_id == 0 and menu.menu_type == MENU_TYPE_DIRECTORY and menu.is_frame == MENU_NO_FRAME:
        route_path = "/" + route_path
    elif is_menu_frame(menu):
        route_path = "/"
    return route_path


def get_component(menu: MenuListResponse) -> str:
    if menu.component and not is_menu_frame(menu):
        return menu.component
    if not menu.component and menu.parent_id != 0 and is_inner_link(menu):
        return INNER_LINK_COMPONENT
    if not menu.component and is_parent_view(menu):
        return PARENT_VIEW_COMPONENT
    return LAYOUT_COMPONENT


def is_menu_frame(menu: MenuListResponse) -> bool:
    """一级菜单（类型 C）且非外链：页面内嵌在 Layout 中"""
    return menu.parent_id == 0 and menu.menu_type == MENU_TYPE_MENU and menu.is_frame == MENU_NO_FRAME


def is_inner_link(menu: MenuListResponse) -> bool:
    """非外链打开但地址是 http(s) 链接：在系统内以 iframe 展示"""
    return menu.is_frame == MENU_NO_FRAME and (menu.path or "").startswith("http")


def is_parent_view(menu: MenuListResponse) -> bool:
    """非一级目录：使用 ParentView 承载子路由"""
    return menu.parent_id != 0 and menu.menu_type == MENU_TYPE_DIRECTORY


def inner_link_replace_path(path: str) -> str:
    """
    内链地址 -> 路由路径
    例：https://www.example.com:8080 -> example/com/8080
    """
    for prefix in ("http://", "https://", "www."):
        path = path.replace(prefix, "")
    return path.replace(".", "/").replace(":", "/")
