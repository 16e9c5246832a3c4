# -*- coding: utf-8 -*-
from __future__ import annotations

from django.test import SimpleTestCase

from apps.common.constants import MENU_NO_FRAME, MENU_YES_FRAME
from apps.common.errors import (
    ERR_MENU_NAME_EMPTY,
    ERR_MENU_PARENT_SELF,
    ERR_MENU_PATH_EMPTY,
    ERR_MENU_PATH_HTTP_PREFIX,
    ERR_PARAM,
)
from apps.common.exceptions import MenuError, is_error
from apps.common.schemas import SelectTree
from apps.menus.schemas import CreateMenuRequest, MenuListResponse, MenuListTreeResponse, UpdateMenuRequest
from apps.menus.services import (
    build_router_menus,
    get_component,
    get_route_name,
    get_route_name_or_default,
    get_route_path,
    inner_link_replace_path,
    is_inner_link,
    is_menu_frame,
    is_parent_view,
    menu_select_to_tree,
    menus_to_tree,
)
from apps.menus.validators import validate_create_menu, validate_update_menu


class MenuValidatorTests(SimpleTestCase):
    """
    菜单校验：
    - 目录/菜单必须填写路由地址，按钮不需要
    - 外链（is_frame=0）地址必须以 http 开头
    """

    def test_create_valid(self):
        req = CreateMenuRequest(menu_name="用户管理", menu_type="C", path="user", parent_id=1)
        self.assertIsNone(validate_create_menu(req))

    def test_button_needs_no_path(self):
        self.assertIsNone(validate_create_menu(CreateMenuRequest(menu_name="用户新增", menu_type="F")))

    def test_name_first(self):
        self.assertIs(validate_create_menu(CreateMenuRequest(menu_type="M")), ERR_MENU_NAME_EMPTY)

    def test_path_required_for_directory_and_menu(self):
        for menu_type in ("M", "C"):
            with self.subTest(menu_type=menu_type):
                req = CreateMenuRequest(menu_name="系统管理", menu_type=menu_type, path="")
                self.assertIs(validate_create_menu(req), ERR_MENU_PATH_EMPTY)

    def test_external_link_needs_http(self):
        req = CreateMenuRequest(menu_name="官网", menu_type="M", path="ruoyi.vip", is_frame=MENU_YES_FRAME)
        err = validate_create_menu(req)
        self.assertTrue(is_error(err, ERR_MENU_PATH_HTTP_PREFIX))
        self.assertIn("官网", err.message)
        req.path = "http://ruoyi.vip"
        self.assertIsNone(validate_create_menu(req))

    def test_is_frame_from_string(self):
        req = CreateMenuRequest.from_dict({"menuName": "官网", "menuType": "M", "path": "x", "isFrame": "0"})
        self.assertEqual(req.is_frame, MENU_YES_FRAME)
        with self.assertRaises(MenuError):
            req.validate()

    def test_null_and_string_numbers_from_json(self):
        req = CreateMenuRequest.from_dict(
            {"menuName": "用户管理", "menuType": "C", "path": "user", "isFrame": None, "isCache": None, "parentId": None}
        )
        self.assertEqual((req.is_frame, req.is_cache, req.parent_id), (MENU_NO_FRAME, 0, 0))
        self.assertIsNone(req.check())
        self.assertEqual(CreateMenuRequest(is_frame=None, is_cache="1").is_cache, 1)
        update = {"menuName": "a", "menuType": "C", "path": "a", "parentId": "1"}
        self.assertIs(UpdateMenuRequest.from_dict({**update, "menuId": None}).check(), ERR_PARAM)
        self.assertIs(UpdateMenuRequest.from_dict({**update, "menuId": "1"}).check(), ERR_MENU_PARENT_SELF)
        self.assertIsNone(UpdateMenuRequest.from_dict({**update, "menuId": "5"}).check())

    def test_update_order(self):
        self.assertIs(validate_update_menu(UpdateMenuRequest(menu_id=0, parent_id=0)), ERR_PARAM)
        self.assertIs(validate_update_menu(UpdateMenuRequest(menu_id=5, parent_id=5)), ERR_MENU_PARENT_SELF)
        self.assertIs(validate_update_menu(UpdateMenuRequest(menu_id=5, parent_id=1)), ERR_MENU_NAME_EMPTY)
        self.assertIsNone(
            validate_update_menu(UpdateMenuRequest(menu_id=5, parent_id=1, menu_name="a", menu_type="C", path="a"))
        )


def _menu(**kwargs) -> MenuListTreeResponse:
    return MenuListTreeResponse(**kwargs)


class RouteHelperTests(SimpleTestCase):
    """路由名称/地址/组件推导"""

    def test_route_name(self):
        self.assertEqual(get_route_name_or_default("", "user"), "User")
        self.assertEqual(get_route_name_or_default("profile", "user"), "Profile")
        self.assertEqual(get_route_name_or_default("", ""), "")
        frame = _menu(parent_id=0, menu_type="C", is_frame=MENU_NO_FRAME, path="index")
        self.assertEqual(get_route_name(frame), "")

    def test_route_path(self):
        top_dir = _menu(parent_id=0, menu_type="M", path="system")
        self.assertEqual(get_route_path(top_dir), "/system")
        frame = _menu(parent_id=0, menu_type="C", path="index")
        self.assertEqual(get_route_path(frame), "/")
        child = _menu(parent_id=1, menu_type="C", path="user")
        self.assertEqual(get_route_path(child), "user")
        external = _menu(parent_id=1, menu_type="C", path="http://ruoyi.vip", is_frame=MENU_YES_FRAME)
        self.assertEqual(get_route_path(external), "ruoyi/vip")
        inner = _menu(parent_id=1, menu_type="C", path="http://ruoyi.vip")
        self.assertEqual(get_route_path(inner), "http://ruoyi.vip")

    def test_component(self):
        self.assertEqual(get_component(_menu(parent_id=0, menu_type="M")), "Layout")
        self.assertEqual(get_component(_menu(parent_id=1, menu_type="C", component="system/user/index")),
                         "system/user/index")
        self.assertEqual(get_component(_menu(parent_id=1, menu_type="C", path="https://a.com")), "InnerLink")
        self.assertEqual(get_component(_menu(parent_id=1, menu_type="M")), "ParentView")
        frame = _menu(parent_id=0, menu_type="C", component="index")
        self.assertEqual(get_component(frame), "Layout")

    def test_predicates(self):
        self.assertTrue(is_menu_frame(_menu(parent_id=0, menu_type="C")))
        self.assertFalse(is_menu_frame(_menu(parent_id=0, menu_type="C", is_frame=MENU_YES_FRAME)))
        self.assertTrue(is_inner_link(_menu(path="https://x.com")))
        self.assertFalse(is_inner_link(_menu(path="https://x.com", is_frame=MENU_YES_FRAME)))
        self.assertTrue(is_parent_view(_menu(parent_id=3, menu_type="M")))
        self.assertFalse(is_parent_view(_menu(parent_id=0, menu_type="M")))

    def test_inner_link_replace(self):
        self.assertEqual(inner_link_replace_path("https://www.example.com:8080"), "example/com/8080")
        self.assertEqual(inner_link_replace_path("http://ruoyi.vip"), "ruoyi/vip")


class MenuTreeTests(SimpleTestCase):
    """菜单树与路由表组装"""

    def setUp(self):
        self.menus = [
            MenuListResponse(menu_id=1, menu_name="系统管理", parent_id=0, path="system", menu_type="M",
                             icon="system"),
            MenuListResponse(menu_id=100, menu_name="用户管理", parent_id=1, path="user", menu_type="C",
                             component="system/user/index", is_cache=1),
            MenuListResponse(menu_id=1000, menu_name="用户新增", parent_id=100, menu_type="F"),
            MenuListResponse(menu_id=4, menu_name="若依官网", parent_id=0, path="http://ruoyi.vip",
                             menu_type="C", is_frame=MENU_NO_FRAME),
        ]

    def test_menus_to_tree(self):
        tree = menus_to_tree(self.menus)
        self.assertEqual([m.menu_id for m in tree], [1, 4])
        self.assertEqual(tree[0].children[0].children[0].menu_name, "用户新增")
        self.assertIsInstance(tree[0], MenuListTreeResponse)

    def test_menu_select_tree(self):
        tree = menu_select_to_tree([SelectTree(id=1, label="系统管理"), SelectTree(id=2, label="x", parent_id=1)])
        self.assertEqual(tree[0].children[0].id, 2)

    def test_router_directory(self):
        routers = build_router_menus(menus_to_tree(self.menus[:2]))
        system = routers[0]
        self.assertTrue(system.always_show)
        self.assertEqual(system.redirect, "noRedirect")
        self.assertEqual(system.path, "/system")
        self.assertEqual(system.name, "System")
        self.assertEqual(system.component, "Layout")
        user = system.children[0]
        self.assertEqual(user.path, "user")
        self.assertEqual(user.component, "system/user/index")
        self.assertTrue(user.meta.no_cache)

    def test_router_menu_frame(self):
        menu = MenuListResponse(menu_id=9, menu_name="首页", parent_id=0, path="index", menu_type="C",
                                component="index", query='{"a":1}')
        router = build_router_menus(menus_to_tree([menu]))[0]
        self.assertEqual((router.path, router.name, router.component), ("/", "", "Layout"))
        self.assertEqual(len(router.children), 1)
        self.assertEqual(router.children[0].name, "Index")
        self.assertEqual(router.children[0].component, "index")
        self.assertEqual(router.children[0].query, '{"a":1}')

    def test_router_inner_link(self):
        menu = MenuListResponse(menu_id=4, menu_name="若依官网", parent_id=0, path="http://ruoyi.vip",
                                menu_type="M", is_cache=1)
        router = build_router_menus(menus_to_tree([menu]))[0]
        self.assertEqual(router.path, "/")
        self.assertFalse(router.meta.no_cache)
        child = router.children[0]
        self.assertEqual(child.component, "InnerLink")
        self.assertEqual(child.path, "ruoyi/vip")
        self.assertEqual(child.meta.link, "http://ruoyi.vip")

    def test_router_hidden(self):
        menu = MenuListResponse(menu_id=2, menu_name="隐藏", parent_id=1, path="hide", menu_type="C", visible="1")
        router = build_router_menus(menus_to_tree([menu], 1))[0]
        self.assertTrue(router.hidden)
        self.assertEqual(router.to_dict(by_alias=True)["alwaysShow"], False)
