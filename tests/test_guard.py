"""Tests for RouteAccessGuard."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from menuaccess.menu import DEFAULT_MENU_TREE, GroupNode, MenuTree, PageNode, RouteAccessGuard
from menuaccess.permissions import Grade, Permissions, Role, resolve
from menuaccess.policy import UserMenuPolicy

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def _policy(**kwargs) -> UserMenuPolicy:
    return UserMenuPolicy(user_id="user-test", **kwargs)


@pytest.fixture
def guard() -> RouteAccessGuard:
    return RouteAccessGuard(DEFAULT_MENU_TREE)


@pytest.fixture
def admin_permissions() -> frozenset[str]:
    return resolve(Role.ORG_ADMIN, Grade.EXECUTIVE)


class TestIsReachable:
    """Tests for is_reachable()."""

    def test_permission_based(self, guard: RouteAccessGuard) -> None:
        perms = resolve(Role.STAFF, Grade.INTERN)
        assert guard.is_reachable("articles.list", perms) is True
        assert guard.is_reachable("users.list", perms) is False

    def test_unknown_route_key(self, guard: RouteAccessGuard, admin_permissions: frozenset[str]) -> None:
        """Unknown route keys are unreachable, never an error."""
        assert guard.is_reachable("no.such.route", admin_permissions) is False

    def test_blacklist(self, guard: RouteAccessGuard, admin_permissions: frozenset[str]) -> None:
        overlay = _policy(denied_route_keys={"users.list"})
        assert guard.is_reachable("users.list", admin_permissions, overlay, now=NOW) is False
        assert guard.is_reachable("users.dialog", admin_permissions, overlay, now=NOW) is True

    def test_blacklist_beats_whitelist(self, guard: RouteAccessGuard, admin_permissions: frozenset[str]) -> None:
        overlay = _policy(allowed_route_keys={"users.list"}, denied_route_keys={"users.list"})
        assert guard.is_reachable("users.list", admin_permissions, overlay, now=NOW) is False

    def test_whitelist_excludes_unlisted(self, guard: RouteAccessGuard, admin_permissions: frozenset[str]) -> None:
        """A whitelisted user cannot reach unlisted routes despite full permissions."""
        overlay = _policy(allowed_route_keys={"dashboard.main", "products.crud"})
        assert guard.is_reachable("users.list", admin_permissions, overlay, now=NOW) is False
        assert guard.is_reachable("products.crud", admin_permissions, overlay, now=NOW) is True

    def test_whitelist_still_checks_permissions(self, guard: RouteAccessGuard) -> None:
        """Whitelisting narrows access but does not grant it."""
        overlay = _policy(allowed_route_keys={"users.list"})
        perms = resolve(Role.GUEST, Grade.INTERN)
        assert guard.is_reachable("users.list", perms, overlay, now=NOW) is False

    def test_whitelist_includes_unrestricted_routes_only_if_listed(self, guard: RouteAccessGuard) -> None:
        overlay = _policy(allowed_route_keys={"dashboard.main"})
        perms = resolve(Role.GUEST, Grade.INTERN)
        assert guard.is_reachable("help.main", perms, overlay, now=NOW) is False

    def test_expired_overlay_ignored(self, guard: RouteAccessGuard, admin_permissions: frozenset[str]) -> None:
        overlay = _policy(denied_route_keys={"users.list"}, expires_at=NOW - timedelta(days=1))
        assert guard.is_reachable("users.list", admin_permissions, overlay, now=NOW) is True

    def test_inactive_overlay_ignored(self, guard: RouteAccessGuard, admin_permissions: frozenset[str]) -> None:
        overlay = _policy(allowed_route_keys={"dashboard.main"}, is_active=False)
        assert guard.is_reachable("users.list", admin_permissions, overlay, now=NOW) is True

    def test_group_route(self) -> None:
        """Groups with a route key are checked against their own requirements."""
        tree = MenuTree(
            [
                GroupNode(
                    id="grp-users",
                    label="Users",
                    route_key="users",
                    required_permissions=[Permissions.MENU_USERS_VIEW],
                    children=[PageNode(id="page-list", label="List", route_key="users.list")],
                )
            ]
        )
        guard = RouteAccessGuard(tree)
        assert guard.is_reachable("users", frozenset()) is False
        assert guard.is_reachable("users.list", frozenset()) is True


class TestDeleteUserScenario:
    """Overlay grants and denials for a page requiring action:users.delete."""

    @pytest.fixture
    def guard(self) -> RouteAccessGuard:
        return RouteAccessGuard(
            MenuTree(
                [
                    PageNode(
                        id="page-users-delete",
                        label="Delete users",
                        route_key="users.delete",
                        required_permissions=[Permissions.ACTION_USERS_DELETE],
                    )
                ]
            )
        )

    def test_not_reachable_by_default(self, guard: RouteAccessGuard) -> None:
        assert guard.is_reachable("users.delete", resolve(Role.STAFF, Grade.INTERN)) is False

    def test_reachable_with_grant(self, guard: RouteAccessGuard) -> None:
        overlay = _policy(allowed_permissions={Permissions.ACTION_USERS_DELETE})
        perms = resolve(Role.STAFF, Grade.INTERN, overlay, now=NOW)
        assert guard.is_reachable("users.delete", perms, overlay, now=NOW) is True

    def test_unreachable_when_also_denied(self, guard: RouteAccessGuard) -> None:
        overlay = _policy(
            allowed_permissions={Permissions.ACTION_USERS_DELETE},
            denied_permissions={Permissions.ACTION_USERS_DELETE},
        )
        perms = resolve(Role.STAFF, Grade.INTERN, overlay, now=NOW)
        assert guard.is_reachable("users.delete", perms, overlay, now=NOW) is False


class TestAccessibleRouteKeys:
    """Tests for accessible_route_keys()."""

    def test_guest(self, guard: RouteAccessGuard) -> None:
        perms = resolve(Role.GUEST, Grade.JUNIOR)
        assert guard.accessible_route_keys(perms) == ("dashboard.main", "help.main", "dev.menu.playground")

    def test_tree_order(self, guard: RouteAccessGuard, admin_permissions: frozenset[str]) -> None:
        keys = guard.accessible_route_keys(admin_permissions)
        order = DEFAULT_MENU_TREE.route_keys()
        assert list(keys) == [key for key in order if key in keys]

    def test_matches_is_reachable(self, guard: RouteAccessGuard, admin_permissions: frozenset[str]) -> None:
        overlay = _policy(denied_route_keys={"users.list", "grid.samples.infinite"})
        keys = guard.accessible_route_keys(admin_permissions, overlay, now=NOW)
        for route_key in DEFAULT_MENU_TREE.route_keys():
            assert (route_key in keys) == guard.is_reachable(route_key, admin_permissions, overlay, now=NOW)

    def test_whitelist(self, guard: RouteAccessGuard, admin_permissions: frozenset[str]) -> None:
        overlay = _policy(allowed_route_keys={"articles.list", "dashboard.main"})
        assert guard.accessible_route_keys(admin_permissions, overlay, now=NOW) == (
            "dashboard.main",
            "articles.list",
        )


class TestResolveLandingRouteKey:
    """Tests for resolve_landing_route_key()."""

    def test_overlay_default(self, guard: RouteAccessGuard, admin_permissions: frozenset[str]) -> None:
        overlay = _policy(default_landing_route_key="products.crud")
        assert guard.resolve_landing_route_key(admin_permissions, overlay, now=NOW) == "products.crud"

    def test_unreachable_default_falls_through(self, guard: RouteAccessGuard) -> None:
        overlay = _policy(default_landing_route_key="users.list")
        perms = resolve(Role.STAFF, Grade.INTERN)
        assert guard.resolve_landing_route_key(perms, overlay, now=NOW) == "dashboard.main"

    def test_inactive_overlay_default_ignored(self, guard: RouteAccessGuard, admin_permissions: frozenset[str]) -> None:
        overlay = _policy(default_landing_route_key="products.crud", is_active=False)
        assert guard.resolve_landing_route_key(admin_permissions, overlay, now=NOW) == "dashboard.main"

    def test_first_reachable(self, guard: RouteAccessGuard) -> None:
        overlay = _policy(denied_route_keys={"dashboard.main"})
        perms = resolve(Role.GUEST, Grade.JUNIOR)
        assert guard.resolve_landing_route_key(perms, overlay, now=NOW) == "help.main"

    def test_fallback(self, guard: RouteAccessGuard) -> None:
        overlay = _policy(allowed_route_keys={"system.settings"})
        perms = resolve(Role.GUEST, Grade.JUNIOR)
        assert guard.resolve_landing_route_key(perms, overlay, "forbidden", now=NOW) == "forbidden"
        assert guard.resolve_landing_route_key(perms, overlay, now=NOW) is None
