"""Access context assembly.

:class:`MenuAccessService` is the integration point applications use at an
authentication or navigation boundary: it fetches the user's overlay from
the repository, resolves effective permissions and evaluates the menu,
producing one immutable :class:`AccessContext`.

Usage::

    from menuaccess import Grade, Role, get_access_service

    service = get_access_service()
    context = await service.build_access_context("user-1", Role.STAFF, Grade.SENIOR)

    render(context.menu)
    if not context.can_access("users.list"):
        redirect(context.landing_route_key)

Overlays are fetched on every call and never cached here; callers rebuild
the context after an administrator saves a policy.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional

from .config import AccessConfig
from .exceptions import PolicyStoreError
from .logging import get_access_logger
from .menu.defaults import DEFAULT_MENU_TREE
from .menu.guard import RouteAccessGuard
from .menu.tree import MenuNode, MenuTree, menu_tree_from_dicts
from .menu.visibility import NodeVisibility, evaluate, filter_menu_tree
from .permissions.resolver import EffectivePermissions, resolve
from .permissions.roles import Grade, Role
from .policy.models import UserMenuPolicy, effective_overlay
from .policy.repository import InMemoryUserMenuPolicyRepository, UserMenuPolicyRepository


@dataclass(frozen=True)
class AccessContext:
    """Everything the UI needs to render navigation for one principal.

    Attributes:
        user_id: Principal the context was built for.
        permissions: Effective permission set (Role/Grade + overlay).
        visibility: Read-only per-node visibility over the full tree.
        accessible_route_keys: Reachable route keys, in tree order.
        menu: Pruned tree ready for rendering.
        landing_route_key: Route to land on after sign-in, if any.
        overlay_applied: An effective overlay took part in resolution.
    """

    user_id: str
    permissions: EffectivePermissions
    visibility: Mapping[str, NodeVisibility]
    accessible_route_keys: tuple[str, ...]
    menu: tuple[MenuNode, ...]
    landing_route_key: Optional[str]
    overlay_applied: bool

    def can_access(self, route_key: str) -> bool:
        return route_key in self.accessible_route_keys

    def has_permission(self, permission: str) -> bool:
        return permission in self.permissions


class MenuAccessService:
    """Builds access contexts from a repository and a menu tree.

    Args:
        repository: Overlay store.
        tree: Menu tree (defaults to the application menu).
        config: Engine settings (defaults to ``AccessConfig()``).
    """

    def __init__(
        self,
        repository: UserMenuPolicyRepository,
        tree: Optional[MenuTree] = None,
        config: Optional[AccessConfig] = None,
    ) -> None:
        self.repository = repository
        self.tree = tree if tree is not None else DEFAULT_MENU_TREE
        self.config = config or AccessConfig()
        self.guard = RouteAccessGuard(self.tree)

    @classmethod
    def from_menu_config(
        cls,
        repository: UserMenuPolicyRepository,
        menu_config: Iterable[dict[str, Any]],
        config: Optional[AccessConfig] = None,
    ) -> "MenuAccessService":
        """Build a service over a menu loaded from configuration dicts.

        Raises:
            MenuTreeError: If the menu configuration is invalid.
        """
        config = config or AccessConfig()
        tree = menu_tree_from_dicts(menu_config, validate_permissions=config.strict_menu_validation)
        return cls(repository, tree=tree, config=config)

    async def load_overlay(self, user_id: str) -> Optional[UserMenuPolicy]:
        """Fetch the user's overlay; store failures count as "no overlay"."""
        logger = get_access_logger(__name__, user_id=user_id)
        try:
            return await self.repository.fetch(user_id)
        except PolicyStoreError as e:
            logger.warning("Overlay fetch failed, using Role/Grade permissions only: %s", e)
            return None

    async def build_access_context(
        self,
        user_id: str,
        role: Role,
        grade: Grade,
        *,
        now: Optional[datetime] = None,
    ) -> AccessContext:
        """Resolve permissions and menu state for one principal.

        Steps:
        1. Fetch the overlay (missing, inactive and expired are equivalent)
        2. Resolve effective permissions
        3. Evaluate node visibility
        4. Compute reachable routes through the route guard
        5. Prune the menu and pick the landing route
        """
        logger = get_access_logger(__name__, user_id=user_id)

        overlay = await self.load_overlay(user_id)
        active = effective_overlay(overlay, now=now)
        if overlay is not None and active is None:
            logger.debug("Overlay ignored (inactive or expired)")

        permissions = resolve(role, grade, active, now=now)
        visibility = evaluate(self.tree, permissions)
        accessible = self.guard.accessible_route_keys(permissions, active, now=now)
        menu = filter_menu_tree(self.tree, visibility, accessible_route_keys=frozenset(accessible))
        landing = self.guard.resolve_landing_route_key(
            permissions,
            active,
            self.config.landing_fallback_route_key,
            now=now,
        )

        logger.debug(
            "Access context built: %d permissions, %d routes, landing=%s",
            len(permissions),
            len(accessible),
            landing,
        )

        return AccessContext(
            user_id=user_id,
            permissions=permissions,
            visibility=MappingProxyType(visibility),
            accessible_route_keys=accessible,
            menu=menu,
            landing_route_key=landing,
            overlay_applied=active is not None,
        )

    async def can_access(
        self,
        user_id: str,
        role: Role,
        grade: Grade,
        route_key: str,
        *,
        now: Optional[datetime] = None,
    ) -> bool:
        """Route guard check for a single navigation."""
        overlay = effective_overlay(await self.load_overlay(user_id), now=now)
        permissions = resolve(role, grade, overlay, now=now)
        allowed = self.guard.is_reachable(route_key, permissions, overlay, now=now)
        if not allowed:
            get_access_logger(__name__, user_id=user_id).info("Route %s denied", route_key)
        return allowed


# ── Singleton factory ────────────────────────────────────

_service: MenuAccessService | None = None


def get_access_service(config: AccessConfig | None = None) -> MenuAccessService:
    """Get or create the singleton MenuAccessService.

    The singleton uses the default menu and an in-memory overlay store,
    seeded with the demo policies when ``seed_demo_policies`` is set.

    Args:
        config: Engine configuration (used only on first call).

    Returns:
        MenuAccessService instance.
    """
    global _service
    if _service is None:
        config = config or AccessConfig()
        if config.seed_demo_policies:
            repository = InMemoryUserMenuPolicyRepository.with_demo_policies()
        else:
            repository = InMemoryUserMenuPolicyRepository()
        _service = MenuAccessService(repository, config=config)
    return _service


def reset_access_service() -> None:
    """Reset the singleton (for testing)."""
    global _service
    _service = None


__all__ = [
    "AccessContext",
    "MenuAccessService",
    "get_access_service",
    "reset_access_service",
]
