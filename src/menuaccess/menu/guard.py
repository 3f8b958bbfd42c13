"""Route access guard.

Answers "may this principal navigate to this route key?" by combining the
menu tree's per-route requirements with the overlay's route blacklist and
whitelist.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import AbstractSet, Optional

from ..permissions.resolver import has_all
from ..policy.models import UserMenuPolicy, effective_overlay
from .tree import MenuTree

logger = logging.getLogger(__name__)


class RouteAccessGuard:
    """Route-level access checks against one menu tree.

    Decision order for a route key (first match wins):

    1. Overlay effective and route in ``denied_route_keys`` → denied.
       Blacklist beats everything, whitelist membership included.
    2. Overlay effective with a whitelist → allowed only if the route is
       whitelisted *and* its required permissions are held.
    3. Otherwise → allowed if its required permissions are held.

    Unknown route keys are never reachable; checks never raise.

    Example::

        guard = RouteAccessGuard(DEFAULT_MENU_TREE)
        guard.is_reachable("users.list", permissions, policy)
    """

    def __init__(self, tree: MenuTree) -> None:
        self.tree = tree

    def is_reachable(
        self,
        route_key: str,
        permissions: AbstractSet[str],
        overlay: Optional[UserMenuPolicy] = None,
        *,
        now: Optional[datetime] = None,
    ) -> bool:
        node = self.tree.find_by_route_key(route_key)
        if node is None:
            logger.debug("Unknown route key %r treated as unreachable", route_key)
            return False

        active = effective_overlay(overlay, now=now)
        return self._check(route_key, node.required_permissions, permissions, active)

    def accessible_route_keys(
        self,
        permissions: AbstractSet[str],
        overlay: Optional[UserMenuPolicy] = None,
        *,
        now: Optional[datetime] = None,
    ) -> tuple[str, ...]:
        """Reachable route keys, in tree order."""
        active = effective_overlay(overlay, now=now)
        keys = []
        for route_key in self.tree.route_keys():
            node = self.tree.find_by_route_key(route_key)
            if self._check(route_key, node.required_permissions, permissions, active):
                keys.append(route_key)
        return tuple(keys)

    def resolve_landing_route_key(
        self,
        permissions: AbstractSet[str],
        overlay: Optional[UserMenuPolicy] = None,
        fallback: Optional[str] = None,
        *,
        now: Optional[datetime] = None,
    ) -> Optional[str]:
        """Pick the route a principal lands on after sign-in.

        The overlay's ``default_landing_route_key`` when the overlay is
        effective and the route is reachable, otherwise the first reachable
        route in tree order, otherwise ``fallback``.
        """
        accessible = self.accessible_route_keys(permissions, overlay, now=now)

        active = effective_overlay(overlay, now=now)
        preferred = active.default_landing_route_key if active else None
        if preferred and preferred in accessible:
            return preferred
        if preferred:
            logger.debug("Default landing route %r is not reachable for user %s", preferred, active.user_id)

        if accessible:
            return accessible[0]
        return fallback

    @staticmethod
    def _check(
        route_key: str,
        required: tuple[str, ...],
        permissions: AbstractSet[str],
        overlay: Optional[UserMenuPolicy],
    ) -> bool:
        if overlay is not None:
            if route_key in overlay.denied_route_keys:
                return False
            if overlay.allowed_route_keys is not None:
                return route_key in overlay.allowed_route_keys and has_all(required, permissions)
        return has_all(required, permissions)


__all__ = ["RouteAccessGuard"]
