"""Overlay repository boundary.

The engine never owns overlay records. It reads them through
:class:`UserMenuPolicyRepository`, keyed by user id, once per resolution and
never caches them. :class:`InMemoryUserMenuPolicyRepository` is the
dict-backed implementation used for demos and tests; a persistent store only
needs to satisfy the same protocol.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional, Protocol, runtime_checkable

from ..exceptions import PolicyValidationError
from ..permissions.constants import Permissions
from .models import UserMenuPolicy, UserMenuPolicyInput, parse_policy_record

logger = logging.getLogger(__name__)


@runtime_checkable
class UserMenuPolicyRepository(Protocol):
    """Fetch/save/delete/list contract for user menu policies."""

    async def fetch(self, user_id: str) -> Optional[UserMenuPolicy]: ...

    async def save(self, user_id: str, policy_input: UserMenuPolicyInput) -> UserMenuPolicy: ...

    async def delete(self, user_id: str) -> bool: ...

    async def list_all(self) -> list[UserMenuPolicy]: ...


# ── Demo records ────────────────────────────────────────

DEMO_USER_POLICIES: tuple[dict[str, Any], ...] = (
    {
        "userId": "user-1",
        "defaultLandingRouteKey": "dashboard.main",
        "description": "Default user policy",
        "createdAt": "2024-01-01T00:00:00Z",
    },
    {
        "userId": "user-vip",
        "allowedPermissions": [
            Permissions.MENU_DASHBOARD_OPS_VIEW,
            Permissions.PAGE_DASHBOARD_OPS_VIEW,
            Permissions.ACTION_DASHBOARD_OPS_VIEW,
        ],
        "defaultLandingRouteKey": "dashboard.ops",
        "description": "VIP user - operations dashboard allowed",
        "createdAt": "2024-01-15T00:00:00Z",
    },
    {
        "userId": "user-restricted",
        "deniedPermissions": [
            Permissions.MENU_USERS_VIEW,
            Permissions.PAGE_USERS_LIST_VIEW,
        ],
        "deniedRouteKeys": ["users.list", "users.detail", "grid.samples.infinite"],
        "defaultLandingRouteKey": "dashboard.main",
        "description": "Restricted user - user management blocked",
        "createdAt": "2024-02-01T00:00:00Z",
    },
    {
        "userId": "user-whitelist",
        "allowedRouteKeys": ["dashboard.main", "products.crud", "articles.list"],
        "defaultLandingRouteKey": "dashboard.main",
        "description": "Whitelisted user - listed pages only",
        "createdAt": "2024-02-15T00:00:00Z",
    },
    {
        "userId": "user-expired",
        "allowedPermissions": [Permissions.MENU_DASHBOARD_OPS_VIEW],
        "defaultLandingRouteKey": "dashboard.main",
        "expiresAt": "2023-12-31T23:59:59Z",
        "description": "Expired policy",
        "createdAt": "2023-01-01T00:00:00Z",
    },
)


class InMemoryUserMenuPolicyRepository:
    """Dict-backed overlay store.

    Args:
        policies: Initial records (validated on load).
        clock: Callable returning "now"; used to stamp created_at/updated_at.

    Save semantics: fields absent from the input keep their stored value,
    explicit values (including empty collections) replace it. A record
    saved for an unknown user is created with defaults.
    """

    def __init__(
        self,
        policies: Optional[list[dict[str, Any]] | tuple[dict[str, Any], ...]] = None,
        *,
        clock=None,
    ) -> None:
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._policies: dict[str, UserMenuPolicy] = {}
        for record in policies or ():
            policy = parse_policy_record(record)
            self._policies[policy.user_id] = policy

    @classmethod
    def with_demo_policies(cls, *, clock=None) -> "InMemoryUserMenuPolicyRepository":
        return cls(DEMO_USER_POLICIES, clock=clock)

    async def fetch(self, user_id: str) -> Optional[UserMenuPolicy]:
        return self._policies.get(user_id)

    async def save(self, user_id: str, policy_input: UserMenuPolicyInput) -> UserMenuPolicy:
        if not user_id:
            raise PolicyValidationError("user_id is required to save a policy")

        now = self._clock()
        existing = self._policies.get(user_id)

        data: dict[str, Any] = existing.model_dump() if existing else {"user_id": user_id}
        data.update(policy_input.changes())
        data["user_id"] = user_id
        data["created_at"] = existing.created_at if existing and existing.created_at else now
        data["updated_at"] = now

        policy = parse_policy_record(data)

        if policy.conflicting_permissions:
            logger.warning(
                "Policy for user %s both allows and denies %s; deny wins",
                user_id,
                sorted(policy.conflicting_permissions),
            )

        self._policies[user_id] = policy
        logger.info("Saved menu policy for user %s", user_id)
        return policy

    async def delete(self, user_id: str) -> bool:
        removed = self._policies.pop(user_id, None) is not None
        if removed:
            logger.info("Deleted menu policy for user %s", user_id)
        return removed

    async def list_all(self) -> list[UserMenuPolicy]:
        return list(self._policies.values())

    def __len__(self) -> int:
        return len(self._policies)


__all__ = [
    "DEMO_USER_POLICIES",
    "InMemoryUserMenuPolicyRepository",
    "UserMenuPolicyRepository",
]
