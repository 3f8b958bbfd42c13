"""User menu policy overlay models.

A ``UserMenuPolicy`` layers per-user exceptions on top of the Role/Grade
defaults:

Precedence:
    1. denied_permissions / denied_route_keys — explicit block (highest)
    2. allowed_permissions / allowed_route_keys — explicit grant / whitelist
    3. Role/Grade permissions

An inactive or expired policy is ignored entirely. Records accept both
snake_case and camelCase field names so that payloads produced by the admin
console validate directly::

    policy = UserMenuPolicy.model_validate({
        "userId": "user-123",
        "deniedPermissions": ["menu:dashboard.ops.view"],
        "allowedPermissions": ["page:notifications.templates.view"],
        "deniedRouteKeys": ["grid.samples.infinite"],
        "defaultLandingRouteKey": "dashboard.main",
    })
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from ..exceptions import PolicyValidationError
from ..permissions.constants import is_well_formed_permission_key, is_well_formed_route_key


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _now(now: Optional[datetime]) -> datetime:
    return _as_utc(now) if now is not None else datetime.now(timezone.utc)


def _normalize_whitelist(value: Any) -> Any:
    # An empty whitelist is the same as no whitelist
    if value is not None and len(value) == 0:
        return None
    return value


class UserMenuPolicy(BaseModel):
    """Per-user overlay record, as stored by the overlay repository."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
    )

    user_id: str = Field(min_length=1)

    allowed_permissions: frozenset[str] = frozenset()
    denied_permissions: frozenset[str] = frozenset()

    # None = whitelist mode off
    allowed_route_keys: Optional[frozenset[str]] = None
    denied_route_keys: frozenset[str] = frozenset()

    default_landing_route_key: Optional[str] = None

    is_active: bool = True
    expires_at: Optional[datetime] = None

    # Administrative metadata, not used in resolution
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("allowed_route_keys", mode="before")
    @classmethod
    def _empty_whitelist_is_none(cls, v: Any) -> Any:
        return _normalize_whitelist(v)

    @field_validator("allowed_permissions", "denied_permissions", "denied_route_keys", mode="before")
    @classmethod
    def _none_is_empty(cls, v: Any) -> Any:
        return frozenset() if v is None else v

    @field_validator("expires_at", "created_at", "updated_at")
    @classmethod
    def _naive_is_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return _as_utc(v)

    def is_expired(self, *, now: Optional[datetime] = None) -> bool:
        """True once ``expires_at`` lies in the past."""
        if self.expires_at is None:
            return False
        return self.expires_at < _now(now)

    def is_effective(self, *, now: Optional[datetime] = None) -> bool:
        """True when the overlay takes part in resolution (active and not expired)."""
        return self.is_active and not self.is_expired(now=now)

    @property
    def whitelist_enabled(self) -> bool:
        return self.allowed_route_keys is not None

    @property
    def conflicting_permissions(self) -> frozenset[str]:
        """Keys that are both allowed and denied. Deny wins; usually a misconfiguration."""
        return self.allowed_permissions & self.denied_permissions


class UserMenuPolicyInput(BaseModel):
    """Create/update payload. Every field is optional.

    Partial update semantics: a field that is not set leaves the stored
    value unchanged; an explicitly empty collection clears it. Use
    ``model_fields_set`` to tell the two apart.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="forbid",
    )

    allowed_permissions: Optional[frozenset[str]] = None
    denied_permissions: Optional[frozenset[str]] = None
    allowed_route_keys: Optional[frozenset[str]] = None
    denied_route_keys: Optional[frozenset[str]] = None
    default_landing_route_key: Optional[str] = None
    description: Optional[str] = None
    is_active: Optional[bool] = None
    expires_at: Optional[datetime] = None

    @field_validator("allowed_permissions", "denied_permissions")
    @classmethod
    def _well_formed_keys(cls, v: Optional[frozenset[str]]) -> Optional[frozenset[str]]:
        if v is None:
            return v
        bad = sorted(key for key in v if not is_well_formed_permission_key(key))
        if bad:
            raise ValueError(f"Malformed permission keys: {bad}")
        return v

    @field_validator("allowed_route_keys", "denied_route_keys")
    @classmethod
    def _well_formed_route_keys(cls, v: Optional[frozenset[str]]) -> Optional[frozenset[str]]:
        if v is None:
            return v
        bad = sorted(key for key in v if not is_well_formed_route_key(key))
        if bad:
            raise ValueError(f"Malformed route keys: {bad}")
        return v

    @field_validator("default_landing_route_key")
    @classmethod
    def _well_formed_landing(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not is_well_formed_route_key(v):
            raise ValueError(f"Malformed route key: {v!r}")
        return v

    @field_validator("allowed_route_keys", mode="before")
    @classmethod
    def _empty_whitelist_is_none(cls, v: Any) -> Any:
        return _normalize_whitelist(v)

    @field_validator("expires_at")
    @classmethod
    def _naive_is_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return _as_utc(v)

    def changes(self) -> dict[str, Any]:
        """Fields explicitly provided by the caller, keyed by field name.

        ``is_active=None`` carries no value and is dropped.
        """
        changes = {name: getattr(self, name) for name in self.model_fields_set}
        if changes.get("is_active", True) is None:
            del changes["is_active"]
        return changes


def parse_policy_record(data: dict[str, Any]) -> UserMenuPolicy:
    """Validate a raw policy record.

    Raises:
        PolicyValidationError: If the record is malformed.
    """
    try:
        return UserMenuPolicy.model_validate(data)
    except ValidationError as e:
        raise PolicyValidationError(
            f"Invalid user menu policy: {e.error_count()} error(s)",
            user_id=data.get("user_id") or data.get("userId"),
            errors=e.errors(include_url=False),
        ) from e


def effective_overlay(
    policy: Optional[UserMenuPolicy],
    *,
    now: Optional[datetime] = None,
) -> Optional[UserMenuPolicy]:
    """Return ``policy`` if it takes part in resolution, else None.

    Missing, inactive and expired overlays are all treated the same way.
    """
    if policy is None or not policy.is_effective(now=now):
        return None
    return policy


__all__ = [
    "UserMenuPolicy",
    "UserMenuPolicyInput",
    "effective_overlay",
    "parse_policy_record",
]
