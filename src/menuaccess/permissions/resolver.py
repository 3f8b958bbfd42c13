"""Permission resolution and permission-set checks.

Combines the static Role/Grade tables with a user's overlay into the
effective permission set. Everything here is pure: identical inputs always
produce identical (frozen) outputs.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING, AbstractSet, Iterable, Optional

from .profiles import GRADE_PERMISSION_BOOST, ROLE_PERMISSION_MAP
from .roles import Grade, Role, meets_minimum_grade

if TYPE_CHECKING:
    from ..policy.models import UserMenuPolicy

logger = logging.getLogger(__name__)

EffectivePermissions = frozenset[str]


def base_permissions(role: Role, grade: Grade) -> EffectivePermissions:
    """Role grants plus the Grade boost, without any overlay."""
    return ROLE_PERMISSION_MAP[role] | GRADE_PERMISSION_BOOST[grade]


def resolve(
    role: Role,
    grade: Grade,
    overlay: Optional[UserMenuPolicy] = None,
    *,
    now: Optional[datetime] = None,
) -> EffectivePermissions:
    """Resolve the effective permission set of a principal.

    Steps:
    1. ``base = ROLE_PERMISSION_MAP[role]``
    2. ``boosted = base ∪ GRADE_PERMISSION_BOOST[grade]``
    3. No overlay, inactive overlay or expired overlay → ``boosted``
    4. Otherwise ``(boosted ∪ allowed) \\ denied``

    A denied key is never in the result, even when the Role/Grade tables
    grant it or the same overlay also allows it.

    Args:
        role: Principal's role.
        grade: Principal's grade.
        overlay: The user's policy record, if any.
        now: Reference time for expiry (defaults to the current UTC time).

    Returns:
        Frozenset of permission keys.

    Example::

        resolve(Role.STAFF, Grade.INTERN)
        resolve(Role.STAFF, Grade.INTERN, policy)  # policy applied if effective
    """
    boosted = base_permissions(role, grade)

    if overlay is None:
        return boosted

    if not overlay.is_effective(now=now):
        logger.debug("Overlay for user %s ignored (inactive or expired)", overlay.user_id)
        return boosted

    return (boosted | overlay.allowed_permissions) - overlay.denied_permissions


def has_all(required: Optional[Iterable[str]], permissions: AbstractSet[str]) -> bool:
    """True if every required key is held. Empty or missing requirements always pass."""
    if not required:
        return True
    return all(key in permissions for key in required)


def has_any(candidates: Optional[Iterable[str]], permissions: AbstractSet[str]) -> bool:
    """True if at least one candidate key is held."""
    if not candidates:
        return False
    return any(key in permissions for key in candidates)


def can_perform_action(
    permissions: AbstractSet[str],
    grade: Optional[Grade],
    required_permission: Optional[str] = None,
    min_grade: Optional[Grade] = None,
) -> bool:
    """Combined permission + seniority check for a UI action.

    Both conditions are optional; an omitted condition passes.

    Example::

        can_perform_action(perms, Grade.JUNIOR, Permissions.ACTION_USERS_DELETE, Grade.SENIOR)  # False
    """
    if required_permission and required_permission not in permissions:
        return False
    if min_grade is not None and not meets_minimum_grade(grade, min_grade):
        return False
    return True


__all__ = [
    "EffectivePermissions",
    "base_permissions",
    "can_perform_action",
    "has_all",
    "has_any",
    "resolve",
]
