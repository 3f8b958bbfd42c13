"""Permission catalog, Role/Grade tables and permission resolution.

Defines:
- Permissions / PERMISSION_CATALOG: the closed set of permission keys
- Role, Grade, GRADE_RANK: principal classifications
- ROLE_PERMISSION_MAP / GRADE_PERMISSION_BOOST: static policy tables
- resolve(): effective permission set for a principal
"""

from .constants import (
    PERMISSION_CATALOG,
    PermissionKind,
    Permissions,
    is_valid_permission_key,
    is_well_formed_permission_key,
    is_well_formed_route_key,
    parse_permission_key,
)
from .roles import (
    GRADE_RANK,
    Grade,
    Role,
    compare_grades,
    grade_rank,
    grades_by_rank,
    meets_minimum_grade,
)
from .profiles import GRADE_PERMISSION_BOOST, ROLE_PERMISSION_MAP
from .resolver import (
    EffectivePermissions,
    base_permissions,
    can_perform_action,
    has_all,
    has_any,
    resolve,
)

__all__ = [
    "GRADE_PERMISSION_BOOST",
    "GRADE_RANK",
    "PERMISSION_CATALOG",
    "ROLE_PERMISSION_MAP",
    "EffectivePermissions",
    "Grade",
    "PermissionKind",
    "Permissions",
    "Role",
    "base_permissions",
    "can_perform_action",
    "compare_grades",
    "grade_rank",
    "grades_by_rank",
    "has_all",
    "has_any",
    "is_valid_permission_key",
    "is_well_formed_permission_key",
    "is_well_formed_route_key",
    "meets_minimum_grade",
    "parse_permission_key",
    "resolve",
]
