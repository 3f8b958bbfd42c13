"""Static Role → permissions and Grade → boost tables.

Provides:
- ``ROLE_PERMISSION_MAP`` — base grants per Role.
- ``GRADE_PERMISSION_BOOST`` — additive grants per Grade.

Both tables are total over their enumeration; this is checked at import
time so a new Role or Grade without an entry fails loudly on deploy.
"""

from __future__ import annotations

from .constants import PERMISSION_CATALOG, Permissions
from .roles import Grade, Role

# ── Role → Permission Profiles ──────────────────────────

ROLE_PERMISSION_MAP: dict[Role, frozenset[str]] = {
    Role.SYSTEM_ADMIN: PERMISSION_CATALOG,
    Role.ORG_ADMIN: frozenset(
        {
            # Menu
            Permissions.MENU_DASHBOARD_VIEW,
            Permissions.MENU_DASHBOARD_OPS_VIEW,
            Permissions.MENU_USERS_VIEW,
            Permissions.MENU_AUTH_VIEW,
            Permissions.MENU_SYSTEM_VIEW,
            Permissions.MENU_SYSTEM_SETTINGS_VIEW,
            Permissions.MENU_GRID_SAMPLES_VIEW,
            Permissions.MENU_NOTIFICATIONS_VIEW,
            Permissions.MENU_PRODUCTS_VIEW,
            Permissions.MENU_ARTICLES_VIEW,
            Permissions.MENU_SCHEDULES_VIEW,
            # Page
            Permissions.PAGE_DASHBOARD_VIEW,
            Permissions.PAGE_DASHBOARD_OPS_VIEW,
            Permissions.PAGE_USERS_LIST_VIEW,
            Permissions.PAGE_USERS_DETAIL_VIEW,
            Permissions.PAGE_AUTH_ROLE_DESIGNER_VIEW,
            Permissions.PAGE_SYSTEM_SETTINGS_VIEW,
            Permissions.PAGE_GRID_SAMPLES_VIEW,
            Permissions.PAGE_NOTIFICATIONS_TEMPLATES_VIEW,
            Permissions.PAGE_PRODUCTS_VIEW,
            Permissions.PAGE_ARTICLES_VIEW,
            Permissions.PAGE_SCHEDULES_VIEW,
            # Action
            Permissions.ACTION_USERS_CREATE,
            Permissions.ACTION_USERS_UPDATE,
            Permissions.ACTION_USERS_DELETE,
            Permissions.ACTION_USERS_GRANT_ROLE,
            Permissions.ACTION_AUTH_ROLE_CREATE,
            Permissions.ACTION_AUTH_ROLE_UPDATE,
            Permissions.ACTION_SYSTEM_SETTINGS_UPDATE,
            Permissions.ACTION_SYSTEM_MENU_UPDATE,
            Permissions.ACTION_DASHBOARD_OPS_VIEW,
            Permissions.ACTION_NOTIFICATIONS_TEMPLATE_CREATE,
            Permissions.ACTION_NOTIFICATIONS_TEMPLATE_UPDATE,
            Permissions.ACTION_PRODUCTS_CREATE,
            Permissions.ACTION_PRODUCTS_UPDATE,
            Permissions.ACTION_PRODUCTS_DELETE,
            # PII
            Permissions.PII_VIEW_FULL,
            Permissions.PII_EXPORT,
        }
    ),
    Role.MANAGER: frozenset(
        {
            Permissions.MENU_DASHBOARD_VIEW,
            Permissions.MENU_USERS_VIEW,
            Permissions.MENU_GRID_SAMPLES_VIEW,
            Permissions.MENU_NOTIFICATIONS_VIEW,
            Permissions.MENU_PRODUCTS_VIEW,
            Permissions.MENU_ARTICLES_VIEW,
            Permissions.MENU_SCHEDULES_VIEW,
            Permissions.PAGE_DASHBOARD_VIEW,
            Permissions.PAGE_USERS_LIST_VIEW,
            Permissions.PAGE_USERS_DETAIL_VIEW,
            Permissions.PAGE_GRID_SAMPLES_VIEW,
            Permissions.PAGE_NOTIFICATIONS_TEMPLATES_VIEW,
            Permissions.PAGE_PRODUCTS_VIEW,
            Permissions.PAGE_ARTICLES_VIEW,
            Permissions.PAGE_SCHEDULES_VIEW,
            Permissions.ACTION_USERS_CREATE,
            Permissions.ACTION_USERS_UPDATE,
            Permissions.ACTION_NOTIFICATIONS_TEMPLATE_CREATE,
            Permissions.ACTION_NOTIFICATIONS_TEMPLATE_UPDATE,
            Permissions.ACTION_PRODUCTS_CREATE,
            Permissions.ACTION_PRODUCTS_UPDATE,
            Permissions.PII_VIEW_PARTIAL,
        }
    ),
    Role.STAFF: frozenset(
        {
            Permissions.MENU_DASHBOARD_VIEW,
            Permissions.MENU_GRID_SAMPLES_VIEW,
            Permissions.MENU_ARTICLES_VIEW,
            Permissions.MENU_SCHEDULES_VIEW,
            Permissions.PAGE_DASHBOARD_VIEW,
            Permissions.PAGE_GRID_SAMPLES_VIEW,
            Permissions.PAGE_ARTICLES_VIEW,
            Permissions.PAGE_SCHEDULES_VIEW,
            Permissions.ACTION_ARTICLES_CREATE,
            Permissions.PII_VIEW_PARTIAL,
        }
    ),
    Role.GUEST: frozenset(
        {
            Permissions.MENU_DASHBOARD_VIEW,
            Permissions.PAGE_DASHBOARD_VIEW,
        }
    ),
}


# ── Grade → Permission Boosts ───────────────────────────
# Additive only.

GRADE_PERMISSION_BOOST: dict[Grade, frozenset[str]] = {
    Grade.EXECUTIVE: frozenset(
        {
            Permissions.PII_VIEW_FULL,
            Permissions.PII_EXPORT,
            Permissions.ACTION_DASHBOARD_STATS_EXPORT,
            Permissions.ACTION_USERS_EXPORT,
        }
    ),
    Grade.TEAM_LEAD: frozenset(
        {
            Permissions.ACTION_USERS_GRANT_ROLE,
            Permissions.PII_VIEW_FULL,
        }
    ),
    Grade.SENIOR: frozenset(
        {
            Permissions.ACTION_USERS_CREATE,
            Permissions.ACTION_USERS_UPDATE,
        }
    ),
    Grade.JUNIOR: frozenset(),
    Grade.INTERN: frozenset(),
}


def _check_tables() -> None:
    missing_roles = set(Role) - set(ROLE_PERMISSION_MAP)
    missing_grades = set(Grade) - set(GRADE_PERMISSION_BOOST)
    if missing_roles or missing_grades:
        raise RuntimeError(
            f"Policy tables are not total: roles={sorted(missing_roles)} grades={sorted(missing_grades)}"
        )
    unknown = set().union(*ROLE_PERMISSION_MAP.values(), *GRADE_PERMISSION_BOOST.values()) - PERMISSION_CATALOG
    if unknown:
        raise RuntimeError(f"Policy tables reference keys outside the catalog: {sorted(unknown)}")


_check_tables()


__all__ = [
    "GRADE_PERMISSION_BOOST",
    "ROLE_PERMISSION_MAP",
]
