"""Permission catalog for the admin console.

Provides:
- ``PermissionKind`` — the closed set of key namespaces.
- ``Permissions`` — every permission key constant (``kind:resource.action``).
- ``PERMISSION_CATALOG`` — frozenset of all keys defined on ``Permissions``.
- ``parse_permission_key()`` / ``is_valid_permission_key()``.
- ``is_well_formed_route_key()`` — shape check for route keys.
"""

from __future__ import annotations

import re


class PermissionKind:
    """Namespace of a permission key.

    - ``menu``   — a menu section may be shown
    - ``page``   — a screen may be opened
    - ``action`` — an operation may be executed
    - ``pii``    — personal data may be viewed or exported
    """

    MENU = "menu"
    PAGE = "page"
    ACTION = "action"
    PII = "pii"

    ALL = frozenset({"menu", "page", "action", "pii"})


# kind:resource.action, resource may itself be dotted ("dashboard.ops")
_KEY_PATTERN = re.compile(r"^(menu|page|action|pii):([a-z0-9][a-z0-9_-]*(?:\.[a-z0-9][a-z0-9_-]*)*)\.([a-z0-9][a-z0-9_-]*)$")

# dotted lowercase segments, e.g. "grid.samples.tree"
_ROUTE_KEY_PATTERN = re.compile(r"^[a-z0-9][a-z0-9_-]*(?:\.[a-z0-9][a-z0-9_-]*)*$")


class Permissions:
    """Canonical permission keys.

    Format: ``{kind}:{resource}.{action}``

    Two modes of use:

    1. **Static constants**::

        Permissions.ACTION_USERS_DELETE      → "action:users.delete"

    2. **Builders** for keys assembled from parts::

        Permissions.menu("users")            → "menu:users.view"
        Permissions.action("users", "delete") → "action:users.delete"
    """

    # ── Menu ────────────────────────────────────────────
    MENU_DASHBOARD_VIEW = "menu:dashboard.view"
    MENU_DASHBOARD_OPS_VIEW = "menu:dashboard.ops.view"
    MENU_USERS_VIEW = "menu:users.view"
    MENU_AUTH_VIEW = "menu:auth.view"
    MENU_SYSTEM_VIEW = "menu:system.view"
    MENU_SYSTEM_SETTINGS_VIEW = "menu:system.settings.view"
    MENU_GRID_SAMPLES_VIEW = "menu:grid-samples.view"
    MENU_NOTIFICATIONS_VIEW = "menu:notifications.view"
    MENU_DOCS_VIEW = "menu:docs.view"
    MENU_DOCS_SWAGGER_VIEW = "menu:docs.swagger.view"
    MENU_SHOWCASE_VIEW = "menu:showcase.view"
    MENU_PRODUCTS_VIEW = "menu:products.view"
    MENU_ARTICLES_VIEW = "menu:articles.view"
    MENU_SCHEDULES_VIEW = "menu:schedules.view"
    MENU_DEV_TOOLS_VIEW = "menu:dev-tools.view"

    # ── Page ────────────────────────────────────────────
    PAGE_DASHBOARD_VIEW = "page:dashboard.view"
    PAGE_DASHBOARD_OPS_VIEW = "page:dashboard.ops.view"
    PAGE_USERS_LIST_VIEW = "page:users.list.view"
    PAGE_USERS_DETAIL_VIEW = "page:users.detail.view"
    PAGE_AUTH_ROLE_DESIGNER_VIEW = "page:auth.role-designer.view"
    PAGE_SYSTEM_SETTINGS_VIEW = "page:system.settings.view"
    PAGE_GRID_SAMPLES_VIEW = "page:grid-samples.view"
    PAGE_NOTIFICATIONS_TEMPLATES_VIEW = "page:notifications.templates.view"
    PAGE_PRODUCTS_VIEW = "page:products.view"
    PAGE_ARTICLES_VIEW = "page:articles.view"
    PAGE_SCHEDULES_VIEW = "page:schedules.view"
    PAGE_SWAGGER_PLAYGROUND_VIEW = "page:swagger-playground.view"
    PAGE_MENU_MANAGEMENT_VIEW = "page:menu-management.view"

    # ── Action: users ───────────────────────────────────
    ACTION_USERS_CREATE = "action:users.create"
    ACTION_USERS_UPDATE = "action:users.update"
    ACTION_USERS_DELETE = "action:users.delete"
    ACTION_USERS_GRANT_ROLE = "action:users.grant-role"
    ACTION_USERS_EXPORT = "action:users.export"

    # ── Action: auth ────────────────────────────────────
    ACTION_AUTH_ROLE_CREATE = "action:auth.role.create"
    ACTION_AUTH_ROLE_UPDATE = "action:auth.role.update"
    ACTION_AUTH_ROLE_DELETE = "action:auth.role.delete"
    ACTION_AUTH_PERMISSION_ASSIGN = "action:auth.permission.assign"

    # ── Action: system ──────────────────────────────────
    ACTION_SYSTEM_SETTINGS_UPDATE = "action:system.settings.update"
    ACTION_SYSTEM_MENU_UPDATE = "action:system.menu.update"

    # ── Action: dashboard ───────────────────────────────
    ACTION_DASHBOARD_OPS_VIEW = "action:dashboard.ops.view"
    ACTION_DASHBOARD_STATS_EXPORT = "action:dashboard.stats.export"

    # ── Action: notifications ───────────────────────────
    ACTION_NOTIFICATIONS_TEMPLATE_CREATE = "action:notifications.template.create"
    ACTION_NOTIFICATIONS_TEMPLATE_UPDATE = "action:notifications.template.update"
    ACTION_NOTIFICATIONS_TEMPLATE_DELETE = "action:notifications.template.delete"
    ACTION_NOTIFICATIONS_SEND = "action:notifications.send"

    # ── Action: products ────────────────────────────────
    ACTION_PRODUCTS_CREATE = "action:products.create"
    ACTION_PRODUCTS_UPDATE = "action:products.update"
    ACTION_PRODUCTS_DELETE = "action:products.delete"

    # ── Action: articles ────────────────────────────────
    ACTION_ARTICLES_CREATE = "action:articles.create"
    ACTION_ARTICLES_UPDATE = "action:articles.update"
    ACTION_ARTICLES_DELETE = "action:articles.delete"

    # ── PII ─────────────────────────────────────────────
    PII_VIEW_FULL = "pii:view.full"  # Unmasked personal data
    PII_VIEW_PARTIAL = "pii:view.partial"  # Masked personal data
    PII_EXPORT = "pii:data.export"
    PII_DOWNLOAD = "pii:data.download"

    # ── Builders ────────────────────────────────────────

    @staticmethod
    def build(kind: str, resource: str, action: str) -> str:
        """Build a permission key from its parts.

        Args:
            kind: One of :class:`PermissionKind` values.
            resource: Dotted resource path (e.g. ``"dashboard.ops"``).
            action: Operation name (e.g. ``"view"``, ``"delete"``).

        Returns:
            Permission key like ``"action:users.delete"``.
        """
        return f"{kind}:{resource}.{action}"

    @staticmethod
    def menu(resource: str, action: str = "view") -> str:
        return Permissions.build(PermissionKind.MENU, resource, action)

    @staticmethod
    def page(resource: str, action: str = "view") -> str:
        return Permissions.build(PermissionKind.PAGE, resource, action)

    @staticmethod
    def action(resource: str, action: str) -> str:
        return Permissions.build(PermissionKind.ACTION, resource, action)

    @staticmethod
    def pii(resource: str, action: str) -> str:
        return Permissions.build(PermissionKind.PII, resource, action)


# Every key defined on Permissions
PERMISSION_CATALOG: frozenset[str] = frozenset(
    value
    for name, value in vars(Permissions).items()
    if name.isupper() and isinstance(value, str)
)


def parse_permission_key(key: str) -> tuple[str, str, str]:
    """Split a permission key into ``(kind, resource, action)``.

    Raises:
        ValueError: If ``key`` is not formatted ``kind:resource.action``.

    Example::

        >>> parse_permission_key("menu:dashboard.ops.view")
        ('menu', 'dashboard.ops', 'view')
    """
    match = _KEY_PATTERN.match(key or "")
    if match is None:
        raise ValueError(f"Malformed permission key: {key!r}")
    return match.group(1), match.group(2), match.group(3)


def is_well_formed_permission_key(key: str) -> bool:
    """Check the ``kind:resource.action`` shape without consulting the catalog."""
    return isinstance(key, str) and _KEY_PATTERN.match(key) is not None


def is_valid_permission_key(key: str) -> bool:
    """Check catalog membership."""
    return key in PERMISSION_CATALOG


def is_well_formed_route_key(key: str) -> bool:
    """Check the dotted route key shape (``"users.list"``)."""
    return isinstance(key, str) and _ROUTE_KEY_PATTERN.match(key) is not None


__all__ = [
    "PERMISSION_CATALOG",
    "PermissionKind",
    "Permissions",
    "is_valid_permission_key",
    "is_well_formed_permission_key",
    "is_well_formed_route_key",
    "parse_permission_key",
]
