"""Default application menu.

Four levels deep at most::

    Dashboard (category)
      Main dashboard (page)
    Grid samples (category)
      Advanced patterns (group)
        Multi grid (group)
          Multi Grid Tabs (page)

Kept as plain configuration dicts so the same shape can be loaded from a
file; ``DEFAULT_MENU_TREE`` is the validated tree built from it.
"""

from __future__ import annotations

from typing import Any

from ..permissions.constants import Permissions as P
from .tree import MenuTree, menu_tree_from_dicts

DEFAULT_MENU_CONFIG: tuple[dict[str, Any], ...] = (
    {
        "id": "category-dashboard",
        "type": "category",
        "label": "Dashboard",
        "order": 1,
        "children": [
            {
                "id": "page-dashboard-main",
                "type": "page",
                "label": "Main dashboard",
                "routeKey": "dashboard.main",
                "requiredPermissions": [P.MENU_DASHBOARD_VIEW],
                "order": 1,
            },
            {
                "id": "page-dashboard-ops",
                "type": "page",
                "label": "Operations dashboard",
                "routeKey": "dashboard.ops",
                "requiredPermissions": [P.ACTION_DASHBOARD_OPS_VIEW],
                "badge": "Beta",
                "order": 2,
            },
        ],
    },
    {
        "id": "category-user-auth",
        "type": "category",
        "label": "Users / Permissions",
        "order": 10,
        "requiredPermissions": [P.MENU_USERS_VIEW],
        "children": [
            {
                "id": "menu-users",
                "type": "menu",
                "label": "User management",
                "order": 1,
                "children": [
                    {
                        "id": "page-users-list",
                        "type": "page",
                        "label": "User list",
                        "routeKey": "users.list",
                        "requiredPermissions": [P.PAGE_USERS_LIST_VIEW],
                        "order": 1,
                    },
                    {
                        "id": "page-users-dialog",
                        "type": "page",
                        "label": "User CRUD (dialog)",
                        "routeKey": "users.dialog",
                        "requiredPermissions": [P.PAGE_USERS_LIST_VIEW],
                        "order": 2,
                    },
                ],
            },
            {
                "id": "menu-auth",
                "type": "menu",
                "label": "Permission management",
                "order": 2,
                "requiredPermissions": [P.MENU_AUTH_VIEW],
                "children": [
                    {
                        "id": "page-role-designer",
                        "type": "page",
                        "label": "Role / permission designer",
                        "routeKey": "auth.role.designer",
                        "requiredPermissions": [P.PAGE_AUTH_ROLE_DESIGNER_VIEW],
                        "badge": "New",
                        "order": 1,
                    },
                ],
            },
        ],
    },
    {
        "id": "category-data",
        "type": "category",
        "label": "Data management",
        "order": 20,
        "children": [
            {
                "id": "page-products",
                "type": "page",
                "label": "Products",
                "routeKey": "products.crud",
                "requiredPermissions": [P.MENU_PRODUCTS_VIEW],
                "badge": "CRUD",
                "order": 1,
            },
            {
                "id": "page-articles",
                "type": "page",
                "label": "Articles",
                "routeKey": "articles.list",
                "requiredPermissions": [P.MENU_ARTICLES_VIEW],
                "order": 2,
            },
            {
                "id": "page-schedules",
                "type": "page",
                "label": "Schedules",
                "routeKey": "schedules.main",
                "requiredPermissions": [P.MENU_SCHEDULES_VIEW],
                "order": 3,
            },
        ],
    },
    {
        "id": "category-grid",
        "type": "category",
        "label": "Grid samples",
        "order": 30,
        "badge": "Lab",
        "requiredPermissions": [P.MENU_GRID_SAMPLES_VIEW],
        "children": [
            {
                "id": "menu-grid-basic",
                "type": "menu",
                "label": "Basic patterns",
                "order": 1,
                "children": [
                    {"id": "page-grid-ag-basic", "type": "page", "label": "AG Grid basics",
                     "requiredPermissions": [P.PAGE_GRID_SAMPLES_VIEW],
                     "routeKey": "grid.samples.ag.basic", "order": 1},
                    {"id": "page-grid-tanstack-basic", "type": "page", "label": "TanStack Table basics",
                     "requiredPermissions": [P.PAGE_GRID_SAMPLES_VIEW],
                     "routeKey": "grid.samples.tanstack.basic", "order": 2},
                    {"id": "page-grid-ag-aggregation", "type": "page", "label": "Grouping & aggregation",
                     "requiredPermissions": [P.PAGE_GRID_SAMPLES_VIEW],
                     "routeKey": "grid.samples.ag.aggregation", "order": 3},
                    {"id": "page-grid-tanstack-role", "type": "page", "label": "Role-based columns",
                     "requiredPermissions": [P.PAGE_GRID_SAMPLES_VIEW],
                     "routeKey": "grid.samples.tanstack.role", "order": 4},
                ],
            },
            {
                "id": "menu-grid-editing",
                "type": "menu",
                "label": "Editing patterns",
                "order": 2,
                "children": [
                    {"id": "page-grid-ag-editing", "type": "page", "label": "Inline editing",
                     "requiredPermissions": [P.PAGE_GRID_SAMPLES_VIEW],
                     "routeKey": "grid.samples.ag.editing", "order": 1},
                    {"id": "page-grid-form-like", "type": "page", "label": "Form-like grid",
                     "requiredPermissions": [P.PAGE_GRID_SAMPLES_VIEW],
                     "routeKey": "grid.samples.form.like", "order": 2},
                ],
            },
            {
                "id": "menu-grid-advanced",
                "type": "menu",
                "label": "Advanced patterns",
                "order": 3,
                "children": [
                    {"id": "page-grid-infinite", "type": "page", "label": "Infinite scroll",
                     "requiredPermissions": [P.PAGE_GRID_SAMPLES_VIEW],
                     "routeKey": "grid.samples.infinite", "order": 1},
                    {"id": "page-grid-pivot-chart", "type": "page", "label": "Chart integration",
                     "requiredPermissions": [P.PAGE_GRID_SAMPLES_VIEW],
                     "routeKey": "grid.samples.pivot.chart", "order": 2},
                    {"id": "page-grid-tree", "type": "page", "label": "Tree data",
                     "requiredPermissions": [P.PAGE_GRID_SAMPLES_VIEW],
                     "routeKey": "grid.samples.tree", "order": 3},
                    {
                        "id": "menu-grid-multi",
                        "type": "menu",
                        "label": "Multi grid",
                        "order": 4,
                        "children": [
                            {"id": "page-grid-multi-tabs", "type": "page", "label": "Multi Grid Tabs",
                             "requiredPermissions": [P.PAGE_GRID_SAMPLES_VIEW],
                             "routeKey": "grid.samples.multi.tabs", "order": 1},
                            {"id": "page-grid-master-detail", "type": "page", "label": "Master-detail",
                             "requiredPermissions": [P.PAGE_GRID_SAMPLES_VIEW],
                             "routeKey": "grid.samples.master.detail", "badge": "New", "order": 2},
                            {"id": "page-grid-row-detail", "type": "page", "label": "Row detail modal",
                             "requiredPermissions": [P.PAGE_GRID_SAMPLES_VIEW],
                             "routeKey": "grid.samples.row.detail", "order": 3},
                        ],
                    },
                ],
            },
            {
                "id": "menu-grid-state",
                "type": "menu",
                "label": "State management",
                "order": 4,
                "children": [
                    {"id": "page-grid-filter-playground", "type": "page", "label": "Filter playground",
                     "requiredPermissions": [P.PAGE_GRID_SAMPLES_VIEW],
                     "routeKey": "grid.samples.filter.playground", "order": 1},
                    {"id": "page-grid-global-state", "type": "page", "label": "Global state",
                     "requiredPermissions": [P.PAGE_GRID_SAMPLES_VIEW],
                     "routeKey": "grid.samples.global.state", "badge": "New", "order": 2},
                ],
            },
        ],
    },
    {
        "id": "category-notifications",
        "type": "category",
        "label": "Notifications",
        "order": 40,
        "requiredPermissions": [P.MENU_NOTIFICATIONS_VIEW],
        "children": [
            {
                "id": "page-notification-templates",
                "type": "page",
                "label": "Notification templates",
                "routeKey": "notifications.templates",
                "requiredPermissions": [P.PAGE_NOTIFICATIONS_TEMPLATES_VIEW],
                "order": 1,
            },
        ],
    },
    {
        "id": "category-system",
        "type": "category",
        "label": "System",
        "order": 100,
        "requiredPermissions": [P.MENU_SYSTEM_VIEW],
        "children": [
            {
                "id": "page-menu-management",
                "type": "page",
                "label": "Menu management",
                "routeKey": "system.menu.management",
                "requiredPermissions": [P.PAGE_MENU_MANAGEMENT_VIEW],
                "order": 1,
            },
            {
                "id": "page-system-settings",
                "type": "page",
                "label": "System settings",
                "routeKey": "system.settings",
                "requiredPermissions": [P.PAGE_SYSTEM_SETTINGS_VIEW],
                "order": 2,
            },
        ],
    },
    {
        "id": "category-dev-tools",
        "type": "category",
        "label": "Developer tools",
        "order": 110,
        "requiredPermissions": [P.MENU_DEV_TOOLS_VIEW],
        "children": [
            {
                "id": "page-swagger-playground",
                "type": "page",
                "label": "Swagger playground",
                "routeKey": "tools.swagger",
                "requiredPermissions": [P.PAGE_SWAGGER_PLAYGROUND_VIEW],
                "order": 1,
            },
        ],
    },
    {
        "id": "category-docs",
        "type": "category",
        "label": "Docs / Tools",
        "order": 120,
        "children": [
            {
                "id": "page-help",
                "type": "page",
                "label": "Help",
                "routeKey": "help.main",
                "order": 1,
            },
            {
                "id": "external-swagger",
                "type": "external",
                "label": "API docs (external)",
                "href": "https://api.example.com/swagger",
                "target": "_blank",
                "requiredPermissions": [P.MENU_DOCS_SWAGGER_VIEW],
                "order": 2,
            },
        ],
    },
    {
        "id": "category-dev",
        "type": "category",
        "label": "Dev / Playground",
        "order": 200,
        "badge": "Dev",
        "children": [
            {
                "id": "page-dev-menu-playground",
                "type": "page",
                "label": "Menu / permission playground",
                "routeKey": "dev.menu.playground",
                "badge": "New",
                "order": 1,
            },
        ],
    },
)

DEFAULT_MENU_TREE: MenuTree = menu_tree_from_dicts(DEFAULT_MENU_CONFIG)


__all__ = ["DEFAULT_MENU_CONFIG", "DEFAULT_MENU_TREE"]
