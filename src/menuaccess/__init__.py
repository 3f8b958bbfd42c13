from .config import AccessConfig, LogLevel, load_access_config_from_env
from .exceptions import (
    ConfigurationError,
    MenuAccessError,
    MenuTreeError,
    PolicyStoreError,
    PolicyValidationError,
)
from .logging import (
    safe_preview,
    safe_log_value,
    AccessLogFormatter,
    AccessLoggerAdapter,
    setup_logging,
    get_access_logger,
)
from .permissions import (
    GRADE_PERMISSION_BOOST,
    PERMISSION_CATALOG,
    ROLE_PERMISSION_MAP,
    Grade,
    Permissions,
    Role,
    can_perform_action,
    has_all,
    has_any,
    resolve,
)
from .policy import (
    InMemoryUserMenuPolicyRepository,
    UserMenuPolicy,
    UserMenuPolicyInput,
    UserMenuPolicyRepository,
)
from .menu import (
    DEFAULT_MENU_TREE,
    CategoryNode,
    ExternalNode,
    GroupNode,
    MenuTree,
    NodeVisibility,
    PageNode,
    RouteAccessGuard,
    evaluate,
    filter_menu_tree,
    menu_tree_from_dicts,
)
from .service import AccessContext, MenuAccessService, get_access_service, reset_access_service

__all__ = [
    'AccessConfig',
    'LogLevel',
    'load_access_config_from_env',
    'MenuAccessError',
    'ConfigurationError',
    'MenuTreeError',
    'PolicyValidationError',
    'PolicyStoreError',
    'safe_preview',
    'safe_log_value',
    'AccessLogFormatter',
    'AccessLoggerAdapter',
    'setup_logging',
    'get_access_logger',
    'Permissions',
    'PERMISSION_CATALOG',
    'Role',
    'Grade',
    'ROLE_PERMISSION_MAP',
    'GRADE_PERMISSION_BOOST',
    'resolve',
    'has_all',
    'has_any',
    'can_perform_action',
    'UserMenuPolicy',
    'UserMenuPolicyInput',
    'UserMenuPolicyRepository',
    'InMemoryUserMenuPolicyRepository',
    'MenuTree',
    'CategoryNode',
    'GroupNode',
    'PageNode',
    'ExternalNode',
    'DEFAULT_MENU_TREE',
    'menu_tree_from_dicts',
    'NodeVisibility',
    'evaluate',
    'filter_menu_tree',
    'RouteAccessGuard',
    'AccessContext',
    'MenuAccessService',
    'get_access_service',
    'reset_access_service',
]
