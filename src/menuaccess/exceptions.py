"""Exception hierarchy for the menu access engine.

The resolution engine itself is total: expired or missing overlays,
conflicting allow/deny entries and unknown route keys are ordinary inputs,
never errors. Exceptions are reserved for:
- construction-time contract violations (a malformed menu tree),
- invalid configuration,
- failures of the overlay repository collaborator.

Usage:
    from menuaccess.exceptions import MenuAccessError, MenuTreeError
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "MenuAccessError",
    "ConfigurationError",
    "MenuTreeError",
    "PolicyValidationError",
    "PolicyStoreError",
]


# ---- Exception Hierarchy ----------------------------------------------------


class MenuAccessError(Exception):
    """Base exception for the menu access engine.

    Attributes:
        code: Stable error code string (e.g. "MENU_TREE_ERROR").
        message: Human-readable error description.
        details: Additional context as keyword arguments.
    """

    code: str = "INTERNAL_ERROR"
    message: str = "An internal error occurred"

    def __init__(self, message: str | None = None, code: str | None = None, **kwargs: Any) -> None:
        self.message = message or self.message
        self.code = code or self.code
        self.details = kwargs
        super().__init__(self.message)


class ConfigurationError(MenuAccessError):
    """Invalid or missing configuration."""

    code: str = "CONFIGURATION_ERROR"


class MenuTreeError(ConfigurationError):
    """Menu tree violates its structural invariants."""

    code: str = "MENU_TREE_ERROR"


class PolicyValidationError(MenuAccessError):
    """User menu policy record is malformed."""

    code: str = "POLICY_VALIDATION_ERROR"


class PolicyStoreError(MenuAccessError):
    """Overlay repository could not complete an operation."""

    code: str = "POLICY_STORE_ERROR"

