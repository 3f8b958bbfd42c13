"""Per-user menu policy overlay: record models and the repository boundary."""

from .models import (
    UserMenuPolicy,
    UserMenuPolicyInput,
    effective_overlay,
    parse_policy_record,
)
from .repository import (
    DEMO_USER_POLICIES,
    InMemoryUserMenuPolicyRepository,
    UserMenuPolicyRepository,
)

__all__ = [
    "DEMO_USER_POLICIES",
    "InMemoryUserMenuPolicyRepository",
    "UserMenuPolicy",
    "UserMenuPolicyInput",
    "UserMenuPolicyRepository",
    "effective_overlay",
    "parse_policy_record",
]
