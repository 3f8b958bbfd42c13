"""Configuration contract for the menu access engine.

Pydantic-validated settings shared by every component. Application code
receives an :class:`AccessConfig` instance; direct ``os.environ`` reads are
confined to :func:`load_access_config_from_env`.

Role/Grade tables and the menu tree are static configuration loaded once at
process start and are not part of this model.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

_TRUTHY = ("true", "1", "yes", "on")


class LogLevel(str, Enum):
    """Standard log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class AccessConfig(BaseModel):
    """Settings for logging, menu validation and landing resolution."""

    # Logging
    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level for the engine and its host application",
    )
    log_json: bool = Field(
        default=False,
        description="Use JSON log format (default: plain text)",
    )
    service_name: Optional[str] = Field(
        default=None,
        description="Logger name of the host application (e.g. 'admin-console')",
    )

    # Menu tree
    strict_menu_validation: bool = Field(
        default=True,
        description="Reject menu nodes whose required permissions are outside the catalog",
    )

    # Landing resolution
    landing_fallback_route_key: Optional[str] = Field(
        default=None,
        description="Route key returned when a principal has no reachable route",
    )

    # Overlay store
    seed_demo_policies: bool = Field(
        default=False,
        description="Seed the in-memory overlay store with the demo user policies",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str | LogLevel) -> LogLevel:
        """Convert string to LogLevel enum."""
        if isinstance(v, LogLevel):
            return v
        if isinstance(v, str):
            try:
                return LogLevel[v.upper()]
            except KeyError:
                raise ValueError(f"Invalid log level: {v}. Must be one of {[e.value for e in LogLevel]}")
        raise ValueError(f"Log level must be string or LogLevel enum, got {type(v)}")

    @field_validator("landing_fallback_route_key")
    @classmethod
    def validate_fallback_route_key(cls, v: Optional[str]) -> Optional[str]:
        """Blank fallback route keys mean "no fallback"."""
        if v is None:
            return v
        v = v.strip()
        return v or None

    model_config = {
        "use_enum_values": True,
        "extra": "forbid",
    }


def load_access_config_from_env() -> AccessConfig:
    """Load configuration from environment variables.

    This is the ONLY place where os.getenv is allowed for engine settings.

    Environment variables:
    - LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - LOG_JSON: Use JSON log format (true/false, default: false)
    - SERVICE_NAME: Logger name of the host application
    - MENU_STRICT_VALIDATION: Validate menu permissions against the catalog (default: true)
    - MENU_LANDING_FALLBACK: Fallback landing route key
    - MENU_SEED_DEMO_POLICIES: Seed demo overlays in the in-memory store (default: false)

    Returns:
        AccessConfig instance with values from environment or defaults.
    """
    import os

    return AccessConfig(
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_json=os.getenv("LOG_JSON", "false").lower() in _TRUTHY,
        service_name=os.getenv("SERVICE_NAME"),
        strict_menu_validation=os.getenv("MENU_STRICT_VALIDATION", "true").lower() in _TRUTHY,
        landing_fallback_route_key=os.getenv("MENU_LANDING_FALLBACK"),
        seed_demo_policies=os.getenv("MENU_SEED_DEMO_POLICIES", "false").lower() in _TRUTHY,
    )


__all__ = [
    "AccessConfig",
    "LogLevel",
    "load_access_config_from_env",
]
