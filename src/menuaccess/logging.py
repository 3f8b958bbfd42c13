"""Logging utilities for the menu access engine.

This module provides:
- Logging configuration from AccessConfig
- Length-bounded previews of permission sets and policy records
- Structured (JSON) or plain formatting with the acting user id
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from .config import AccessConfig, LogLevel

# LogRecord attributes that are not user-supplied extras
_RESERVED_RECORD_KEYS = frozenset(
    {
        "name", "msg", "args", "created", "filename", "funcName",
        "levelname", "levelno", "lineno", "module", "msecs",
        "message", "pathname", "process", "processName", "relativeCreated",
        "thread", "threadName", "exc_info", "exc_text", "stack_info",
        "taskName", "user_id",
    }
)


def safe_preview(value: Any, limit: int = 240) -> str:
    """Create a single-line, length-bounded preview of a value for logging.

    Sets and frozensets are rendered sorted so that permission sets produce
    stable log lines.

    Args:
        value: The value to preview (any type)
        limit: Maximum length of the preview (default: 240)

    Returns:
        A truncated string representation
    """
    if value is None:
        return ""

    if isinstance(value, str):
        s = value
    elif isinstance(value, (set, frozenset)):
        s = json.dumps(sorted(value, key=str), default=str, ensure_ascii=False)
    elif isinstance(value, (dict, list, tuple)):
        try:
            s = json.dumps(value, default=str, ensure_ascii=False)
        except (TypeError, ValueError):
            s = str(value)
    else:
        s = str(value)

    s = " ".join(s.split())

    if len(s) > limit:
        return s[: limit - 1] + "…"

    return s


def safe_log_value(value: Any, limit: int = 240) -> str:
    """Preview used for structured extras attached to log records."""
    return safe_preview(value, limit=limit)


class AccessLogFormatter(logging.Formatter):
    """Formatter that emits JSON (default) or plain text with the user id."""

    def __init__(
        self,
        include_user_id: bool = True,
        json_format: bool = True,
        *args: Any,
        **kwargs: Any,
    ):
        super().__init__(*args, **kwargs)
        self.include_user_id = include_user_id
        self.json_format = json_format

    def format(self, record: logging.LogRecord) -> str:
        user_id = getattr(record, "user_id", None)

        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if self.include_user_id and user_id:
            log_data["user_id"] = str(user_id)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_RECORD_KEYS:
                log_data[key] = safe_log_value(value)

        if self.json_format:
            return json.dumps(log_data, default=str, ensure_ascii=False)

        parts = [
            f"[{log_data['timestamp']}]",
            f"{log_data['level']}",
            f"{log_data['logger']}",
        ]
        if "user_id" in log_data:
            parts.append(f"user_id={log_data['user_id']}")
        parts.append(f": {log_data['message']}")
        return " ".join(parts)


class AccessLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that attaches the acting user id to every record.

    Usage:
        logger = get_access_logger(__name__, user_id="user-1")
        logger.info("Resolved permissions")
    """

    def __init__(self, logger: logging.Logger, user_id: Optional[str] = None):
        super().__init__(logger, {})
        self.user_id = user_id

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        user_id = kwargs.pop("user_id", self.user_id)

        extra = kwargs.get("extra", {})
        if user_id:
            extra["user_id"] = user_id
        kwargs["extra"] = extra

        return msg, kwargs


def setup_logging(
    config: Optional[AccessConfig] = None,
    json_format: Optional[bool] = None,
) -> None:
    """Configure the root logger from AccessConfig.

    Args:
        config: AccessConfig instance (if None, loads from environment)
        json_format: Override ``config.log_json`` when given
    """
    if config is None:
        from .config import load_access_config_from_env

        config = load_access_config_from_env()

    level_name = LogLevel(config.log_level).value
    log_level = getattr(logging, level_name, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(
        AccessLogFormatter(
            include_user_id=True,
            json_format=config.log_json if json_format is None else json_format,
        )
    )
    root_logger.addHandler(console_handler)

    if config.service_name:
        logging.getLogger(config.service_name).setLevel(log_level)


def get_access_logger(name: str, user_id: Optional[str] = None) -> AccessLoggerAdapter:
    """Get a logger adapter bound to ``user_id``.

    Example:
        logger = get_access_logger(__name__, user_id=user_id)
        logger.debug("Overlay ignored (expired)")
    """
    return AccessLoggerAdapter(logging.getLogger(name), user_id=user_id)


__all__ = [
    "safe_preview",
    "safe_log_value",
    "AccessLogFormatter",
    "AccessLoggerAdapter",
    "setup_logging",
    "get_access_logger",
]
