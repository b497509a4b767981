"""
Logging configuration for the bridge test harness.

Provides consistent logging format across all modules with:
- JSON shaped output for CI log collectors
- Human-readable output for local runs
- Automatic redaction of sensitive fields
"""

import logging
import sys
from datetime import UTC, datetime
from typing import Any

# Fields that should be redacted in logs
REDACTED_FIELDS = {
    "password",
    "api_key",
    "apikey",
    "api-key",
    "secret",
    "token",
    "authorization",
    "credential",
    "private_key",
}

REDACTED = "[REDACTED]"


def _is_sensitive(name: str) -> bool:
    lower_name = name.lower()
    return any(redact in lower_name for redact in REDACTED_FIELDS)


def redact_sensitive(data: Any, depth: int = 0) -> Any:
    """
    Recursively redact sensitive fields from data structures.

    Args:
        data: Data to redact (dict, list, or scalar)
        depth: Current recursion depth (prevents infinite recursion)

    Returns:
        Data with sensitive fields replaced with "[REDACTED]"
    """
    if depth > 10:
        return data

    if isinstance(data, dict):
        return {
            k: REDACTED if _is_sensitive(str(k)) else redact_sensitive(v, depth + 1)
            for k, v in data.items()
        }
    elif isinstance(data, list):
        return [redact_sensitive(item, depth + 1) for item in data]
    return data


def redact_headers(headers: dict[str, str]) -> dict[str, str]:
    """Redact sensitive values from a headers dict."""
    return {k: REDACTED if _is_sensitive(k) else v for k, v in headers.items()}


class HarnessFormatter(logging.Formatter):
    """
    Custom formatter for harness logs.

    Includes timestamp, level, module and message.
    """

    def format(self, record: logging.LogRecord) -> str:
        # Add timestamp in ISO format
        record.timestamp = datetime.now(UTC).isoformat()
        return super().format(record)


def setup_logging(level: str = "INFO", json_output: bool = False) -> logging.Logger:
    """
    Configure logging for the harness.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: If True, output JSON format

    Returns:
        Configured root logger
    """
    # Clear any existing handlers
    root = logging.getLogger()
    root.handlers.clear()

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)

    if json_output:
        fmt = (
            '{"timestamp": "%(timestamp)s", "level": "%(levelname)s", '
            '"module": "%(name)s", "message": "%(message)s"}'
        )
    else:
        fmt = "%(timestamp)s | %(levelname)-8s | %(name)s | %(message)s"

    handler.setFormatter(HarnessFormatter(fmt))
    root.addHandler(handler)

    # Suppress noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    return root


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
