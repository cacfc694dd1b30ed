"""Logging configuration setup.

Configures the root logger through logging.config.dictConfig with a
single console handler. Library modules only ever call
``logging.getLogger(__name__)``; applications (and the CLI) decide where
records go by calling setup_logging() once.

The ``searchable_scope`` logger can be opened up to DEBUG on its own
(``search_debug``) to see resolved search targets and compiled search
conditions without turning on DEBUG for everything else.
"""

from __future__ import annotations

import logging
import logging.config
from typing import TYPE_CHECKING, Any

logger = logging.getLogger(__name__)
_LOGGING_INITIALIZED = False

SEARCH_LOGGER = "searchable_scope"

if TYPE_CHECKING:
    from searchable_scope.core.settings.logs import LoggingSettings


def setup_logging(
    log_settings: LoggingSettings | None = None,
    *,
    force: bool = False,
    **configure_kwargs: Any,
) -> None:
    """Ensure logging is configured once across entrypoints.

    Args:
        log_settings: Optional logging settings instance. If omitted, settings
            are loaded via get_logging_settings().
        force: Reconfigure logging even if it was already initialized.
        **configure_kwargs: Explicit overrides for configure_logging().
    """
    global _LOGGING_INITIALIZED

    if _LOGGING_INITIALIZED and not force:
        return

    settings_obj = log_settings
    if settings_obj is None:
        from searchable_scope.core.settings import get_logging_settings

        settings_obj = get_logging_settings()

    configure_logging(**{**settings_obj.to_logging_kwargs(), **configure_kwargs})
    _LOGGING_INITIALIZED = True


def configure_logging(
    log_level: str = "INFO",
    json_logs: bool = False,
    service_name: str = "searchable-scope",
    include_function_name: bool = False,
    capture_warnings: bool = True,
    search_debug: bool = False,
    **kwargs: Any,
) -> None:
    """Configure the root logger with dictConfig.

    Args:
        log_level: Root logger level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_logs: Emit JSON Lines instead of plain text.
        service_name: Static "service" field for JSON records.
        include_function_name: Include function name in records (adds overhead).
        capture_warnings: Forward Python warnings to logging system.
        search_debug: Log the searchable_scope package at DEBUG.
        **kwargs: Ignored; logged at DEBUG so typos are visible.

    Example:
        configure_logging(log_level="WARNING", search_debug=True)
    """
    logging.captureWarnings(capture_warnings)

    config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": _build_formatters_config(
            json_logs=json_logs,
            service_name=service_name,
            include_function_name=include_function_name,
        ),
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json" if json_logs else "text",
                # Loggers filter by level; the handler must not drop search DEBUG records
                "level": "DEBUG" if search_debug else log_level,
                "stream": "ext://sys.stderr",
            },
        },
        "root": {"level": log_level, "handlers": ["console"]},
    }
    if search_debug:
        config["loggers"] = {SEARCH_LOGGER: {"level": "DEBUG"}}

    logging.config.dictConfig(config)

    if kwargs:
        logger.debug("Unused logging kwargs supplied: %s", ", ".join(sorted(kwargs)))


def _build_formatters_config(
    json_logs: bool,
    service_name: str,
    include_function_name: bool,
) -> dict[str, Any]:
    """Build the single formatter entry used by the console handler."""
    if json_logs:
        fmt_keys = {"level": "levelname", "logger": "name", "message": "message"}
        if include_function_name:
            fmt_keys["function"] = "funcName"
        return {
            "json": {
                "()": "searchable_scope.infra.logging.formatters.JSONFormatter",
                "fmt_keys": fmt_keys,
                "static": {"service": service_name},
            }
        }

    fields = ["%(asctime)s", "%(levelname)s", "%(name)s"]
    if include_function_name:
        fields.append("%(funcName)s")
    fields.append("%(message)s")
    return {"text": {"format": " - ".join(fields), "datefmt": "%Y-%m-%d %H:%M:%S"}}


def reset_logging_state() -> None:
    """Allow setup_logging() to run again (used by tests)."""
    global _LOGGING_INITIALIZED
    _LOGGING_INITIALIZED = False
