"""Logging infrastructure.

Provides:
- dictConfig-based setup driven by LoggingSettings (LOG_* env vars)
- JSONL formatter for log aggregation
- Lazy evaluation for expensive debug output (compiled SQL)

Basic usage:
    import logging

    from searchable_scope.infra.logging import setup_logging

    setup_logging()
    logger = logging.getLogger(__name__)
    logger.info("Ready")
"""

from searchable_scope.infra.logging.config import (
    configure_logging,
    reset_logging_state,
    setup_logging,
)
from searchable_scope.infra.logging.formatters import JSONFormatter
from searchable_scope.infra.logging.lazy import LazyString, lazy, lazy_sql

__all__ = [
    "JSONFormatter",
    "LazyString",
    "configure_logging",
    "lazy",
    "lazy_sql",
    "reset_logging_state",
    "setup_logging",
]
