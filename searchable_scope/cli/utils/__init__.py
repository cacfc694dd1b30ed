"""CLI utilities for formatting output."""

from searchable_scope.cli.utils.formatters import (
    error,
    header,
    info,
    key_value_table,
    search_targets,
    sql,
    success,
    warning,
)

__all__ = [
    "error",
    "header",
    "info",
    "key_value_table",
    "search_targets",
    "sql",
    "success",
    "warning",
]
