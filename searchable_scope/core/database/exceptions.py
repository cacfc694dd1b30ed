"""Searchable scope exceptions.

Errors raised at the API boundary when search input cannot be interpreted.
The search path itself never raises for anomalies: short terms return the
statement unchanged and empty targets attach an all-excluding filter.
"""
from __future__ import annotations

from typing import Any


class SearchableError(Exception):
    """Base exception for searchable scope operations.

    Raised when search input is malformed in a way that cannot be
    expressed as a query condition.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """Initialize searchable error.

        Args:
            message: Error description
            details: Additional context about the error
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Format error message with details."""
        if self.details:
            details_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class InvalidColumnSpecError(SearchableError):
    """Column or relation specification has an unusable shape.

    Raised for non-string column names, non-numeric ranks, or relation
    specifications that are not mappings.
    """

    def __init__(self, message: str, value: Any = None, relation: str | None = None):
        """Initialize invalid column spec error.

        Args:
            message: Error description
            value: The offending value
            relation: Relation path the value belongs to (if any)
        """
        details: dict[str, Any] = {"value": value}
        if relation is not None:
            details["relation"] = relation
        super().__init__(message, details=details)
        self.value = value
        self.relation = relation


class InvalidFilterError(SearchableError):
    """The search filter cannot be attached to the given statement.

    Raised when no entity is passed and none can be inferred from the
    statement's column descriptions.
    """

    def __init__(self, message: str, filter_name: str | None = None):
        """Initialize invalid filter error.

        Args:
            message: Error description
            filter_name: Name of the problematic filter (if applicable)
        """
        details = {"filter": filter_name} if filter_name else {}
        super().__init__(message, details=details)


class UnsupportedOperatorError(SearchableError):
    """Comparison operator is not in the supported allowlist.

    Raised before any SQL is built, so an arbitrary string never reaches
    ``ColumnOperators.op()``.
    """

    def __init__(self, message: str, operator: Any = None):
        super().__init__(message, details={"operator": operator})
        self.operator = operator


__all__ = [
    "InvalidColumnSpecError",
    "InvalidFilterError",
    "SearchableError",
    "UnsupportedOperatorError",
]
