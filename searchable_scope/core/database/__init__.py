"""Core database package: searchable scope for SQLAlchemy statements.

Query Filters:
    - StatementFilter: Base class for composable statement filters
    - SearchableFilter: Free-text search across columns and relations

Search:
    - search: Restrict a select() by search term
    - SearchableMixin: Model.search() classmethod and __searchable__ declaration
    - PriorityMode: params / model / config target selection
    - Ordered, Ranked: Explicit column specifications
    - EffectiveSearchConfig: Resolved search targets

Exceptions:
    - SearchableError: Base exception
    - InvalidColumnSpecError: Malformed column or relation specification
    - InvalidFilterError: Filter cannot be attached to the statement
    - UnsupportedOperatorError: Operator outside the supported allowlist

Example:
    from sqlalchemy import select
    from searchable_scope.core.database import SearchableFilter

    stmt = SearchableFilter("lap", ["name"]).apply(select(Product))
"""

from __future__ import annotations

from searchable_scope.core.database.exceptions import (
    InvalidColumnSpecError,
    InvalidFilterError,
    SearchableError,
    UnsupportedOperatorError,
)
from searchable_scope.core.database.filters import SearchableFilter, StatementFilter
from searchable_scope.core.database.search import (
    EffectiveSearchConfig,
    Ordered,
    PriorityMode,
    Ranked,
    SearchableMixin,
    search,
)

__all__ = [
    "EffectiveSearchConfig",
    "InvalidColumnSpecError",
    "InvalidFilterError",
    "Ordered",
    "PriorityMode",
    "Ranked",
    "SearchableError",
    "SearchableFilter",
    "SearchableMixin",
    "StatementFilter",
    "UnsupportedOperatorError",
    "search",
]
