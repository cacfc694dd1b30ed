"""Free-text search across columns and related records.

Components:
- types: PriorityMode, Ordered/Ranked column specs, EffectiveSearchConfig
- resolver: choose one target source and normalize it
- composer: build the OR-group of column and EXISTS predicates
- scope: the search() operation (short-circuit + resolve + compose)
- mixins: SearchableMixin with a chainable Model.search() classmethod

Usage:
    from searchable_scope.core.database.search import SearchableMixin, search

    stmt = search(select(Product), "lap", ["name"], {"category": ["name"]})
    stmt = Product.search("lap", priority="model")
"""

from __future__ import annotations

from searchable_scope.core.database.search.composer import (
    PATTERN_OPERATOR,
    SUPPORTED_OPERATORS,
    build_condition,
    column_predicate,
    compose,
    normalize_operator,
    relation_predicate,
)
from searchable_scope.core.database.search.mixins import SearchableDeclaration, SearchableMixin
from searchable_scope.core.database.search.resolver import (
    normalize_columns,
    normalize_relations,
    resolve,
)
from searchable_scope.core.database.search.scope import (
    infer_entity,
    is_searchable_term,
    model_search_targets,
    resolve_request,
    search,
)
from searchable_scope.core.database.search.types import (
    ColumnSpec,
    EffectiveSearchConfig,
    Ordered,
    PriorityMode,
    Ranked,
    SearchRequest,
    as_column_spec,
    as_relation_spec,
)

__all__ = [
    "PATTERN_OPERATOR",
    "SUPPORTED_OPERATORS",
    "ColumnSpec",
    "EffectiveSearchConfig",
    "Ordered",
    "PriorityMode",
    "Ranked",
    "SearchRequest",
    "SearchableDeclaration",
    "SearchableMixin",
    "as_column_spec",
    "as_relation_spec",
    "build_condition",
    "column_predicate",
    "compose",
    "infer_entity",
    "is_searchable_term",
    "model_search_targets",
    "normalize_columns",
    "normalize_operator",
    "normalize_relations",
    "relation_predicate",
    "resolve",
    "resolve_request",
    "search",
]
