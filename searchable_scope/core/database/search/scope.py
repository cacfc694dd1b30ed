"""The search operation.

Ties the pieces together for one call:

1. Build a SearchRequest and short-circuit when its term is missing or
   shorter than min_term_length (the statement is returned as-is, same object).
2. Resolve search targets for the SearchRequest from exactly one source.
3. Compose and attach the condition.

Usage:
    from sqlalchemy import select
    from searchable_scope.core.database.search import search

    stmt = search(select(Product), "lap", ["name", "sku"], {"category": ["name"]})
    stmt = stmt.order_by(Product.name).limit(20)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from searchable_scope.core.database.exceptions import InvalidFilterError
from searchable_scope.core.database.search.composer import compose
from searchable_scope.core.database.search.resolver import resolve
from searchable_scope.core.database.search.types import PriorityMode, SearchRequest

if TYPE_CHECKING:
    from sqlalchemy import Select

    from searchable_scope.core.database.search.composer import SearchTrace
    from searchable_scope.core.database.search.types import (
        ColumnSpecInput,
        EffectiveSearchConfig,
        RelationSpecInput,
    )
    from searchable_scope.core.settings.search import SearchableSettings

logger = logging.getLogger(__name__)


def is_searchable_term(term: str | None, min_length: int) -> bool:
    """True when the term is present and long enough.

    Whitespace is not trimmed: "   " counts as three characters.
    """
    return SearchRequest(term).is_searchable(min_length)


def infer_entity(statement: Select[Any]) -> Any:
    """Return the mapped class a statement selects from.

    Raises:
        InvalidFilterError: If the statement's first column has no entity.
    """
    descriptions = statement.column_descriptions
    entity = descriptions[0].get("entity") if descriptions else None
    if entity is None:
        msg = "Cannot infer the searched entity from the statement; pass entity= explicitly"
        raise InvalidFilterError(msg, filter_name="search")
    return entity


def model_search_targets(entity: Any) -> tuple[Any, Any]:
    """Read the model's ``__searchable__`` declaration.

    A missing declaration (or a missing key) yields empty targets.
    """
    declared = getattr(entity, "__searchable__", None) or {}
    return declared.get("columns"), declared.get("relations")


def resolve_request(
    request: SearchRequest,
    entity: Any,
    settings: SearchableSettings,
) -> EffectiveSearchConfig:
    """Resolve a request's targets against the model and the settings.

    The model declaration is only read under "model" priority.
    """
    model_columns = model_relations = None
    if request.priority is PriorityMode.MODEL:
        model_columns, model_relations = model_search_targets(entity)

    return resolve(
        request.priority,
        param_columns=request.columns,
        param_relations=request.relations,
        model_columns=model_columns,
        model_relations=model_relations,
        config_columns=settings.default_columns,
        config_relations=settings.default_relations,
    )


def search(
    statement: Select[Any],
    term: str | None,
    columns: ColumnSpecInput = (),
    relations: RelationSpecInput = None,
    priority: PriorityMode | str = PriorityMode.PARAMS,
    *,
    entity: Any = None,
    settings: SearchableSettings | None = None,
    trace: SearchTrace | None = None,
) -> Select[Any]:
    """Restrict a statement to rows matching a free-text term.

    Args:
        statement: Statement to restrict; returned unchanged on short-circuit.
        term: Search term (not trimmed).
        columns: Columns to search under "params" priority.
        relations: Relation path to columns under "params" priority.
        priority: "params", "model" or "config"; anything else means "params".
        entity: Mapped class owning the columns (default: inferred from statement).
        settings: Configuration snapshot (default: cached SearchableSettings).
        trace: Optional hook called with the resolved config and the condition.

    Returns:
        Statement with one extra AND-ed OR-group, or the input statement.

    Example:
        stmt = search(
            select(Product).where(Product.active.is_(True)),
            "lap",
            {"name": 1, "sku": 2},
            {"category.parent": "name"},
        )
    """
    if settings is None:
        from searchable_scope.core.settings.loader import get_searchable_settings

        settings = get_searchable_settings()

    request = SearchRequest(term, columns, relations, priority)
    if not request.is_searchable(settings.min_term_length):
        logger.debug(
            "Search term below minimum length; statement left unmodified",
            extra={"min_term_length": settings.min_term_length},
        )
        return statement

    target = entity if entity is not None else infer_entity(statement)
    return compose(
        statement,
        target,
        resolve_request(request, target, settings),
        request.term,
        operator=settings.default_operator,
        case_sensitive=settings.case_sensitive,
        trace=trace,
    )


__all__ = [
    "infer_entity",
    "is_searchable_term",
    "model_search_targets",
    "resolve_request",
    "search",
]
