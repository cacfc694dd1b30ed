"""Search predicate composition.

Turns resolved search targets into a single SQLAlchemy condition:

    (col_1 OP term) OR (col_2 OP term) OR ...
    OR EXISTS(relation_1 WHERE rel_col_1 OP term OR ...)
    OR EXISTS(relation_2 ...)

and attaches it to a statement with WHERE (AND semantics relative to the
conditions already present).

Case-insensitive comparisons wrap both sides in the backend's LOWER()
(LOWER(column) and LOWER(term)) instead of relying on its collation.
Folding the term in Python would disagree with backends whose LOWER()
only folds ASCII, such as SQLite.

Relation paths may be dotted ("category.parent"). Each segment becomes a
nested EXISTS through relationship.any() (collections) or
relationship.has() (scalar references).

Usage:
    from sqlalchemy import select
    from searchable_scope.core.database.search.composer import compose

    stmt = compose(
        select(Product),
        Product,
        EffectiveSearchConfig(columns=("name",), relations={"category": ("name",)}),
        "lap",
    )
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Final

from sqlalchemy import false, func, literal, or_

from searchable_scope.core.database.exceptions import UnsupportedOperatorError
from searchable_scope.infra.logging.lazy import lazy_sql

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from sqlalchemy import ColumnElement, Select

    from searchable_scope.core.database.search.types import EffectiveSearchConfig

    SearchTrace = Callable[[EffectiveSearchConfig, ColumnElement[bool]], None]

logger = logging.getLogger(__name__)

PATTERN_OPERATOR: Final = "LIKE"

SUPPORTED_OPERATORS: Final = frozenset(
    {"LIKE", "NOT LIKE", "ILIKE", "NOT ILIKE", "=", "!=", "<>", "<", "<=", ">", ">="}
)


def normalize_operator(operator: str) -> str:
    """Upper-case an operator, collapse its whitespace and check the allowlist.

    >>> normalize_operator(" not  like")
    'NOT LIKE'

    Raises:
        UnsupportedOperatorError: If the result is not in SUPPORTED_OPERATORS.
    """
    normalized = " ".join(str(operator).split()).upper()
    if normalized not in SUPPORTED_OPERATORS:
        allowed = ", ".join(sorted(SUPPORTED_OPERATORS))
        msg = f"Unsupported search operator; expected one of: {allowed}"
        raise UnsupportedOperatorError(msg, operator=operator)
    return normalized


def column_predicate(
    column: Any,
    term: str,
    *,
    operator: str = PATTERN_OPERATOR,
    case_sensitive: bool = False,
) -> ColumnElement[bool]:
    """Build one "column compares to term" predicate.

    Args:
        column: Mapped attribute or column expression.
        term: Search term, used verbatim (no trimming, no escaping).
        operator: Comparison operator. LIKE wraps the term as %term%.
        case_sensitive: When False, compare LOWER(column) to LOWER(term).

    Returns:
        Boolean SQL expression.

    Raises:
        UnsupportedOperatorError: If the operator is not in SUPPORTED_OPERATORS.
    """
    operator = normalize_operator(operator)
    value: Any = f"%{term}%" if operator == PATTERN_OPERATOR else term
    target = column
    if not case_sensitive:
        # Both sides go through the backend's LOWER() so they fold identically
        target = func.lower(column)
        value = func.lower(literal(value))

    if operator == "LIKE":
        return target.like(value)
    if operator == "NOT LIKE":
        return target.not_like(value)
    if operator == "ILIKE":
        return target.ilike(value)
    if operator == "NOT ILIKE":
        return target.not_ilike(value)
    return target.op(operator, is_comparison=True)(value)


def _columns_group(
    entity: Any,
    columns: Sequence[str],
    term: str,
    operator: str,
    case_sensitive: bool,
) -> list[ColumnElement[bool]]:
    # getattr surfaces SQLAlchemy's own AttributeError for unknown names
    return [
        column_predicate(
            getattr(entity, name),
            term,
            operator=operator,
            case_sensitive=case_sensitive,
        )
        for name in columns
    ]


def relation_predicate(
    entity: Any,
    path: str,
    columns: Sequence[str],
    term: str,
    *,
    operator: str = PATTERN_OPERATOR,
    case_sensitive: bool = False,
) -> ColumnElement[bool]:
    """Build one EXISTS predicate for a (possibly dotted) relation path.

    The innermost relation receives the OR-group over its columns. A
    relation with no columns becomes a bare existence check.

    Args:
        entity: Mapped class the path starts from.
        path: Relationship name, or dotted chain of names.
        columns: Columns of the final related entity.
        term: Search term.
        operator: Comparison operator.
        case_sensitive: Case-sensitivity flag.

    Returns:
        EXISTS expression scoped to the relation path.
    """
    head, _, rest = path.partition(".")
    relationship = getattr(entity, head)
    target = relationship.property.mapper.class_

    if rest:
        criterion = relation_predicate(
            target,
            rest,
            columns,
            term,
            operator=operator,
            case_sensitive=case_sensitive,
        )
    else:
        predicates = _columns_group(target, columns, term, operator, case_sensitive)
        criterion = or_(*predicates) if predicates else None

    if relationship.property.uselist:
        return relationship.any(criterion)
    return relationship.has(criterion)


def build_condition(
    entity: Any,
    config: EffectiveSearchConfig,
    term: str,
    *,
    operator: str = PATTERN_OPERATOR,
    case_sensitive: bool = False,
) -> ColumnElement[bool]:
    """Build the compound search condition for resolved targets.

    Base-column predicates come first, in priority order, followed by one
    EXISTS predicate per relation path. All of them are joined with OR.

    Empty targets produce FALSE, which excludes every row rather than
    returning the statement unfiltered. The operator is checked even then.
    """
    operator = normalize_operator(operator)
    predicates =_columns_group(entity, config.columns, term, operator, case_sensitive)
    predicates.extend(
        relation_predicate(
            entity,
            path,
            columns,
            term,
            operator=operator,
            case_sensitive=case_sensitive,
        )
        for path, columns in config.relations.items()
    )
    if not predicates:
        return false()
    return or_(*predicates)


def compose(
    statement: Select[Any],
    entity: Any,
    config: EffectiveSearchConfig,
    term: str,
    *,
    operator: str = PATTERN_OPERATOR,
    case_sensitive: bool = False,
    trace: SearchTrace | None = None,
) -> Select[Any]:
    """Attach the search condition to a statement.

    Existing WHERE clauses, ordering, limit and offset are preserved; the
    search group is AND-ed with whatever is already there.

    Args:
        statement: Statement to restrict.
        entity: Mapped class that owns the base columns.
        config: Resolved search targets.
        term: Search term.
        operator: Comparison operator applied to every predicate.
        case_sensitive: Case-sensitivity flag.
        trace: Optional hook called with the config and the built condition.

    Returns:
        New statement with the search condition attached.
    """
    condition = build_condition(
        entity,
        config,
        term,
        operator=operator,
        case_sensitive=case_sensitive,
    )
    if config.is_empty:
        logger.warning(
            "Search has no columns or relations; excluding all rows",
            extra={"entity": getattr(entity, "__name__", repr(entity))},
        )
    logger.debug("Search condition: %s", lazy_sql(condition))
    if trace is not None:
        trace(config, condition)
    return statement.where(condition)


__all__ = [
    "PATTERN_OPERATOR",
    "SUPPORTED_OPERATORS",
    "build_condition",
    "column_predicate",
    "compose",
    "normalize_operator",
    "relation_predicate",
]
