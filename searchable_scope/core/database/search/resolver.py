"""Search target resolution.

Picks exactly one of three candidate sources (call parameters, model
declaration, configuration defaults) and normalizes its columns and
relations into plain ordered lists.

Usage:
    from searchable_scope.core.database.search.resolver import resolve

    config = resolve(
        "model",
        param_columns=["name"],
        param_relations={},
        model_columns={"sku": 2, "name": 1},
        model_relations={"category": "name"},
        config_columns=[],
        config_relations={},
    )
    # EffectiveSearchConfig(columns=("name", "sku"), relations={"category": ("name",)})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from searchable_scope.core.database.search.types import (
    EffectiveSearchConfig,
    PriorityMode,
    Ranked,
    as_column_spec,
    as_relation_spec,
)

if TYPE_CHECKING:
    from searchable_scope.core.database.search.types import ColumnSpecInput, RelationSpecInput

logger = logging.getLogger(__name__)


def normalize_columns(spec: ColumnSpecInput) -> list[str]:
    """Normalize a column specification into an ordered list of names.

    Plain lists pass through unchanged. Rank maps are sorted ascending by
    rank (stable, so ties keep input order) and the ranks are dropped.
    Duplicates are kept.

    Args:
        spec: Column specification in any accepted shape.

    Returns:
        Column names in priority order.

    Example:
        >>> normalize_columns({"b": 2, "a": 1})
        ['a', 'b']
        >>> normalize_columns(["b", "a"])
        ['b', 'a']
    """
    column_spec = as_column_spec(spec)
    if isinstance(column_spec, Ranked):
        ordered = sorted(column_spec.ranks, key=lambda entry: entry[1])
        return [column for column, _ in ordered]
    return list(column_spec.columns)


def normalize_relations(spec: RelationSpecInput) -> dict[str, list[str]]:
    """Normalize every relation's columns with normalize_columns().

    A bare column name is wrapped into a one-element list.
    """
    return {path: normalize_columns(columns) for path, columns in as_relation_spec(spec).items()}


def resolve(
    priority: PriorityMode | str | None,
    *,
    param_columns: ColumnSpecInput = None,
    param_relations: RelationSpecInput = None,
    model_columns: ColumnSpecInput = None,
    model_relations: RelationSpecInput = None,
    config_columns: ColumnSpecInput = None,
    config_relations: RelationSpecInput = None,
) -> EffectiveSearchConfig:
    """Select one source of search targets and normalize it.

    Sources are never merged and there is no fallback: an empty selected
    source yields an empty config.

    Args:
        priority: "params", "model" or "config". Anything else means "params".
        param_columns: Columns passed to the search call.
        param_relations: Relations passed to the search call.
        model_columns: Columns declared on the model.
        model_relations: Relations declared on the model.
        config_columns: Columns from configuration defaults.
        config_relations: Relations from configuration defaults.

    Returns:
        Normalized, immutable search targets.
    """
    mode = PriorityMode.parse(priority)
    if mode is PriorityMode.MODEL:
        columns, relations = model_columns, model_relations
    elif mode is PriorityMode.CONFIG:
        columns, relations = config_columns, config_relations
    else:
        columns, relations = param_columns, param_relations

    config = EffectiveSearchConfig(
        columns=tuple(normalize_columns(columns)),
        relations={path: tuple(cols) for path, cols in normalize_relations(relations).items()},
    )
    logger.debug(
        "Resolved search targets",
        extra={"priority": str(mode), "search_config": config.as_dict()},
    )
    return config


__all__ = [
    "normalize_columns",
    "normalize_relations",
    "resolve",
]
