"""Search target types.

This module provides the value types that flow through a search call:
- PriorityMode: which configuration source supplies the search targets
- Ordered / Ranked: explicit column specifications (plain list vs rank map)
- SearchRequest: the per-call input
- EffectiveSearchConfig: the resolved, normalized targets

Raw input (lists, dicts, bare strings) is converted at the boundary with
as_column_spec() and as_relation_spec(). A mapping is always a rank map,
whatever its keys look like, so {"a": 0} is never mistaken for a list.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from numbers import Real
from types import MappingProxyType
from typing import Any

from searchable_scope.core.database.exceptions import InvalidColumnSpecError


class PriorityMode(StrEnum):
    """Source selector for search targets."""

    PARAMS = "params"
    MODEL = "model"
    CONFIG = "config"

    @classmethod
    def parse(cls, value: PriorityMode | str | None) -> PriorityMode:
        """Parse a priority value, defaulting to PARAMS when unrecognized."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return cls.PARAMS
        return cls.PARAMS


@dataclass(frozen=True, slots=True)
class Ordered:
    """Plain ordered column list. Order is the priority order."""

    columns: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for column in self.columns:
            if not isinstance(column, str):
                msg = "Column names must be strings"
                raise InvalidColumnSpecError(msg, value=column)


@dataclass(frozen=True, slots=True)
class Ranked:
    """Column rank map. Lower rank means higher priority.

    Entries keep their input order so that equal ranks stay stable
    when sorted.
    """

    ranks: tuple[tuple[str, float], ...] = ()

    def __post_init__(self) -> None:
        for column, rank in self.ranks:
            if not isinstance(column, str):
                msg = "Column names must be strings"
                raise InvalidColumnSpecError(msg, value=column)
            if isinstance(rank, bool) or not isinstance(rank, Real):
                msg = f"Rank for column {column!r} must be a number"
                raise InvalidColumnSpecError(msg, value=rank)

    @classmethod
    def of(cls, mapping: Mapping[str, float]) -> Ranked:
        """Build a rank map from a mapping, preserving its iteration order."""
        return cls(tuple(mapping.items()))


ColumnSpec = Ordered | Ranked

# Raw shapes accepted at the boundary, in addition to ColumnSpec itself.
ColumnSpecInput = ColumnSpec | Sequence[str] | Mapping[str, float] | str | None
RelationSpecInput = Mapping[str, ColumnSpecInput] | Sequence[Any] | None


def as_column_spec(value: ColumnSpecInput) -> ColumnSpec:
    """Convert raw column input into an explicit ColumnSpec.

    Args:
        value: Ordered/Ranked instance, list/tuple of names, mapping of
            name to rank, a single column name, or None.

    Returns:
        Ordered or Ranked column specification.

    Raises:
        InvalidColumnSpecError: If the value has no column-spec shape.
    """
    if isinstance(value, Ordered | Ranked):
        return value
    if value is None:
        return Ordered()
    if isinstance(value, str):
        return Ordered((value,))
    if isinstance(value, Mapping):
        return Ranked.of(value)
    if isinstance(value, Sequence):
        return Ordered(tuple(value))
    msg = "Column specification must be a sequence of names or a rank mapping"
    raise InvalidColumnSpecError(msg, value=value)


def as_relation_spec(value: RelationSpecInput) -> dict[str, ColumnSpec]:
    """Convert raw relation input into a mapping of path to ColumnSpec.

    An empty sequence is accepted as "no relations" so callers can pass
    ``[]`` the same way they pass an empty column list.
    """
    if value is None:
        return {}
    if isinstance(value, Mapping):
        specs: dict[str, ColumnSpec] = {}
        for path, columns in value.items():
            if not isinstance(path, str):
                msg = "Relation paths must be strings"
                raise InvalidColumnSpecError(msg, value=path)
            try:
                specs[path] = as_column_spec(columns)
            except InvalidColumnSpecError as exc:
                raise InvalidColumnSpecError(exc.message, value=exc.value, relation=path) from exc
        return specs
    if isinstance(value, Sequence) and not isinstance(value, str) and len(value) == 0:
        return {}
    msg = "Relation specification must map relation paths to columns"
    raise InvalidColumnSpecError(msg, value=value)


@dataclass(frozen=True, slots=True)
class SearchRequest:
    """Per-call search input.

    Built once by search() and consulted for both the short-circuit check
    and target resolution. Columns and relations are the "params" source.
    """

    term: str | None
    columns: ColumnSpecInput = ()
    relations: RelationSpecInput = None
    priority: PriorityMode = PriorityMode.PARAMS

    def __post_init__(self) -> None:
        object.__setattr__(self, "priority", PriorityMode.parse(self.priority))

    def is_searchable(self, min_length: int) -> bool:
        """True when the term is present and at least min_length characters.

        Whitespace is not trimmed: "   " counts as three characters.
        """
        return bool(self.term) and len(self.term) >= min_length


@dataclass(frozen=True, slots=True)
class EffectiveSearchConfig:
    """Resolved search targets used to build the condition.

    Attributes:
        columns: Base-entity column names in priority order
        relations: Relation path to column names in priority order
    """

    columns: tuple[str, ...] = ()
    relations: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "columns", tuple(self.columns))
        frozen = {path: tuple(cols) for path, cols in self.relations.items()}
        object.__setattr__(self, "relations", MappingProxyType(frozen))

    @property
    def is_empty(self) -> bool:
        """True when there is nothing to search."""
        return not self.columns and not self.relations

    def as_dict(self) -> dict[str, Any]:
        """Plain representation for logging and CLI output."""
        return {
            "columns": list(self.columns),
            "relations": {path: list(cols) for path, cols in self.relations.items()},
        }


__all__ = [
    "ColumnSpec",
    "ColumnSpecInput",
    "EffectiveSearchConfig",
    "Ordered",
    "PriorityMode",
    "Ranked",
    "RelationSpecInput",
    "SearchRequest",
    "as_column_spec",
    "as_relation_spec",
]
