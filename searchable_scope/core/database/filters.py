"""Statement filters for SQLAlchemy.

Filters work directly with SQLAlchemy statements without hiding the
query. They are small objects that can be built once (for example from
request parameters) and applied later.

Usage:
    from sqlalchemy import select
    from searchable_scope.core.database.filters import SearchableFilter

    stmt = select(Product)
    stmt = SearchableFilter("lap", ["name"], {"category": ["name"]}).apply(stmt)

    result = await session.execute(stmt)
    products = result.scalars().all()
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from searchable_scope.core.database.search.scope import search
from searchable_scope.core.database.search.types import PriorityMode

if TYPE_CHECKING:
    from sqlalchemy import Select

    from searchable_scope.core.database.search.composer import SearchTrace
    from searchable_scope.core.database.search.types import ColumnSpecInput, RelationSpecInput
    from searchable_scope.core.settings.search import SearchableSettings


class StatementFilter(ABC):
    """Base class for statement filters.

    All filters implement `apply()` which returns a modified statement.
    """

    @abstractmethod
    def apply(self, statement: Select[Any]) -> Select[Any]:
        """Apply filter to statement.

        Args:
            statement: SQLAlchemy select statement

        Returns:
            Modified select statement
        """
        ...


class SearchableFilter(StatementFilter):
    """Free-text search across columns and related records.

    Example:
        # Params priority: search the given columns
        stmt = SearchableFilter("lap", ["name", "sku"]).apply(select(Product))

        # Model priority: search what Product.__searchable__ declares
        stmt = SearchableFilter("lap", priority="model").apply(select(Product))

        # Generates: WHERE (lower(name) LIKE '%lap%' OR lower(sku) LIKE '%lap%')
    """

    def __init__(
        self,
        term: str | None,
        columns: ColumnSpecInput = (),
        relations: RelationSpecInput = None,
        priority: PriorityMode | str = PriorityMode.PARAMS,
        *,
        entity: Any = None,
        settings: SearchableSettings | None = None,
        trace: SearchTrace | None = None,
    ):
        """Initialize search filter.

        Args:
            term: Search term
            columns: Columns searched under "params" priority
            relations: Relation path to columns under "params" priority
            priority: Which source supplies the search targets
            entity: Mapped class (default: inferred from the statement)
            settings: Configuration snapshot (default: cached settings)
            trace: Optional hook receiving the resolved config and condition
        """
        self.term = term
        self.columns = columns
        self.relations = relations
        self.priority = PriorityMode.parse(priority)
        self.entity = entity
        self.settings = settings
        self.trace = trace

    def apply(self, statement: Select[Any]) -> Select[Any]:
        """Apply search filter to statement."""
        return search(
            statement,
            self.term,
            self.columns,
            self.relations,
            self.priority,
            entity=self.entity,
            settings=self.settings,
            trace=self.trace,
        )


__all__ = ["SearchableFilter", "StatementFilter"]
