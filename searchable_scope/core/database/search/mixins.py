"""Mixin for declaring searchable columns on SQLAlchemy models.

Usage:
    class Product(Base, SearchableMixin):
        __tablename__ = "products"
        __searchable__ = {
            "columns": {"name": 1, "sku": 2},
            "relations": {"category": ["name"], "category.parent": "name"},
        }

        name: Mapped[str] = mapped_column(String(255))
        sku: Mapped[str] = mapped_column(String(50))

    # Chainable like any select()
    stmt = Product.search("lap", priority="model").order_by(Product.name).limit(20)

The declaration is only read under "model" priority. Models without one
behave as if both columns and relations were empty.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, TypedDict

from sqlalchemy import select

from searchable_scope.core.database.search.scope import search
from searchable_scope.core.database.search.types import PriorityMode

if TYPE_CHECKING:
    from sqlalchemy import Select

    from searchable_scope.core.database.search.composer import SearchTrace
    from searchable_scope.core.database.search.types import ColumnSpecInput, RelationSpecInput
    from searchable_scope.core.settings.search import SearchableSettings


class SearchableDeclaration(TypedDict, total=False):
    """Shape of a model's ``__searchable__`` attribute."""

    columns: ColumnSpecInput
    relations: RelationSpecInput


class SearchableMixin:
    """Mixin that adds a chainable ``search()`` classmethod to a model.

    Subclasses may define:
    - __searchable__: {"columns": ..., "relations": ...} used under "model" priority
    """

    __allow_unmapped__ = True

    __searchable__: ClassVar[SearchableDeclaration] = {}

    @classmethod
    def search(
        cls,
        term: str | None,
        columns: ColumnSpecInput = (),
        relations: RelationSpecInput = None,
        priority: PriorityMode | str = PriorityMode.PARAMS,
        *,
        statement: Select[Any] | None = None,
        settings: SearchableSettings | None = None,
        trace: SearchTrace | None = None,
    ) -> Select[Any]:
        """Build (or restrict) a select for this model by search term.

        Args:
            term: Search term.
            columns: Columns searched under "params" priority.
            relations: Relation path to columns under "params" priority.
            priority: Which source supplies the search targets.
            statement: Statement to restrict (default: ``select(cls)``).
            settings: Configuration snapshot (default: cached settings).
            trace: Optional hook receiving the resolved config and condition.

        Returns:
            Select statement, ready for more where/order_by/limit calls.
        """
        base = statement if statement is not None else select(cls)
        return search(
            base,
            term,
            columns,
            relations,
            priority,
            entity=cls,
            settings=settings,
            trace=trace,
        )


__all__ = ["SearchableDeclaration", "SearchableMixin"]
