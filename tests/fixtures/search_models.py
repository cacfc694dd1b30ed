"""Sample models for search tests.

Category -> parent (self-referential many-to-one)
Product  -> category (many-to-one), reviews (one-to-many)
Note     -> plain model without a search declaration
"""

from __future__ import annotations

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from searchable_scope.core.database.search import SearchableMixin


class SearchBase(DeclarativeBase):
    """Declarative base isolated from any application metadata."""


class Category(SearchBase):
    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100))
    parent_id: Mapped[int | None] = mapped_column(ForeignKey("categories.id"))

    parent: Mapped[Category | None] = relationship(remote_side="Category.id")


class Product(SearchBase, SearchableMixin):
    __tablename__ = "products"
    __searchable__ = {
        "columns": {"sku": 2, "name": 1},
        "relations": {"reviews": "body"},
    }

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100))
    sku: Mapped[str | None] = mapped_column(String(50))
    description: Mapped[str | None] = mapped_column(Text)
    category_id: Mapped[int | None] = mapped_column(ForeignKey("categories.id"))

    category: Mapped[Category | None] = relationship()
    reviews: Mapped[list[Review]] = relationship(back_populates="product")


class Review(SearchBase):
    __tablename__ = "reviews"

    id: Mapped[int] = mapped_column(primary_key=True)
    product_id: Mapped[int] = mapped_column(ForeignKey("products.id"))
    body: Mapped[str] = mapped_column(Text)

    product: Mapped[Product] = relationship(back_populates="reviews")


class Note(SearchBase, SearchableMixin):
    __tablename__ = "notes"

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(String(100))


class Tag(SearchBase):
    """Model without SearchableMixin (no __searchable__ at all)."""

    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(primary_key=True)
    label: Mapped[str] = mapped_column(String(50))
