"""Pytest configuration and shared fixtures.

Organization:
    - Environment Fixtures: isolate settings from the host environment
    - Settings Fixtures: explicit configuration snapshots
    - Database Fixtures: in-memory aiosqlite engine, session and seed data
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import TYPE_CHECKING

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from searchable_scope.core.settings import SearchableSettings, clear_all_caches
from tests.fixtures.search_models import Category, Note, Product, Review, SearchBase, Tag

if TYPE_CHECKING:
    from pathlib import Path

    from sqlalchemy.ext.asyncio import AsyncEngine


# ============================================================================
# Environment Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_settings_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Keep host env vars, .env files and conf/ directories out of tests.

    Each test runs in its own temporary working directory with empty
    config directories, and settings caches are cleared before and after.
    """
    import os

    for key in list(os.environ):
        if key.startswith(("SEARCHABLE_", "LOG_")):
            monkeypatch.delenv(key, raising=False)

    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SEARCHABLE_CONFIG_DIR", str(tmp_path / "conf"))
    monkeypatch.setenv("LOGGING_CONFIG_DIR", str(tmp_path / "conf"))

    clear_all_caches()
    yield
    clear_all_caches()


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def search_settings() -> SearchableSettings:
    """Default configuration snapshot (LIKE, case-insensitive, min length 2)."""
    return SearchableSettings()


# ============================================================================
# Database Fixtures
# ============================================================================


@pytest.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine]:
    """Create async SQLAlchemy engine with in-memory SQLite.

    Yields:
        Async SQLAlchemy engine with all sample tables created.
    """
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(SearchBase.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
async def db_session(db_engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Create async database session.

    Yields:
        Async session bound to the in-memory engine.
    """
    session_maker = async_sessionmaker(db_engine, expire_on_commit=False)
    async with session_maker() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest.fixture
async def seeded_session(db_session: AsyncSession) -> AsyncSession:
    """Session with a small catalogue of products, categories and reviews.

    Products:
        Electronics    no category
        Tools          category "Electro-misc"
        LAPTOP         category "Computers" (parent "Hardware")
        Gaming laptop  category "Computers", sku "GL-100"
        Garden hose    category "Outdoor", review mentions "sprinkler"
        Big  Box       two consecutive spaces in the name
    """
    hardware = Category(id=1, name="Hardware")
    computers = Category(id=2, name="Computers", parent=hardware)
    electro = Category(id=3, name="Electro-misc")
    outdoor = Category(id=4, name="Outdoor")

    db_session.add_all(
        [
            hardware,
            computers,
            electro,
            outdoor,
            Product(id=1, name="Electronics"),
            Product(id=2, name="Tools", category=electro),
            Product(id=3, name="LAPTOP", sku="LP-1", category=computers),
            Product(id=4, name="Gaming laptop", sku="GL-100", category=computers),
            Product(
                id=5,
                name="Garden hose",
                description="Twenty metres",
                category=outdoor,
                reviews=[Review(id=1, body="Works great with my sprinkler")],
            ),
            Product(id=6, name="Big  Box"),
            Note(id=1, title="laptop notes"),
            Tag(id=1, label="laptop"),
        ]
    )
    await db_session.commit()
    return db_session
