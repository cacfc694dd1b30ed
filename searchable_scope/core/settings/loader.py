"""LRU-cached settings loaders.

Settings are loaded and validated once, then cached for the lifetime of
the process. The cached instances are frozen and double as the
configuration snapshot handed to search calls.

Usage:
    from searchable_scope.core.settings.loader import get_searchable_settings

    settings = get_searchable_settings()  # First call: loads and validates
    settings = get_searchable_settings()  # Subsequent calls: cached instance

Testing:
    clear_all_caches()

    Or pass an explicit snapshot:
    search(stmt, "term", settings=SearchableSettings(min_term_length=1))
"""

from __future__ import annotations

from functools import lru_cache

from .logs import LoggingSettings
from .search import SearchableSettings


@lru_cache(maxsize=1)
def get_searchable_settings() -> SearchableSettings:
    """Get cached search settings.

    Returns:
        Validated and frozen SearchableSettings instance.
    """
    return SearchableSettings()


@lru_cache(maxsize=1)
def get_logging_settings() -> LoggingSettings:
    """Get cached logging settings.

    Returns:
        Validated and frozen LoggingSettings instance.
    """
    return LoggingSettings()


def clear_all_caches() -> None:
    """Clear all settings caches.

    Useful for testing or when you need to force reload settings.
    """
    get_searchable_settings.cache_clear()
    get_logging_settings.cache_clear()
