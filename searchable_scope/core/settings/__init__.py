"""Pydantic Settings v2 configuration.

Settings are split by concern (search defaults, logging), each loaded
from environment variables with optional YAML/conf.d files:

    from searchable_scope.core.settings import get_searchable_settings

    settings = get_searchable_settings()
    print(settings.default_operator)

Configuration precedence (highest to lowest):
    1. init kwargs (testing/overrides)
    2. YAML/conf.d files (conf/searchable.yaml, conf/searchable.d/*.yaml)
    3. Environment variables (SEARCHABLE_*, LOG_*)
    4. .env file
    5. secrets_dir
"""

from __future__ import annotations

from .loader import clear_all_caches, get_logging_settings, get_searchable_settings
from .logs import LoggingSettings
from .search import SearchableSettings, render_default_config

__all__ = [
    "LoggingSettings",
    "SearchableSettings",
    "clear_all_caches",
    "get_logging_settings",
    "get_searchable_settings",
    "render_default_config",
]
