"""Searchable scope configuration settings.

Provides the defaults consulted by every search call. Loaded from
environment variables with SEARCHABLE_ prefix, from conf/searchable.yaml,
or passed explicitly as a snapshot.

Settings controlled:
- Comparison operator applied to every predicate
- Case-sensitivity strategy
- Minimum search term length
- Default columns and relations (used under "config" priority)

Example .env:
    SEARCHABLE_DEFAULT_OPERATOR=LIKE
    SEARCHABLE_MIN_TERM_LENGTH=3
    SEARCHABLE_DEFAULT_COLUMNS='["name", "sku"]'
    SEARCHABLE_DEFAULT_RELATIONS='{"category": ["name"]}'
"""

from __future__ import annotations

from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from searchable_scope.core.database.search.composer import SUPPORTED_OPERATORS

from ._sanitizers import normalize_operator_text, sanitize_inline_numeric
from .yaml_sources import create_searchable_yaml_source

ColumnSpecSetting = list[str] | dict[str, int | float]
RelationSpecSetting = dict[str, list[str] | dict[str, int | float] | str]


class SearchableSettings(BaseSettings):
    """Search defaults.

    Instances are frozen, so one instance can be shared as the
    configuration snapshot for any number of search calls.
    """

    default_operator: str = Field(
        default="LIKE",
        description="Comparison operator for every column and relation predicate",
    )
    case_sensitive: bool = Field(
        default=False,
        description="Compare values as stored instead of lower-casing both sides",
    )
    min_term_length: int = Field(
        default=2,
        ge=0,
        description="Terms shorter than this (in characters) leave the query unmodified",
    )
    default_columns: ColumnSpecSetting = Field(
        default_factory=list,
        description="Columns searched under 'config' priority (list or rank map)",
    )
    default_relations: RelationSpecSetting = Field(
        default_factory=dict,
        description="Relation path to columns searched under 'config' priority",
    )

    model_config = SettingsConfigDict(
        env_prefix="SEARCHABLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )

    @field_validator("default_operator", mode="before")
    @classmethod
    def _normalize_operator(cls, value: Any) -> Any:
        """Upper-case and collapse whitespace ("not  like" -> "NOT LIKE")."""
        normalized = normalize_operator_text(value)
        if isinstance(normalized, str) and normalized not in SUPPORTED_OPERATORS:
            allowed = ", ".join(sorted(SUPPORTED_OPERATORS))
            msg = f"Unsupported operator {value!r}; expected one of: {allowed}"
            raise ValueError(msg)
        return normalized

    @field_validator("min_term_length", mode="before")
    @classmethod
    def _normalize_min_length(cls, value: Any) -> Any:
        """Allow numeric env vars with inline comments (e.g., "3  # chars")."""
        return sanitize_inline_numeric(value)

    @classmethod
    def settings_customise_sources(
        cls, settings_cls, init_settings, env_settings, dotenv_settings, file_secret_settings
    ):
        """Customize settings source precedence: init > yaml > env > dotenv > secrets."""
        return (
            init_settings,
            create_searchable_yaml_source(settings_cls),
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )


def render_default_config() -> str:
    """Render the default settings as a YAML document.

    Used to publish a starting conf/searchable.yaml that applications
    can edit.
    """
    defaults = SearchableSettings.model_construct()
    body = yaml.safe_dump(
        defaults.model_dump(mode="json"),
        default_flow_style=False,
        sort_keys=False,
    )
    header = (
        "# Searchable scope defaults.\n"
        "# default_columns accepts a list ([name, sku]) or a rank map ({name: 1, sku: 2}).\n"
        "# default_relations maps relation paths (dotted for nesting) to columns.\n"
    )
    return header + body


__all__ = ["SearchableSettings", "render_default_config"]
