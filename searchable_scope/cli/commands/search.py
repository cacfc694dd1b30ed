"""Search inspection commands.

- search explain: print the SQL a search call would produce for a model
"""

import importlib
import sys

import click
from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite

from searchable_scope.cli.utils import error, header, search_targets, sql, warning
from searchable_scope.core.database.search import SUPPORTED_OPERATORS, PriorityMode, search
from searchable_scope.core.settings import get_searchable_settings

DIALECTS = {
    "sqlite": sqlite.dialect,
    "postgresql": postgresql.dialect,
}


def _load_model(reference: str) -> type:
    """Import ``package.module:ClassName``."""
    module_name, _, attr = reference.partition(":")
    if not module_name or not attr:
        msg = f"Expected 'module:Class', got {reference!r}"
        raise click.BadParameter(msg, param_hint="MODEL")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise click.BadParameter(f"Cannot import {module_name!r}: {e}", param_hint="MODEL") from e
    try:
        return getattr(module, attr)
    except AttributeError as e:
        raise click.BadParameter(f"{module_name!r} has no attribute {attr!r}", param_hint="MODEL") from e


def _parse_relations(values: tuple[str, ...]) -> dict[str, list[str]]:
    """Parse ``path=col1,col2`` options into a relation mapping."""
    relations: dict[str, list[str]] = {}
    for value in values:
        path, sep, columns = value.partition("=")
        if not sep or not path:
            msg = f"Expected 'path=col1,col2', got {value!r}"
            raise click.BadParameter(msg, param_hint="--relation")
        relations.setdefault(path, []).extend(c for c in columns.split(",") if c)
    return relations


@click.group(name="search")
def search_group() -> None:
    """Search inspection commands."""


@search_group.command()
@click.argument("model")
@click.argument("term")
@click.option("--column", "-c", "columns", multiple=True, help="Column to search (repeatable)")
@click.option(
    "--relation",
    "-r",
    "relations",
    multiple=True,
    help="Relation columns as path=col1,col2 (repeatable)",
)
@click.option(
    "--priority",
    type=click.Choice([mode.value for mode in PriorityMode]),
    default=PriorityMode.PARAMS.value,
    show_default=True,
    help="Which source supplies the search targets",
)
@click.option(
    "--operator",
    type=click.Choice(sorted(SUPPORTED_OPERATORS), case_sensitive=False),
    default=None,
    help="Override the configured operator",
)
@click.option(
    "--case-sensitive/--case-insensitive",
    default=None,
    help="Override the configured case sensitivity",
)
@click.option(
    "--dialect",
    type=click.Choice(sorted(DIALECTS)),
    default="sqlite",
    show_default=True,
    help="SQL dialect used to render the statement",
)
def explain(
    model: str,
    term: str,
    columns: tuple[str, ...],
    relations: tuple[str, ...],
    priority: str,
    operator: str | None,
    case_sensitive: bool | None,
    dialect: str,
) -> None:
    """Print the SQL produced by searching MODEL (module:Class) for TERM."""
    entity = _load_model(model)

    settings = get_searchable_settings()
    overrides: dict[str, object] = {}
    if operator is not None:
        overrides["default_operator"] = operator.upper()
    if case_sensitive is not None:
        overrides["case_sensitive"] = case_sensitive
    if overrides:
        settings = settings.model_copy(update=overrides)

    captured: list[dict[str, object]] = []

    def trace(config, _condition) -> None:
        captured.append(config.as_dict())

    try:
        statement = search(
            select(entity),
            term,
            list(columns),
            _parse_relations(relations),
            priority,
            entity=entity,
            settings=settings,
            trace=trace,
        )
    except AttributeError as e:
        error(f"Unknown column or relation: {e}")
        sys.exit(1)

    header(f"Search {entity.__name__} for {term!r} ({priority} priority)")
    if not captured:
        warning(
            f"Term is shorter than min_term_length={settings.min_term_length}; "
            "the statement is left unmodified."
        )
    else:
        search_targets(captured[0])

    compiled = statement.compile(
        dialect=DIALECTS[dialect](),
        compile_kwargs={"literal_binds": True},
    )
    sql(str(compiled))
