"""Output formatting utilities for CLI commands.

Status lines go through the colored helpers; SQL and settings tables are
printed plain so they can be piped or copied.
"""

from collections.abc import Mapping
from typing import Any

import click

RULE_WIDTH = 60


def success(message: str) -> None:
    """Print a success message in green."""
    click.secho(f"✓ {message}", fg="green")


def error(message: str) -> None:
    """Print an error message in red to stderr."""
    click.secho(f"✗ {message}", fg="red", err=True)


def warning(message: str) -> None:
    """Print a warning message in yellow."""
    click.secho(f"⚠ {message}", fg="yellow")


def info(message: str) -> None:
    """Print an info message in blue."""
    click.secho(f"ℹ {message}", fg="blue")


def header(message: str) -> None:
    """Print a bold cyan section header preceded by a blank line."""
    click.secho(f"\n{message}", fg="cyan", bold=True)


def key_value_table(title: str, values: Mapping[str, Any], width: int = 20) -> None:
    """Print ``key = value`` rows between horizontal rules."""
    rule = "=" * RULE_WIDTH
    click.echo(f"\n{rule}\n{title.upper()}\n{rule}")
    for key, value in values.items():
        click.echo(f"  {key:{width}} = {value}")
    click.echo(rule)


def search_targets(targets: Mapping[str, Any]) -> None:
    """Print resolved search targets, one relation path per line."""
    columns = ", ".join(targets.get("columns", [])) or "(none)"
    info(f"Columns:   {columns}")
    relations = targets.get("relations", {})
    if not relations:
        info("Relations: (none)")
    for path, relation_columns in relations.items():
        info(f"Relation:  {path} -> {', '.join(relation_columns) or '(exists)'}")


def sql(statement: str) -> None:
    """Print compiled SQL, terminated with a semicolon."""
    click.echo(statement.rstrip().rstrip(";") + ";")
