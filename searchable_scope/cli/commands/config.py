"""Configuration management commands."""

import json
from pathlib import Path
import sys

import click
from pydantic import ValidationError
import yaml

from searchable_scope.cli.utils import error, info, key_value_table, success, warning
from searchable_scope.core.settings import get_searchable_settings, render_default_config
from searchable_scope.core.settings.yaml_sources import searchable_config_dir


@click.group(name="config")
def config() -> None:
    """Configuration management commands."""


@config.command()
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml", "table"]),
    default="table",
    help="Output format",
)
def show(output_format: str) -> None:
    """Display the effective search settings."""
    try:
        settings = get_searchable_settings()
    except ValidationError as e:
        error(f"Invalid search configuration: {e}")
        sys.exit(1)

    values = settings.model_dump(mode="json")

    if output_format == "json":
        click.echo(json.dumps(values, indent=2))
    elif output_format == "yaml":
        click.echo(yaml.safe_dump(values, default_flow_style=False, sort_keys=False), nl=False)
    else:
        key_value_table("Search settings", values)


@config.command()
@click.option(
    "--path",
    "target",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Destination file (default: $SEARCHABLE_CONFIG_DIR/searchable.yaml)",
)
@click.option("--force", is_flag=True, help="Overwrite an existing file")
def publish(target: Path | None, force: bool) -> None:
    """Write the default search configuration file."""
    destination = target or searchable_config_dir() / "searchable.yaml"

    if destination.exists() and not force:
        warning(f"{destination} already exists. Use --force to overwrite.")
        sys.exit(1)

    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(render_default_config(), encoding="utf-8")
    success(f"Published search configuration to {destination}")
    info("Edit default_columns / default_relations, then search with priority 'config'.")
