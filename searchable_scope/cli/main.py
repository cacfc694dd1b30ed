"""Main CLI entry point for searchable-scope commands."""

import click

from searchable_scope.cli.commands import config, search
from searchable_scope.infra.logging.config import setup_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="searchable-scope")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Searchable scope CLI - inspect and publish search configuration.

    \b
    Command Groups:
      config     Show or publish search settings
      search     Render the SQL of a search call

    \b
    Quick Start:
      searchable-scope config publish                     # Write conf/searchable.yaml
      searchable-scope config show --format yaml          # Effective settings
      searchable-scope search explain app.models:Product lap -c name -r category=name
    """
    ctx.ensure_object(dict)


cli.add_command(config.config)
cli.add_command(search.search_group)


def main() -> None:
    """Entry point for CLI."""
    setup_logging()
    cli(obj={})


if __name__ == "__main__":
    main()
