"""Click command for managing brand overrides."""

import sys

import click

from brand_ui.brand_cmd.list_cmd import list_brand_overrides
from brand_ui.config_store import read_project_config
from brand_ui.error_handling import with_command_errors

SUBCOMMANDS = {
    "list": list_brand_overrides,
}


@click.command("brand")
@click.argument("subcommand")
def brand_cmd(subcommand):
    """Manage brand overrides."""
    with with_command_errors("Error in brand command"):
        config = read_project_config()
        handler = SUBCOMMANDS.get(subcommand)
        if handler is None:
            click.echo(f"Unknown subcommand: {subcommand}", err=True)
            click.echo(f"Available subcommands: {', '.join(SUBCOMMANDS)}", err=True)
            sys.exit(1)
        handler(config)
