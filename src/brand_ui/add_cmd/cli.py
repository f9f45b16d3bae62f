"""Click command for adding a component."""

import click

from brand_ui.add_cmd.add_component import add_component
from brand_ui.error_handling import with_command_errors
from brand_ui.scaffold_runner import ScaffoldRunner


@click.command("add")
@click.argument("component_name")
@click.pass_obj
def add_cmd(runner_settings, component_name):
    """Add a shadcn component to the base folder."""
    runner = ScaffoldRunner(**(runner_settings or {}))
    with with_command_errors("Error adding component"):
        add_component(component_name, runner)
