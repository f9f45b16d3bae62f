"""Click command for project initialization."""

import click

from brand_ui.error_handling import with_command_errors
from brand_ui.init_cmd.init_project import init_project
from brand_ui.scaffold_runner import ScaffoldRunner


@click.command("init")
@click.pass_obj
def init_cmd(runner_settings):
    """Initialize the base and brand component structure."""
    runner = ScaffoldRunner(**(runner_settings or {}))
    with with_command_errors(
        "Error during initialization",
        scaffold_hint="Please ensure you have a Next.js project set up.",
    ):
        init_project(runner)
