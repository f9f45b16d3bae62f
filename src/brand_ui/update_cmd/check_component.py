"""Placeholder update: confirms a base component exists, changes nothing."""

import os
import sys

import click

from brand_ui.config_store import read_project_config
from brand_ui.paths import component_file_name

PLANNED_STEPS = (
    "Fetch latest component version",
    "Merge changes while preserving customizations",
    "Update dependencies if needed",
)


def check_component(component_name, project_dir="."):
    config = read_project_config(project_dir)
    base_component_path = os.path.join(
        project_dir, config.resolved_base_dir, component_file_name(component_name)
    )

    if not os.path.isfile(base_component_path):
        click.echo(f"Error: Component {component_name} not found in base directory.", err=True)
        click.echo(f"Try adding it first with: brand-ui add {component_name}", err=True)
        sys.exit(1)

    # TODO: fetch the latest shadcn source and merge it into the base copy
    click.echo("Note: Update functionality is a placeholder in this MVP.")
    click.echo("In a full implementation, this would:")
    for step in PLANNED_STEPS:
        click.echo(f"- {step}")
