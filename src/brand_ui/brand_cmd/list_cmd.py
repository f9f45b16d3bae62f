"""List the brand overrides present in the brand directory."""

import os

import click

from brand_ui.paths import list_component_names


def list_brand_overrides(config, project_dir="."):
    brand_dir = os.path.join(project_dir, config.resolved_brand_dir)
    if not os.listdir(brand_dir):
        click.echo("No brand overrides found.")
        click.echo("Try adding a component first with: brand-ui add button")
        return []

    names = list_component_names(brand_dir)
    click.echo("\nBrand overrides:")
    for name in names:
        click.echo(f"✓ {name}")
    return names
