"""Initialize shadcn and the base/brand component layout."""

import os

import click

from brand_ui.config_store import (
    PROJECT_CONFIG_FILE,
    NotInitializedError,
    ProjectConfig,
    read_scaffold_config,
    write_project_config,
)


def init_project(runner, project_dir="."):
    """Run ``shadcn init`` then layer the base/brand structure on top of it.

    Existing component files are left in place, so running init again after
    components were added keeps their brand overrides.
    """
    click.echo("\nInitializing shadcn...")
    runner.init()

    try:
        scaffold_config = read_scaffold_config(project_dir)
    except NotInitializedError as e:
        raise FileNotFoundError(f"shadcn init did not create {e.config_file}") from e

    config = ProjectConfig()

    scaffold_config.components_alias = config.base_dir
    scaffold_config.save()
    click.echo("✓ Updated components.json with base directory")

    write_project_config(config, project_dir)
    click.echo(f"✓ Created configuration file: {PROJECT_CONFIG_FILE}")

    os.makedirs(os.path.join(project_dir, config.resolved_base_dir), exist_ok=True)
    click.echo(f"✓ Created base components directory: {config.base_dir}")

    os.makedirs(os.path.join(project_dir, config.resolved_brand_dir), exist_ok=True)
    click.echo(f"✓ Created brand components directory: {config.brand_dir}")

    click.echo("\nInitialization complete! You can now start adding components.")
    click.echo("Try running: brand-ui add button")
    return config
