"""Add a shadcn component as a pristine base copy plus a brand wrapper."""

import os
import posixpath
import shutil

import click

from brand_ui.add_cmd.brand_component import render_brand_component
from brand_ui.config_store import (
    read_project_config,
    read_scaffold_config,
    scaffold_components_alias,
)
from brand_ui.paths import TEMP_SCAFFOLD_DIR, component_file_name

# shadcn writes the utils import relative to the source root when the
# components alias is a plain path; base components use the @/ alias.
UTILS_IMPORT = 'from "src/lib/utils"'
UTILS_ALIAS_IMPORT = 'from "@/lib/utils"'


def add_component(component_name, runner, project_dir="."):
    """Run ``shadcn add`` and split the result into base and brand files.

    shadcn's components alias is pointed at the temporary scaffold directory
    while it runs and restored to the project's base directory afterwards,
    whether or not the add succeeded.

    Args:
        component_name: Component to add, passed to shadcn as-is.
        runner: ScaffoldRunner (or compatible) used to invoke shadcn.
        project_dir: Directory holding .brand-uirc.json and components.json.

    Returns:
        (base_component_path, brand_component_path)

    Raises:
        NotInitializedError: If either config file is missing.
        ScaffoldToolError: If shadcn fails.
    """
    config = read_project_config(project_dir)
    scaffold_config = read_scaffold_config(project_dir)

    base_dir = os.path.join(project_dir, config.resolved_base_dir)
    brand_dir = os.path.join(project_dir, config.resolved_brand_dir)
    temp_dir = os.path.join(project_dir, TEMP_SCAFFOLD_DIR)

    with scaffold_components_alias(scaffold_config, TEMP_SCAFFOLD_DIR, config.base_dir):
        click.echo(f"\nAdding {component_name} component via shadcn...")
        runner.add(component_name)

        file_name = component_file_name(component_name)
        generated_path = os.path.join(temp_dir, file_name)
        base_component_path = os.path.join(base_dir, file_name)
        brand_component_path = os.path.join(brand_dir, file_name)

        os.makedirs(base_dir, exist_ok=True)
        os.makedirs(brand_dir, exist_ok=True)

        shutil.move(generated_path, base_component_path)
        _rewrite_utils_import(base_component_path)
        click.echo(f"✓ Moved and updated base component: {base_component_path}")

        base_import_path = _base_import_path(config, component_name)
        with open(brand_component_path, "w", encoding="utf-8") as f:
            f.write(render_brand_component(component_name, base_import_path))
        click.echo(f"✓ Created brand component: {brand_component_path}")

        _remove_if_empty(temp_dir)

    click.echo("\nComponent added successfully!")
    click.echo(f"You can now customize the brand override in: {brand_component_path}")
    return base_component_path, brand_component_path


def _rewrite_utils_import(path):
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()
    updated = content.replace(UTILS_IMPORT, UTILS_ALIAS_IMPORT, 1)
    if updated != content:
        with open(path, "w", encoding="utf-8") as f:
            f.write(updated)


def _base_import_path(config, component_name):
    """Import path of the base component as seen from the brand directory."""
    relative = posixpath.relpath(config.resolved_base_dir, config.resolved_brand_dir)
    if not relative.startswith("."):
        relative = f"./{relative}"
    return f"{relative}/{component_name}"


def _remove_if_empty(directory):
    if os.path.isdir(directory) and not os.listdir(directory):
        os.rmdir(directory)
