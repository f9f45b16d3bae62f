"""Click command for updating a component."""

import click

from brand_ui.config_store import read_project_config
from brand_ui.error_handling import with_command_errors
from brand_ui.paths import list_component_names
from brand_ui.update_cmd.check_component import check_component


def _complete_component_name(ctx, _param, incomplete):
    """Offer base component names for shell completion."""
    try:
        config = read_project_config()
        names = list_component_names(config.resolved_base_dir)
    except Exception:
        return []
    return [name for name in names if name.startswith(incomplete)]


@click.command("update")
@click.argument("component_name", shell_complete=_complete_component_name)
def update_cmd(component_name):
    """Update a previously added shadcn component."""
    with with_command_errors("Error updating component"):
        check_component(component_name)
