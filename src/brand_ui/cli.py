"""Top-level Click group for the brand-ui CLI."""

import click

from brand_ui.add_cmd.cli import add_cmd
from brand_ui.brand_cmd.cli import brand_cmd
from brand_ui.init_cmd.cli import init_cmd
from brand_ui.scaffold_runner import DEFAULT_PACKAGE_RUNNER, DEFAULT_SCAFFOLD_PACKAGE
from brand_ui.update_cmd.cli import update_cmd


@click.group()
@click.version_option("0.0.1", prog_name="brand-ui")
@click.option(
    "--package-runner",
    envvar="BRAND_UI_PACKAGE_RUNNER",
    default=DEFAULT_PACKAGE_RUNNER,
    show_default=True,
    help="Command used to execute the scaffolding package.",
)
@click.option(
    "--scaffold-package",
    envvar="BRAND_UI_SCAFFOLD_PACKAGE",
    default=DEFAULT_SCAFFOLD_PACKAGE,
    show_default=True,
    help="Scaffolding package to run.",
)
@click.pass_context
def main(ctx, package_runner, scaffold_package):
    """brand-ui - manage shadcn components with base/brand layering."""
    ctx.obj = {"package_runner": package_runner, "package": scaffold_package}


main.add_command(init_cmd)
main.add_command(add_cmd)
main.add_command(update_cmd)
main.add_command(brand_cmd)
