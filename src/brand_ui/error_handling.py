"""Command boundary: turns brand-ui failures into a message and exit status 1."""

import sys
from contextlib import contextmanager

import click

from brand_ui.config_store import NotInitializedError
from brand_ui.scaffold_runner import ScaffoldToolError

NOT_INITIALIZED_MESSAGE = 'Error: Project not initialized. Run "brand-ui init" first.'


@contextmanager
def with_command_errors(failure_prefix, scaffold_hint=""):
    """Report any failure of the wrapped command on stderr and exit 1.

    Args:
        failure_prefix: Leading text for unexpected I/O and parse failures,
            e.g. "Error adding component".
        scaffold_hint: Extra sentence appended when shadcn itself fails.
    """
    try:
        yield
    except NotInitializedError:
        click.echo(NOT_INITIALIZED_MESSAGE, err=True)
        sys.exit(1)
    except ScaffoldToolError as e:
        message = f"Error running {e.tool} {e.subcommand}"
        if scaffold_hint:
            message = f"{message}. {scaffold_hint}"
        click.echo(message, err=True)
        sys.exit(1)
    except (OSError, ValueError, KeyError) as e:
        click.echo(f"{failure_prefix}: {e}", err=True)
        sys.exit(1)
