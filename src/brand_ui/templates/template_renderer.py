"""Render Jinja2 source templates bundled in a caller's templates subpackage."""

import importlib.resources

import jinja2


def render_template(template_name: str, *, package: str, **kwargs) -> str:
    """Render ``<package>.templates/<template_name>`` with *kwargs* as its context.

    Callers pass their own ``__package__`` so each command keeps its templates
    next to its code. Generated files must be complete, so a variable the
    template uses but the caller forgot raises jinja2.UndefinedError, and the
    final newline of the template survives rendering. A template that is not
    bundled raises FileNotFoundError.
    """
    source = (
        importlib.resources.files(f"{package}.templates")
        .joinpath(template_name)
        .read_text(encoding="utf-8")
    )
    template = jinja2.Template(
        source,
        undefined=jinja2.StrictUndefined,
        keep_trailing_newline=True,
    )
    return template.render(**kwargs)
