"""Brand override source: the wrapper component written next to each base component."""

from brand_ui.templates.template_renderer import render_template


def capitalize_component_name(component_name: str) -> str:
    """Uppercase the first character only; "alert-dialog" stays invalid as a symbol."""
    return component_name[:1].upper() + component_name[1:]


def render_brand_component(component_name: str, base_import_path: str = None) -> str:
    """Render the brand wrapper for *component_name*.

    The wrapper imports ``<Name>`` (as ``Base<Name>``) and ``<Name>Props`` from
    *base_import_path*, which defaults to the sibling base directory.
    """
    if base_import_path is None:
        base_import_path = f"../base/{component_name}"
    return render_template(
        "brand_component.tsx.j2",
        package=__package__,
        component_name=component_name,
        symbol=capitalize_component_name(component_name),
        base_import_path=base_import_path,
    )
