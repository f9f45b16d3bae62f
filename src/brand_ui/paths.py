"""Alias path resolution and the fixed locations brand-ui works with."""

import os

ALIAS_PREFIX = "@/"
SOURCE_ROOT = "src/"
COMPONENT_EXTENSION = ".tsx"

DEFAULT_BASE_DIR = "@/components/base"
DEFAULT_BRAND_DIR = "@/components/brand"

# Where shadcn writes a component while `add` runs
TEMP_SCAFFOLD_DIR = "src/components/ui"


def resolve_alias_path(alias_path: str) -> str:
    """Convert an ``@/`` alias path to a source-root path.

    ``@/components/base`` becomes ``src/components/base``. Paths without the
    alias prefix are returned unchanged.
    """
    if alias_path.startswith(ALIAS_PREFIX):
        return SOURCE_ROOT + alias_path[len(ALIAS_PREFIX):]
    return alias_path


def component_file_name(component_name: str) -> str:
    return f"{component_name}{COMPONENT_EXTENSION}"


def list_component_names(directory: str) -> list:
    """Names of the component files in *directory*, extension stripped, sorted.

    Entries that do not end in the component extension are skipped.
    """
    return sorted(
        entry[: -len(COMPONENT_EXTENSION)]
        for entry in os.listdir(directory)
        if entry.endswith(COMPONENT_EXTENSION)
    )
