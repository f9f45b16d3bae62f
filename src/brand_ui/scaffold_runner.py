"""ScaffoldRunner: runs the shadcn CLI through a package runner with the terminal attached."""

import shlex
import subprocess
from typing import List

DEFAULT_PACKAGE_RUNNER = "pnpm dlx"
DEFAULT_SCAFFOLD_PACKAGE = "shadcn@latest"


def package_name(package: str) -> str:
    """Strip a version or tag: "shadcn@latest" -> "shadcn", "@scope/ui@2" -> "@scope/ui"."""
    version_at = package.rfind("@")
    if version_at > 0:
        return package[:version_at]
    return package


class ScaffoldToolError(Exception):
    """The scaffolding tool could not be started or exited non-zero."""

    def __init__(self, tool: str, subcommand: str, returncode=None):
        super().__init__(f"{tool} {subcommand} failed")
        self.tool = tool
        self.subcommand = subcommand
        self.returncode = returncode


class ScaffoldRunner:
    """Invokes ``<package runner> <package> <subcommand>``.

    stdin/stdout/stderr are inherited so shadcn's own prompts reach the user.
    There is no timeout: a hanging child hangs the command.
    """

    def __init__(self, package_runner=DEFAULT_PACKAGE_RUNNER, package=DEFAULT_SCAFFOLD_PACKAGE):
        self.package_runner = package_runner
        self.package = package

    @property
    def tool(self) -> str:
        return package_name(self.package)

    def build_command(self, subcommand: str, *args: str) -> List[str]:
        return shlex.split(self.package_runner) + [self.package, subcommand] + list(args)

    def init(self) -> None:
        self._run("init")

    def add(self, component_name: str) -> None:
        self._run("add", component_name)

    def _run(self, subcommand, *args):
        cmd = self.build_command(subcommand, *args)
        label = " ".join([subcommand] + list(args))
        try:
            result = subprocess.run(cmd)
        except OSError as e:
            raise ScaffoldToolError(self.tool, label) from e
        if result.returncode != 0:
            raise ScaffoldToolError(self.tool, label, result.returncode)
