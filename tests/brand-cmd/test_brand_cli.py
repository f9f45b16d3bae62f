"""CLI integration tests for brand-ui brand."""

import pytest
from click.testing import CliRunner

from brand_ui.cli import main


def _invoke_brand(*args):
    return CliRunner().invoke(main, ["brand", *args])


@pytest.mark.unit
class TestBrandList:

    def test_empty_brand_directory(self, initialized_project):
        result = _invoke_brand("list")

        assert result.exit_code == 0
        assert "No brand overrides found." in result.output
        assert "brand-ui add button" in result.output

    def test_lists_component_files_only(self, initialized_project):
        brand_dir = initialized_project / "src/components/brand"
        (brand_dir / "card.tsx").write_text("")
        (brand_dir / "button.tsx").write_text("")
        (brand_dir / "notes.md").write_text("")

        result = _invoke_brand("list")

        assert result.exit_code == 0
        lines = [line for line in result.output.splitlines() if line.startswith("✓")]
        assert lines == ["✓ button", "✓ card"]

    def test_only_non_component_files(self, initialized_project):
        (initialized_project / "src/components/brand/notes.md").write_text("")

        result = _invoke_brand("list")

        assert result.exit_code == 0
        assert "Brand overrides:" in result.output
        assert "✓" not in result.output

    def test_missing_brand_directory(self, initialized_project):
        (initialized_project / "src/components/brand").rmdir()

        result = _invoke_brand("list")

        assert result.exit_code == 1
        assert "Error in brand command:" in result.output


@pytest.mark.unit
class TestBrandErrors:

    def test_unknown_subcommand(self, initialized_project):
        result = _invoke_brand("tokens")

        assert result.exit_code == 1
        assert "Unknown subcommand: tokens" in result.output
        assert "Available subcommands: list" in result.output

    def test_not_initialized(self, project):
        result = _invoke_brand("list")

        assert result.exit_code == 1
        assert "Project not initialized" in result.output

    def test_requires_subcommand(self, initialized_project):
        result = _invoke_brand()

        assert result.exit_code == 2


@pytest.mark.unit
class TestBrandMalformedConfig:

    @pytest.mark.parametrize("content", [
        "[]",
        '"x"',
        '{"baseDir": 5, "brandDir": "@/components/brand"}',
    ])
    def test_reported_as_brand_command_error(self, project, content):
        (project / ".brand-uirc.json").write_text(content)

        result = _invoke_brand("list")

        assert result.exit_code == 1
        assert "Error in brand command:" in result.output
        assert isinstance(result.exception, SystemExit)
