"""Unit tests for Typer-based CLI interface."""

import json
import os
from pathlib import Path
from unittest.mock import Mock

import pytest
from typer.testing import CliRunner

from solid_base_linter.domain.analyzer import SolidBaseAnalyzer
from solid_base_linter.domain.config import ConfigurationLoader
from solid_base_linter.infrastructure.gateways.astroid_gateway import AstroidGateway
from solid_base_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from solid_base_linter.infrastructure.services.guidance_service import GuidanceService
from solid_base_linter.interface.cli import CLIAppFactory, CLIDependencies
from solid_base_linter.interface.reporters import TerminalHierarchyReporter

runner = CliRunner()


def _make_deps(**overrides) -> CLIDependencies:
    """Create CLIDependencies with real gateways and a mock telemetry."""
    guidance = GuidanceService()
    defaults: dict = {
        "config_loader": ConfigurationLoader({"use_typeshed": False}),
        "telemetry": Mock(),
        "astroid_gateway": AstroidGateway(),
        "filesystem": FileSystemGateway(),
        "guidance_service": guidance,
        "reporter": TerminalHierarchyReporter(guidance),
        "analyzer_factory": SolidBaseAnalyzer,
    }
    defaults.update(overrides)
    return CLIDependencies(**defaults)


@pytest.fixture
def sample(tmp_path: Path) -> Path:
    pkg = tmp_path / "clipkg"
    pkg.mkdir()
    (pkg / "__init__.py").write_text("")
    (pkg / "shapes.py").write_text(
        "class Slotted:\n"
        "    __slots__ = ('a',)\n"
        "\n"
        "class Other:\n"
        "    __slots__ = ('b',)\n"
        "\n"
        "class Clash(Slotted, Other):\n"
        "    pass\n"
        "\n"
        "class Sub(Slotted):\n"
        "    pass\n"
    )
    return tmp_path


class TestResolveTargetPath:
    """Test path resolution logic."""

    def test_resolve_with_explicit_path(self) -> None:
        assert CLIAppFactory.resolve_target_path(Path("custom/path")) == "custom/path"

    def test_resolve_defaults_to_src_when_exists(self, tmp_path: Path) -> None:
        (tmp_path / "src").mkdir()
        original_cwd = Path.cwd()
        try:
            os.chdir(tmp_path)
            assert CLIAppFactory.resolve_target_path(None) == "src"
        finally:
            os.chdir(original_cwd)

    def test_resolve_defaults_to_cwd(self, tmp_path: Path) -> None:
        original_cwd = Path.cwd()
        try:
            os.chdir(tmp_path)
            assert CLIAppFactory.resolve_target_path(Path(".")) == "."
        finally:
            os.chdir(original_cwd)


class TestCheckCommand:
    def test_check_reports_conflict_and_exits_1(self, sample: Path) -> None:
        app = CLIAppFactory.create_app(_make_deps())
        result = runner.invoke(app, ["check", str(sample)])
        assert result.exit_code == 1
        assert "E9801 (instance-layout-conflict)" in result.stdout
        assert "Class 'Clash' has incompatible solid bases" in result.stdout
        assert "Checked 4 classes in 2 files: 1 diagnostics." in result.stdout

    def test_check_json(self, sample: Path) -> None:
        app = CLIAppFactory.create_app(_make_deps())
        result = runner.invoke(app, ["check", str(sample), "--format", "json"])
        assert result.exit_code == 1
        payload = json.loads(result.stdout)
        assert payload["classes_checked"] == 4
        assert payload["diagnostics"][0]["class"] == "clipkg.shapes.Clash"
        assert payload["diagnostics"][0]["candidates"] == ["clipkg.shapes.Slotted", "clipkg.shapes.Other"]

    def test_clean_tree_exits_0(self, tmp_path: Path) -> None:
        (tmp_path / "ok.py").write_text("class A(int):\n    pass\n")
        app = CLIAppFactory.create_app(_make_deps())
        result = runner.invoke(app, ["check", str(tmp_path)])
        assert result.exit_code == 0

    def test_unknown_format_exits_2(self, sample: Path) -> None:
        telemetry = Mock()
        app = CLIAppFactory.create_app(_make_deps(telemetry=telemetry))
        result = runner.invoke(app, ["check", str(sample), "--format", "xml"])
        assert result.exit_code == 2
        telemetry.error.assert_called_once()

    def test_missing_path_exits_2(self, tmp_path: Path) -> None:
        app = CLIAppFactory.create_app(_make_deps())
        result = runner.invoke(app, ["check", str(tmp_path / "missing")])
        assert result.exit_code == 2


class TestQueryCommands:
    def test_resolve_prints_solid_base(self, sample: Path) -> None:
        app = CLIAppFactory.create_app(_make_deps())
        result = runner.invoke(app, ["resolve", str(sample), "clipkg.shapes.Sub"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "clipkg.shapes.Sub -> clipkg.shapes.Slotted"

    def test_resolve_invalid_class(self, sample: Path) -> None:
        app = CLIAppFactory.create_app(_make_deps())
        result = runner.invoke(app, ["resolve", str(sample), "clipkg.shapes.Clash"])
        assert result.exit_code == 1
        assert "invalid (incompatible-bases)" in result.stdout

    def test_resolve_json(self, sample: Path) -> None:
        app = CLIAppFactory.create_app(_make_deps())
        result = runner.invoke(app, ["resolve", str(sample), "clipkg.shapes.Sub", "--json"])
        assert json.loads(result.stdout)["solid_base"] == "clipkg.shapes.Slotted"

    def test_resolve_unknown_class_exits_2(self, sample: Path) -> None:
        telemetry = Mock()
        app = CLIAppFactory.create_app(_make_deps(telemetry=telemetry))
        result = runner.invoke(app, ["resolve", str(sample), "clipkg.shapes.Ghost"])
        assert result.exit_code == 2
        assert "clipkg.shapes.Ghost" in telemetry.error.call_args[0][0]

    @pytest.mark.parametrize(
        "first, second, expected",
        [
            ("clipkg.shapes.Slotted", "clipkg.shapes.Other", "disjoint"),
            ("clipkg.shapes.Sub", "clipkg.shapes.Slotted", "overlap"),
            ("clipkg.shapes.Clash", "clipkg.shapes.Other", "unknown"),
        ],
    )
    def test_overlaps(self, sample: Path, first: str, second: str, expected: str) -> None:
        app = CLIAppFactory.create_app(_make_deps())
        result = runner.invoke(app, ["overlaps", str(sample), first, second])
        assert result.exit_code == 0
        assert result.stdout.strip() == expected

    def test_overlaps_unknown_class_exits_2(self, sample: Path) -> None:
        app = CLIAppFactory.create_app(_make_deps())
        result = runner.invoke(app, ["overlaps", str(sample), "clipkg.shapes.Ghost", "clipkg.shapes.Sub"])
        assert result.exit_code == 2

    def test_explain(self) -> None:
        app = CLIAppFactory.create_app(_make_deps())
        result = runner.invoke(app, ["explain", "W9804"])
        assert result.exit_code == 0
        assert "Protocols and TypedDicts" in result.stdout
