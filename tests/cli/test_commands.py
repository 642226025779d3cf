"""CLI smoke tests via typer's CliRunner."""

import json

import pytest
from typer.testing import CliRunner

from proto_modularizer import __version__
from proto_modularizer.cli import app

runner = CliRunner()


@pytest.fixture
def unassigned_tree(tmp_path):
    """One file declares a package, one does not: the partition is incomplete."""
    (tmp_path / "a.proto").write_text('syntax = "proto3";\npackage acme.a;\nmessage A {}\n')
    (tmp_path / "loose.proto").write_text('syntax = "proto3";\nimport "a.proto";\n')
    return tmp_path


class TestAppBasics:
    def test_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "evaluate" in result.output
        assert "compare" in result.output

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_missing_path(self, tmp_path):
        result = runner.invoke(app, ["graph", str(tmp_path / "nope")])
        assert result.exit_code == 2

    def test_unknown_format(self, square_root):
        result = runner.invoke(app, ["graph", str(square_root), "--format", "xml"])
        assert result.exit_code == 2


class TestGraphCommand:
    def test_rich(self, square_root):
        result = runner.invoke(app, ["graph", str(square_root)])
        assert result.exit_code == 0
        assert "Dependency Graph" in result.output

    def test_json(self, square_root):
        result = runner.invoke(app, ["graph", str(square_root), "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["statistics"]["total_files"] == 23
        assert data["statistics"]["total_namespaces"] == 7


class TestPartitionCommand:
    def test_json(self, square_root):
        result = runner.invoke(app, ["partition", str(square_root), "-f", "json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["build_order"][0] == "square-common"
        assert len(data["modules"]) == 7

    def test_full_naming(self, square_root):
        result = runner.invoke(
            app, ["partition", str(square_root), "--naming", "full", "--format", "json"]
        )
        assert result.exit_code == 0
        names = [m["name"] for m in json.loads(result.stdout)["modules"]]
        assert all(name.startswith("com-square-") for name in names)

    def test_unknown_naming(self, square_root):
        result = runner.invoke(app, ["partition", str(square_root), "--naming", "camel"])
        assert result.exit_code == 1

    def test_rich(self, square_root):
        result = runner.invoke(app, ["partition", str(square_root)])
        assert result.exit_code == 0
        assert "square-payments" in result.output


class TestEvaluateCommand:
    def test_valid_exits_zero(self, square_root):
        result = runner.invoke(app, ["evaluate", str(square_root), "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["validation"]["is_valid"] is True
        assert data["metrics"]["critical_path_length"] == 5

    def test_invalid_exits_one(self, unassigned_tree):
        result = runner.invoke(app, ["evaluate", str(unassigned_tree)])
        assert result.exit_code == 1
        assert "INVALID" in result.output

    def test_config_file(self, square_root, tmp_path):
        config_file = tmp_path / "proto-modularizer.toml"
        config_file.write_text('naming_policy = "full"\n')
        result = runner.invoke(
            app, ["evaluate", str(square_root), "--config", str(config_file), "-f", "json"]
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout)["metrics"]["total_modules"] == 7


class TestCompareCommand:
    def test_json(self, square_root):
        result = runner.invoke(app, ["compare", str(square_root), "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert (data["a"], data["b"]) == ("standard", "full")
        assert len(data["rows"]) == 9

    def test_rich(self, square_root):
        result = runner.invoke(app, ["compare", str(square_root)])
        assert result.exit_code == 0
        assert "Quality Score" in result.output


class TestPlanCommand:
    def test_stdout(self, square_root):
        result = runner.invoke(app, ["plan", str(square_root)])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["build_order"][0] == "square-common"
        assert data["build_order"][-1] == "square-payments"

    def test_output_file(self, square_root, tmp_path):
        target = tmp_path / "plan.json"
        result = runner.invoke(app, ["plan", str(square_root), "--output", str(target), "-q"])
        assert result.exit_code == 0
        assert json.loads(target.read_text())["strategy"] == "namespace-based"

    def test_invalid_partition_refused(self, unassigned_tree, tmp_path):
        target = tmp_path / "plan.json"
        result = runner.invoke(app, ["plan", str(unassigned_tree), "--output", str(target)])
        assert result.exit_code == 1
        assert not target.exists()
