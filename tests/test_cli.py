"""Tests for the graff command line interface."""

import tomllib
from pathlib import Path

import pytest
from typer.testing import CliRunner

from graff import load_graph_document
from graff._cli.main import app

runner = CliRunner()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run each command from an empty directory so no project config is picked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def graph_file(workdir: Path) -> Path:
    path = workdir / "graph.toml"
    path.write_text(
        """
nodes = ["D"]
edges = [["A", "B"], ["B", "C"], ["A", "C"]]
""",
    )
    return path


@pytest.fixture
def cyclic_file(workdir: Path) -> Path:
    path = workdir / "cyclic.toml"
    path.write_text('edges = [["A", "B"], ["B", "A"]]\n')
    return path


class TestSortCommand:
    def test_prints_order(self, graph_file: Path) -> None:
        result = runner.invoke(app, ["sort", str(graph_file)])
        assert result.exit_code == 0, result.output
        for node in ("A", "B", "C", "D"):
            assert node in result.output

    def test_cycle_fails(self, cyclic_file: Path) -> None:
        result = runner.invoke(app, ["sort", str(cyclic_file)])
        assert result.exit_code == 1
        assert "cannot be cyclic" in result.output

    def test_missing_file_fails(self, workdir: Path) -> None:
        result = runner.invoke(app, ["sort", str(workdir / "missing.toml")])
        assert result.exit_code == 1


class TestReduceCommand:
    def test_prints_remaining_edges(self, graph_file: Path) -> None:
        result = runner.invoke(app, ["reduce", str(graph_file)])
        assert result.exit_code == 0, result.output
        assert "Removed 1 transitive edge(s)" in result.output

    def test_exports_reduced_graph(self, graph_file: Path, workdir: Path) -> None:
        output = workdir / "reduced.toml"
        result = runner.invoke(app, ["reduce", str(graph_file), "-o", str(output)])
        assert result.exit_code == 0, result.output

        document = load_graph_document(output)
        assert sorted(document.edges) == [("A", "B"), ("B", "C")]
        assert "D" in document.nodes

    def test_creates_missing_output_directory(self, graph_file: Path, workdir: Path) -> None:
        output = workdir / "out" / "nested" / "reduced.toml"
        result = runner.invoke(app, ["reduce", str(graph_file), "-o", str(output)])
        assert result.exit_code == 0, result.output
        assert output.is_file()

    def test_cycle_fails(self, cyclic_file: Path) -> None:
        result = runner.invoke(app, ["reduce", str(cyclic_file)])
        assert result.exit_code == 1


class TestLayersCommand:
    def test_exports_layers(self, graph_file: Path, workdir: Path) -> None:
        output = workdir / "layers.toml"
        result = runner.invoke(app, ["layers", str(graph_file), "--width", "2", "-o", str(output)])
        assert result.exit_code == 0, result.output

        with output.open("rb") as f:
            data = tomllib.load(f)
        assert data["width"] == 2
        assert [set(layer) for layer in data["layers"]] == [{"A", "D"}, {"B"}, {"C"}]

    def test_width_from_config(self, graph_file: Path, workdir: Path) -> None:
        (workdir / "pyproject.toml").write_text('[tool.graff]\nwidth = 1\noutput = "layers.toml"\n')

        result = runner.invoke(app, ["layers", str(graph_file)])
        assert result.exit_code == 0, result.output

        with (workdir / "layers.toml").open("rb") as f:
            data = tomllib.load(f)
        assert data["width"] == 1
        assert len(data["layers"]) == 4

    def test_configured_output_in_missing_directory(self, graph_file: Path, workdir: Path) -> None:
        (workdir / "pyproject.toml").write_text('[tool.graff]\noutput = "build/layers.toml"\n')
        assert not (workdir / "build").exists()

        result = runner.invoke(app, ["layers", str(graph_file)])
        assert result.exit_code == 0, result.output

        with (workdir / "build" / "layers.toml").open("rb") as f:
            data = tomllib.load(f)
        assert len(data["layers"]) == 3

    def test_unwritable_output_fails(self, graph_file: Path, workdir: Path) -> None:
        # the parent of the output path is a regular file
        (workdir / "build").write_text("")

        result = runner.invoke(app, ["layers", str(graph_file), "-o", str(workdir / "build" / "layers.toml")])
        assert result.exit_code == 1
        assert "Could not write" in result.output

    def test_invalid_config_fails(self, graph_file: Path, workdir: Path) -> None:
        (workdir / "pyproject.toml").write_text("[tool.graff]\nwidth = 0\n")

        result = runner.invoke(app, ["layers", str(graph_file)])
        assert result.exit_code == 1

    def test_zero_width_is_rejected(self, graph_file: Path) -> None:
        result = runner.invoke(app, ["layers", str(graph_file), "--width", "0"])
        assert result.exit_code != 0

    def test_event_graph(self, workdir: Path) -> None:
        path = workdir / "events.toml"
        path.write_text('kind = "event"\nedges = [["boot", "login"], ["login", "save"]]\n')
        output = workdir / "layers.toml"

        result = runner.invoke(app, ["layers", str(path), "-o", str(output)])
        assert result.exit_code == 0, result.output

        with output.open("rb") as f:
            data = tomllib.load(f)
        assert data["layers"] == [["save"], ["login"], ["boot"]]

    def test_cycle_fails(self, cyclic_file: Path) -> None:
        result = runner.invoke(app, ["layers", str(cyclic_file)])
        assert result.exit_code == 1
        assert "cannot be cyclic" in result.output

    def test_verbose_flag(self, graph_file: Path) -> None:
        result = runner.invoke(app, ["--verbose", "layers", str(graph_file)])
        assert result.exit_code == 0, result.output
