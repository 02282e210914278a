from __future__ import annotations

import shutil
from pathlib import Path

import pytest
from typer.testing import CliRunner

from pomgen.cli import app


SAMPLE_GRAPH = Path(__file__).parent / "data" / "build-graph.json"

runner = CliRunner()


@pytest.fixture
def graph(tmp_path: Path) -> Path:
    target = tmp_path / "build-graph.json"
    shutil.copy(SAMPLE_GRAPH, target)
    return target


def test_generate_writes_next_to_graph(graph: Path) -> None:
    result = runner.invoke(app, ["generate", str(graph), "--group-id", "io.example"])

    assert result.exit_code == 0, result.output
    text = (graph.parent / "pom.xml").read_text(encoding="utf-8")
    assert "<groupId>io.example</groupId>" in text
    assert "<artifactId>app</artifactId>" in text
    assert text.count("<dependency>") == 5


def test_generate_output_from_env(graph: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    target = graph.parent / "custom" / "deps.xml"
    monkeypatch.setenv("POMGEN_OUTPUT", str(target))

    result = runner.invoke(app, ["generate", str(graph)])

    assert result.exit_code == 0, result.output
    assert target.exists()


def test_generate_missing_graph(tmp_path: Path) -> None:
    result = runner.invoke(app, ["generate", str(tmp_path / "missing.json")])

    assert result.exit_code == 1
    assert "Error" in result.output


def test_show_groups_by_scope(graph: Path) -> None:
    result = runner.invoke(app, ["show", str(graph)])

    assert result.exit_code == 0, result.output
    assert "compile" in result.output
    assert "junit:junit:4.13.2" in result.output


def test_classify() -> None:
    result = runner.invoke(app, ["classify", "api", "testImplementation", "kapt"])

    assert result.exit_code == 0, result.output
    assert "compile" in result.output
    assert "test" in result.output
    assert "undefined" in result.output
