from __future__ import annotations

import json

import pytest

from values_schema import __version__
from values_schema.cli import main


@pytest.mark.unit
def test_version(capsys) -> None:
    assert main(["version"]) == 0
    assert capsys.readouterr().out.strip() == f"values-schema {__version__}"


@pytest.mark.unit
def test_generate(chart_dir, capsys) -> None:
    assert main(["generate", str(chart_dir)]) == 0

    out = capsys.readouterr().out
    assert "Generated" in out
    schema = json.loads((chart_dir / "values.schema.json").read_text(encoding="utf-8"))
    assert schema["$schema"] == "http://json-schema.org/schema#"


@pytest.mark.unit
def test_generate_with_overrides_and_output(chart_dir, capsys) -> None:
    code = main(["generate", str(chart_dir), "-f", "overrides.yaml", "-o", "schema.json"])

    assert code == 0
    assert "by merging overrides.yaml" in capsys.readouterr().out
    assert (chart_dir / "schema.json").is_file()


@pytest.mark.unit
def test_context_from_environment(chart_dir, monkeypatch) -> None:
    monkeypatch.setenv("VALUES_SCHEMA_CONTEXT", str(chart_dir))

    assert main(["generate"]) == 0
    assert (chart_dir / "values.schema.json").is_file()


@pytest.mark.unit
def test_missing_context_prints_help(capsys) -> None:
    assert main(["generate"]) == 2
    assert "usage:" in capsys.readouterr().err


@pytest.mark.unit
def test_errors_exit_with_status_one(tmp_path, capsys) -> None:
    chart = tmp_path / "chart"
    chart.mkdir()

    assert main(["generate", str(chart)]) == 1
    assert capsys.readouterr().err.startswith("Error: no values.yaml")


@pytest.mark.unit
def test_missing_overrides_file(chart_dir, capsys) -> None:
    assert main(["generate", str(chart_dir), "-f", "nope.yaml"]) == 1
    assert "overrides file nope.yaml not found" in capsys.readouterr().err


@pytest.mark.unit
def test_invalid_max_depth(chart_dir, capsys) -> None:
    assert main(["generate", str(chart_dir), "--max-depth", "0"]) == 1
    assert capsys.readouterr().err.startswith("Error:")


@pytest.mark.unit
def test_debug_flag(chart_dir) -> None:
    assert main(["--debug", "generate", str(chart_dir)]) == 0
