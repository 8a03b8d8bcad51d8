from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from ceai_analyzer import cli
from ceai_analyzer.models import AnalyzeOutput

runner = CliRunner()


@pytest.fixture
def csv_file(tmp_path: Path) -> Path:
    p = tmp_path / "ceai.csv"
    p.write_text("Department,Q1\nHR,4\n", encoding="utf-8")
    return p


def test_analyze_prints_report(monkeypatch: pytest.MonkeyPatch, csv_file: Path) -> None:
    seen = []

    def fake_flow(data, *, settings):
        seen.append((data.csv_data, settings.model))
        return AnalyzeOutput(summary="CEAI SURVEY ANALYSIS")

    monkeypatch.setattr(cli, "analyze_ceai_survey_data", fake_flow)
    result = runner.invoke(cli.app, ["analyze", "--data", str(csv_file), "--model", "gpt-test"])
    assert result.exit_code == 0
    assert "CEAI SURVEY ANALYSIS" in result.output
    assert seen == [("Department,Q1\nHR,4\n", "gpt-test")]


def test_analyze_exhausted_retries(monkeypatch: pytest.MonkeyPatch, csv_file: Path) -> None:
    calls = []

    def overloaded(data, *, settings):
        calls.append(data)
        raise RuntimeError("The model is overloaded. Please try again later.")

    monkeypatch.setattr(cli, "analyze_ceai_survey_data", overloaded)
    result = runner.invoke(
        cli.app, ["analyze", "--data", str(csv_file), "--max-attempts", "2", "--retry-delay", "0"]
    )
    assert result.exit_code == 1
    assert "Analysis failed after 2 attempts" in result.output
    assert len(calls) == 2


def test_analyze_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(cli.app, ["analyze", "--data", str(tmp_path / "nope.csv")])
    assert result.exit_code == 2


def test_analyze_rejects_non_csv(tmp_path: Path) -> None:
    p = tmp_path / "notes.txt"
    p.write_text("hello", encoding="utf-8")
    result = runner.invoke(cli.app, ["analyze", "--data", str(p)])
    assert result.exit_code == 1
    assert "Invalid file type" in result.output


def test_prompt_command(csv_file: Path) -> None:
    result = runner.invoke(cli.app, ["prompt", "--data", str(csv_file)])
    assert result.exit_code == 0
    assert "HR,4" in result.output
    assert "DEPARTMENT BREAKDOWN" in result.output
