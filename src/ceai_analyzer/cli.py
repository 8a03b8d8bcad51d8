from __future__ import annotations

import logging
from functools import partial
from pathlib import Path
from typing import Optional

import typer

from .config import Settings
from .errors import IntakeError
from .flow import analyze_ceai_survey_data
from .intake import load_csv_path
from .models import RetryPolicy
from .orchestrator import AnalysisOrchestrator
from .prompt import render_prompt

app = typer.Typer(add_completion=False, help="CEAI survey analyzer (CSV in, plain text report out)")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def analyze(
    data: Path = typer.Option(..., "--data", help="Path to the CEAI survey CSV"),
    max_attempts: int = typer.Option(3, "--max-attempts", min=1, help="Model calls allowed when it is overloaded"),
    retry_delay: float = typer.Option(2.0, "--retry-delay", min=0.0, help="Seconds to wait between overload retries"),
    model: Optional[str] = typer.Option(None, "--model", help="Override CEAI_ANALYZER_LLM_MODEL"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log model calls and retries to stderr"),
):
    """
    Send the CSV to the model and print the report.

    Exit codes: 0 report printed, 1 analysis or file error, 2 file not found.
    """
    _configure_logging(verbose)
    try:
        uploaded = load_csv_path(data)
    except FileNotFoundError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(code=2)
    except IntakeError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(code=1)

    settings = Settings.from_env(model=model)
    orchestrator = AnalysisOrchestrator(
        partial(analyze_ceai_survey_data, settings=settings),
        policy=RetryPolicy(max_attempts=max_attempts, delay_seconds=retry_delay),
    )
    result = orchestrator.analyze(uploaded.content)
    if result.error is not None:
        typer.echo(f"ERROR: {result.error}", err=True)
        raise typer.Exit(code=1)
    typer.echo(result.summary)


@app.command()
def prompt(data: Path = typer.Option(..., "--data", help="Path to the CEAI survey CSV")):
    """Print the prompt that would be sent for this CSV, without calling the model."""
    try:
        uploaded = load_csv_path(data)
    except FileNotFoundError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(code=2)
    except IntakeError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(render_prompt(uploaded.content))
