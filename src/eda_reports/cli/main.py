"""Command line interface entry points."""
from __future__ import annotations

import json
import logging
from pathlib import Path

import typer

from ..config import get_settings

app = typer.Typer()
amphibians_app = typer.Typer()
seawater_app = typer.Typer()
app.add_typer(amphibians_app, name="amphibians")
app.add_typer(seawater_app, name="seawater")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level"),
) -> None:
    """Render the exploratory analysis reports."""

    level = "DEBUG" if verbose else get_settings().log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@amphibians_app.command("run")
def amphibians_run(
    spec_path: Path = typer.Option(..., "--spec", exists=True, file_okay=True, dir_okay=False)
) -> None:
    """Render the amphibian counts report and print its summary."""

    from ..schemas import AmphibianReportSpec  # local import to keep startup light
    from ..amphibians.runner import run

    spec_model = AmphibianReportSpec.model_validate_json(spec_path.read_text())
    summary = run(spec_model)
    payload = {
        "years": summary.get("years"),
        "total_count": summary.get("total_count"),
        "top_lakes": summary.get("top_lakes"),
        "figure": summary.get("artifacts", {}).get("figure"),
    }
    typer.echo(json.dumps(payload, separators=(",", ":"), default=str))


@seawater_app.command("run")
def seawater_run(
    spec_path: Path = typer.Option(..., "--spec", exists=True, file_okay=True, dir_okay=False)
) -> None:
    """Render the seawater model comparison report and print its summary."""

    from ..schemas import SeawaterReportSpec
    from ..seawater.runner import run

    spec_model = SeawaterReportSpec.model_validate_json(spec_path.read_text())
    summary = run(spec_model)
    payload = {
        "best_by": summary.get("best_by"),
        "final_model": summary.get("final_model"),
        "equation": summary.get("equation"),
        "report": summary.get("artifacts", {}).get("report"),
    }
    typer.echo(json.dumps(payload, separators=(",", ":")))


if __name__ == "__main__":
    app()
