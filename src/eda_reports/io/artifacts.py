"""Utilities to persist rendered report artifacts."""
from __future__ import annotations
import json
from pathlib import Path
from typing import Any, Dict

from matplotlib.figure import Figure
import pandas as pd


def write_summary(path: str | Path, summary: Dict[str, Any]) -> None:
    Path(path).write_text(json.dumps(summary, indent=2, default=str, allow_nan=False))


def write_table(path: str | Path, df: pd.DataFrame) -> None:
    """Persist a result table to CSV."""

    df.to_csv(path, index=False)


def write_report(path: str | Path, text: str) -> None:
    Path(path).write_text(text)


def save_figure(path: str | Path, fig: Figure, dpi: int = 150) -> None:
    fig.savefig(path, dpi=dpi)
