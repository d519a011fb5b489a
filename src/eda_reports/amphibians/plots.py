"""Matplotlib rendering of the amphibian count charts."""
from __future__ import annotations

from matplotlib.axes import Axes
from matplotlib.figure import Figure
import pandas as pd

from .aggregate import STAGE_ORDER


def plot_counts_by_year(ax: Axes, counts: pd.DataFrame) -> Axes:
    """Stacked bars of total count per year, one segment per life stage."""

    ax.set_title("Mountain yellow-legged frog counts by year")
    ax.set_xlabel("Year")
    ax.set_ylabel("Individuals observed")
    if counts.empty:
        return ax
    wide = counts.pivot_table(
        index="year", columns="life_stage", values="count", aggfunc="sum", fill_value=0
    )
    stages = [s for s in STAGE_ORDER if s in wide.columns]
    stages += [s for s in wide.columns if s not in stages]
    years = [str(y) for y in wide.index]
    bottom = [0] * len(years)
    for stage in stages:
        values = wide[stage].tolist()
        ax.bar(years, values, bottom=bottom, label=stage)
        bottom = [b + v for b, v in zip(bottom, values)]
    ax.legend(title="Life stage")
    ax.grid(True, axis="y", alpha=0.3)
    return ax


def plot_top_lakes(ax: Axes, lakes: pd.DataFrame) -> Axes:
    """Horizontal bars for the top lakes, largest on top, with value labels."""

    ax.set_title("Lakes with the most adult and sub-adult frogs")
    ax.set_xlabel("Individuals observed")
    if lakes.empty:
        return ax
    ordered = lakes.iloc[::-1]
    bars = ax.barh(ordered["label"], ordered["count"], color="tab:green")
    ax.bar_label(bars, labels=[str(int(v)) for v in ordered["count"]], padding=3)
    ax.margins(x=0.15)
    ax.grid(True, axis="x", alpha=0.3)
    return ax


def render_figure(counts: pd.DataFrame, lakes: pd.DataFrame) -> Figure:
    """Composite both charts side by side.

    The figure is built without pyplot so rendering never touches the
    process-wide backend.
    """
    fig = Figure(figsize=(14, 6))
    ax_years, ax_lakes = fig.subplots(1, 2)
    plot_counts_by_year(ax_years, counts)
    plot_top_lakes(ax_lakes, lakes)
    fig.tight_layout()
    return fig
