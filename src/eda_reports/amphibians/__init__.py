"""Amphibian survey counts report."""

from .aggregate import counts_by_stage_year, filter_records, top_lakes
from .runner import run

__all__ = [
    "filter_records",
    "counts_by_stage_year",
    "top_lakes",
    "run",
]
