"""Top-level orchestration for the amphibian counts report."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

from ..config import get_settings
from ..core.dataset import load_amphibians
from ..io import artifacts
from ..schemas import AmphibianReportSpec
from . import aggregate, plots

logger = logging.getLogger(__name__)


def _output_dir(spec: AmphibianReportSpec) -> Path:
    out_dir = Path(spec.artifacts.out_dir or get_settings().out_dir) / "amphibians"
    out_dir.mkdir(parents=True, exist_ok=True)
    return out_dir


def run(spec: AmphibianReportSpec) -> Dict[str, Any]:
    """Execute the amphibian workflow and return the report summary."""

    records = load_amphibians(spec.data.dataset_path, spec.data.columns)
    filtered = aggregate.filter_records(
        records,
        species=spec.filters.species,
        exclude_stages=spec.filters.exclude_stages,
    )
    logger.info(
        "kept %d of %d records for species %s", len(filtered), len(records), spec.filters.species
    )
    counts = aggregate.counts_by_stage_year(filtered)
    lakes = aggregate.top_lakes(filtered, n=spec.top_n, stages=spec.filters.lake_stages)

    out_dir = _output_dir(spec)
    paths = {
        "counts": out_dir / "counts_by_stage_year.csv",
        "lakes": out_dir / "top_lakes.csv",
        "figure": out_dir / "amphibian_counts.png",
        "summary": out_dir / "summary.json",
    }
    artifacts.write_table(paths["counts"], counts)
    artifacts.write_table(paths["lakes"], lakes)
    artifacts.save_figure(paths["figure"], plots.render_figure(counts, lakes))

    years = sorted(int(y) for y in counts["year"].unique()) if not counts.empty else []
    summary: Dict[str, Any] = {
        "species": spec.filters.species,
        "n_records": int(len(records)),
        "n_filtered": int(len(filtered)),
        "years": years,
        "total_count": int(counts["count"].sum()) if not counts.empty else 0,
        "top_lakes": [
            {"lake_id": row["lake_id"], "count": int(row["count"])}
            for row in lakes.to_dict("records")
        ],
        "artifacts": {name: str(path) for name, path in paths.items()},
    }
    artifacts.write_summary(paths["summary"], summary)
    logger.info("amphibian report written to %s", out_dir)
    return summary
