import json
import os
import subprocess
import sys
from pathlib import Path

import pandas as pd
import pytest

from eda_reports import schemas
from eda_reports.amphibians import aggregate, plots, runner
from eda_reports.core import dataset

DATA_DIR = Path(__file__).parent / "data"


def load_filtered():
    return aggregate.filter_records(dataset.load_amphibians(DATA_DIR / "amphibians.csv"))


def test_filter_records_drops_egg_masses_and_other_species():
    df = load_filtered()
    assert set(df["species"]) == {"RAMU"}
    assert "EggMass" not in set(df["life_stage"])
    assert len(df) == 11


def test_counts_by_stage_year():
    counts = aggregate.counts_by_stage_year(load_filtered())
    got = {(r["life_stage"], r["year"]): r["count"] for r in counts.to_dict("records")}
    assert got == {
        ("Adult", 1995): 5,
        ("Adult", 1996): 19,
        ("Adult", 2000): 8,
        ("Adult", 2002): 9,
        ("SubAdult", 1995): 3,
        ("SubAdult", 2000): 9,
        ("Tadpole", 1995): 40,
        ("Tadpole", 1996): 0,
    }
    assert counts["life_stage"].tolist()[0] == "Adult"


def test_counts_match_filtered_sum():
    df = load_filtered()
    counts = aggregate.counts_by_stage_year(df)
    assert counts["count"].sum() == df["count"].fillna(0).sum()


def test_counts_by_stage_year_empty():
    df = load_filtered()
    counts = aggregate.counts_by_stage_year(df.iloc[0:0])
    assert counts.empty
    assert list(counts.columns) == ["life_stage", "year", "count"]


def test_top_lakes_tie_break_and_limit():
    lakes = aggregate.top_lakes(load_filtered())
    assert lakes["lake_id"].tolist() == [10102, 10101, 10103, 10104, 10105]
    assert lakes["count"].tolist() == [12, 8, 8, 8, 8]
    assert lakes["label"].tolist()[0] == "Lake 10102"


def test_top_lakes_excluded_never_higher():
    df = load_filtered()
    lakes = aggregate.top_lakes(df, n=3)
    assert len(lakes) == 3
    adults = df[df["life_stage"].isin(["Adult", "SubAdult"])]
    totals = adults.assign(count=adults["count"].fillna(0)).groupby("lake_id")["count"].sum()
    excluded = totals.drop(index=lakes["lake_id"].tolist())
    assert excluded.max() <= lakes["count"].min()
    for row in lakes.to_dict("records"):
        assert row["count"] == totals[row["lake_id"]]


def test_top_lakes_without_adults():
    df = load_filtered()
    lakes = aggregate.top_lakes(df[df["life_stage"] == "Tadpole"])
    assert lakes.empty


def test_render_figure_has_two_panels():
    df = load_filtered()
    fig = plots.render_figure(aggregate.counts_by_stage_year(df), aggregate.top_lakes(df))
    ax_years, ax_lakes = fig.axes[:2]
    assert len(ax_lakes.patches) == 5
    assert ax_years.get_legend() is not None
    labels = sorted(int(t.get_text()) for t in ax_lakes.texts)
    assert labels == [8, 8, 8, 8, 12]


def test_render_figure_leaves_pyplot_alone():
    plt = pytest.importorskip("matplotlib.pyplot")
    before = plt.get_fignums()
    df = load_filtered()
    plots.render_figure(aggregate.counts_by_stage_year(df), aggregate.top_lakes(df))
    assert plt.get_fignums() == before


def test_import_keeps_configured_backend():
    env = {**os.environ, "MPLBACKEND": "svg", "PYTHONPATH": str(Path(__file__).resolve().parents[1] / "src")}
    result = subprocess.run(
        [sys.executable, "-c", "import eda_reports.amphibians, matplotlib; print(matplotlib.get_backend())"],
        capture_output=True,
        text=True,
        env=env,
    )
    assert result.returncode == 0, result.stderr
    assert result.stdout.strip().lower() == "svg"


def test_counts_by_stage_year_rejects_missing_year():
    df = load_filtered().copy()
    df.loc[df.index[0], "year"] = pd.NA
    with pytest.raises(ValueError):
        aggregate.counts_by_stage_year(df)


def test_runner_writes_artifacts(tmp_path: Path):
    spec = schemas.AmphibianReportSpec(
        data=schemas.AmphibianDataSpec(dataset_path=str(DATA_DIR / "amphibians.csv")),
        artifacts=schemas.ArtifactsSpec(out_dir=str(tmp_path)),
    )
    summary = runner.run(spec)
    out = tmp_path / "amphibians"
    assert (out / "amphibian_counts.png").exists()
    assert (out / "summary.json").exists()
    assert summary["years"] == [1995, 1996, 2000, 2002]
    assert summary["total_count"] == 93
    assert [lake["lake_id"] for lake in summary["top_lakes"]][0] == 10102
    lakes = pd.read_csv(out / "top_lakes.csv")
    assert len(lakes) == 5
    saved = json.loads((out / "summary.json").read_text())
    assert saved["n_filtered"] == 11
