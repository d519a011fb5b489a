"""Filtering and aggregation of amphibian survey records."""
from __future__ import annotations

from typing import Sequence

import pandas as pd

from ..core.dataset import LifeStage

STAGE_ORDER = [s.value for s in LifeStage]


def filter_records(
    df: pd.DataFrame,
    species: str = "RAMU",
    exclude_stages: Sequence[str] = (LifeStage.EGG_MASS.value,),
) -> pd.DataFrame:
    """Return rows of ``species`` whose life stage is not excluded."""

    mask = (df["species"] == species) & ~df["life_stage"].isin(list(exclude_stages))
    return df.loc[mask]


def counts_by_stage_year(df: pd.DataFrame) -> pd.DataFrame:
    """Sum ``count`` per (life stage, year); missing counts add nothing."""

    columns = ["life_stage", "year", "count"]
    if df.empty:
        return pd.DataFrame(columns=columns)
    if df["year"].isna().any():
        raise ValueError("records without a survey year cannot be aggregated")
    grouped = (
        df.assign(count=df["count"].fillna(0).astype("int64"))
        .groupby(["life_stage", "year"], observed=True)["count"]
        .sum()
        .reset_index()
    )
    grouped["year"] = grouped["year"].astype("int64")
    order = {stage: i for i, stage in enumerate(STAGE_ORDER)}
    grouped["_order"] = grouped["life_stage"].map(order).fillna(len(order))
    grouped = grouped.sort_values(["_order", "year"]).drop(columns="_order")
    return grouped[columns].reset_index(drop=True)


def top_lakes(
    df: pd.DataFrame,
    n: int = 5,
    stages: Sequence[str] = (LifeStage.ADULT.value, LifeStage.SUB_ADULT.value),
) -> pd.DataFrame:
    """Return the ``n`` lakes with the most adult and sub-adult individuals.

    Ties are broken by ascending lake identifier so the selection is stable
    and never exceeds ``n`` rows.
    """
    columns = ["lake_id", "label", "count"]
    subset = df[df["life_stage"].isin(list(stages))]
    if subset.empty or n <= 0:
        return pd.DataFrame(columns=columns)
    totals = (
        subset.assign(count=subset["count"].fillna(0).astype("int64"))
        .groupby("lake_id")["count"]
        .sum()
        .reset_index()
        .sort_values(["count", "lake_id"], ascending=[False, True], kind="mergesort")
        .head(n)
    )
    totals["label"] = "Lake " + totals["lake_id"].astype(str)
    return totals[columns].reset_index(drop=True)
