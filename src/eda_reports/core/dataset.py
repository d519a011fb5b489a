"""Dataset loading utilities.

Both reports read a single tabular file.  Survey spreadsheets are usually
Excel workbooks while seawater samples ship as CSV, but every loader accepts
``.xlsx``/``.xls``, ``.csv`` and ``.json`` so fixtures can stay text-based.
Raw column names are renamed to the canonical names used throughout the
package; columns that are not listed in the mapping are kept untouched.
"""
from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Dict, Mapping

import pandas as pd

logger = logging.getLogger(__name__)


class LifeStage(str, Enum):
    ADULT = "Adult"
    SUB_ADULT = "SubAdult"
    TADPOLE = "Tadpole"
    EGG_MASS = "EggMass"


AMPHIBIAN_COLUMNS: Dict[str, str] = {
    "amphibian_species": "species",
    "amphibian_life_stage": "life_stage",
    "survey_date": "survey_date",
    "amphibian_location": "location",
    "lake_id": "lake_id",
    "amphibian_number": "count",
}

SEAWATER_COLUMNS: Dict[str, str] = {
    "o2sat": "oxygen_saturation",
    "t_deg_c": "temperature",
    "salinity": "salinity",
    "depth_m": "depth",
    "chlor_a": "chlorophyll",
    "po4u_m": "phosphate",
    "no3u_m": "nitrate",
}


def _read_table(path: Path) -> pd.DataFrame:
    suffix = path.suffix.lower()
    if suffix in {".xlsx", ".xls"}:
        return pd.read_excel(path)
    if suffix == ".json":
        return pd.DataFrame(json.loads(path.read_text()))
    return pd.read_csv(path)


def _rename(df: pd.DataFrame, columns: Mapping[str, str]) -> pd.DataFrame:
    """Rename raw columns and fail when a required one is absent."""

    missing = [raw for raw, name in columns.items() if raw not in df.columns and name not in df.columns]
    if missing:
        raise KeyError(f"missing required columns: {', '.join(missing)}")
    return df.rename(columns=dict(columns))


def load_amphibians(path: str | Path, columns: Mapping[str, str] | None = None) -> pd.DataFrame:
    """Load amphibian survey records.

    ``survey_date`` is parsed to datetimes and ``year`` is derived once.
    ``count`` is kept as a nullable integer since surveys may omit it.
    Records without a parseable survey date raise ``ValueError``.
    """
    path = Path(path)
    df = _rename(_read_table(path), columns or AMPHIBIAN_COLUMNS)
    df["survey_date"] = pd.to_datetime(df["survey_date"])
    undated = int(df["survey_date"].isna().sum())
    if undated:
        raise ValueError(f"{undated} amphibian records have no survey_date")
    df["year"] = df["survey_date"].dt.year.astype("Int64")
    df["count"] = pd.to_numeric(df["count"]).astype("Int64")
    logger.info("loaded %d amphibian records from %s", len(df), path)
    return df


def load_seawater(path: str | Path, columns: Mapping[str, str] | None = None) -> pd.DataFrame:
    """Load seawater samples with the measurement fields coerced to float."""

    path = Path(path)
    mapping = columns or SEAWATER_COLUMNS
    df = _rename(_read_table(path), mapping)
    for name in mapping.values():
        df[name] = pd.to_numeric(df[name], errors="raise").astype(float)
    logger.info("loaded %d seawater samples from %s", len(df), path)
    return df.reset_index(drop=True)
