"""K-fold cross-validation of the candidate models."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

import pandas as pd

from ..stats.estimators import rmse
from ..validate import splitter
from .models import ModelSpec, fit_ols, predict

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CrossValidationConfig:
    folds: int = 10
    seed: int = 42


def cross_validate(
    df: pd.DataFrame,
    models: Sequence[ModelSpec],
    config: CrossValidationConfig,
) -> pd.DataFrame:
    """Refit every model on each training split and score the held-out fold.

    Folds run one after another; a fit failure on any training split aborts
    the whole procedure.
    """
    columns = ["fold", "model", "n_train", "n_test", "rmse"]
    records: List[Dict[str, Any]] = []
    for split in splitter.generate_folds(len(df), config.folds, config.seed):
        train = df.iloc[split["train"]]
        test = df.iloc[split["test"]]
        if test.empty:
            logger.warning("fold %d has no held-out samples, skipping", split["fold"])
            continue
        for model in models:
            fit = fit_ols(train, model)
            error = rmse(predict(fit, test, model), test[model.response].to_numpy(dtype=float))
            records.append(
                {
                    "fold": split["fold"],
                    "model": model.name,
                    "n_train": len(train),
                    "n_test": len(test),
                    "rmse": error,
                }
            )
        logger.debug("fold %d/%d done", split["fold"], config.folds)
    return pd.DataFrame.from_records(records, columns=columns)


def summarise_rmse(per_fold: pd.DataFrame) -> pd.DataFrame:
    """Mean and sample standard deviation of RMSE per model, best first."""

    columns = ["model", "mean_rmse", "sd_rmse", "folds"]
    if per_fold.empty:
        return pd.DataFrame(columns=columns)
    summary = (
        per_fold.groupby("model", sort=False)["rmse"]
        .agg(["mean", "std", "count"])
        .rename(columns={"mean": "mean_rmse", "std": "sd_rmse", "count": "folds"})
        .reset_index()
    )
    summary = summary.sort_values(["mean_rmse", "sd_rmse"], kind="mergesort")
    return summary[columns].reset_index(drop=True)
