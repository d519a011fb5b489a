"""Information-criterion comparison of candidate models."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Sequence

import pandas as pd

from ..stats.estimators import aicc, bic, deltas, log_likelihood, parameter_count
from .models import ModelSpec, fit_ols


@dataclass
class ModelResult:
    name: str
    formula: str
    n: int
    k: int
    log_likelihood: float
    aicc: float
    bic: float


def evaluate(fit, model: ModelSpec) -> ModelResult:
    n = int(fit.nobs)
    k = parameter_count(fit)
    ll = log_likelihood(float(fit.ssr), n)
    return ModelResult(
        name=model.name,
        formula=model.formula,
        n=n,
        k=k,
        log_likelihood=ll,
        aicc=aicc(ll, k, n),
        bic=bic(ll, k, n),
    )


def information_criteria(df: pd.DataFrame, models: Sequence[ModelSpec]) -> Dict[str, ModelResult]:
    """Fit every model on ``df`` and score it, keyed by model name."""

    return {model.name: evaluate(fit_ols(df, model), model) for model in models}


def criteria_table(results: Dict[str, ModelResult]) -> pd.DataFrame:
    """Rows ranked ascending by AICc with deltas relative to the best model."""

    columns = [
        "name",
        "formula",
        "n",
        "k",
        "log_likelihood",
        "aicc",
        "delta_aicc",
        "rank_aicc",
        "bic",
        "delta_bic",
        "rank_bic",
    ]
    if not results:
        return pd.DataFrame(columns=columns)
    d_aicc = deltas({name: r.aicc for name, r in results.items()})
    d_bic = deltas({name: r.bic for name, r in results.items()})
    rows = []
    for name, result in results.items():
        row = asdict(result)
        row["delta_aicc"] = d_aicc[name]
        row["delta_bic"] = d_bic[name]
        rows.append(row)
    table = pd.DataFrame(rows)
    table["rank_aicc"] = table["aicc"].rank(method="min").astype(int)
    table["rank_bic"] = table["bic"].rank(method="min").astype(int)
    table = table.sort_values(["aicc", "name"], kind="mergesort").reset_index(drop=True)
    return table[columns]
