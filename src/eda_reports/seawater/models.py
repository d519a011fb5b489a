"""Linear models of oxygen saturation fitted with statsmodels."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

import numpy as np
import pandas as pd
import statsmodels.api as sm

RESPONSE = "oxygen_saturation"


@dataclass(frozen=True)
class ModelSpec:
    name: str
    predictors: tuple[str, ...]
    response: str = RESPONSE

    @property
    def formula(self) -> str:
        return f"{self.response} ~ " + " + ".join(self.predictors)


DEFAULT_MODELS: List[ModelSpec] = [
    ModelSpec("model_1", ("temperature", "salinity", "phosphate")),
    ModelSpec("model_2", ("temperature", "salinity", "phosphate", "depth")),
    ModelSpec("model_3", ("temperature", "salinity", "phosphate", "nitrate")),
    ModelSpec("model_4", ("temperature", "salinity", "phosphate", "nitrate", "chlorophyll")),
    ModelSpec(
        "model_5",
        ("temperature", "salinity", "phosphate", "nitrate", "chlorophyll", "depth"),
    ),
]


def build_models(specs: Sequence, response: str = RESPONSE) -> List[ModelSpec]:
    """Convert declared models to :class:`ModelSpec`; empty means the defaults."""

    if not specs:
        return [ModelSpec(m.name, m.predictors, response) for m in DEFAULT_MODELS]
    return [ModelSpec(s.name, tuple(s.predictors), response) for s in specs]


def _design(df: pd.DataFrame, model: ModelSpec) -> pd.DataFrame:
    # explicit constant so single-row prediction frames keep the intercept
    return sm.add_constant(df[list(model.predictors)], has_constant="add")


def fit_ols(df: pd.DataFrame, model: ModelSpec):
    """Fit ``model`` by ordinary least squares.

    Raises ``numpy.linalg.LinAlgError`` when the design matrix is rank
    deficient; callers let it propagate.
    """
    X = _design(df, model)
    if np.linalg.matrix_rank(X.to_numpy(dtype=float)) < X.shape[1]:
        raise np.linalg.LinAlgError(f"design matrix for {model.name} is rank deficient")
    return sm.OLS(df[model.response].to_numpy(dtype=float), X).fit()


def predict(fit, df: pd.DataFrame, model: ModelSpec) -> np.ndarray:
    X = _design(df, model).reindex(columns=fit.model.exog_names)
    return np.asarray(fit.predict(X), dtype=float)


def coefficient_table(fit) -> pd.DataFrame:
    """Estimates, standard errors, t statistics and p-values per term."""

    return pd.DataFrame(
        {
            "term": list(fit.model.exog_names),
            "estimate": np.asarray(fit.params, dtype=float),
            "std_error": np.asarray(fit.bse, dtype=float),
            "t_value": np.asarray(fit.tvalues, dtype=float),
            "p_value": np.asarray(fit.pvalues, dtype=float),
        }
    )
