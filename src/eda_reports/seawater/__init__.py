"""Seawater oxygen saturation model comparison report."""

from .compare import ModelResult, criteria_table, information_criteria
from .crossval import CrossValidationConfig, cross_validate, summarise_rmse
from .models import DEFAULT_MODELS, ModelSpec, fit_ols
from .runner import run

__all__ = [
    "ModelSpec",
    "DEFAULT_MODELS",
    "fit_ols",
    "ModelResult",
    "information_criteria",
    "criteria_table",
    "CrossValidationConfig",
    "cross_validate",
    "summarise_rmse",
    "run",
]
