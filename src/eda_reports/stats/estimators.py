"""Estimator helpers for model comparison."""
from __future__ import annotations

import math
from typing import Dict, Mapping

import numpy as np


def parameter_count(fit) -> int:
    """Return K for an OLS fit: regression coefficients plus the error variance."""

    return int(len(fit.params)) + 1


def log_likelihood(rss: float, n: int) -> float:
    """Gaussian log-likelihood of a least-squares fit at the MLE variance."""

    return -0.5 * n * (math.log(2 * math.pi) + math.log(rss / n) + 1)


def aic(ll: float, k: int) -> float:
    return 2 * k - 2 * ll


def aicc(ll: float, k: int, n: int) -> float:
    """
    Corrected Akaike Information Criterion.

    Parameters
    ----------
    ll: float
        Log-likelihood of the fitted model.
    k: int
        Number of estimated parameters (including the error variance).
    n: int
        Number of observations used for the fit.

    Returns ``inf`` when ``n - k - 1 <= 0`` since the correction is undefined.
    """

    denom = n - k - 1
    if denom <= 0:
        return math.inf
    return aic(ll, k) + 2 * k * (k + 1) / denom


def bic(ll: float, k: int, n: int) -> float:
    """Bayesian Information Criterion ``k ln(n) - 2 ll``."""

    return k * math.log(n) - 2 * ll


def rmse(predicted, actual) -> float:
    """Root-mean-squared error between two equally sized sequences."""

    pred = np.asarray(predicted, dtype=float)
    obs = np.asarray(actual, dtype=float)
    if pred.shape != obs.shape:
        raise ValueError("predicted and actual must have the same shape")
    if pred.size == 0:
        raise ValueError("rmse of an empty sample is undefined")
    return float(np.sqrt(np.mean(np.square(pred - obs))))


def deltas(values: Mapping[str, float]) -> Dict[str, float]:
    """Return each value minus the smallest one."""

    if not values:
        return {}
    best = min(values.values())
    return {key: value - best for key, value in values.items()}


__all__ = [
    "parameter_count",
    "log_likelihood",
    "aic",
    "aicc",
    "bic",
    "rmse",
    "deltas",
]
