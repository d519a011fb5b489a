"""K-fold validation utilities."""
from __future__ import annotations

from typing import Any, Dict, List

import numpy as np


def fold_labels(n: int, folds: int = 10, seed: int = 42) -> np.ndarray:
    """Return a seeded permutation of ``1..folds`` repeated to length ``n``.

    The label sequence is padded by cycling, never truncated, so fold sizes
    differ by at most one.
    """
    if folds < 1:
        raise ValueError("folds must be positive")
    if n <= 0:
        return np.empty(0, dtype=int)
    labels = np.resize(np.arange(1, folds + 1), n)
    rng = np.random.default_rng(seed)
    return rng.permutation(labels)


def generate_folds(n: int, folds: int = 10, seed: int = 42) -> List[Dict[str, Any]]:
    """Return a list of ``{"fold", "train", "test"}`` row-index splits."""

    labels = fold_labels(n, folds, seed)
    if labels.size == 0:
        return []
    index = np.arange(n)
    out: List[Dict[str, Any]] = []
    for fold in range(1, folds + 1):
        test_mask = labels == fold
        out.append({"fold": fold, "train": index[~test_mask], "test": index[test_mask]})
    return out
