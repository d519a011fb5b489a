import numpy as np
import pytest

from eda_reports.validate import splitter


@pytest.mark.parametrize("n", [1, 9, 10, 95, 231])
def test_fold_labels_balanced(n):
    labels = splitter.fold_labels(n, folds=10, seed=42)
    assert len(labels) == n
    assert set(labels.tolist()).issubset(set(range(1, 11)))
    sizes = np.bincount(labels, minlength=11)[1:]
    assert sizes.sum() == n
    assert sizes.max() - sizes.min() <= 1


def test_fold_labels_deterministic():
    a = splitter.fold_labels(95, folds=10, seed=123)
    b = splitter.fold_labels(95, folds=10, seed=123)
    assert np.array_equal(a, b)
    c = splitter.fold_labels(95, folds=10, seed=124)
    assert not np.array_equal(a, c)


def test_fold_labels_empty():
    assert splitter.fold_labels(0).size == 0
    assert splitter.generate_folds(0) == []


def test_generate_folds_partition_rows():
    folds = splitter.generate_folds(23, folds=10, seed=1)
    assert [f["fold"] for f in folds] == list(range(1, 11))
    tested = np.concatenate([f["test"] for f in folds])
    assert sorted(tested.tolist()) == list(range(23))
    for f in folds:
        assert set(f["train"]).isdisjoint(set(f["test"]))
        assert len(f["train"]) + len(f["test"]) == 23
