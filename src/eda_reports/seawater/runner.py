"""Top-level orchestration for the seawater model comparison report."""
from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd

from ..config import get_settings
from ..core.dataset import load_seawater
from ..io import artifacts
from ..schemas import SeawaterReportSpec
from . import compare, crossval, equation, models as models_mod

logger = logging.getLogger(__name__)


def _finite(value: float) -> float | None:
    """JSON has no inf/NaN; undefined criteria are reported as null."""

    value = float(value)
    return value if math.isfinite(value) else None


def _output_dir(spec: SeawaterReportSpec) -> Path:
    out_dir = Path(spec.artifacts.out_dir or get_settings().out_dir) / "seawater"
    out_dir.mkdir(parents=True, exist_ok=True)
    return out_dir


def _cv_config(spec: SeawaterReportSpec) -> crossval.CrossValidationConfig:
    seed = spec.validation.seed
    if seed is None:
        seed = get_settings().seed
    return crossval.CrossValidationConfig(folds=spec.validation.folds, seed=seed)


def _best_by(criteria: pd.DataFrame, cv_summary: pd.DataFrame) -> Dict[str, str | None]:
    """Name the winning model under each signal; the final pick stays manual."""

    def _argmin(df: pd.DataFrame, col: str, key: str) -> str | None:
        if df.empty:
            return None
        return str(df.sort_values([col, key], kind="mergesort").iloc[0][key])

    return {
        "aicc": _argmin(criteria, "aicc", "name"),
        "bic": _argmin(criteria, "bic", "name"),
        "rmse": _argmin(cv_summary, "mean_rmse", "model"),
    }


def _render_report(
    criteria: pd.DataFrame,
    cv_summary: pd.DataFrame,
    coefficients: pd.DataFrame,
    final: models_mod.ModelSpec,
    eq: str,
    cv_config: crossval.CrossValidationConfig,
) -> str:
    criteria_view = criteria[["name", "formula", "k", "aicc", "delta_aicc", "bic", "delta_bic"]]
    lines: List[str] = [
        "# Seawater oxygen saturation model comparison",
        "",
        "## Information criteria",
        "",
        "```",
        criteria_view.to_string(index=False, float_format=lambda v: f"{v:.3f}"),
        "```",
        "",
        f"## {cv_config.folds}-fold cross-validation (seed {cv_config.seed})",
        "",
        "```",
        cv_summary.to_string(index=False, float_format=lambda v: f"{v:.4f}"),
        "```",
        "",
        f"## Final model: {final.name}",
        "",
        "```",
        coefficients.to_string(index=False, float_format=lambda v: f"{v:.4g}"),
        "```",
        "",
        f"`{eq}`",
        "",
    ]
    return "\n".join(lines)


def run(spec: SeawaterReportSpec) -> Dict[str, Any]:
    """Execute the seawater workflow and return the report summary."""

    samples = load_seawater(spec.data.dataset_path, spec.data.columns)
    model_specs = models_mod.build_models(spec.models, spec.response)
    by_name = {m.name: m for m in model_specs}

    results = compare.information_criteria(samples, model_specs)
    criteria = compare.criteria_table(results)

    cv_config = _cv_config(spec)
    logger.info(
        "cross-validating %d models over %d folds (seed %d)",
        len(model_specs),
        cv_config.folds,
        cv_config.seed,
    )
    per_fold = crossval.cross_validate(samples, model_specs, cv_config)
    cv_summary = crossval.summarise_rmse(per_fold)

    best_by = _best_by(criteria, cv_summary)
    final_name = spec.final_model or best_by["rmse"] or model_specs[0].name
    final = by_name[final_name]
    final_fit = models_mod.fit_ols(samples, final)
    coefficients = models_mod.coefficient_table(final_fit)
    eq = equation.format_equation(final_fit, final.response)

    out_dir = _output_dir(spec)
    paths = {
        "criteria": out_dir / "criteria.csv",
        "cv_folds": out_dir / "cv_folds.csv",
        "cv_summary": out_dir / "cv_summary.csv",
        "coefficients": out_dir / "coefficients.csv",
        "report": out_dir / "report.md",
        "summary": out_dir / "summary.json",
    }
    artifacts.write_table(paths["criteria"], criteria)
    artifacts.write_table(paths["cv_folds"], per_fold)
    artifacts.write_table(paths["cv_summary"], cv_summary)
    artifacts.write_table(paths["coefficients"], coefficients)
    artifacts.write_report(
        paths["report"],
        _render_report(criteria, cv_summary, coefficients, final, eq, cv_config),
    )

    summary: Dict[str, Any] = {
        "n_samples": int(len(samples)),
        "folds": cv_config.folds,
        "seed": cv_config.seed,
        "models": {
            name: {
                "formula": r.formula,
                "k": r.k,
                "aicc": _finite(r.aicc),
                "bic": _finite(r.bic),
            }
            for name, r in results.items()
        },
        "rmse": {
            row["model"]: {"mean": _finite(row["mean_rmse"]), "sd": _finite(row["sd_rmse"])}
            for row in cv_summary.to_dict("records")
        },
        "best_by": best_by,
        "final_model": final.name,
        "equation": eq,
        "artifacts": {name: str(path) for name, path in paths.items()},
    }
    artifacts.write_summary(paths["summary"], summary)
    logger.info("seawater report written to %s", out_dir)
    return summary
