from pathlib import Path

import numpy as np
import pandas as pd

from eda_reports import schemas
from eda_reports.config import get_settings, reset_settings_cache
from eda_reports.seawater import runner


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("EDA_SEED", "7")
    monkeypatch.setenv("EDA_OUT_DIR", "elsewhere")
    monkeypatch.setenv("EDA_LOG_LEVEL", "debug")
    reset_settings_cache()
    try:
        settings = get_settings()
        assert settings.seed == 7
        assert settings.out_dir == "elsewhere"
        assert settings.log_level == "DEBUG"
    finally:
        monkeypatch.undo()
        reset_settings_cache()
    assert get_settings().seed == 42


def test_runner_falls_back_to_settings(monkeypatch, tmp_path: Path):
    rng = np.random.default_rng(2)
    n = 40
    raw = pd.DataFrame(
        {
            "t_deg_c": rng.normal(12, 3, n),
            "salinity": rng.normal(33.5, 0.4, n),
            "po4u_m": rng.normal(1.2, 0.5, n),
            "no3u_m": rng.normal(10, 6, n),
            "chlor_a": rng.gamma(2.0, 0.3, n),
            "depth_m": rng.uniform(0, 200, n),
        }
    )
    raw["o2sat"] = 140 - 1.5 * raw["t_deg_c"] + rng.normal(size=n)
    data_path = tmp_path / "samples.csv"
    raw.to_csv(data_path, index=False)

    monkeypatch.setenv("EDA_SEED", "11")
    monkeypatch.setenv("EDA_OUT_DIR", str(tmp_path / "reports"))
    reset_settings_cache()
    try:
        spec = schemas.SeawaterReportSpec(data=schemas.SeawaterDataSpec(dataset_path=str(data_path)))
        summary = runner.run(spec)
    finally:
        monkeypatch.undo()
        reset_settings_cache()
    assert summary["seed"] == 11
    assert (tmp_path / "reports" / "seawater" / "report.md").exists()
