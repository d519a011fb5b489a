import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

pytest.importorskip("typer")

DATA_PATH = Path(__file__).parent / "data" / "amphibians.csv"
PYTHONPATH = str(Path(__file__).resolve().parents[1] / "src")


def test_cli_amphibians_smoke(tmp_path: Path) -> None:
    spec_path = tmp_path / "spec.json"
    spec_path.write_text(
        json.dumps(
            {
                "data": {"dataset_path": str(DATA_PATH)},
                "artifacts": {"out_dir": str(tmp_path / "out")},
            }
        )
    )
    env = {**os.environ, "PYTHONPATH": PYTHONPATH}
    result = subprocess.run(
        [sys.executable, "-m", "eda_reports.cli.main", "amphibians", "run", "--spec", str(spec_path)],
        capture_output=True,
        text=True,
        env=env,
    )
    assert result.returncode == 0, result.stderr
    payload = json.loads(result.stdout.strip().splitlines()[-1])
    assert payload["total_count"] == 93
    assert Path(payload["figure"]).exists()
