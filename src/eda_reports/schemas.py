"""Report specification models."""
from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, model_validator

from .core.dataset import AMPHIBIAN_COLUMNS, SEAWATER_COLUMNS


class ArtifactsSpec(BaseModel):
    """Where rendered artifacts are written; falls back to ``EDA_OUT_DIR``."""

    out_dir: Optional[str] = None


class AmphibianDataSpec(BaseModel):
    dataset_path: str
    columns: Dict[str, str] = Field(default_factory=lambda: dict(AMPHIBIAN_COLUMNS))


class AmphibianFiltersSpec(BaseModel):
    species: str = "RAMU"
    exclude_stages: List[str] = Field(default_factory=lambda: ["EggMass"])
    lake_stages: List[str] = Field(default_factory=lambda: ["Adult", "SubAdult"])


class AmphibianReportSpec(BaseModel):
    """Top-level specification for the amphibian counts report."""

    data: AmphibianDataSpec
    filters: AmphibianFiltersSpec = Field(default_factory=AmphibianFiltersSpec)
    top_n: int = Field(5, ge=1)
    artifacts: ArtifactsSpec = Field(default_factory=ArtifactsSpec)


class SeawaterDataSpec(BaseModel):
    dataset_path: str
    columns: Dict[str, str] = Field(default_factory=lambda: dict(SEAWATER_COLUMNS))


class RegressionModelSpec(BaseModel):
    name: str
    predictors: List[str] = Field(min_length=1)


class CrossValidationSpec(BaseModel):
    """Fold count and seed; ``seed`` falls back to ``EDA_SEED``."""

    folds: int = Field(10, ge=2)
    seed: Optional[int] = None


class SeawaterReportSpec(BaseModel):
    """Top-level specification for the seawater model comparison report."""

    data: SeawaterDataSpec
    response: str = "oxygen_saturation"
    models: List[RegressionModelSpec] = Field(default_factory=list)
    validation: CrossValidationSpec = Field(default_factory=CrossValidationSpec)
    final_model: Optional[str] = None
    artifacts: ArtifactsSpec = Field(default_factory=ArtifactsSpec)

    @model_validator(mode="after")
    def _check_final_model(self) -> "SeawaterReportSpec":
        from .seawater.models import DEFAULT_MODELS  # seawater imports this module

        names = [m.name for m in self.models]
        if len(set(names)) != len(names):
            raise ValueError("model names must be unique")
        known = names or [m.name for m in DEFAULT_MODELS]
        if self.final_model is not None and self.final_model not in known:
            raise ValueError(f"final_model {self.final_model!r} is not a declared model")
        return self
