from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from bsmscan import constants
from bsmscan.constraints.severity import Severity, parse_severity
from bsmscan.models import MODELS
from bsmscan.oblique.fit import critical_chisq


class STUConfig(BaseModel):
    chisq_crit: float = Field(constants.CHISQ_2SIGMA_3D, description="Critical chi-square for S, T, U.")
    confidence_level: Optional[float] = Field(
        None, description="If set, derive the critical chi-square for 3 dof from this confidence level."
    )
    mhref: float = Field(125.0, description="Reference Higgs mass of the electroweak fit in GeV.")

    def critical_value(self) -> float:
        if self.confidence_level is not None:
            return critical_chisq(self.confidence_level, 3)
        return self.chisq_crit


class ScanConfig(BaseModel):
    model: str = Field("r2hdm", description="Model name: r2hdm, n2hdm or trsm.")
    severities: Dict[str, Severity] = Field(default_factory=dict, description="Severity per constraint id.")
    stu: STUConfig = Field(default_factory=STUConfig)
    results_root: Path = Path("results")
    log_level: str = "INFO"

    @field_validator("severities", mode="before")
    @classmethod
    def _parse_severities(cls, value: object) -> Dict[str, Severity]:
        # InvalidSeverityValue is not a ValueError and propagates as is
        if value is None:
            return {}
        return {str(key): parse_severity(sev) for key, sev in dict(value).items()}

    @field_validator("model")
    @classmethod
    def _known_model(cls, value: str) -> str:
        name = value.lower()
        if name not in MODELS:
            raise ValueError(f"Unknown model {value}, expected one of {sorted(MODELS)}")
        return name

    def severity(self, constraint_id: str) -> Severity:
        return self.severities.get(constraint_id, Severity.apply)


def load_scan_config(default_path: Path | None, override_path: Path | None, cli_overrides: Dict[str, object]) -> ScanConfig:
    data: Dict[str, object] = {}
    if default_path is not None and default_path.exists():
        data.update(yaml.safe_load(default_path.read_text()) or {})
    if override_path:
        override = yaml.safe_load(override_path.read_text()) or {}
        severities = dict(data.get("severities") or {})
        severities.update(override.pop("severities", None) or {})
        data.update(override)
        data["severities"] = severities
    overrides = {k: v for k, v in cli_overrides.items() if v is not None}
    if "severities" in overrides:
        severities = dict(data.get("severities") or {})
        severities.update(overrides.pop("severities"))
        data["severities"] = severities
    data.update(overrides)
    return ScanConfig(**data)
