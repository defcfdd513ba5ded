from typing import Dict, Type

from bsmscan.models.base import Model, ParameterPoint
from bsmscan.models.n2hdm import N2HDM, N2HDMPoint
from bsmscan.models.r2hdm import R2HDM, R2HDMPoint
from bsmscan.models.trsm import TRSM, TRSMPoint

MODELS: Dict[str, Type[Model]] = {"r2hdm": R2HDM, "n2hdm": N2HDM, "trsm": TRSM}

__all__ = [
    "MODELS",
    "Model",
    "N2HDM",
    "N2HDMPoint",
    "ParameterPoint",
    "R2HDM",
    "R2HDMPoint",
    "TRSM",
    "TRSMPoint",
]
