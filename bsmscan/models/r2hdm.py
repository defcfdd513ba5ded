from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Tuple

import numpy as np

from bsmscan import constants
from bsmscan.models.base import Model, ParameterPoint
from bsmscan.oblique.parameters import ObliqueInput


@dataclass(frozen=True, eq=False)
class R2HDMPoint(ParameterPoint):
    parameter_names: ClassVar[Tuple[str, ...]] = ("mHa", "mHb", "mA", "mHp", "alpha", "tbeta")

    mHa: float
    mHb: float
    mA: float
    mHp: float
    alpha: float
    tbeta: float


class R2HDM(Model):
    """CP-conserving two-Higgs-doublet model.

    Neutral scalars are H_a = c_alpha rho_1 + s_alpha rho_2,
    H_b = -s_alpha rho_1 + c_alpha rho_2 and the CP-odd A.
    """

    description = "real 2HDM"
    n_hzero = 3
    n_hplus = 1
    point_type = R2HDMPoint
    input_columns = ("mHa", "mHb", "mA", "mHp", "alpha", "tbeta")

    @classmethod
    def from_input(cls, mHa: float, mHb: float, mA: float, mHp: float, alpha: float, tbeta: float) -> R2HDMPoint:
        return R2HDMPoint(mHa=mHa, mHb=mHb, mA=mA, mHp=mHp, alpha=alpha, tbeta=tbeta)

    @staticmethod
    def stu_input(point: R2HDMPoint) -> ObliqueInput:
        cb = 1.0 / math.sqrt(1.0 + point.tbeta**2)
        sb = point.tbeta * cb
        ca, sa = math.cos(point.alpha), math.sin(point.alpha)
        # columns: G0, Ha, Hb, A
        mV = np.array(
            [
                [1j * cb, ca, -sa, -1j * sb],
                [1j * sb, sa, ca, 1j * cb],
            ]
        )
        # columns: G+, H+
        mU = np.array([[cb, -sb], [sb, cb]])
        return ObliqueInput(mV=mV, mU=mU, m_hzero=[point.mHa, point.mHb, point.mA], m_hcharged=[point.mHp])

    @staticmethod
    def ewp_valid(point: R2HDMPoint) -> bool:
        # Z decays into the new scalars have to be closed
        return min(point.mHa, point.mHb, point.mA, point.mHp) > constants.M_Z / 2
