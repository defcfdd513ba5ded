from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Tuple

import numpy as np

from bsmscan.models.base import Model, ParameterPoint
from bsmscan.oblique.parameters import ObliqueInput
from bsmscan.utils.mixing import ordered_mix_mat_3d


@dataclass(frozen=True, eq=False)
class TRSMPoint(ParameterPoint):
    parameter_names: ClassVar[Tuple[str, ...]] = ("mH1", "mH2", "mH3", "a1", "a2", "a3")

    mH1: float
    mH2: float
    mH3: float
    a1: float
    a2: float
    a3: float
    R: np.ndarray


class TRSM(Model):
    """SM extended by two real singlets (two-real-singlet model), broken phase.

    Column 0 of ``R`` is the doublet component of each scalar.
    """

    description = "TRSM"
    n_hzero = 3
    n_hplus = 0
    point_type = TRSMPoint
    input_columns = ("mHa", "mHb", "mHc", "a1", "a2", "a3")

    @classmethod
    def from_input(cls, mHa: float, mHb: float, mHc: float, a1: float, a2: float, a3: float) -> TRSMPoint:
        masses, R = ordered_mix_mat_3d(a1, a2, a3, [mHa, mHb, mHc])
        R.setflags(write=False)
        return TRSMPoint(
            mH1=float(masses[0]), mH2=float(masses[1]), mH3=float(masses[2]), a1=a1, a2=a2, a3=a3, R=R
        )

    @staticmethod
    def stu_input(point: TRSMPoint) -> ObliqueInput:
        R = point.R
        mV = np.array([[1j, R[0, 0], R[1, 0], R[2, 0]]])
        mU = np.array([[1.0]])
        return ObliqueInput(mV=mV, mU=mU, m_hzero=[point.mH1, point.mH2, point.mH3], m_hcharged=[])

    @staticmethod
    def ewp_valid(point: TRSMPoint) -> bool:
        # always valid for singlet extensions
        return True
