from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Tuple

import numpy as np

from bsmscan import constants
from bsmscan.models.base import Model, ParameterPoint
from bsmscan.oblique.parameters import ObliqueInput
from bsmscan.utils.mixing import ordered_mix_mat_3d


@dataclass(frozen=True, eq=False)
class N2HDMPoint(ParameterPoint):
    """N2HDM point with mass-ordered CP-even scalars H1, H2, H3.

    ``R`` is the 3x3 CP-even mixing matrix, rows H1..H3, columns
    (rho_1, rho_2, rho_s).
    """

    parameter_names: ClassVar[Tuple[str, ...]] = ("mH1", "mH2", "mH3", "mA", "mHp", "tbeta", "a1", "a2", "a3")

    mH1: float
    mH2: float
    mH3: float
    mA: float
    mHp: float
    tbeta: float
    a1: float
    a2: float
    a3: float
    R: np.ndarray


class N2HDM(Model):
    """Two-Higgs-doublet model extended by a real singlet, broken phase."""

    description = "N2HDM"
    n_hzero = 4
    n_hplus = 1
    point_type = N2HDMPoint
    input_columns = ("mHa", "mHb", "mHc", "mA", "mHp", "tbeta", "a1", "a2", "a3")

    @classmethod
    def from_input(
        cls,
        mHa: float,
        mHb: float,
        mHc: float,
        mA: float,
        mHp: float,
        tbeta: float,
        a1: float,
        a2: float,
        a3: float,
    ) -> N2HDMPoint:
        masses, R = ordered_mix_mat_3d(a1, a2, a3, [mHa, mHb, mHc])
        R.setflags(write=False)
        return N2HDMPoint(
            mH1=float(masses[0]),
            mH2=float(masses[1]),
            mH3=float(masses[2]),
            mA=mA,
            mHp=mHp,
            tbeta=tbeta,
            a1=a1,
            a2=a2,
            a3=a3,
            R=R,
        )

    @staticmethod
    def stu_input(point: N2HDMPoint) -> ObliqueInput:
        cb = 1.0 / math.sqrt(1.0 + point.tbeta**2)
        sb = point.tbeta * cb
        R = point.R
        # columns: G0, H1, H2, H3, A
        mV = np.array(
            [
                [1j * cb, R[0, 0], R[1, 0], R[2, 0], -1j * sb],
                [1j * sb, R[0, 1], R[1, 1], R[2, 1], 1j * cb],
            ]
        )
        mU = np.array([[cb, -sb], [sb, cb]])
        return ObliqueInput(
            mV=mV,
            mU=mU,
            m_hzero=[point.mH1, point.mH2, point.mH3, point.mA],
            m_hcharged=[point.mHp],
        )

    @staticmethod
    def ewp_valid(point: N2HDMPoint) -> bool:
        return min(point.mH1, point.mA, point.mHp) > constants.M_Z / 2
