from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass
class ObliqueInput:
    """Scalar-sector input of the oblique parameter calculation.

    Uses the conventions of arXiv:0802.4353 for a model with n_d doublets,
    n charged and m neutral mass eigenstates. Column 0 of both mixing
    matrices belongs to the electroweak Goldstone boson.

    mV: complex n_d x m matrix of eq. (22), phi_k^0 = (v_k + sum_b mV[k, b] S_b^0) / sqrt(2)
    mU: real n_d x n matrix of eq. (21), phi_k^+ = sum_a mU[k, a] S_a^+
    m_hzero: the m - 1 neutral masses, Goldstone excluded
    m_hcharged: the n - 1 charged masses, Goldstone excluded
    """

    mV: np.ndarray
    mU: np.ndarray
    m_hzero: Sequence[float]
    m_hcharged: Sequence[float]


@dataclass
class ObliqueResult:
    S: float
    T: float
    U: float
