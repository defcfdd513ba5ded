from __future__ import annotations

import logging

import numpy as np

from bsmscan import constants
from bsmscan.errors import DimensionMismatch
from bsmscan.oblique.fit import GFITTER_2018
from bsmscan.oblique.loops import F, G, G2
from bsmscan.oblique.parameters import ObliqueInput, ObliqueResult

logger = logging.getLogger(__name__)


class ObliqueEngine:
    """S, T and U for a general scalar sector, eqs. (28), (30), (31) of arXiv:0802.4353.

    The matrix workspaces are sized from the model multiplicities once and
    reused for every point, so an engine must not be shared between threads.
    """

    def __init__(self, n_hzero: int, n_hplus: int, mhref: float = GFITTER_2018.mhref) -> None:
        self.m = int(n_hzero) + 1
        self.n = int(n_hplus) + 1
        self.mhref2 = mhref * mhref
        m, n = self.m, self.n

        self._m0sq = np.zeros(m)
        self._mcsq = np.zeros(n)
        self._vv = np.empty((m, m), dtype=complex)
        self._uv = np.empty((n, m), dtype=complex)
        self._uu = np.empty((n, n))
        self._imvvsq = np.empty((m, m))
        self._uvsq = np.empty((n, m))
        self._uusq = np.empty((n, n))
        self._duu = np.empty(n)
        self._dvv = np.empty(m)

    def _check_dimensions(self, mV: np.ndarray, mU: np.ndarray, inp: ObliqueInput) -> None:
        if len(inp.m_hzero) != self.m - 1:
            raise DimensionMismatch(
                "Number of masses does not match number of neutral Higgs bosons "
                f"{len(inp.m_hzero)} vs {self.m - 1}"
            )
        if len(inp.m_hcharged) != self.n - 1:
            raise DimensionMismatch(
                "Number of masses does not match number of charged Higgs bosons "
                f"{len(inp.m_hcharged)} vs {self.n - 1}"
            )
        if mV.ndim != 2 or mV.shape[1] != self.m:
            raise DimensionMismatch(f"Neutral mixing matrix has shape {mV.shape}, expected (n_d, {self.m})")
        if mU.ndim != 2 or mU.shape != (mV.shape[0], self.n):
            raise DimensionMismatch(f"Charged mixing matrix has shape {mU.shape}, expected ({mV.shape[0]}, {self.n})")

    def _fill(self, inp: ObliqueInput) -> None:
        mV = np.asarray(inp.mV, dtype=complex)
        mU = np.asarray(inp.mU, dtype=float)
        self._check_dimensions(mV, mU, inp)

        self._m0sq[0] = 0.0
        self._m0sq[1:] = np.square(np.asarray(inp.m_hzero, dtype=float))
        self._mcsq[0] = 0.0
        self._mcsq[1:] = np.square(np.asarray(inp.m_hcharged, dtype=float))

        np.matmul(mV.conj().T, mV, out=self._vv)
        np.matmul(mU.T, mV, out=self._uv)
        np.matmul(mU.T, mU, out=self._uu)

        np.square(self._vv.imag, out=self._imvvsq)
        np.abs(self._uv, out=self._uvsq)
        np.square(self._uvsq, out=self._uvsq)
        np.square(self._uu, out=self._uusq)
        self._duu[:] = np.diagonal(self._uu)
        self._dvv[:] = np.diagonal(self._vv).real

    def evaluate(self, inp: ObliqueInput) -> ObliqueResult:
        """S, T and U for one point. Vanishing masses give non-finite results."""
        self._fill(inp)
        with np.errstate(divide="ignore", invalid="ignore"):
            result = ObliqueResult(S=float(self._calc_s()), T=float(self._calc_t()), U=float(self._calc_u()))
        logger.debug("S=%.6g T=%.6g U=%.6g", result.S, result.T, result.U)
        return result

    # eq. (30), line by line, prefactor from eq. (8)
    def _calc_s(self) -> float:
        m, n = self.m, self.n
        mcsq, m0sq = self._mcsq, self._m0sq
        mzsq = constants.M_Z_SQ
        s0 = 0.0
        for a in range(1, n):
            s0 += (2.0 * constants.S2TW - self._duu[a]) ** 2 * G(mcsq[a], mcsq[a], mzsq)
        for a1 in range(1, n - 1):
            for a2 in range(a1 + 1, n):
                s0 += 2.0 * self._uusq[a1, a2] * G(mcsq[a1], mcsq[a2], mzsq)
        for b1 in range(1, m - 1):
            for b2 in range(b1 + 1, m):
                s0 += self._imvvsq[b1, b2] * G(m0sq[b1], m0sq[b2], mzsq)
        for a in range(1, n):
            s0 -= 2.0 * self._duu[a] * np.log(mcsq[a])
        for b in range(1, m):
            s0 += self._dvv[b] * np.log(m0sq[b])
        s0 -= np.log(self.mhref2)
        for b in range(1, m):
            s0 += self._imvvsq[0, b] * G2(m0sq[b], mzsq)
        s0 -= G2(self.mhref2, mzsq)
        return s0 / 24.0 / constants.PI

    # eq. (28)
    def _calc_t(self) -> float:
        m, n = self.m, self.n
        mcsq, m0sq = self._mcsq, self._m0sq
        mzsq, mwsq = constants.M_Z_SQ, constants.M_W_SQ
        t0 = 0.0
        for a in range(1, n):
            for b in range(1, m):
                t0 += self._uvsq[a, b] * F(mcsq[a], m0sq[b])
        for b1 in range(1, m - 1):
            for b2 in range(b1 + 1, m):
                t0 -= self._imvvsq[b1, b2] * F(m0sq[b1], m0sq[b2])
        for a1 in range(1, n - 1):
            for a2 in range(a1 + 1, n):
                t0 -= 2.0 * self._uusq[a1, a2] * F(mcsq[a1], mcsq[a2])
        for b in range(1, m):
            t0 += 3.0 * self._imvvsq[0, b] * (F(mzsq, m0sq[b]) - F(mwsq, m0sq[b]))
        t0 -= 3.0 * (F(mzsq, self.mhref2) - F(mwsq, self.mhref2))
        return t0 / 16.0 / constants.PI / constants.S2TW / mwsq

    # eq. (31)
    def _calc_u(self) -> float:
        m, n = self.m, self.n
        mcsq, m0sq = self._mcsq, self._m0sq
        mzsq, mwsq = constants.M_Z_SQ, constants.M_W_SQ
        u0 = 0.0
        for a in range(1, n):
            for b in range(1, m):
                u0 += self._uvsq[a, b] * G(mcsq[a], m0sq[b], mwsq)
        for a in range(1, n):
            u0 -= (2.0 * constants.S2TW - self._duu[a]) ** 2 * G(mcsq[a], mcsq[a], mzsq)
        for a1 in range(1, n - 1):
            for a2 in range(a1 + 1, n):
                u0 -= 2.0 * self._uusq[a1, a2] * G(mcsq[a1], mcsq[a2], mzsq)
        for b1 in range(1, m - 1):
            for b2 in range(b1 + 1, m):
                u0 -= self._imvvsq[b1, b2] * G(m0sq[b1], m0sq[b2], mzsq)
        for b in range(1, m):
            u0 += self._imvvsq[0, b] * (G2(m0sq[b], mwsq) - G2(m0sq[b], mzsq))
        u0 -= G2(self.mhref2, mwsq) - G2(self.mhref2, mzsq)
        return u0 / 24.0 / constants.PI
