from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property

import numpy as np
from scipy.stats import chi2


@dataclass(frozen=True)
class FitReference:
    """Global electroweak fit result for the oblique parameters."""

    S: float
    sdS: float
    T: float
    sdT: float
    U: float
    sdU: float
    ccST: float
    ccSU: float
    ccTU: float
    mhref: float = 125.0

    @property
    def central(self) -> np.ndarray:
        return np.array([self.S, self.T, self.U])

    @cached_property
    def covariance(self) -> np.ndarray:
        sd = np.array([self.sdS, self.sdT, self.sdU])
        corr = np.array(
            [
                [1.0, self.ccST, self.ccSU],
                [self.ccST, 1.0, self.ccTU],
                [self.ccSU, self.ccTU, 1.0],
            ]
        )
        cov = corr * np.outer(sd, sd)
        cov.setflags(write=False)
        return cov

    @cached_property
    def inverse_covariance(self) -> np.ndarray:
        inv = np.linalg.inv(self.covariance)
        inv.setflags(write=False)
        return inv


# Gfitter, arXiv:1803.01853
GFITTER_2018 = FitReference(
    S=0.04,
    sdS=0.11,
    T=0.09,
    sdT=0.14,
    U=-0.02,
    sdU=0.11,
    ccST=0.92,
    ccSU=-0.68,
    ccTU=-0.87,
    mhref=125.0,
)


def chisq(S: float, T: float, U: float, fit: FitReference = GFITTER_2018) -> float:
    delta = fit.central - np.array([S, T, U])
    return float(delta @ fit.inverse_covariance @ delta)


def critical_chisq(confidence_level: float, dof: int = 3) -> float:
    if not 0.0 < confidence_level < 1.0:
        raise ValueError(f"Confidence level must lie in (0, 1), got {confidence_level}")
    return float(chi2.ppf(confidence_level, dof))
