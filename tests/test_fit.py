import numpy as np
import pytest

from bsmscan.oblique.fit import GFITTER_2018, FitReference, chisq, critical_chisq

CHISQ_CRIT = 7.81


def test_chisq_at_fit_center():
    assert chisq(GFITTER_2018.S, GFITTER_2018.T, GFITTER_2018.U) < 0.1


def test_chisq_correlations():
    fit = GFITTER_2018
    # S and T are strongly correlated, a shift of one alone is disfavoured
    assert not chisq(fit.S + fit.sdS, fit.T, fit.U) < CHISQ_CRIT
    assert not chisq(fit.S - fit.sdS, fit.T, fit.U) < CHISQ_CRIT
    assert not chisq(fit.S, fit.T + fit.sdT, fit.U) < CHISQ_CRIT
    assert not chisq(fit.S, fit.T - fit.sdT, fit.U) < CHISQ_CRIT
    assert chisq(fit.S, fit.T, fit.U + fit.sdU) < CHISQ_CRIT
    assert chisq(fit.S, fit.T, fit.U - fit.sdU) < CHISQ_CRIT


def test_uncorrelated_fit():
    fit = FitReference(S=0.0, sdS=0.1, T=0.0, sdT=0.2, U=0.0, sdU=0.5, ccST=0.0, ccSU=0.0, ccTU=0.0)
    assert chisq(0.1, 0.2, 0.5, fit) == pytest.approx(3.0)


def test_inverse_covariance_is_cached_and_read_only():
    fit = GFITTER_2018
    inv = fit.inverse_covariance
    assert inv is fit.inverse_covariance
    assert np.allclose(inv @ fit.covariance, np.eye(3))
    with pytest.raises(ValueError):
        inv[0, 0] = 1.0


def test_nan_fails_threshold():
    assert not chisq(float("nan"), 0.0, 0.0) < CHISQ_CRIT


def test_critical_chisq():
    assert critical_chisq(0.95, 3) == pytest.approx(CHISQ_CRIT, abs=0.01)
    assert critical_chisq(0.95, 2) == pytest.approx(5.99, abs=0.01)
    with pytest.raises(ValueError):
        critical_chisq(1.5)
