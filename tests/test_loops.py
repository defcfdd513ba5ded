import numpy as np
import pytest

from bsmscan.oblique.loops import F, G, G2, func_f


def test_func_f():
    assert func_f(100, 70) == pytest.approx(-1.4032804556, rel=1e-5)
    assert func_f(20, 1e-5) == pytest.approx(-0.000001, rel=1e-5)
    assert func_f(80, -123) == pytest.approx(3.0555248654, rel=1e-5)
    assert func_f(1e-4, 0) == pytest.approx(0.0)


def test_F():
    assert F(1342, 152) == pytest.approx(373.6517193689, rel=1e-5)
    assert F(2e-4, 345) == pytest.approx(172.4972278508, rel=1e-5)
    assert F(247, 6e-5) == pytest.approx(123.4991161665, rel=1e-5)


def test_F_degenerate():
    assert F(500.0, 500.0) == 0.0
    assert F(1342, 152) == pytest.approx(F(152, 1342))


def test_F_continuous_across_series_branch():
    # |delta| just below and just above the series threshold
    below = F(1000.0 * (1 + 0.999e-3), 1000.0 * (1 - 0.999e-3))
    above = F(1000.0 * (1 + 1.001e-3), 1000.0 * (1 - 1.001e-3))
    assert below == pytest.approx(above, rel=1e-2)
    assert below == pytest.approx(2000.0 * 0.999e-3**2 / 3, rel=1e-5)


def test_G():
    assert G(2142, 1243, 529) == pytest.approx(-0.0058186952, rel=1e-5)
    assert G(1e-4, 124, 954) == pytest.approx(11.8174, rel=1e-5)
    assert G(461, 3e-5, 415) == pytest.approx(14.3069, rel=1e-5)
    assert G(4120, 504, 9e-6) == pytest.approx(1.71799e10, rel=1e-5)


def test_G_degenerate():
    assert G(2145, 2145.00001, 1e-2) == pytest.approx(5.06779e-06, rel=1e-4)


def test_G2():
    assert G2(2417, 653) == pytest.approx(-1.68813, rel=1e-5)
    assert G2(1e-4, 1243) == pytest.approx(-9.97637, rel=1e-5)
    assert G2(843, 5e-5) == pytest.approx(-2.13681e12, rel=1e-5)


def test_G2_degenerate():
    assert G2(1013, 1013.00001) == pytest.approx(-4.68494, rel=1e-5)
    # series and closed form agree close to the branch point
    assert G2(1013, 1013.002) == pytest.approx(G2(1013, 1013.0005), rel=1e-4)


def test_G_continuous_across_series_branch():
    below = G(2145.0, 2145.0 + 0.999e-3, 529.0)
    above = G(2145.0, 2145.0 + 1.001e-3, 529.0)
    assert below == pytest.approx(above, rel=1e-5, abs=1e-7)


def test_vanishing_mass_is_not_finite():
    with np.errstate(divide="ignore", invalid="ignore"):
        assert not np.isfinite(F(8315.0, 0.0))
        assert not np.isfinite(G(0.0, 15625.0, 8315.0))
        assert not np.isfinite(G2(0.0, 8315.0))
        assert not np.isfinite(func_f(0.0, 0.0))
