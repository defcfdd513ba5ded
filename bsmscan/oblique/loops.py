"""Loop functions for the oblique parameters of arXiv:0802.4353.

All arguments are squared masses in GeV^2. Each function switches to a
series expansion where the closed form has a removable singularity.

Divisions and logarithms use numpy scalar math, so a vanishing mass gives
inf or nan instead of raising. Callers choose the warning policy with
``np.errstate``.
"""
from __future__ import annotations

import numpy as np

SERIES_THRESHOLD = 1e-3


def F(I: float, J: float) -> float:
    """F(I, J) = (I+J)/2 - I*J*log(I/J)/(I-J), eq. (29).

    The series branch is the Taylor expansion in delta = (I-J)/(I+J) up to
    delta^4. An extra |delta| term that other implementations carry there
    is left out, which keeps F continuous at the threshold.
    """
    sum_sq = I + J
    delta = np.divide(I - J, sum_sq)
    if abs(delta) < SERIES_THRESHOLD:
        return sum_sq * delta * delta * (1.0 + delta * delta / 5.0) / 3.0
    return sum_sq * (0.5 + 0.25 * (delta - 1.0) * (delta + 1.0) / delta * np.log(np.divide(1.0 + delta, 1.0 - delta)))


def func_f(t: float, r: float) -> float:
    """f(t, r) of eq. (B7); regular for all t > 0."""
    if abs(r) < SERIES_THRESHOLD:
        return np.divide(-2.0 * r, t)
    if r > 0:
        sqr = np.sqrt(r)
        return sqr * np.log(abs(np.divide(t - sqr, t + sqr)))
    sqr = np.sqrt(-r)
    return 2.0 * sqr * np.arctan(np.divide(sqr, t))


def G(I: float, J: float, Q: float) -> float:
    """G(I, J, Q) of eq. (C2); regular for I, J, Q > 0."""
    diff = I - J
    if abs(diff) < SERIES_THRESHOLD:
        logpart = 6.0 * J / Q + 3.0 * diff / Q
    else:
        logpart = (
            3.0
            / Q
            * ((I**2 + J**2) / diff - (I**2 - J**2) / Q + diff**3 / (3.0 * Q**2))
            * np.log(np.divide(I, J))
        )
    r = Q**2 - 2.0 * Q * (I + J) + diff**2
    t = I + J - Q
    return -16.0 / 3.0 + 5.0 * (I + J) / Q - 2.0 * diff**2 / Q**2 + logpart + r / Q**3 * func_f(t, r)


def G2(I: float, Q: float) -> float:
    """G-hat(I, Q) of eq. (C5); regular for I, Q > 0."""
    x = np.divide(I, Q)
    if abs(I - Q) < SERIES_THRESHOLD:
        logpart = -18.0 + 3.0 * (I - Q) / Q
    else:
        logpart = (-10.0 + 18.0 * I / Q - 6.0 * x**2 + x**3 - 9.0 * (I + Q) / (I - Q)) * np.log(x)
    return -79.0 / 3.0 + 9.0 * I / Q - 2.0 * x**2 + logpart + (12.0 - 4.0 * I / Q + x**2) * func_f(I, I**2 - 4.0 * I * Q) / Q
