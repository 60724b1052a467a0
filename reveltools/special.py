"""Special functions used by the probability distributions."""

from __future__ import annotations

import math

_ITMAX = 200
_EPS = 3e-14
_FPMIN = 1e-300


def _exp(x: float) -> float:
    """Exponential that saturates to infinity instead of raising."""
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def _log(x: float) -> float:
    """Natural logarithm that follows IEEE rules: ``-inf`` at 0, NaN below."""
    if x == 0:
        return -math.inf
    if x < 0 or math.isnan(x):
        return math.nan
    return math.log(x)


def log_gamma(x: float) -> float:
    """Natural logarithm of the absolute value of the gamma function.

    Poles (zero and the negative integers) give ``inf``.
    """
    try:
        return math.lgamma(x)
    except (ValueError, OverflowError):
        return math.inf


def log_factorial(n: int) -> float:
    """Natural logarithm of ``n!``."""
    return log_gamma(float(n) + 1.0)


def log_choose(n: int, k: int) -> float:
    """Natural logarithm of the binomial coefficient ``C(n, k)``.

    Returns ``-inf`` when ``k`` lies outside ``0..n``.
    """
    if k < 0 or k > n:
        return -math.inf
    return log_factorial(n) - log_factorial(k) - log_factorial(n - k)


def _gamma_series(a: float, x: float) -> float:
    total = 1.0 / a
    term = total
    ap = a
    for _ in range(_ITMAX):
        ap += 1.0
        term *= x / ap
        total += term
        if abs(term) < abs(total) * _EPS:
            break
    return total * _exp(-x + a * _log(x) - log_gamma(a))


def _gamma_cont_frac(a: float, x: float) -> float:
    b = x + 1.0 - a
    c = 1.0 / _FPMIN
    d = 1.0 / b if b != 0 else 1.0 / _FPMIN
    h = d
    for i in range(1, _ITMAX + 1):
        an = -float(i) * (float(i) - a)
        b += 2.0
        d = an * d + b
        if abs(d) < _FPMIN:
            d = _FPMIN
        c = b + an / c
        if abs(c) < _FPMIN:
            c = _FPMIN
        d = 1.0 / d
        delta = d * c
        h *= delta
        if abs(delta - 1.0) < _EPS:
            break
    return _exp(-x + a * _log(x) - log_gamma(a)) * h


def reg_lower_gamma(a: float, x: float) -> float:
    """Regularised lower incomplete gamma function ``P(a, x)``.

    Returns NaN when ``a <= 0`` or ``x < 0``.
    """
    if a <= 0 or x < 0:
        return math.nan
    if x == 0:
        return 0.0
    if x < a + 1.0:
        return _gamma_series(a, x)
    return 1.0 - _gamma_cont_frac(a, x)