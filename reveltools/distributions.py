"""Probability distributions with sampling, density and cumulative functions."""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass

from reveltools.special import _exp, _log, log_choose, log_factorial, log_gamma, reg_lower_gamma

_TINY = math.ulp(0.0)


def _uniform_nonzero() -> float:
    u = random.random()
    return _TINY if u == 0 else u


class Distribution(ABC):
    """A probability distribution over the real line.

    Invalid parameters make every method return NaN.
    """

    @abstractmethod
    def rand(self) -> float:
        """Draw a random sample."""

    @abstractmethod
    def pdf(self, x: float) -> float:
        """Probability density (or mass) at ``x``."""

    @abstractmethod
    def cdf(self, x: float) -> float:
        """Cumulative probability up to and including ``x``."""


@dataclass(frozen=True)
class NormalDist(Distribution):
    """Normal distribution with mean ``mu`` and standard deviation ``sigma``."""

    mu: float = 0.0
    sigma: float = 1.0

    def rand(self) -> float:
        if self.sigma <= 0:
            return math.nan
        u1 = _uniform_nonzero()
        u2 = random.random()
        r = math.sqrt(-2.0 * math.log(u1))
        theta = 2.0 * math.pi * u2
        return self.mu + self.sigma * r * math.cos(theta)

    def pdf(self, x: float) -> float:
        if self.sigma <= 0:
            return math.nan
        z = (x - self.mu) / self.sigma
        return (1.0 / (self.sigma * math.sqrt(2.0 * math.pi))) * _exp(-0.5 * z * z)

    def cdf(self, x: float) -> float:
        if self.sigma <= 0:
            return math.nan
        z = (x - self.mu) / (self.sigma * math.sqrt(2.0))
        return 0.5 * (1.0 + math.erf(z))


@dataclass(frozen=True)
class ExpDist(Distribution):
    """Exponential distribution with rate ``lam``."""

    lam: float

    def rand(self) -> float:
        u = _uniform_nonzero()
        if self.lam == 0:
            return math.inf
        return (-1.0 / self.lam) * math.log(u)

    def pdf(self, x: float) -> float:
        if self.lam <= 0:
            return math.nan
        if x < 0:
            return 0.0
        return self.lam * _exp(-self.lam * x)

    def cdf(self, x: float) -> float:
        if self.lam <= 0:
            return math.nan
        if x < 0:
            return 0.0
        return 1.0 - _exp(-self.lam * x)


@dataclass(frozen=True)
class Chi2Dist(Distribution):
    """Chi-squared distribution with ``k`` degrees of freedom."""

    k: float

    def rand(self) -> float:
        if self.k <= 0:
            return math.nan
        return 2.0 * gamma_rand(self.k / 2.0)

    def pdf(self, x: float) -> float:
        if self.k <= 0:
            return math.nan
        if x < 0:
            return 0.0
        a = self.k / 2.0
        log_f = -(a * math.log(2.0) + log_gamma(a)) + (a - 1.0) * _log(x) - x / 2.0
        return _exp(log_f)

    def cdf(self, x: float) -> float:
        if self.k <= 0:
            return math.nan
        if x < 0:
            return 0.0
        return reg_lower_gamma(self.k / 2.0, x / 2.0)


@dataclass(frozen=True)
class BinomDist(Distribution):
    """Binomial distribution of ``n`` trials with success probability ``p``."""

    n: int
    p: float

    def _invalid(self) -> bool:
        return self.n < 0 or not 0 <= self.p <= 1

    def rand(self) -> float:
        if self._invalid():
            return math.nan
        return float(sum(1 for _ in range(self.n) if random.random() < self.p))

    def pdf(self, x: float) -> float:
        if self._invalid():
            return math.nan
        if not math.isfinite(x) or not float(x).is_integer():
            return 0.0
        k = int(x)
        if k < 0 or k > self.n:
            return 0.0
        if self.p == 0:
            return 1.0 if k == 0 else 0.0
        if self.p == 1:
            return 1.0 if k == self.n else 0.0
        log_c = log_choose(self.n, k)
        return _exp(log_c + k * math.log(self.p) + (self.n - k) * math.log(1.0 - self.p))

    def cdf(self, x: float) -> float:
        if self._invalid() or math.isnan(x):
            return math.nan
        if x == -math.inf:
            return 0.0
        if x == math.inf:
            return 1.0
        k = math.floor(x)
        if k < 0:
            return 0.0
        if k >= self.n:
            return 1.0
        total = math.fsum(self.pdf(float(i)) for i in range(k + 1))
        return min(max(total, 0.0), 1.0)


@dataclass(frozen=True)
class PoissonDist(Distribution):
    """Poisson distribution with mean ``lam``."""

    lam: float

    def rand(self) -> float:
        if self.lam < 0:
            return math.nan
        if self.lam == 0:
            return 0.0
        if self.lam < 30:
            limit = math.exp(-self.lam)
            k = 0
            prod = 1.0
            while prod > limit:
                k += 1
                prod *= random.random()
            return float(k - 1)
        return float(poisson_ptrs(self.lam))

    def pdf(self, x: float) -> float:
        if self.lam < 0:
            return math.nan
        if not math.isfinite(x) or not float(x).is_integer():
            return 0.0
        k = int(x)
        if k < 0:
            return 0.0
        return _exp(float(k) * _log(self.lam) - self.lam - log_factorial(k))

    def cdf(self, x: float) -> float:
        if self.lam < 0 or math.isnan(x):
            return math.nan
        if x == -math.inf:
            return 0.0
        if x == math.inf:
            return 1.0
        k = math.floor(x)
        if k < 0:
            return 0.0
        return reg_lower_gamma(float(k + 1), self.lam)


def gamma_rand(shape: float) -> float:
    """Draw from Gamma(``shape``, scale 1) with the Marsaglia-Tsang method."""
    if shape <= 0:
        return math.nan
    if shape < 1.0:
        u = _uniform_nonzero()
        return gamma_rand(shape + 1.0) * u ** (1.0 / shape)

    d = shape - 1.0 / 3.0
    c = 1.0 / math.sqrt(9.0 * d)
    standard = NormalDist(0.0, 1.0)
    while True:
        x = standard.rand()
        v = 1.0 + c * x
        if v <= 0:
            continue
        v = v * v * v
        u = random.random()
        if u < 1.0 - 0.0331 * (x * x) * (x * x):
            return d * v
        if _log(u) < 0.5 * x * x + d * (1.0 - v + math.log(v)):
            return d * v


def poisson_ptrs(lam: float) -> int:
    """Draw a Poisson variate with the transformed-rejection (PTRS) method."""
    sqrt_l = math.sqrt(lam)
    log_l = math.log(lam)

    b = 0.931 + 2.53 * sqrt_l
    a = -0.059 + 0.02483 * b
    inv_alpha = 1.1239 + 1.1328 / (b - 3.4)
    v_r = 0.9277 - 3.6224 / (b - 2.0)

    while True:
        u = random.random() - 0.5
        v = random.random()

        us = 0.5 - abs(u)
        if us == 0:
            continue
        k = math.floor((2 * a / us + b) * u + lam + 0.43)
        if k < 0:
            continue

        if us >= 0.07 and v <= v_r:
            return k

        lhs = _log(v * inv_alpha / (a / (us * us) + b))
        rhs = k * log_l - lam - log_factorial(k)
        if lhs <= rhs:
            return k