import math
import random
import statistics

import pytest

from reveltools.distributions import (
    BinomDist,
    Chi2Dist,
    Distribution,
    ExpDist,
    NormalDist,
    PoissonDist,
    gamma_rand,
    poisson_ptrs,
)
from reveltools.special import reg_lower_gamma


@pytest.fixture(autouse=True)
def _seeded():
    random.seed(20240601)


def test_distribution_is_abstract():
    with pytest.raises(TypeError):
        Distribution()


# Normal


def test_normal_cdf_at_mean_is_half():
    assert NormalDist(3.0, 2.0).cdf(3.0) == pytest.approx(0.5)


def test_normal_pdf_is_symmetric():
    dist = NormalDist(1.0, 0.5)
    for d in (0.1, 0.7, 2.0):
        assert dist.pdf(1.0 + d) == pytest.approx(dist.pdf(1.0 - d))


def test_normal_cdf_is_symmetric():
    dist = NormalDist(0.0, 1.0)
    for x in (0.3, 1.0, 2.5):
        assert dist.cdf(x) + dist.cdf(-x) == pytest.approx(1.0)


def test_normal_pdf_integrates_to_cdf_difference():
    dist = NormalDist(0.0, 1.0)
    step = 0.001
    area = sum(dist.pdf(-1.0 + (i + 0.5) * step) for i in range(2000)) * step
    assert area == pytest.approx(dist.cdf(1.0) - dist.cdf(-1.0), rel=1e-6)


@pytest.mark.parametrize("sigma", [0.0, -1.0])
def test_normal_invalid_sigma_is_nan(sigma):
    dist = NormalDist(0.0, sigma)
    assert str(dist.rand()) == "nan"
    assert str(dist.pdf(0.0)) == "nan"
    assert str(dist.cdf(0.0)) == "nan"


def test_normal_samples_mean_and_stdev():
    dist = NormalDist(5.0, 2.0)
    samples = [dist.rand() for _ in range(20000)]
    assert statistics.fmean(samples) == pytest.approx(5.0, abs=0.1)
    assert statistics.stdev(samples) == pytest.approx(2.0, abs=0.1)


# Exponential


def test_exp_pdf_and_cdf_at_zero():
    dist = ExpDist(3.0)
    assert dist.pdf(0.0) == pytest.approx(3.0)
    assert dist.cdf(0.0) == 0.0


def test_exp_negative_x_is_zero():
    dist = ExpDist(2.0)
    assert dist.pdf(-1.0) == 0.0
    assert dist.cdf(-1.0) == 0.0


def test_exp_cdf_median():
    dist = ExpDist(4.0)
    assert dist.cdf(math.log(2) / 4.0) == pytest.approx(0.5)


@pytest.mark.parametrize("lam", [0.0, -2.0])
def test_exp_invalid_rate_is_nan(lam):
    assert str(ExpDist(lam).pdf(1.0)) == "nan"
    assert str(ExpDist(lam).cdf(1.0)) == "nan"


def test_exp_samples_mean():
    dist = ExpDist(2.0)
    samples = [dist.rand() for _ in range(20000)]
    assert all(s >= 0 for s in samples)
    assert statistics.fmean(samples) == pytest.approx(0.5, abs=0.03)


# Chi-squared


@pytest.mark.parametrize("x", [0.5, 1.0, 3.0, 8.0])
def test_chi2_two_degrees_matches_exponential(x):
    chi2 = Chi2Dist(2.0)
    expo = ExpDist(0.5)
    assert chi2.pdf(x) == pytest.approx(expo.pdf(x))
    assert chi2.cdf(x) == pytest.approx(expo.cdf(x))


def test_chi2_negative_x_is_zero():
    assert Chi2Dist(3.0).pdf(-1.0) == 0.0
    assert Chi2Dist(3.0).cdf(-1.0) == 0.0


@pytest.mark.parametrize("k", [0.0, -1.0])
def test_chi2_invalid_degrees_is_nan(k):
    dist = Chi2Dist(k)
    assert str(dist.rand()) == "nan"
    assert str(dist.pdf(1.0)) == "nan"
    assert str(dist.cdf(1.0)) == "nan"


def test_chi2_samples_mean():
    samples = [Chi2Dist(4.0).rand() for _ in range(20000)]
    assert all(s >= 0 for s in samples)
    assert statistics.fmean(samples) == pytest.approx(4.0, abs=0.1)


# Binomial


def test_binom_pmf_sums_to_one():
    dist = BinomDist(12, 0.35)
    assert math.fsum(dist.pdf(float(k)) for k in range(13)) == pytest.approx(1.0)


def test_binom_pmf_matches_comb():
    dist = BinomDist(10, 0.25)
    expected = math.comb(10, 3) * 0.25**3 * 0.75**7
    assert dist.pdf(3.0) == pytest.approx(expected)


@pytest.mark.parametrize("x", [2.5, -1.0, 11.0, math.nan, math.inf])
def test_binom_pmf_zero_off_support(x):
    assert BinomDist(10, 0.5).pdf(x) == 0.0


def test_binom_degenerate_probabilities():
    assert BinomDist(5, 0.0).pdf(0.0) == 1.0
    assert BinomDist(5, 0.0).pdf(1.0) == 0.0
    assert BinomDist(5, 1.0).pdf(5.0) == 1.0
    assert BinomDist(5, 1.0).pdf(4.0) == 0.0


def test_binom_cdf_bounds_and_monotonic():
    dist = BinomDist(8, 0.6)
    assert dist.cdf(-0.5) == 0.0
    assert dist.cdf(8.0) == 1.0
    values = [dist.cdf(k / 2) for k in range(17)]
    assert all(b >= a for a, b in zip(values, values[1:]))
    assert dist.cdf(3.7) == pytest.approx(sum(dist.pdf(float(i)) for i in range(4)))


@pytest.mark.parametrize("n,p", [(-1, 0.5), (5, -0.1), (5, 1.1)])
def test_binom_invalid_is_nan(n, p):
    dist = BinomDist(n, p)
    assert str(dist.rand()) == "nan"
    assert str(dist.pdf(1.0)) == "nan"
    assert str(dist.cdf(1.0)) == "nan"


def test_binom_samples():
    dist = BinomDist(20, 0.3)
    samples = [dist.rand() for _ in range(5000)]
    assert all(s.is_integer() and 0 <= s <= 20 for s in samples)
    assert statistics.fmean(samples) == pytest.approx(6.0, abs=0.2)


# Poisson


def test_poisson_pmf_sums_to_one():
    dist = PoissonDist(4.5)
    assert math.fsum(dist.pdf(float(k)) for k in range(100)) == pytest.approx(1.0)


def test_poisson_pmf_matches_formula():
    dist = PoissonDist(3.0)
    assert dist.pdf(2.0) == pytest.approx(math.exp(-3.0) * 9.0 / 2.0)


@pytest.mark.parametrize("x", [1.5, -2.0, math.nan])
def test_poisson_pmf_zero_off_support(x):
    assert PoissonDist(2.0).pdf(x) == 0.0


def test_poisson_cdf_uses_lower_gamma():
    dist = PoissonDist(2.5)
    assert dist.cdf(-0.1) == 0.0
    for k in range(6):
        assert dist.cdf(k + 0.4) == pytest.approx(reg_lower_gamma(k + 1.0, 2.5))


def test_poisson_invalid_is_nan():
    dist = PoissonDist(-1.0)
    assert str(dist.rand()) == "nan"
    assert str(dist.pdf(1.0)) == "nan"
    assert str(dist.cdf(1.0)) == "nan"


def test_poisson_zero_rate_samples_zero():
    assert PoissonDist(0.0).rand() == 0.0


def test_poisson_small_rate_samples():
    samples = [PoissonDist(4.0).rand() for _ in range(20000)]
    assert all(s.is_integer() and s >= 0 for s in samples)
    assert statistics.fmean(samples) == pytest.approx(4.0, abs=0.1)


def test_poisson_large_rate_samples():
    samples = [PoissonDist(50.0).rand() for _ in range(5000)]
    assert all(s.is_integer() and s >= 0 for s in samples)
    assert statistics.fmean(samples) == pytest.approx(50.0, abs=0.5)


def test_poisson_ptrs_mean_and_variance():
    samples = [poisson_ptrs(100.0) for _ in range(5000)]
    assert all(isinstance(s, int) and s >= 0 for s in samples)
    assert statistics.fmean(samples) == pytest.approx(100.0, abs=1.0)
    assert statistics.variance(samples) == pytest.approx(100.0, rel=0.15)


# Gamma sampler


@pytest.mark.parametrize("shape", [0.5, 3.0])
def test_gamma_rand_mean(shape):
    samples = [gamma_rand(shape) for _ in range(20000)]
    assert all(s >= 0 for s in samples)
    assert statistics.fmean(samples) == pytest.approx(shape, abs=0.1)


@pytest.mark.parametrize("shape", [0.0, -2.0])
def test_gamma_rand_invalid_is_nan(shape):
    assert str(gamma_rand(shape)) == "nan"