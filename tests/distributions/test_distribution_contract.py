"""
Properties every ContinuousDistribution must satisfy.

Each distribution is checked for:
    - CDF non-decreasing and within [0, 1]
    - density integrating to 1 over the support (scipy.integrate.quad)
    - inverse_cumulative_probability(cumulative_probability(x)) ~ x
    - inverse CDF returning the support bounds at p = 0 and p = 1
    - inverse CDF rejecting p outside [0, 1]
    - mean and variance matching the quadrature moments
    - sampling by inversion agreeing with the CDF (Kolmogorov-Smirnov)
"""

from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest
from scipy import stats

from pydistributions import (
    ContinuousDistribution,
    GumbelDistribution,
    LaplaceDistribution,
    LogisticDistribution,
    NakagamiDistribution,
)
from pydistributions.core.compute.tolerances import QUADRATURE
from pydistributions.core.exceptions import OutOfRangeError, ValidationError


# Three or more parameter sets per distribution
DISTRIBUTIONS = [
    GumbelDistribution(0.0, 1.0),
    GumbelDistribution(2.0, -3.0),
    GumbelDistribution(-1.5, 0.5),
    LaplaceDistribution(0.0, 1.0),
    LaplaceDistribution(3.0, 0.25),
    LaplaceDistribution(-10.0, 4.0),
    LogisticDistribution(2.0, 5.0),
    LogisticDistribution(0.0, 1.0),
    LogisticDistribution(-4.0, 0.3),
    NakagamiDistribution(0.5, 1.0),
    NakagamiDistribution(1.0, 2.0),
    NakagamiDistribution(3.5, 0.75),
    NakagamiDistribution(10.0, 5.0),
]

PROBABILITIES = [1e-6, 0.001, 0.05, 0.25, 0.5, 0.75, 0.95, 0.999, 1 - 1e-6]


@pytest.fixture(params=DISTRIBUTIONS, ids=repr)
def dist(request) -> ContinuousDistribution:
    return request.param


def _interior_points(dist, n=41):
    """Points spread over the bulk of the distribution, strictly inside the support."""
    mean, sd = dist.mean(), dist.standard_deviation()
    xs = np.linspace(mean - 5.0 * sd, mean + 5.0 * sd, n)
    return [float(x) for x in xs if x > dist.support_lower_bound()]


class TestCumulativeProbability:

    def test_non_decreasing(self, dist):
        xs = np.linspace(dist.mean() - 20 * dist.standard_deviation(),
                         dist.mean() + 20 * dist.standard_deviation(), 2001)
        values = np.array([dist.cumulative_probability(x) for x in xs])
        assert np.all(np.diff(values) >= 0.0)
        assert np.all((values >= 0.0) & (values <= 1.0))

    def test_limits(self, dist):
        sd = dist.standard_deviation()
        assert dist.cumulative_probability(dist.mean() + 1e3 * sd) == pytest.approx(1.0, abs=1e-12)
        low = max(dist.mean() - 1e3 * sd, dist.support_lower_bound())
        assert dist.cumulative_probability(low) == pytest.approx(0.0, abs=1e-12)

    def test_probability_of_interval(self, dist):
        a, b = dist.inverse_cumulative_probability(0.2), dist.inverse_cumulative_probability(0.7)
        assert dist.probability(a, b) == pytest.approx(0.5, abs=1e-6)

    def test_probability_rejects_reversed_interval(self, dist):
        with pytest.raises(ValidationError):
            dist.probability(1.0, 0.0)


class TestDensity:

    def test_non_negative(self, dist):
        for x in _interior_points(dist):
            assert dist.density(x) >= 0.0

    def test_integrates_to_one(self, dist, quad_over_support):
        assert quad_over_support(dist) == pytest.approx(1.0, rel=QUADRATURE.rtol)

    def test_log_density_consistent(self, dist):
        for x in _interior_points(dist, n=11):
            d = dist.density(x)
            if d > 0.0:
                assert dist.log_density(x) == pytest.approx(np.log(d), rel=1e-12, abs=1e-12)

    def test_density_is_cdf_derivative(self, dist):
        h = 1e-5 * dist.standard_deviation()
        for p in [0.1, 0.35, 0.9]:
            x = dist.inverse_cumulative_probability(p)
            slope = (dist.cumulative_probability(x + h) - dist.cumulative_probability(x - h)) / (2 * h)
            assert slope == pytest.approx(dist.density(x), rel=1e-5)


class TestInverseCumulativeProbability:

    def test_round_trip_from_x(self, dist):
        for x in _interior_points(dist, n=21):
            p = dist.cumulative_probability(x)
            if 0.0 < p < 1.0:
                assert dist.inverse_cumulative_probability(p) == pytest.approx(
                    x, abs=1e-6 * max(1.0, abs(x))
                )

    @pytest.mark.parametrize("p", PROBABILITIES)
    def test_round_trip_from_p(self, dist, p):
        x = dist.inverse_cumulative_probability(p)
        assert dist.cumulative_probability(x) == pytest.approx(p, rel=1e-6, abs=1e-8)

    def test_bounds(self, dist):
        assert dist.inverse_cumulative_probability(0.0) == dist.support_lower_bound()
        assert dist.inverse_cumulative_probability(1.0) == dist.support_upper_bound()

    @pytest.mark.parametrize("p", [-0.01, 1.01, np.nan])
    def test_out_of_range(self, dist, p):
        with pytest.raises(OutOfRangeError):
            dist.inverse_cumulative_probability(p)

    def test_monotone(self, dist):
        xs = [dist.inverse_cumulative_probability(p) for p in PROBABILITIES]
        assert all(a < b for a, b in zip(xs, xs[1:]))


class TestMoments:

    def test_mean_matches_quadrature(self, dist, quad_over_support):
        expected = quad_over_support(dist, lambda x: x)
        assert dist.mean() == pytest.approx(expected, rel=QUADRATURE.rtol, abs=QUADRATURE.atol)

    def test_variance_matches_quadrature(self, dist, quad_over_support):
        mean = dist.mean()
        expected = quad_over_support(dist, lambda x: (x - mean) ** 2)
        assert dist.variance() == pytest.approx(expected, rel=QUADRATURE.rtol, abs=QUADRATURE.atol)

    def test_standard_deviation(self, dist):
        assert dist.standard_deviation() ** 2 == pytest.approx(dist.variance(), rel=1e-14)


class TestSupport:

    def test_support_record(self, dist):
        support = dist.support()
        assert support.lower == dist.support_lower_bound()
        assert support.upper == dist.support_upper_bound()
        assert support.lower_inclusive == dist.is_support_lower_bound_inclusive()
        assert support.upper_inclusive == dist.is_support_upper_bound_inclusive()
        assert support.connected

    def test_mean_in_support(self, dist):
        assert dist.mean() in dist.support()

    def test_density_zero_below_support(self, dist):
        lower = dist.support_lower_bound()
        if np.isfinite(lower):
            assert dist.density(lower - 1.0) == 0.0
            assert dist.cumulative_probability(lower - 1.0) == 0.0
            assert dist.log_density(lower - 1.0) == -np.inf

    @pytest.mark.parametrize("x", [-np.inf, np.inf])
    def test_density_vanishes_at_infinity(self, dist, x):
        assert dist.density(x) == 0.0
        assert dist.log_density(x) == -np.inf

    def test_cumulative_probability_limits_at_infinity(self, dist):
        assert dist.cumulative_probability(-np.inf) == 0.0
        assert dist.cumulative_probability(np.inf) == 1.0


class TestSampling:

    def test_single_draw_is_float(self, dist):
        assert isinstance(dist.sample(rng=1), float)

    def test_shape(self, dist):
        assert dist.sample((4, 3), rng=1).shape == (4, 3)

    def test_reproducible_with_seed(self, dist):
        np.testing.assert_array_equal(dist.sample(50, rng=7), dist.sample(50, rng=7))

    def test_matches_cdf(self, dist, rng):
        draws = dist.sample(500, rng=rng)
        cdf = np.vectorize(dist.cumulative_probability, otypes=[float])
        result = stats.kstest(draws, cdf)
        assert result.pvalue > 1e-4


class TestThreadSafety:

    def test_concurrent_evaluation(self, dist):
        ps = np.linspace(0.01, 0.99, 64)
        expected = [dist.inverse_cumulative_probability(p) for p in ps]
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(dist.inverse_cumulative_probability, ps))
        assert results == expected
