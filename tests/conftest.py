"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np
from scipy import integrate


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def quad_over_support():
    """
    Integrate g(x) * density(x) over a distribution's support.

    Returns a function (dist, g) -> float. Infinite bounds are passed to
    scipy.integrate.quad directly; the integral is split at the median so
    that quad samples the bulk of the mass on both sides.
    """
    def _integrate(dist, g=lambda x: 1.0):
        lower = dist.support_lower_bound()
        upper = dist.support_upper_bound()
        split = dist.inverse_cumulative_probability(0.5)

        def integrand(x):
            return g(x) * dist.density(x)

        left, _ = integrate.quad(integrand, lower, split, limit=200)
        right, _ = integrate.quad(integrand, split, upper, limit=200)
        return left + right

    return _integrate
