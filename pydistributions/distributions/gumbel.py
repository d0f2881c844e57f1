"""
Gumbel (type I extreme value) distribution.

With z = (x - mu) / beta:

    f(x) = exp(-z - exp(-z)) / |beta|
    F(x) = exp(-exp(-z))                 beta > 0
    F(x) = 1 - exp(-exp(-z))             beta < 0

beta > 0 is the distribution of maxima (scipy.stats.gumbel_r); a negative
beta reflects it about mu into the distribution of minima
(scipy.stats.gumbel_l with scale |beta|). The reflected branch is
evaluated with expm1/log1p so that probabilities near 0 and 1 keep
full relative accuracy.

References:
    Gumbel, E. J. (1958). Statistics of Extremes
    Apache Commons Math, GumbelDistribution
"""

from __future__ import annotations

import numpy as np

from pydistributions.core.validation import (
    check_finite_scalar,
    check_nonzero,
    check_probability,
)
from pydistributions.distributions.base import ContinuousDistribution


class GumbelDistribution(ContinuousDistribution):
    """
    Gumbel distribution with location mu and signed scale beta.

    Args:
        mu: Location, any finite real
        beta: Scale, finite and non-zero; negative values select the
            reflected (minimum) branch

    Raises:
        ValidationError: If beta == 0 or a parameter is not finite
    """

    def __init__(self, mu: float, beta: float):
        super().__init__()
        self._mu = check_finite_scalar(mu, "mu")
        self._beta = check_nonzero(beta, "beta")

    @property
    def mu(self) -> float:
        return self._mu

    @property
    def beta(self) -> float:
        return self._beta

    def _z(self, x: float) -> float:
        return (x - self._mu) / self._beta

    def density(self, x: float) -> float:
        z = self._z(x)
        if np.isinf(z):
            return 0.0
        with np.errstate(over="ignore"):
            return float(np.exp(-z - np.exp(-z)) / abs(self._beta))

    def log_density(self, x: float) -> float:
        z = self._z(x)
        if np.isinf(z):
            return -np.inf
        with np.errstate(over="ignore"):
            return float(-z - np.exp(-z) - np.log(abs(self._beta)))

    def cumulative_probability(self, x: float) -> float:
        z = self._z(x)
        with np.errstate(over="ignore"):
            if self._beta > 0:
                return float(np.exp(-np.exp(-z)))
            return float(-np.expm1(-np.exp(-z)))

    def inverse_cumulative_probability(self, p: float) -> float:
        p = check_probability(p)
        if p == 0.0:
            return self.support_lower_bound()
        if p == 1.0:
            return self.support_upper_bound()

        if self._beta > 0:
            return float(self._mu - self._beta * np.log(-np.log(p)))
        return float(self._mu - self._beta * np.log(-np.log1p(-p)))

    def mean(self) -> float:
        return self._mu + np.euler_gamma * self._beta

    def variance(self) -> float:
        return np.pi * np.pi * self._beta * self._beta / 6.0

    def support_lower_bound(self) -> float:
        return -np.inf

    def support_upper_bound(self) -> float:
        return np.inf

    def is_support_lower_bound_inclusive(self) -> bool:
        return False

    def is_support_upper_bound_inclusive(self) -> bool:
        return False

    def is_support_connected(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"GumbelDistribution(mu={self._mu}, beta={self._beta})"
