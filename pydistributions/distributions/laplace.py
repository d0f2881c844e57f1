"""
Laplace (double exponential) distribution.

    f(x) = exp(-|x - mu| / beta) / (2 beta)

The CDF and its inverse branch at the median mu so that the exponential
is only ever evaluated at a non-positive argument and the logarithm only
at an argument in (0, 1].
"""

from __future__ import annotations

import numpy as np

from pydistributions.core.validation import (
    check_finite_scalar,
    check_positive,
    check_probability,
)
from pydistributions.distributions.base import ContinuousDistribution


class LaplaceDistribution(ContinuousDistribution):
    """
    Laplace distribution with location mu and scale beta.

    Args:
        mu: Location (mean and median), any finite real
        beta: Scale, strictly positive

    Raises:
        ValidationError: If beta <= 0 or a parameter is not finite
    """

    def __init__(self, mu: float, beta: float):
        super().__init__()
        self._mu = check_finite_scalar(mu, "mu")
        self._beta = check_positive(beta, "beta")

    @property
    def mu(self) -> float:
        return self._mu

    @property
    def beta(self) -> float:
        return self._beta

    def density(self, x: float) -> float:
        return float(np.exp(-abs(x - self._mu) / self._beta) / (2.0 * self._beta))

    def log_density(self, x: float) -> float:
        return float(-abs(x - self._mu) / self._beta - np.log(2.0 * self._beta))

    def cumulative_probability(self, x: float) -> float:
        if x <= self._mu:
            return float(np.exp((x - self._mu) / self._beta) / 2.0)
        return float(1.0 - np.exp((self._mu - x) / self._beta) / 2.0)

    def inverse_cumulative_probability(self, p: float) -> float:
        p = check_probability(p)
        if p == 0.0:
            return self.support_lower_bound()
        if p == 1.0:
            return self.support_upper_bound()

        if p > 0.5:
            return float(self._mu - self._beta * np.log(2.0 - 2.0 * p))
        return float(self._mu + self._beta * np.log(2.0 * p))

    def mean(self) -> float:
        return self._mu

    def variance(self) -> float:
        return 2.0 * self._beta * self._beta

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
        return f"LaplaceDistribution(mu={self._mu}, beta={self._beta})"
