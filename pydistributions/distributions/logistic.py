"""
Logistic distribution.

With z = (x - mu) / b:

    f(x) = exp(-z) / (b (1 + exp(-z))^2) = expit(z) expit(-z) / b
    F(x) = expit(z) = 1 / (1 + exp(-z))
    F^-1(p) = mu + b logit(p)

The sigmoid, its logarithm and the logit come from scipy.special, which
evaluates them without overflow in either tail.
"""

from __future__ import annotations

import numpy as np
from scipy import special

from pydistributions.core.validation import (
    check_finite_scalar,
    check_positive,
    check_probability,
)
from pydistributions.distributions.base import ContinuousDistribution


class LogisticDistribution(ContinuousDistribution):
    """
    Logistic distribution with location mu and scale b.

    Args:
        mu: Location (mean and median), any finite real
        b: Scale, strictly positive

    Raises:
        ValidationError: If b <= 0 or a parameter is not finite
    """

    def __init__(self, mu: float, b: float):
        super().__init__()
        self._mu = check_finite_scalar(mu, "mu")
        self._b = check_positive(b, "b")

    @property
    def mu(self) -> float:
        return self._mu

    @property
    def b(self) -> float:
        return self._b

    def _z(self, x: float) -> float:
        return (x - self._mu) / self._b

    def density(self, x: float) -> float:
        z = self._z(x)
        return float(special.expit(z) * special.expit(-z) / self._b)

    def log_density(self, x: float) -> float:
        z = self._z(x)
        return float(special.log_expit(z) + special.log_expit(-z) - np.log(self._b))

    def cumulative_probability(self, x: float) -> float:
        return float(special.expit(self._z(x)))

    def inverse_cumulative_probability(self, p: float) -> float:
        p = check_probability(p)
        if p == 0.0:
            return self.support_lower_bound()
        if p == 1.0:
            return self.support_upper_bound()

        return float(self._mu + self._b * special.logit(p))

    def mean(self) -> float:
        return self._mu

    def variance(self) -> float:
        return np.pi * np.pi * self._b * self._b / 3.0

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
        return f"LogisticDistribution(mu={self._mu}, b={self._b})"
