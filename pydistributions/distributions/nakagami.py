"""
Nakagami distribution.

With shape m and spread omega:

    f(x) = 2 m^m / (Gamma(m) omega^m) x^(2m-1) exp(-m x^2 / omega),  x > 0
    F(x) = P(m, m x^2 / omega)

where P is the regularized lower incomplete gamma function. The density is
evaluated in log space so that m^m, omega^m and x^(2m-1) cannot overflow
separately. There is no closed-form quantile function; the inverse CDF uses
the bracketed root search of ContinuousDistribution at
inverse_absolute_accuracy.

References:
    Nakagami, M. (1960). The m-distribution, a general formula of
    intensity distribution of rapid fading.
    Apache Commons Math, NakagamiDistribution
"""

from __future__ import annotations

import numpy as np
from scipy import special

from pydistributions.core.protocols import RootFinder
from pydistributions.core.validation import check_positive, check_at_least
from pydistributions.core.compute.tolerances import DEFAULT_INVERSE_ABSOLUTE_ACCURACY
from pydistributions.distributions.base import ContinuousDistribution
from pydistributions.special.gamma import regularized_gamma_p

# Smallest admissible spread
MIN_OMEGA = 0.5


class NakagamiDistribution(ContinuousDistribution):
    """
    Nakagami distribution with shape m and spread omega.

    Args:
        m: Shape, strictly positive
        omega: Spread (E[X^2]), at least 0.5
        inverse_absolute_accuracy: Absolute accuracy of the inverse CDF
            root search. Default 1e-9.
        root_finder: RootFinder for the inverse CDF. Default Brent's method.

    Raises:
        ValidationError: If m <= 0, omega < 0.5, inverse_absolute_accuracy <= 0,
            or a parameter is not finite
    """

    def __init__(
        self,
        m: float,
        omega: float,
        inverse_absolute_accuracy: float = DEFAULT_INVERSE_ABSOLUTE_ACCURACY,
        *,
        root_finder: RootFinder | None = None,
    ):
        super().__init__(root_finder)
        self._m = check_positive(m, "m")
        self._omega = check_at_least(omega, MIN_OMEGA, "omega")
        self._inverse_absolute_accuracy = check_positive(
            inverse_absolute_accuracy, "inverse_absolute_accuracy"
        )

    @property
    def m(self) -> float:
        return self._m

    @property
    def omega(self) -> float:
        return self._omega

    @property
    def inverse_absolute_accuracy(self) -> float:
        return self._inverse_absolute_accuracy

    def solver_absolute_accuracy(self) -> float:
        return self._inverse_absolute_accuracy

    def density(self, x: float) -> float:
        if x <= 0.0 or np.isinf(x):
            return 0.0
        return float(np.exp(self.log_density(x)))

    def log_density(self, x: float) -> float:
        if x <= 0.0 or np.isinf(x):
            return -np.inf
        m, omega = self._m, self._omega
        return float(
            np.log(2.0)
            + m * np.log(m)
            - special.gammaln(m)
            - m * np.log(omega)
            + (2.0 * m - 1.0) * np.log(x)
            - m * x * x / omega
        )

    def cumulative_probability(self, x: float) -> float:
        if x <= 0.0:
            return 0.0
        return regularized_gamma_p(self._m, self._m * x * x / self._omega)

    def _gamma_ratio(self) -> float:
        """Gamma(m + 1/2) / Gamma(m)."""
        return float(np.exp(special.gammaln(self._m + 0.5) - special.gammaln(self._m)))

    def mean(self) -> float:
        return self._gamma_ratio() * float(np.sqrt(self._omega / self._m))

    def variance(self) -> float:
        v = self._gamma_ratio()
        return self._omega * (1.0 - v * v / self._m)

    def support_lower_bound(self) -> float:
        return 0.0

    def support_upper_bound(self) -> float:
        return np.inf

    def is_support_lower_bound_inclusive(self) -> bool:
        return True

    def is_support_upper_bound_inclusive(self) -> bool:
        return False

    def is_support_connected(self) -> bool:
        return True

    def __repr__(self) -> str:
        return (
            f"NakagamiDistribution(m={self._m}, omega={self._omega}, "
            f"inverse_absolute_accuracy={self._inverse_absolute_accuracy})"
        )
