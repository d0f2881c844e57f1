"""
Abstract base class for continuous univariate distributions.

Every distribution defines:
- A density f(x), defined for all real x (0 outside the support)
- A cumulative distribution function F(x), non-decreasing and right-continuous
- Closed-form mean and variance
- Support bounds, their inclusivity, and whether the support is connected

The base class supplies the inverse CDF by bracketed root finding for
distributions without a closed-form quantile function, plus the derived
operations (interval probability, log density, sampling) that only need
the primitives above.

References:
    Apache Commons Math, AbstractRealDistribution
    Devroye, L. (1986). Non-Uniform Random Variate Generation, ch. 2
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from pydistributions.core.exceptions import ValidationError
from pydistributions.core.protocols import RootFinder
from pydistributions.core.validation import check_scalar, check_probability
from pydistributions.core.compute.solvers import brent_root, bracket_quantile
from pydistributions.core.compute.tolerances import (
    DEFAULT_SOLVER_ABSOLUTE_ACCURACY,
    DEFAULT_SOLVER_RELATIVE_ACCURACY,
    DEFAULT_SOLVER_MAX_ITERATIONS,
)


@dataclass(frozen=True)
class Support:
    """
    Support of a distribution.

    Attributes:
        lower: Lower bound (may be -inf)
        upper: Upper bound (may be +inf)
        lower_inclusive: Whether lower belongs to the support
        upper_inclusive: Whether upper belongs to the support
        connected: Whether the support is a single interval
    """
    lower: float
    upper: float
    lower_inclusive: bool
    upper_inclusive: bool
    connected: bool

    def __contains__(self, x: float) -> bool:
        above = x >= self.lower if self.lower_inclusive else x > self.lower
        below = x <= self.upper if self.upper_inclusive else x < self.upper
        return bool(above and below)


class ContinuousDistribution(ABC):
    """
    Continuous univariate distribution.

    Instances are immutable: parameters are validated once in the subclass
    constructor and exposed through read-only properties. Every method is a
    pure function of the parameters and its arguments, so one instance can
    be shared across threads.

    Args:
        root_finder: RootFinder used by the default inverse CDF.
            Defaults to Brent's method (scipy.optimize.brentq).
    """

    def __init__(self, root_finder: RootFinder | None = None):
        self._root_finder = brent_root if root_finder is None else root_finder

    # -----------------------------------------------------------------
    # Primitives
    # -----------------------------------------------------------------

    @abstractmethod
    def density(self, x: float) -> float:
        """Probability density f(x)."""
        ...

    @abstractmethod
    def cumulative_probability(self, x: float) -> float:
        """P(X <= x)."""
        ...

    @abstractmethod
    def mean(self) -> float:
        ...

    @abstractmethod
    def variance(self) -> float:
        ...

    @abstractmethod
    def support_lower_bound(self) -> float:
        ...

    @abstractmethod
    def support_upper_bound(self) -> float:
        ...

    @abstractmethod
    def is_support_lower_bound_inclusive(self) -> bool:
        ...

    @abstractmethod
    def is_support_upper_bound_inclusive(self) -> bool:
        ...

    @abstractmethod
    def is_support_connected(self) -> bool:
        ...

    # -----------------------------------------------------------------
    # Inverse CDF
    # -----------------------------------------------------------------

    @property
    def root_finder(self) -> RootFinder:
        """RootFinder used by the default inverse CDF."""
        return self._root_finder

    def solver_absolute_accuracy(self) -> float:
        """Absolute accuracy requested from the root finder."""
        return DEFAULT_SOLVER_ABSOLUTE_ACCURACY

    def inverse_cumulative_probability(self, p: float) -> float:
        """
        Quantile function: the x with P(X <= x) = p.

        Returns the support bounds at p = 0 and p = 1. Otherwise the
        quantile is bracketed from the support and the first two moments
        and located with the root finder.

        Args:
            p: Probability in [0, 1]

        Returns:
            The p-quantile

        Raises:
            OutOfRangeError: If p is outside [0, 1]
            ConvergenceError: If the root finder fails
        """
        p = check_probability(p)

        if p == 0.0:
            return self.support_lower_bound()
        if p == 1.0:
            return self.support_upper_bound()

        lower, upper = bracket_quantile(
            self.cumulative_probability, p,
            self.support_lower_bound(), self.support_upper_bound(),
            self.mean(), self.variance(),
        )

        x = self._root_finder(
            lambda t: self.cumulative_probability(t) - p,
            lower, upper,
            absolute_accuracy=self.solver_absolute_accuracy(),
            relative_accuracy=DEFAULT_SOLVER_RELATIVE_ACCURACY,
            max_iterations=DEFAULT_SOLVER_MAX_ITERATIONS,
        )

        if not self.is_support_connected():
            x = self._smallest_with_same_probability(x, lower)

        return x

    def _smallest_with_same_probability(self, x: float, lower: float) -> float:
        """
        Step back across a flat stretch of the CDF.

        On a disconnected support the root finder may land anywhere on a
        plateau; the quantile is its left end.
        """
        dx = self.solver_absolute_accuracy()
        if x - dx < self.support_lower_bound():
            return x

        px = self.cumulative_probability(x)
        if self.cumulative_probability(x - dx) != px:
            return x

        upper = x
        while upper - lower > dx:
            midpoint = 0.5 * (lower + upper)
            if self.cumulative_probability(midpoint) < px:
                lower = midpoint
            else:
                upper = midpoint
        return upper

    # -----------------------------------------------------------------
    # Derived quantities
    # -----------------------------------------------------------------

    def probability(self, x0: float, x1: float) -> float:
        """
        P(x0 < X <= x1).

        Raises:
            ValidationError: If x0 > x1
        """
        x0 = check_scalar(x0, "x0")
        x1 = check_scalar(x1, "x1")
        if x0 > x1:
            raise ValidationError(
                f"x0: lower endpoint {x0} is larger than upper endpoint x1={x1}"
            )
        return self.cumulative_probability(x1) - self.cumulative_probability(x0)

    def log_density(self, x: float) -> float:
        """Natural logarithm of the density; -inf where the density is 0."""
        d = self.density(x)
        if d <= 0.0:
            return -np.inf
        return float(np.log(d))

    def standard_deviation(self) -> float:
        return float(np.sqrt(self.variance()))

    def support(self) -> Support:
        """Support bounds and flags as a single record."""
        return Support(
            lower=self.support_lower_bound(),
            upper=self.support_upper_bound(),
            lower_inclusive=self.is_support_lower_bound_inclusive(),
            upper_inclusive=self.is_support_upper_bound_inclusive(),
            connected=self.is_support_connected(),
        )

    def sample(
        self,
        size: int | tuple[int, ...] | None = None,
        rng: np.random.Generator | int | None = None,
    ) -> float | NDArray[np.floating]:
        """
        Draw random variates by inversion.

        Uniform variates come from a numpy Generator and are mapped through
        inverse_cumulative_probability().

        Args:
            size: Output shape; None draws a single float
            rng: Generator, seed, or None for fresh OS entropy

        Returns:
            float if size is None, else ndarray of the requested shape
        """
        generator = np.random.default_rng(rng)
        if size is None:
            return self.inverse_cumulative_probability(generator.random())

        u = generator.random(size)
        quantile = np.vectorize(self.inverse_cumulative_probability, otypes=[float])
        return quantile(u)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
