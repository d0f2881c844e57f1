"""
Root finding for inverse cumulative distribution functions.

brent_root adapts scipy.optimize.brentq to the RootFinder protocol,
converting scipy's failure modes into ConvergenceError. bracket_quantile
builds the search interval for a quantile from the support and the first
two moments (one-sided Chebyshev / Cantelli bounds).
"""

from __future__ import annotations

import warnings
from typing import Callable

import numpy as np
from scipy import optimize

from pydistributions.core.exceptions import ConvergenceError
from pydistributions.core.compute.tolerances import (
    DEFAULT_SOLVER_ABSOLUTE_ACCURACY,
    DEFAULT_SOLVER_RELATIVE_ACCURACY,
    DEFAULT_SOLVER_MAX_ITERATIONS,
)

# Doubling from 1.0 reaches float overflow after ~1024 steps
_MAX_EXPANSIONS = 1100


def brent_root(
    function: Callable[[float], float],
    lower: float,
    upper: float,
    *,
    absolute_accuracy: float = DEFAULT_SOLVER_ABSOLUTE_ACCURACY,
    relative_accuracy: float = DEFAULT_SOLVER_RELATIVE_ACCURACY,
    max_iterations: int = DEFAULT_SOLVER_MAX_ITERATIONS,
) -> float:
    """
    Find a root of function in [lower, upper] with Brent's method.

    Args:
        function: Continuous scalar function
        lower: Left end of the bracket
        upper: Right end of the bracket
        absolute_accuracy: xtol passed to brentq
        relative_accuracy: rtol passed to brentq (at least 4 * machine eps)
        max_iterations: maxiter passed to brentq

    Returns:
        Approximate root as a float

    Raises:
        ConvergenceError: If the bracket has no sign change or brentq
            exhausts max_iterations
    """
    rtol = max(relative_accuracy, 4.0 * np.finfo(float).eps)

    try:
        root, info = optimize.brentq(
            function, lower, upper,
            xtol=absolute_accuracy,
            rtol=rtol,
            maxiter=max_iterations,
            full_output=True,
            disp=False,
        )
    except ValueError as e:
        f_lower = function(lower)
        f_upper = function(upper)
        raise ConvergenceError(
            f"Root not bracketed by [{lower}, {upper}]: "
            f"f(lower)={f_lower}, f(upper)={f_upper}",
            iterations=0,
            final_change=abs(upper - lower),
            reason='no_sign_change',
            threshold=absolute_accuracy,
        ) from e

    if not info.converged:
        raise ConvergenceError(
            f"Brent's method did not converge after {info.iterations} iterations "
            f"(flag={info.flag!r})",
            iterations=info.iterations,
            reason='max_iterations',
            threshold=absolute_accuracy,
        )

    return float(root)


def _expand_downward(cdf: Callable[[float], float], p: float) -> float:
    """Double a negative abscissa until cdf drops below p."""
    x = -1.0
    for _ in range(_MAX_EXPANSIONS):
        if cdf(x) < p:
            return x
        x *= 2.0
    raise ConvergenceError(
        f"Could not find a lower bracket for p={p}",
        iterations=_MAX_EXPANSIONS,
        final_change=x,
        reason='bracket_expansion',
    )


def _expand_upward(cdf: Callable[[float], float], p: float) -> float:
    """Double a positive abscissa until cdf reaches p."""
    x = 1.0
    for _ in range(_MAX_EXPANSIONS):
        if cdf(x) >= p:
            return x
        x *= 2.0
    raise ConvergenceError(
        f"Could not find an upper bracket for p={p}",
        iterations=_MAX_EXPANSIONS,
        final_change=x,
        reason='bracket_expansion',
    )


def bracket_quantile(
    cdf: Callable[[float], float],
    p: float,
    support_lower: float,
    support_upper: float,
    mean: float,
    variance: float,
) -> tuple[float, float]:
    """
    Bracket the p-quantile of a distribution.

    Infinite support ends are replaced by Cantelli bounds
    mean - sd * sqrt((1 - p) / p) and mean + sd * sqrt(p / (1 - p)), which
    satisfy cdf(lower) <= p <= cdf(upper). When the moments are not finite
    the bracket is expanded by doubling instead, with a RuntimeWarning.

    Args:
        cdf: Cumulative distribution function
        p: Target probability, strictly inside (0, 1)
        support_lower: Lower support bound (may be -inf)
        support_upper: Upper support bound (may be +inf)
        mean: Distribution mean
        variance: Distribution variance

    Returns:
        (lower, upper) with cdf(lower) <= p <= cdf(upper)
    """
    sd = np.sqrt(variance) if variance >= 0 else np.nan
    chebyshev_applies = bool(np.isfinite(mean) and np.isfinite(sd))

    needs_bracket = np.isinf(support_lower) or np.isinf(support_upper)
    if needs_bracket and not chebyshev_applies:
        warnings.warn(
            f"Moments are not finite (mean={mean}, variance={variance}); "
            f"bracketing the quantile by expansion",
            RuntimeWarning,
            stacklevel=3,
        )

    lower = support_lower
    if np.isinf(lower):
        if chebyshev_applies:
            lower = mean - sd * np.sqrt((1.0 - p) / p)
        else:
            lower = _expand_downward(cdf, p)

    upper = support_upper
    if np.isinf(upper):
        if chebyshev_applies:
            upper = mean + sd * np.sqrt(p / (1.0 - p))
        else:
            upper = _expand_upward(cdf, p)

    return float(lower), float(upper)
