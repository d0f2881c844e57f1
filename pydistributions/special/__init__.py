"""
Special functions.

Public API:
    regularized_gamma_p(a, x)  - Regularized lower incomplete gamma P(a, x)
    regularized_gamma_q(a, x)  - Regularized upper incomplete gamma Q(a, x)
    log_gamma(a)               - log Gamma(a) for a > 0
"""

from pydistributions.special.gamma import (
    regularized_gamma_p,
    regularized_gamma_q,
    log_gamma,
)

__all__ = [
    "regularized_gamma_p",
    "regularized_gamma_q",
    "log_gamma",
]
