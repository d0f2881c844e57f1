"""
Accuracy defaults and tolerance tiers for numerical evaluation.

Defines the defaults handed to iterative algorithms and the precision
expectations for different evaluation paths:
- closed form: formulas evaluated directly in double precision
- special function: series / continued fraction to ~1e-14
- root finding: inverse CDF solved to the configured absolute accuracy
- quadrature: numerically integrated moments

Used by the distributions, the special functions and the test suite.
"""

from dataclasses import dataclass


# Absolute accuracy of the Nakagami inverse CDF root search
DEFAULT_INVERSE_ABSOLUTE_ACCURACY = 1e-9

# Defaults for the base-class inverse CDF root search
DEFAULT_SOLVER_ABSOLUTE_ACCURACY = 1e-6
DEFAULT_SOLVER_RELATIVE_ACCURACY = 1e-14
DEFAULT_SOLVER_MAX_ITERATIONS = 200

# Regularized incomplete gamma series / continued fraction. Near x ~ a both
# expansions need O(sqrt(a)) terms, so the iteration limit grows with a
# above this floor.
DEFAULT_GAMMA_EPSILON = 1e-14
DEFAULT_GAMMA_MAX_ITERATIONS = 10_000
GAMMA_ITERATIONS_PER_SQRT_A = 100


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Closed-form PDF/CDF/inverse: double precision up to a few ulps of cancellation
CLOSED_FORM = ToleranceTier(
    rtol=1e-12,
    atol=1e-14,
    name='closed_form',
    description='Closed-form formulas evaluated in double precision',
)

# Series / continued fraction special functions
SPECIAL_FUNCTION = ToleranceTier(
    rtol=1e-11,
    atol=1e-15,
    name='special_function',
    description='Regularized incomplete gamma against scipy.special',
)

# Inverse CDF by bracketed root finding
ROOT_FINDING = ToleranceTier(
    rtol=1e-8,
    atol=1e-6,
    name='root_finding',
    description='Inverse CDF without closed form, solved numerically',
)

# Moments and normalisation recovered by adaptive quadrature
QUADRATURE = ToleranceTier(
    rtol=1e-6,
    atol=1e-7,
    name='quadrature',
    description='Integrals of the density computed by scipy.integrate.quad',
)


def select_tolerance(path: str) -> ToleranceTier:
    """Select the tolerance tier for a given evaluation path."""
    tiers = {
        tier.name: tier
        for tier in (CLOSED_FORM, SPECIAL_FUNCTION, ROOT_FINDING, QUADRATURE)
    }
    if path not in tiers:
        raise ValueError(
            f"Unknown evaluation path: {path!r}. Use one of {sorted(tiers)}."
        )
    return tiers[path]
