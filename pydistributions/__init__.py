"""
PyDistributions: continuous univariate probability distributions for Python.

Closed-form and semi-analytic density, distribution, quantile and moment
evaluation for simulation, hypothesis testing and Monte Carlo sampling.

Submodules:
    distributions: Gumbel, Laplace, Logistic and Nakagami distributions
    special: Regularized incomplete gamma functions
    core: Exceptions, validation, root finding
"""

__version__ = "0.1.0"

from pydistributions import distributions
from pydistributions import special
from pydistributions.distributions import (
    ContinuousDistribution,
    Support,
    GumbelDistribution,
    LaplaceDistribution,
    LogisticDistribution,
    NakagamiDistribution,
)

__all__ = [
    "__version__",
    "distributions",
    "special",
    "ContinuousDistribution",
    "Support",
    "GumbelDistribution",
    "LaplaceDistribution",
    "LogisticDistribution",
    "NakagamiDistribution",
]
