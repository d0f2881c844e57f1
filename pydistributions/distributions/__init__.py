"""
Continuous univariate distributions.

Every distribution implements the ContinuousDistribution contract:
density, cumulative_probability, inverse_cumulative_probability,
mean, variance and the support description.

Public API:
    GumbelDistribution(mu, beta)          - Type I extreme value
    LaplaceDistribution(mu, beta)         - Double exponential
    LogisticDistribution(mu, b)           - Logistic
    NakagamiDistribution(m, omega)        - Nakagami-m
    ContinuousDistribution                - Abstract base class
    Support                               - Support bounds record
"""

from pydistributions.distributions.base import ContinuousDistribution, Support
from pydistributions.distributions.gumbel import GumbelDistribution
from pydistributions.distributions.laplace import LaplaceDistribution
from pydistributions.distributions.logistic import LogisticDistribution
from pydistributions.distributions.nakagami import NakagamiDistribution

__all__ = [
    "ContinuousDistribution",
    "Support",
    "GumbelDistribution",
    "LaplaceDistribution",
    "LogisticDistribution",
    "NakagamiDistribution",
]
