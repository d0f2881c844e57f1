"""
Shared compute infrastructure for PyDistributions.

This module provides the numeric infrastructure shared by all distributions:
accuracy defaults, tolerance tiers and the root finding used to invert
cumulative distribution functions without a closed form.

IMPORTANT: This is NOT where distribution formulas live. Those go in
pydistributions.distributions.

Submodules:
    tolerances: Accuracy defaults and tolerance tiers
    solvers: Brent root finding and quantile bracketing
"""

from pydistributions.core.compute.solvers import brent_root, bracket_quantile
from pydistributions.core.compute.tolerances import ToleranceTier, select_tolerance

__all__ = [
    # Root finding
    "brent_root",
    "bracket_quantile",
    # Tolerances
    "ToleranceTier",
    "select_tolerance",
]
