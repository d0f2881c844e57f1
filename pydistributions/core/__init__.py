"""
Core infrastructure for PyDistributions.

This module provides shared abstractions and utilities used by the
special functions and the distributions.

Key components:
    protocols: RootFinder protocol
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Accuracy defaults, tolerance tiers, root finding
"""

from pydistributions.core.protocols import RootFinder
from pydistributions.core.exceptions import (
    PyDistributionsError,
    ValidationError,
    OutOfRangeError,
    NumericalError,
    ConvergenceError,
)

__all__ = [
    # Protocols
    "RootFinder",
    # Exceptions
    "PyDistributionsError",
    "ValidationError",
    "OutOfRangeError",
    "NumericalError",
    "ConvergenceError",
]
