"""
Exception hierarchy for PyDistributions.

All exceptions inherit from PyDistributionsError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyDistributionsError(Exception):
    """Base exception for all PyDistributions errors."""
    pass


class ValidationError(PyDistributionsError):
    """
    Input validation failed.

    Raised when a distribution parameter or call argument is outside
    its admissible domain. Distributions raise this from construction,
    so an instance is never partially built.
    """
    pass


class OutOfRangeError(ValidationError):
    """
    Value lies outside a closed interval.

    Raised by inverse_cumulative_probability() when the requested
    probability is not in [0, 1].

    Attributes:
        value: The offending value
        lower: Lower end of the valid interval
        upper: Upper end of the valid interval
    """

    def __init__(
        self,
        message: str,
        value: float,
        lower: float,
        upper: float
    ):
        super().__init__(message)
        self.value = value
        self.lower = lower
        self.upper = upper


class NumericalError(PyDistributionsError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation,
    including special functions evaluated outside their domain.
    """
    pass


class ConvergenceError(PyDistributionsError):
    """
    Iterative algorithm failed to converge.

    Raised when a series, continued fraction or root finder fails to meet
    its convergence criterion within the maximum number of iterations.

    Attributes:
        iterations: Number of iterations completed
        final_change: Final term size or bracket width
        reason: Why convergence failed (e.g., 'max_iterations', 'no_sign_change')
        threshold: The convergence threshold that was not met
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        final_change: float | None = None,
        reason: str | None = None,
        threshold: float | None = None
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_change = final_change
        self.reason = reason
        self.threshold = threshold
