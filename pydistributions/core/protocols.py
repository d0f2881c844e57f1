"""
Core protocols for PyDistributions.

These define structural interfaces that pluggable collaborators must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so that
any plain function with the right signature can be injected.

Design Principles:
    - Minimal contracts: prescribe only what's truly universal
    - Collaborators are stateless callables
"""

from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class RootFinder(Protocol):
    """
    Protocol for bracketing root finders.

    A root finder consumes a continuous function whose values at the two
    bracket ends have opposite signs (or one of them is zero) and returns
    an abscissa within the requested absolute accuracy of a root.

    ContinuousDistribution uses this to invert cumulative distribution
    functions that have no closed form. The default implementation is
    pydistributions.core.compute.solvers.brent_root.
    """

    def __call__(
        self,
        function: Callable[[float], float],
        lower: float,
        upper: float,
        *,
        absolute_accuracy: float,
        relative_accuracy: float,
        max_iterations: int,
    ) -> float:
        """
        Locate a root of function in [lower, upper].

        Args:
            function: Continuous scalar function
            lower: Left end of the bracket
            upper: Right end of the bracket
            absolute_accuracy: Absolute tolerance on the returned root
            relative_accuracy: Relative tolerance on the returned root
            max_iterations: Iteration limit

        Returns:
            Approximate root

        Raises:
            ConvergenceError: If no root is found within max_iterations, or
                the bracket does not straddle a sign change
        """
        ...
