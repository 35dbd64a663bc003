"""
astrointerp.iterate - Iteration
=================================

Fixed-point iteration used by the interpolators to locate zeros and extrema,
plus the general iteration helpers of Meeus ch. 5 used by the Kepler
solvers.

``iterate`` never raises: it reports success through a flag and leaves the
choice of error to its caller.  The other helpers raise
``NoConvergenceError`` when their step budget runs out.

Reference
---------
Meeus, J. (1998). *Astronomical Algorithms*, 2nd ed., Willmann-Bell, Ch. 3, 5.
"""

import logging
from typing import Callable, NamedTuple

import numpy as np

from .errors import NoConvergenceError
from .utils import ITERATION_LIMIT, CONVERGENCE_TOLERANCE

logger = logging.getLogger(__name__)


class IterationResult(NamedTuple):
    """Outcome of ``iterate``: final value and whether it converged."""
    value: float
    converged: bool


def _step(f: Callable[[float], float], n0: float) -> float:
    """Apply f once, mapping a division by zero to a non-finite value."""
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        try:
            return f(n0)
        except (ZeroDivisionError, OverflowError):
            return np.inf


# ════════════════════════════════════════════════════════════════════════════
#  Fixed-Point Iteration
# ════════════════════════════════════════════════════════════════════════════

def iterate(n0: float, f: Callable[[float], float]) -> IterationResult:
    """Iterate n ← f(n) from n0 until successive values agree.

    Stops after ``ITERATION_LIMIT`` steps.  Converged when the relative
    change ``|(n1 - n0) / n0|`` drops below ``CONVERGENCE_TOLERANCE`` or the
    value stops changing altogether.  A non-finite step ends the iteration
    at once.

    Returns
    -------
    IterationResult(value, converged); value is 0.0 on failure.
    """
    for _ in range(ITERATION_LIMIT):
        n1 = _step(f, n0)
        if not np.isfinite(n1):
            logger.debug("iteration produced non-finite value from n=%r", n0)
            break
        if n1 == n0 or (n0 != 0 and
                        abs((n1 - n0) / n0) < CONVERGENCE_TOLERANCE):
            return IterationResult(float(n1), True)
        n0 = n1
    else:
        logger.debug("iteration limit %d reached at n=%r",
                     ITERATION_LIMIT, n0)
    return IterationResult(0.0, False)


# ════════════════════════════════════════════════════════════════════════════
#  General Iteration (Meeus ch. 5)
# ════════════════════════════════════════════════════════════════════════════

def decimal_places(better: Callable[[float], float], start: float,
                   places: int, max_iterations: int) -> float:
    """Iterate an improvement function to a fixed number of decimal places.

    Raises
    ------
    NoConvergenceError if ``max_iterations`` steps are not enough.
    """
    d = 10.0 ** -places
    for _ in range(max_iterations):
        n = _step(better, start)
        if not np.isfinite(n):
            break
        if abs(n - start) < d:
            return n
        start = n
    logger.debug("decimal_places: %d iterations exhausted at %r",
                 max_iterations, start)
    raise NoConvergenceError("Maximum iterations reached")


def full_precision(better: Callable[[float], float], start: float,
                   max_iterations: int) -> float:
    """Iterate to (nearly) the full precision of a float64.

    Iterates to 15 significant figures, a couple of bits shy of what a
    float64 can represent, to tolerate floating point jitter.

    Raises
    ------
    NoConvergenceError if ``max_iterations`` steps are not enough.
    """
    for _ in range(max_iterations):
        n = _step(better, start)
        if not np.isfinite(n):
            break
        if n == start or (n != 0 and
                          abs((n - start) / n) < CONVERGENCE_TOLERANCE):
            return n
        start = n
    logger.debug("full_precision: %d iterations exhausted at %r",
                 max_iterations, start)
    raise NoConvergenceError("Maximum iterations reached")


def binary_root(f: Callable[[float], float], lower: float,
                upper: float) -> float:
    """Find a root of f between lower and upper by bisection.

    A root must exist in the interval; otherwise the result is meaningless.
    """
    y_lower = f(lower)
    mid = 0.0
    for _ in range(52):
        mid = (lower + upper) / 2
        y_mid = f(mid)
        if y_mid == 0:
            break
        if (y_lower < 0) == (y_mid < 0):
            lower = mid
            y_lower = y_mid
        else:
            upper = mid
    return mid
