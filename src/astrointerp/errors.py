"""
astrointerp.errors - Error Kinds
==================================

One exception class per failure condition.  All derive from
``InterpolationError``, itself a ``ValueError``, so callers can catch a
specific kind or the whole family.
"""


class InterpolationError(ValueError):
    """Base class for every error raised by this package."""
    default_message = "Interpolation failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class InvalidArityError(InterpolationError):
    default_message = "Sample table has the wrong number of rows"


class DegenerateRangeError(InterpolationError):
    default_message = "Last x of the table cannot equal the first x"


class OutOfRangeError(InterpolationError):
    default_message = "Interpolating factor n must be in range -1 to 1"


class NoExtremumError(InterpolationError):
    default_message = "No extremum in table"


class ExtremumOutOfRangeError(InterpolationError):
    default_message = "Extremum falls outside of table"


class ZeroOutOfRangeError(InterpolationError):
    default_message = "Zero falls outside of table"


class NoConvergenceError(InterpolationError):
    default_message = "Failure to converge"


class DuplicateAbscissaError(InterpolationError):
    default_message = "Table x values must be distinct"
