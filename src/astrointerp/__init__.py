"""
astrointerp - Tabular Interpolation for Positional Astronomy
==============================================================

A pure-NumPy implementation of the interpolation and iteration algorithms
of Jean Meeus, *Astronomical Algorithms*, together with the routines that
lean on them hardest: conjunctions, minimum angular separation, and the
equation of Kepler.

Interpolation
-------------

**Len3 / Len5** (equally spaced tables of 3 or 5 rows)
  - Only the first and last x are given; interior x values are implicit.
  - Work internally with the interpolating factor n = (x − x_center) / Δx.
  - ``interpolate_x`` / ``interpolate_n`` extrapolate freely; the
    ``*_strict`` forms reject n outside [-1, 1].
  - ``extremum`` and ``zero`` locate the vertex and root of the fitted
    polynomial, iterating where no closed form exists.

**lagrange / lagrange_poly** (unequally spaced tables)
  - x values in any order, but distinct.

Iteration
---------
``iterate`` is the bounded fixed-point solver behind ``zero`` and
``extremum``: 50 steps at most, converged at a relative change of 1e-15,
reporting failure with a flag rather than an exception.

Errors
------
Every failure is a subclass of ``InterpolationError`` (a ``ValueError``),
raised where it is detected and never retried internally.
"""

from .errors import (
    InterpolationError,
    InvalidArityError,
    DegenerateRangeError,
    OutOfRangeError,
    NoExtremumError,
    ExtremumOutOfRangeError,
    ZeroOutOfRangeError,
    NoConvergenceError,
    DuplicateAbscissaError,
)

from .interpolation import (
    Len3, Len5, Extremum,
    len3_for_interpolate_x,
    len4_half,
    lagrange,
    lagrange_poly,
    linear,
)

from .iterate import (
    iterate,
    IterationResult,
    decimal_places,
    full_precision,
    binary_root,
)

from .angle import (
    sep, sep_hav, sep_pauwels, hav,
    min_sep, min_sep_hav, min_sep_pauwels, min_sep_rect,
    relative_position,
)

from .conjunction import planetary, stellar, Conjunction

from .kepler import (
    kepler1, kepler2, kepler2a, kepler2b, kepler3, kepler4,
    true_anomaly, radius,
)

from .utils import (
    Coord,
    horner,
    pmod,
    dms_to_deg, dms_to_rad, hms_to_rad, rad_to_dms, rad_to_hms,
    julian_date,
    ITERATION_LIMIT,
    CONVERGENCE_TOLERANCE,
    SMALL_ANGLE,
    J2000,
    JULIAN_YEAR,
    JULIAN_CENTURY,
)

__version__ = "1.0.0"
__all__ = [
    # ── Constants ──
    "ITERATION_LIMIT", "CONVERGENCE_TOLERANCE", "SMALL_ANGLE",
    "J2000", "JULIAN_YEAR", "JULIAN_CENTURY",
    # ── Errors ──
    "InterpolationError", "InvalidArityError", "DegenerateRangeError",
    "OutOfRangeError", "NoExtremumError", "ExtremumOutOfRangeError",
    "ZeroOutOfRangeError", "NoConvergenceError", "DuplicateAbscissaError",
    # ── Interpolation ──
    "Len3", "Len5", "Extremum",
    "len3_for_interpolate_x", "len4_half",
    "lagrange", "lagrange_poly", "linear",
    # ── Iteration ──
    "iterate", "IterationResult",
    "decimal_places", "full_precision", "binary_root",
    # ── Angular separation ──
    "sep", "sep_hav", "sep_pauwels", "hav",
    "min_sep", "min_sep_hav", "min_sep_pauwels", "min_sep_rect",
    "relative_position",
    # ── Conjunctions ──
    "planetary", "stellar", "Conjunction",
    # ── Kepler ──
    "kepler1", "kepler2", "kepler2a", "kepler2b", "kepler3", "kepler4",
    "true_anomaly", "radius",
    # ── Utilities ──
    "Coord", "horner", "pmod",
    "dms_to_deg", "dms_to_rad", "hms_to_rad", "rad_to_dms", "rad_to_hms",
    "julian_date",
]
