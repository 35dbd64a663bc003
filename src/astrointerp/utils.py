"""
astrointerp.utils - Foundational Utilities
============================================

Numeric policy constants, polynomial evaluation, sexagesimal angle helpers
and the Julian Date conversion shared by every other module.
"""

from dataclasses import dataclass

import numpy as np

# ── Numeric Policy ──────────────────────────────────────────────────────────
ITERATION_LIMIT = 50            # fixed-point step budget
CONVERGENCE_TOLERANCE = 1e-15   # relative step size at convergence

# ── Astronomical Constants ──────────────────────────────────────────────────
J2000 = 2_451_545.0             # Julian Date of epoch J2000.0
JULIAN_YEAR = 365.25            # [days]
JULIAN_CENTURY = 36_525.0       # [days]

# Threshold below which the naive separation formula loses precision
SMALL_ANGLE = np.deg2rad(10.0 / 60.0)
COS_SMALL_ANGLE = float(np.cos(SMALL_ANGLE))


@dataclass(frozen=True)
class Coord:
    """A pair of spherical coordinates [rad].

    Either right ascension / declination or ecliptic longitude / latitude;
    nothing here assumes a particular frame.
    """
    ra: float
    dec: float


# ── Polynomials ─────────────────────────────────────────────────────────────

def horner(x: float, coeffs) -> float:
    """Evaluate a polynomial at x by Horner's method.

    Parameters
    ----------
    x : float
    coeffs : sequence of float, ascending powers (coeffs[0] is the constant)

    Returns
    -------
    y : float
    """
    c = np.asarray(coeffs, dtype=np.float64)
    if c.size == 0:
        return 0.0
    y = c[-1]
    for ci in c[-2::-1]:
        y = y * x + ci
    return float(y)


def pmod(x: float, y: float) -> float:
    """Modulo with a result in [0, y) for positive y."""
    r = x % y
    if r < 0:
        r += y
    return r


# ── Sexagesimal Angles ──────────────────────────────────────────────────────

def dms_to_deg(neg: bool, d: float, m: float, s: float) -> float:
    """Degrees, minutes, seconds to decimal degrees.  `neg` applies the sign."""
    deg = (d * 60 + m) * 60 + s
    deg /= 3600
    return -deg if neg else deg


def dms_to_rad(neg: bool, d: float, m: float, s: float) -> float:
    """Degrees, minutes, seconds of arc to radians."""
    return float(np.deg2rad(dms_to_deg(neg, d, m, s)))


def hms_to_rad(h: float, m: float, s: float) -> float:
    """Hours, minutes, seconds of right ascension to radians."""
    return float(np.deg2rad(dms_to_deg(False, h, m, s) * 15.0))


def rad_to_dms(angle: float) -> tuple[bool, int, int, float]:
    """Split an angle [rad] into (neg, degrees, minutes, seconds)."""
    deg = float(np.rad2deg(angle))
    neg = deg < 0
    s = abs(deg) * 3600.0
    d, s = divmod(s, 3600.0)
    m, s = divmod(s, 60.0)
    return neg, int(d), int(m), s


def rad_to_hms(angle: float) -> tuple[int, int, float]:
    """Split a right ascension [rad] into (hours, minutes, seconds)."""
    s = pmod(float(np.rad2deg(angle)), 360.0) / 15.0 * 3600.0
    h, s = divmod(s, 3600.0)
    m, s = divmod(s, 60.0)
    return int(h), int(m), s


# ── Time Utilities ──────────────────────────────────────────────────────────

def julian_date(year: int, month: int, day: float,
                hour: float = 0.0, minute: float = 0.0,
                second: float = 0.0) -> float:
    """Compute Julian Date from a Gregorian calendar date.

    `day` may carry a fractional part.
    """
    if month <= 2:
        year -= 1
        month += 12
    A = int(year / 100)
    B = 2 - A + int(A / 4)
    JD = (int(365.25 * (year + 4716))
          + int(30.6001 * (month + 1))
          + day + B - 1524.5)
    JD += (hour + minute / 60.0 + second / 3600.0) / 24.0
    return JD
