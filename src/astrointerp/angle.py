"""
astrointerp.angle - Angular Separation
========================================

Angular separation between two bodies, and the minimum separation of two
moving bodies interpolated from short ephemerides.

Functions here work in any spherical frame (equatorial or ecliptic); a
``Coord`` holds a right ascension / declination or longitude / latitude
pair.  All angles are in radians.

Meeus recommends 10 arc minutes as the threshold below which the naive
separation formula should be replaced; see ``utils.SMALL_ANGLE``.

Reference
---------
Meeus, J. (1998). *Astronomical Algorithms*, 2nd ed., Willmann-Bell, Ch. 17.
"""

import logging
from typing import Callable, Sequence

import numpy as np

from .errors import InvalidArityError, NoConvergenceError
from .interpolation import Len3
from .utils import Coord, COS_SMALL_ANGLE

logger = logging.getLogger(__name__)

SepFunction = Callable[[Coord, Coord], float]


# ════════════════════════════════════════════════════════════════════════════
#  Separation
# ════════════════════════════════════════════════════════════════════════════

def sep(c1: Coord, c2: Coord) -> float:
    """Angular separation between two bodies [rad].

    Numerically naive: patched for small separations with (17.2), but
    unstable for separations near π.
    """
    sind1, cosd1 = np.sin(c1.dec), np.cos(c1.dec)
    sind2, cosd2 = np.sin(c2.dec), np.cos(c2.dec)
    cd = sind1 * sind2 + cosd1 * cosd2 * np.cos(c1.ra - c2.ra)  # (17.1)
    if cd < COS_SMALL_ANGLE:
        return float(np.arccos(cd))
    return float(np.hypot((c2.ra - c1.ra) * cosd1, c2.dec - c1.dec))  # (17.2)


def hav(a: float) -> float:
    """Haversine function (17.5)."""
    return 0.5 * (1 - np.cos(a))


def sep_hav(c1: Coord, c2: Coord) -> float:
    """Angular separation [rad] by the haversine formula (17.5)."""
    return float(2 * np.arcsin(np.sqrt(
        hav(c2.dec - c1.dec)
        + np.cos(c1.dec) * np.cos(c2.dec) * hav(c2.ra - c1.ra))))


def sep_pauwels(c1: Coord, c2: Coord) -> float:
    """Angular separation [rad], numerically stable form of ``sep``."""
    sind1, cosd1 = np.sin(c1.dec), np.cos(c1.dec)
    sind2, cosd2 = np.sin(c2.dec), np.cos(c2.dec)
    cosdr = np.cos(c2.ra - c1.ra)
    x = cosd1 * sind2 - sind1 * cosd2 * cosdr
    y = cosd2 * np.sin(c2.ra - c1.ra)
    z = sind1 * sind2 + cosd1 * cosd2 * cosdr
    return float(np.arctan2(np.hypot(x, y), z))


def relative_position(c1: Coord, c2: Coord) -> float:
    """Position angle [rad] of c2 relative to c1, counter-clockwise from north.

    A negative result means p lies in the range 90°..270°.
    """
    sdr, cdr = np.sin(c2.ra - c1.ra), np.cos(c2.ra - c1.ra)
    sind2, cosd2 = np.sin(c2.dec), np.cos(c2.dec)
    return float(np.arctan2(sdr, cosd2 * np.tan(c1.dec) - sind2 * cdr))


# ════════════════════════════════════════════════════════════════════════════
#  Minimum Separation
# ════════════════════════════════════════════════════════════════════════════

def _check_three(cs1: Sequence[Coord], cs2: Sequence[Coord]) -> None:
    if len(cs1) != 3 or len(cs2) != 3:
        raise InvalidArityError("Three rows required in ephemerides")


def min_sep(jd1: float, jd3: float,
            cs1: Sequence[Coord], cs2: Sequence[Coord],
            sep_fn: SepFunction = sep) -> float:
    """Minimum separation [rad] of two moving bodies.

    The motion is given as two ephemerides of three rows equally spaced in
    time; jd1 and jd3 are the times of the first and last rows.  The
    separation is computed at each row and the minimum interpolated.  This
    may be inaccurate for very close approaches; see ``min_sep_rect``.

    Parameters
    ----------
    jd1, jd3 : float, times of the first and last rows
    cs1, cs2 : sequences of 3 ``Coord``, ephemerides of the two bodies
    sep_fn : separation function, ``sep`` by default

    Raises
    ------
    InvalidArityError unless both ephemerides have three rows.
    NoExtremumError / ExtremumOutOfRangeError from the interpolation.
    """
    _check_three(cs1, cs2)
    y = [sep_fn(a, b) for a, b in zip(cs1, cs2)]
    return Len3(jd1, jd3, y).extremum().y


def min_sep_hav(jd1: float, jd3: float,
                cs1: Sequence[Coord], cs2: Sequence[Coord]) -> float:
    """``min_sep`` using the haversine separation."""
    return min_sep(jd1, jd3, cs1, cs2, sep_hav)


def min_sep_pauwels(jd1: float, jd3: float,
                    cs1: Sequence[Coord], cs2: Sequence[Coord]) -> float:
    """``min_sep`` using the Pauwels separation."""
    return min_sep(jd1, jd3, cs1, cs2, sep_pauwels)


def _uv(c1: Coord, c2: Coord) -> tuple[float, float]:
    """Rectangular offsets of c2 from c1 (17.4)."""
    sind1, cosd1 = np.sin(c1.dec), np.cos(c1.dec)
    dr = c2.ra - c1.ra
    tan_dr = np.tan(dr)
    tan_hdr = np.tan(dr / 2)
    K = 1 / (1 + sind1 * sind1 * tan_dr * tan_hdr)
    sin_dd = np.sin(c2.dec - c1.dec)
    u = -K * (1 - (sind1 / cosd1) * sin_dd) * cosd1 * tan_dr
    v = K * (sin_dd + sind1 * cosd1 * tan_dr * tan_hdr)
    return float(u), float(v)


def _rect_step(u: float, v: float, up: float, vp: float) -> float:
    """Newton correction to n for the closest approach (p. 112)."""
    den = up * up + vp * vp
    if den == 0:
        # no relative motion, closest approach undefined
        logger.debug("min_sep_rect: zero relative motion at u=%r v=%r", u, v)
        raise NoConvergenceError("min_sep_rect: failure to converge")
    return -(u * up + v * vp) / den


def min_sep_rect(jd1: float, jd3: float,
                 cs1: Sequence[Coord], cs2: Sequence[Coord]) -> float:
    """Minimum separation [rad] by the method of rectangular coordinates.

    Like ``min_sep`` but accurate even for close approaches.  The
    interpolating factor of closest approach is refined with Newton steps
    until the correction falls below 1e-5.

    Raises
    ------
    InvalidArityError unless both ephemerides have three rows.
    NoConvergenceError if 10 refinement steps are not enough, or if the
    bodies show no relative motion.
    """
    _check_three(cs1, cs2)
    us, vs = zip(*(_uv(a, b) for a, b in zip(cs1, cs2)))
    # tables over n directly; construction cannot fail here
    u3 = Len3(-1, 1, us)
    v3 = Len3(-1, 1, vs)
    up0 = (us[2] - us[0]) / 2
    vp0 = (vs[2] - vs[0]) / 2
    up1 = us[0] + us[2] - 2 * us[1]
    vp1 = vs[0] + vs[2] - 2 * vs[1]
    dn = _rect_step(us[1], vs[1], up0, vp0)
    n = dn
    for _ in range(10):
        u = u3.interpolate_n(n)
        v = v3.interpolate_n(n)
        if abs(dn) < 1e-5:
            return float(np.hypot(u, v))
        up = up0 + n * up1
        vp = vp0 + n * vp1
        dn = _rect_step(u, v, up, vp)
        n += dn
    logger.debug("min_sep_rect: no convergence, last dn=%r", dn)
    raise NoConvergenceError("min_sep_rect: failure to converge")
