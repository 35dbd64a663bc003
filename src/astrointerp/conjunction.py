"""
astrointerp.conjunction - Planetary Conjunctions
==================================================

Time of conjunction in right ascension (or longitude) of two bodies,
found by fourth-difference interpolation of five-row ephemerides.

The time scale of t1, t5 is arbitrary (day of month is enough); the
result comes back in the same scale.  Ephemerides may be equatorial or
ecliptic, as long as both bodies use the same frame.

Reference
---------
Meeus, J. (1998). *Astronomical Algorithms*, 2nd ed., Willmann-Bell, Ch. 18.
"""

from typing import NamedTuple, Sequence

from .errors import InvalidArityError
from .interpolation import Len5
from .utils import Coord


class Conjunction(NamedTuple):
    """Result of a conjunction search.

    t : float, time of conjunction in the scale of t1, t5
    dd : float, amount [rad] by which body 2 is north of body 1 at t
    """
    t: float
    dd: float


def _conj(t1: float, t5: float, dr, dd) -> Conjunction:
    t = Len5(t1, t5, dr).zero(strong=True)
    return Conjunction(t, Len5(t1, t5, dd).interpolate_x_strict(t))


def planetary(t1: float, t5: float,
              cs1: Sequence[Coord], cs2: Sequence[Coord]) -> Conjunction:
    """Conjunction between two moving bodies, such as planets.

    Parameters
    ----------
    t1, t5 : float, times of the first and last ephemeris rows
    cs1 : sequence of 5 ``Coord``, ephemeris of the first body
    cs2 : sequence of 5 ``Coord``, ephemeris of the second body

    Raises
    ------
    InvalidArityError unless both ephemerides have five rows.
    Any interpolation error, meaning no conjunction in the window.
    """
    if len(cs1) != 5 or len(cs2) != 5:
        raise InvalidArityError("Five rows required in ephemerides")
    dr = [b.ra - a.ra for a, b in zip(cs1, cs2)]
    dd = [b.dec - a.dec for a, b in zip(cs1, cs2)]
    return _conj(t1, t5, dr, dd)


def stellar(t1: float, t5: float,
            c1: Coord, cs2: Sequence[Coord]) -> Conjunction:
    """Conjunction between a fixed body c1 and a moving body cs2.

    Arguments and result as for ``planetary``.
    """
    if len(cs2) != 5:
        raise InvalidArityError("Five rows required in ephemerides")
    dr = [b.ra - c1.ra for b in cs2]
    dd = [b.dec - c1.dec for b in cs2]
    return _conj(t1, t5, dr, dd)
