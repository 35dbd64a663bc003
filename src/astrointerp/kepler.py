"""
astrointerp.kepler - Equation of Kepler
=========================================

Solutions of Kepler's equation  M = E − e sin(E)  for the eccentric
anomaly E, by iteration, binary search, and closed-form approximation.
All angles in radians.

The iterative solvers take the number of decimal places wanted in E and
raise ``NoConvergenceError`` when they fail; which one converges depends
on e and M, so callers may fall back from one to another.

Reference
---------
Meeus, J. (1998). *Astronomical Algorithms*, 2nd ed., Willmann-Bell, Ch. 30.
"""

import numpy as np

from .iterate import decimal_places
from .utils import pmod


# ════════════════════════════════════════════════════════════════════════════
#  Anomalies
# ════════════════════════════════════════════════════════════════════════════

def true_anomaly(E: float, e: float) -> float:
    """True anomaly ν [rad] for eccentric anomaly E, (30.1)."""
    return float(2 * np.arctan(np.sqrt((1 + e) / (1 - e)) * np.tan(E * 0.5)))


def radius(E: float, e: float, a: float) -> float:
    """Radius vector for eccentric anomaly E, in the unit of a, (30.2)."""
    return float(a * (1 - e * np.cos(E)))


# ════════════════════════════════════════════════════════════════════════════
#  Kepler Equation
# ════════════════════════════════════════════════════════════════════════════

def kepler1(e: float, m: float, places: int) -> float:
    """Solve Kepler's equation by simple iteration,  E1 = M + e sin(E0).

    Fails to converge for some combinations of e and M.

    Parameters
    ----------
    e : float, eccentricity
    m : float, mean anomaly [rad]
    places : int, decimal places wanted in E

    Returns
    -------
    E : float, eccentric anomaly [rad]
    """
    def f(E0):
        return m + e * np.sin(E0)  # (30.5)
    return float(decimal_places(f, m, places, places * 5))


def kepler2(e: float, m: float, places: int) -> float:
    """Solve Kepler's equation by Newton iteration (30.7).

    Converges over a wider range of inputs than ``kepler1`` but still fails
    for some values of e and M.
    """
    def f(E0):
        return E0 + (m + e * np.sin(E0) - E0) / (1 - e * np.cos(E0))
    return float(decimal_places(f, m, places, places))


def kepler2a(e: float, m: float, places: int) -> float:
    """Newton iteration with the step limited by the method of Leingärtner."""
    def f(E0):
        d = (m + e * np.sin(E0) - E0) / (1 - e * np.cos(E0))
        return E0 + np.arcsin(np.sin(d))
    return float(decimal_places(f, m, places, places * 5))


def kepler2b(e: float, m: float, places: int) -> float:
    """Newton iteration with the step clamped to ±0.5 (method of Steele)."""
    def f(E0):
        d = (m + e * np.sin(E0) - E0) / (1 - e * np.cos(E0))
        return E0 + min(max(d, -0.5), 0.5)
    return float(decimal_places(f, m, places, places))


def kepler3(e: float, m: float) -> float:
    """Solve Kepler's equation by binary search.  Always converges."""
    # adapted from the BASIC program, p. 206
    m = pmod(m, 2 * np.pi)
    sign = 1
    if m > np.pi:
        sign = -1
        m = 2 * np.pi - m
    E0 = np.pi * 0.5
    d = np.pi * 0.25
    for _ in range(53):
        M1 = E0 - e * np.sin(E0)
        if m - M1 < 0:
            E0 -= d
        else:
            E0 += d
        d *= 0.5
    return float(sign * E0)


def kepler4(e: float, m: float) -> float:
    """Approximate solution of Kepler's equation (30.8), valid for small e."""
    return float(np.arctan2(np.sin(m), np.cos(m) - e))
