"""
astrointerp.interpolation - Tabular Interpolation
===================================================

Interpolation from tables of equidistant x values (``Len3``, ``Len5``) and
from tables of arbitrary, distinct x values (``lagrange``).

Since the x values of a ``Len3`` / ``Len5`` table are equally spaced, only
the first and last are given; the interior x values are implicit.  All y
values are required, and their number is fixed: 3 for ``Len3``, 5 for
``Len5``.

Internally the tables work in terms of the interpolating factor n, the
offset of x from the central row in units of the tabular interval.  For
``Len3`` the table spans n in [-1, 1]; for ``Len5`` it spans [-2, 2].

Meeus notes the importance of choosing the 3 or 5 rows of a larger table
that minimize n, without giving an algorithm for it.
``len3_for_interpolate_x`` is one such selection, useful for long
equidistant tables such as Delta T.

Reference
---------
Meeus, J. (1998). *Astronomical Algorithms*, 2nd ed., Willmann-Bell, Ch. 3.
"""

import logging
from dataclasses import dataclass, field
from typing import NamedTuple

import numpy as np
from numpy.typing import NDArray

from .errors import (
    InvalidArityError, DegenerateRangeError, OutOfRangeError,
    NoExtremumError, ExtremumOutOfRangeError, ZeroOutOfRangeError,
    NoConvergenceError, DuplicateAbscissaError,
)
from .iterate import iterate
from .utils import horner

logger = logging.getLogger(__name__)


class Extremum(NamedTuple):
    """Location of an extremum of the interpolating polynomial."""
    x: float
    y: float


def _as_row(y, size: int) -> tuple:
    """Validate a y column of exactly `size` values, return it as floats."""
    arr = np.asarray(y, dtype=np.float64)
    if arr.shape != (size,):
        raise InvalidArityError(f"Argument y must be length {size}")
    return tuple(float(v) for v in arr)


# ════════════════════════════════════════════════════════════════════════════
#  Three-Row Tables
# ════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Len3:
    """Second-difference interpolation over a table of three rows.

    Parameters
    ----------
    x1 : float, x value of the first row
    x3 : float, x value of the last row (must differ from x1)
    y : sequence of 3 floats, the y column

    Raises
    ------
    InvalidArityError if y does not hold exactly three values.
    DegenerateRangeError if x3 == x1.
    """
    x1: float
    x3: float
    y: tuple
    # differences (3.1) p. 23
    a: float = field(init=False, repr=False)
    b: float = field(init=False, repr=False)
    c: float = field(init=False, repr=False)
    ab_sum: float = field(init=False, repr=False)
    x_sum: float = field(init=False, repr=False)
    x_diff: float = field(init=False, repr=False)

    def __post_init__(self):
        y = _as_row(self.y, 3)
        if self.x3 == self.x1:
            raise DegenerateRangeError("Argument x3 cannot equal x1")
        a = y[1] - y[0]
        b = y[2] - y[1]
        _set = object.__setattr__
        _set(self, "y", y)
        _set(self, "a", a)
        _set(self, "b", b)
        _set(self, "c", b - a)
        _set(self, "ab_sum", a + b)
        _set(self, "x_sum", self.x3 + self.x1)
        _set(self, "x_diff", self.x3 - self.x1)

    def _n_of_x(self, x: float) -> float:
        return (2 * x - self.x_sum) / self.x_diff

    def _x_of_n(self, n: float) -> float:
        return 0.5 * (self.x_sum + self.x_diff * n)

    def interpolate_x(self, x: float) -> float:
        """Interpolate for x.  Extrapolates outside x1..x3."""
        return self.interpolate_n(self._n_of_x(x))

    def interpolate_x_strict(self, x: float) -> float:
        """Interpolate for x, restricted to the range x1..x3."""
        return self.interpolate_n_strict(self._n_of_x(x))

    def interpolate_n(self, n: float) -> float:
        """Interpolate for the interpolating factor n, formula (3.3)."""
        return self.y[1] + n * 0.5 * (self.ab_sum + n * self.c)

    def interpolate_n_strict(self, n: float) -> float:
        """Interpolate for n, restricted to [-1, 1].

        Raises
        ------
        OutOfRangeError if n lies outside [-1, 1].
        """
        if n < -1 or n > 1:
            raise OutOfRangeError()
        return self.interpolate_n(n)

    def extremum(self) -> Extremum:
        """Return x and y of the extremum of the table, (3.4) and (3.5).

        Raises
        ------
        NoExtremumError if the three points lie on a line.
        ExtremumOutOfRangeError if the extremum is outside x1..x3.
        """
        if self.c == 0:
            raise NoExtremumError()
        n = self.ab_sum / (-2 * self.c)
        if n < -1 or n > 1:
            raise ExtremumOutOfRangeError()
        y = self.y[1] - (self.ab_sum * self.ab_sum) / (8 * self.c)
        return Extremum(self._x_of_n(n), y)

    def zero(self, strong: bool = False) -> float:
        """Find the x value for which the interpolated y is zero.

        ``strong=False`` iterates the quick estimate (3.6), which works well
        for gentle curves but can fail on sharply curved tables.
        ``strong=True`` iterates the Newton-like estimate (3.7), somewhat
        more expensive per step but more reliable when the curve changes
        quickly.

        Raises
        ------
        NoConvergenceError if the iteration does not settle.
        ZeroOutOfRangeError if the zero is outside x1..x3.
        """
        y2, ab_sum, c = self.y[1], self.ab_sum, self.c
        if strong:
            def f(n0):
                return n0 - (2 * y2 + n0 * (ab_sum + c * n0)) / \
                    (ab_sum + 2 * c * n0)
        else:
            def f(n0):
                return -2 * y2 / (ab_sum + c * n0)
        n0, ok = iterate(0.0, f)
        if not ok:
            logger.debug("Len3.zero(strong=%s) failed for y=%r", strong, self.y)
            raise NoConvergenceError()
        if n0 > 1 or n0 < -1:
            raise ZeroOutOfRangeError()
        return self._x_of_n(n0)


def len3_for_interpolate_x(x: float, x1: float, xn: float, y) -> Len3:
    """Build a ``Len3`` on the three rows of a longer table nearest to x.

    Parameters
    ----------
    x : float, the interpolation target
    x1 : float, x value of the first row of the table
    xn : float, x value of the last row of the table
    y : sequence of float, the whole y column (3 or more values)

    Returns
    -------
    Len3 over the rows centered as close as possible to x.
    """
    y = np.asarray(y, dtype=np.float64)
    if y.ndim == 1 and y.size > 3:
        interval = (xn - x1) / (y.size - 1)
        if interval == 0:
            raise DegenerateRangeError("Argument xn cannot equal x1")
        nearest = int((x - x1) / interval + 0.5)
        nearest = min(max(nearest, 1), y.size - 2)
        xn = x1 + (nearest + 1) * interval
        x1 = x1 + (nearest - 1) * interval
        y = y[nearest - 1:nearest + 2]
    return Len3(x1, xn, y)


def len4_half(y) -> float:
    """Interpolate the center value of a four-row table, formula (3.12)."""
    y = _as_row(y, 4)
    return (9 * (y[1] + y[2]) - y[0] - y[3]) / 16


# ════════════════════════════════════════════════════════════════════════════
#  Five-Row Tables
# ════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Len5:
    """Fourth-difference interpolation over a table of five rows.

    Parameters
    ----------
    x1 : float, x value of the first row
    x5 : float, x value of the last row (must differ from x1)
    y : sequence of 5 floats, the y column

    The interpolating polynomial (3.8) is held as ascending coefficients in
    ``interp_coeff``.
    """
    x1: float
    x5: float
    y: tuple
    # first differences
    a: float = field(init=False, repr=False)
    b: float = field(init=False, repr=False)
    c: float = field(init=False, repr=False)
    d: float = field(init=False, repr=False)
    # second
    e: float = field(init=False, repr=False)
    f: float = field(init=False, repr=False)
    g: float = field(init=False, repr=False)
    # third
    h: float = field(init=False, repr=False)
    j: float = field(init=False, repr=False)
    # fourth
    k: float = field(init=False, repr=False)
    x_sum: float = field(init=False, repr=False)
    x_diff: float = field(init=False, repr=False)
    interp_coeff: tuple = field(init=False, repr=False)

    def __post_init__(self):
        y = _as_row(self.y, 5)
        if self.x5 == self.x1:
            raise DegenerateRangeError("Argument x5 cannot equal x1")
        a, b, c, d = (y[i + 1] - y[i] for i in range(4))
        e, f, g = b - a, c - b, d - c
        h, j = f - e, g - f
        k = j - h
        _set = object.__setattr__
        _set(self, "y", y)
        for name, value in zip("abcdefghjk", (a, b, c, d, e, f, g, h, j, k)):
            _set(self, name, value)
        _set(self, "x_sum", self.x5 + self.x1)
        _set(self, "x_diff", self.x5 - self.x1)
        # (3.8) p. 28
        _set(self, "interp_coeff", (
            y[2],
            (b + c) / 2 - (h + j) / 12,
            f / 2 - k / 24,
            (h + j) / 12,
            k / 24,
        ))

    def _n_of_x(self, x: float) -> float:
        return (4 * x - 2 * self.x_sum) / self.x_diff

    def _x_of_n(self, n: float) -> float:
        return 0.5 * self.x_sum + 0.25 * self.x_diff * n

    def interpolate_x(self, x: float) -> float:
        """Interpolate for x.  Extrapolates outside x1..x5."""
        return self.interpolate_n(self._n_of_x(x))

    def interpolate_x_strict(self, x: float) -> float:
        """Interpolate for x, restricted to the central half of the table."""
        return self.interpolate_n_strict(self._n_of_x(x))

    def interpolate_n(self, n: float) -> float:
        """Interpolate for the interpolating factor n (x - x3 in intervals)."""
        return horner(n, self.interp_coeff)

    def interpolate_n_strict(self, n: float) -> float:
        """Interpolate for n, restricted to [-1, 1].

        This is half the span of the table, the recommendation on p. 31.

        Raises
        ------
        OutOfRangeError if n lies outside [-1, 1].
        """
        if n < -1 or n > 1:
            raise OutOfRangeError()
        return horner(n, self.interp_coeff)

    def extremum(self) -> Extremum:
        """Return x and y of the extremum of the table, by iterating (3.9).

        The result may lie anywhere in x1..x5.

        Raises
        ------
        ExtremumOutOfRangeError if there is no usable extremum in x1..x5.
        NoConvergenceError if the iteration does not settle.
        """
        n_coeff = (
            6 * (self.b + self.c) - self.h - self.j,
            0.0,
            3 * (self.h + self.j),
            2 * self.k,
        )
        den = self.k - 12 * self.f
        if den == 0:
            raise ExtremumOutOfRangeError()
        n0, ok = iterate(0.0, lambda n: horner(n, n_coeff) / den)
        if not ok:
            logger.debug("Len5.extremum failed for y=%r", self.y)
            raise NoConvergenceError()
        if n0 < -2 or n0 > 2:
            raise ExtremumOutOfRangeError()
        return Extremum(self._x_of_n(n0), horner(n0, self.interp_coeff))

    def zero(self, strong: bool = False) -> float:
        """Find the x value for which the interpolated y is zero.

        ``strong=False`` iterates the quick estimate (3.10);
        ``strong=True`` iterates the Newton form (3.11), which converges
        more reliably on quickly changing curves.  See ``Len3.zero``.

        Raises
        ------
        NoConvergenceError if the iteration does not settle.
        ZeroOutOfRangeError if the zero is outside x1..x5.
        """
        if strong:
            M = self.k / 24
            N = (self.h + self.j) / 12
            P = self.f / 2 - M
            Q = (self.b + self.c) / 2 - N
            num_coeff = (self.y[2], Q, P, N, M)
            den_coeff = (Q, 2 * P, 3 * N, 4 * M)

            def f(n0):
                return n0 - horner(n0, num_coeff) / horner(n0, den_coeff)
        else:
            num_coeff = (
                -24 * self.y[2],
                0.0,
                self.k - 12 * self.f,
                -2 * (self.h + self.j),
                -self.k,
            )
            den = 12 * (self.b + self.c) - 2 * (self.h + self.j)

            def f(n0):
                return horner(n0, num_coeff) / den
        n0, ok = iterate(0.0, f)
        if not ok:
            logger.debug("Len5.zero(strong=%s) failed for y=%r", strong, self.y)
            raise NoConvergenceError()
        if n0 > 2 or n0 < -2:
            raise ZeroOutOfRangeError()
        return self._x_of_n(n0)


# ════════════════════════════════════════════════════════════════════════════
#  Unequally Spaced Tables
# ════════════════════════════════════════════════════════════════════════════

def _as_table(table) -> NDArray:
    """Validate an (N, 2) table of distinct x values."""
    t = np.asarray(table, dtype=np.float64)
    if t.size == 0:
        return t.reshape(0, 2)
    if t.ndim != 2 or t.shape[1] != 2:
        raise InvalidArityError(
            f"Table rows must be (x, y) pairs, got shape {t.shape}")
    if np.unique(t[:, 0]).size != t.shape[0]:
        raise DuplicateAbscissaError()
    return t


def lagrange(x: float, table) -> float:
    """Interpolate y at x by the formula of Lagrange.

    Table x values need not be equally spaced or even in order, but they
    must be distinct.

    Parameters
    ----------
    x : float
    table : (N, 2) array-like of (x, y) rows

    Raises
    ------
    DuplicateAbscissaError if two rows share an x value.
    """
    t = _as_table(table)
    total = 0.0
    # method of the BASIC program, p. 33
    for i, (xi, yi) in enumerate(t):
        prod = 1.0
        for j, xj in enumerate(t[:, 0]):
            if i != j:
                prod *= (x - xj) / (xi - xj)
        total += yi * prod
    return float(total)


def lagrange_poly(table) -> NDArray:
    """Coefficients of the Lagrange interpolating polynomial.

    The polynomial has degree N-1 for N rows, coefficients in ascending
    powers, ready for ``horner``.  Built by expanding each Lagrange basis
    product term by term; numerically sensitive, so keep tables small.

    Raises
    ------
    DuplicateAbscissaError if two rows share an x value.
    """
    t = _as_table(table)
    size = t.shape[0]
    total = np.zeros(size)
    prod = np.zeros(size)
    last = size - 1
    for i, (xi, yi) in enumerate(t):
        prod[last] = 1.0
        den = 1.0
        n = last
        for j, xj in enumerate(t[:, 0]):
            if i == j:
                continue
            prod[n - 1] = prod[n] * -xj
            for k in range(n, last):
                prod[k] -= prod[k + 1] * xj
            n -= 1
            den *= xi - xj
        total += yi * prod / den
    return total


def linear(x: float, x1: float, xn: float, y) -> float:
    """Linear interpolation in an equally spaced table.

    Uses the segment containing x; beyond the ends of the table the first
    or last segment is extended.
    """
    y = np.asarray(y, dtype=np.float64)
    if y.ndim != 1 or y.size < 2:
        raise InvalidArityError("Argument y must hold at least 2 values")
    interval = (xn - x1) / (y.size - 1)
    if interval == 0:
        raise DegenerateRangeError("Argument xn cannot equal x1")
    nearest = int(np.floor((x - x1) / interval))
    nearest = min(max(nearest, 0), y.size - 2)
    x0 = x1 + nearest * interval
    y0, y1 = y[nearest], y[nearest + 1]
    return float(y0 + (y1 - y0) * (x - x0) / interval)
