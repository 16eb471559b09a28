"""Linear and cubic splines through a set of points."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass, field

from ichigo.geom.floats import Float2


class SplineError(ValueError):
    """Raised when a spline cannot be prepared from its points."""


def _sorted_points(points: list[Float2]) -> list[Float2]:
    """Sort points by X, rejecting an empty list and repeated X values."""
    if not points:
        raise SplineError("spline needs at least 1 point")
    ordered = sorted(points, key=lambda p: p.x)
    for p, q in zip(ordered, ordered[1:]):
        if p.x == q.x:
            raise SplineError(f"spline value defined twice [{p}, {q}]")
    return ordered


@dataclass
class LinearSpline:
    """A piecewise-linear spline; extrapolates from the end segments."""

    points: list[Float2] = field(default_factory=list)

    _deriv: list[float] = field(default_factory=list, init=False, repr=False)
    _xs: list[float] = field(default_factory=list, init=False, repr=False)

    def prepare(self) -> None:
        """Sort the points and compute segment slopes."""
        self.points = _sorted_points(self.points)
        self._xs = [p.x for p in self.points]
        self._deriv = [
            (q.y - p.y) / (q.x - p.x) for p, q in zip(self.points, self.points[1:])
        ]

    def interpolate(self, x: float) -> float:
        """Return y where (x, y) lies on the spline."""
        pts = self.points
        n = len(pts)
        if n == 1:
            return pts[0].y
        if x < pts[1].x:
            return pts[0].y + (x - pts[0].x) * self._deriv[0]
        if x > pts[n - 2].x:
            return pts[n - 1].y + (x - pts[n - 1].x) * self._deriv[n - 2]
        i = bisect_left(self._xs, x)
        if x == pts[i].x:
            return pts[i].y
        return pts[i - 1].y + (x - pts[i - 1].x) * self._deriv[i - 1]


@dataclass
class CubicSpline:
    """A cubic spline with continuous first and second derivatives.

    Without fixed slopes it is a natural cubic spline and prepare() sets
    preslope and postslope; with them set, prepare() reads those slopes to
    determine the end moments.
    """

    points: list[Float2] = field(default_factory=list)
    fixed_preslope: bool = False
    fixed_postslope: bool = False
    preslope: float = 0.0
    postslope: float = 0.0

    _m: list[float] = field(default_factory=list, init=False, repr=False)
    _h: list[float] = field(default_factory=list, init=False, repr=False)
    _xs: list[float] = field(default_factory=list, init=False, repr=False)

    def prepare(self) -> None:
        """Sort the points and solve for the moments (Thomas algorithm)."""
        self.points = _sorted_points(self.points)
        pts = self.points
        self._xs = [p.x for p in pts]
        n = len(pts)
        if n == 1:
            return
        h = [q.x - p.x for p, q in zip(pts, pts[1:])]
        m = [0.0] * n
        diag = [0.0] * n
        upper = [0.0] * n
        rhs = [0.0] * n

        if self.fixed_preslope:
            diag[0] = 2.0 * h[0]
            upper[0] = h[0]
            rhs[0] = (pts[1].y - pts[0].y) / h[0] - self.preslope
        for i in range(1, n - 1):
            diag[i] = 2.0 * (h[i - 1] + h[i])
            upper[i] = h[i]
            rhs[i] = (pts[i + 1].y - pts[i].y) / h[i] - (pts[i].y - pts[i - 1].y) / h[i - 1]
        if self.fixed_postslope:
            diag[n - 1] = 2.0 * h[n - 2]
            upper[n - 1] = h[n - 2]
            rhs[n - 1] = self.postslope - (pts[n - 1].y - pts[n - 2].y) / h[n - 2]

        # Forward elimination.
        if self.fixed_preslope:
            diag[1] -= 0.5 * upper[0]
            rhs[1] -= 0.5 * rhs[0]
        for i in range(2, n - 1):
            t = h[i - 1] / diag[i - 1]
            diag[i] -= t * upper[i - 1]
            rhs[i] -= t * rhs[i - 1]
        if self.fixed_postslope:
            t = h[n - 2] / diag[n - 2]
            diag[n - 1] -= t * upper[n - 2]
            rhs[n - 1] -= t * rhs[n - 2]

        # Back substitution.
        if self.fixed_postslope:
            m[n - 1] = rhs[n - 1] / diag[n - 1]
        for i in range(n - 2, 0, -1):
            m[i] = (rhs[i] - h[i] * m[i + 1]) / diag[i]
        if self.fixed_preslope:
            m[0] = (rhs[0] - h[0] * m[1]) / diag[0]

        if not self.fixed_preslope:
            self.preslope = -m[1] * h[0] + (pts[1].y - pts[0].y) / h[0]
        if not self.fixed_postslope:
            self.postslope = m[n - 2] * h[n - 2] + (pts[n - 1].y - pts[n - 2].y) / h[n - 2]
        self._m, self._h = m, h

    def interpolate(self, x: float) -> float:
        """Return y where (x, y) lies on the spline, extrapolating linearly."""
        pts = self.points
        n = len(pts)
        if x < pts[0].x:
            return pts[0].y + (x - pts[0].x) * self.preslope
        if x > pts[n - 1].x:
            return pts[n - 1].y + (x - pts[n - 1].x) * self.postslope
        i = bisect_left(self._xs, x)
        if x == pts[i].x:
            return pts[i].y
        m, h = self._m, self._h
        x0, x1 = x - pts[i - 1].x, pts[i].x - x
        return (
            (m[i - 1] * (x1 * x1 * x1) + m[i] * (x0 * x0 * x0)) / h[i - 1]
            - (m[i - 1] * x1 + m[i] * x0) * h[i - 1]
            + (pts[i - 1].y * x1 + pts[i].y * x0) / h[i - 1]
        )