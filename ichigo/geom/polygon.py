"""Convex polygon tests on the integer plane."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from enum import IntEnum

from ichigo.geom.point import Point, Rectangle


class Cardinal(IntEnum):
    """Indexes into the result of polygon_extrema."""

    EAST = 0
    NORTH = 1
    WEST = 2
    SOUTH = 3


_MAX_INT = sys.maxsize
_MIN_INT = -sys.maxsize - 1


def _edges(polygon: Sequence[Point]):
    return zip(polygon, [*polygon[1:], *polygon[:1]])


def polygon_extrema(polygon: Sequence[Point]) -> tuple[Point, Point, Point, Point]:
    """Return the most easterly, northerly, westerly and southerly points.

    North is -Y and east is +X. Ties go to the first such point.
    """
    e = Point(_MIN_INT, 0)
    n = Point(0, _MAX_INT)
    w = Point(_MAX_INT, 0)
    s = Point(0, _MIN_INT)
    for p in polygon:
        if p.x > e.x:
            e = p
        if p.x < w.x:
            w = p
        if p.y > s.y:
            s = p
        if p.y < n.y:
            n = p
    return e, n, w, s


def polygon_contains(convex: Sequence[Point], p: Point) -> bool:
    """Report whether a convex polygon contains a point (edges included).

    The polygon must be anticlockwise when +Y points downwards.
    """
    for q, r in _edges(convex):
        q, r = q.sub(p), r.sub(p)
        if q.x * r.y > r.x * q.y:
            return False
    return True


def polygon_rect_overlap(convex: Sequence[Point], rect: Rectangle) -> bool:
    """Report whether a convex polygon overlaps a rectangle."""
    if convex[0].in_rect(rect):
        return True
    if polygon_contains(convex, rect.min):
        return True
    rmax = rect.max.sub(Point(1, 1))
    if polygon_contains(convex, rmax):
        return True

    for p, q in _edges(convex):
        if not rect.overlaps(Rectangle(p, q).canon()):
            continue
        d = q.sub(p)
        if d.x != 0:
            if d.x < 0:
                d = d.mul(-1)
            lo = (rect.min.y - p.y) * d.x
            hi = (rect.max.y - p.y) * d.x
            if lo <= (rect.min.x - p.x) * d.y < hi:
                return True
            if lo <= (rmax.x - p.x) * d.y < hi:
                return True
        if d.y != 0:
            if d.y < 0:
                d = d.mul(-1)
            lo = (rect.min.x - p.x) * d.y
            hi = (rect.max.x - p.x) * d.y
            if lo <= (rect.min.y - p.y) * d.x < hi:
                return True
            if lo <= (rmax.y - p.y) * d.x < hi:
                return True
    return False