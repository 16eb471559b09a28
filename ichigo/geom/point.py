"""Integer 2D points and rectangles, plus small numeric helpers."""

from __future__ import annotations

from dataclasses import dataclass


def idiv(a: int, b: int) -> int:
    """Integer division that truncates toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def sign(m: int) -> int:
    """Return the sign of an int (-1, 0 or 1)."""
    if m == 0:
        return 0
    return -1 if m < 0 else 1


def fsign(m: float) -> float:
    """Return the sign of a float (-1.0, 0.0 or 1.0); NaN counts as positive."""
    if m == 0:
        return 0.0
    if m < 0:
        return -1.0
    return 1.0


@dataclass(frozen=True, slots=True)
class Point:
    """A point (or vector) in the integer plane."""

    x: int = 0
    y: int = 0

    def __str__(self) -> str:
        return f"({self.x},{self.y})"

    def add(self, q: Point) -> Point:
        return Point(self.x + q.x, self.y + q.y)

    def sub(self, q: Point) -> Point:
        return Point(self.x - q.x, self.y - q.y)

    def mul(self, k: int) -> Point:
        return Point(self.x * k, self.y * k)

    def div(self, k: int) -> Point:
        """Divide both components by k, truncating toward zero."""
        return Point(idiv(self.x, k), idiv(self.y, k))

    def in_rect(self, r: Rectangle) -> bool:
        """Report whether the point lies within r (max bound exclusive)."""
        return r.min.x <= self.x < r.max.x and r.min.y <= self.y < r.max.y


@dataclass(frozen=True, slots=True)
class Rectangle:
    """An axis-aligned rectangle; min is inclusive, max is exclusive."""

    min: Point = Point()
    max: Point = Point()

    def __str__(self) -> str:
        return f"{self.min}-{self.max}"

    def size(self) -> Point:
        return self.max.sub(self.min)

    def dx(self) -> int:
        return self.max.x - self.min.x

    def dy(self) -> int:
        return self.max.y - self.min.y

    def empty(self) -> bool:
        return self.min.x >= self.max.x or self.min.y >= self.max.y

    def overlaps(self, s: Rectangle) -> bool:
        return (
            not self.empty()
            and not s.empty()
            and self.min.x < s.max.x
            and s.min.x < self.max.x
            and self.min.y < s.max.y
            and s.min.y < self.max.y
        )

    def union(self, s: Rectangle) -> Rectangle:
        """Return the smallest rectangle containing both rectangles."""
        if self.empty():
            return s
        if s.empty():
            return self
        return Rectangle(
            Point(min(self.min.x, s.min.x), min(self.min.y, s.min.y)),
            Point(max(self.max.x, s.max.x), max(self.max.y, s.max.y)),
        )

    def canon(self) -> Rectangle:
        """Return a well-formed copy with min <= max on each axis."""
        x0, x1 = sorted((self.min.x, self.max.x))
        y0, y1 = sorted((self.min.y, self.max.y))
        return Rectangle(Point(x0, y0), Point(x1, y1))

    def add(self, p: Point) -> Rectangle:
        return Rectangle(self.min.add(p), self.max.add(p))

    def sub(self, p: Point) -> Rectangle:
        return Rectangle(self.min.sub(p), self.max.sub(p))


def pt(x: int, y: int) -> Point:
    """Shorthand for Point(x, y)."""
    return Point(x, y)


def rect(x0: int, y0: int, x1: int, y1: int) -> Rectangle:
    """Build a canonical rectangle from two corners."""
    return Rectangle(Point(x0, y0), Point(x1, y1)).canon()


def cmul(p: Point, q: Point) -> Point:
    """Componentwise multiplication."""
    return Point(p.x * q.x, p.y * q.y)


def cdiv(p: Point, q: Point) -> Point:
    """Componentwise division, truncating toward zero."""
    return Point(idiv(p.x, q.x), idiv(p.y, q.y))


def cfloat(p: Point) -> tuple[float, float]:
    """Return the components of a point as two floats."""
    return float(p.x), float(p.y)


def dot(p: Point, q: Point) -> int:
    """Dot product of two points."""
    return p.x * q.x + p.y * q.y


def csign(p: Point) -> Point:
    """Apply sign componentwise."""
    return Point(sign(p.x), sign(p.y))