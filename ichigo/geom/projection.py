"""Projections of the Z axis onto 2D offsets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from ichigo.geom.int3 import Int3
from ichigo.geom.point import Point, csign, fsign, idiv


@runtime_checkable
class Projector(Protocol):
    """Projects a Z coordinate into a 2D offset."""

    def sign(self) -> Point:
        """Return a {-1, 0, 1}-valued vector in the direction positive Z goes."""

    def project(self, z: int) -> Point:
        """Convert a Z coordinate into a 2D offset."""


def project(projector: Projector, p: Int3) -> Point:
    """Project p: the projected Z offset added to p's X and Y."""
    return projector.project(p.z).add(p.xy())


@dataclass(frozen=True, slots=True)
class ElevationProjection:
    """Throws away Z."""

    def sign(self) -> Point:
        return Point()

    def project(self, z: int) -> Point:
        return Point()


@dataclass(frozen=True, slots=True)
class SimpleProjection:
    """Projects Z onto Y only."""

    def sign(self) -> Point:
        return Point(0, 1)

    def project(self, z: int) -> Point:
        return Point(0, z)


@dataclass(frozen=True, slots=True)
class Projection:
    """A custom projection defined by two float factors."""

    x: float = 0.0
    y: float = 0.0

    def sign(self) -> Point:
        return Point(int(fsign(self.x)), int(fsign(self.y)))

    def project(self, z: int) -> Point:
        """Return (z*x, z*y), truncated toward zero."""
        return Point(int(self.x * float(z)), int(self.y * float(z)))


@dataclass(frozen=True, slots=True)
class IntProjection:
    """A custom projection dividing Z by integer factors."""

    x: int = 0
    y: int = 0

    def sign(self) -> Point:
        return csign(Point(self.x, self.y))

    def project(self, z: int) -> Point:
        """Return (z/x, z/y); a zero factor gives a zero component."""
        qx = idiv(z, self.x) if self.x != 0 else 0
        qy = idiv(z, self.y) if self.y != 0 else 0
        return Point(qx, qy)