"""Axis-aligned boxes in integer 3D space."""

from __future__ import annotations

from dataclasses import dataclass

from ichigo.geom.int3 import Int3
from ichigo.geom.point import Rectangle
from ichigo.geom.projection import Projector


@dataclass(frozen=True, slots=True)
class Box:
    """An axis-aligned rectangular prism; min inclusive, max exclusive."""

    min: Int3 = Int3()
    max: Int3 = Int3()

    def __str__(self) -> str:
        return f"{self.min}-{self.max}"

    def empty(self) -> bool:
        """Report whether the box contains no points."""
        return (
            self.min.x >= self.max.x
            or self.min.y >= self.max.y
            or self.min.z >= self.max.z
        )

    def eq(self, c: Box) -> bool:
        """Report whether both boxes hold the same points; empties are equal."""
        return self == c or (self.empty() and c.empty())

    def overlaps(self, c: Box) -> bool:
        """Report whether the boxes have a non-empty intersection."""
        return (
            not self.empty()
            and not c.empty()
            and self.min.x < c.max.x
            and c.min.x < self.max.x
            and self.min.y < c.max.y
            and c.min.y < self.max.y
            and self.min.z < c.max.z
            and c.min.z < self.max.z
        )

    def size(self) -> Int3:
        return self.max.sub(self.min)

    def centre(self) -> Int3:
        return self.min.add(self.max).div(2)

    def add(self, p: Int3) -> Box:
        return Box(self.min.add(p), self.max.add(p))

    def sub(self, p: Int3) -> Box:
        return Box(self.min.sub(p), self.max.sub(p))

    def canon(self) -> Box:
        """Return a well-formed copy with min <= max on every axis."""
        x0, x1 = sorted((self.min.x, self.max.x))
        y0, y1 = sorted((self.min.y, self.max.y))
        z0, z1 = sorted((self.min.z, self.max.z))
        return Box(Int3(x0, y0, z0), Int3(x1, y1, z1))

    def bounding_rect(self, projector: Projector) -> Rectangle:
        """Bound the projected box."""
        return self.back(projector).union(self.front(projector))

    def back(self, projector: Projector) -> Rectangle:
        """The back face of the box, projected."""
        p = projector.project(self.min.z)
        return Rectangle(self.min.xy().add(p), self.max.xy().add(p))

    def front(self, projector: Projector) -> Rectangle:
        """The front face of the box, projected."""
        p = projector.project(self.max.z)
        return Rectangle(self.min.xy().add(p), self.max.xy().add(p))

    def xy(self) -> Rectangle:
        """The box with Z forgotten."""
        return Rectangle(self.min.xy(), self.max.xy())

    def xz(self) -> Rectangle:
        """The box with Y forgotten."""
        return Rectangle(self.min.xz(), self.max.xz())