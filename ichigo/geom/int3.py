"""Integer 3D vectors."""

from __future__ import annotations

from dataclasses import dataclass

from ichigo.geom.point import Point, idiv, sign


@dataclass(frozen=True, slots=True)
class Int3:
    """An element of int^3."""

    x: int = 0
    y: int = 0
    z: int = 0

    def __str__(self) -> str:
        return f"({self.x},{self.y},{self.z})"

    def xy(self) -> Point:
        """Forget Z."""
        return Point(self.x, self.y)

    def xz(self) -> Point:
        """Forget Y; Z becomes the second component."""
        return Point(self.x, self.z)

    def add(self, q: Int3) -> Int3:
        return Int3(self.x + q.x, self.y + q.y, self.z + q.z)

    def sub(self, q: Int3) -> Int3:
        return self.add(q.neg())

    def cmul(self, q: Int3) -> Int3:
        return Int3(self.x * q.x, self.y * q.y, self.z * q.z)

    def mul(self, k: int) -> Int3:
        return Int3(self.x * k, self.y * k, self.z * k)

    def cdiv(self, q: Int3) -> Int3:
        """Componentwise division, truncating toward zero."""
        return Int3(idiv(self.x, q.x), idiv(self.y, q.y), idiv(self.z, q.z))

    def div(self, k: int) -> Int3:
        """Scalar division, truncating toward zero."""
        return Int3(idiv(self.x, k), idiv(self.y, k), idiv(self.z, k))

    def neg(self) -> Int3:
        return Int3(-self.x, -self.y, -self.z)

    def coord(self) -> tuple[int, int, int]:
        return self.x, self.y, self.z

    def sign(self) -> Int3:
        return Int3(sign(self.x), sign(self.y), sign(self.z))

    def dot(self, q: Int3) -> int:
        return self.x * q.x + self.y * q.y + self.z * q.z


def pt3(x: int, y: int, z: int) -> Int3:
    """Shorthand for Int3(x, y, z)."""
    return Int3(x, y, z)