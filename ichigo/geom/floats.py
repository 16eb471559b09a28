"""Floating-point 2D and 3D vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ichigo.geom.point import fsign


def _fdiv(a: float, b: float) -> float:
    """IEEE-754 division: dividing by zero yields an infinity or NaN."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


@dataclass(frozen=True, slots=True)
class Float2:
    """An element of float^2."""

    x: float = 0.0
    y: float = 0.0

    def __str__(self) -> str:
        return f"({self.x:f},{self.y:f})"

    def add(self, q: Float2) -> Float2:
        return Float2(self.x + q.x, self.y + q.y)

    def sub(self, q: Float2) -> Float2:
        return self.add(q.neg())

    def cmul(self, q: Float2) -> Float2:
        return Float2(self.x * q.x, self.y * q.y)

    def mul(self, k: float) -> Float2:
        return Float2(self.x * k, self.y * k)

    def cdiv(self, q: Float2) -> Float2:
        return Float2(_fdiv(self.x, q.x), _fdiv(self.y, q.y))

    def div(self, k: float) -> Float2:
        return Float2(_fdiv(self.x, k), _fdiv(self.y, k))

    def neg(self) -> Float2:
        return Float2(-self.x, -self.y)

    def coord(self) -> tuple[float, float]:
        return self.x, self.y

    def sign(self) -> Float2:
        return Float2(fsign(self.x), fsign(self.y))

    def dot(self, q: Float2) -> float:
        return self.x * q.x + self.y * q.y


@dataclass(frozen=True, slots=True)
class Float3:
    """An element of float^3."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __str__(self) -> str:
        return f"({self.x:f},{self.y:f},{self.z:f})"

    def add(self, q: Float3) -> Float3:
        return Float3(self.x + q.x, self.y + q.y, self.z + q.z)

    def sub(self, q: Float3) -> Float3:
        return self.add(q.neg())

    def cmul(self, q: Float3) -> Float3:
        return Float3(self.x * q.x, self.y * q.y, self.z * q.z)

    def mul(self, k: float) -> Float3:
        return Float3(self.x * k, self.y * k, self.z * k)

    def cdiv(self, q: Float3) -> Float3:
        return Float3(_fdiv(self.x, q.x), _fdiv(self.y, q.y), _fdiv(self.z, q.z))

    def div(self, k: float) -> Float3:
        return Float3(_fdiv(self.x, k), _fdiv(self.y, k), _fdiv(self.z, k))

    def neg(self) -> Float3:
        return Float3(-self.x, -self.y, -self.z)

    def coord(self) -> tuple[float, float, float]:
        return self.x, self.y, self.z

    def sign(self) -> Float3:
        return Float3(fsign(self.x), fsign(self.y), fsign(self.z))

    def dot(self, q: Float3) -> float:
        return self.x * q.x + self.y * q.y + self.z * q.z