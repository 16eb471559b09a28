"""Affine draw transforms and the options carried down the component tree."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GeoM:
    """A 2D affine transform: x' = a*x + b*y + tx, y' = c*x + d*y + ty.

    The default value is the identity. Each operation returns a new transform
    that applies this one first and then the operation.
    """

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    def translate(self, tx: float, ty: float) -> GeoM:
        return GeoM(self.a, self.b, self.c, self.d, self.tx + tx, self.ty + ty)

    def scale(self, sx: float, sy: float) -> GeoM:
        return GeoM(
            self.a * sx, self.b * sx, self.c * sy, self.d * sy, self.tx * sx, self.ty * sy
        )

    def rotate(self, theta: float) -> GeoM:
        """Rotate by theta radians about the origin."""
        if theta == 0:
            return self
        s, c = math.sin(theta), math.cos(theta)
        return GeoM(
            c * self.a - s * self.c,
            c * self.b - s * self.d,
            s * self.a + c * self.c,
            s * self.b + c * self.d,
            c * self.tx - s * self.ty,
            s * self.tx + c * self.ty,
        )

    def concat(self, other: GeoM) -> GeoM:
        """Return the transform that applies self and then other."""
        return GeoM(
            other.a * self.a + other.b * self.c,
            other.a * self.b + other.b * self.d,
            other.c * self.a + other.d * self.c,
            other.c * self.b + other.d * self.d,
            other.a * self.tx + other.b * self.ty + other.tx,
            other.c * self.tx + other.d * self.ty + other.ty,
        )

    def apply(self, x: float, y: float) -> tuple[float, float]:
        return (
            self.a * x + self.b * y + self.tx,
            self.c * x + self.d * y + self.ty,
        )


@dataclass(frozen=True, slots=True)
class DrawOptions:
    """Options used when drawing; zero modes mean "inherit/default"."""

    geom: GeoM = GeoM()
    composite_mode: int = 0
    filter: int = 0


def concat_opts(a: DrawOptions, b: DrawOptions) -> DrawOptions:
    """Combine options as though a was applied and then b."""
    return DrawOptions(
        geom=a.geom.concat(b.geom),
        composite_mode=b.composite_mode or a.composite_mode,
        filter=b.filter or a.filter,
    )