"""Numbers stored as an integer part plus a fractional part."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class IntFloat:
    """A real number as i + f; canonical when 0 <= f < 1."""

    i: int = 0
    f: float = 0.0

    def __str__(self) -> str:
        return f"{self.i} + {self.f:f}"

    def canon(self) -> IntFloat:
        """Return an equal value in canonical form (0 <= f < 1)."""
        frac, whole = math.modf(self.f)
        if frac < 0:
            whole -= 1
            frac = 1 + frac
        return IntFloat(self.i + int(whole), frac)

    def to_float(self) -> float:
        return float(self.i) + self.f

    def lt(self, y: IntFloat) -> bool:
        """Report x < y; both must be canonical."""
        if self.i == y.i:
            return self.f < y.f
        return self.i < y.i

    def gt(self, y: IntFloat) -> bool:
        """Report x > y; both must be canonical."""
        if self.i == y.i:
            return self.f > y.f
        return self.i > y.i

    def add(self, y: IntFloat) -> IntFloat:
        """Return x + y (not canonicalised)."""
        return IntFloat(self.i + y.i, self.f + y.f)

    def neg(self) -> IntFloat:
        """Return -x (not canonicalised)."""
        return IntFloat(-self.i, -self.f)

    def sub(self, y: IntFloat) -> IntFloat:
        """Return x - y (not canonicalised)."""
        return IntFloat(self.i - y.i, self.f - y.f)

    def mul(self, y: IntFloat) -> IntFloat:
        """Return x * y, canonicalised."""
        return IntFloat(
            self.i * y.i,
            float(self.i) * y.f + self.f * float(y.i) + self.f * y.f,
        ).canon()

    def inv(self) -> IntFloat:
        """Return 1/x, canonicalised."""
        return to_int_float(1 / self.to_float())

    def div(self, y: IntFloat) -> IntFloat:
        """Return x / y, canonicalised."""
        return to_int_float(self.to_float() / y.to_float())


def to_int_float(f: float) -> IntFloat:
    """Convert a float into a canonical IntFloat."""
    return IntFloat(0, f).canon()