"""Small rational numbers."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ichigo.geom.point import idiv


@dataclass(frozen=True, slots=True)
class Rat:
    """A rational number n/d. Results of arithmetic are in reduced form."""

    n: int = 0
    d: int = 1

    def __str__(self) -> str:
        if self.d == 1:
            return str(self.n)
        return f"{self.n}/{self.d}"

    def to_int(self) -> int:
        """Return n / d truncated toward zero."""
        return idiv(self.n, self.d)

    def rem(self) -> int:
        """Return the remainder of n / d, with the sign of n."""
        return self.n - self.d * idiv(self.n, self.d)

    def canon(self) -> Rat:
        """Return the reduced form, with a positive denominator."""
        if self.d == 0:
            raise ZeroDivisionError("division by zero")
        if self.n == 0:
            return Rat(0, 1)
        n, d = (-self.n, -self.d) if self.d < 0 else (self.n, self.d)
        g = math.gcd(abs(n), d)
        if g > 1:
            n, d = n // g, d // g
        return Rat(n, d)

    def neg(self) -> Rat:
        return Rat(-self.n, self.d)

    def add(self, q: Rat) -> Rat:
        return Rat(self.n * q.d + q.n * self.d, self.d * q.d).canon()

    def sub(self, q: Rat) -> Rat:
        return Rat(self.n * q.d - q.n * self.d, self.d * q.d).canon()

    def mul(self, q: Rat) -> Rat:
        return Rat(self.n * q.n, self.d * q.d).canon()

    def invert(self) -> Rat:
        """Return 1/r; raises ZeroDivisionError for zero."""
        return Rat(self.d, self.n).canon()

    def div(self, q: Rat) -> Rat:
        return Rat(self.n * q.d, self.d * q.n).canon()


def int_rat(n: int) -> Rat:
    """Return the rational representation of n."""
    return Rat(n, 1)