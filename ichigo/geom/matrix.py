"""Small fixed-size integer, rational and float matrices."""

from __future__ import annotations

from dataclasses import dataclass

from ichigo.geom.floats import Float3
from ichigo.geom.int3 import Int3
from ichigo.geom.point import Point
from ichigo.geom.rational import Rat, int_rat


class SingularMatrixError(ValueError):
    """Raised when inverting a singular matrix."""

    def __init__(self) -> None:
        super().__init__("matrix is singular")


def _freeze(obj, rows) -> None:
    object.__setattr__(obj, "rows", tuple(tuple(r) for r in rows))


@dataclass(frozen=True, slots=True)
class IntMatrix3:
    """A 3x3 integer matrix, stored as rows."""

    rows: tuple[tuple[int, ...], ...]

    def __post_init__(self) -> None:
        _freeze(self, self.rows)

    def __getitem__(self, i: int) -> tuple[int, ...]:
        return self.rows[i]

    def apply(self, v: Int3) -> Int3:
        a = self.rows
        return Int3(*(v.x * r[0] + v.y * r[1] + v.z * r[2] for r in a))

    def concat(self, b: IntMatrix3) -> IntMatrix3:
        """Return the matrix product self * b."""
        return IntMatrix3(
            tuple(
                sum(row[k] * b.rows[k][j] for k in range(3)) for j in range(3)
            )
            for row in self.rows
        )


@dataclass(frozen=True, slots=True)
class IntMatrix3x4:
    """A 3 row, 4 column integer matrix describing an affine transformation."""

    rows: tuple[tuple[int, ...], ...]

    def __post_init__(self) -> None:
        _freeze(self, self.rows)

    def __getitem__(self, i: int) -> tuple[int, ...]:
        return self.rows[i]

    def apply(self, v: Int3) -> Int3:
        return Int3(
            *(v.x * r[0] + v.y * r[1] + v.z * r[2] + r[3] for r in self.rows)
        )

    def to_rat_matrix3(self) -> RatMatrix3:
        """Return the 3x3 linear part as a rational matrix."""
        return RatMatrix3(tuple(int_rat(x) for x in r[:3]) for r in self.rows)

    def translation(self) -> Int3:
        """Return the last column."""
        return Int3(*(r[3] for r in self.rows))


@dataclass(frozen=True, slots=True)
class IntMatrix2x3:
    """A 2 row, 3 column matrix given as two row vectors."""

    x: Int3 = Int3()
    y: Int3 = Int3()

    def apply(self, v: Int3) -> Point:
        return Point(v.dot(self.x), v.dot(self.y))


@dataclass(frozen=True, slots=True)
class RatMatrix3:
    """A 3x3 matrix of rationals, stored as rows."""

    rows: tuple[tuple[Rat, ...], ...]

    def __post_init__(self) -> None:
        _freeze(self, self.rows)

    def __getitem__(self, i: int) -> tuple[Rat, ...]:
        return self.rows[i]

    def __str__(self) -> str:
        return "[" + "; ".join(" ".join(str(x) for x in r) for r in self.rows) + "]"

    def int_apply(self, v: Int3) -> Int3:
        """Apply to an integer vector; any remainder is lost."""
        x, y, z = int_rat(v.x), int_rat(v.y), int_rat(v.z)
        return Int3(
            *(
                x.mul(r[0]).add(y.mul(r[1])).add(z.mul(r[2])).to_int()
                for r in self.rows
            )
        )

    def mul(self, r: Rat) -> RatMatrix3:
        """Multiply every entry by a scalar."""
        return RatMatrix3(tuple(e.mul(r) for e in row) for row in self.rows)

    def adjugate(self) -> RatMatrix3:
        a = self.rows
        return RatMatrix3(
            (
                (
                    a[1][1].mul(a[2][2]).sub(a[1][2].mul(a[2][1])),
                    a[0][2].mul(a[2][1]).sub(a[0][1].mul(a[2][2])),
                    a[0][1].mul(a[1][2]).sub(a[0][2].mul(a[1][1])),
                ),
                (
                    a[1][2].mul(a[2][0]).sub(a[1][0].mul(a[2][2])),
                    a[0][0].mul(a[2][2]).sub(a[0][2].mul(a[2][0])),
                    a[0][2].mul(a[1][0]).sub(a[0][0].mul(a[1][2])),
                ),
                (
                    a[1][0].mul(a[2][1]).sub(a[1][1].mul(a[2][0])),
                    a[0][1].mul(a[2][0]).sub(a[0][0].mul(a[2][1])),
                    a[0][0].mul(a[1][1]).sub(a[0][1].mul(a[1][0])),
                ),
            )
        )

    def inverse(self) -> RatMatrix3:
        """Return the inverse; raises SingularMatrixError if there is none."""
        a = self.rows
        adj = self.adjugate()
        det = (
            a[0][0].mul(adj[0][0]).add(a[0][1].mul(adj[1][0])).add(a[0][2].mul(adj[2][0]))
        )
        if det.n == 0:
            raise SingularMatrixError()
        return adj.mul(det.invert())

    def concat(self, b: RatMatrix3) -> RatMatrix3:
        """Return the matrix product self * b."""
        return RatMatrix3(
            tuple(
                row[0].mul(b.rows[0][j]).add(row[1].mul(b.rows[1][j])).add(row[2].mul(b.rows[2][j]))
                for j in range(3)
            )
            for row in self.rows
        )


IDENTITY_RAT_MATRIX3 = RatMatrix3(
    tuple(Rat(1, 1) if i == j else Rat(0, 1) for j in range(3)) for i in range(3)
)


@dataclass(frozen=True, slots=True)
class Matrix3x4:
    """A 3x4 matrix of floats describing an affine transformation."""

    rows: tuple[tuple[float, ...], ...]

    def __post_init__(self) -> None:
        _freeze(self, (tuple(float(x) for x in r) for r in self.rows))

    def __getitem__(self, i: int) -> tuple[float, ...]:
        return self.rows[i]

    def apply(self, v: Float3) -> Float3:
        return Float3(
            *(r[0] * v.x + r[1] * v.y + r[2] * v.z + r[3] for r in self.rows)
        )

    def mul(self, r: float) -> Matrix3x4:
        """Multiply every entry by a scalar."""
        return Matrix3x4(tuple(e * r for e in row) for row in self.rows)

    def translation(self) -> Float3:
        """Return the last column."""
        return Float3(*(r[3] for r in self.rows))

    def adjugate(self) -> Matrix3x4:
        """Return the adjugate of the 3x3 part, with a zero last column."""
        a = self.rows
        return Matrix3x4(
            (
                (
                    a[1][1] * a[2][2] - a[1][2] * a[2][1],
                    a[0][2] * a[2][1] - a[0][1] * a[2][2],
                    a[0][1] * a[1][2] - a[0][2] * a[1][1],
                    0.0,
                ),
                (
                    a[1][2] * a[2][0] - a[1][0] * a[2][2],
                    a[0][0] * a[2][2] - a[0][2] * a[2][0],
                    a[0][2] * a[1][0] - a[0][0] * a[1][2],
                    0.0,
                ),
                (
                    a[1][0] * a[2][1] - a[1][1] * a[2][0],
                    a[0][1] * a[2][0] - a[0][0] * a[2][1],
                    a[0][0] * a[1][1] - a[0][1] * a[1][0],
                    0.0,
                ),
            )
        )

    def inverse(self) -> Matrix3x4:
        """Return the inverse of the 3x3 part (the last column is zero).

        Raises SingularMatrixError if the 3x3 part is singular.
        """
        a = self.rows
        adj = self.adjugate()
        det = a[0][0] * adj[0][0] + a[0][1] * adj[1][0] + a[0][2] * adj[2][0]
        if det == 0:
            raise SingularMatrixError()
        return adj.mul(1 / det)

    def concat(self, b: Matrix3x4) -> Matrix3x4:
        """Combine two matrices as a product of their 3x3 parts plus offsets."""
        rows = []
        for r in self.rows:
            lin = [sum(r[k] * b.rows[k][j] for k in range(3)) for j in range(3)]
            off = r[0] * b.rows[0][3] + r[1] * b.rows[1][3] + r[3] * b.rows[2][3]
            rows.append((*lin, off))
        return Matrix3x4(rows)


IDENTITY_MATRIX3X4 = Matrix3x4(
    tuple(1.0 if i == j else 0.0 for j in range(4)) for i in range(3)
)