"""Integer, rational and floating-point geometry, matrices and splines."""

__all__ = [
    "box",
    "floats",
    "int3",
    "intfloat",
    "matrix",
    "point",
    "polygon",
    "projection",
    "rational",
    "spline",
]