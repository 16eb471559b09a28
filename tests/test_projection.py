import pytest

from ichigo.geom.int3 import Int3
from ichigo.geom.point import Point
from ichigo.geom.projection import (
    ElevationProjection,
    IntProjection,
    Projection,
    Projector,
    SimpleProjection,
    project,
)


@pytest.mark.parametrize("z", [-7, 0, 3, 100])
def test_elevation_projection_discards_z(z):
    p = Int3(4, -9, z)
    assert project(ElevationProjection(), p) == p.xy()
    assert ElevationProjection().sign() == Point()


def test_simple_projection_sign():
    assert SimpleProjection().sign() == Point(0, 1)


@pytest.mark.parametrize("z", [-5, 0, 12])
def test_simple_projection_moves_only_y(z):
    off = SimpleProjection().project(z)
    assert off.x == 0
    assert off.y == z


def test_projection_sign_follows_factors():
    assert Projection(-0.5, 2.0).sign() == Point(-1, 1)
    assert Projection(0.0, 0.0).sign() == Point()


def test_projection_truncates_toward_zero():
    pr = Projection(0.5, 0.5)
    assert pr.project(-3) == pr.project(3).mul(-1)


def test_int_projection_zero_factor_gives_zero():
    pr = IntProjection(0, 2)
    assert pr.project(10).x == 0
    assert pr.project(10).y == 5


def test_int_projection_truncates_negative_toward_zero():
    pr = IntProjection(0, 2)
    assert pr.project(-5) == Point(0, -2)
    assert pr.sign() == Point(0, 1)


def test_projections_satisfy_protocol():
    for pr in (ElevationProjection(), SimpleProjection(), Projection(1, 1), IntProjection(1, 1)):
        assert isinstance(pr, Projector)
        assert project(pr, Int3(0, 0, 0)) == Point()