import pytest

from ichigo.geom.int3 import Int3, pt3
from ichigo.geom.point import Point

COORDS = [(0, 0, 0), (3, 4, 5), (-7, 2, -11), (24, -16, 8)]
VECTORS = [pt3(*c) for c in COORDS]


def test_str():
    assert str(pt3(3, 4, 5)) == "(3,4,5)"


def test_default_is_zero():
    assert Int3() == pt3(0, 0, 0)


def test_projections():
    p = pt3(1, 2, 3)
    assert p.xy() == Point(1, 2)
    assert p.xz() == Point(1, 3)


@pytest.mark.parametrize("pc", COORDS)
@pytest.mark.parametrize("qc", COORDS)
def test_add_sub(pc, qc):
    p, q = pt3(*pc), pt3(*qc)
    assert p.add(q).sub(q) == pt3(*pc)
    assert p.sub(q) == p.add(q.neg())
    assert p.add(q) == q.add(p)
    assert p.add(q) == pt3(pc[0] + qc[0], pc[1] + qc[1], pc[2] + qc[2])


@pytest.mark.parametrize("p", VECTORS)
def test_neg(p):
    assert p.add(p.neg()) == Int3()
    assert p.neg().neg() == p


@pytest.mark.parametrize("pc", COORDS)
@pytest.mark.parametrize("k", [1, -2, 9])
def test_mul_div_roundtrip(pc, k):
    p = pt3(*pc)
    assert p.mul(k).div(k) == pt3(*pc)
    assert p.mul(k) == pt3(pc[0] * k, pc[1] * k, pc[2] * k)


@pytest.mark.parametrize("p", VECTORS)
def test_cmul_cdiv_roundtrip(p):
    q = pt3(3, -5, 7)
    assert p.cmul(q).cdiv(q) == p


def test_div_truncates():
    assert pt3(-7, 7, -1).div(2) == pt3(-3, 3, 0)


def test_div_by_zero():
    with pytest.raises(ZeroDivisionError):
        pt3(1, 2, 3).div(0)


@pytest.mark.parametrize("p", VECTORS)
def test_coord(p):
    assert p.coord() == (p.x, p.y, p.z)
    assert pt3(*p.coord()) == p


@pytest.mark.parametrize("p", VECTORS)
def test_sign(p):
    s = p.sign()
    assert s.cmul(pt3(abs(p.x), abs(p.y), abs(p.z))) == p


@pytest.mark.parametrize("p", VECTORS)
def test_dot(p):
    assert p.dot(pt3(1, 0, 0)) == p.x
    assert p.dot(pt3(0, 1, 0)) == p.y
    assert p.dot(pt3(0, 0, 1)) == p.z
    q = pt3(2, -3, 4)
    assert p.dot(q) == q.dot(p)