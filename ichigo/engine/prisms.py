"""A generalised 3D tile map made of identically shaped prisms."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from PIL import Image

from ichigo.engine.drawopts import DrawOptions, GeoM
from ichigo.engine.interface import BoundingBoxer, VisitFunc
from ichigo.engine.sheet import Sheet
from ichigo.engine.traits import ID, Disables, Hides
from ichigo.geom.box import Box
from ichigo.geom.int3 import Int3
from ichigo.geom.matrix import IntMatrix3x4, RatMatrix3, SingularMatrixError
from ichigo.geom.point import Point, cfloat
from ichigo.geom.polygon import Cardinal, polygon_extrema, polygon_rect_overlap
from ichigo.geom.projection import project


def _draw_image(screen: Image.Image, src: Image.Image, opts: DrawOptions) -> None:
    """Composite src onto screen through the affine transform in opts."""
    src = src.convert("RGBA")
    g = opts.geom
    if (g.a, g.b, g.c, g.d) == (1.0, 0.0, 0.0, 1.0):
        screen.paste(src, (round(g.tx), round(g.ty)), src)
        return
    det = g.a * g.d - g.b * g.c
    if det == 0:
        return
    data = (
        g.d / det,
        -g.b / det,
        (g.b * g.ty - g.d * g.tx) / det,
        -g.c / det,
        g.a / det,
        (g.c * g.tx - g.a * g.ty) / det,
    )
    layer = src.transform(
        screen.size, Image.Transform.AFFINE, data, resample=Image.Resampling.NEAREST
    )
    screen.paste(layer, (0, 0), layer)


def _zero_matrix() -> IntMatrix3x4:
    return IntMatrix3x4(((0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0)))


@dataclass(eq=False)
class PrismMap(ID, Disables, Hides):
    """A map from prism coordinates to prisms.

    pos_to_world maps prism coordinates to world voxel space; prism_size is
    in world voxel units; prism_top lists the top polygon's vertices
    anticlockwise, with Y standing for Z.
    """

    ersatz: bool = False
    map: dict[Int3, Prism] = field(default_factory=dict)
    draw_offset: Point = Point()
    pos_to_world: IntMatrix3x4 = field(default_factory=_zero_matrix)
    prism_size: Int3 = Int3()
    prism_top: list[Point] = field(default_factory=list)
    sheet: Sheet = field(default_factory=Sheet)

    _game: Any = field(default=None, init=False, repr=False)
    _pwinverse: RatMatrix3 | None = field(default=None, init=False, repr=False)
    _topext: tuple[Point, ...] = field(default=(), init=False, repr=False)

    def __str__(self) -> str:
        return "PrismMap"

    def collides_with(self, b: Box) -> bool:
        """Report whether the box collides with any prism."""
        if self.ersatz:
            return False
        rb = b.sub(self.pos_to_world.translation())
        rb = Box(self._pwinverse.int_apply(rb.min), self._pwinverse.int_apply(rb.max)).canon()
        # Neighbouring prisms are checked too, to cover rounding at the edges.
        one = Int3(1, 1, 1)
        lo, hi = rb.min.sub(one), rb.max.add(one)
        for z in range(lo.z, hi.z + 1):
            for y in range(lo.y, hi.y + 1):
                for x in range(lo.x, hi.x + 1):
                    prism = self.map.get(Int3(x, y, z))
                    if prism is None:
                        continue
                    if not b.overlaps(prism.bounding_box()):
                        continue
                    r = b.xz().sub(prism._pos.xz())
                    if polygon_rect_overlap(self.prism_top, r):
                        return True
        return False

    def prepare(self, game: Any) -> None:
        """Invert pos_to_world and place every prism in world space.

        Raises ValueError if pos_to_world cannot be inverted.
        """
        self._game = game
        try:
            self._pwinverse = self.pos_to_world.to_rat_matrix3().inverse()
        except SingularMatrixError as e:
            raise ValueError(f"inverting PosToWorld: {e}") from e
        for v, p in self.map.items():
            p._pos = self.pos_to_world.apply(v)
            p._map = self
        self._topext = polygon_extrema(self.prism_top)

    def scan(self, visit: VisitFunc) -> None:
        """Visit the sheet and then every prism."""
        visit(self.sheet)
        for prism in list(self.map.values()):
            visit(prism)

    def transform(self) -> DrawOptions:
        """Translate by the draw offset."""
        return DrawOptions(geom=GeoM().translate(*cfloat(self.draw_offset)))


@dataclass(eq=False)
class Prism:
    """A single prism in a PrismMap, drawn with one cell of the map's sheet."""

    cell: int = 0

    _pos: Int3 = field(default=Int3(), init=False, repr=False)
    _map: PrismMap | None = field(default=None, init=False, repr=False)

    def __str__(self) -> str:
        return f"Prism({self.cell})@{self._pos}"

    def bounding_box(self) -> Box:
        """Return the prism's box in world coordinates."""
        return Box(self._pos, self._pos.add(self._map.prism_size))

    def draw(self, screen: Image.Image, opts: DrawOptions) -> None:
        """Draw the prism's cell onto screen."""
        _draw_image(screen, self._map.sheet.sub_image(self.cell), opts)

    def _threshold(self, xb: Box) -> int:
        ext = self._map._topext
        split = ext[Cardinal.NORTH].x
        if xb.min.x > split:
            return ext[Cardinal.WEST].y
        return ext[Cardinal.EAST].y

    def draw_after(self, x: Any) -> bool:
        """Report whether the prism must be drawn after x."""
        if isinstance(x, Prism):
            if self._pos.z == x._pos.z:
                return self._pos.y < x._pos.y
            return self._pos.z > x._pos.z
        if isinstance(x, BoundingBoxer):
            pb = self.bounding_box()
            xb = x.bounding_box()
            front = pb.min.z + self._threshold(xb)
            if front <= xb.min.z:  # x is in front of the front half
                return False
            if front >= xb.max.z:  # x is behind the front half
                return True
        return False

    def draw_before(self, x: Any) -> bool:
        """Report whether the prism must be drawn before x."""
        if isinstance(x, Prism):
            if self._pos.z == x._pos.z:
                return self._pos.y > x._pos.y
            return self._pos.z < x._pos.z
        if isinstance(x, BoundingBoxer):
            pb = self.bounding_box()
            xb = x.bounding_box()
            front = pb.min.z + self._threshold(xb)
            if front >= xb.max.z:  # x is behind the front half
                return False
            if front <= xb.min.z:  # x is in front of the front half
                return True
        return False

    def transform(self) -> DrawOptions:
        """Translate by the projected position."""
        p = project(self._map._game.projection, self._pos)
        return DrawOptions(geom=GeoM().translate(*cfloat(p)))