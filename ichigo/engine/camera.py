"""A camera that views a child component."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from ichigo.engine.drawopts import DrawOptions, GeoM
from ichigo.engine.interface import BoundingRecter, VisitFunc
from ichigo.engine.traits import ID, Disables, Hides
from ichigo.geom.int3 import Int3
from ichigo.geom.point import Point, cfloat
from ichigo.geom.projection import project


def _ratio(a: float, b: float) -> float:
    """Divide like IEEE floats: a zero divisor gives an infinity or NaN."""
    if b != 0:
        return a / b
    if a > 0:
        return math.inf
    if a < 0:
        return -math.inf
    return math.nan


@dataclass(eq=False)
class Camera(ID, Disables, Hides):
    """Views a child component, centred on a point, zoomed and rotated.

    centre is in projected voxel coordinates, rotation in radians and zoom
    is unitless.
    """

    child: Any = None
    centre: Point = Point()
    rotation: float = 0.0
    zoom: float = 0.0

    _game: Any = field(default=None, init=False, repr=False)

    def __str__(self) -> str:
        return f"Camera@{self.centre}"

    def point_at(self, centre: Int3, zoom: float) -> None:
        """Point at centre with the given zoom, kept within the child's bounds.

        If the child has a bounding rectangle, the zoom is raised so the view
        fits inside it, and the centre is moved so the view stays inside it.
        """
        projection = self._game.projection
        if not isinstance(self.child, BoundingRecter):
            self.centre = project(projection, centre)
            self.zoom = zoom
            return

        br = self.child.bounding_rect()
        sz = br.size()
        screen = self._game.screen_size
        z = _ratio(float(screen.x), float(sz.x))
        if zoom < z:
            zoom = z
        z = _ratio(float(screen.y), float(sz.y))
        if zoom < z:
            zoom = z

        sw2, sh2 = cfloat(screen.div(2))
        swz, shz = int(sw2 / zoom), int(sh2 / zoom)
        cent = project(projection, centre)
        cx, cy = cent.x, cent.y
        if cx - swz < br.min.x:
            cx = br.min.x + swz
        if cy - shz < br.min.y:
            cy = br.min.y + shz
        if cx + swz > br.max.x:
            cx = br.max.x - swz
        if cy + shz > br.max.y:
            cy = br.max.y - shz
        self.centre, self.zoom = Point(cx, cy), zoom

    def prepare(self, game: Any) -> None:
        """Keep a reference to the game (needed for the screen size)."""
        self._game = game

    def scan(self, visit: VisitFunc) -> None:
        """Visit the child."""
        visit(self.child)

    def transform(self) -> DrawOptions:
        """Return the camera transform: centre, zoom, rotate, then recentre."""
        cx, cy = cfloat(self.centre.mul(-1))
        sx, sy = cfloat(self._game.screen_size.div(2))
        geom = (
            GeoM()
            .translate(cx, cy)
            .scale(self.zoom, self.zoom)
            .rotate(self.rotation)
            .translate(sx, sy)
        )
        return DrawOptions(geom=geom)