"""Images made of a grid of equally sized cells, with animations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from PIL import Image

from ichigo.engine.anim import Anim, AnimDef
from ichigo.engine.imageref import ImageRef
from ichigo.engine.interface import VisitFunc
from ichigo.geom.point import Point, cmul, idiv


@dataclass(eq=False)
class Sheet:
    """A grid of cells in one image, plus animations that use the cells."""

    anim_defs: dict[str, AnimDef | None] = field(default_factory=dict)
    cell_size: Point = Point()
    src: ImageRef = field(default_factory=ImageRef)

    _w: int = field(default=0, init=False, repr=False)

    def __str__(self) -> str:
        return "Sheet"

    def new_anim(self, key: str) -> Anim | None:
        """Return a new Anim for key, or None if there is no such definition."""
        d = self.anim_defs.get(key)
        return None if d is None else d.new_anim()

    def new_anims(self) -> dict[str, Anim | None]:
        """Return a new Anim for every definition."""
        return {k: (None if d is None else d.new_anim()) for k, d in self.anim_defs.items()}

    def prepare(self, game: Any) -> None:
        """Compute the width of the image in cells."""
        self._w = idiv(self.src.image().width, self.cell_size.x)

    def scan(self, visit: VisitFunc) -> None:
        """Visit the image reference."""
        visit(self.src)

    def sub_image(self, i: int) -> Image.Image:
        """Return the image of cell i, counting left to right, top to bottom."""
        row = idiv(i, self._w)
        col = i - row * self._w
        p = cmul(Point(col, row), self.cell_size)
        q = p.add(self.cell_size)
        return self.src.image().crop((p.x, p.y, q.x, q.y))