"""A minimal collider defined by a single box."""

from __future__ import annotations

from dataclasses import dataclass

from ichigo.engine.traits import ID
from ichigo.geom.box import Box


@dataclass(eq=False)
class SolidRect(ID):
    """A collider occupying exactly one box."""

    box: Box = Box()

    def collides_with(self, r: Box) -> bool:
        """Report whether r overlaps the box."""
        return self.box.overlaps(r)