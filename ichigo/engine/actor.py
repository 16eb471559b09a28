"""Basic movement with collision against a collision domain."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Any

from ichigo.engine.interface import Collider
from ichigo.geom.box import Box
from ichigo.geom.floats import Float3
from ichigo.geom.int3 import Int3
from ichigo.geom.point import sign

_log = logging.getLogger(__name__)


class _Collision(Exception):
    """Stops a collider query at the first hit."""


@dataclass(eq=False)
class Actor:
    """Moves in whole voxels, carrying fractional remainders between moves.

    Positions and bounds are in voxels; bounds are relative to pos.
    """

    collision_domain: str = ""
    pos: Int3 = Int3()
    bounds: Box = Box()

    _rem: Float3 = field(default_factory=Float3, init=False, repr=False)
    _game: Any = field(default=None, init=False, repr=False)

    def __str__(self) -> str:
        return f"Actor@{self.pos}"

    def bounding_box(self) -> Box:
        """Return the bounds offset by the position."""
        return self.bounds.add(self.pos)

    def collides_at(self, p: Int3) -> bool:
        """Report whether the actor would collide if it were at p."""
        bounds = self.bounds.add(p)
        domain = self._game.component(self.collision_domain)
        if domain is None:
            _log.warning("collision domain %r not found", self.collision_domain)
            return False

        def check(c: Any) -> None:
            if isinstance(c, Collider) and c.collides_with(bounds):
                raise _Collision()

        try:
            self._game.query(domain, Collider, check, None)
        except _Collision:
            return True
        return False

    def move_x(self, x: float, on_collide: Callable[[], None] | None = None) -> None:
        """Move x world units along X, calling on_collide on a collision.

        The actor is in the colliding position while on_collide runs.
        """
        self._move("x", x, on_collide)

    def move_y(self, y: float, on_collide: Callable[[], None] | None = None) -> None:
        """Like move_x, along Y."""
        self._move("y", y, on_collide)

    def move_z(self, z: float, on_collide: Callable[[], None] | None = None) -> None:
        """Like move_x, along Z."""
        self._move("z", z, on_collide)

    def _move(
        self, axis: str, amount: float, on_collide: Callable[[], None] | None
    ) -> None:
        rem = getattr(self._rem, axis) + amount / getattr(self._game.voxel_scale, axis)
        move = int(rem + 0.5)  # rounding half away from zero would cause vibration
        if move == 0:
            self._rem = replace(self._rem, **{axis: rem})
            return
        self._rem = replace(self._rem, **{axis: rem - move})
        step = sign(move)
        while move != 0:
            self.pos = replace(self.pos, **{axis: getattr(self.pos, axis) + step})
            move -= step
            if not self.collides_at(self.pos):
                continue
            if on_collide is not None:
                on_collide()
            self.pos = replace(self.pos, **{axis: getattr(self.pos, axis) - step})
            self._rem = replace(self._rem, **{axis: 0.0})
            return

    def prepare(self, game: Any) -> None:
        """Keep a reference to the game."""
        self._game = game