"""Small mixins that give components an identity, bounds and on/off states."""

from __future__ import annotations

from dataclasses import dataclass

from ichigo.geom.point import Rectangle


@dataclass(eq=False)
class ID:
    """Implements Identifier with a stored string."""

    id: str = ""

    def ident(self) -> str:
        """Return the stored identifier."""
        return self.id


@dataclass(eq=False)
class Bounds:
    """Implements BoundingRecter with a stored rectangle."""

    bounds: Rectangle = Rectangle()

    def bounding_rect(self) -> Rectangle:
        """Return the stored rectangle."""
        return self.bounds


@dataclass(eq=False)
class Disables:
    """Implements Disabler with a stored flag."""

    disables: bool = False

    def disabled(self) -> bool:
        return self.disables

    def disable(self) -> None:
        self.disables = True

    def enable(self) -> None:
        self.disables = False


@dataclass(eq=False)
class Hides:
    """Implements Hider with a stored flag."""

    hides: bool = False

    def hidden(self) -> bool:
        return self.hides

    def hide(self) -> None:
        self.hides = True

    def show(self) -> None:
        self.hides = False