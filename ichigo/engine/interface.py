"""Behaviours that components may implement, and visitor helpers."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ichigo.engine.drawopts import DrawOptions
    from ichigo.geom.box import Box
    from ichigo.geom.point import Rectangle

VisitFunc = Callable[[Any], None]


class Skip(Exception):
    """Raised by a visitor to skip the current component and its descendants."""

    def __init__(self, message: str = "skip") -> None:
        super().__init__(message)


@runtime_checkable
class BoundingBoxer(Protocol):
    """Components with a bounding box."""

    def bounding_box(self) -> Box:
        """Return the bounding box."""


@runtime_checkable
class BoundingRecter(Protocol):
    """Components with a bounding rectangle."""

    def bounding_rect(self) -> Rectangle:
        """Return the bounding rectangle."""


@runtime_checkable
class Collider(Protocol):
    """Components with tangible form."""

    def collides_with(self, b: Box) -> bool:
        """Report whether the box collides with this component."""


@runtime_checkable
class Disabler(Protocol):
    """Components that can be disabled."""

    def disabled(self) -> bool:
        """Report whether the component is disabled."""

    def disable(self) -> None:
        """Disable the component."""

    def enable(self) -> None:
        """Enable the component."""


@runtime_checkable
class Drawer(Protocol):
    """Components that can draw themselves."""

    def draw(self, screen: Any, opts: DrawOptions) -> None:
        """Draw onto screen using opts."""


@runtime_checkable
class DrawBoxer(BoundingBoxer, Drawer, Protocol):
    """Components that both draw and have a bounding box."""


@runtime_checkable
class DrawManager(Protocol):
    """Components that draw all Drawers beneath them."""

    def manages_drawing_subcomponents(self) -> None:
        """Mark the component as a draw manager."""


@runtime_checkable
class DrawOrderer(Protocol):
    """Components with their own ideas about draw ordering."""

    def draw_after(self, x: Drawer) -> bool:
        """Report whether this component must draw after x."""

    def draw_before(self, x: Drawer) -> bool:
        """Report whether this component must draw before x."""


@runtime_checkable
class Hider(Protocol):
    """Components that can be hidden."""

    def hidden(self) -> bool:
        """Report whether the component is hidden."""

    def hide(self) -> None:
        """Hide the component."""

    def show(self) -> None:
        """Show the component."""


@runtime_checkable
class Identifier(Protocol):
    """Components with an identity; the empty string means none."""

    def ident(self) -> str:
        """Return the identifier."""


@runtime_checkable
class Loader(Protocol):
    """Components that load themselves from assets before preparation."""

    def load(self, assets: Any) -> None:
        """Load from the asset store."""


@runtime_checkable
class Prepper(Protocol):
    """Components prepared after the component database is built."""

    def prepare(self, game: Any) -> None:
        """Prepare using the game."""


@runtime_checkable
class Registrar(Protocol):
    """Components that register and unregister other components."""

    def register(self, component: Any, parent: Any) -> None:
        """Register component (and its descendants) under parent."""

    def unregister(self, component: Any) -> None:
        """Unregister component and its descendants."""


@runtime_checkable
class Saver(Protocol):
    """Components that can be saved."""

    def save(self) -> None:
        """Save the component."""


@runtime_checkable
class Scanner(Protocol):
    """Components whose immediate subcomponents can be visited."""

    def scan(self, visit: VisitFunc) -> None:
        """Call visit on each immediate subcomponent."""


@runtime_checkable
class Transformer(Protocol):
    """Components providing draw options for themselves and their children."""

    def transform(self) -> DrawOptions:
        """Return the draw options to apply."""


@runtime_checkable
class Updater(Protocol):
    """Components that update themselves each tick."""

    def update(self) -> None:
        """Update the component."""


BEHAVIOURS: tuple[type, ...] = (
    BoundingBoxer,
    BoundingRecter,
    Collider,
    Disabler,
    DrawBoxer,
    Drawer,
    DrawManager,
    DrawOrderer,
    Hider,
    Identifier,
    Loader,
    Prepper,
    Registrar,
    Saver,
    Scanner,
    Transformer,
    Updater,
)


def behaviour_name(behaviour: type) -> str:
    """Return the name of a behaviour."""
    return behaviour.__name__


def visit_many(visit: VisitFunc, *args: Any) -> None:
    """Call visit on each argument in order, stopping at the first exception."""
    for x in args:
        visit(x)