"""The game: a component tree plus databases for querying it."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field
from typing import Any

from ichigo.engine.container import Container, make_container
from ichigo.engine.drawopts import DrawOptions
from ichigo.engine.interface import (
    BEHAVIOURS,
    Disabler,
    Identifier,
    Loader,
    Prepper,
    Registrar,
    Scanner,
    Skip,
    Updater,
    VisitFunc,
)
from ichigo.engine.traits import Disables, Hides
from ichigo.geom.floats import Float3
from ichigo.geom.point import Point
from ichigo.geom.projection import ElevationProjection

_log = logging.getLogger(__name__)


@dataclass(eq=False)
class Game(Disables, Hides):
    """Runs a tree of components under a designated root component."""

    projection: Any = None
    root: Any = None
    screen_size: Point = Point()
    voxel_scale: Float3 = Float3()

    _lock: Any = field(default_factory=threading.RLock, init=False, repr=False)
    _by_id: dict = field(default_factory=dict, init=False, repr=False)
    _by_ab: dict = field(default_factory=dict, init=False, repr=False)
    _parent: dict = field(default_factory=dict, init=False, repr=False)
    _children: dict = field(default_factory=dict, init=False, repr=False)

    def __str__(self) -> str:
        return "Game"

    def draw(self, screen: Any) -> None:
        """Draw the root, unless the game is hidden."""
        if self.hidden():
            return
        self.root.draw(screen, DrawOptions())

    def layout(self, outside_width: int, outside_height: int) -> tuple[int, int]:
        """Return the configured screen size."""
        return self.screen_size.x, self.screen_size.y

    def update(self) -> None:
        """Update components, children before parents, skipping disabled subtrees."""

        def pre(c: Any) -> None:
            if isinstance(c, Disabler) and c.disabled():
                raise Skip()

        def post(c: Any) -> None:
            if isinstance(c, Updater):
                c.update()

        self.query(self.root, Updater, pre, post)

    def ident(self) -> str:
        return "__GAME__"

    def component(self, id: str) -> Any:
        """Return the registered component with the given ID, or None."""
        with self._lock:
            return self._by_id.get(id)

    def parent(self, c: Any) -> Any:
        """Return the parent of a registered component, or None."""
        with self._lock:
            return self._parent.get(c)

    def children(self, c: Any) -> Container | None:
        """Return the direct subcomponents of c, or None if there are none."""
        with self._lock:
            return self._children.get(c)

    def path_register(self, component: Any, parent: Any) -> None:
        """Call register on every Registrar from the game down to parent."""
        for p in self.path(parent):
            if isinstance(p, Registrar):
                p.register(component, parent)

    def path_unregister(self, component: Any) -> None:
        """Call unregister on every Registrar from component up to the game."""
        for p in self.reverse_path(component):
            if isinstance(p, Registrar):
                p.unregister(component)

    def path(self, component: Any) -> list[Any]:
        """Return the components from the game down to component, inclusive."""
        return self.reverse_path(component)[::-1]

    def reverse_path(self, component: Any) -> list[Any]:
        """Return the components from component up to the game, inclusive."""
        stack = []
        with self._lock:
            p = component
            while p is not None:
                stack.append(p)
                p = self._parent.get(p)
        return stack

    def query(
        self,
        ancestor: Any,
        behaviour: type,
        visit_pre: VisitFunc | None = None,
        visit_post: VisitFunc | None = None,
    ) -> None:
        """Walk registered descendants of ancestor that lead to a behaviour.

        Every component on the way to a component with the behaviour is
        visited too. Raising Skip from visit_pre skips that component's
        descendants and its visit_post; a Skip raised for ancestor itself
        propagates to the caller.
        """
        if visit_pre is not None:
            visit_pre(ancestor)
        with self._lock:
            q = self._by_ab.get((ancestor, behaviour))
        if q is not None:

            def descend(x: Any) -> None:
                try:
                    self.query(x, behaviour, visit_pre, visit_post)
                except Skip:
                    pass

            q.scan(descend)
        if visit_post is not None:
            visit_post(ancestor)

    def scan(self, visit: VisitFunc) -> None:
        """Visit the root."""
        visit(self.root)

    def load(self, component: Any, assets: Any) -> None:
        """Load component and all its subcomponents recursively."""
        if isinstance(component, Loader):
            component.load(assets)
        if isinstance(component, Scanner):
            component.scan(lambda x: self.load(x, assets))

    def prepare(self, component: Any) -> None:
        """Prepare component and its subcomponents, descendants first."""

        def post(c: Any) -> None:
            if isinstance(c, Prepper):
                c.prepare(self)

        self.query(component, Prepper, None, post)

    def load_and_prepare(self, assets: Any) -> None:
        """Load everything, build the component databases, then prepare."""
        if self.projection is None:
            self.projection = ElevationProjection()
        if self.voxel_scale == Float3():
            self.voxel_scale = Float3(1.0, 1.0, 1.0)

        start = time.perf_counter()
        self.load(self.root, assets)
        _log.info("finished loading in %.6fs", time.perf_counter() - start)

        start = time.perf_counter()
        self._build()
        _log.info("finished building db in %.6fs", time.perf_counter() - start)

        start = time.perf_counter()
        self.prepare(self.root)
        _log.info("finished preparing in %.6fs", time.perf_counter() - start)

    def _build(self) -> None:
        with self._lock:
            self._by_id = {}
            self._by_ab = {}
            self._parent = {}
            self._children = {}
            self._register_recursive(self, None)

    def register(self, component: Any, parent: Any) -> None:
        """Register component and its descendants as a child of parent.

        Raises ValueError for a None component, a None parent (except for
        the game itself), or a duplicate ID.
        """
        if component is None:
            raise ValueError("nil component")
        if parent is None and component is not self:
            raise ValueError("nil parent")
        with self._lock:
            self._register_recursive(component, parent)

    def _register_recursive(self, component: Any, parent: Any) -> None:
        self._register_one(component, parent)
        if isinstance(component, Scanner):
            component.scan(lambda x: self._register_recursive(x, component))

    def _register_one(self, component: Any, parent: Any) -> None:
        if isinstance(component, Identifier):
            ident = component.ident()
            if ident:
                if ident in self._by_id:
                    raise ValueError(f"duplicate id {ident!r}")
                self._by_id[ident] = component

        self._parent[component] = parent
        kids = self._children.get(parent)
        if kids is None:
            self._children[parent] = make_container(component)
        else:
            kids.add(component)

        for b in BEHAVIOURS:
            if not isinstance(component, b):
                continue
            c, p = component, self._parent.get(component)
            while p is not None:
                key = (p, b)
                cont = self._by_ab.get(key)
                if cont is None:
                    self._by_ab[key] = make_container(c)
                elif cont.contains(c):
                    break
                else:
                    cont.add(c)
                c, p = p, self._parent.get(p)

    def unregister(self, component: Any) -> None:
        """Remove component and its descendants from the databases."""
        if component is None:
            return
        with self._lock:
            self._unregister_recursive(component)

    def _unregister_recursive(self, component: Any) -> None:
        kids = self._children.get(component)
        if kids is not None:
            kids.scan(self._unregister_recursive)
        self._unregister_one(component)

    def _unregister_one(self, component: Any) -> None:
        parent = self._parent.get(component)

        for b in BEHAVIOURS:
            if not isinstance(component, b):
                continue
            c, p = component, parent
            while p is not None:
                cont = self._by_ab.get((p, b))
                if cont is not None:
                    cont.remove(c)
                    if cont.item_count() > 0:
                        break
                c, p = p, self._parent.get(p)

        kids = self._children.get(parent)
        if kids is not None:
            kids.remove(component)
        self._parent.pop(component, None)

        if isinstance(component, Identifier):
            ident = component.ident()
            if ident:
                self._by_id.pop(ident, None)