"""Draw ordering of components through a directed acyclic graph."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any, NamedTuple

from ichigo.engine.drawopts import DrawOptions, concat_opts
from ichigo.engine.interface import (
    DrawBoxer,
    DrawManager,
    DrawOrderer,
    Hider,
    Skip,
    Transformer,
    VisitFunc,
)
from ichigo.engine.traits import Disables, Hides
from ichigo.geom.box import Box
from ichigo.geom.point import Point, Rectangle

_log = logging.getLogger(__name__)


@dataclass(eq=False)
class _Edges:
    incoming: set = field(default_factory=set)
    outgoing: set = field(default_factory=set)


def _set_str(s: set) -> str:
    return "{ " + "".join(f"{x} " for x in s) + "}"


class Dag(dict):
    """A graph mapping each vertex to its incoming and outgoing edge sets."""

    def dot(self) -> str:
        """Return a dot-like description of the graph."""
        lines = "".join(f"{v} -> {_set_str(e.outgoing)}\n" for v, e in self.items())
        return "digraph {\n" + lines + " }\n"

    def add_vertex(self, v: Any) -> None:
        """Ensure v is present, even without edges."""
        if v not in self:
            self[v] = _Edges()

    def remove_vertex(self, v: Any) -> None:
        """Remove v and every edge touching it."""
        e = self.pop(v, None)
        if e is None:
            return
        for u in e.incoming:
            self[u].outgoing.discard(v)
        for w in e.outgoing:
            self[w].incoming.discard(v)

    def add_edge(self, u: Any, v: Any) -> None:
        """Add the edge u -> v, adding the vertices as needed."""
        self.add_vertex(u)
        self.add_vertex(v)
        self[v].incoming.add(u)
        self[u].outgoing.add(v)

    def remove_edge(self, u: Any, v: Any) -> None:
        """Remove the edge u -> v if present."""
        if v in self:
            self[v].incoming.discard(u)
        if u in self:
            self[u].outgoing.discard(v)

    def top_walk(self, visit: Callable[[Any], None]) -> None:
        """Visit every vertex once in topological order, breaking cycles."""
        queue: deque = deque()
        indegree: dict[Any, int] = {}
        for v, e in self.items():
            if e.incoming:
                indegree[v] = len(e.incoming)
            else:
                queue.append(v)

        while indegree or queue:
            if not queue:
                minv = min(indegree, key=indegree.__getitem__)
                _log.warning(
                    "breaking cycle in 'DAG' by enqueueing %s with indegree %d",
                    minv,
                    indegree[minv],
                )
                queue.append(minv)
                del indegree[minv]

            while queue:
                u = queue.popleft()
                visit(u)
                for v in self[u].outgoing:
                    if v not in indegree:
                        continue  # already visited, because of a cycle
                    indegree[v] -= 1
                    if indegree[v] == 0:
                        queue.append(v)
                        del indegree[v]


class _State(NamedTuple):
    hidden: bool = False
    opts: DrawOptions = DrawOptions()


def _chunk_points(r: Rectangle, chunk_size: int) -> Iterator[Point]:
    lo = r.min.div(chunk_size)
    hi = r.max.sub(Point(1, 1)).div(chunk_size)
    for y in range(lo.y, hi.y + 1):
        for x in range(lo.x, hi.x + 1):
            yield Point(x, y)


def draw_order_constraint(u: Any, v: Any, proj_sign: Point) -> bool:
    """Report whether u must be drawn before v."""
    ub, vb = u.bounding_box(), v.bounding_box()
    if ub.min.z >= vb.max.z:  # u is in front of v
        return False
    if ub.max.z <= vb.min.z:  # u is behind v
        return True
    if proj_sign.x != 0:
        if ub.max.x * proj_sign.x <= vb.min.x * proj_sign.x:
            return False
        if ub.min.x * proj_sign.x >= vb.max.x * proj_sign.x:
            return True
    if proj_sign.y != 0:
        if ub.max.y * proj_sign.y <= vb.min.y * proj_sign.y:
            return False
        if ub.min.y * proj_sign.y >= vb.max.y * proj_sign.y:
            return True
    if isinstance(u, DrawOrderer) and u.draw_before(v):
        return True
    if isinstance(v, DrawOrderer) and v.draw_after(u):
        return True
    return False


@dataclass(eq=False)
class DrawDAG(Disables, Hides):
    """Draws DrawBoxer descendants in an order respecting their constraints.

    A spatial index of chunks limits the pairs of components compared when
    edges are computed.
    """

    chunk_size: int = 0
    child: Any = None

    _dag: Dag = field(default_factory=Dag, init=False, repr=False)
    _box_cache: dict = field(default_factory=dict, init=False, repr=False)
    _chunks: dict = field(default_factory=dict, init=False, repr=False)
    _game: Any = field(default=None, init=False, repr=False)

    def __str__(self) -> str:
        return "DrawDAG"

    def draw(self, screen: Any, opts: DrawOptions) -> None:
        """Draw everything in topological order, honouring hidden ancestors."""
        if self.hidden():
            return
        cache: dict[Any, _State] = {self: _State(False, opts)}

        def visit(x: Any) -> None:
            if isinstance(x, Hider) and x.hidden():
                cache[x] = _State(hidden=True)
                return
            st = _State()
            stack = [x]
            p = self._game.parent(x)
            while p is not None:
                if p in cache:
                    st = cache[p]
                    break
                stack.append(p)
                p = self._game.parent(p)
            for p in reversed(stack):
                hidden = st.hidden or (isinstance(p, Hider) and p.hidden())
                if hidden:
                    st = _State(hidden=True, opts=st.opts)
                    cache[p] = _State(hidden=True)
                    continue
                if isinstance(p, Transformer):
                    st = _State(False, concat_opts(p.transform(), st.opts))
                cache[p] = st
            if st.hidden:
                return
            x.draw(screen, st.opts)

        self._dag.top_walk(visit)

    def manages_drawing_subcomponents(self) -> None:
        """Mark this component as a draw manager."""

    def prepare(self, game: Any) -> None:
        """Reset the internal structures and register all descendants."""
        self._dag = Dag()
        self._box_cache = {}
        self._chunks = {}
        self._game = game
        self.register(self.child, None)

    def scan(self, visit: VisitFunc) -> None:
        visit(self.child)

    def update(self) -> None:
        """Re-register descendants whose bounding boxes have changed."""
        readd = [db for db, bb in self._box_cache.items() if db.bounding_box() != bb]
        for db in readd:
            self._unregister_one(db)
        for db in readd:
            self._register_one(db)

    def register(self, component: Any, parent: Any = None) -> None:
        """Register component and its DrawBoxer descendants, stopping at
        other draw managers."""

        def pre(c: Any) -> None:
            if isinstance(c, DrawBoxer):
                self._register_one(c)
            if isinstance(c, DrawManager) and c is not self:
                raise Skip()

        try:
            self._game.query(component, DrawBoxer, pre, None)
        except Skip:
            pass

    def _register_one(self, x: Any) -> None:
        self._dag.add_vertex(x)
        xb = x.bounding_box()
        self._box_cache[x] = xb
        projection = self._game.projection
        xbr = xb.bounding_rect(projection)

        cand: set = set()
        for p in _chunk_points(xbr, self.chunk_size):
            chunk = self._chunks.get(p)
            if chunk is None:
                self._chunks[p] = {x}
                continue
            cand |= chunk
            chunk.add(x)

        proj_sign = projection.sign()
        for y in cand:
            if y == x:
                continue
            if not xbr.overlaps(y.bounding_box().bounding_rect(projection)):
                continue
            if draw_order_constraint(x, y, proj_sign):
                self._dag.add_edge(x, y)
            elif draw_order_constraint(y, x, proj_sign):
                self._dag.add_edge(y, x)

    def unregister(self, component: Any) -> None:
        """Unregister component and its DrawBoxer descendants."""

        def pre(c: Any) -> None:
            if isinstance(c, DrawBoxer):
                self._unregister_one(c)
            if isinstance(c, DrawManager) and c is not self:
                raise Skip()

        try:
            self._game.query(component, DrawBoxer, pre, None)
        except Skip:
            pass

    def _unregister_one(self, x: Any) -> None:
        xbr = self._box_cache.get(x, Box()).bounding_rect(self._game.projection)
        for p in _chunk_points(xbr, self.chunk_size):
            chunk = self._chunks.get(p)
            if chunk:
                chunk.discard(x)
        self._box_cache.pop(x, None)
        self._dag.remove_vertex(x)