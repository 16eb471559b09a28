from dataclasses import dataclass, field

from ichigo.engine.container import make_container
from ichigo.engine.drawdag import Dag, DrawDAG, draw_order_constraint
from ichigo.engine.game import Game
from ichigo.engine.traits import Hides
from ichigo.geom.box import Box
from ichigo.geom.int3 import Int3
from ichigo.geom.point import Point


@dataclass(frozen=True)
class _Fake:
    name: str

    def __str__(self):
        return self.name

    def draw(self, screen, opts):
        pass

    def bounding_box(self):
        return Box()


def _shape(d):
    return {k: (set(e.incoming), set(e.outgoing)) for k, e in d.items()}


u, v, w = _Fake("u"), _Fake("v"), _Fake("w")


def test_add_remove_edge():
    d = Dag()
    d.add_edge(u, v)
    assert _shape(d) == {u: (set(), {v}), v: ({u}, set())}
    d.remove_edge(u, v)
    assert _shape(d) == {u: (set(), set()), v: (set(), set())}


def test_add_vertex():
    d = Dag()
    d.add_vertex(u)
    assert _shape(d) == {u: (set(), set())}
    d.add_vertex(v)
    want = {u: (set(), set()), v: (set(), set())}
    assert _shape(d) == want
    d.add_vertex(u)
    assert _shape(d) == want


def test_remove_vertex():
    d = Dag()
    d.add_edge(u, v)
    d.add_edge(v, w)
    d.remove_vertex(u)
    want = {v: (set(), {w}), w: ({v}, set())}
    assert _shape(d) == want
    d.remove_vertex(u)
    assert _shape(d) == want
    d.remove_vertex(w)
    assert _shape(d) == {v: (set(), set())}


def test_top_walk():
    d = Dag()
    d.add_edge(u, v)
    d.add_edge(v, w)
    got = []
    d.top_walk(got.append)
    assert got == [u, v, w]


def test_top_walk_tolerates_cycle():
    d = Dag()
    d.add_edge(u, v)
    d.add_edge(v, w)
    d.add_edge(w, u)
    got = {}

    def visit(x):
        got[x] = got.get(x, 0) + 1

    d.top_walk(visit)
    assert got == {u: 1, v: 1, w: 1}


def test_dot_single_vertex():
    d = Dag()
    d.add_vertex(u)
    assert d.dot() == "digraph {\nu -> { }\n }\n"


@dataclass(frozen=True)
class _Boxed:
    name: str
    box: Box

    def draw(self, screen, opts):
        pass

    def bounding_box(self):
        return self.box


def test_draw_order_constraint_by_z():
    back = _Boxed("back", Box(Int3(0, 0, 0), Int3(4, 4, 1)))
    front = _Boxed("front", Box(Int3(0, 0, 1), Int3(4, 4, 2)))
    assert draw_order_constraint(back, front, Point()) is True
    assert draw_order_constraint(front, back, Point()) is False


def test_draw_order_constraint_by_projected_y():
    upper = _Boxed("upper", Box(Int3(0, 0, 0), Int3(4, 4, 4)))
    lower = _Boxed("lower", Box(Int3(0, 4, 0), Int3(4, 8, 4)))
    assert draw_order_constraint(lower, upper, Point(0, 1)) is True
    assert draw_order_constraint(upper, lower, Point(0, 1)) is False
    assert draw_order_constraint(upper, lower, Point()) is False


@dataclass(eq=False)
class _Sprite(Hides):
    name: str = ""
    box: Box = Box()
    log: list = field(default_factory=list)

    def bounding_box(self):
        return self.box

    def draw(self, screen, opts):
        self.log.append(self.name)


def _scene():
    log = []
    a = _Sprite(name="a", box=Box(Int3(0, 0, 0), Int3(10, 10, 1)), log=log)
    b = _Sprite(name="b", box=Box(Int3(0, 0, 1), Int3(10, 10, 2)), log=log)
    dag = DrawDAG(chunk_size=16, child=make_container(a, b))
    game = Game(root=dag)
    game.load_and_prepare(None)
    return game, dag, a, b, log


def test_drawdag_draws_back_to_front():
    game, _, _, _, log = _scene()
    game.draw(None)
    assert log == ["a", "b"]


def test_drawdag_skips_hidden():
    game, _, a, _, log = _scene()
    a.hide()
    game.draw(None)
    assert log == ["b"]


def test_drawdag_hidden_draws_nothing():
    game, dag, _, _, log = _scene()
    dag.hide()
    game.draw(None)
    assert log == []


def test_drawdag_update_reorders_moved_component():
    game, _, a, _, log = _scene()
    a.box = Box(Int3(0, 0, 2), Int3(10, 10, 3))
    game.update()
    game.draw(None)
    assert log == ["b", "a"]


def test_drawdag_unregister_removes_component():
    game, dag, a, _, log = _scene()
    dag.unregister(a)
    game.draw(None)
    assert log == ["b"]
    assert dag.manages_drawing_subcomponents() is None
    assert str(dag) == "DrawDAG"