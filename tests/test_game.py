from dataclasses import dataclass, field
from typing import Any

import pytest

from ichigo.engine.drawopts import DrawOptions
from ichigo.engine.game import Game
from ichigo.engine.interface import Skip, Updater
from ichigo.engine.traits import ID, Disables, Hides
from ichigo.geom.box import Box
from ichigo.geom.floats import Float3
from ichigo.geom.point import Point
from ichigo.geom.projection import ElevationProjection, SimpleProjection


@dataclass(frozen=True)
class FakeDrawBoxer:
    name: str

    def draw(self, screen, opts):
        pass

    def bounding_box(self):
        return Box()


@dataclass(eq=False)
class Node(ID, Disables, Hides):
    kids: list = field(default_factory=list)

    def scan(self, visit):
        for k in self.kids:
            visit(k)


@dataclass(eq=False)
class Ticker(ID, Disables):
    ticks: int = 0

    def update(self):
        self.ticks += 1


@dataclass(eq=False)
class Store(ID):
    loaded: list = field(default_factory=list)
    game: Any = None

    def load(self, assets):
        self.loaded.append(assets)

    def prepare(self, game):
        self.game = game


@dataclass(eq=False)
class Painter:
    calls: list = field(default_factory=list)

    def draw(self, screen, opts):
        self.calls.append((screen, opts))


def _name(c):
    return c.id if hasattr(c, "id") else str(c)


@pytest.fixture
def tree():
    t1 = Ticker(id="t1")
    t2 = Ticker(id="t2")
    n = Node(id="n", kids=[t2])
    root = Node(id="root", kids=[t1, n])
    game = Game(root=root)
    game.load_and_prepare(None)
    return game, root, t1, n, t2


def test_game_load_and_prepare():
    root = FakeDrawBoxer("fake")
    game = Game(root=root)
    game.load_and_prepare(None)
    assert game.parent(root) is game
    assert game.children(game).element(0) == root


def test_load_and_prepare_sets_defaults():
    game = Game(root=FakeDrawBoxer("fake"))
    game.load_and_prepare(None)
    assert game.projection == ElevationProjection()
    assert game.voxel_scale == Float3(1.0, 1.0, 1.0)


def test_load_and_prepare_keeps_configuration():
    game = Game(
        root=FakeDrawBoxer("fake"),
        projection=SimpleProjection(),
        voxel_scale=Float3(1.0, 1.0, 2.0),
    )
    game.load_and_prepare(None)
    assert game.projection == SimpleProjection()
    assert game.voxel_scale == Float3(1.0, 1.0, 2.0)


def test_component_parent_children_and_paths(tree):
    game, root, t1, n, t2 = tree
    assert game.component("n") is n
    assert game.component("__GAME__") is game
    assert game.component("missing") is None
    assert game.parent(t2) is n
    assert game.parent(root) is game
    assert list(game.children(root)) == [t1, n]
    assert game.path(t2) == [game, root, n, t2]
    assert game.reverse_path(t2) == [t2, n, root, game]


def test_ident_and_str():
    game = Game()
    assert game.ident() == "__GAME__"
    assert str(game) == "Game"


def test_duplicate_id_raises():
    root = Node(id="root", kids=[Node(id="dup"), Node(id="dup")])
    game = Game(root=root)
    with pytest.raises(ValueError, match="duplicate id"):
        game.load_and_prepare(None)


def test_register_rejects_none(tree):
    game, root, *_ = tree
    with pytest.raises(ValueError, match="nil component"):
        game.register(None, root)
    with pytest.raises(ValueError, match="nil parent"):
        game.register(Ticker(id="orphan"), None)


def test_query_visit_order(tree):
    game, root, *_ = tree
    pre, post = [], []
    game.query(root, Updater, lambda c: pre.append(_name(c)), lambda c: post.append(_name(c)))
    assert pre == ["root", "t1", "n", "t2"]
    assert post == ["t1", "t2", "n", "root"]


def test_query_skip_prunes_subtree(tree):
    game, root, *_ = tree
    pre, post = [], []

    def visit_pre(c):
        pre.append(_name(c))
        if _name(c) == "n":
            raise Skip()

    game.query(root, Updater, visit_pre, lambda c: post.append(_name(c)))
    assert pre == ["root", "t1", "n"]
    assert post == ["t1", "root"]


def test_query_propagates_other_errors(tree):
    game, root, *_ = tree

    def visit_pre(c):
        if _name(c) == "t2":
            raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        game.query(root, Updater, visit_pre, None)


def test_update_skips_disabled_subtree(tree):
    game, root, t1, n, t2 = tree
    n.disable()
    game.update()
    assert t1.ticks == 1
    assert t2.ticks == 0
    n.enable()
    game.update()
    assert t1.ticks == 2
    assert t2.ticks == 1


def test_load_and_prepare_calls_loaders_and_preppers():
    store = Store(id="store")
    root = Node(id="root", kids=[store])
    game = Game(root=root)
    assets = object()
    game.load_and_prepare(assets)
    assert store.loaded == [assets]
    assert store.game is game


def test_unregister_removes_subtree(tree):
    game, root, t1, n, t2 = tree
    game.unregister(n)
    assert game.component("n") is None
    assert game.component("t2") is None
    assert game.parent(t2) is None
    assert not game.children(root).contains(n)
    pre = []
    game.query(root, Updater, lambda c: pre.append(_name(c)), None)
    assert pre == ["root", "t1"]


def test_register_after_build(tree):
    game, root, t1, n, t2 = tree
    t3 = Ticker(id="t3")
    game.register(t3, n)
    assert game.parent(t3) is n
    game.update()
    assert t3.ticks == 1
    pre = []
    game.query(root, Updater, lambda c: pre.append(_name(c)), None)
    assert pre == ["root", "t1", "n", "t2", "t3"]


def test_path_register_and_unregister(tree):
    game, root, t1, n, t2 = tree
    t3 = Ticker(id="t3")
    game.path_register(t3, n)
    assert game.component("t3") is t3
    game.path_unregister(t3)
    assert game.component("t3") is None
    assert game.parent(t3) is None


def test_draw_respects_hidden():
    painter = Painter()
    game = Game(root=painter)
    game.hide()
    game.draw("screen")
    assert painter.calls == []
    game.show()
    game.draw("screen")
    assert painter.calls == [("screen", DrawOptions())]


def test_layout_returns_screen_size():
    game = Game(screen_size=Point(320, 240))
    assert game.layout(640, 480) == (320, 240)