import pytest

from ichigo.engine.interface import (
    BEHAVIOURS,
    Skip,
    behaviour_name,
    visit_many,
)


class _FakeDrawBoxer:
    def draw(self, screen, opts):
        pass

    def bounding_box(self):
        return None


class _FakeHiderIdent:
    def __init__(self):
        self._hidden = False

    def hidden(self):
        return self._hidden

    def hide(self):
        self._hidden = True

    def show(self):
        self._hidden = False

    def ident(self):
        return "fake"


def _matching(component):
    return [behaviour_name(b) for b in BEHAVIOURS if isinstance(component, b)]


def test_behaviour_names_in_order():
    assert [behaviour_name(b) for b in BEHAVIOURS] == [
        "BoundingBoxer",
        "BoundingRecter",
        "Collider",
        "Disabler",
        "DrawBoxer",
        "Drawer",
        "DrawManager",
        "DrawOrderer",
        "Hider",
        "Identifier",
        "Loader",
        "Prepper",
        "Registrar",
        "Saver",
        "Scanner",
        "Transformer",
        "Updater",
    ]


def test_draw_boxer_matches_its_behaviours():
    assert _matching(_FakeDrawBoxer()) == ["BoundingBoxer", "DrawBoxer", "Drawer"]


def test_hider_identifier_matches_its_behaviours():
    assert _matching(_FakeHiderIdent()) == ["Hider", "Identifier"]


def test_plain_object_matches_nothing():
    assert _matching(object()) == []


def test_skip_message():
    err = Skip()
    assert str(err) == "skip"
    assert isinstance(err, Exception)


def test_visit_many_visits_in_order():
    seen = []
    visit_many(seen.append, 1, "two", 3)
    assert seen == [1, "two", 3]


def test_visit_many_stops_at_first_error():
    seen = []

    def visit(x):
        seen.append(x)
        if x == "b":
            raise Skip()

    with pytest.raises(Skip):
        visit_many(visit, "a", "b", "c")
    assert seen == ["a", "b"]