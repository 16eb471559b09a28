from ichigo.engine.anim import Anim, AnimDef, AnimStep


def _looping():
    return AnimDef(steps=[AnimStep(cell=3, duration=2), AnimStep(cell=5, duration=1)])


def test_new_anim_starts_at_first_step():
    d = _looping()
    a = d.new_anim()
    assert a.anim_def is d
    assert (a.index, a.ticks) == (0, 0)
    assert a.cell() == 3


def test_looping_anim_advances_and_wraps():
    a = _looping().new_anim()
    cells = []
    for _ in range(4):
        a.update()
        cells.append(a.cell())
    assert cells == [3, 5, 3, 3]


def test_one_shot_stays_on_last_step():
    d = AnimDef(
        steps=[AnimStep(cell=0, duration=1), AnimStep(cell=7, duration=1)],
        one_shot=True,
    )
    a = d.new_anim()
    for _ in range(10):
        a.update()
    assert a.cell() == 7
    assert a.index == len(d.steps) - 1


def test_reset_returns_to_start():
    a = _looping().new_anim()
    a.update()
    a.update()
    assert a.cell() == 5
    a.reset()
    assert (a.index, a.ticks) == (0, 0)
    assert a.cell() == 3


def test_distinct_anims_have_independent_state():
    d = _looping()
    a, b = d.new_anim(), d.new_anim()
    a.update()
    a.update()
    assert a.index != b.index
    assert b == b and a is not b
    assert b.cell() == d.steps[0].cell