import pytest

from scheduling import CooperativeLoop
from typed_text import DELETE_DELAY_MS, TYPE_DELAY_MS, TypedText


def _typed(phrases):
    loop = CooperativeLoop()
    seen = []
    t = TypedText(phrases, loop, on_change=seen.append)
    t.start()
    return loop, t, seen


def test_types_then_deletes_then_moves_to_next_phrase():
    loop, t, seen = _typed(["Hi", "Yo"])

    loop.advance(2 * TYPE_DELAY_MS)
    assert t.text == "Hi"
    assert t.deleting is True

    loop.advance(DELETE_DELAY_MS)
    assert t.text == "H"

    loop.advance(DELETE_DELAY_MS)
    assert t.text == ""
    assert t.index == 1
    assert t.deleting is False

    loop.advance(TYPE_DELAY_MS)
    assert t.text == "Y"
    assert seen == ["H", "Hi", "H", "", "Y"]


def test_cycle_wraps_around_forever():
    loop, t, seen = _typed(["Hi", "Yo"])
    one_phrase = 2 * TYPE_DELAY_MS + 2 * DELETE_DELAY_MS

    loop.advance(2 * one_phrase)
    assert t.index == 0
    assert t.text == ""

    loop.advance(TYPE_DELAY_MS)
    assert t.text == "H"


def test_visible_text_is_always_a_prefix_of_current_phrase():
    loop = CooperativeLoop()
    t = TypedText(["abc", "de", "f"], loop)
    t.start()
    for _ in range(200):
        loop.advance(10)
        assert t.current.startswith(t.text)
        assert 0 <= len(t.text) <= len(t.current)


def test_no_tick_before_first_interval():
    loop, t, seen = _typed(["Hi"])
    loop.advance(TYPE_DELAY_MS - 1)
    assert t.text == ""
    assert seen == []


def test_dispose_cancels_timer():
    loop, t, seen = _typed(["Hi"])
    loop.advance(TYPE_DELAY_MS)
    t.dispose()
    loop.advance(1000)
    assert seen == ["H"]
    assert loop.idle
    assert not t.running


def test_set_phrases_reschedules_single_timer():
    loop, t, _ = _typed(["Hello"])
    loop.advance(3 * TYPE_DELAY_MS)
    assert t.text == "Hel"

    t.set_phrases(["Hey"])
    assert loop.pending_timers() == 1
    assert t.text == "He"

    loop.advance(TYPE_DELAY_MS)
    assert t.text == "Hey"
    assert t.deleting is True


def test_empty_phrase_list_rejected():
    with pytest.raises(ValueError):
        TypedText([], CooperativeLoop())
