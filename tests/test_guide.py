import pytest

from wireframe.guide import format_angle, guide_entries
from wireframe.model import HeightMap, Point
from wireframe.projection import Key, View


def _view():
    height_map = HeightMap([[Point(0), Point(0)], [Point(0), Point(1)]])
    return View(height_map, 10)


def _text_at(entries, x, y):
    return [entry.text for entry in entries if (entry.x, entry.y) == (x, y)]


@pytest.mark.parametrize("value, expected", [(0, "[0]"), (35, "[35]"), (-10, "[-10]")])
def test_multiples_of_five_are_kept(value, expected):
    assert format_angle(value) == expected


def test_other_values_move_away_from_zero():
    assert format_angle(36) == "[37]"
    assert format_angle(-36) == "[-37]"


def test_translate_step_is_shown():
    view = _view()
    assert _text_at(guide_entries(view), 120, 132) == [format_angle(view.translate_var)]
    view.handle_key(Key.TRANSLATE)
    assert _text_at(guide_entries(view), 120, 132) == [format_angle(view.translate_var)]


def test_isometric_angles_are_shown():
    entries = guide_entries(_view())
    assert _text_at(entries, 130, 185) == ["[35]"]
    assert _text_at(entries, 130, 207) == ["[35]"]
    assert _text_at(entries, 130, 229) == ["[-35]"]


def test_parallel_status_follows_view():
    view = _view()
    assert _text_at(guide_entries(view), 85, 281) == ["[Not Active]"]
    view.reset(parallel=True)
    entries = guide_entries(view)
    assert _text_at(entries, 80, 281) == [" [Active]"]
    assert _text_at(entries, 85, 281) == []


def test_colour_status_follows_view():
    view = _view()
    assert _text_at(guide_entries(view), 85, 311) == ["[Not Active]"]
    view.toggle_color()
    assert _text_at(guide_entries(view), 85, 311) == ["[Active]"]


def test_entries_start_and_end_fixed():
    entries = guide_entries(_view())
    assert entries[0] == (5, 13, "Zoom: ")
    assert entries[-1].y == 461
    assert len(entries) == len(guide_entries(_view()))