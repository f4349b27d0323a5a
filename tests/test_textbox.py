import pytest

from repovis.textbox import TextBox


def _measure(text):
    return 8.0 * len(text)


@pytest.fixture
def box():
    return TextBox(12, _measure, 800, 600)


def test_visibility(box):
    assert box.visible is False
    box.show()
    assert box.visible is True
    box.hide()
    assert box.visible is False


def test_clear_resets_size(box):
    box.add_line("hello")
    box.clear()
    assert box.lines == []
    assert box.rect_width == 0
    assert box.rect_height == 2


def test_add_line_grows_box(box):
    box.clear()
    box.add_line("ab")
    assert box.rect_width == int(_measure("ab") + 6)
    assert box.rect_height == 2 + box.line_height
    box.add_line("a")
    assert box.rect_width == int(_measure("ab") + 6)
    assert box.rect_height == 2 + 2 * box.line_height


def test_add_line_truncates(box):
    box.add_line("x" * 2000)
    assert len(box.lines[0]) == box.max_width_chars


def test_set_text_string_and_list(box):
    box.set_text("one")
    assert box.lines == ["one"]
    box.set_text(["a", "bb", "ccc"])
    assert box.lines == ["a", "bb", "ccc"]
    assert box.rect_width == int(_measure("ccc") + 6)
    assert box.rect_height == 2 + 3 * box.line_height


def test_set_pos_without_adjust(box):
    box.set_text("text")
    box.set_pos((50, 60))
    assert box.corner == (50.0, 60.0)


def test_set_pos_adjust_places_above(box):
    box.set_text("text")
    box.set_pos((100, 300), adjust=True)
    assert box.corner == (100.0, 300.0 - box.rect_height)


def test_set_pos_adjust_flips_left_at_right_edge(box):
    box.set_text("a long caption")
    x = 790
    box.set_pos((x, 300), adjust=True)
    assert box.corner[0] == x - box.rect_width
    assert box.corner[0] + box.rect_width <= box.display_width


def test_set_pos_adjust_moves_below_at_top(box):
    box.set_text("text")
    box.set_pos((100, 5), adjust=True)
    assert box.corner[1] == 5 + box.line_height
    assert box.corner[1] >= 0


def test_set_pos_adjust_pins_to_right_when_no_room(box):
    narrow = TextBox(12, _measure, 100, 600)
    narrow.set_text("wide text here")
    narrow.set_pos((20, 300), adjust=True)
    assert narrow.corner[0] == narrow.display_width - narrow.rect_width


def test_line_positions(box):
    box.set_text(["a", "b"])
    box.set_pos((10, 20))
    positions = box.line_positions()
    assert positions[0] == (12, 23, "a")
    assert positions[1][1] - positions[0][1] == box.line_height