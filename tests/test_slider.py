import pytest

from repovis.slider import PositionSlider


def make():
    return PositionSlider(300, 300)


def test_mouse_over_edges():
    slider = make()
    left = (slider.min[0], slider.min[1])
    right = (slider.max[0], slider.max[1])
    assert slider.mouse_over(left) == 0.0
    assert slider.mouse_over(right) == 1.0


def test_mouse_over_outside():
    slider = make()
    slider.mouse_over((slider.min[0], slider.min[1]))
    assert slider.mouse_over((0.0, 0.0)) is None
    assert slider.mouseover == -1.0


def test_click_sets_percent():
    slider = make()
    mid_x = (slider.min[0] + slider.max[0]) / 2
    result = slider.click((mid_x, slider.min[1]))
    assert result == pytest.approx(0.5)
    assert slider.percent == pytest.approx(0.5)
    assert slider.marker_x == pytest.approx(mid_x)


def test_click_outside_keeps_percent():
    slider = PositionSlider(300, 300, 0.25)
    assert slider.click((-5.0, -5.0)) is None
    assert slider.percent == 0.25


def test_fade_in_and_out():
    slider = make()
    slider.show()
    slider.logic(0.4)
    assert 0.0 < slider.alpha <= 1.0
    for _ in range(10):
        slider.logic(0.4)
    assert slider.alpha == 0.0


def test_hover_keeps_visible():
    slider = make()
    slider.mouse_over((slider.min[0], slider.min[1]))
    for _ in range(5):
        slider.logic(0.5)
    assert slider.alpha == 1.0


def test_caption_hidden_without_hover():
    slider = make()
    slider.set_caption("hello", 40)
    assert slider.caption_x() is None


def test_caption_kept_on_screen():
    slider = make()
    slider.set_caption("hello", 40)
    slider.mouse_over((slider.max[0], slider.min[1]))
    x = slider.caption_x()
    assert x + slider.caption_width <= slider.display_width
    slider.mouse_over((slider.min[0], slider.min[1]))
    assert slider.caption_x() >= 1.0


def test_empty_caption_has_no_width():
    slider = make()
    slider.set_caption("", 40)
    assert slider.caption_width == 0.0