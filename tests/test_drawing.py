import pytest

from bgiquest.drawing import Canvas, Color, Justify, LineStyle, frame


def _rectangles(canvas):
    return [c[1:] for c in canvas.commands if c[0] == "rectangle"]


def test_frame_draws_one_rectangle_per_pixel_of_thickness():
    canvas = Canvas()
    frame(canvas, 10, 20, 110, 220, 5)
    rects = _rectangles(canvas)
    assert len(rects) == 5
    assert rects[0] == (10, 20, 110, 220)


def test_frame_rectangles_shrink_inwards():
    canvas = Canvas()
    frame(canvas, 0, 0, 50, 40, 4)
    rects = _rectangles(canvas)
    for outer, inner in zip(rects, rects[1:]):
        assert inner[0] == outer[0] + 1
        assert inner[1] == outer[1] + 1
        assert inner[2] == outer[2] - 1
        assert inner[3] == outer[3] - 1


def test_frame_default_thickness_and_style():
    canvas = Canvas()
    canvas.set_line_style(LineStyle.DASHED, 7)
    frame(canvas, 0, 0, 10, 10)
    assert len(_rectangles(canvas)) == 3
    assert canvas.line_style is LineStyle.SOLID
    assert canvas.thickness == 1


def test_frame_custom_line_style():
    canvas = Canvas()
    frame(canvas, 0, 0, 10, 10, 2, LineStyle.DOTTED)
    assert canvas.line_style is LineStyle.DOTTED


def test_frame_zero_thickness_draws_nothing():
    canvas = Canvas()
    frame(canvas, 0, 0, 10, 10, 0)
    assert canvas.commands == []


def test_canvas_keeps_pen_state():
    canvas = Canvas()
    canvas.set_color(Color.RED)
    canvas.set_background(Color.GREEN)
    canvas.set_fill(Color.YELLOW)
    assert (canvas.color, canvas.background, canvas.fill) == (
        Color.RED,
        Color.GREEN,
        Color.YELLOW,
    )


def test_canvas_rejects_unknown_colour():
    canvas = Canvas()
    with pytest.raises(ValueError):
        canvas.set_color(99)


def test_canvas_records_primitives_in_order():
    canvas = Canvas()
    canvas.line(1, 2, 3, 4)
    canvas.circle(5, 6, 7)
    canvas.text(8, 9, "Empty", Justify.CENTER)
    canvas.image("pic.jpg", 0, 0, 10, 10)
    assert canvas.commands == [
        ("line", 1, 2, 3, 4),
        ("circle", 5, 6, 7),
        ("text", 8, 9, "Empty", Justify.CENTER),
        ("image", "pic.jpg", 0, 0, 10, 10),
    ]