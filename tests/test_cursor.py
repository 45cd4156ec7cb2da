from bgiquest.cursor import Cursor
from bgiquest.drawing import Canvas


def test_starts_at_origin():
    cursor = Cursor("arrow.png")
    assert (cursor.pos_x, cursor.pos_y) == (0, 0)


def test_update_position():
    cursor = Cursor("arrow.png")
    cursor.update_position(120, 45)
    assert (cursor.pos_x, cursor.pos_y) == (120, 45)


def test_draw_icon_ends_at_position():
    cursor = Cursor("arrow.png")
    cursor.update_position(100, 80)
    canvas = Canvas()
    cursor.draw(canvas)
    assert canvas.commands == [
        ("image", "arrow.png", 100, 80, 100 - Cursor.SIZE, 80 - Cursor.SIZE)
    ]


def test_draw_without_icon_paints_nothing():
    cursor = Cursor()
    canvas = Canvas()
    cursor.draw(canvas)
    assert canvas.commands == []