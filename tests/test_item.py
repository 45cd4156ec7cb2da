import pytest

from bgiquest.drawing import Canvas, Color
from bgiquest.item import Item, ItemId, ItemType
from bgiquest.types import SceneId


def _item(bitmap=None, frame=False, type=ItemType.COLLECTIBLE):
    return Item("Rum", ItemId.RUM, 490, 300, 75, 75, bitmap, frame, SceneId.NONE, type)


def test_item_ids_follow_table_order():
    looked_up = [ItemId(i) for i in range(12)]
    assert looked_up == [i for i in ItemId if i is not ItemId.NONE]
    assert ItemId(11) is ItemId.STUDIO_ENTRY


def test_item_type_is_kept():
    assert _item(type=3).type is ItemType.LINK


def test_invalid_item_type_rejected():
    with pytest.raises(ValueError):
        _item(type=42)


def test_draw_bitmap_fills_rectangle():
    canvas = Canvas()
    _item(bitmap="rum.jpg").draw(canvas)
    assert canvas.commands == [("image", "rum.jpg", 490, 300, 565, 375)]


def test_draw_without_bitmap_or_frame_draws_nothing():
    canvas = Canvas()
    _item().draw(canvas)
    assert canvas.commands == []


def test_draw_frame_in_yellow():
    canvas = Canvas()
    item = _item(frame=True)
    item.draw(canvas)
    rects = [c[1:] for c in canvas.commands if c[0] == "rectangle"]
    assert len(rects) == Item.FRAME_THICKNESS
    assert rects[0] == (item.pos_x, item.pos_y, item.pos_x + item.width, item.pos_y + item.height)
    assert canvas.color is Color.YELLOW


def test_describe_includes_type():
    report = _item(type=ItemType.STATIC).describe()
    assert "TEXT   = Rum" in report
    assert "TYPE = 0" in report
    assert "ID   = 1" in report


def test_item_hit_test():
    item = _item()
    assert item.is_cursor_above(500, 310)
    assert not item.is_cursor_above(600, 310)