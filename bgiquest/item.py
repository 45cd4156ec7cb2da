"""Objects placed in scenes."""

from enum import IntEnum

from .base import Element
from .drawing import Color
from .drawing import frame as draw_frame


class ItemType(IntEnum):
    """How an item reacts to the player."""

    STATIC = 0
    INTERACTIVE = 1
    COLLECTIBLE = 2
    LINK = 3


class ItemId(IntEnum):
    """Known items; the order matches the item table of the game."""

    NONE = -1
    KOFOLA = 0
    RUM = 1
    GUITAR = 2
    NOTEBOOK = 3
    FRIDGE = 4
    OVEN = 5
    BOOTS = 6
    PICTURE = 7
    TV = 8
    DOOR = 9
    CAR = 10
    STUDIO_ENTRY = 11


class Item(Element):
    """A scene object drawn from its bitmap, optionally framed."""

    def __init__(self, text, id, x, y, width, height, bitmap, frame, go_to_scene, type):
        super().__init__(text, id, x, y, width, height, bitmap, frame, go_to_scene)
        self.type = ItemType(type)

    def draw(self, canvas):
        right = self.pos_x + self.width
        bottom = self.pos_y + self.height
        if self.bitmap is not None:
            canvas.image(self.bitmap, self.pos_x, self.pos_y, right, bottom)
        if self.frame:
            canvas.set_color(Color.YELLOW)
            draw_frame(canvas, self.pos_x, self.pos_y, right, bottom, self.FRAME_THICKNESS)

    def describe(self):
        lines = [
            "Item properties:",
            f"ID   = {int(self.id)}",
            f"TYPE = {int(self.type)}",
            "",
        ]
        return super().describe() + "\n".join(lines) + "\n"