"""Text buttons of the control panel and menus."""

from enum import IntEnum

from .base import Element
from .drawing import Color, Justify
from .drawing import frame as draw_frame

_ARROW_PADDING = 2


class ButtonId(IntEnum):
    """Known buttons."""

    NONE = -1
    ARROW_LEFT = 0
    ARROW_RIGHT = 1
    MAP = 2
    MENU = 3
    NEW_GAME = 4
    SAVE = 5
    LOAD = 6
    SETTINGS = 7
    CREDITS = 8
    EXIT = 9


class Button(Element):
    """A button sized from its text; arrow buttons are one letter wide and three tall."""

    LETTER_HEIGHT = 23
    LETTER_WIDTH = 24

    def __init__(self, text, id, pos_x, pos_y, bitmap, frame, go_to_scene, clickable):
        is_arrow = id in (ButtonId.ARROW_LEFT, ButtonId.ARROW_RIGHT)
        if is_arrow:
            width = self.LETTER_WIDTH
            height = 3 * self.LETTER_HEIGHT + _ARROW_PADDING
        else:
            width = self.LETTER_WIDTH * len(text)
            height = self.LETTER_HEIGHT
        super().__init__(text, id, pos_x, pos_y, width, height, bitmap, frame, go_to_scene)
        self.clickable = clickable
        self.header = False

    def label(self):
        if self.id == ButtonId.ARROW_LEFT:
            return " <<<  "
        if self.id == ButtonId.ARROW_RIGHT:
            return "  >>> "
        return super().label()

    def draw(self, canvas):
        if self.header:
            background = Color.GREEN
        elif self.highlighted:
            background = Color.RED
        else:
            background = Color.LIGHTGREEN
        canvas.set_background(background)
        canvas.set_color(Color.LIGHTGREEN if self.header else Color.GREEN)
        canvas.text(self.pos_x, self.pos_y, self.text, Justify.TOP_LEFT)

        if self.frame:
            t = self.FRAME_THICKNESS
            canvas.set_color(Color.GREEN)
            draw_frame(
                canvas,
                self.pos_x - t,
                self.pos_y - t,
                self.pos_x + self.width + t,
                self.pos_y + self.height + t,
                t,
            )