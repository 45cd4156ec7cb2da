"""Common geometry and state of everything that can be drawn."""

from abc import ABC, abstractmethod

from .types import SceneId


def _flag(value):
    return int(bool(value))


class Base(ABC):
    """A named, positioned rectangle that may carry a bitmap."""

    def __init__(self, text, id, pos_x, pos_y, width, height, bitmap):
        self.text = text
        self.id = id
        self.pos_x = pos_x
        self.pos_y = pos_y
        self.width = width
        self.height = height
        self.bitmap = bitmap

    def set_position(self, pos_x, pos_y):
        self.pos_x = pos_x
        self.pos_y = pos_y

    def set_size(self, width, height):
        self.width = width
        self.height = height

    def label(self):
        """Text shown for this object in listings."""
        return self.text

    def describe(self):
        """Return a multi-line debug description."""
        lines = [
            "",
            "-" * 24,
            "Base properties:",
            f"TEXT   = {'NULL' if self.text is None else self.text}",
            f"ID     = {int(self.id)}",
            f"POS_X  = {self.pos_x}",
            f"POS_Y  = {self.pos_y}",
            f"WIDTH  = {self.width}",
            f"HEIGHT = {self.height}",
            f"BITMAP = {'NULL' if self.bitmap is None else self.bitmap}",
            "",
        ]
        return "\n".join(lines) + "\n"

    @abstractmethod
    def draw(self, canvas):
        """Paint the object on the canvas."""


class Element(Base):
    """An interactive object with highlight, selection, visibility and a scene link."""

    FRAME_THICKNESS = 6

    def __init__(self, text, id, pos_x, pos_y, width, height, bitmap, frame, go_to_scene):
        super().__init__(text, id, pos_x, pos_y, width, height, bitmap)
        self.highlighted = False
        self.selected = False
        self.enabled = False
        self.visible = False
        self.frame = frame
        self.go_to_scene = SceneId(go_to_scene)

    def enable(self):
        self.enabled = True

    def disable(self):
        self.enabled = False

    def select(self):
        self.selected = True

    def unselect(self):
        self.selected = False

    def show(self):
        self.visible = True

    def hide(self):
        self.visible = False

    def light_on(self):
        self.highlighted = True

    def light_off(self):
        self.highlighted = False

    def is_cursor_above(self, cursor_x, cursor_y):
        """True when the cursor lies strictly inside the element's rectangle."""
        return (
            self.pos_x < cursor_x < self.pos_x + self.width
            and self.pos_y < cursor_y < self.pos_y + self.height
        )

    def describe(self):
        lines = [
            "Element properties:",
            f"HIGHLIGHTED = {_flag(self.highlighted)}",
            f"SELECTED    = {_flag(self.selected)}",
            f"VISIBLE     = {_flag(self.visible)}",
            f"FRAME       = {_flag(self.frame)}",
            f"GOTO_SCENE  = {int(self.go_to_scene)}",
            "",
        ]
        return super().describe() + "\n".join(lines) + "\n"