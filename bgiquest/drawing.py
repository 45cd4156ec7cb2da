"""Drawing primitives: colours, styles and a recording canvas."""

from enum import Enum, IntEnum

NORM_WIDTH = 1


class Color(IntEnum):
    """The sixteen classic palette colours."""

    BLACK = 0
    BLUE = 1
    GREEN = 2
    CYAN = 3
    RED = 4
    MAGENTA = 5
    BROWN = 6
    LIGHTGRAY = 7
    DARKGRAY = 8
    LIGHTBLUE = 9
    LIGHTGREEN = 10
    LIGHTCYAN = 11
    LIGHTRED = 12
    LIGHTMAGENTA = 13
    YELLOW = 14
    WHITE = 15


class LineStyle(IntEnum):
    """Line patterns."""

    SOLID = 0
    DOTTED = 1
    CENTER = 2
    DASHED = 3


class Justify(Enum):
    """Where a text is anchored relative to its reference point."""

    TOP_LEFT = "top-left"
    CENTER = "center"


class Canvas:
    """A drawing surface that keeps the current pen state and records every primitive.

    Subclasses that paint on a real surface override the primitives and
    may call the base implementation to keep the record.
    """

    def __init__(self):
        self.color = Color.WHITE
        self.background = Color.BLACK
        self.fill = Color.WHITE
        self.line_style = LineStyle.SOLID
        self.thickness = NORM_WIDTH
        self.commands = []

    def _record(self, *command):
        self.commands.append(command)

    def set_color(self, color):
        self.color = Color(color)

    def set_background(self, color):
        self.background = Color(color)

    def set_fill(self, color):
        self.fill = Color(color)

    def set_line_style(self, style, thickness):
        self.line_style = LineStyle(style)
        self.thickness = thickness

    def rectangle(self, left, top, right, bottom):
        self._record("rectangle", left, top, right, bottom)

    def bar(self, left, top, right, bottom):
        self._record("bar", left, top, right, bottom)

    def line(self, x1, y1, x2, y2):
        self._record("line", x1, y1, x2, y2)

    def circle(self, x, y, radius):
        self._record("circle", x, y, radius)

    def fill_ellipse(self, x, y, rx, ry):
        self._record("fill_ellipse", x, y, rx, ry)

    def text(self, x, y, text, justify):
        self._record("text", x, y, text, Justify(justify))

    def image(self, path, left, top, right, bottom):
        self._record("image", path, left, top, right, bottom)


def frame(canvas, left, top, right, bottom, thickness=3, linestyle=LineStyle.SOLID):
    """Draw a frame of nested rectangles growing inwards from the given bounds."""
    canvas.set_line_style(linestyle, NORM_WIDTH)
    for i in range(thickness):
        canvas.rectangle(left + i, top + i, right - i, bottom - i)