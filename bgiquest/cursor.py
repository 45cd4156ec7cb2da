"""The mouse cursor and its icon."""


class Cursor:
    """Tracks the mouse position and draws an icon ending at it."""

    SIZE = 20

    def __init__(self, icon=None):
        self.pos_x = 0
        self.pos_y = 0
        self.icon = icon

    def update_position(self, pos_x, pos_y):
        self.pos_x = pos_x
        self.pos_y = pos_y

    def draw(self, canvas):
        if self.icon is None:
            return
        canvas.image(
            self.icon,
            self.pos_x,
            self.pos_y,
            self.pos_x - self.SIZE,
            self.pos_y - self.SIZE,
        )