"""Locations on the world map and the paths between them."""

import math
from enum import IntEnum

from .base import Element
from .drawing import NORM_WIDTH, Color, Justify, LineStyle


class NodeId(IntEnum):
    """Known map locations."""

    NONE = -1
    HOME = 0
    BRIDGE = 1
    PUB = 2
    FOREST = 3
    SHOP = 4
    DOWNTOWN = 5


class _NodeColor:
    TEXT = Color.WHITE
    EDGE = Color.GREEN
    HIGHLIGHTED = Color.LIGHTGREEN
    SELECTED = Color.RED
    DISABLED = Color.LIGHTGRAY
    BACKGROUND = Color.GREEN


class Node(Element):
    """A circular map location centred on its position, linked to neighbour nodes."""

    RADIUS = 30
    _blink_color = _NodeColor.BACKGROUND

    def __init__(self, text, id, x, y, bitmap, frame, go_to_scene):
        super().__init__(text, id, x, y, 2 * self.RADIUS, 2 * self.RADIUS, bitmap, frame, go_to_scene)
        self.enabled = False
        self.newly_created = True
        self.neighbours = []

    def _visible_neighbours(self):
        return (n for n in self.neighbours if n.visible)

    def draw_connection(self, canvas):
        """Draw lines to every visible neighbour."""
        if not self.visible:
            return
        canvas.set_color(_NodeColor.EDGE)
        for node in self._visible_neighbours():
            canvas.line(self.pos_x, self.pos_y, node.pos_x, node.pos_y)

    def draw_direction(self, canvas):
        """Mark each connecting line where it meets the neighbour's circle."""
        if not self.visible:
            return
        for node in self._visible_neighbours():
            vx = node.pos_x - self.pos_x
            vy = node.pos_y - self.pos_y
            length = math.hypot(vx, vy)
            if length == 0:
                continue
            x = int(self.pos_x + (length - self.RADIUS) / length * vx)
            y = int(self.pos_y + (length - self.RADIUS) / length * vy)
            canvas.set_fill(Color.GREEN)
            canvas.set_color(Color.GREEN)
            canvas.fill_ellipse(x, y, self.RADIUS // 4, self.RADIUS // 4)

    def draw(self, canvas):
        if not self.visible:
            return
        if not self.enabled:
            edge = inside = _NodeColor.DISABLED
        else:
            edge = _NodeColor.HIGHLIGHTED if self.highlighted else _NodeColor.BACKGROUND
            inside = _NodeColor.SELECTED if self.selected else _NodeColor.BACKGROUND

        canvas.set_color(edge)
        canvas.set_line_style(LineStyle.SOLID, self.FRAME_THICKNESS)
        canvas.set_fill(inside)
        canvas.fill_ellipse(self.pos_x, self.pos_y, self.RADIUS, self.RADIUS)

        canvas.set_color(_NodeColor.TEXT)
        canvas.set_background(inside)
        canvas.text(self.pos_x, self.pos_y, self.text or "", Justify.CENTER)

    def draw_available_path(self, canvas):
        """Outline visible neighbours with a dashed circle whose colour blinks on each call."""
        cls = Node
        cls._blink_color = Color.WHITE if cls._blink_color == _NodeColor.BACKGROUND else _NodeColor.BACKGROUND
        for node in self._visible_neighbours():
            canvas.set_color(cls._blink_color)
            canvas.set_line_style(LineStyle.DASHED, NORM_WIDTH)
            canvas.circle(node.pos_x, node.pos_y, self.RADIUS)
            canvas.set_line_style(LineStyle.SOLID, NORM_WIDTH)

    def connect(self, node):
        """Add a one-way link to another node."""
        self.neighbours.append(node)

    def disconnect(self, node):
        """Remove every link to a node with the same id."""
        self.neighbours = [n for n in self.neighbours if n.id != node.id]

    def is_connected_to(self, node):
        return any(n.id == node.id for n in self.neighbours)

    def describe(self):
        lines = [
            "Node properties:",
            f"ID              = {int(self.id)}",
            f"VISIBLE         = {int(self.visible)}",
            f"ENABLED         = {int(self.enabled)}",
            f"NEWLY_CREATED   = {int(self.newly_created)}",
            f"NEIGHBOUR_COUNT = {len(self.neighbours)}",
            "",
        ]
        return super().describe() + "\n".join(lines) + "\n"