"""Ordered groups of elements: scenes, the map, the control panel and the inventory."""

import warnings
from enum import IntEnum

from .base import Base
from .drawing import Color, Justify
from .drawing import frame as draw_frame
from .node import NodeId


class Collection(Base):
    """An ordered set of elements with unique ids, one of which may be selected or highlighted."""

    def __init__(self, text, id, pos_x, pos_y, width, height, bitmap):
        super().__init__(text, id, pos_x, pos_y, width, height, bitmap)
        self.elements = []
        self.selected_element = None
        self.prev_highlighted = None

    def __len__(self):
        return len(self.elements)

    def __iter__(self):
        return iter(self.elements)

    def __getitem__(self, index):
        return self.elements[index]

    def add(self, element):
        """Append an element unless one with the same id is already present."""
        if any(e.id == element.id for e in self.elements):
            warnings.warn(
                f"Element with ID={int(element.id)} already exists in collection.",
                stacklevel=2,
            )
            return
        self.elements.append(element)

    def remove(self, element_id):
        """Take out and return the element with the given id, or None if there is none."""
        for index, element in enumerate(self.elements):
            if element.id == element_id:
                del self.elements[index]
                self.prev_highlighted = None
                if self.selected_element is not None:
                    if self.selected_element == index:
                        self.selected_element = None
                    elif self.selected_element > index:
                        self.selected_element -= 1
                return element
        if self.elements:
            warnings.warn(
                f"Element with ID={int(element_id)} does not exist in collection.",
                stacklevel=2,
            )
        return None

    def element_under_cursor(self, cursor_x, cursor_y):
        """Index of the first element under the cursor, or None."""
        return next(
            (i for i, e in enumerate(self.elements) if e.is_cursor_above(cursor_x, cursor_y)),
            None,
        )

    def select(self, index):
        """Move the selection to the element at index; return the elements that need redrawing."""
        changed = []
        if self.selected_element is not None:
            previous = self.elements[self.selected_element]
            previous.unselect()
            changed.append(previous)
        self.selected_element = index
        current = self.elements[index]
        current.select()
        changed.append(current)
        return changed

    def highlight(self, index):
        """Move the highlight to the element at index (None for none); return the elements that need redrawing."""
        changed = []
        if self.prev_highlighted == index:
            return changed
        if self.prev_highlighted is not None:
            previous = self.elements[self.prev_highlighted]
            previous.light_off()
            changed.append(previous)
            self.prev_highlighted = None
        if index is not None:
            current = self.elements[index]
            if current.visible and current.enabled:
                current.light_on()
                changed.append(current)
                self.prev_highlighted = index
        return changed

    def draw(self, canvas):
        if self.bitmap is not None:
            canvas.image(
                self.bitmap,
                self.pos_x,
                self.pos_y,
                self.pos_x + self.width,
                self.pos_y + self.height,
            )
        for element in self.elements:
            element.draw(canvas)

    def describe(self):
        lines = [self.label()]
        if not self.elements:
            lines.append("None")
        else:
            lines.extend(f'element[{i}] = "{e.label()}"' for i, e in enumerate(self.elements))
        lines.append("")
        return "\n".join(lines) + "\n"


class Control(Collection):
    """The panel of control buttons."""

    def __init__(self):
        super().__init__("Control", -1, 0, 0, 0, 0, None)


class MapDrawOption(IntEnum):
    """Parts of the map that can be drawn."""

    ALL = 0
    NODE = 1
    CONNECTION = 2
    DIRECTION = 3
    BACKGROUND = 4


class Map(Collection):
    """The world map; the home node starts selected."""

    def __init__(self, text, pos_x, pos_y, width, height, bitmap):
        super().__init__(text, -1, pos_x, pos_y, width, height, bitmap)
        self.selected_element = int(NodeId.HOME)


class Scene(Collection):
    """A location holding items."""

    def __init__(self, text, id, pos_x, pos_y, width, height, bitmap):
        super().__init__(text, id, pos_x, pos_y, width, height, bitmap)

    def describe(self):
        return "Scene = " + super().describe()


class Direction(IntEnum):
    """Ways the inventory view can scroll."""

    SCROLL_LEFT = -1
    SCROLL_RIGHT = 1


class _InventoryColor:
    BACKGROUND = Color.LIGHTGREEN
    FRAME = Color.GREEN
    TEXT = Color.GREEN


class Inventory(Collection):
    """Collected items, shown through a scrolling window of fixed-size slots."""

    SLOT_SIZE = 100
    VISIBLE_ITEMS_COUNT = 5
    FRAME_THICKNESS = 6

    def __init__(self, text, pos_x, pos_y, bitmap):
        super().__init__(text, -1, pos_x, pos_y, 0, 0, bitmap)
        self.view_index = 0

    def shift_view(self, direction):
        """Scroll by one slot if the window stays within the collected items."""
        step = int(Direction(direction))
        new_index = self.view_index + step
        if new_index >= 0 and new_index + self.VISIBLE_ITEMS_COUNT <= len(self.elements):
            self.view_index = new_index

    def draw(self, canvas):
        slot = self.SLOT_SIZE
        t = self.FRAME_THICKNESS
        for j in range(self.VISIBLE_ITEMS_COUNT):
            i = self.view_index + j
            x = self.pos_x + j * (slot - t)
            y = self.pos_y

            canvas.set_fill(_InventoryColor.BACKGROUND)
            canvas.bar(x, y, x + slot, y + slot)

            canvas.set_color(_InventoryColor.FRAME)
            draw_frame(canvas, x, y, x + slot, y + slot, t)

            if 0 <= i < len(self.elements):
                element = self.elements[i]
                element.set_position(x + t, y + t)
                element.set_size(slot - 2 * t, slot - 2 * t)
                element.draw(canvas)
            else:
                canvas.set_color(_InventoryColor.TEXT)
                canvas.set_background(_InventoryColor.BACKGROUND)
                canvas.text(x + slot // 2, y + slot // 2, "Empty", Justify.CENTER)