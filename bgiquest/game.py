"""The game world, its menus and the mouse-driven game loop logic."""

from .button import Button, ButtonId
from .collection import Control, Inventory, Map, Scene
from .drawing import Color, Justify
from .drawing import frame as draw_frame
from .item import Item, ItemId, ItemType
from .node import Node, NodeId
from .types import SceneId, View

_CONTROL_BUTTONS = (
    ("<\n<\n<", ButtonId.ARROW_LEFT, 50, 50),
    (">\n>\n>", ButtonId.ARROW_RIGHT, 100, 50),
    (" Map  ", ButtonId.MAP, 476, 50),
    (" Menu ", ButtonId.MENU, 476, 100),
)

# The order matches ItemId.
_ITEMS = (
    ("Kofola", ItemId.KOFOLA, 400, 300, 75, 75, "kofola.jpg", False, SceneId.NONE, ItemType.COLLECTIBLE),
    ("Rum", ItemId.RUM, 490, 300, 75, 75, "rum.jpg", False, SceneId.NONE, ItemType.COLLECTIBLE),
    ("Guitar", ItemId.GUITAR, 200, 180, 75, 75, "guitar.jpg", False, SceneId.NONE, ItemType.COLLECTIBLE),
    ("Notebook", ItemId.NOTEBOOK, 200, 300, 50, 50, "notebook.jpg", False, SceneId.NONE, ItemType.COLLECTIBLE),
    ("Fridge", ItemId.FRIDGE, 500, 120, 100, 150, "fridge.jpg", True, SceneId.NONE, ItemType.STATIC),
    ("Oven", ItemId.OVEN, 420, 100, 75, 75, "oven.jpg", False, SceneId.NONE, ItemType.COLLECTIBLE),
    ("Boots", ItemId.BOOTS, 80, 250, 50, 50, "boots.jpg", False, SceneId.NONE, ItemType.COLLECTIBLE),
    ("Picture", ItemId.PICTURE, 75, 75, 100, 100, "picture.jpg", False, SceneId.NONE, ItemType.COLLECTIBLE),
    ("Tv", ItemId.TV, 400, 170, 100, 100, "tv.jpg", False, SceneId.NONE, ItemType.STATIC),
    ("Door", ItemId.DOOR, 291, 102, 85, 145, "door.jpg", False, SceneId.HOME, ItemType.LINK),
    ("Car", ItemId.CAR, 250, 220, 350, 145, "car.jpg", False, SceneId.GO_TO_MAP, ItemType.LINK),
    ("Studio_entry", ItemId.STUDIO_ENTRY, 170, 180, 60, 40, None, False, SceneId.STUDIO, ItemType.LINK),
)

_SCENE_WIDTH = 639 - 10
_SCENE_HEIGHT = 378

# The order matches SceneId.
_SCENES = (
    ("Kitchen", SceneId.KITCHEN, "test.jpg"),
    ("Bed_room", SceneId.BED_ROOM, "test.jpg"),
    ("Living_room", SceneId.LIVING_ROOM, "test.jpg"),
    ("Studio", SceneId.STUDIO, "studio.jpg"),
    ("Bridge", SceneId.BRIDGE, "bridge.jpg"),
    ("Pub", SceneId.PUB, "pub.jpg"),
    ("Forest", SceneId.FOREST, "forest.jpg"),
    ("Shop", SceneId.SHOP, "shop.jpg"),
    ("Downtown", SceneId.DOWNTOWN, "downtown.jpg"),
    ("Home", SceneId.HOME, "home.jpg"),
)

_STUDIO_ITEMS = (
    ItemId.FRIDGE,
    ItemId.KOFOLA,
    ItemId.TV,
    ItemId.RUM,
    ItemId.GUITAR,
    ItemId.BOOTS,
    ItemId.NOTEBOOK,
    ItemId.OVEN,
    ItemId.PICTURE,
    ItemId.DOOR,
)

# The order matches NodeId.
_NODES = (
    ("Home", NodeId.HOME, 100, 300, SceneId.STUDIO),
    ("Bridge", NodeId.BRIDGE, 500, 400, SceneId.BRIDGE),
    ("Pub", NodeId.PUB, 600, 250, SceneId.PUB),
    ("Forest", NodeId.FOREST, 100, 100, SceneId.FOREST),
    ("Shop", NodeId.SHOP, 460, 180, SceneId.SHOP),
    ("Downtown", NodeId.DOWNTOWN, 340, 240, SceneId.DOWNTOWN),
)

_NEWLY_CREATED_NODES = frozenset({NodeId.PUB})
_ENABLED_NODES = (NodeId.HOME, NodeId.PUB, NodeId.BRIDGE, NodeId.FOREST)
_CONNECTIONS = (
    (NodeId.HOME, NodeId.BRIDGE),
    (NodeId.HOME, NodeId.DOWNTOWN),
    (NodeId.HOME, NodeId.FOREST),
    (NodeId.BRIDGE, NodeId.HOME),
    (NodeId.DOWNTOWN, NodeId.SHOP),
    (NodeId.DOWNTOWN, NodeId.PUB),
)


class Menu:
    """A vertical stack of equally wide buttons inside a frame."""

    FRAME_THICKNESS = 6
    LETTER_HEIGHT = 24
    LETTER_WIDTH = 24
    _FRAME_ADJUST = 1

    def __init__(self, pos_x, pos_y, buttons):
        self.pos_x = pos_x
        self.pos_y = pos_y
        self.buttons = list(buttons)
        self.prev_highlighted_button = None
        self.longest_button = max((len(b.label()) for b in self.buttons), default=0)

        for i, button in enumerate(self.buttons):
            button.set_position(pos_x, pos_y + i * self.LETTER_HEIGHT)
            button.set_size(self.LETTER_WIDTH * self.longest_button, self.LETTER_HEIGHT)

    def button_under_cursor(self, cursor_x, cursor_y):
        """Index of the first button under the cursor, or None."""
        return next(
            (i for i, b in enumerate(self.buttons) if b.is_cursor_above(cursor_x, cursor_y)),
            None,
        )

    def draw(self, canvas):
        t = self.FRAME_THICKNESS
        canvas.set_color(Color.GREEN)
        draw_frame(
            canvas,
            self.pos_x - t,
            self.pos_y,
            self.pos_x + self.LETTER_WIDTH * self.longest_button + t,
            self.pos_y + self.LETTER_HEIGHT * len(self.buttons) + t - self._FRAME_ADJUST,
            t,
        )
        for button in self.buttons:
            button.draw(canvas)


class Game:
    """The whole game state: map, scenes, inventory and control panel."""

    def __init__(self):
        self.view = View.MAP
        self.active_scene = SceneId.STUDIO
        self.debug = True

        self.buttons = [
            Button(text, button_id, x, y, None, True, SceneId.NONE, False)
            for text, button_id, x, y in _CONTROL_BUTTONS
        ]
        self.control = Control()
        for button in self.buttons:
            self.control.add(button)

        self.items = [Item(*row) for row in _ITEMS]
        self.scenes = [
            Scene(text, scene_id, 0, 0, _SCENE_WIDTH, _SCENE_HEIGHT, bitmap)
            for text, scene_id, bitmap in _SCENES
        ]
        studio = self.scenes[SceneId.STUDIO]
        for item_id in _STUDIO_ITEMS:
            studio.add(self.items[item_id])

        self.inventory = Inventory("Inventory", 50, 360, None)

        self.nodes = [
            Node(text, node_id, x, y, None, False, go_to)
            for text, node_id, x, y, go_to in _NODES
        ]
        self.map = Map("Map", 0, 0, 640 - 10, 480, "map.jpg")
        self._init_map()

    def _init_map(self):
        for node in self.nodes:
            self.map.add(node)
            node.show()
            node.newly_created = node.id in _NEWLY_CREATED_NODES
        for node_id in _ENABLED_NODES:
            self.map[node_id].enable()
        for source, target in _CONNECTIONS:
            self.map[source].connect(self.map[target])
        self.map[self.map.selected_element].select()

    @property
    def scene(self):
        """The scene the player is currently in."""
        return self.scenes[self.active_scene]

    def _draw_scene_view(self, canvas):
        self.scene.draw(canvas)
        self.inventory.draw(canvas)
        self.control.draw(canvas)

    def draw(self, canvas):
        """Paint the current view."""
        if self.view == View.MAP:
            self.map.draw(canvas)
        elif self.view == View.SCENE:
            self._draw_scene_view(canvas)

    def mouse_move(self, mouse_x, mouse_y, canvas):
        """Highlight the map node under the cursor."""
        if self.view == View.MAP:
            # Nodes are centred on their position, so the cursor is shifted
            # to match the top-left based hit test.
            index = self.map.element_under_cursor(mouse_x + Node.RADIUS, mouse_y + Node.RADIUS)
            for element in self.map.highlight(index):
                element.draw(canvas)

        if self.debug:
            self._draw_debug(mouse_x, mouse_y, canvas)

    def _draw_debug(self, mouse_x, mouse_y, canvas):
        canvas.set_background(Color.BLACK)
        canvas.set_color(Color.WHITE)
        for y in (0, 16, 32):
            canvas.text(0, y, "     ", Justify.TOP_LEFT)
        canvas.text(0, 0, f"X={mouse_x}\nY={mouse_y}\n{self.view.name}", Justify.TOP_LEFT)

    def mouse_click_left(self, mouse_x, mouse_y, canvas):
        """Enter a scene from the map, or pick up a collectible item in a scene."""
        if self.view == View.MAP:
            index = self.map.element_under_cursor(mouse_x + Node.RADIUS, mouse_y + Node.RADIUS)
            if index is None:
                return
            node = self.map[index]
            if not (node.visible and node.enabled):
                return
            for element in self.map.select(index):
                element.draw(canvas)
            self.active_scene = node.go_to_scene
            self.view = View.SCENE
            self._draw_scene_view(canvas)

        elif self.view == View.SCENE:
            scene = self.scene
            index = scene.element_under_cursor(mouse_x, mouse_y)
            if index is None:
                return
            item = scene[index]
            if item.type == ItemType.COLLECTIBLE:
                taken = scene.remove(item.id)
                self.inventory.add(taken)
                self._draw_scene_view(canvas)

    def describe(self):
        """Debug listing of the control panel, map, inventory and current scene."""
        return (
            self.control.describe()
            + self.map.describe()
            + self.inventory.describe()
            + self.scene.describe()
        )