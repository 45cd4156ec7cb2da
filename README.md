# bgiquest

A small point-and-click adventure. You start on a map of connected
places (Home, Bridge, Pub, Forest, Shop, Downtown). Clicking an enabled
place selects it and opens its scene. In a scene, clicking a collectible
item moves it into your inventory, which shows five slots at a time.

## Installation

```
pip install .
```

This pulls in `pygame`, which draws the window.

## Playing

```
bgiquest
```

A 640×480 window titled "Adventure" opens on the map view.

- Move the mouse over a place on the map to highlight it. Only places
  that are both visible and enabled light up; at the start Home, Bridge,
  Pub and Forest are enabled, Shop and Downtown are shown greyed out.
- Left-click an enabled place to select it and enter its scene.
- In a scene, left-click a collectible item to put it in the inventory.
  Static items such as the fridge and the TV stay where they are.

Options:

- `--assets DIR`: change into `DIR` before starting, so the pictures the
  game names (`map.jpg`, `studio.jpg`, `kofola.jpg`, …) are found there.
  The command stops with an error if `DIR` is not a directory.
- `--quiet`: turn off the debug output. Without it, the mouse position
  and current view are drawn in the top-left corner, and after every
  left click a listing of the control panel, map, inventory and current
  scene is printed to the terminal.

When a picture cannot be loaded, that area is left blank and the game
keeps running. Close the window to quit.

## Using it from Python

The game logic does not depend on pygame. Any object with the drawing
methods of `bgiquest.drawing.Canvas` can be passed in; `Canvas` itself
keeps the current pen state and records every primitive in its
`commands` list. The game can be driven by calling its event methods:

```python
from bgiquest.drawing import Canvas
from bgiquest.game import Game

canvas = Canvas()
game = Game()
game.draw(canvas)
game.mouse_move(100, 300, canvas)         # highlight Home
game.mouse_click_left(100, 300, canvas)   # enter the studio
print(game.view, game.active_scene)
print(game.describe())
```

The building blocks live in their own modules:

- `bgiquest.types`: `SceneId` and `View`
- `bgiquest.drawing`: `Color`, `LineStyle`, `Justify`, the recording
  `Canvas` and the `frame` helper
- `bgiquest.base`: `Base` and `Element`, the positioned, hit-testable objects
- `bgiquest.node`: `Node` and `NodeId`, a place on the map with its
  one-way neighbour connections
- `bgiquest.item`: `Item`, `ItemId` and `ItemType` (static, interactive,
  collectible, link)
- `bgiquest.button`: `Button` and `ButtonId`
- `bgiquest.collection`: `Collection`, `Map`, `Scene`, `Control`,
  `Inventory` and `Direction`
- `bgiquest.cursor`: `Cursor`
- `bgiquest.game`: `Menu` and `Game`
- `bgiquest.render`: `PygameCanvas`, `run` and `main`

`Collection.add` ignores an element whose id is already present and
issues a warning; `Collection.remove` returns the removed element, or
`None` when there is no element with that id.

## What it does not do

- The control buttons (inventory arrows, Map, Menu) are drawn in a scene
  but clicking them does nothing, so there is no way back from a scene
  to the map, and the inventory cannot be scrolled from the window
  (`Inventory.shift_view` works when called directly).
- Link items such as the door do not lead to another scene.
- There is no game menu, no new game, no saving or loading. `Menu`
  can lay out and draw a stack of buttons, but the game does not open one.
- No pictures are shipped with the package.

## Tests

```
pip install .[test]
pytest
```