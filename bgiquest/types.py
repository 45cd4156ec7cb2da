"""Identifiers shared across the game: scenes and views."""

from enum import IntEnum

KEY_ESC = 27


class SceneId(IntEnum):
    """Scenes of the game; the order matches the scene table of the game."""

    NONE = -1
    KITCHEN = 0
    BED_ROOM = 1
    LIVING_ROOM = 2
    STUDIO = 3
    BRIDGE = 4
    PUB = 5
    FOREST = 6
    SHOP = 7
    DOWNTOWN = 8
    HOME = 9

    GO_TO_MAP = 99


class View(IntEnum):
    """What the player is currently looking at."""

    MAP = 0
    SCENE = 1
    MENU = 2