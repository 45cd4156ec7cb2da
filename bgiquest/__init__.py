"""A small point-and-click adventure: a node map, scenes, an inventory and a pygame front end."""

__version__ = "0.1.0"