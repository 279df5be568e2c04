"""A small 2D pygame game with a loading screen, a main menu and a circle moved with the arrow keys."""

__version__ = "0.1.0"