"""Pygame GUI for the Grand Slam scorekeeper.

Contains the court renderer, a scoreboard HUD, the trophy sprite, and the
application entry point (`python -m gui.app`).
"""

__all__ = [
    "constants",
    "court",
    "hud",
    "sprites",
    "app",
]
