"""Pygame scenes."""

from pygame_ui.scenes.count_sight_scene import CountSightScene

__all__ = ["CountSightScene"]
