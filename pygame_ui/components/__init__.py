"""Drawing helpers for the pygame front-end."""

from pygame_ui.components.card_face import card_grid_rects, draw_card

__all__ = ["card_grid_rects", "draw_card"]
