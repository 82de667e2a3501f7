"""Configuration constants for the CountSight pygame front-end."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Colors:
    """Color palette for the drill screen."""

    # Felt and background
    FELT_GREEN: Tuple[int, int, int] = (34, 87, 59)
    FELT_DARK: Tuple[int, int, int] = (25, 65, 44)

    # Card colors
    CARD_WHITE: Tuple[int, int, int] = (245, 243, 238)
    CARD_RED: Tuple[int, int, int] = (192, 57, 57)
    CARD_BLACK: Tuple[int, int, int] = (28, 28, 32)
    CARD_BACK: Tuple[int, int, int] = (65, 85, 130)
    CARD_BACK_PATTERN: Tuple[int, int, int] = (85, 105, 150)

    # UI accents
    GOLD: Tuple[int, int, int] = (255, 200, 87)

    # Feedback colors
    FEEDBACK_SUCCESS: Tuple[int, int, int] = (100, 200, 100)
    FEEDBACK_FAILURE: Tuple[int, int, int] = (200, 100, 100)
    FEEDBACK_INFO: Tuple[int, int, int] = (200, 200, 200)

    # Text
    TEXT_WHITE: Tuple[int, int, int] = (240, 240, 240)
    TEXT_MUTED: Tuple[int, int, int] = (150, 150, 160)

    # Panels
    PANEL_BG: Tuple[int, int, int] = (35, 38, 48)


@dataclass(frozen=True)
class Dimensions:
    """Dimension constants for layout and sizing."""

    # Screen
    SCREEN_WIDTH: int = 1280
    SCREEN_HEIGHT: int = 720
    TARGET_FPS: int = 60

    # Cards
    CARD_WIDTH: int = 90
    CARD_HEIGHT: int = 126
    CARD_SPACING: int = 16
    CARDS_PER_ROW: int = 6
    CARD_GRID_TOP: int = 150

    # Layout
    CENTER_X: int = SCREEN_WIDTH // 2
    CENTER_Y: int = SCREEN_HEIGHT // 2
    INPUT_Y: int = 500


# Global instances for easy import
COLORS = Colors()
DIMENSIONS = Dimensions()
