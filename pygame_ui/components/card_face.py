"""Card drawing for the drill grid."""

import pygame

from countsight.cards import Card
from pygame_ui.config import COLORS, DIMENSIONS


def card_grid_rects(count: int) -> list[pygame.Rect]:
    """Lay out ``count`` cards in centred rows."""
    per_row = DIMENSIONS.CARDS_PER_ROW
    step_x = DIMENSIONS.CARD_WIDTH + DIMENSIONS.CARD_SPACING
    step_y = DIMENSIONS.CARD_HEIGHT + DIMENSIONS.CARD_SPACING
    rects = []
    for index in range(count):
        row, col = divmod(index, per_row)
        in_row = min(per_row, count - row * per_row)
        row_width = in_row * step_x - DIMENSIONS.CARD_SPACING
        left = DIMENSIONS.CENTER_X - row_width // 2
        rects.append(
            pygame.Rect(
                left + col * step_x,
                DIMENSIONS.CARD_GRID_TOP + row * step_y,
                DIMENSIONS.CARD_WIDTH,
                DIMENSIONS.CARD_HEIGHT,
            )
        )
    return rects


def draw_card(surface: pygame.Surface, card: Card, rect: pygame.Rect, face_up: bool) -> None:
    """Draw a card face up (rank and suit) or face down (patterned back)."""
    if not face_up:
        pygame.draw.rect(surface, COLORS.CARD_BACK, rect, border_radius=8)
        pygame.draw.rect(surface, COLORS.CARD_BLACK, rect, width=2, border_radius=8)
        pygame.draw.rect(surface, COLORS.CARD_BACK_PATTERN, rect.inflate(-12, -12), border_radius=4)
        return

    pygame.draw.rect(surface, COLORS.CARD_WHITE, rect, border_radius=8)
    pygame.draw.rect(surface, COLORS.CARD_BLACK, rect, width=2, border_radius=8)

    color = COLORS.CARD_RED if card.suit.is_red else COLORS.CARD_BLACK
    font_size = max(16, int(rect.height * 0.18))
    font = pygame.font.Font(None, font_size)

    # Rank in the corner, large suit in the centre
    surface.blit(font.render(str(card.rank), True, color), (rect.x + 8, rect.y + 6))
    center_font = pygame.font.Font(None, int(rect.height * 0.45))
    center = center_font.render(str(card.suit), True, color)
    surface.blit(center, center.get_rect(center=rect.center))
