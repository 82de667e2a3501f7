"""Count-sight drill scene: memorise a hand, then type its Hi-Lo count."""

from typing import Optional

import pygame

from countsight.drill import (
    DrillController,
    DrillPhase,
    FeedbackKind,
    ManualScheduler,
    SessionTimer,
)
from pygame_ui.components.card_face import card_grid_rects, draw_card
from pygame_ui.config import COLORS, DIMENSIONS

FEEDBACK_COLORS = {
    FeedbackKind.SUCCESS: COLORS.FEEDBACK_SUCCESS,
    FeedbackKind.FAILURE: COLORS.FEEDBACK_FAILURE,
    FeedbackKind.INFO: COLORS.FEEDBACK_INFO,
}


class CountSightScene:
    """Scene driving a DrillController from the pygame loop.

    The drill's hide timer runs on a ManualScheduler that this scene
    advances every frame, so the whole drill stays on the pygame thread.

    Keys:
    - digits / minus / backspace: edit the answer (cards hidden only)
    - ENTER: submit, or deal the next hand once graded
    - N: deal a new hand, R: reset the display time, ESC: quit
    - S: start a new session (restarts the session timer)

    Once the session timer completes, ENTER and N stop dealing until S
    starts a new session.
    """

    def __init__(
        self,
        controller: DrillController,
        scheduler: ManualScheduler,
        session_timer: Optional[SessionTimer] = None,
    ):
        self.controller = controller
        self.scheduler = scheduler
        self.session_timer = session_timer
        self.session_over = False
        self.quit_requested = False

        if self.session_timer is not None:
            self.session_timer.on_complete = self._on_session_complete

        self._title_font: Optional[pygame.font.Font] = None
        self._input_font: Optional[pygame.font.Font] = None
        self._label_font: Optional[pygame.font.Font] = None

    @property
    def title_font(self) -> pygame.font.Font:
        if self._title_font is None:
            self._title_font = pygame.font.Font(None, 48)
        return self._title_font

    @property
    def input_font(self) -> pygame.font.Font:
        if self._input_font is None:
            self._input_font = pygame.font.Font(None, 48)
        return self._input_font

    @property
    def label_font(self) -> pygame.font.Font:
        if self._label_font is None:
            self._label_font = pygame.font.Font(None, 28)
        return self._label_font

    def on_enter(self) -> None:
        """Start the session with a first hand."""
        self._new_round()

    def on_exit(self) -> None:
        """Tear down the drill so no hide callback outlives the scene."""
        self.controller.close()

    def _new_round(self) -> None:
        if self.session_over:
            return
        if self.session_timer is not None:
            self.session_timer.start()
        self.controller.start_round()

    def _new_session(self) -> None:
        if self.session_timer is not None:
            self.session_timer.reset()
        self.session_over = False
        self._new_round()

    def _on_session_complete(self) -> None:
        self.session_over = True

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Handle input events."""
        if event.type != pygame.KEYDOWN:
            return False

        controller = self.controller
        phase = controller.phase

        if event.key == pygame.K_ESCAPE:
            self.quit_requested = True
            return True

        if event.key == pygame.K_RETURN:
            if phase == DrillPhase.AWAITING_INPUT:
                controller.submit()
            elif phase in (DrillPhase.GRADED, DrillPhase.IDLE):
                self._new_round()
            return True

        if phase == DrillPhase.AWAITING_INPUT:
            if event.key == pygame.K_BACKSPACE:
                controller.receive_input(controller.user_input[:-1])
                return True
            if event.unicode and (event.unicode.isdigit() or event.unicode == "-"):
                controller.receive_input(controller.user_input + event.unicode)
                return True

        if event.key == pygame.K_n:
            self._new_round()
            return True
        if event.key == pygame.K_s:
            self._new_session()
            return True
        if event.key == pygame.K_r:
            controller.reset_timer()
            return True

        return False

    def update(self, dt: float) -> None:
        """Advance the drill clock by ``dt`` seconds."""
        dt_ms = dt * 1000
        self.scheduler.advance(dt_ms)
        if self.session_timer is not None:
            self.session_timer.tick(dt_ms)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the scene."""
        surface.fill(COLORS.FELT_GREEN)
        controller = self.controller

        title = self.title_font.render("Count the cards", True, COLORS.GOLD)
        surface.blit(title, title.get_rect(center=(DIMENSIONS.CENTER_X, 50)))

        budget_text = f"Display time: {controller.display_time / 1000:.1f}s"
        budget = self.label_font.render(budget_text, True, COLORS.TEXT_MUTED)
        surface.blit(budget, budget.get_rect(center=(DIMENSIONS.CENTER_X, 90)))

        if controller.phase == DrillPhase.REVEALING:
            remaining = f"Hiding in {controller.reveal_remaining_ms / 1000:.1f}s"
            text = self.label_font.render(remaining, True, COLORS.TEXT_WHITE)
            surface.blit(text, text.get_rect(center=(DIMENSIONS.CENTER_X, 120)))

        for card, rect in zip(controller.hand, card_grid_rects(len(controller.hand))):
            draw_card(surface, card, rect, face_up=controller.cards_visible)

        if controller.phase in (DrillPhase.AWAITING_INPUT, DrillPhase.GRADED):
            self._draw_input(surface)

        self._draw_feedback(surface)
        self._draw_session_timer(surface)

        font_small = pygame.font.Font(None, 22)
        instructions = "Type the count and press ENTER | N: New hand | S: New session | R: Reset time | ESC: Quit"
        text = font_small.render(instructions, True, COLORS.TEXT_MUTED)
        surface.blit(text, text.get_rect(center=(DIMENSIONS.CENTER_X, DIMENSIONS.SCREEN_HEIGHT - 30)))

    def _draw_input(self, surface: pygame.Surface) -> None:
        input_rect = pygame.Rect(DIMENSIONS.CENTER_X - 100, DIMENSIONS.INPUT_Y - 30, 200, 60)
        pygame.draw.rect(surface, COLORS.PANEL_BG, input_rect, border_radius=8)
        pygame.draw.rect(surface, COLORS.GOLD, input_rect, width=3, border_radius=8)

        display_text = self.controller.user_input or "?"
        input_text = self.input_font.render(display_text, True, COLORS.TEXT_WHITE)
        surface.blit(input_text, input_text.get_rect(center=input_rect.center))

    def _draw_feedback(self, surface: pygame.Surface) -> None:
        kind = self.controller.feedback_kind
        if kind is None:
            return
        text = self.label_font.render(self.controller.feedback, True, FEEDBACK_COLORS[kind])
        surface.blit(text, text.get_rect(center=(DIMENSIONS.CENTER_X, DIMENSIONS.INPUT_Y + 60)))

    def _draw_session_timer(self, surface: pygame.Surface) -> None:
        if self.session_timer is None:
            return
        label = "Session complete" if self.session_over else self.session_timer.format_hms()
        text = self.label_font.render(label, True, COLORS.TEXT_WHITE)
        surface.blit(text, text.get_rect(topright=(DIMENSIONS.SCREEN_WIDTH - 20, 20)))
