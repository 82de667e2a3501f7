"""Main entry point for the CountSight pygame front-end."""

import sys

import pygame

from config import config
from countsight.drill import DrillController, ManualScheduler, SessionTimer
from countsight.logging_utils import get_logger, setup_logging
from countsight.settings import SettingsStore
from pygame_ui.config import DIMENSIONS
from pygame_ui.scenes.count_sight_scene import CountSightScene

logger = get_logger(__name__)


class Application:
    """Main application class managing the game loop."""

    def __init__(self, store: SettingsStore | None = None):
        """Initialize the application."""
        setup_logging(config.log_level)

        self.store = store or SettingsStore(config.settings_path)
        self.settings = self.store.load()
        drill_config = self.settings.to_drill_config(
            base=config.drill.to_drill_config(),
            overrides=config.drill.env_overrides(),
        )
        logger.info(
            "Starting drill: %d cards, %dms display time",
            drill_config.cards_per_deal,
            drill_config.initial_display_time,
        )

        pygame.init()
        pygame.display.set_caption("CountSight - Hi-Lo Drill")

        self.screen = pygame.display.set_mode(
            (DIMENSIONS.SCREEN_WIDTH, DIMENSIONS.SCREEN_HEIGHT)
        )
        self.clock = pygame.time.Clock()
        self.running = True

        scheduler = ManualScheduler()
        session_timer = None
        if self.settings.show_timer:
            session_timer = SessionTimer(
                duration_s=self.settings.timer_duration,
                direction=self.settings.timer_direction,
            )

        self.scene = CountSightScene(
            DrillController(drill_config, scheduler=scheduler),
            scheduler,
            session_timer,
        )
        self.scene.on_enter()

    def handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                continue
            self.scene.handle_event(event)

        if self.scene.quit_requested:
            self.running = False

    def run(self) -> None:
        """Main application loop."""
        while self.running:
            dt = self.clock.tick(DIMENSIONS.TARGET_FPS) / 1000.0

            self.handle_events()
            self.scene.update(dt)
            self.scene.draw(self.screen)
            pygame.display.flip()

        self.scene.on_exit()
        self.store.save(self.settings)
        pygame.quit()
        sys.exit()


def main() -> None:
    """Entry point for the pygame UI."""
    app = Application()
    app.run()


if __name__ == "__main__":
    main()
