"""Pytest fixtures for pygame front-end tests."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from countsight.drill import DrillController, SessionTimer
from pygame_ui.config import DIMENSIONS
from pygame_ui.scenes.count_sight_scene import CountSightScene


@pytest.fixture(scope="session", autouse=True)
def pygame_session():
    """Initialise pygame once with the dummy video driver."""
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def surface():
    """Off-screen surface the size of the window."""
    return pygame.Surface((DIMENSIONS.SCREEN_WIDTH, DIMENSIONS.SCREEN_HEIGHT))


@pytest.fixture
def scene(make_controller, scheduler):
    """Scene over a scripted three-card drill with a 60s session timer."""
    controller: DrillController = make_controller("2H 5S 8C")
    return CountSightScene(controller, scheduler, SessionTimer(duration_s=60))
