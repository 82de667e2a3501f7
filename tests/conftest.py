"""Pytest fixtures for CountSight tests."""

from random import Random

import pytest

from countsight.cards import Hand, generate_deck, parse_cards
from countsight.drill import DrillConfig, DrillController, ManualScheduler


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck():
    """A complete, unshuffled deck."""
    return generate_deck()


@pytest.fixture
def scheduler():
    """Manual scheduler starting at t=0."""
    return ManualScheduler()


@pytest.fixture
def drill_config():
    """Three-card drill with the default timing."""
    return DrillConfig(
        initial_display_time=10000,
        min_display_time=2000,
        time_decrement=200,
        time_increment=200,
        cards_per_deal=3,
    )


class ScriptedDealer:
    """Deals pre-arranged hands in order, then repeats the last one."""

    def __init__(self, *hands: str) -> None:
        self.hands: list[Hand] = [parse_cards(h) for h in hands]
        self.calls = 0

    def __call__(self, deck, count) -> Hand:
        hand = self.hands[min(self.calls, len(self.hands) - 1)]
        self.calls += 1
        return hand


@pytest.fixture
def controller(drill_config, scheduler, rng):
    """A drill controller on a manual scheduler (real shuffling)."""
    ctl = DrillController(drill_config, scheduler=scheduler, rng=rng)
    yield ctl
    ctl.close()


@pytest.fixture
def make_controller(drill_config, scheduler):
    """Build controllers with a scripted dealer."""
    created = []

    def _make(*hands: str, config: DrillConfig | None = None) -> DrillController:
        ctl = DrillController(
            config or drill_config,
            scheduler=scheduler,
            dealer=ScriptedDealer(*hands),
        )
        created.append(ctl)
        return ctl

    yield _make
    for ctl in created:
        ctl.close()
