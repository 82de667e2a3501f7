"""Trainer preferences and their JSON persistence."""

import json
import os
from dataclasses import asdict, dataclass, fields
from typing import Literal, Mapping

from countsight.drill.config import DrillConfig
from countsight.logging_utils import get_logger

logger = get_logger(__name__)

DISPLAY_TIME_CHOICES = (3000, 5000, 10000, 15000)
CARD_COUNT_CHOICES = (3, 6, 9, 12)
TIMER_DURATION_RANGE = (10, 600)  # seconds


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class TrainerSettings:
    """User preferences for the count drill."""

    display_time: int = 5000  # ms the cards start out visible
    number_of_cards: int = 12
    show_timer: bool = True
    timer_direction: Literal["up", "down"] = "down"
    timer_duration: int = 60  # Session length in seconds

    def __post_init__(self) -> None:
        """Replace out-of-range values with their defaults."""
        low, high = TIMER_DURATION_RANGE
        checks = {
            "display_time": _is_int(self.display_time)
            and self.display_time in DISPLAY_TIME_CHOICES,
            "number_of_cards": _is_int(self.number_of_cards)
            and self.number_of_cards in CARD_COUNT_CHOICES,
            "show_timer": isinstance(self.show_timer, bool),
            "timer_direction": self.timer_direction in ("up", "down"),
            "timer_duration": _is_int(self.timer_duration)
            and low <= self.timer_duration <= high,
        }
        for f in fields(self):
            if not checks[f.name]:
                logger.warning("Ignoring invalid %s=%r", f.name, getattr(self, f.name))
                setattr(self, f.name, f.default)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "TrainerSettings":
        """Create from dictionary, ignoring unknown keys."""
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})

    def toggle_timer_direction(self) -> None:
        self.timer_direction = "up" if self.timer_direction == "down" else "down"

    def to_drill_config(
        self,
        base: DrillConfig | None = None,
        overrides: Mapping[str, int] | None = None,
    ) -> DrillConfig:
        """
        Build the drill configuration these preferences describe.

        The chosen display time becomes the starting (and maximum) budget;
        the minimum is lowered to match when the choice is shorter.

        Args:
            base: Supplies the minimum budget and the step sizes
            overrides: ``initial_display_time`` / ``cards_per_deal`` values
                that take precedence over the saved preferences
        """
        base = base or DrillConfig()
        overrides = overrides or {}
        display_time = overrides.get("initial_display_time", self.display_time)
        return DrillConfig(
            initial_display_time=display_time,
            min_display_time=min(base.min_display_time, display_time),
            time_decrement=base.time_decrement,
            time_increment=base.time_increment,
            cards_per_deal=overrides.get("cards_per_deal", self.number_of_cards),
        )


class SettingsStore:
    """Loads and saves TrainerSettings as a JSON file."""

    DEFAULT_PATH = os.path.expanduser("~/.countsight_settings.json")

    def __init__(self, path: str | None = None) -> None:
        self.path = path or self.DEFAULT_PATH

    def load(self) -> TrainerSettings:
        """Load settings from disk, falling back to defaults."""
        if not os.path.exists(self.path):
            return TrainerSettings()
        try:
            with open(self.path, "r") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("settings file must hold a JSON object")
            return TrainerSettings.from_dict(data)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read settings from %s: %s", self.path, exc)
            return TrainerSettings()

    def save(self, settings: TrainerSettings) -> None:
        """Write settings to disk; failures are logged, not raised."""
        try:
            with open(self.path, "w") as f:
                json.dump(settings.to_dict(), f, indent=2)
        except OSError as exc:
            logger.warning("Could not save settings to %s: %s", self.path, exc)
