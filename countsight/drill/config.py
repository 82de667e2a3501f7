"""Drill timing and dealing configuration."""

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class DrillConfig:
    """
    Adaptive timing configuration for a drill session.

    All durations are in milliseconds. The display-time budget starts at
    ``initial_display_time`` and moves between ``min_display_time`` and
    ``initial_display_time`` as answers are graded.
    """

    initial_display_time: int = 10000
    min_display_time: int = 2000
    time_decrement: int = 200  # Applied after a correct answer
    time_increment: int = 200  # Applied after a wrong answer
    cards_per_deal: int = 12

    def __post_init__(self) -> None:
        """Validate field types and timing bounds."""
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{f.name} must be an int, got {value!r}")
        if self.min_display_time <= 0:
            raise ValueError("min_display_time must be positive")
        if self.min_display_time > self.initial_display_time:
            raise ValueError("min_display_time must not exceed initial_display_time")
        if self.time_decrement < 0 or self.time_increment < 0:
            raise ValueError("time steps must not be negative")
        if self.cards_per_deal < 0:
            raise ValueError("cards_per_deal must not be negative")

    def clamp(self, display_time: int) -> int:
        """Clamp a display-time budget into the configured bounds."""
        return max(self.min_display_time, min(self.initial_display_time, display_time))
