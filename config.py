"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field

from countsight.drill.config import DrillConfig


def _env_int(name: str, default: int) -> int:
    """Read an integer environment variable."""
    return int(os.getenv(name, str(default)))


# Settings the user can also choose in the trainer, keyed by their env variable
_PREFERENCE_ENV_VARS = {
    "initial_display_time": "DRILL_INITIAL_DISPLAY_MS",
    "cards_per_deal": "DRILL_CARDS_PER_DEAL",
}


@dataclass(frozen=True)
class DrillSettings:
    """Default drill timing, overridable from the environment."""

    initial_display_time: int = field(
        default_factory=lambda: _env_int("DRILL_INITIAL_DISPLAY_MS", 10000)
    )
    min_display_time: int = field(
        default_factory=lambda: _env_int("DRILL_MIN_DISPLAY_MS", 2000)
    )
    time_decrement: int = field(
        default_factory=lambda: _env_int("DRILL_TIME_DECREMENT_MS", 200)
    )
    time_increment: int = field(
        default_factory=lambda: _env_int("DRILL_TIME_INCREMENT_MS", 200)
    )
    cards_per_deal: int = field(
        default_factory=lambda: _env_int("DRILL_CARDS_PER_DEAL", 12)
    )

    def env_overrides(self) -> dict[str, int]:
        """
        Values whose environment variable is set.

        These take precedence over the saved trainer preferences; unset
        variables leave the preference in charge.
        """
        return {
            name: getattr(self, name)
            for name, var in _PREFERENCE_ENV_VARS.items()
            if var in os.environ
        }

    def to_drill_config(self) -> DrillConfig:
        """Build a validated DrillConfig from these values."""
        return DrillConfig(
            initial_display_time=self.initial_display_time,
            min_display_time=self.min_display_time,
            time_decrement=self.time_decrement,
            time_increment=self.time_increment,
            cards_per_deal=self.cards_per_deal,
        )


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    settings_path: str = field(
        default_factory=lambda: os.getenv(
            "COUNTSIGHT_SETTINGS", os.path.expanduser("~/.countsight_settings.json")
        )
    )

    drill: DrillSettings = field(default_factory=DrillSettings)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @property
    def log_level(self) -> str:
        return "DEBUG" if self.debug else self.logging.level


# Global configuration instance
config = AppConfig()
