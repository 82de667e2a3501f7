"""Practice session clock shown alongside the drill."""

from typing import Callable, Literal

TimerDirection = Literal["up", "down"]


class SessionTimer:
    """
    Clock for a timed practice session.

    Counts elapsed time while running. A count-down timer displays the time
    left, a count-up timer the time spent; both complete once the elapsed
    time reaches the session duration, and the completion callback fires
    only once per run.
    """

    def __init__(
        self,
        duration_s: int = 60,
        direction: TimerDirection = "down",
        on_complete: Callable[[], None] | None = None,
    ) -> None:
        if duration_s <= 0:
            raise ValueError("duration_s must be positive")
        if direction not in ("up", "down"):
            raise ValueError(f"Invalid timer direction: {direction}")
        self.duration_ms = duration_s * 1000
        self.direction: TimerDirection = direction
        self.on_complete = on_complete
        self._elapsed_ms = 0.0
        self._running = False
        self._completed = False

    @property
    def running(self) -> bool:
        return self._running

    @property
    def elapsed_ms(self) -> float:
        return self._elapsed_ms

    @property
    def remaining_ms(self) -> float:
        return max(0.0, self.duration_ms - self._elapsed_ms)

    @property
    def is_complete(self) -> bool:
        return self._elapsed_ms >= self.duration_ms

    @property
    def display_seconds(self) -> int:
        """Whole seconds to show: time left counting down, time spent counting up."""
        if self.direction == "down":
            # Round up so the display only reaches 0 on completion
            return int(-(-self.remaining_ms // 1000))
        return int(min(self._elapsed_ms, self.duration_ms) // 1000)

    def start(self) -> None:
        if not self.is_complete:
            self._running = True

    def pause(self) -> None:
        self._running = False

    def reset(self) -> None:
        """Stop and rewind to zero."""
        self._elapsed_ms = 0.0
        self._running = False
        self._completed = False

    def tick(self, dt_ms: float) -> None:
        """Advance the clock by ``dt_ms`` if running."""
        if not self._running or dt_ms <= 0:
            return
        self._elapsed_ms = min(self.duration_ms, self._elapsed_ms + dt_ms)
        if self.is_complete:
            self._running = False
            if not self._completed:
                self._completed = True
                if self.on_complete:
                    self.on_complete()

    def format_hms(self) -> str:
        """Format the displayed time as HH:MM:SS."""
        seconds = self.display_seconds
        hours, rest = divmod(seconds, 3600)
        minutes, seconds = divmod(rest, 60)
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
