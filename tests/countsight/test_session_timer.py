"""Tests for the practice session timer."""

import pytest

from countsight.drill import SessionTimer


class TestSessionTimer:
    """Tests for SessionTimer."""

    def test_counts_down(self):
        timer = SessionTimer(duration_s=60, direction="down")
        timer.start()
        timer.tick(1500)
        assert timer.elapsed_ms == 1500
        assert timer.remaining_ms == 58500
        assert timer.display_seconds == 59

    def test_counts_up(self):
        timer = SessionTimer(duration_s=60, direction="up")
        timer.start()
        timer.tick(1500)
        assert timer.display_seconds == 1

    def test_idle_until_started(self):
        timer = SessionTimer(duration_s=10)
        timer.tick(5000)
        assert timer.elapsed_ms == 0
        assert not timer.running

    def test_pause(self):
        timer = SessionTimer(duration_s=10)
        timer.start()
        timer.tick(1000)
        timer.pause()
        timer.tick(1000)
        assert timer.elapsed_ms == 1000

    def test_completes_once(self):
        completions = []
        timer = SessionTimer(duration_s=2, on_complete=lambda: completions.append(1))
        timer.start()
        timer.tick(1500)
        assert not timer.is_complete
        timer.tick(1500)
        assert timer.is_complete
        assert timer.remaining_ms == 0
        assert timer.display_seconds == 0
        assert not timer.running

        timer.start()
        timer.tick(1000)
        assert completions == [1]

    def test_reset(self):
        completions = []
        timer = SessionTimer(duration_s=1, on_complete=lambda: completions.append(1))
        timer.start()
        timer.tick(1000)
        timer.reset()
        assert timer.elapsed_ms == 0
        assert not timer.is_complete

        timer.start()
        timer.tick(1000)
        assert completions == [1, 1]

    @pytest.mark.parametrize(
        "duration, direction, elapsed, expected",
        [
            (60, "down", 0, "00:01:00"),
            (3700, "down", 0, "01:01:40"),
            (600, "up", 125000, "00:02:05"),
        ],
    )
    def test_format_hms(self, duration, direction, elapsed, expected):
        timer = SessionTimer(duration_s=duration, direction=direction)
        timer.start()
        timer.tick(elapsed)
        assert timer.format_hms() == expected

    def test_invalid_arguments(self):
        with pytest.raises(ValueError):
            SessionTimer(duration_s=0)
        with pytest.raises(ValueError):
            SessionTimer(direction="sideways")
