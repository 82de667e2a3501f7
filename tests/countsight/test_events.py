"""Tests for drill events and phases."""

import pytest

from countsight.drill import DrillEvent, DrillEventType, DrillPhase, EventEmitter


class TestEventEmitter:
    """Tests for the EventEmitter class."""

    def test_typed_subscription(self):
        emitter = EventEmitter()
        received = []
        emitter.subscribe(received.append, DrillEventType.CARDS_HIDDEN)

        emitter.emit_new(DrillEventType.ROUND_STARTED)
        emitter.emit_new(DrillEventType.CARDS_HIDDEN, card_count=3)

        assert [e.event_type for e in received] == [DrillEventType.CARDS_HIDDEN]
        assert received[0].data == {"card_count": 3}

    def test_catch_all_runs_after_typed(self):
        emitter = EventEmitter()
        order = []
        emitter.subscribe(lambda e: order.append("all"))
        emitter.subscribe(lambda e: order.append("typed"), DrillEventType.TIMER_RESET)

        emitter.emit_new(DrillEventType.TIMER_RESET)
        assert order == ["typed", "all"]

    def test_unsubscribe(self):
        emitter = EventEmitter()
        received = []
        emitter.subscribe(received.append)
        emitter.unsubscribe(received.append)
        emitter.unsubscribe(print, DrillEventType.ROUND_STARTED)

        emitter.emit_new(DrillEventType.ROUND_STARTED)
        assert received == []

    def test_history(self):
        emitter = EventEmitter()
        event = emitter.emit_new(DrillEventType.INPUT_CHANGED, value="4")
        history = emitter.history
        assert history == [event]

        history.clear()
        assert len(emitter.history) == 1

        emitter.clear_history()
        assert emitter.history == []

    def test_subscribe_returns_remover(self):
        emitter = EventEmitter()
        received = []
        remove = emitter.subscribe(received.append, DrillEventType.CARDS_HIDDEN)

        emitter.emit_new(DrillEventType.CARDS_HIDDEN)
        remove()
        emitter.emit_new(DrillEventType.CARDS_HIDDEN)
        assert len(received) == 1

    def test_handler_may_unsubscribe_itself(self):
        emitter = EventEmitter()
        calls = []

        def once(event):
            calls.append(event)
            emitter.unsubscribe(once)

        emitter.subscribe(once)
        emitter.emit_new(DrillEventType.ROUND_STARTED)
        emitter.emit_new(DrillEventType.ROUND_STARTED)
        assert len(calls) == 1

    def test_listening_is_scoped_to_block(self):
        emitter = EventEmitter()
        with emitter.listening(DrillEventType.INPUT_CHANGED) as events:
            emitter.emit_new(DrillEventType.INPUT_CHANGED, value="1")
            emitter.emit_new(DrillEventType.TIMER_RESET)
        emitter.emit_new(DrillEventType.INPUT_CHANGED, value="12")

        assert [e.data for e in events] == [{"value": "1"}]

    def test_listening_unsubscribes_on_error(self):
        emitter = EventEmitter()
        with pytest.raises(RuntimeError):
            with emitter.listening() as events:
                raise RuntimeError
        emitter.emit_new(DrillEventType.ROUND_STARTED)
        assert events == []

    def test_history_is_bounded(self):
        """Only the most recent events are kept."""
        emitter = EventEmitter(history_limit=3)
        for value in "12345":
            emitter.emit_new(DrillEventType.INPUT_CHANGED, value=value)

        assert len(emitter) == 3
        assert [e.data["value"] for e in emitter.history] == ["3", "4", "5"]

    def test_last(self):
        emitter = EventEmitter()
        assert emitter.last() is None

        started = emitter.emit_new(DrillEventType.ROUND_STARTED)
        hidden = emitter.emit_new(DrillEventType.CARDS_HIDDEN)

        assert emitter.last() is hidden
        assert emitter.last(DrillEventType.ROUND_STARTED) is started
        assert emitter.last(DrillEventType.DRILL_CLOSED) is None

    def test_event_str(self):
        event = DrillEvent(DrillEventType.INVALID_INPUT, {"value": ""})
        assert str(event) == "INVALID_INPUT: {'value': ''}"


class TestDrillPhase:
    """Tests for DrillPhase."""

    def test_str(self):
        assert str(DrillPhase.AWAITING_INPUT) == "Awaiting Input"
