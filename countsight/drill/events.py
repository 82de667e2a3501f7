"""Drill events for the observer channel."""

from collections import defaultdict, deque
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from functools import partial
from typing import Any, Callable, Iterator


class DrillEventType(Enum):
    """Types of drill events."""

    # Round flow
    ROUND_STARTED = auto()
    CARDS_HIDDEN = auto()

    # Answer entry
    INPUT_CHANGED = auto()
    ANSWER_CORRECT = auto()
    ANSWER_INCORRECT = auto()
    INVALID_INPUT = auto()

    # Session
    TIMER_RESET = auto()
    DRILL_CLOSED = auto()


@dataclass(frozen=True)
class DrillEvent:
    """
    Immutable drill event.

    Events are how the presentation layer learns about changes it did not
    trigger itself, such as the cards being hidden by the timer.
    """

    event_type: DrillEventType
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return f"{self.event_type.name}: {self.data}"


EventHandler = Callable[[DrillEvent], None]


class EventEmitter:
    """
    Fan-out channel for drill events.

    Handlers registered for a specific type run before catch-all handlers.
    The most recent ``history_limit`` events are kept for inspection; older
    ones are dropped.
    """

    def __init__(self, history_limit: int | None = 500) -> None:
        self._typed: dict[DrillEventType, list[EventHandler]] = defaultdict(list)
        self._catch_all: list[EventHandler] = []
        self._recent: deque[DrillEvent] = deque(maxlen=history_limit)

    def _handlers_for(self, event_type: DrillEventType | None) -> list[EventHandler]:
        return self._catch_all if event_type is None else self._typed[event_type]

    def subscribe(
        self,
        handler: EventHandler,
        event_type: DrillEventType | None = None,
    ) -> Callable[[], None]:
        """
        Register ``handler`` for one event type, or for every event.

        Returns:
            A callable that removes the subscription again
        """
        self._handlers_for(event_type).append(handler)
        return partial(self.unsubscribe, handler, event_type)

    def unsubscribe(
        self,
        handler: EventHandler,
        event_type: DrillEventType | None = None,
    ) -> None:
        handlers = self._handlers_for(event_type)
        if handler in handlers:
            handlers.remove(handler)

    @contextmanager
    def listening(self, event_type: DrillEventType | None = None) -> Iterator[list[DrillEvent]]:
        """Collect the events emitted inside a ``with`` block."""
        received: list[DrillEvent] = []
        remove = self.subscribe(received.append, event_type)
        try:
            yield received
        finally:
            remove()

    def emit(self, event: DrillEvent) -> None:
        self._recent.append(event)
        # Snapshot both lists so handlers may (un)subscribe while running
        for handler in [*self._typed.get(event.event_type, ()), *self._catch_all]:
            handler(event)

    def emit_new(self, event_type: DrillEventType, **data: Any) -> DrillEvent:
        """Build, emit and return an event carrying ``data``."""
        event = DrillEvent(event_type=event_type, data=data)
        self.emit(event)
        return event

    def last(self, event_type: DrillEventType | None = None) -> DrillEvent | None:
        """The most recent recorded event, optionally of one type."""
        for event in reversed(self._recent):
            if event_type is None or event.event_type == event_type:
                return event
        return None

    @property
    def history(self) -> list[DrillEvent]:
        """Recorded events, oldest first."""
        return list(self._recent)

    def clear_history(self) -> None:
        self._recent.clear()

    def __len__(self) -> int:
        return len(self._recent)
