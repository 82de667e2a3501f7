"""Count drill controller with adaptive display timing."""

import re
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from functools import partial
from random import Random
from typing import Callable

from transitions import Machine

from countsight.cards import Deck, Hand, generate_deck
from countsight.counting import evaluate
from countsight.dealer import Dealer, deal
from countsight.drill.config import DrillConfig
from countsight.drill.events import DrillEvent, DrillEventType, EventEmitter
from countsight.drill.scheduler import ManualScheduler, Scheduler, TimerHandle
from countsight.drill.state import DrillPhase
from countsight.logging_utils import get_logger

logger = get_logger(__name__)

FEEDBACK_CORRECT = "Correct!"
FEEDBACK_INCORRECT = "Incorrect. The correct count was {count}."
FEEDBACK_INVALID = "Please enter a valid number."
FEEDBACK_TIMER_RESET = "Timer reset to initial value."

# Events kept on the controller for inspection (a long session emits many)
EVENT_HISTORY_LIMIT = 1000

_NOT_COUNT_CHARS = re.compile(r"[^0-9-]")


class FeedbackKind(Enum):
    """How the presentation layer should style a feedback message."""

    SUCCESS = auto()
    FAILURE = auto()
    INFO = auto()


def classify_feedback(feedback: str | None) -> FeedbackKind | None:
    """Classify feedback by its prefix ("Correct", "Incorrect", anything else)."""
    if feedback is None:
        return None
    if feedback.startswith("Correct"):
        return FeedbackKind.SUCCESS
    if feedback.startswith("Incorrect"):
        return FeedbackKind.FAILURE
    return FeedbackKind.INFO


def sanitize_input(text: str) -> str:
    """Keep only ASCII digits and minus signs."""
    return _NOT_COUNT_CHARS.sub("", text)


class SubmissionResult(Enum):
    """Outcome of submitting an answer."""

    CORRECT = auto()
    INCORRECT = auto()
    INVALID = auto()


@dataclass
class DrillState:
    """Mutable session data for the current round."""

    hand: Hand = ()
    true_count: int = 0
    cards_visible: bool = False
    user_input: str = ""
    feedback: str | None = None
    display_time: int = 0
    rounds_played: int = 0
    rounds_correct: int = 0
    history: list[bool] = field(default_factory=list)


class DrillController:
    """
    Hi-Lo count drill using a state machine.

    Each round deals a hand, shows it for the current display-time budget,
    hides it when the scheduler fires, then grades the typed count. Correct
    answers shorten the next reveal, wrong answers lengthen it.

    All methods run on the caller's thread; the only deferred work is the
    single hide callback registered with the scheduler.
    """

    STATES = [p.name.lower() for p in DrillPhase]

    TRANSITIONS = [
        {"trigger": "reveal", "source": "*", "dest": "revealing"},
        {"trigger": "hide_cards", "source": "revealing", "dest": "awaiting_input"},
        {"trigger": "grade", "source": "awaiting_input", "dest": "graded"},
    ]

    def __init__(
        self,
        config: DrillConfig | None = None,
        scheduler: Scheduler | None = None,
        rng: Random | None = None,
        dealer: Dealer | None = None,
    ) -> None:
        """
        Initialize a drill session.

        Args:
            config: Timing and dealing configuration (defaults if not provided)
            scheduler: Runs the auto-hide callback (a ManualScheduler if not provided)
            rng: Random number generator for shuffling
            dealer: Replaces the shuffling dealer, e.g. to deal a known hand
        """
        self.config = config or DrillConfig()
        self.scheduler: Scheduler = scheduler or ManualScheduler()
        self.deck: Deck = generate_deck()
        self._dealer: Dealer = dealer or partial(deal, rng=rng)
        self.events = EventEmitter(history_limit=EVENT_HISTORY_LIMIT)

        self._state = DrillState(display_time=self.config.initial_display_time)
        self._hide_handle: TimerHandle | None = None
        self._reveal_started_at = 0.0
        self._reveal_duration = 0
        self._closed = False

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="idle",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    # --- Observed outputs -------------------------------------------------

    @property
    def phase(self) -> DrillPhase:
        """Get current drill phase as enum."""
        return DrillPhase[self._machine_state.upper()]  # type: ignore

    @property
    def hand(self) -> Hand:
        return self._state.hand

    @property
    def true_count(self) -> int:
        return self._state.true_count

    @property
    def cards_visible(self) -> bool:
        return self._state.cards_visible

    @property
    def user_input(self) -> str:
        return self._state.user_input

    @property
    def feedback(self) -> str | None:
        return self._state.feedback

    @property
    def feedback_kind(self) -> FeedbackKind | None:
        return classify_feedback(self._state.feedback)

    @property
    def display_time(self) -> int:
        """Current display-time budget in milliseconds."""
        return self._state.display_time

    @property
    def reveal_remaining_ms(self) -> float:
        """Milliseconds left before the cards are hidden (0 unless revealing)."""
        if self.phase != DrillPhase.REVEALING:
            return 0.0
        elapsed = self.scheduler.now() - self._reveal_started_at
        return max(0.0, self._reveal_duration - elapsed)

    @property
    def accuracy(self) -> float:
        """Fraction of graded rounds answered correctly."""
        if self._state.rounds_played == 0:
            return 0.0
        return self._state.rounds_correct / self._state.rounds_played

    @property
    def closed(self) -> bool:
        return self._closed

    def snapshot(self) -> DrillState:
        """Return a copy of the session data."""
        return replace(self._state, history=list(self._state.history))

    def subscribe(
        self,
        handler: Callable[[DrillEvent], None],
        event_type: DrillEventType | None = None,
    ) -> Callable[[], None]:
        """Subscribe to drill events; call the result to unsubscribe."""
        return self.events.subscribe(handler, event_type)

    # --- Inbound calls ----------------------------------------------------

    def start_round(self) -> Hand:
        """
        Deal a new hand and show it for the current display-time budget.

        Abandons any round in progress; its hide timer is cancelled before
        the new one is armed.

        Returns:
            The newly dealt hand
        """
        if self._closed:
            raise RuntimeError("drill controller is closed")

        self._cancel_hide_timer()

        hand = tuple(self._dealer(self.deck, self.config.cards_per_deal))
        state = self._state
        state.hand = hand
        state.true_count = evaluate(hand)
        state.user_input = ""
        state.feedback = None
        state.cards_visible = True

        self.reveal()

        self._reveal_started_at = self.scheduler.now()
        self._reveal_duration = state.display_time
        self._hide_handle = self.scheduler.call_later(state.display_time, self._on_display_elapsed)

        logger.debug(
            "Round started: %d cards, showing for %dms", len(hand), state.display_time
        )
        self.events.emit_new(
            DrillEventType.ROUND_STARTED,
            cards=[str(card) for card in hand],
            display_time=state.display_time,
        )
        return hand

    def receive_input(self, text: str) -> bool:
        """
        Replace the pending answer with the sanitized ``text``.

        Only accepted while the cards are hidden and the answer is open.

        Returns:
            True if the input was stored
        """
        if self.phase != DrillPhase.AWAITING_INPUT:
            return False

        self._state.user_input = sanitize_input(text)
        self.events.emit_new(DrillEventType.INPUT_CHANGED, value=self._state.user_input)
        return True

    def submit(self) -> SubmissionResult | None:
        """
        Grade the pending answer.

        Invalid numbers leave the round open for another attempt and keep
        the budget unchanged. Correct answers shrink the budget by the
        decrement, wrong answers grow it by the increment, both clamped.

        Returns:
            The outcome, or None when no answer is being collected
        """
        if self.phase != DrillPhase.AWAITING_INPUT:
            return None

        state = self._state
        try:
            guess = int(state.user_input)
        except ValueError:
            state.feedback = FEEDBACK_INVALID
            self.events.emit_new(DrillEventType.INVALID_INPUT, value=state.user_input)
            return SubmissionResult.INVALID

        correct = guess == state.true_count
        if correct:
            state.feedback = FEEDBACK_CORRECT
            state.display_time = self.config.clamp(state.display_time - self.config.time_decrement)
        else:
            state.feedback = FEEDBACK_INCORRECT.format(count=state.true_count)
            state.display_time = self.config.clamp(state.display_time + self.config.time_increment)

        state.rounds_played += 1
        state.rounds_correct += int(correct)
        state.history.append(correct)
        self.grade()

        logger.info(
            "Graded guess %d against %d: %s, next display time %dms",
            guess,
            state.true_count,
            "correct" if correct else "incorrect",
            state.display_time,
        )
        self.events.emit_new(
            DrillEventType.ANSWER_CORRECT if correct else DrillEventType.ANSWER_INCORRECT,
            guess=guess,
            actual=state.true_count,
            display_time=state.display_time,
        )
        return SubmissionResult.CORRECT if correct else SubmissionResult.INCORRECT

    def reset_timer(self) -> None:
        """Put the display-time budget back to its initial value."""
        self._state.display_time = self.config.initial_display_time
        self._state.feedback = FEEDBACK_TIMER_RESET
        self.events.emit_new(DrillEventType.TIMER_RESET, display_time=self._state.display_time)

    def close(self) -> None:
        """End the session, cancelling the pending hide callback."""
        if self._closed:
            return
        self._cancel_hide_timer()
        self._closed = True
        self.events.emit_new(DrillEventType.DRILL_CLOSED, rounds_played=self._state.rounds_played)

    def __enter__(self) -> "DrillController":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # --- Internals --------------------------------------------------------

    def _cancel_hide_timer(self) -> None:
        if self._hide_handle is not None:
            self._hide_handle.cancel()
            self._hide_handle = None

    def _on_display_elapsed(self) -> None:
        self._hide_handle = None
        self._state.cards_visible = False
        self.hide_cards()
        logger.debug("Cards hidden after %dms", self._reveal_duration)
        self.events.emit_new(DrillEventType.CARDS_HIDDEN, card_count=len(self._state.hand))
