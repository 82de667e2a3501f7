"""Drill phase enumeration."""

from enum import Enum, auto


class DrillPhase(Enum):
    """
    Drill state machine phases.

    Flow: IDLE → REVEALING → AWAITING_INPUT → GRADED → REVEALING → ...
    The transitions themselves live on DrillController.TRANSITIONS.
    """

    # Session created, nothing dealt yet
    IDLE = auto()

    # Hand is on screen, hide timer running
    REVEALING = auto()

    # Cards hidden, waiting for the count
    AWAITING_INPUT = auto()

    # Answer checked, ready for the next round
    GRADED = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()

