"""Adaptive Hi-Lo count drill."""

from countsight.drill.config import DrillConfig
from countsight.drill.controller import (
    DrillController,
    DrillState,
    FeedbackKind,
    SubmissionResult,
    classify_feedback,
    sanitize_input,
)
from countsight.drill.events import DrillEvent, DrillEventType, EventEmitter
from countsight.drill.scheduler import AsyncioScheduler, ManualScheduler, Scheduler
from countsight.drill.session_timer import SessionTimer
from countsight.drill.state import DrillPhase

__all__ = [
    "AsyncioScheduler",
    "DrillConfig",
    "DrillController",
    "DrillEvent",
    "DrillEventType",
    "DrillPhase",
    "DrillState",
    "EventEmitter",
    "FeedbackKind",
    "ManualScheduler",
    "Scheduler",
    "SessionTimer",
    "SubmissionResult",
    "classify_feedback",
    "sanitize_input",
]
