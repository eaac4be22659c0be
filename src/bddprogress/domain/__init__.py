"""bddprogress domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, datetime, collections.abc
"""

from bddprogress.domain.events import (
    EventKind,
    FeatureFinished,
    FeatureStarting,
    ProgressEvent,
    ScenarioFinished,
    ScenarioStarting,
    StepCommented,
    StepFileAttached,
    StepFinished,
    StepStarting,
    get_event_kind,
)
from bddprogress.domain.exceptions import BddProgressError, NoActiveStepError, StepDepthExceededError

__all__ = [
    "BddProgressError",
    "EventKind",
    "FeatureFinished",
    "FeatureStarting",
    "ProgressEvent",
    "ScenarioFinished",
    "ScenarioStarting",
    "StepCommented",
    "StepDepthExceededError",
    "StepFileAttached",
    "StepFinished",
    "StepStarting",
    "NoActiveStepError",
    "get_event_kind",
]
