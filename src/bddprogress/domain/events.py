"""Domain layer: progress events emitted by a BDD test runner.

Closed union of 8 event variants. All objects frozen.
Consumers dispatch with exhaustive match on ProgressEvent.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from bddprogress.domain.model.feature import FeatureInfo, FeatureResult
from bddprogress.domain.model.scenario import ScenarioInfo, ScenarioResult
from bddprogress.domain.model.step import FileAttachment, StepInfo, StepResult


class EventKind(Enum):
    """Progress event kinds."""

    FEATURE_STARTING = "FEATURE_STARTING"
    FEATURE_FINISHED = "FEATURE_FINISHED"
    SCENARIO_STARTING = "SCENARIO_STARTING"
    SCENARIO_FINISHED = "SCENARIO_FINISHED"
    STEP_STARTING = "STEP_STARTING"
    STEP_FINISHED = "STEP_FINISHED"
    STEP_COMMENTED = "STEP_COMMENTED"
    STEP_FILE_ATTACHED = "STEP_FILE_ATTACHED"


@dataclass(frozen=True, slots=True)
class FeatureStarting:
    """Feature is about to run."""

    feature: FeatureInfo


@dataclass(frozen=True, slots=True)
class FeatureFinished:
    """Feature finished."""

    result: FeatureResult


@dataclass(frozen=True, slots=True)
class ScenarioStarting:
    """Scenario is about to run."""

    scenario: ScenarioInfo


@dataclass(frozen=True, slots=True)
class ScenarioFinished:
    """Scenario finished."""

    result: ScenarioResult


@dataclass(frozen=True, slots=True)
class StepStarting:
    """Step is about to run."""

    step: StepInfo


@dataclass(frozen=True, slots=True)
class StepFinished:
    """Step finished."""

    result: StepResult


@dataclass(frozen=True, slots=True)
class StepCommented:
    """Step code added a comment while running."""

    step: StepInfo
    comment: str


@dataclass(frozen=True, slots=True)
class StepFileAttached:
    """Step code attached a file while running."""

    step: StepInfo
    attachment: FileAttachment


ProgressEvent = (
    FeatureStarting
    | FeatureFinished
    | ScenarioStarting
    | ScenarioFinished
    | StepStarting
    | StepFinished
    | StepCommented
    | StepFileAttached
)


def get_event_kind(event: ProgressEvent) -> EventKind:
    """Get EventKind for event.

    Exhaustive match on ProgressEvent union. Type system ensures all cases covered.
    """
    match event:
        case FeatureStarting():
            return EventKind.FEATURE_STARTING
        case FeatureFinished():
            return EventKind.FEATURE_FINISHED
        case ScenarioStarting():
            return EventKind.SCENARIO_STARTING
        case ScenarioFinished():
            return EventKind.SCENARIO_FINISHED
        case StepStarting():
            return EventKind.STEP_STARTING
        case StepFinished():
            return EventKind.STEP_FINISHED
        case StepCommented():
            return EventKind.STEP_COMMENTED
        case StepFileAttached():
            return EventKind.STEP_FILE_ATTACHED
