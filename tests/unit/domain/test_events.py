"""Tests for domain/events.py."""

import pytest

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
from bddprogress.domain.model.enums import ExecutionStatus
from bddprogress.domain.model.feature import FeatureInfo, FeatureResult
from bddprogress.domain.model.scenario import ScenarioInfo, ScenarioResult
from bddprogress.domain.model.step import FileAttachment
from tests.factories import make_step, make_step_result

_FEATURE = FeatureInfo(name="F")
_SCENARIO = ScenarioInfo(name="S")


class TestGetEventKind:
    """Tests for get_event_kind()."""

    @pytest.mark.parametrize(
        ("event", "kind"),
        [
            (FeatureStarting(_FEATURE), EventKind.FEATURE_STARTING),
            (FeatureFinished(FeatureResult(_FEATURE)), EventKind.FEATURE_FINISHED),
            (ScenarioStarting(_SCENARIO), EventKind.SCENARIO_STARTING),
            (ScenarioFinished(ScenarioResult(_SCENARIO, ExecutionStatus.PASSED)), EventKind.SCENARIO_FINISHED),
            (StepStarting(make_step()), EventKind.STEP_STARTING),
            (StepFinished(make_step_result()), EventKind.STEP_FINISHED),
            (StepCommented(make_step(), "c"), EventKind.STEP_COMMENTED),
            (StepFileAttached(make_step(), FileAttachment("a", "/a")), EventKind.STEP_FILE_ATTACHED),
        ],
    )
    def test_kind(self, event: ProgressEvent, kind: EventKind) -> None:
        """Every variant maps to its kind."""
        assert get_event_kind(event) is kind

    def test_kinds_cover_all_variants(self) -> None:
        """There are exactly 8 kinds."""
        assert len(EventKind) == 8


class TestEventImmutability:
    """Events are frozen."""

    def test_frozen(self) -> None:
        """Assigning a field raises."""
        event = StepCommented(make_step(), "c")
        with pytest.raises(AttributeError):
            event.comment = "other"  # type: ignore[misc]
