"""pytest-bdd hook implementations that drive a ProgressFormatter.

pytest-bdd has no feature-level hooks: feature start/finish events are
synthesized when consecutive scenarios belong to different features,
and at session finish.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

import pytest

from bddprogress.domain.events import (
    FeatureFinished,
    FeatureStarting,
    ScenarioFinished,
    ScenarioStarting,
    StepCommented,
    StepFileAttached,
    StepFinished,
    StepStarting,
)
from bddprogress.domain.exceptions import NoActiveStepError
from bddprogress.domain.model.enums import ExecutionStatus
from bddprogress.domain.model.execution_time import ExecutionTime
from bddprogress.domain.model.feature import FeatureResult
from bddprogress.domain.model.scenario import ScenarioResult
from bddprogress.domain.model.step import FileAttachment, StepResult
from bddprogress.presentation.pytest_plugin.adapter import (
    describe_exception,
    feature_info,
    feature_key,
    scenario_info,
    step_info,
    step_parameters,
)

if TYPE_CHECKING:
    from bddprogress.domain.model.feature import FeatureInfo
    from bddprogress.domain.model.scenario import ScenarioInfo
    from bddprogress.domain.model.step import StepInfo
    from bddprogress.domain.ports.notifier import ProgressNotifierProtocol

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _Clock:
    """Wall-clock start plus monotonic start for duration."""

    started_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    started: float = field(default_factory=time.perf_counter)

    def stop(self) -> ExecutionTime:
        elapsed = timedelta(seconds=time.perf_counter() - self.started)
        return ExecutionTime(start=self.started_at, duration=elapsed)


@dataclass(slots=True)
class _StepRun:
    info: StepInfo
    clock: _Clock = field(default_factory=_Clock)


@dataclass(slots=True)
class _ScenarioRun:
    info: ScenarioInfo
    clock: _Clock = field(default_factory=_Clock)
    steps_started: int = 0
    current: _StepRun | None = None
    failure: str | None = None


class BddProgressReporter:
    """Translates pytest-bdd hooks into progress events.

    Registered as a pytest plugin object. Also the step-side API behind the
    bdd_progress fixture: comment() and attach_file() report on the
    currently running step.
    """

    def __init__(self, notifier: ProgressNotifierProtocol) -> None:
        """Initialize reporter.

        Args:
            notifier: Receives every synthesized progress event.
        """
        self._notifier = notifier
        self._feature: FeatureInfo | None = None
        self._feature_key: str | None = None
        self._scenario: _ScenarioRun | None = None

    # =========================================================================
    # Step-side API
    # =========================================================================

    def comment(self, text: str) -> None:
        """Report a comment on the running step.

        Raises:
            NoActiveStepError: Called outside a step.
        """
        step = self._current_step("comment")
        self._notifier.notify(StepCommented(step=step.info, comment=text))

    def attach_file(self, name: str, file_path: str) -> None:
        """Report a file attached to the running step.

        Raises:
            NoActiveStepError: Called outside a step.
        """
        step = self._current_step("attach file")
        attachment = FileAttachment(name=name, file_path=str(file_path))
        self._notifier.notify(StepFileAttached(step=step.info, attachment=attachment))

    def _current_step(self, operation: str) -> _StepRun:
        if self._scenario is None or self._scenario.current is None:
            raise NoActiveStepError(operation)
        return self._scenario.current

    # =========================================================================
    # pytest-bdd hooks
    # =========================================================================

    @pytest.hookimpl(optionalhook=True)
    def pytest_bdd_before_scenario(self, feature: Any, scenario: Any) -> None:
        key = feature_key(feature)
        if key != self._feature_key:
            self._finish_feature()
            self._feature = feature_info(feature)
            self._feature_key = key
            self._notifier.notify(FeatureStarting(feature=self._feature))

        self._scenario = _ScenarioRun(info=scenario_info(scenario))
        self._notifier.notify(ScenarioStarting(scenario=self._scenario.info))

    @pytest.hookimpl(optionalhook=True)
    def pytest_bdd_after_scenario(self) -> None:
        run = self._scenario
        if run is None:
            logger.debug("after_scenario without before_scenario, ignored")
            return

        status = ExecutionStatus.FAILED if run.failure else ExecutionStatus.PASSED
        result = ScenarioResult(
            info=run.info,
            status=status,
            status_details=run.failure,
            execution_time=run.clock.stop(),
        )
        self._scenario = None
        self._notifier.notify(ScenarioFinished(result=result))

    @pytest.hookimpl(optionalhook=True)
    def pytest_bdd_before_step(self, scenario: Any, step: Any) -> None:
        run = self._scenario
        if run is None:
            return

        run.steps_started += 1
        run.current = _StepRun(info=step_info(step, run.steps_started, len(scenario.steps)))
        self._notifier.notify(StepStarting(step=run.current.info))

    @pytest.hookimpl(optionalhook=True)
    def pytest_bdd_after_step(self, step: Any) -> None:
        self._finish_step(step, ExecutionStatus.PASSED, None)

    @pytest.hookimpl(optionalhook=True)
    def pytest_bdd_step_error(self, step: Any, exception: BaseException) -> None:
        self._finish_step(step, ExecutionStatus.FAILED, describe_exception(exception))

    @pytest.hookimpl(optionalhook=True)
    def pytest_bdd_step_func_lookup_error(self, scenario: Any, step: Any, exception: BaseException) -> None:
        run = self._scenario
        if run is None:
            return

        # Step never started: report it as failed without timing
        info = step_info(step, run.steps_started + 1, len(scenario.steps))
        details = describe_exception(exception)
        run.failure = f"Step {info.number}: {details}"
        result = StepResult(info=info, status=ExecutionStatus.FAILED, status_details=details)
        self._notifier.notify(StepFinished(result=result))

    @pytest.hookimpl(tryfirst=True)
    def pytest_sessionfinish(self) -> None:
        self._finish_feature()

    # =========================================================================
    # Internals
    # =========================================================================

    def _finish_step(self, step: Any, status: ExecutionStatus, details: str | None) -> None:
        run = self._scenario
        if run is None or run.current is None:
            return

        current = run.current
        run.current = None
        if details is not None:
            run.failure = f"Step {current.info.number}: {details}"

        result = StepResult(
            info=current.info,
            status=status,
            execution_time=current.clock.stop(),
            parameters=step_parameters(step),
            status_details=details,
        )
        self._notifier.notify(StepFinished(result=result))

    def _finish_feature(self) -> None:
        if self._feature is None:
            return
        finished = FeatureResult(info=self._feature)
        self._feature = None
        self._feature_key = None
        self._notifier.notify(FeatureFinished(result=finished))
