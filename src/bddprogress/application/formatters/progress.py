"""Progress formatter: ProgressEvent → human-readable progress lines.

Pure projection from (event, config) to text. The only side effect is
passing each non-empty message to the sink; sink errors propagate.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from bddprogress.application.formatters.config import ProgressFormatterConfig, StepNumberPlacement
from bddprogress.application.renderers.table import render_table
from bddprogress.application.renderers.tree import render_tree
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
from bddprogress.domain.exceptions import StepDepthExceededError
from bddprogress.domain.model.enums import ExecutionStatus
from bddprogress.domain.model.parameter import TabularParameterDetails, TreeParameterDetails
from bddprogress.infrastructure.sinks import compose_sinks, stream_sink

if TYPE_CHECKING:
    from collections.abc import Iterable

    from bddprogress.domain.events import ProgressEvent
    from bddprogress.domain.model.feature import FeatureInfo, FeatureResult
    from bddprogress.domain.model.scenario import ScenarioInfo, ScenarioResult
    from bddprogress.domain.model.step import FileAttachment, StepInfo, StepResult
    from bddprogress.infrastructure.sinks import Sink

logger = logging.getLogger(__name__)

# Literal, case-sensitive prefixes: hosts render step keywords upper-case
STEP_KEYWORDS = ("GIVEN", "WHEN", "THEN", "AND", "BUT")

# Extra indent for parameter blocks and comments, relative to the step
PARAMETER_INDENT = "    "


class ProgressFormatter:
    """Renders progress events as indented text lines.

    Output goes to the sinks given at construction. Several sinks receive
    every message in order; no sink means sys.stdout.

    Subclasses may override any render_* method to change one notification.

    Example:
        lines: list[str] = []
        formatter = ProgressFormatter(lines.append)
        formatter.notify(FeatureStarting(FeatureInfo("Login")))
        assert lines == ["FEATURE: Login"]
    """

    def __init__(self, *sinks: Sink, config: ProgressFormatterConfig | None = None) -> None:
        """Initialize formatter.

        Args:
            *sinks: Message receivers. Empty = write to sys.stdout.
            config: Formatting options. Uses defaults if None.
        """
        self._sink = compose_sinks(*sinks) if sinks else stream_sink()
        self._config = config or ProgressFormatterConfig()

    @property
    def config(self) -> ProgressFormatterConfig:
        """Current formatting options."""
        return self._config

    def configure(self, **changes: object) -> ProgressFormatterConfig:
        """Replace selected options. Affects only events rendered afterwards.

        Args:
            **changes: ProgressFormatterConfig field values.

        Returns:
            New active config.

        Raises:
            TypeError: Unknown option name.
            ValueError: Invalid option value.
        """
        self._config = replace(self._config, **changes)
        return self._config

    # =========================================================================
    # Dispatch
    # =========================================================================

    def notify(self, event: ProgressEvent) -> None:
        """Render event and pass the message to the sink (if any)."""
        message = self.render(event)
        if message is not None:
            self._sink(message)

    def render(self, event: ProgressEvent) -> str | None:
        """Render event as message.

        Returns:
            Message text, or None when nothing should be written
            (unknown event, suppressed step finish).
        """
        match event:
            case FeatureStarting():
                return self.render_feature_start(event.feature)
            case FeatureFinished():
                return self.render_feature_finished(event.result)
            case ScenarioStarting():
                return self.render_scenario_start(event.scenario)
            case ScenarioFinished():
                return self.render_scenario_finished(event.result)
            case StepStarting():
                return self.render_step_start(event.step)
            case StepFinished():
                return self.render_step_finished(event.result)
            case StepCommented():
                return self.render_step_comment(event.step, event.comment)
            case StepFileAttached():
                return self.render_step_file_attached(event.step, event.attachment)
            case _:
                logger.debug("Ignoring unsupported progress event %s", type(event).__name__)
                return None

    # =========================================================================
    # Feature / scenario
    # =========================================================================

    def render_feature_start(self, feature: FeatureInfo) -> str:
        """'FEATURE: [label] name' plus indented description."""
        return f"FEATURE: {format_labels(feature.labels)}{feature.name}{format_description(feature.description)}"

    def render_feature_finished(self, result: FeatureResult) -> str:
        """'FEATURE FINISHED: name'."""
        return f"FEATURE FINISHED: {result.info.name}"

    def render_scenario_start(self, scenario: ScenarioInfo) -> str:
        """'SCENARIO: [label] name'."""
        return f"SCENARIO: {format_labels(scenario.labels)}{scenario.name}"

    def render_scenario_finished(self, result: ScenarioResult) -> str:
        """'  SCENARIO RESULT: status after time' plus indented details."""
        text = f"  SCENARIO RESULT: {result.status}"
        if result.execution_time is not None:
            text += f" after {result.execution_time.format_pretty()}"
        return text + indent_block(result.status_details, "    ")

    # =========================================================================
    # Steps
    # =========================================================================

    def render_step_start(self, step: StepInfo) -> str:
        """Indented step name with optional 'STEP n' prefix/suffix."""
        placement = self._config.step_word_on_start
        step_number = self.format_step_number(step)

        text = self.indent_prefix(step)
        if placement is StepNumberPlacement.PREFIX:
            text += f"{step_number}: "
        text += step.name
        if self._config.include_ellipsis_after_step:
            text += "..."
        if placement is StepNumberPlacement.SUFFIX:
            text += f" ({step_number})"
        return text

    def render_step_finished(self, result: StepResult) -> str | None:
        """Status line plus rendered table/tree parameters.

        Returns:
            Stripped message, or None if empty (passing step with
            write_success_for_basic_steps disabled and no parameters).
        """
        indent = self.indent_prefix(result.info)
        report: list[str] = []

        if self._config.write_success_for_basic_steps or result.status is not ExecutionStatus.PASSED:
            report.append(self._status_line(result, indent))

        parameter_indent = indent + PARAMETER_INDENT
        for parameter in result.parameters:
            match parameter.details:
                case TabularParameterDetails():
                    report.append(f"{parameter_indent}{parameter.name}:")
                    report.append(render_table(parameter.details, parameter_indent))
                case TreeParameterDetails():
                    report.append(f"{parameter_indent}{parameter.name}:")
                    report.append(render_tree(parameter.details, parameter_indent))

        message = "\n".join(report).strip()
        if not message:
            logger.debug("Suppressed finish message for step %r", result.info.name)
            return None
        return message

    def render_step_comment(self, step: StepInfo, comment: str) -> str:
        """Indented '=> /* comment */'."""
        return f"{self.indent_prefix(step)}{PARAMETER_INDENT}=> /* {comment} */"

    def render_step_file_attached(self, step: StepInfo, attachment: FileAttachment) -> str:
        """'    => 🔗name: path'. Fixed lead-in, independent of step depth."""
        return f"    => 🔗{attachment.name}: {attachment.file_path}"

    def _status_line(self, result: StepResult, indent: str) -> str:
        placement = self._config.step_word_on_finish
        step_number = self.format_step_number(result.info)

        text = indent
        if placement is StepNumberPlacement.PREFIX:
            text += f"{step_number}: "
        if self._config.include_step_name_on_finish:
            text += result.info.name
        text += "  "
        if placement is not StepNumberPlacement.PREFIX and indent:
            text += "  =>"

        if result.execution_time is not None:
            text += f" ({result.status} after {result.execution_time.format_pretty()})"
        else:
            text += f" ({result.status})"

        if placement is StepNumberPlacement.SUFFIX:
            text += f" ({step_number})"
        return text

    # =========================================================================
    # Step helpers
    # =========================================================================

    def format_step_number(self, step: StepInfo) -> str:
        """'STEP 1.2', or 'STEP 1.2/1.5' with show_final_step_with_step."""
        text = f"STEP {step.group_prefix}{step.number}"
        if self._config.show_final_step_with_step:
            text += f"/{step.group_prefix}{step.total}"
        return text

    def indent_prefix(self, step: StepInfo) -> str:
        """Indentation for step notifications.

        One unit if the name has no keyword prefix, one per ancestor step,
        plus one unconditional unit.

        Raises:
            StepDepthExceededError: More ancestors than max_step_depth.
        """
        units = 1
        if not step.name.startswith(STEP_KEYWORDS):
            units += 1

        limit = self._config.max_step_depth
        for depth, _ancestor in enumerate(step.ancestors(), start=1):
            if depth > limit:
                raise StepDepthExceededError(step.name, limit)
            units += 1

        return self._config.indent_unit * units


# =============================================================================
# Text helpers
# =============================================================================


def format_labels(labels: Iterable[str]) -> str:
    """'[a][b] ' for labels, '' for none."""
    joined = "][".join(labels)
    return f"[{joined}] " if joined else ""


def format_description(description: str | None) -> str:
    """Description on a new line, every line indented by two spaces."""
    return indent_block(description, "  ")


def indent_block(text: str | None, indent: str) -> str:
    """Newline plus text with every line indented. '' for None/blank text."""
    if text is None or not text.strip():
        return ""
    # A trailing newline adds no empty indented line
    lines = text.splitlines()
    return "\n" + "\n".join(f"{indent}{line}" for line in lines)
