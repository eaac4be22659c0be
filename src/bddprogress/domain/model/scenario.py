"""Scenario value objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bddprogress.domain.model.enums import ExecutionStatus
    from bddprogress.domain.model.execution_time import ExecutionTime


@dataclass(frozen=True, slots=True)
class ScenarioInfo:
    """Scenario metadata known before execution.

    Attributes:
        name: Scenario name (must not be empty)
        labels: Labels in declaration order
    """

    name: str
    labels: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("scenario name must not be empty")
        if isinstance(self.labels, str):
            raise TypeError("labels must be a tuple of strings, not str")


@dataclass(frozen=True, slots=True)
class ScenarioResult:
    """Scenario after execution.

    Attributes:
        info: Scenario metadata
        status: Final execution status
        status_details: Failure/ignore reason, may span lines. None or blank = absent.
        execution_time: Timing. None if scenario never started.
    """

    info: ScenarioInfo
    status: ExecutionStatus
    status_details: str | None = None
    execution_time: ExecutionTime | None = None
