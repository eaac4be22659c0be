"""Step value objects.

Steps form a parent chain: a composite step owns sub-steps, each sub-step
refers to its parent. Frozen dataclasses make the chain acyclic, since a
parent must exist before its child is built.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from bddprogress.domain.model.enums import ExecutionStatus
    from bddprogress.domain.model.execution_time import ExecutionTime
    from bddprogress.domain.model.parameter import StepParameter


@dataclass(frozen=True, slots=True)
class StepInfo:
    """Step metadata known before execution.

    Attributes:
        name: Step name including keyword, e.g. 'GIVEN a user'
        number: Position within its group (1-based)
        total: Number of steps in the group (>= number)
        group_prefix: Prefix of the owning group, e.g. '1.' for sub-steps of step 1
        parent: Owning composite step. None for scenario-level steps.
    """

    name: str
    number: int
    total: int
    group_prefix: str = ""
    parent: StepInfo | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("step name must not be empty")
        if self.number < 1:
            raise ValueError(f"number must be >= 1, got {self.number}")
        if self.total < self.number:
            raise ValueError(f"total ({self.total}) must be >= number ({self.number})")

    def ancestors(self) -> Iterator[StepInfo]:
        """Yield parent, grandparent, ... up to the scenario-level step."""
        current = self.parent
        while current is not None:
            yield current
            current = current.parent


@dataclass(frozen=True, slots=True)
class StepResult:
    """Step after execution.

    Attributes:
        info: Step metadata
        status: Final execution status
        execution_time: Timing. None if step never started.
        parameters: Step parameters in declaration order
        status_details: Failure/ignore reason
    """

    info: StepInfo
    status: ExecutionStatus
    execution_time: ExecutionTime | None = None
    parameters: tuple[StepParameter, ...] = ()
    status_details: str | None = None


@dataclass(frozen=True, slots=True)
class FileAttachment:
    """File attached to a step.

    Attributes:
        name: Display name
        file_path: Location of the attached file
    """

    name: str
    file_path: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("attachment name must not be empty")
        if not self.file_path:
            raise ValueError("file_path must not be empty")
