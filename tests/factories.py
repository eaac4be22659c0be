"""Test factories for creating domain objects.

Centralized factory functions to avoid duplication across test modules.
All factories follow the same pattern: accept simplified parameters,
return fully constructed domain objects.
"""

from datetime import UTC, datetime, timedelta

from bddprogress.domain.model.enums import ExecutionStatus
from bddprogress.domain.model.execution_time import ExecutionTime
from bddprogress.domain.model.parameter import StepParameter, TabularParameterDetails, TreeNode, TreeParameterDetails
from bddprogress.domain.model.step import StepInfo, StepResult

# Default start time - consistent across all tests
DEFAULT_START = datetime(2024, 1, 1, 12, 0, tzinfo=UTC)


def make_time(ms: int = 12) -> ExecutionTime:
    """Create an ExecutionTime lasting ms milliseconds."""
    return ExecutionTime(start=DEFAULT_START, duration=timedelta(milliseconds=ms))


def make_step(
    name: str = "GIVEN a step",
    number: int = 1,
    total: int = 3,
    group_prefix: str = "",
    parent: StepInfo | None = None,
) -> StepInfo:
    """Create a StepInfo for tests.

    Args:
        name: Step name including keyword
        number: Position within group
        total: Steps in group
        group_prefix: Group prefix, e.g. '1.'
        parent: Owning step

    Returns:
        StepInfo instance
    """
    return StepInfo(name=name, number=number, total=total, group_prefix=group_prefix, parent=parent)


def make_nested_step(depth: int, name: str = "GIVEN a sub-step") -> StepInfo:
    """Create a step with depth ancestors (depth=0 is scenario level)."""
    step = make_step(name="WHEN composite step")
    prefix = ""
    for _ in range(depth - 1):
        prefix = f"{prefix}{step.number}."
        step = make_step(name="WHEN composite step", group_prefix=prefix, parent=step)
    if depth == 0:
        return make_step(name=name)
    prefix = f"{prefix}{step.number}."
    return make_step(name=name, group_prefix=prefix, parent=step)


def make_step_result(
    step: StepInfo | None = None,
    status: ExecutionStatus = ExecutionStatus.PASSED,
    ms: int | None = 12,
    parameters: tuple[StepParameter, ...] = (),
) -> StepResult:
    """Create a StepResult for tests. ms=None means no execution time."""
    return StepResult(
        info=step or make_step(),
        status=status,
        execution_time=make_time(ms) if ms is not None else None,
        parameters=parameters,
    )


def make_table_parameter(name: str = "users") -> StepParameter:
    """Create a two-row tabular StepParameter."""
    details = TabularParameterDetails.from_rows(("name", "age"), ("Ann", "31"), ("Bob", "42"))
    return StepParameter(name=name, details=details)


def make_tree_parameter(name: str = "order") -> StepParameter:
    """Create a small tree StepParameter."""
    root = TreeNode(
        name="$",
        value="<object>",
        children=(
            TreeNode(name="id", value="7"),
            TreeNode(name="items", value="<array:1>", children=(TreeNode(name="[0]", value="'book'"),)),
        ),
    )
    return StepParameter(name=name, details=TreeParameterDetails(root=root))
