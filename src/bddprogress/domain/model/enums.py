"""Domain enumerations."""

from enum import Enum, auto


class ExecutionStatus(Enum):
    """Execution status of a scenario or step.

    Value is the display name used in progress output.
    """

    NOT_RUN = "NotRun"
    PASSED = "Passed"
    BYPASSED = "Bypassed"
    IGNORED = "Ignored"
    FAILED = "Failed"

    def __str__(self) -> str:
        return self.value


class TableRowType(Enum):
    """Row kind in a verifiable table."""

    MATCHING = auto()  # expected and actual row present
    SURPLUS = auto()  # actual row without expectation
    MISSING = auto()  # expected row not found


class ParameterStatus(Enum):
    """Verification status of a parameter value."""

    NOT_APPLICABLE = auto()
    SUCCESS = auto()
    FAILURE = auto()
    EXCEPTION = auto()

    @property
    def is_failing(self) -> bool:
        """True for FAILURE and EXCEPTION."""
        return self in (ParameterStatus.FAILURE, ParameterStatus.EXCEPTION)
