"""Tests for model/enums.py."""

import pytest

from bddprogress.domain.model.enums import ExecutionStatus, ParameterStatus


class TestExecutionStatus:
    """Tests for ExecutionStatus display names."""

    @pytest.mark.parametrize(
        ("status", "text"),
        [
            (ExecutionStatus.NOT_RUN, "NotRun"),
            (ExecutionStatus.PASSED, "Passed"),
            (ExecutionStatus.BYPASSED, "Bypassed"),
            (ExecutionStatus.IGNORED, "Ignored"),
            (ExecutionStatus.FAILED, "Failed"),
        ],
    )
    def test_str(self, status: ExecutionStatus, text: str) -> None:
        """str() gives the display name."""
        assert str(status) == text
        assert f"{status}" == text


class TestParameterStatus:
    """Tests for ParameterStatus.is_failing."""

    def test_failing(self) -> None:
        """FAILURE and EXCEPTION are failing."""
        assert ParameterStatus.FAILURE.is_failing
        assert ParameterStatus.EXCEPTION.is_failing

    def test_not_failing(self) -> None:
        """SUCCESS and NOT_APPLICABLE are not failing."""
        assert not ParameterStatus.SUCCESS.is_failing
        assert not ParameterStatus.NOT_APPLICABLE.is_failing
