"""Tests for formatters/config.py."""

import pytest

from bddprogress.application.formatters.config import ProgressFormatterConfig, StepNumberPlacement


class TestStepNumberPlacement:
    """Tests for StepNumberPlacement.parse()."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("prefix", StepNumberPlacement.PREFIX),
            ("SUFFIX", StepNumberPlacement.SUFFIX),
            (" Exclude ", StepNumberPlacement.EXCLUDE),
        ],
    )
    def test_parse(self, text: str, expected: StepNumberPlacement) -> None:
        """Names parse case-insensitively."""
        assert StepNumberPlacement.parse(text) is expected

    def test_parse_unknown_raises(self) -> None:
        """Unknown name raises ValueError listing allowed values."""
        with pytest.raises(ValueError, match="prefix, suffix, exclude"):
            StepNumberPlacement.parse("middle")


class TestProgressFormatterConfig:
    """Tests for ProgressFormatterConfig."""

    def test_default_values(self) -> None:
        """Default values are set correctly."""
        config = ProgressFormatterConfig()
        assert config.write_success_for_basic_steps is True
        assert config.show_final_step_with_step is False
        assert config.indent_length == 4
        assert config.step_word_on_start is StepNumberPlacement.SUFFIX
        assert config.step_word_on_finish is StepNumberPlacement.SUFFIX
        assert config.include_step_name_on_finish is False
        assert config.include_ellipsis_after_step is False
        assert config.max_step_depth == 64

    def test_indent_unit(self) -> None:
        """indent_unit is indent_length spaces."""
        assert ProgressFormatterConfig(indent_length=3).indent_unit == "   "
        assert ProgressFormatterConfig(indent_length=0).indent_unit == ""

    def test_negative_indent_raises(self) -> None:
        """Negative indent_length raises ValueError."""
        with pytest.raises(ValueError, match="indent_length"):
            ProgressFormatterConfig(indent_length=-1)

    def test_zero_depth_raises(self) -> None:
        """max_step_depth below 1 raises ValueError."""
        with pytest.raises(ValueError, match="max_step_depth"):
            ProgressFormatterConfig(max_step_depth=0)

    def test_string_placement_raises(self) -> None:
        """Placement must be the enum, not its name."""
        with pytest.raises(TypeError, match="step_word_on_start"):
            ProgressFormatterConfig(step_word_on_start="prefix")  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        """Config is immutable."""
        config = ProgressFormatterConfig()
        with pytest.raises(AttributeError):
            config.indent_length = 2  # type: ignore[misc]
