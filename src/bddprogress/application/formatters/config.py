"""Progress formatter configuration.

Immutable (frozen dataclass) with FAIL-FIRST validation.
Changing options means building a new config (dataclasses.replace).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class StepNumberPlacement(Enum):
    """Where 'STEP n' goes in a step notification.

    PREFIX: 'STEP 1.1: GIVEN this thing'
    SUFFIX: 'GIVEN this thing (STEP 1.1)'
    EXCLUDE: 'GIVEN this thing'
    """

    PREFIX = "prefix"
    SUFFIX = "suffix"
    EXCLUDE = "exclude"

    @classmethod
    def parse(cls, text: str) -> StepNumberPlacement:
        """Parse placement from its name, case-insensitive.

        Raises:
            ValueError: Unknown placement
        """
        try:
            return cls(text.strip().lower())
        except ValueError:
            allowed = ", ".join(p.value for p in cls)
            raise ValueError(f"unknown step number placement {text!r}, expected one of: {allowed}") from None


@dataclass(frozen=True, slots=True)
class ProgressFormatterConfig:
    """Formatting options for ProgressFormatter.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        write_success_for_basic_steps: Write the '(Passed after ...)' line for
            passing steps. Non-passing steps are always written.
        show_final_step_with_step: Render 'STEP 1.3/1.5' instead of 'STEP 1.3'.
        indent_length: Spaces per indent unit.
        step_word_on_start: Placement of 'STEP n' on step start.
        step_word_on_finish: Placement of 'STEP n' on step finish.
        include_step_name_on_finish: Repeat step name on the finish line.
        include_ellipsis_after_step: Append '...' to step name on start.
        max_step_depth: Max ancestors walked when computing indentation.
    """

    write_success_for_basic_steps: bool = True
    show_final_step_with_step: bool = False
    indent_length: int = 4
    step_word_on_start: StepNumberPlacement = StepNumberPlacement.SUFFIX
    step_word_on_finish: StepNumberPlacement = StepNumberPlacement.SUFFIX
    include_step_name_on_finish: bool = False
    include_ellipsis_after_step: bool = False
    max_step_depth: int = 64

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.indent_length < 0:
            raise ValueError(f"indent_length must be >= 0, got {self.indent_length}")
        if self.max_step_depth < 1:
            raise ValueError(f"max_step_depth must be >= 1, got {self.max_step_depth}")
        for name in ("step_word_on_start", "step_word_on_finish"):
            if not isinstance(getattr(self, name), StepNumberPlacement):
                raise TypeError(f"{name} must be StepNumberPlacement, got {getattr(self, name)!r}")

    @property
    def indent_unit(self) -> str:
        """One indent unit."""
        return " " * self.indent_length
