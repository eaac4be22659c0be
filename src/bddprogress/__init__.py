"""bddprogress - configurable progress output for BDD test runs."""

__version__ = "0.1.0"

from bddprogress.application.formatters import (
    ProgressFormatter,
    ProgressFormatterConfig,
    StepNumberPlacement,
)

__all__ = [
    "ProgressFormatter",
    "ProgressFormatterConfig",
    "StepNumberPlacement",
    "__version__",
]
