"""Progress formatters."""

from bddprogress.application.formatters.config import ProgressFormatterConfig, StepNumberPlacement
from bddprogress.application.formatters.progress import ProgressFormatter

__all__ = [
    "ProgressFormatter",
    "ProgressFormatterConfig",
    "StepNumberPlacement",
]
