"""Application layer.

Components:
- formatters: ProgressFormatter and its configuration
- renderers: Table and tree parameter rendering (rich)
"""

from bddprogress.application.formatters import (
    ProgressFormatter,
    ProgressFormatterConfig,
    StepNumberPlacement,
)
from bddprogress.application.renderers import render_table, render_tree

__all__ = [
    "ProgressFormatter",
    "ProgressFormatterConfig",
    "StepNumberPlacement",
    "render_table",
    "render_tree",
]
