"""pytest plugin for bddprogress.

Writes progress lines for pytest-bdd scenarios to the terminal.

Enable:
    pytest -p bddprogress.presentation.pytest_plugin --bdd-progress

Provides fixtures:
    bdd_progress_config: ProgressFormatterConfig resolved from ini options
    bdd_progress: Step-side API (comment, attach_file)

Configuration (pytest.ini or pyproject.toml):
    bdd_progress: Enable progress output (default: false)
    bdd_progress_write_success_for_basic_steps (default: true)
    bdd_progress_show_final_step_with_step (default: false)
    bdd_progress_indent_length (default: 4)
    bdd_progress_step_word_on_start: prefix | suffix | exclude (default: suffix)
    bdd_progress_step_word_on_finish: prefix | suffix | exclude (default: suffix)
    bdd_progress_include_step_name_on_finish (default: false)
    bdd_progress_include_ellipsis_after_step (default: false)
"""

from __future__ import annotations

import logging

import pytest

from bddprogress.application.formatters import ProgressFormatter
from bddprogress.infrastructure.sinks import compose_sinks

# Register fixtures from fixtures module
from bddprogress.presentation.pytest_plugin.fixtures import (
    REPORTER_PLUGIN_NAME,
    bdd_progress,
    bdd_progress_config,
    build_config,
    is_enabled,
)
from bddprogress.presentation.pytest_plugin.reporter import BddProgressReporter
from bddprogress.presentation.pytest_plugin.sinks import terminal_sink

logger = logging.getLogger(__name__)

# Export fixtures for pytest discovery
__all__ = [
    "bdd_progress",
    "bdd_progress_config",
]

_INI_OPTIONS = (
    ("bdd_progress", "Write BDD progress lines for pytest-bdd scenarios"),
    ("bdd_progress_write_success_for_basic_steps", "Write finish line for passing steps"),
    ("bdd_progress_show_final_step_with_step", "Render step numbers as n/total"),
    ("bdd_progress_indent_length", "Spaces per indent unit"),
    ("bdd_progress_step_word_on_start", "STEP n placement on start: prefix, suffix, exclude"),
    ("bdd_progress_step_word_on_finish", "STEP n placement on finish: prefix, suffix, exclude"),
    ("bdd_progress_include_step_name_on_finish", "Repeat step name on finish line"),
    ("bdd_progress_include_ellipsis_after_step", "Append '...' to step name on start"),
)


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register --bdd-progress and bdd_progress_* ini options."""
    group = parser.getgroup("bddprogress", "BDD progress output")
    group.addoption(
        "--bdd-progress",
        action="store_true",
        dest="bdd_progress",
        default=False,
        help="write BDD progress lines for pytest-bdd scenarios",
    )
    for name, help_text in _INI_OPTIONS:
        parser.addini(name, help_text, default="")


def pytest_configure(config: pytest.Config) -> None:
    """Register the progress reporter.

    The reporter is registered even when output is disabled so that
    bdd_progress.comment() inside steps keeps working; its lines are dropped.
    """
    if is_enabled(config):
        formatter = ProgressFormatter(terminal_sink(config), config=build_config(config))
        logger.debug("BDD progress output enabled: %s", formatter.config)
    else:
        formatter = ProgressFormatter(compose_sinks())
    config.pluginmanager.register(BddProgressReporter(formatter), REPORTER_PLUGIN_NAME)
