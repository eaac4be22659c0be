"""pytest fixtures for progress output.

Options are read from the command line and pytest.ini / pyproject.toml.
"""

from __future__ import annotations

import pytest

from bddprogress.application.formatters import (
    ProgressFormatter,
    ProgressFormatterConfig,
    StepNumberPlacement,
)
from bddprogress.infrastructure.sinks import compose_sinks
from bddprogress.presentation.pytest_plugin.reporter import BddProgressReporter

REPORTER_PLUGIN_NAME = "bddprogress-reporter"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _get_ini_value(config: pytest.Config, name: str, default: str) -> str:
    """Get ini value from pytest config with fallback.

    Args:
        config: pytest Config object
        name: ini option name
        default: default value if not set

    Returns:
        String value of ini option
    """
    value = config.getini(name)
    if value:
        return str(value)
    return default


def _parse_bool(name: str, text: str) -> bool:
    lowered = text.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise pytest.UsageError(f"{name}: expected a boolean, got {text!r}")


def _parse_int(name: str, text: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise pytest.UsageError(f"{name}: expected an integer, got {text!r}") from None


def _parse_placement(name: str, text: str) -> StepNumberPlacement:
    try:
        return StepNumberPlacement.parse(text)
    except ValueError as exc:
        raise pytest.UsageError(f"{name}: {exc}") from None


def is_enabled(config: pytest.Config) -> bool:
    """True if --bdd-progress given or bdd_progress ini option set."""
    if config.getoption("bdd_progress", default=False):
        return True
    return _parse_bool("bdd_progress", _get_ini_value(config, "bdd_progress", "false"))


def build_config(config: pytest.Config) -> ProgressFormatterConfig:
    """Build formatter config from bdd_progress_* ini options.

    Raises:
        pytest.UsageError: Option value cannot be parsed or is out of range.
    """
    defaults = ProgressFormatterConfig()

    def flag(option: str, default: bool) -> bool:
        name = f"bdd_progress_{option}"
        return _parse_bool(name, _get_ini_value(config, name, str(default)))

    def placement(option: str, default: StepNumberPlacement) -> StepNumberPlacement:
        name = f"bdd_progress_{option}"
        return _parse_placement(name, _get_ini_value(config, name, default.value))

    indent_name = "bdd_progress_indent_length"
    indent_length = _parse_int(indent_name, _get_ini_value(config, indent_name, str(defaults.indent_length)))

    try:
        return ProgressFormatterConfig(
            write_success_for_basic_steps=flag(
                "write_success_for_basic_steps", defaults.write_success_for_basic_steps
            ),
            show_final_step_with_step=flag("show_final_step_with_step", defaults.show_final_step_with_step),
            indent_length=indent_length,
            step_word_on_start=placement("step_word_on_start", defaults.step_word_on_start),
            step_word_on_finish=placement("step_word_on_finish", defaults.step_word_on_finish),
            include_step_name_on_finish=flag(
                "include_step_name_on_finish", defaults.include_step_name_on_finish
            ),
            include_ellipsis_after_step=flag(
                "include_ellipsis_after_step", defaults.include_ellipsis_after_step
            ),
        )
    except ValueError as exc:
        raise pytest.UsageError(str(exc)) from None


@pytest.fixture(scope="session")
def bdd_progress_config(request: pytest.FixtureRequest) -> ProgressFormatterConfig:
    """Formatter configuration resolved from ini options.

    Returns:
        ProgressFormatterConfig
    """
    return build_config(request.config)


@pytest.fixture(scope="session")
def bdd_progress(request: pytest.FixtureRequest) -> BddProgressReporter:
    """Step-side progress API: comment() and attach_file().

    Outside the plugin (reporter not registered), returns a reporter
    that discards everything.

    Returns:
        BddProgressReporter for the session
    """
    reporter = request.config.pluginmanager.get_plugin(REPORTER_PLUGIN_NAME)
    if isinstance(reporter, BddProgressReporter):
        return reporter
    return BddProgressReporter(ProgressFormatter(compose_sinks()))
