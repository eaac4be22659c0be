"""Sink writing through pytest's terminal reporter."""

from __future__ import annotations

import contextlib
from typing import TYPE_CHECKING

from bddprogress.infrastructure.sinks import stream_sink

if TYPE_CHECKING:
    import pytest

    from bddprogress.infrastructure.sinks import Sink


def terminal_sink(config: pytest.Config) -> Sink:
    """Create sink writing lines via the terminal reporter.

    Scenario hooks run inside the test call, so output capturing is
    suspended around each write. The reporter is looked up per message:
    it registers after plugins configured earlier. Without a terminal
    reporter (-p no:terminal), messages go to stdout.

    Args:
        config: pytest Config object

    Returns:
        Sink for progress messages
    """
    fallback = stream_sink()

    def _sink(message: str) -> None:
        capture = config.pluginmanager.get_plugin("capturemanager")
        suspended = capture.global_and_fixture_disabled() if capture is not None else contextlib.nullcontext()
        reporter = config.pluginmanager.get_plugin("terminalreporter")
        with suspended:
            if reporter is None:
                fallback(message)
            else:
                reporter.write_line(message)

    return _sink
