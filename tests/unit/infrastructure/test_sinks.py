"""Tests for infrastructure/sinks.py.

Tests:
- compose_sinks: fan-out composition
- stream_sink: text stream output
- logging_sink: logger output
"""

import io
import logging

import pytest

from bddprogress.infrastructure.sinks import compose_sinks, logging_sink, stream_sink


class TestComposeSinks:
    """Tests for compose_sinks."""

    def test_forwards_to_all_in_order(self) -> None:
        """Each message reaches every sink, in order."""
        calls: list[str] = []
        sink = compose_sinks(lambda m: calls.append(f"a:{m}"), lambda m: calls.append(f"b:{m}"))

        sink("one")
        sink("two")

        assert calls == ["a:one", "b:one", "a:two", "b:two"]

    def test_empty_discards(self) -> None:
        """Composite of no sinks accepts and drops messages."""
        compose_sinks()("ignored")

    def test_error_stops_fan_out(self) -> None:
        """A failing sink raises; later sinks are not called."""
        calls: list[str] = []

        def broken(message: str) -> None:
            raise RuntimeError("sink down")

        sink = compose_sinks(broken, calls.append)

        with pytest.raises(RuntimeError, match="sink down"):
            sink("x")
        assert calls == []


class TestStreamSink:
    """Tests for stream_sink."""

    def test_writes_line(self) -> None:
        """Message is written followed by newline."""
        output = io.StringIO()
        sink = stream_sink(output)

        sink("FEATURE: Login\n  description")

        assert output.getvalue() == "FEATURE: Login\n  description\n"

    def test_default_is_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Default stream is sys.stdout at write time."""
        stream_sink()("hello")
        assert capsys.readouterr().out == "hello\n"


class TestLoggingSink:
    """Tests for logging_sink."""

    def test_logs_message(self, caplog: pytest.LogCaptureFixture) -> None:
        """Message is logged at the given level."""
        logger = logging.getLogger("bddprogress.test")
        sink = logging_sink(logger, logging.WARNING)

        with caplog.at_level(logging.WARNING, logger="bddprogress.test"):
            sink("SCENARIO: S")

        assert [(r.levelno, r.getMessage()) for r in caplog.records] == [(logging.WARNING, "SCENARIO: S")]

    def test_default_level_info(self, caplog: pytest.LogCaptureFixture) -> None:
        """Default level is INFO."""
        logger = logging.getLogger("bddprogress.test")

        with caplog.at_level(logging.INFO, logger="bddprogress.test"):
            logging_sink(logger)("x")

        assert caplog.records[0].levelno == logging.INFO
