"""Output sinks: where rendered progress messages go.

PEP 695 type alias.
Sink function: takes one message (may span lines), returns nothing.
Sink errors are never caught here.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import TextIO, TypeAlias

Sink: TypeAlias = Callable[[str], None]


def compose_sinks(*sinks: Sink) -> Sink:
    """Create sink that forwards each message to ALL sinks, in order.

    Args:
        *sinks: Sinks to compose.

    Returns:
        Composite sink. Empty sinks = discard messages.
    """

    def _sink(message: str) -> None:
        for sink in sinks:
            sink(message)

    return _sink


def stream_sink(stream: TextIO | None = None) -> Sink:
    """Create sink that writes each message plus newline to a text stream.

    Args:
        stream: Output stream (default: sys.stdout at call time)

    Returns:
        Sink writing to stream.
    """

    def _sink(message: str) -> None:
        target = stream if stream is not None else sys.stdout
        target.write(message + "\n")

    return _sink


def logging_sink(logger: logging.Logger, level: int = logging.INFO) -> Sink:
    """Create sink that logs each message.

    Args:
        logger: Destination logger.
        level: Record level (default INFO).

    Returns:
        Sink logging to logger.
    """

    def _sink(message: str) -> None:
        logger.log(level, "%s", message)

    return _sink
