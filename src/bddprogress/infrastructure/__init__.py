"""Infrastructure: output sinks."""

from bddprogress.infrastructure.sinks import Sink, compose_sinks, logging_sink, stream_sink

__all__ = [
    "Sink",
    "compose_sinks",
    "logging_sink",
    "stream_sink",
]
