"""Domain ports."""

from bddprogress.domain.ports.notifier import ProgressNotifierProtocol

__all__ = ["ProgressNotifierProtocol"]
