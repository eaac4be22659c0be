"""Notifier protocol: contract for progress event consumers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from bddprogress.domain.events import ProgressEvent


class ProgressNotifierProtocol(Protocol):
    """Contract for progress notifiers.

    Hosts deliver every progress event to notify(), one at a time.
    Implementation decides output format and destination.

    Example:
        class CountingNotifier:
            def __init__(self) -> None:
                self.count = 0

            def notify(self, event: ProgressEvent) -> None:
                self.count += 1
    """

    def notify(self, event: ProgressEvent) -> None:
        """Handle one progress event.

        Args:
            event: Event to handle. Unknown variants are ignored.
        """
        ...
