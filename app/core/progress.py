"""
Per-request progress notifications.
"""

from typing import Callable, List

from app.models.schemas import GenerationProgress
from app.utils.logger import logging


ProgressCallback = Callable[[GenerationProgress], None]


class ProgressChannel:
    """
    Publish/subscribe channel for the progress of a single tutorial request.

    Publishing calls every subscriber synchronously and returns; nothing is
    awaited and a failing subscriber is logged and skipped.
    """

    def __init__(self):
        self._subscribers: List[ProgressCallback] = []
        self.history: List[GenerationProgress] = []

    def subscribe(self, callback: ProgressCallback) -> Callable[[], None]:
        """
        Register a subscriber.

        Args:
            callback: Called with each GenerationProgress

        Returns:
            A function that removes the subscription
        """
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    @property
    def last_percent(self) -> int:
        return self.history[-1].percent if self.history else 0

    def publish(self, label: str, percent: int) -> GenerationProgress:
        """Broadcast a progress event to all current subscribers."""
        if percent < self.last_percent:
            raise ValueError(f"Progress went backwards: {percent} < {self.last_percent}")

        event = GenerationProgress(label=label, percent=percent)
        self.history.append(event)
        logging.debug(f"Progress {event.percent}%: {event.label}")

        for callback in list(self._subscribers):
            try:
                callback(event)
            except Exception:
                logging.exception(f"Progress subscriber failed on '{event.label}'")
        return event
