"""In-process change notification for the roster store."""

import logging
from collections.abc import Callable
from functools import lru_cache

logger = logging.getLogger(__name__)

# Signal broadcast after every committed roster mutation
ROSTER_CHANGED = "students_updated"

Listener = Callable[[], None]


class ChangeNotifier:
    """Synchronous publish/subscribe channel for one named signal.

    Listeners receive no payload; they are expected to reload the roster
    from the store themselves. Delivery happens in registration order and
    only reaches listeners registered at broadcast time.
    """

    def __init__(self, signal: str = ROSTER_CHANGED):
        """Initialize the notifier.

        Args:
            signal: Name of the signal this notifier broadcasts.
        """
        self.signal = signal
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener.

        Args:
            listener: Zero-argument callable invoked on each broadcast.

        Returns:
            Callable[[], None]: Function that removes the listener again.
        """
        self._listeners.append(listener)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: Listener) -> None:
        """Remove a listener if it is registered."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def listener_count(self) -> int:
        """Number of currently registered listeners."""
        return len(self._listeners)

    def broadcast(self) -> None:
        """Notify every registered listener.

        A listener that raises is logged and skipped; the remaining
        listeners are still notified.
        """
        logger.debug(f"Broadcasting {self.signal} to {len(self._listeners)} listener(s)")
        for listener in list(self._listeners):
            try:
                listener()
            except Exception as e:
                logger.warning(f"Listener for {self.signal} failed: {e}")


@lru_cache
def get_change_notifier() -> ChangeNotifier:
    """Get the process-wide roster change notifier.

    Returns:
        ChangeNotifier: Shared notifier instance.
    """
    return ChangeNotifier()
