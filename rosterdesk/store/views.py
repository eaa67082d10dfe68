"""Read-side consumers that stay in sync with the roster store."""

from collections import Counter
from collections.abc import Callable

from rosterdesk.store.events import ChangeNotifier
from rosterdesk.students.schemas import RosterRecord, RosterSummary


class RosterView:
    """A cached copy of the roster that reloads on every change signal.

    The view never shares a reference with the store; each refresh calls
    the loader again.
    """

    def __init__(self, loader: Callable[[], list[RosterRecord]], notifier: ChangeNotifier):
        """Load the roster and subscribe for changes.

        Args:
            loader: Callable returning the current collection, usually
                ``RosterStore.load``.
            notifier: Channel announcing committed changes.
        """
        self._loader = loader
        self.records: list[RosterRecord] = loader()
        self.refresh_count = 0
        self._unsubscribe = notifier.subscribe(self.refresh)

    def refresh(self) -> None:
        """Reload the roster from the store."""
        self.records = self._loader()
        self.refresh_count += 1

    def close(self) -> None:
        """Stop listening for changes."""
        self._unsubscribe()

    def summary(self) -> RosterSummary:
        """Count records overall and per department."""
        counts = Counter(record.department for record in self.records)
        return RosterSummary(total=len(self.records), by_department=dict(sorted(counts.items())))
