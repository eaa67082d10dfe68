"""Roster storage and change notification."""

from rosterdesk.store.events import ROSTER_CHANGED, ChangeNotifier, get_change_notifier
from rosterdesk.store.store import (
    ROSTER_STORAGE_KEY,
    RosterStore,
    deserialize_collection,
    serialize_collection,
)
from rosterdesk.store.views import RosterView

__all__ = [
    "ROSTER_CHANGED",
    "ROSTER_STORAGE_KEY",
    "ChangeNotifier",
    "RosterStore",
    "RosterView",
    "deserialize_collection",
    "get_change_notifier",
    "serialize_collection",
]
