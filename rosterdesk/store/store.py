"""Durable roster storage backed by a single keyed slot."""

import json
import logging
from collections.abc import Callable, Sequence

from pydantic import TypeAdapter, ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from rosterdesk.db.models import StorageSlot
from rosterdesk.store.events import ChangeNotifier, Listener
from rosterdesk.students.schemas import RosterRecord

logger = logging.getLogger(__name__)

# Namespaced key of the slot holding the serialized roster
ROSTER_STORAGE_KEY = "rosterdesk.students"

_collection_adapter = TypeAdapter(list[RosterRecord])


def serialize_collection(records: Sequence[RosterRecord]) -> str:
    """Serialize a roster collection to its stored JSON form.

    Args:
        records: Records in collection order.

    Returns:
        str: JSON array of record objects.
    """
    return json.dumps([record.to_storage() for record in records])


def deserialize_collection(raw: str | None) -> list[RosterRecord]:
    """Deserialize a stored roster collection.

    Missing or malformed data is treated as an empty collection.

    Args:
        raw: Stored JSON text, or None if the slot is empty.

    Returns:
        list[RosterRecord]: Records in stored order.
    """
    if not raw:
        return []

    try:
        return _collection_adapter.validate_python(json.loads(raw))
    except (json.JSONDecodeError, ValidationError) as e:
        logger.warning(f"Ignoring malformed roster data in {ROSTER_STORAGE_KEY}: {e}")
        return []


class RosterStore:
    """Single source of truth for the roster collection.

    The collection is read and rewritten as a whole. Overlapping
    load-modify-save cycles are not guarded; the last writer wins.
    """

    def __init__(self, db: Session, notifier: ChangeNotifier, key: str = ROSTER_STORAGE_KEY):
        """Initialize the store.

        Args:
            db: Database session.
            notifier: Channel broadcast after every committed save.
            key: Storage slot key.
        """
        self.db = db
        self.notifier = notifier
        self.key = key

    def load(self) -> list[RosterRecord]:
        """Load the full roster collection.

        Returns:
            list[RosterRecord]: Stored records, or an empty list if the slot
            does not exist or holds malformed data.
        """
        slot = self.db.get(StorageSlot, self.key)
        if slot is None:
            return []
        return deserialize_collection(slot.value)

    def save(self, records: Sequence[RosterRecord]) -> None:
        """Overwrite the slot with ``records`` and broadcast the change.

        Args:
            records: The complete new collection.

        Raises:
            SQLAlchemyError: If the write fails. The session is rolled back
                and nothing is broadcast.
        """
        payload = serialize_collection(records)
        try:
            slot = self.db.get(StorageSlot, self.key)
            if slot is None:
                slot = StorageSlot(key=self.key, value=payload)
                self.db.add(slot)
            else:
                slot.value = payload
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to save roster to {self.key}: {e}")
            raise

        logger.info(f"Saved {len(records)} roster record(s) to {self.key}")
        self.notifier.broadcast()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener for committed changes.

        Args:
            listener: Zero-argument callable.

        Returns:
            Callable[[], None]: Function that removes the listener again.
        """
        return self.notifier.subscribe(listener)
