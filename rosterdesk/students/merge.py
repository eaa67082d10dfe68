"""Merge operations over the roster collection.

Every function returns a new list and leaves its input untouched, so a
caller that aborts before saving simply drops the result.
"""

from collections.abc import Iterable, Mapping, Sequence

from rosterdesk.students.exceptions import StudentNotFoundError
from rosterdesk.students.schemas import RosterRecord


def append_records(
    collection: Sequence[RosterRecord], records: Iterable[RosterRecord]
) -> list[RosterRecord]:
    """Append a batch of records to the end of the collection.

    Roll numbers are not de-duplicated against existing records.
    """
    return [*collection, *records]


def append_record(collection: Sequence[RosterRecord], record: RosterRecord) -> list[RosterRecord]:
    """Append a single record to the end of the collection."""
    return [*collection, record]


def replace_record(
    collection: Sequence[RosterRecord],
    record_id: str,
    changes: Mapping[str, str],
) -> list[RosterRecord]:
    """Replace the record with ``record_id`` by a shallow merge with ``changes``.

    Args:
        collection: Current roster collection.
        record_id: Id of the record to edit.
        changes: New field values keyed by attribute name. The id is never
            changed.

    Returns:
        list[RosterRecord]: New collection with the edited record in place.

    Raises:
        StudentNotFoundError: If no record has ``record_id``.
    """
    update = {key: value for key, value in changes.items() if key != "id"}
    found = False
    result = []
    for record in collection:
        if record.id == record_id:
            merged = RosterRecord.model_validate({**record.model_dump(), **update})
            result.append(merged)
            found = True
        else:
            result.append(record)

    if not found:
        raise StudentNotFoundError(record_id)
    return result


def remove_record(collection: Sequence[RosterRecord], record_id: str) -> list[RosterRecord]:
    """Remove the record with ``record_id``.

    Raises:
        StudentNotFoundError: If no record has ``record_id``.
    """
    result = [record for record in collection if record.id != record_id]
    if len(result) == len(collection):
        raise StudentNotFoundError(record_id)
    return result
