"""Conversion of validated rows into roster records."""

import time

from rosterdesk.config import get_settings
from rosterdesk.students.schemas import RosterRecord

# Upload header -> record attribute
HEADER_TO_FIELD = {
    "rollnumber": "roll_number",
    "name": "name",
    "email": "email",
    "department": "department",
    "year": "year",
}

_last_stamp = 0


def _next_stamp() -> int:
    """Return a nanosecond timestamp strictly greater than the previous one."""
    global _last_stamp
    _last_stamp = max(time.time_ns(), _last_stamp + 1)
    return _last_stamp


def generate_record_id(position: int = 0) -> str:
    """Generate an opaque record id.

    Combines an increasing timestamp with the record's position in its
    batch, so ids stay unique when several are made in the same tick.

    Args:
        position: Zero-based position of the record in its batch.

    Returns:
        str: New record id.
    """
    return f"{_next_stamp()}-{position}"


def new_record(fields: dict[str, str], position: int = 0) -> RosterRecord:
    """Create a record with a generated id and the default password.

    Args:
        fields: Roster field values keyed by attribute name
            (``roll_number``, ``name``, ...). Any ``id`` or ``password`` in
            the input is ignored.
        position: Zero-based position of the record in its batch.

    Returns:
        RosterRecord: The new record.
    """
    data = {key: value for key, value in fields.items() if key not in ("id", "password")}
    return RosterRecord(
        id=generate_record_id(position),
        password=get_settings().default_student_password,
        **data,
    )


def normalize_rows(rows: list[dict[str, str]]) -> list[RosterRecord]:
    """Map validated upload rows to roster records.

    Args:
        rows: Trimmed values keyed by upload header name.

    Returns:
        list[RosterRecord]: Records in row order.
    """
    return [
        new_record({HEADER_TO_FIELD[header]: value for header, value in row.items()}, position)
        for position, row in enumerate(rows)
    ]
