"""Roster service layer."""

import logging
from collections.abc import Sequence

from rosterdesk.imports.normalizer import new_record
from rosterdesk.store.store import RosterStore
from rosterdesk.students.exceptions import StudentNotFoundError
from rosterdesk.students.merge import (
    append_record,
    append_records,
    remove_record,
    replace_record,
)
from rosterdesk.students.schemas import RosterRecord, StudentCreate, StudentUpdate

logger = logging.getLogger(__name__)


class RosterService:
    """Service class for roster operations.

    Every mutation loads the full collection, merges, and saves it back.
    Concurrent writers are not serialized: the last save wins.
    """

    def __init__(self, store: RosterStore):
        """Initialize roster service.

        Args:
            store: Durable roster store.
        """
        self.store = store

    def list_students(self, department: str | None = None) -> list[RosterRecord]:
        """List students in insertion order.

        Args:
            department: Only return students of this department if given.

        Returns:
            list[RosterRecord]: Matching students.
        """
        records = self.store.load()
        if department:
            records = [r for r in records if r.department == department]
        return records

    def list_departments(self) -> list[str]:
        """List the distinct departments present in the roster."""
        return sorted({r.department for r in self.store.load()})

    def get_student(self, student_id: str) -> RosterRecord:
        """Get a student by id.

        Raises:
            StudentNotFoundError: If the id is unknown.
        """
        for record in self.store.load():
            if record.id == student_id:
                return record
        raise StudentNotFoundError(student_id)

    def add_student(self, data: StudentCreate) -> RosterRecord:
        """Add one student with a generated id and default password.

        Args:
            data: Submitted student fields.

        Returns:
            RosterRecord: The created record.
        """
        record = new_record(data.model_dump())
        self.store.save(append_record(self.store.load(), record))
        logger.info(f"Added student {record.id} ({record.roll_number})")
        return record

    def update_student(self, student_id: str, data: StudentUpdate) -> RosterRecord:
        """Edit a student; omitted fields keep their current value.

        Raises:
            StudentNotFoundError: If the id is unknown.
        """
        updated = replace_record(
            self.store.load(), student_id, data.model_dump(exclude_unset=True, exclude_none=True)
        )
        self.store.save(updated)
        logger.info(f"Updated student {student_id}")
        return next(r for r in updated if r.id == student_id)

    def delete_student(self, student_id: str) -> None:
        """Delete a student.

        Raises:
            StudentNotFoundError: If the id is unknown.
        """
        self.store.save(remove_record(self.store.load(), student_id))
        logger.info(f"Deleted student {student_id}")

    def import_students(self, records: Sequence[RosterRecord]) -> int:
        """Commit a validated batch of records.

        An empty batch leaves the store untouched.

        Args:
            records: Normalized records from one upload.

        Returns:
            int: Number of records imported.
        """
        if not records:
            return 0
        self.store.save(append_records(self.store.load(), records))
        logger.info(f"Imported {len(records)} student(s)")
        return len(records)
