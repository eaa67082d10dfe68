"""Students module for roster records."""

from rosterdesk.students.exceptions import StudentNotFoundError
from rosterdesk.students.schemas import (
    RosterRecord,
    RosterSummary,
    StudentCreate,
    StudentListResponse,
    StudentUpdate,
)

__all__ = [
    "RosterRecord",
    "RosterSummary",
    "StudentCreate",
    "StudentListResponse",
    "StudentNotFoundError",
    "StudentUpdate",
]
