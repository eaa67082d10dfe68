"""Students API routes."""

from fastapi import APIRouter, HTTPException, Request, status

from rosterdesk.dependencies import Roster
from rosterdesk.students.exceptions import StudentNotFoundError
from rosterdesk.students.schemas import (
    RosterRecord,
    RosterSummary,
    StudentCreate,
    StudentListResponse,
    StudentUpdate,
)

router = APIRouter()


def _not_found(e: StudentNotFoundError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=str(e),
    )


@router.get("", response_model=StudentListResponse)
async def list_students(
    roster: Roster,
    department: str | None = None,
) -> StudentListResponse:
    """List students in insertion order.

    Args:
        roster: Roster service.
        department: Optional department filter.

    Returns:
        StudentListResponse: Students and their count.
    """
    items = roster.list_students(department)
    return StudentListResponse(items=items, total=len(items))


@router.get("/departments", response_model=list[str])
async def list_departments(roster: Roster) -> list[str]:
    """List the distinct departments in the roster."""
    return roster.list_departments()


@router.get("/summary", response_model=RosterSummary)
async def roster_summary(request: Request) -> RosterSummary:
    """Dashboard totals, served from the live roster view.

    Args:
        request: FastAPI request object.

    Returns:
        RosterSummary: Total and per-department counts.
    """
    return request.app.state.roster_view.summary()


@router.get("/{student_id}", response_model=RosterRecord)
async def get_student(student_id: str, roster: Roster) -> RosterRecord:
    """Get a student by id.

    Raises:
        HTTPException: If the student does not exist.
    """
    try:
        return roster.get_student(student_id)
    except StudentNotFoundError as e:
        raise _not_found(e) from e


@router.post("", response_model=RosterRecord, status_code=status.HTTP_201_CREATED)
async def create_student(data: StudentCreate, roster: Roster) -> RosterRecord:
    """Add a single student.

    Args:
        data: Student fields.
        roster: Roster service.

    Returns:
        RosterRecord: Created student with generated id and default password.
    """
    return roster.add_student(data)


@router.put("/{student_id}", response_model=RosterRecord)
async def update_student(
    student_id: str,
    data: StudentUpdate,
    roster: Roster,
) -> RosterRecord:
    """Edit a student.

    Args:
        student_id: Student id.
        data: Fields to change.
        roster: Roster service.

    Returns:
        RosterRecord: Updated student.

    Raises:
        HTTPException: If the student does not exist.
    """
    try:
        return roster.update_student(student_id, data)
    except StudentNotFoundError as e:
        raise _not_found(e) from e


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_student(student_id: str, roster: Roster) -> None:
    """Delete a student.

    Raises:
        HTTPException: If the student does not exist.
    """
    try:
        roster.delete_student(student_id)
    except StudentNotFoundError as e:
        raise _not_found(e) from e
