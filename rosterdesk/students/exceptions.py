"""Errors raised by roster record operations."""


class StudentNotFoundError(LookupError):
    """No record in the collection has the requested id."""

    def __init__(self, student_id: str):
        self.student_id = student_id
        super().__init__(f"Student not found: {student_id}")
