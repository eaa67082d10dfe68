"""Pydantic schemas for roster import."""

from pydantic import BaseModel, Field


class ImportResult(BaseModel):
    """Result of a committed roster import.

    Attributes:
        filename: Name of the uploaded file.
        file_format: Detected format ("csv" or "xlsx").
        imported_count: Number of records added.
        student_ids: Ids generated for the added records, in file order.
    """

    filename: str | None = None
    file_format: str
    imported_count: int = 0
    student_ids: list[str] = Field(default_factory=list)
