"""Pydantic schemas for roster records."""

from pydantic import BaseModel, ConfigDict, Field


class RosterRecord(BaseModel):
    """One person's canonical roster entry.

    Records are immutable; an edit builds a replacement record.
    Serialized field names are camelCase (``rollNumber``) to match the
    stored collection format.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    id: str = Field(..., min_length=1)
    roll_number: str = Field(..., min_length=1, alias="rollNumber")
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    department: str = Field(..., min_length=1)
    year: str = Field(..., min_length=1)
    password: str

    def to_storage(self) -> dict[str, str]:
        """Return the stored representation of this record."""
        return self.model_dump(by_alias=True)


class StudentCreate(BaseModel):
    """Schema for manually adding a student."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    roll_number: str = Field(..., min_length=1, alias="rollNumber")
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    department: str = Field(..., min_length=1)
    year: str = Field(..., min_length=1)


class StudentUpdate(BaseModel):
    """Schema for editing a student. Omitted fields keep their value."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    roll_number: str | None = Field(None, min_length=1, alias="rollNumber")
    name: str | None = Field(None, min_length=1)
    email: str | None = Field(None, min_length=1)
    department: str | None = Field(None, min_length=1)
    year: str | None = Field(None, min_length=1)
    password: str | None = Field(None, min_length=1)


class StudentListResponse(BaseModel):
    """Schema for a listing of students."""

    items: list[RosterRecord]
    total: int


class RosterSummary(BaseModel):
    """Dashboard figures derived from the roster."""

    total: int = 0
    by_department: dict[str, int] = Field(default_factory=dict)
