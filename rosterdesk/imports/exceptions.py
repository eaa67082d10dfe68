"""Errors raised while ingesting a roster upload.

Every error aborts the whole batch: nothing from a failed upload is
persisted.
"""


class RosterImportError(Exception):
    """Base class for roster import failures.

    Attributes:
        code: Stable machine-readable error kind.
        message: Human-readable description for the uploading user.
    """

    code = "import_error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_detail(self) -> dict:
        """Return the error as an API error body."""
        return {"error": self.code, "message": self.message}


class UnsupportedFormat(RosterImportError):
    """The file is neither CSV nor an .xlsx workbook."""

    code = "unsupported_format"

    def __init__(self, filename: str | None = None):
        self.filename = filename
        super().__init__("Please select a valid CSV or Excel (.xlsx) file")


class DecodeFailed(RosterImportError):
    """The file bytes could not be decoded as the detected format."""

    code = "decode_failed"


class EmptyWorkbook(RosterImportError):
    """The workbook's first sheet has no data rows."""

    code = "empty_workbook"

    def __init__(self):
        super().__init__("Excel file is empty")


class MissingColumns(RosterImportError):
    """One or more required headers are absent."""

    code = "missing_columns"

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Missing required columns: {', '.join(missing)}")

    def to_detail(self) -> dict:
        detail = super().to_detail()
        detail["missing_columns"] = self.missing
        return detail


class RowError(RosterImportError):
    """A data row failed validation.

    Attributes:
        row: Display position of the row, counting the header line as row 1.
    """

    def __init__(self, row: int, message: str):
        self.row = row
        super().__init__(message)

    def to_detail(self) -> dict:
        detail = super().to_detail()
        detail["row"] = self.row
        return detail


class RowShapeMismatch(RowError):
    """A data row's cell count differs from the header count."""

    code = "row_shape_mismatch"

    def __init__(self, row: int):
        super().__init__(row, f"Row {row} has incorrect number of columns")


class RowMissingData(RowError):
    """A required field is empty after trimming."""

    code = "row_missing_data"

    def __init__(self, row: int):
        super().__init__(row, f"Row {row} has missing required data")
