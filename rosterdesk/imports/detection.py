"""Upload format detection."""

from enum import Enum

from rosterdesk.imports.exceptions import UnsupportedFormat

CSV_MEDIA_TYPES = {"text/csv", "application/csv"}
XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


class FileFormat(str, Enum):
    """Upload formats accepted for roster import."""

    CSV = "csv"
    XLSX = "xlsx"


def _media_type(content_type: str | None) -> str:
    # Drop parameters such as "; charset=utf-8"
    return (content_type or "").split(";")[0].strip().lower()


def detect_format(filename: str | None, content_type: str | None) -> FileFormat:
    """Classify an upload by its name and declared media type.

    CSV is checked first, so a ``.csv`` name wins over any declared type.

    Args:
        filename: Name of the uploaded file.
        content_type: Media type declared by the client.

    Returns:
        FileFormat: Detected format.

    Raises:
        UnsupportedFormat: If neither check matches.
    """
    name = (filename or "").lower()
    media_type = _media_type(content_type)

    if name.endswith(".csv") or media_type in CSV_MEDIA_TYPES:
        return FileFormat.CSV
    if name.endswith(".xlsx") or media_type == XLSX_MEDIA_TYPE:
        return FileFormat.XLSX

    raise UnsupportedFormat(filename)
