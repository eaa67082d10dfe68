"""Header and row validation for roster uploads.

Validation is all-or-nothing: the first bad row aborts the whole batch.
"""

from rosterdesk.imports.exceptions import MissingColumns, RowMissingData, RowShapeMismatch
from rosterdesk.imports.parsers import REQUIRED_HEADERS, ParsedTable

# Data row i (zero-based) is shown to users as row i + 2: one for the
# header line and one for 1-based counting.
ROW_DISPLAY_OFFSET = 2


def build_header_index(headers: list[str]) -> dict[str, int]:
    """Build the header-name-to-position table for a batch.

    When a header repeats, its last position wins.

    Args:
        headers: Lowercased, trimmed header names.

    Returns:
        dict[str, int]: Position of each header name.

    Raises:
        MissingColumns: If any required header is absent. Lists every
            missing header.
    """
    index = {header: position for position, header in enumerate(headers)}
    missing = [header for header in REQUIRED_HEADERS if header not in index]
    if missing:
        raise MissingColumns(missing)
    return index


def validate_rows(table: ParsedTable) -> list[dict[str, str]]:
    """Validate every data row of a parsed upload.

    Args:
        table: Parsed headers and rows.

    Returns:
        list[dict[str, str]]: Trimmed required values per row, keyed by
        header name, in file order.

    Raises:
        MissingColumns: If required headers are absent.
        RowShapeMismatch: If a row's cell count differs from the header count.
        RowMissingData: If a required value is empty after trimming.
    """
    index = build_header_index(table.headers)
    width = len(table.headers)

    validated = []
    for i, row in enumerate(table.rows):
        row_number = i + ROW_DISPLAY_OFFSET

        if len(row) != width:
            raise RowShapeMismatch(row_number)

        values = {header: (row[index[header]] or "").strip() for header in REQUIRED_HEADERS}
        if not all(values.values()):
            raise RowMissingData(row_number)

        validated.append(values)

    return validated
