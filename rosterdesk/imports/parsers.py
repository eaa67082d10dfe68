"""CSV and Excel parsing utilities for roster import."""

import csv
import io
from dataclasses import dataclass, field
from typing import Any, Protocol

import pandas as pd

from rosterdesk.imports.detection import FileFormat
from rosterdesk.imports.exceptions import DecodeFailed, EmptyWorkbook

# Header names a roster upload must declare, in display order
REQUIRED_HEADERS = ["rollnumber", "name", "email", "department", "year"]

# One data row as read from the file: ordered cells, None where a cell is absent
RawRow = list[str | None]


@dataclass
class ParsedTable:
    """Header row and data rows decoded from an upload.

    Attributes:
        headers: Lowercased, trimmed header names in file order.
        rows: Data rows in file order.
    """

    headers: list[str] = field(default_factory=list)
    rows: list[RawRow] = field(default_factory=list)


class Upload(Protocol):
    """Uploaded file as seen by the import pipeline (e.g. ``UploadFile``)."""

    filename: str | None

    @property
    def content_type(self) -> str | None: ...

    async def read(self, size: int = -1) -> bytes: ...


async def read_upload(upload: Upload) -> bytes:
    """Read the full contents of an upload.

    This is the only point where the import pipeline waits.

    Args:
        upload: Uploaded file.

    Returns:
        bytes: File contents.
    """
    return await upload.read()


def parse_csv(content: bytes) -> ParsedTable:
    """Parse CSV bytes into headers and raw rows.

    The first non-empty line is the header line. Cells are split on every
    comma; quoted fields are not supported. Lines end only at a newline, and
    blank lines are skipped.

    Args:
        content: Raw file bytes.

    Returns:
        ParsedTable: Parsed headers and rows.

    Raises:
        DecodeFailed: If the bytes are not valid UTF-8.
    """
    try:
        text = content.decode("utf-8-sig")  # Handle BOM
    except UnicodeDecodeError as e:
        raise DecodeFailed(f"File is not valid UTF-8 text: {e.reason}") from e

    table = ParsedTable()
    header_found = False
    for line in text.split("\n"):
        line = line.strip()
        if not line:
            continue
        if not header_found:
            table.headers = [h.strip().lower() for h in line.split(",")]
            header_found = True
        else:
            table.rows.append([cell.strip() for cell in line.split(",")])

    return table


def _cell_text(value: Any) -> str | None:
    """Convert a spreadsheet cell to text, None for empty cells."""
    if value is None or value == "" or pd.isna(value):
        return None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _trim_trailing(cells: RawRow) -> RawRow:
    """Drop absent cells from the end of a row."""
    end = len(cells)
    while end and cells[end - 1] is None:
        end -= 1
    return cells[:end]


def _is_blank(cells: RawRow) -> bool:
    return all(cell is None or cell == "" for cell in cells)


def parse_excel(content: bytes) -> ParsedTable:
    """Parse the first sheet of an .xlsx workbook into headers and raw rows.

    Row 0 is the header row. Absent trailing cells are dropped so rows keep
    the ragged shape of the sheet, and rows with no values are skipped.
    Cell text such as "NA" or "null" is kept as text, not read as missing.

    Args:
        content: Raw file bytes.

    Returns:
        ParsedTable: Parsed headers and rows.

    Raises:
        DecodeFailed: If the bytes are not a readable workbook.
        EmptyWorkbook: If the first sheet has no data rows.
    """
    try:
        df = pd.read_excel(
            io.BytesIO(content),
            sheet_name=0,
            header=None,
            dtype=object,
            na_filter=False,
            engine="openpyxl",
        )
    except Exception as e:
        raise DecodeFailed(f"Could not read Excel workbook: {e}") from e

    sheet_rows = [
        _trim_trailing([_cell_text(value) for value in values])
        for values in df.itertuples(index=False, name=None)
    ]
    if not sheet_rows:
        raise EmptyWorkbook()

    headers = [(cell or "").strip().lower() for cell in sheet_rows[0]]
    rows = [row for row in sheet_rows[1:] if not _is_blank(row)]
    if not rows:
        raise EmptyWorkbook()

    return ParsedTable(headers=headers, rows=rows)


def parse_table(content: bytes, file_format: FileFormat) -> ParsedTable:
    """Parse upload bytes with the parser for ``file_format``."""
    if file_format == FileFormat.CSV:
        return parse_csv(content)
    return parse_excel(content)


def generate_csv_template() -> str:
    """Generate a CSV template for roster import.

    Returns:
        str: CSV template content with the required headers and example rows.
    """
    example_rows = [
        ["CS2024001", "Asha Verma", "asha.verma@example.edu", "Computer Science", "1"],
        ["ME2023014", "Rahul Menon", "rahul.menon@example.edu", "Mechanical", "2"],
    ]

    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow(REQUIRED_HEADERS)
    for row in example_rows:
        writer.writerow(row)
    return output.getvalue()
