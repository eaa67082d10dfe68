"""Imports module for CSV/Excel roster upload."""

from rosterdesk.imports.detection import FileFormat, detect_format
from rosterdesk.imports.exceptions import (
    DecodeFailed,
    EmptyWorkbook,
    MissingColumns,
    RosterImportError,
    RowMissingData,
    RowShapeMismatch,
    UnsupportedFormat,
)
from rosterdesk.imports.normalizer import generate_record_id, new_record, normalize_rows
from rosterdesk.imports.parsers import (
    REQUIRED_HEADERS,
    ParsedTable,
    generate_csv_template,
    parse_csv,
    parse_excel,
)
from rosterdesk.imports.validation import build_header_index, validate_rows

__all__ = [
    "REQUIRED_HEADERS",
    "FileFormat",
    "ParsedTable",
    "detect_format",
    "parse_csv",
    "parse_excel",
    "generate_csv_template",
    "build_header_index",
    "validate_rows",
    "normalize_rows",
    "new_record",
    "generate_record_id",
    # Errors
    "RosterImportError",
    "UnsupportedFormat",
    "DecodeFailed",
    "EmptyWorkbook",
    "MissingColumns",
    "RowShapeMismatch",
    "RowMissingData",
]
