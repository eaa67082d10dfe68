"""End-to-end roster ingestion: detect, parse, validate, normalize, commit."""

import logging

from rosterdesk.imports.detection import detect_format
from rosterdesk.imports.exceptions import RosterImportError
from rosterdesk.imports.normalizer import normalize_rows
from rosterdesk.imports.parsers import Upload, parse_table, read_upload
from rosterdesk.imports.schemas import ImportResult
from rosterdesk.imports.validation import validate_rows
from rosterdesk.students.service import RosterService

logger = logging.getLogger(__name__)


async def ingest_upload(upload: Upload, service: RosterService) -> ImportResult:
    """Import every row of an uploaded roster file as one batch.

    The format is checked before the file is read. Any parse or validation
    error aborts the batch before the store is touched.

    Args:
        upload: Uploaded CSV or .xlsx file.
        service: Roster service that commits the batch.

    Returns:
        ImportResult: Summary of the committed batch.

    Raises:
        RosterImportError: If the file is rejected. No records are saved.
    """
    file_format = detect_format(upload.filename, upload.content_type)
    content = await read_upload(upload)

    try:
        table = parse_table(content, file_format)
        rows = validate_rows(table)
    except RosterImportError as e:
        logger.warning(f"Rejected roster upload {upload.filename!r}: {e.message}")
        raise

    records = normalize_rows(rows)
    imported = service.import_students(records)

    return ImportResult(
        filename=upload.filename,
        file_format=file_format.value,
        imported_count=imported,
        student_ids=[r.id for r in records],
    )
