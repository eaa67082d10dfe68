"""Imports API routes."""

from typing import Annotated

from fastapi import APIRouter, File, HTTPException, UploadFile, status
from fastapi.responses import Response

from rosterdesk.dependencies import Roster
from rosterdesk.imports.exceptions import RosterImportError
from rosterdesk.imports.parsers import generate_csv_template
from rosterdesk.imports.pipeline import ingest_upload
from rosterdesk.imports.schemas import ImportResult

router = APIRouter()


@router.get("/template")
async def download_template() -> Response:
    """Download the CSV roster import template.

    Returns:
        Response: CSV file.
    """
    return Response(
        content=generate_csv_template(),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=roster_import_template.csv"},
    )


@router.post("/students", response_model=ImportResult)
async def import_students(
    file: Annotated[UploadFile, File(description="CSV or Excel (.xlsx) file")],
    roster: Roster,
) -> ImportResult:
    """Import students from an uploaded file.

    The whole file is imported or nothing is: a single bad row rejects
    the upload.

    Args:
        file: Uploaded CSV or Excel file.
        roster: Roster service.

    Returns:
        ImportResult: Import results.

    Raises:
        HTTPException: If the file format is unsupported or validation fails.
    """
    try:
        return await ingest_upload(file, roster)
    except RosterImportError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.to_detail(),
        ) from e
