"""Command-line interface for RosterDesk."""

import asyncio
import logging
import mimetypes
import sys
from dataclasses import dataclass
from pathlib import Path

import click
from pydantic import ValidationError

from rosterdesk import __version__
from rosterdesk.db.database import SessionLocal, init_db
from rosterdesk.imports.exceptions import RosterImportError
from rosterdesk.imports.parsers import generate_csv_template
from rosterdesk.imports.pipeline import ingest_upload
from rosterdesk.store.events import get_change_notifier
from rosterdesk.store.store import RosterStore
from rosterdesk.students.exceptions import StudentNotFoundError
from rosterdesk.students.schemas import StudentCreate
from rosterdesk.students.service import RosterService


def setup_logging(level: str) -> None:
    """Set up logging configuration.

    Args:
        level: Log level string.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


@dataclass
class LocalUpload:
    """A file on disk presented as an upload."""

    path: Path

    @property
    def filename(self) -> str:
        return self.path.name

    @property
    def content_type(self) -> str | None:
        return mimetypes.guess_type(self.path.name)[0]

    async def read(self, size: int = -1) -> bytes:
        return self.path.read_bytes()


def _service(db) -> RosterService:
    return RosterService(RosterStore(db, get_change_notifier()))


@click.group()
@click.version_option(version=__version__)
@click.option("--log-level", default="WARNING", help="Log level (DEBUG, INFO, WARNING, ...)")
def main(log_level: str):
    """RosterDesk - roster management from the command line."""
    setup_logging(log_level)
    init_db()


@main.command("import")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def import_file(file: Path):
    """Import students from a CSV or Excel (.xlsx) FILE.

    The whole file is imported or nothing is.
    """
    with SessionLocal() as db:
        try:
            result = asyncio.run(ingest_upload(LocalUpload(file), _service(db)))
        except RosterImportError as e:
            click.echo(f"Import failed: {e.message}", err=True)
            sys.exit(1)

    click.echo(f"Successfully added {result.imported_count} students")


@main.command("list")
@click.option("--department", "-d", default=None, help="Only show this department")
def list_students(department: str | None):
    """List students in insertion order."""
    with SessionLocal() as db:
        students = _service(db).list_students(department)

    for s in students:
        click.echo(f"{s.id}\t{s.roll_number}\t{s.name}\t{s.email}\t{s.department}\t{s.year}")
    click.echo(f"\n{len(students)} student(s)")


@main.command()
@click.option("--roll-number", prompt="Roll number")
@click.option("--name", prompt="Name")
@click.option("--email", prompt="Email")
@click.option("--department", prompt="Department")
@click.option("--year", prompt="Year")
def add(roll_number: str, name: str, email: str, department: str, year: str):
    """Add a single student."""
    try:
        data = StudentCreate(
            roll_number=roll_number,
            name=name,
            email=email,
            department=department,
            year=year,
        )
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors())
        click.echo(f"Invalid student: {fields} must not be empty", err=True)
        sys.exit(1)
    with SessionLocal() as db:
        record = _service(db).add_student(data)
    click.echo(f"Added student {record.id}")


@main.command()
@click.argument("student_id")
def delete(student_id: str):
    """Delete the student with STUDENT_ID."""
    with SessionLocal() as db:
        try:
            _service(db).delete_student(student_id)
        except StudentNotFoundError as e:
            click.echo(str(e), err=True)
            sys.exit(1)
    click.echo(f"Deleted student {student_id}")


@main.command()
def template():
    """Print a CSV import template."""
    click.echo(generate_csv_template(), nl=False)


if __name__ == "__main__":
    main()
