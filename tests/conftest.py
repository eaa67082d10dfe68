"""Pytest configuration and fixtures."""

import io
import os
from collections.abc import Generator

# Set test environment before importing the app
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["DEBUG"] = "false"
os.environ["DEFAULT_STUDENT_PASSWORD"] = "student"

import pytest
from fastapi.testclient import TestClient
from openpyxl import Workbook
from sqlalchemy.orm import Session

from rosterdesk.db.database import SessionLocal, engine
from rosterdesk.db.models import Base
from rosterdesk.store.events import ChangeNotifier
from rosterdesk.store.store import RosterStore
from rosterdesk.students.service import RosterService


@pytest.fixture(scope="function")
def db() -> Generator[Session, None, None]:
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def notifier() -> ChangeNotifier:
    """Create an isolated change notifier."""
    return ChangeNotifier()


@pytest.fixture
def store(db: Session, notifier: ChangeNotifier) -> RosterStore:
    """Create a roster store on the test database."""
    return RosterStore(db, notifier)


@pytest.fixture
def service(store: RosterStore) -> RosterService:
    """Create a roster service on the test store."""
    return RosterService(store)


@pytest.fixture(scope="function")
def client(db: Session) -> Generator[TestClient, None, None]:
    """Create a test client with database override."""
    # Import here to ensure env vars are set
    from rosterdesk.dependencies import get_db
    from rosterdesk.main import app

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def make_xlsx(rows: list[list], extra_sheets: dict[str, list[list]] | None = None) -> bytes:
    """Build an .xlsx workbook in memory.

    Args:
        rows: Rows of the first sheet.
        extra_sheets: Further sheets by title.

    Returns:
        bytes: Workbook file contents.
    """
    wb = Workbook()
    ws = wb.active
    ws.title = "Students"
    for row in rows:
        ws.append(row)
    for title, sheet_rows in (extra_sheets or {}).items():
        sheet = wb.create_sheet(title)
        for row in sheet_rows:
            sheet.append(row)

    buffer = io.BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


class FakeUpload:
    """Minimal stand-in for an uploaded file."""

    def __init__(self, filename: str | None, content: bytes, content_type: str | None = None):
        self.filename = filename
        self.content_type = content_type
        self._content = content
        self.read_calls = 0

    async def read(self, size: int = -1) -> bytes:
        self.read_calls += 1
        return self._content


@pytest.fixture
def xlsx_bytes():
    """Factory building .xlsx workbooks in memory."""
    return make_xlsx


@pytest.fixture
def upload():
    """Factory building fake uploads."""
    return FakeUpload
