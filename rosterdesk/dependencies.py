"""Dependency injection for FastAPI."""

from collections.abc import Generator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from rosterdesk.db.database import SessionLocal
from rosterdesk.store.events import get_change_notifier
from rosterdesk.store.store import RosterStore
from rosterdesk.students.service import RosterService


def get_db() -> Generator[Session, None, None]:
    """Get database session.

    Yields:
        Session: SQLAlchemy session.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# Type aliases for cleaner dependency injection
DbSession = Annotated[Session, Depends(get_db)]


def get_roster_service(db: DbSession) -> RosterService:
    """Get a roster service bound to the shared change notifier.

    Args:
        db: Database session.

    Returns:
        RosterService: Service for the current request.
    """
    return RosterService(RosterStore(db, get_change_notifier()))


Roster = Annotated[RosterService, Depends(get_roster_service)]
