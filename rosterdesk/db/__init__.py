"""Database module."""

from rosterdesk.db.database import SessionLocal, engine, init_db
from rosterdesk.db.models import Base, StorageSlot

__all__ = [
    "SessionLocal",
    "engine",
    "init_db",
    "Base",
    "StorageSlot",
]
