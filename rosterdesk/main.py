"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rosterdesk.config import get_settings
from rosterdesk.db.database import SessionLocal, init_db
from rosterdesk.store.events import get_change_notifier
from rosterdesk.store.store import RosterStore
from rosterdesk.store.views import RosterView
from rosterdesk.students.schemas import RosterRecord

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


def load_roster() -> list[RosterRecord]:
    """Load the roster through a short-lived session.

    Returns:
        list[RosterRecord]: Current roster collection.
    """
    with SessionLocal() as db:
        return RosterStore(db, get_change_notifier()).load()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events.

    Args:
        app: FastAPI application instance.
    """
    # Startup
    init_db()
    app.state.roster_view = RosterView(load_roster, get_change_notifier())
    yield
    # Shutdown
    app.state.roster_view.close()


app = FastAPI(
    title=settings.app_name,
    description="Administrative roster management with bulk CSV/Excel import",
    version="0.1.0",
    lifespan=lifespan,
    debug=settings.debug,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Import and include routers
from rosterdesk.imports.router import router as imports_router  # noqa: E402
from rosterdesk.students.router import router as students_router  # noqa: E402

# API routes
app.include_router(students_router, prefix="/api/students", tags=["students"])
app.include_router(imports_router, prefix="/api/imports", tags=["imports"])


@app.get("/health")
async def health_check() -> dict:
    """Health check endpoint.

    Returns:
        dict: Health status.
    """
    return {"status": "healthy", "app": settings.app_name}
