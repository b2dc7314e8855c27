"""Database engine and helpers.

This module configures the SQLModel/SQLAlchemy engine used by the
SQL-backed category store. The in-memory store is the default; the
engine is only touched when `CATEGORY_STORE=sql` is configured.
"""

from sqlmodel import SQLModel, create_engine, Session
from .config import settings


def _connect_args(url: str) -> dict:
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(settings.DATABASE_URL, echo=False, connect_args=_connect_args(settings.DATABASE_URL))


def create_db_and_tables(bind=None):
    """Create database tables using SQLModel metadata.

    `bind` defaults to the module engine; tests pass their own engine
    pointing at a temporary SQLite file.
    """
    # register table models on the metadata before create_all
    from . import models  # noqa: F401
    SQLModel.metadata.create_all(bind or engine)


def get_session():
    """Yield a `Session` on the configured engine.

    Both the per-request category store dependency and the startup seed
    draw their sessions from here; the session closes when the caller
    resumes the generator.
    """
    with Session(engine) as session:
        yield session
