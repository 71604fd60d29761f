"""
Database engine and session factory.
"""
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from fitlog.core.config import settings
from fitlog.core.logging import get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""
    pass


def create_db_engine(database_url: str) -> Engine:
    """Create an engine for the given URL."""
    connect_args = {}
    if make_url(database_url).get_backend_name() == "sqlite":
        # Sync endpoints run in a threadpool
        connect_args["check_same_thread"] = False

    return create_engine(database_url, connect_args=connect_args)


engine = create_db_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(bind=engine, expire_on_commit=False)


def init_db(bind: Engine | None = None) -> None:
    """
    Create all tables.

    For file-backed SQLite the parent directory is created first.
    """
    # Import models so they register on Base.metadata
    import fitlog.models  # noqa: F401

    target = bind or engine
    url = target.url
    if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    Base.metadata.create_all(bind=target)
    logger.info("Database tables ensured", url=url.render_as_string(hide_password=True))
