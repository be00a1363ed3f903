"""Database configuration and session management."""

from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine, make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from linkshare.config import get_settings

settings = get_settings()


def connect_args_for(
    database_url: str, timeout_seconds: float, sslmode: str | None = None
) -> dict[str, Any]:
    """Driver arguments that bound every statement by the request timeout.

    PostgreSQL cancels statements past statement_timeout; SQLite stops waiting
    for a write lock after its busy timeout. Either way the statement fails and
    its transaction is rolled back.
    """
    backend = make_url(database_url).get_backend_name()
    if backend == "postgresql":
        args: dict[str, Any] = {"options": f"-c statement_timeout={int(timeout_seconds * 1000)}"}
        if sslmode:
            args["sslmode"] = sslmode
        return args
    if backend == "sqlite":
        return {"timeout": timeout_seconds, "check_same_thread": False}
    return {}


engine = create_engine(
    settings.database_url,
    connect_args=connect_args_for(
        settings.database_url, settings.request_timeout_seconds, settings.database_sslmode
    ),
    pool_pre_ping=True,
    pool_size=settings.db_pool_size,
    max_overflow=settings.db_max_overflow,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base: Any = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """Dependency that provides a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Initialize the database by creating all tables."""
    # Import all models here so they are registered with Base.metadata
    from linkshare import models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def dispose_engine() -> None:
    """Close every pooled connection."""
    engine.dispose()
