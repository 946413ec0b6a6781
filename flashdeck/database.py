"""Engine, session factory and the request-scoped session dependency."""

from collections.abc import Generator
from typing import Annotated, Any

from fastapi import Depends
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from flashdeck.config import Settings, get_settings


class Base(DeclarativeBase):
    """Declarative base shared by every flashdeck table."""


_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def _engine_options(database_url: str) -> dict[str, Any]:
    # A single SQLite connection is shared across threads; other backends pool.
    if database_url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}, "poolclass": StaticPool}
    return {"pool_size": 10, "max_overflow": 20, "pool_pre_ping": True, "pool_recycle": 1800}


def initialize_database(settings: Settings) -> None:
    """Build the engine and session factory for settings.DATABASE_URL."""
    global _engine, _session_factory  # noqa: PLW0603

    _engine = create_engine(settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL))
    _session_factory = sessionmaker(bind=_engine, autoflush=False, expire_on_commit=False)


def create_tables() -> None:
    """Create the flashcard, session and user tables if they are missing."""
    import flashdeck.models  # noqa: F401, PLC0415

    if _engine is None:
        raise RuntimeError("initialize_database() must run before create_tables()")
    Base.metadata.create_all(bind=_engine)


def dispose_engine() -> None:
    global _engine, _session_factory  # noqa: PLW0603

    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None


def _require_session_factory(
    settings: Annotated[Settings, Depends(get_settings)],
) -> sessionmaker[Session]:
    if _session_factory is None:
        initialize_database(settings)
    assert _session_factory is not None
    return _session_factory


def get_db(
    session_factory: Annotated[sessionmaker[Session], Depends(_require_session_factory)],
) -> Generator[Session, None, None]:
    """Yield one session per request and close it afterwards."""
    with session_factory() as db:
        yield db


DatabaseSession = Annotated[Session, Depends(get_db)]
