from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from harbor.core.config import settings


def build_engine(database_url: str | None = None) -> Engine:
    """Create an engine for the configured database."""
    url = database_url or settings.DATABASE_URL
    engine_kwargs: dict = {"echo": settings.LOG_SQL}

    if url.startswith("sqlite"):
        # SQLite connections are shared between the request threads
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in url or url == "sqlite://":
            engine_kwargs["poolclass"] = StaticPool
    else:
        engine_kwargs["pool_pre_ping"] = True

    return create_engine(url, **engine_kwargs)


def init_db(engine: Engine) -> None:
    # make sure the table models are registered before creating tables
    from harbor.infrastructure.database import models  # noqa: F401

    SQLModel.metadata.create_all(engine)


@contextmanager
def get_session(engine: Engine) -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session
