"""
Base repository implementation providing generic row access.

Each operation runs in its own short-lived session so a repository can be
shared between request threads. SQLAlchemy failures are rolled back and
re-raised as RepositoryError.
"""

from collections.abc import Generator
from contextlib import contextmanager
from typing import Generic, TypeVar

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, select

from harbor.core.db import get_session
from harbor.domain.shared.exceptions import DomainError, RepositoryError

RowType = TypeVar("RowType", bound=SQLModel)


class BaseRepository(Generic[RowType]):
    """
    Base repository class providing generic row operations.

    Concrete repositories set row_class and map rows to domain entities.
    """

    row_class: type[RowType]

    def __init__(self, engine: Engine):
        """
        Initialize repository with a database engine.

        Args:
            engine: SQLAlchemy engine the sessions are opened against
        """
        self.engine = engine

    @contextmanager
    def session(self, operation: str) -> Generator[Session, None, None]:
        """Open a session, rolling back and wrapping database errors."""
        with get_session(self.engine) as session:
            try:
                yield session
            except DomainError:
                session.rollback()
                raise
            except SQLAlchemyError as e:
                session.rollback()
                raise RepositoryError(
                    f"Database error during {operation}: {str(e)}", operation
                ) from e

    def _get_row(self, session: Session, row_id: int) -> RowType | None:
        return session.get(self.row_class, row_id)

    def _all_rows(self, session: Session, *criteria) -> list[RowType]:
        statement = select(self.row_class)
        for criterion in criteria:
            statement = statement.where(criterion)
        statement = statement.order_by(self.row_class.id)  # type: ignore[attr-defined]
        return list(session.exec(statement).all())

    def _insert(self, session: Session, row: RowType) -> RowType:
        session.add(row)
        session.commit()
        session.refresh(row)
        return row
