"""Credential store: parameterized lookups and inserts on the users table."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ms_auth.core.exceptions import ConflictError, StoreUnavailableError
from ms_auth.models import User

logger = logging.getLogger(__name__)


@contextmanager
def _store_errors(operation: str) -> Iterator[None]:
    """Turn driver/ORM failures into StoreUnavailableError."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.exception("Credential store failure during %s", operation)
        raise StoreUnavailableError(
            "Credential store unavailable",
            {"operation": operation, "reason": str(e)},
        ) from e


class UserStore:
    """Repository over one session. No update or delete operations."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_username(self, username: str) -> User | None:
        """Exact, case-sensitive match."""
        with _store_errors("find_by_username"):
            return self.session.scalars(
                select(User).where(User.username == username)
            ).first()

    def find_by_id(self, user_id: int) -> User | None:
        with _store_errors("find_by_id"):
            return self.session.get(User, user_id)

    def insert(self, username: str, password_hash: str, role: str) -> User:
        """
        Insert and commit a new user.

        The unique constraint on users.username decides concurrent races: the
        losing insert surfaces as ConflictError, never as a duplicate row.
        """
        user = User(username=username, password_hash=password_hash, role=role)
        try:
            self.session.add(user)
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            raise ConflictError("Username already exists", {"username": username}) from e
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.exception("Credential store failure during insert")
            raise StoreUnavailableError(
                "Credential store unavailable",
                {"operation": "insert", "reason": str(e)},
            ) from e
        with _store_errors("insert"):
            self.session.refresh(user)
        return user
