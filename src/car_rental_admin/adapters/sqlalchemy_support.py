"""Helpers shared by the PostgreSQL repositories."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from car_rental_admin.domain.errors import ConflictError, PersistenceError


def uuid_or_none(value: str | None) -> UUID | None:
    """Parse a primary key; malformed ids cannot match any row."""
    if value is None:
        return None
    try:
        return UUID(value)
    except ValueError:
        return None


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """
    Re-raise driver/ORM failures as domain errors, keeping the store's message.

    Constraint violations (duplicate plate, row still referenced) become
    ConflictError; everything else is a PersistenceError.
    """
    try:
        yield
    except IntegrityError as exc:
        raise ConflictError(str(exc.orig or exc), operation=operation) from exc
    except SQLAlchemyError as exc:
        raise PersistenceError(str(getattr(exc, "orig", None) or exc), operation=operation) from exc
