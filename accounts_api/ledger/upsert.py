"""
Writes keyed by a natural key (account name, report date, cheque number).

The lookup and the write are two statements. Natural-key columns carry a
UNIQUE constraint, so a concurrent insert that loses the race surfaces as an
IntegrityError; the loser rolls back and re-reads the winning row instead of
creating a duplicate.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Type

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from accounts_api.database import Base
from accounts_api.errors import ConflictError, NotFoundError

logger = logging.getLogger(__name__)


def find_by_key(db: Session, model: Type[Base], key: str, value: Any):
    return db.query(model).filter(getattr(model, key) == value).first()


def apply_changes(row: Base, values: Mapping[str, Any]) -> None:
    for field, value in values.items():
        setattr(row, field, value)


def upsert_by_key(
    db: Session,
    model: Type[Base],
    key: str,
    key_value: Any,
    values: Mapping[str, Any],
    defaults: Optional[Mapping[str, Any]] = None,
) -> tuple[Base, bool]:
    """Update the row whose ``key`` equals ``key_value``, or insert it.

    ``values`` are the fields supplied by the client; ``defaults`` fill the
    remaining columns on insert only. Returns ``(row, created)``.
    """
    row = find_by_key(db, model, key, key_value)
    if row is not None:
        apply_changes(row, values)
        db.commit()
        db.refresh(row)
        logger.info("Updated %s %s=%s", model.__tablename__, key, key_value)
        return row, False

    row = model(**{**(defaults or {}), **values, key: key_value})
    db.add(row)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning("Concurrent insert on %s %s=%s, updating instead", model.__tablename__, key, key_value)
        row = find_by_key(db, model, key, key_value)
        if row is None:
            raise
        apply_changes(row, values)
        db.commit()
        db.refresh(row)
        return row, False

    db.refresh(row)
    logger.info("Created %s %s=%s", model.__tablename__, key, key_value)
    return row, True


def insert_unique(
    db: Session,
    model: Type[Base],
    key: str,
    key_value: Any,
    values: Mapping[str, Any],
    conflict_message: str,
) -> Base:
    """Insert a row unless ``key_value`` is already taken (ConflictError)."""
    if find_by_key(db, model, key, key_value) is not None:
        raise ConflictError(conflict_message)

    row = model(**{**values, key: key_value})
    db.add(row)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        if find_by_key(db, model, key, key_value) is not None:
            raise ConflictError(conflict_message) from None
        raise
    db.refresh(row)
    logger.info("Created %s %s=%s", model.__tablename__, key, key_value)
    return row


def delete_by_key(db: Session, model: Type[Base], key: str, key_value: Any, not_found_message: str) -> None:
    """Delete the matching row(s); NotFoundError when nothing was deleted."""
    deleted = db.query(model).filter(getattr(model, key) == key_value).delete(synchronize_session=False)
    db.commit()
    if not deleted:
        raise NotFoundError(not_found_message)
    logger.info("Deleted %s %s=%s", model.__tablename__, key, key_value)
