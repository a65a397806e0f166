"""Helpers shared by the per-entity repositories."""

from __future__ import annotations

import logging
import uuid
from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Iterable, TypeVar

from sqlalchemy.exc import DataError, IntegrityError

from models import db, utcnow

from .errors import (
    ConstraintViolation,
    InvalidChoice,
    InvalidValue,
    NoUpdateFields,
    RecordNotFound,
    UnknownFields,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=db.Model)


def parse_uuid(value: object, field: str = "id") -> uuid.UUID:
    """Return ``value`` as a UUID or raise a 400 error."""

    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError, AttributeError) as exc:
        raise InvalidValue(f"{field} must be a valid UUID.") from exc


def parse_decimal(value: object, field: str = "amount") -> Decimal | None:
    if value is None or value == "":
        return None
    try:
        parsed = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, TypeError) as exc:
        raise InvalidValue(f"{field} must be numeric.") from exc
    if not parsed.is_finite():
        raise InvalidValue(f"{field} must be a finite number.")
    return parsed


def parse_date(value: object, field: str) -> date | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError as exc:
        raise InvalidValue(f"{field} must be an ISO 8601 date.") from exc


def parse_datetime(value: object, field: str) -> datetime | None:
    """Parse an ISO 8601 timestamp into UTC; naive values are taken as UTC."""

    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        try:
            parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
        except ValueError as exc:
            raise InvalidValue(f"{field} must be an ISO 8601 timestamp.") from exc
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def ensure_choice(value: str, field: str, choices: Iterable[str]) -> str:
    choices = tuple(choices)
    if value not in choices:
        raise InvalidChoice(field, value, choices)
    return value


def get_or_404(model: type[ModelT], record_id: object, entity: str) -> ModelT:
    """Fetch ``model`` by primary key or raise :class:`RecordNotFound`."""

    key = parse_uuid(record_id)
    record = db.session.get(model, key)
    if record is None:
        raise RecordNotFound(entity, key)
    return record


def apply_updates(
    record: db.Model,
    fields: dict,
    updatable: Iterable[str],
    clearable: Iterable[str] = (),
    required: Iterable[str] = (),
) -> None:
    """Assign ``fields`` onto ``record`` and bump ``updated_at``.

    ``None`` keeps the stored value unless the field is listed in
    ``clearable``, in which case it resets the column to NULL. Fields in
    ``required`` reject blank strings the same way the create functions do.
    """

    unknown = set(fields) - set(updatable)
    if unknown:
        raise UnknownFields(unknown)

    clearable = set(clearable)
    changes = {
        name: value
        for name, value in fields.items()
        if value is not None or name in clearable
    }
    if not changes:
        raise NoUpdateFields()

    for name in set(required) & set(changes):
        value = changes[name]
        if isinstance(value, str) and not value.strip():
            raise InvalidValue(f"{name} is required.")

    for name, value in changes.items():
        setattr(record, name, value)
    record.updated_at = utcnow()


def commit(action: str) -> None:
    """Commit the session, turning constraint failures into HTTP errors."""

    try:
        db.session.commit()
    except (IntegrityError, DataError) as exc:
        db.session.rollback()
        logger.warning("Database rejected %s: %s", action, exc.orig)
        raise ConstraintViolation(f"Could not {action}: {exc.orig}") from exc
