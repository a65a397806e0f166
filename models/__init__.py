"""Database initialization and model exports."""

import sqlite3
from datetime import datetime, timezone

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event
from sqlalchemy.engine import Engine


db = SQLAlchemy()


def utcnow() -> datetime:
    """Return the current time as an aware UTC datetime."""

    return datetime.now(timezone.utc)


def as_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to naive datetimes read back from backends without timezones."""

    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores REFERENCES ... ON DELETE CASCADE unless asked per connection.
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# Import models to register them with SQLAlchemy metadata.
from .user import User  # noqa: E402,F401
from .contribution import Contribution  # noqa: E402,F401
from .payment import Payment  # noqa: E402,F401
from .announcement import Announcement  # noqa: E402,F401
from .event import Event  # noqa: E402,F401
from .photo import Photo  # noqa: E402,F401

__all__ = [
    "db",
    "utcnow",
    "as_utc",
    "User",
    "Contribution",
    "Payment",
    "Announcement",
    "Event",
    "Photo",
]
