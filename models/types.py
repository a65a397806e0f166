"""Column types shared by the models and the migrations."""

from decimal import Decimal

from sqlalchemy import Numeric, String
from sqlalchemy.types import TypeDecorator


class DecimalText(TypeDecorator):
    """Stores a ``Decimal`` as its exact text form.

    SQLite keeps ``NUMERIC`` columns as floating point, which rounds amounts
    at the scale used here.
    """

    impl = String(64)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return str(Decimal(value))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(value)


def money_type():
    """``NUMERIC(20, 9)`` everywhere except SQLite, where text keeps precision."""

    return Numeric(20, 9).with_variant(DecimalText(), "sqlite")
