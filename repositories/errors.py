"""Errors raised by the data-access layer.

Each error is a Werkzeug HTTP exception so the application's JSON error
handler renders it with the matching status code.
"""

from __future__ import annotations

from typing import Iterable

from werkzeug.exceptions import BadRequest, Conflict, NotFound


class RecordNotFound(NotFound):
    """A row looked up by primary key (or natural key) does not exist."""

    def __init__(self, entity: str, key: object):
        super().__init__(f"{entity} {key} not found.")
        self.entity = entity
        self.key = key


class EmailAlreadyExists(Conflict):
    def __init__(self, email: str):
        super().__init__(f"Email {email} already exists.")
        self.email = email


class ConstraintViolation(Conflict):
    """The database rejected a write (foreign key, not null, unique or check)."""

    description = "The change violates a database constraint."


class InvalidChoice(BadRequest):
    def __init__(self, field: str, value: object, choices: Iterable[str]):
        allowed = ", ".join(choices)
        super().__init__(f"{field} must be one of: {allowed}.")
        self.field = field
        self.value = value


class InvalidValue(BadRequest):
    description = "A supplied value could not be parsed."


class NoUpdateFields(BadRequest):
    description = "No fields provided for update."


class UnknownFields(BadRequest):
    def __init__(self, fields: Iterable[str]):
        names = ", ".join(sorted(fields))
        super().__init__(f"Fields cannot be updated: {names}.")


class InvalidVerificationCode(BadRequest):
    description = "Invalid verification code."


class VerificationCodeExpired(BadRequest):
    description = "Verification code has expired."
