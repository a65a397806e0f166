"""Per-entity data-access modules."""

from . import announcements, contributions, events, payments, photos, users
from .errors import (
    ConstraintViolation,
    EmailAlreadyExists,
    InvalidChoice,
    InvalidValue,
    InvalidVerificationCode,
    NoUpdateFields,
    RecordNotFound,
    UnknownFields,
    VerificationCodeExpired,
)

__all__ = [
    "announcements",
    "contributions",
    "events",
    "payments",
    "photos",
    "users",
    "ConstraintViolation",
    "EmailAlreadyExists",
    "InvalidChoice",
    "InvalidValue",
    "InvalidVerificationCode",
    "NoUpdateFields",
    "RecordNotFound",
    "UnknownFields",
    "VerificationCodeExpired",
]
