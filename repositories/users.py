"""Data access for portal users."""

from __future__ import annotations

import logging
from datetime import date

from flask import current_app
from sqlalchemy import func

from models import db
from models.user import DEFAULT_USER_ROLE, USER_ROLES, User

from .common import (
    apply_updates,
    commit,
    ensure_choice,
    get_or_404,
    parse_date,
)
from .errors import (
    EmailAlreadyExists,
    InvalidValue,
    InvalidVerificationCode,
    RecordNotFound,
    VerificationCodeExpired,
)

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("fullname", "phone", "dob", "photo_url", "user_role")
CLEARABLE_FIELDS = ("phone", "dob", "photo_url")


def _normalize_email(raw_email: str | None) -> str:
    """Normalize an email string by stripping whitespace and lowering case."""
    return (raw_email or "").strip().lower()


def _verification_settings() -> tuple[int, int]:
    config = current_app.config
    return (
        int(config.get("EMAIL_VERIFICATION_TTL_HOURS", 24)),
        int(config.get("EMAIL_VERIFICATION_CODE_LENGTH", 32)),
    )


def find_user_by_email(email: str | None) -> User | None:
    normalized = _normalize_email(email)
    if not normalized:
        return None
    return User.query.filter(func.lower(User.email) == normalized).first()


def create_user(
    fullname: str,
    email: str,
    password: str,
    user_role: str | None = None,
    *,
    is_active: bool = False,
    phone: str | None = None,
    dob: date | str | None = None,
    photo_url: str | None = None,
) -> User:
    """Create a user with a hashed password and a pending verification code."""

    normalized = _normalize_email(email)
    fullname = (fullname or "").strip()
    if not normalized or not password or not fullname:
        raise InvalidValue("Full name, email and password are required.")

    role = ensure_choice(user_role or DEFAULT_USER_ROLE, "user_role", USER_ROLES)

    # Case-insensitive unique check
    if find_user_by_email(normalized) is not None:
        raise EmailAlreadyExists(normalized)

    user = User(
        fullname=fullname,
        email=normalized,
        user_role=role,
        is_active=is_active,
        is_email_verified=False,
        phone=phone,
        dob=parse_date(dob, "dob"),
        photo_url=photo_url,
    )
    user.set_password(password)
    ttl_hours, length = _verification_settings()
    user.issue_verification_code(ttl_hours=ttl_hours, length=length)

    db.session.add(user)
    commit("create user")
    logger.info("Created user %s with role %s", user.id, user.user_role)
    return user


def get_user(user_id) -> User:
    return get_or_404(User, user_id, "User")


def list_users() -> list[User]:
    """Return every user, newest first."""

    return User.query.order_by(User.created_at.desc()).all()


def update_user(user_id, **fields) -> User:
    user = get_user(user_id)
    if fields.get("user_role") is not None:
        ensure_choice(fields["user_role"], "user_role", USER_ROLES)
    if "dob" in fields:
        fields["dob"] = parse_date(fields["dob"], "dob")

    apply_updates(
        user, fields, UPDATABLE_FIELDS, CLEARABLE_FIELDS, required=("fullname",)
    )
    commit("update user")
    logger.info("Updated user %s", user.id)
    return user


def verify_email(code: str) -> User:
    """Mark the owner of ``code`` as verified if the code is still valid."""

    if not code:
        raise InvalidVerificationCode()

    user = User.query.filter_by(email_verification_code=code).first()
    if user is None:
        raise InvalidVerificationCode()
    if user.verification_code_expired():
        raise VerificationCodeExpired()

    user.mark_email_verified()
    commit("verify email")
    logger.info("Email verified for user %s", user.id)
    return user


def resend_verification_code(email: str) -> User:
    """Issue a new verification code unless the email is already verified."""

    user = find_user_by_email(email)
    if user is None:
        raise RecordNotFound("User with email", _normalize_email(email))
    if user.is_email_verified:
        return user

    ttl_hours, length = _verification_settings()
    user.issue_verification_code(ttl_hours=ttl_hours, length=length)
    commit("reissue verification code")
    logger.info("Verification code reissued for user %s", user.id)
    return user


def toggle_user_active(user_id) -> User:
    user = get_user(user_id)
    user.is_active = not user.is_active
    commit("toggle user active flag")
    logger.info("User %s active status set to %s", user.id, user.is_active)
    return user


def delete_user(user_id) -> None:
    """Delete a user; owned rows are removed by the cascading foreign keys."""

    user = get_user(user_id)
    db.session.delete(user)
    commit("delete user")
    logger.info("Deleted user %s", user_id)
