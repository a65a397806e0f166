"""Tests for the user data-access functions."""

from __future__ import annotations

import uuid
from datetime import date, timedelta

import pytest

from models import as_utc, utcnow
from repositories import users
from repositories.errors import (
    EmailAlreadyExists,
    InvalidChoice,
    InvalidValue,
    InvalidVerificationCode,
    NoUpdateFields,
    RecordNotFound,
    UnknownFields,
    VerificationCodeExpired,
)


def _create(email: str = "Member@Example.com", **kwargs):
    return users.create_user("Ada Member", email, "password123", **kwargs)


def test_create_user_defaults(session):
    user = _create()

    assert user.email == "member@example.com"
    assert user.user_role == "member"
    assert user.is_active is False
    assert user.is_email_verified is False
    assert user.check_password("password123")
    assert len(user.email_verification_code) == 32
    expires_at = as_utc(user.email_verification_expires_at)
    assert timedelta(hours=23) < expires_at - utcnow() <= timedelta(hours=24)


def test_create_user_with_profile_fields(session):
    user = _create(
        user_role="treasurer",
        is_active=True,
        phone="+15550100",
        dob="1990-04-01",
        photo_url="https://img.example/ada.jpg",
    )

    assert user.user_role == "treasurer"
    assert user.is_active is True
    assert user.dob == date(1990, 4, 1)
    assert user.photo_url == "https://img.example/ada.jpg"


def test_create_user_uses_configured_ttl(app, session):
    app.config["EMAIL_VERIFICATION_TTL_HOURS"] = 2

    user = _create()

    remaining = as_utc(user.email_verification_expires_at) - utcnow()
    assert timedelta(hours=1) < remaining <= timedelta(hours=2)


def test_create_user_rejects_duplicate_email_case_insensitively(session):
    _create("dup@example.com")

    with pytest.raises(EmailAlreadyExists) as excinfo:
        _create("  DUP@example.com ")
    assert excinfo.value.code == 409


def test_create_user_rejects_unknown_role(session):
    with pytest.raises(InvalidChoice) as excinfo:
        _create(user_role="janitor")
    assert "superadmin, admin, member, treasurer" in excinfo.value.description


def test_create_user_requires_credentials(session):
    with pytest.raises(InvalidValue):
        users.create_user("Ada", "", "password123")
    with pytest.raises(InvalidValue):
        users.create_user("Ada", "ada@example.com", "")


def test_find_user_by_email(session):
    created = _create()

    assert users.find_user_by_email("MEMBER@example.com").id == created.id
    assert users.find_user_by_email("nobody@example.com") is None
    assert users.find_user_by_email(None) is None


def test_get_user_accepts_string_ids(session):
    created = _create()

    assert users.get_user(str(created.id)).id == created.id


def test_get_user_missing_raises_not_found(session):
    missing = uuid.uuid4()

    with pytest.raises(RecordNotFound) as excinfo:
        users.get_user(missing)
    assert excinfo.value.code == 404
    assert str(missing) in excinfo.value.description


def test_get_user_rejects_malformed_id(session):
    with pytest.raises(InvalidValue):
        users.get_user("not-a-uuid")


def test_list_users_newest_first(session):
    first = _create("first@example.com")
    second = _create("second@example.com")
    first.created_at = utcnow() - timedelta(days=1)
    session.commit()

    assert [user.id for user in users.list_users()] == [second.id, first.id]


def test_update_user_changes_only_supplied_fields(session):
    user = _create(phone="+15550100")
    stale = utcnow() - timedelta(days=1)
    user.updated_at = stale
    session.commit()

    updated = users.update_user(user.id, fullname="Ada Lovelace", phone=None)

    assert updated.fullname == "Ada Lovelace"
    assert updated.phone is None
    assert updated.email == "member@example.com"
    assert as_utc(updated.updated_at) > stale


def test_update_user_none_keeps_required_fields(session):
    user = _create()

    updated = users.update_user(user.id, fullname=None, user_role="admin")

    assert updated.fullname == "Ada Member"
    assert updated.user_role == "admin"


def test_update_user_rejects_bad_input(session):
    user = _create()

    with pytest.raises(NoUpdateFields):
        users.update_user(user.id)
    with pytest.raises(NoUpdateFields):
        users.update_user(user.id, fullname=None)
    with pytest.raises(UnknownFields):
        users.update_user(user.id, email="new@example.com")
    with pytest.raises(InvalidChoice):
        users.update_user(user.id, user_role="owner")
    with pytest.raises(RecordNotFound):
        users.update_user(uuid.uuid4(), fullname="Ghost")


def test_verify_email(session):
    user = _create()
    code = user.email_verification_code

    verified = users.verify_email(code)

    assert verified.id == user.id
    assert verified.is_email_verified is True
    assert verified.email_verification_code is None
    with pytest.raises(InvalidVerificationCode):
        users.verify_email(code)


def test_verify_email_rejects_unknown_and_empty_codes(session):
    _create()

    with pytest.raises(InvalidVerificationCode):
        users.verify_email("x" * 32)
    with pytest.raises(InvalidVerificationCode):
        users.verify_email("")


def test_verify_email_rejects_expired_code(session):
    user = _create()
    user.email_verification_expires_at = utcnow() - timedelta(minutes=1)
    session.commit()

    with pytest.raises(VerificationCodeExpired):
        users.verify_email(user.email_verification_code)
    assert users.get_user(user.id).is_email_verified is False


def test_resend_verification_code(session):
    user = _create()
    old_code = user.email_verification_code
    user.email_verification_expires_at = utcnow() - timedelta(minutes=1)
    session.commit()

    refreshed = users.resend_verification_code("MEMBER@example.com")

    assert refreshed.email_verification_code != old_code
    assert refreshed.verification_code_expired() is False
    assert users.verify_email(refreshed.email_verification_code).is_email_verified


def test_resend_verification_code_for_verified_user_is_noop(session):
    user = _create()
    users.verify_email(user.email_verification_code)

    again = users.resend_verification_code(user.email)

    assert again.is_email_verified is True
    assert again.email_verification_code is None


def test_resend_verification_code_unknown_email(session):
    with pytest.raises(RecordNotFound):
        users.resend_verification_code("nobody@example.com")


def test_toggle_user_active(session):
    user = _create()

    assert users.toggle_user_active(user.id).is_active is True
    assert users.toggle_user_active(user.id).is_active is False


def test_delete_user(session):
    user_id = _create().id

    users.delete_user(user_id)

    with pytest.raises(RecordNotFound):
        users.get_user(user_id)
    with pytest.raises(RecordNotFound):
        users.delete_user(user_id)


def test_update_user_rejects_blank_fullname(session):
    user = _create()

    with pytest.raises(InvalidValue):
        users.update_user(user.id, fullname="")
    with pytest.raises(InvalidValue):
        users.update_user(user.id, fullname="  ", phone="+15550100")

    stored = users.get_user(user.id)
    assert stored.fullname == "Ada Member"
    assert stored.phone is None
