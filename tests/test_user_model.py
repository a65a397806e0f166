"""Tests for the User model helpers."""

from datetime import timedelta

from models import as_utc, db, utcnow
from models.user import VERIFICATION_CODE_ALPHABET, User


def _user(**overrides) -> User:
    fields = {"fullname": "Helper User", "email": "helper@example.com"}
    fields.update(overrides)
    user = User(**fields)
    user.set_password("password123")
    return user


def test_password_helpers(session):
    user = _user()
    session.add(user)
    session.commit()

    assert user.password_hash != "password123"
    assert user.check_password("password123") is True
    assert user.check_password("wrong") is False


def test_defaults_applied_on_insert(session):
    user = _user()
    session.add(user)
    session.commit()
    session.refresh(user)

    assert user.user_role == "member"
    assert user.is_active is False
    assert user.is_email_verified is False
    assert user.created_at is not None
    assert user.updated_at is not None


def test_issue_verification_code(session):
    user = _user()
    before = utcnow()

    code = user.issue_verification_code()

    assert len(code) == 32
    assert set(code) <= set(VERIFICATION_CODE_ALPHABET)
    assert user.email_verification_code == code
    expires_at = as_utc(user.email_verification_expires_at)
    assert before + timedelta(hours=24) <= expires_at
    assert expires_at <= utcnow() + timedelta(hours=24)


def test_verification_codes_are_not_reused():
    user = _user()
    first = user.issue_verification_code()
    second = user.issue_verification_code()

    assert first != second
    assert user.email_verification_code == second


def test_verification_code_expiry(session):
    user = _user()
    user.issue_verification_code(ttl_hours=1)
    session.add(user)
    session.commit()
    session.refresh(user)

    assert user.verification_code_expired() is False
    assert user.verification_code_expired(now=utcnow() + timedelta(hours=2)) is True

    user.email_verification_expires_at = None
    assert user.verification_code_expired() is False


def test_mark_email_verified_clears_code(session):
    user = _user()
    user.issue_verification_code()
    session.add(user)
    session.commit()

    user.mark_email_verified()
    db.session.commit()
    db.session.refresh(user)

    assert user.is_email_verified is True
    assert user.email_verification_code is None
    assert user.email_verification_expires_at is None


def test_to_dict_hides_secrets(session):
    user = _user(phone="+15550100")
    user.issue_verification_code()
    session.add(user)
    session.commit()

    payload = user.to_dict()

    assert payload["email"] == "helper@example.com"
    assert payload["phone"] == "+15550100"
    assert payload["id"] == str(user.id)
    assert "password_hash" not in payload
    assert "email_verification_code" not in payload
