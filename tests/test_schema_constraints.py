"""Database-level constraints: uniqueness, checks, foreign keys and cascades."""

from __future__ import annotations

import uuid
from datetime import date, datetime, timezone
from decimal import Decimal

import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from models import Announcement, Contribution, Event, Payment, Photo, User


def _add_user(session, email: str, **fields) -> User:
    user = User(fullname=email.split("@")[0], email=email, **fields)
    user.set_password("password123")
    session.add(user)
    session.commit()
    return user


def _add_contribution(session, owner: User) -> Contribution:
    contribution = Contribution(
        title="Annual dues",
        amount=Decimal("50.00"),
        due_date=date(2025, 12, 31),
        created_by=owner.id,
    )
    session.add(contribution)
    session.commit()
    return contribution


def _add_event(session, owner: User) -> Event:
    event = Event(
        title="Picnic",
        starts_at=datetime(2025, 7, 1, 12, tzinfo=timezone.utc),
        posted_by=owner.id,
    )
    session.add(event)
    session.commit()
    return event


def _count(session, model) -> int:
    return session.query(model).count()


def test_email_is_unique(session):
    _add_user(session, "dup@example.com")

    with pytest.raises(IntegrityError):
        _add_user(session, "dup@example.com")
    session.rollback()


def test_user_role_is_checked(session):
    with pytest.raises(IntegrityError):
        _add_user(session, "role@example.com", user_role="janitor")
    session.rollback()


def test_payment_status_is_checked(session):
    user = _add_user(session, "status@example.com")
    contribution = _add_contribution(session, user)

    session.add(
        Payment(
            user_id=user.id,
            contribution_id=contribution.id,
            amount=Decimal("5"),
            status="refunded",
        )
    )
    with pytest.raises(IntegrityError):
        session.commit()
    session.rollback()


def test_payment_status_defaults_to_verified(session):
    user = _add_user(session, "payer@example.com")
    contribution = _add_contribution(session, user)

    payment = Payment(user_id=user.id, contribution_id=contribution.id, amount=Decimal("5"))
    session.add(payment)
    session.commit()

    assert payment.status == "verified"


def test_server_side_status_default(session):
    user = _add_user(session, "raw@example.com")
    contribution = _add_contribution(session, user)
    payment_id = uuid.uuid4()

    session.execute(
        text(
            "INSERT INTO payments (id, user_id, contribution_id, amount) "
            "VALUES (:id, :user_id, :contribution_id, 7)"
        ),
        {
            "id": payment_id.hex,
            "user_id": user.id.hex,
            "contribution_id": contribution.id.hex,
        },
    )
    session.commit()

    assert session.get(Payment, payment_id).status == "verified"


def test_foreign_keys_are_enforced(session):
    user = _add_user(session, "fk@example.com")

    session.add(
        Payment(user_id=user.id, contribution_id=uuid.uuid4(), amount=Decimal("1"))
    )
    with pytest.raises(IntegrityError):
        session.commit()
    session.rollback()

    session.add(Announcement(title="Orphan", posted_by=uuid.uuid4()))
    with pytest.raises(IntegrityError):
        session.commit()
    session.rollback()


def test_deleting_user_cascades_to_owned_rows(session):
    owner = _add_user(session, "owner@example.com")
    other = _add_user(session, "other@example.com")
    contribution = _add_contribution(session, owner)
    event = _add_event(session, owner)

    session.add_all(
        [
            Payment(user_id=other.id, contribution_id=contribution.id, amount=Decimal("10")),
            Announcement(title="Hello", posted_by=owner.id),
            Photo(url="https://img.example/1.jpg", event_id=event.id, posted_by=other.id),
            Photo(url="https://img.example/2.jpg", posted_by=owner.id),
            Photo(url="https://img.example/3.jpg", posted_by=other.id),
        ]
    )
    session.commit()
    owner_id = owner.id

    session.delete(owner)
    session.commit()
    session.expire_all()

    assert session.get(User, owner_id) is None
    assert _count(session, Contribution) == 0
    assert _count(session, Payment) == 0
    assert _count(session, Announcement) == 0
    assert _count(session, Event) == 0
    remaining = session.query(Photo).all()
    assert [photo.url for photo in remaining] == ["https://img.example/3.jpg"]


def test_deleting_event_removes_its_photos(session):
    owner = _add_user(session, "events@example.com")
    event = _add_event(session, owner)
    session.add_all(
        [
            Photo(url="https://img.example/a.jpg", event_id=event.id, posted_by=owner.id),
            Photo(url="https://img.example/b.jpg", posted_by=owner.id),
        ]
    )
    session.commit()

    session.delete(event)
    session.commit()
    session.expire_all()

    assert [photo.url for photo in session.query(Photo).all()] == [
        "https://img.example/b.jpg"
    ]
    assert session.get(User, owner.id) is not None


def test_deleting_contribution_removes_its_payments(session):
    owner = _add_user(session, "treasurer@example.com", user_role="treasurer")
    contribution = _add_contribution(session, owner)
    session.add(
        Payment(user_id=owner.id, contribution_id=contribution.id, amount=Decimal("3"))
    )
    session.commit()

    session.delete(contribution)
    session.commit()

    assert _count(session, Payment) == 0
    assert _count(session, User) == 1
