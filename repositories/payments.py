"""Data access for payments."""

from __future__ import annotations

import logging
from decimal import Decimal

from models import db
from models.payment import DEFAULT_PAYMENT_STATUS, PAYMENT_STATUSES, Payment

from .common import (
    apply_updates,
    commit,
    ensure_choice,
    get_or_404,
    parse_decimal,
    parse_uuid,
)
from .errors import InvalidValue

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("user_id", "contribution_id", "amount", "receipt_url", "status")
CLEARABLE_FIELDS = ("receipt_url",)


def create_payment(
    user_id,
    contribution_id,
    amount: Decimal | str,
    receipt_url: str | None = None,
    status: str | None = None,
) -> Payment:
    """Record a payment; the user and contribution must already exist."""

    parsed_amount = parse_decimal(amount)
    if parsed_amount is None:
        raise InvalidValue("amount is required.")

    payment = Payment(
        user_id=parse_uuid(user_id, "user_id"),
        contribution_id=parse_uuid(contribution_id, "contribution_id"),
        amount=parsed_amount,
        receipt_url=receipt_url,
        status=ensure_choice(status or DEFAULT_PAYMENT_STATUS, "status", PAYMENT_STATUSES),
    )
    db.session.add(payment)
    commit("create payment")
    logger.info(
        "Created payment %s for contribution %s", payment.id, payment.contribution_id
    )
    return payment


def get_payment(payment_id) -> Payment:
    return get_or_404(Payment, payment_id, "Payment")


def list_payments() -> list[Payment]:
    return Payment.query.order_by(Payment.created_at.desc()).all()


def list_user_payments(user_id) -> list[Payment]:
    return (
        Payment.query.filter_by(user_id=parse_uuid(user_id, "user_id"))
        .order_by(Payment.created_at.desc())
        .all()
    )


def list_contribution_payments(contribution_id) -> list[Payment]:
    return (
        Payment.query.filter_by(
            contribution_id=parse_uuid(contribution_id, "contribution_id")
        )
        .order_by(Payment.created_at.desc())
        .all()
    )


def update_payment(payment_id, **fields) -> Payment:
    payment = get_payment(payment_id)
    if fields.get("status") is not None:
        ensure_choice(fields["status"], "status", PAYMENT_STATUSES)
    if "amount" in fields:
        fields["amount"] = parse_decimal(fields["amount"])
    for key in ("user_id", "contribution_id"):
        if fields.get(key) is not None:
            fields[key] = parse_uuid(fields[key], key)

    apply_updates(payment, fields, UPDATABLE_FIELDS, CLEARABLE_FIELDS)
    commit("update payment")
    logger.info("Updated payment %s", payment.id)
    return payment


def delete_payment(payment_id) -> None:
    payment = get_payment(payment_id)
    db.session.delete(payment)
    commit("delete payment")
    logger.info("Deleted payment %s", payment_id)
