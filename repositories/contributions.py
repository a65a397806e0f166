"""Data access for contributions."""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal

from models import db
from models.contribution import Contribution

from .common import (
    apply_updates,
    commit,
    get_or_404,
    parse_date,
    parse_decimal,
    parse_uuid,
)
from .errors import InvalidValue

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "description", "amount", "due_date")


def create_contribution(
    created_by,
    title: str,
    due_date: date | str,
    description: str | None = None,
    amount: Decimal | str | None = None,
) -> Contribution:
    """Create a contribution owned by ``created_by``."""

    if not title:
        raise InvalidValue("title is required.")
    parsed_due_date = parse_date(due_date, "due_date")
    if parsed_due_date is None:
        raise InvalidValue("due_date is required.")

    contribution = Contribution(
        created_by=parse_uuid(created_by, "created_by"),
        title=title,
        description=description,
        amount=parse_decimal(amount),
        due_date=parsed_due_date,
    )
    db.session.add(contribution)
    commit("create contribution")
    logger.info(
        "Created contribution %s for user %s", contribution.id, contribution.created_by
    )
    return contribution


def get_contribution(contribution_id) -> Contribution:
    return get_or_404(Contribution, contribution_id, "Contribution")


def list_contributions() -> list[Contribution]:
    return Contribution.query.order_by(Contribution.created_at.desc()).all()


def list_user_contributions(user_id) -> list[Contribution]:
    """Return contributions created by ``user_id``, newest first."""

    return (
        Contribution.query.filter_by(created_by=parse_uuid(user_id, "user_id"))
        .order_by(Contribution.created_at.desc())
        .all()
    )


def update_contribution(contribution_id, **fields) -> Contribution:
    contribution = get_contribution(contribution_id)
    if "amount" in fields:
        fields["amount"] = parse_decimal(fields["amount"])
    if "due_date" in fields:
        fields["due_date"] = parse_date(fields["due_date"], "due_date")

    apply_updates(contribution, fields, UPDATABLE_FIELDS, required=("title",))
    commit("update contribution")
    logger.info("Updated contribution %s", contribution.id)
    return contribution


def delete_contribution(contribution_id) -> None:
    contribution = get_contribution(contribution_id)
    db.session.delete(contribution)
    commit("delete contribution")
    logger.info("Deleted contribution %s", contribution_id)
