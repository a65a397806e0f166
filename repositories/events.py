"""Data access for events."""

from __future__ import annotations

import logging
from datetime import datetime

from models import db
from models.event import Event

from .common import apply_updates, commit, get_or_404, parse_datetime, parse_uuid
from .errors import InvalidValue

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "starts_at")


def create_event(posted_by, title: str, starts_at: datetime | str) -> Event:
    if not title:
        raise InvalidValue("title is required.")
    parsed_starts_at = parse_datetime(starts_at, "starts_at")
    if parsed_starts_at is None:
        raise InvalidValue("starts_at is required.")

    event = Event(
        posted_by=parse_uuid(posted_by, "posted_by"),
        title=title,
        starts_at=parsed_starts_at,
    )
    db.session.add(event)
    commit("create event")
    logger.info("Created event %s for user %s", event.id, event.posted_by)
    return event


def get_event(event_id) -> Event:
    return get_or_404(Event, event_id, "Event")


def list_events() -> list[Event]:
    """Return events in the order they start."""

    return Event.query.order_by(Event.starts_at.asc()).all()


def update_event(event_id, **fields) -> Event:
    event = get_event(event_id)
    if "starts_at" in fields:
        fields["starts_at"] = parse_datetime(fields["starts_at"], "starts_at")

    apply_updates(event, fields, UPDATABLE_FIELDS, required=("title",))
    commit("update event")
    logger.info("Updated event %s", event.id)
    return event


def delete_event(event_id) -> None:
    """Delete an event together with the photos attached to it."""

    event = get_event(event_id)
    db.session.delete(event)
    commit("delete event")
    logger.info("Deleted event %s", event_id)
