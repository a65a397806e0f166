"""Data access for announcements."""

from __future__ import annotations

import logging

from models import db
from models.announcement import Announcement

from .common import apply_updates, commit, get_or_404, parse_uuid
from .errors import InvalidValue

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "body")


def create_announcement(posted_by, title: str, body: str | None = None) -> Announcement:
    if not title:
        raise InvalidValue("title is required.")

    announcement = Announcement(
        posted_by=parse_uuid(posted_by, "posted_by"),
        title=title,
        body=body,
    )
    db.session.add(announcement)
    commit("create announcement")
    logger.info(
        "Created announcement %s for user %s", announcement.id, announcement.posted_by
    )
    return announcement


def get_announcement(announcement_id) -> Announcement:
    return get_or_404(Announcement, announcement_id, "Announcement")


def list_announcements() -> list[Announcement]:
    return Announcement.query.order_by(Announcement.created_at.desc()).all()


def update_announcement(announcement_id, **fields) -> Announcement:
    announcement = get_announcement(announcement_id)
    apply_updates(announcement, fields, UPDATABLE_FIELDS, required=("title",))
    commit("update announcement")
    logger.info("Updated announcement %s", announcement.id)
    return announcement


def delete_announcement(announcement_id) -> None:
    announcement = get_announcement(announcement_id)
    db.session.delete(announcement)
    commit("delete announcement")
    logger.info("Deleted announcement %s", announcement_id)
