"""Data access for photos."""

from __future__ import annotations

import logging

from models import db
from models.photo import Photo

from .common import apply_updates, commit, get_or_404, parse_uuid

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("caption", "url", "event_id")
CLEARABLE_FIELDS = ("caption", "event_id")


def create_photo(
    posted_by,
    url: str | None = None,
    caption: str | None = None,
    event_id=None,
) -> Photo:
    photo = Photo(
        posted_by=parse_uuid(posted_by, "posted_by"),
        url=url,
        caption=caption,
        event_id=parse_uuid(event_id, "event_id") if event_id is not None else None,
    )
    db.session.add(photo)
    commit("create photo")
    logger.info("Created photo %s for user %s", photo.id, photo.posted_by)
    return photo


def get_photo(photo_id) -> Photo:
    return get_or_404(Photo, photo_id, "Photo")


def list_photos() -> list[Photo]:
    return Photo.query.order_by(Photo.created_at.desc()).all()


def list_event_photos(event_id) -> list[Photo]:
    return (
        Photo.query.filter_by(event_id=parse_uuid(event_id, "event_id"))
        .order_by(Photo.created_at.desc())
        .all()
    )


def update_photo(photo_id, **fields) -> Photo:
    """Update a photo. Passing ``caption=None`` or ``event_id=None`` clears them."""

    photo = get_photo(photo_id)
    if fields.get("event_id") is not None:
        fields["event_id"] = parse_uuid(fields["event_id"], "event_id")

    apply_updates(photo, fields, UPDATABLE_FIELDS, CLEARABLE_FIELDS)
    commit("update photo")
    logger.info("Updated photo %s", photo.id)
    return photo


def delete_photo(photo_id) -> None:
    photo = get_photo(photo_id)
    db.session.delete(photo)
    commit("delete photo")
    logger.info("Deleted photo %s", photo_id)
