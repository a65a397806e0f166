"""Photo model definition."""

import uuid

from . import as_utc, db, utcnow


class Photo(db.Model):
    """A photo shared by a member, optionally attached to an event."""

    __tablename__ = "photos"
    __table_args__ = (
        db.Index("idx_photos_posted_by", "posted_by"),
        db.Index("idx_photos_caption", "caption"),
        db.Index("idx_photos_event_id", "event_id"),
        db.Index("idx_photos_created_at", "created_at"),
    )

    id = db.Column(db.Uuid, primary_key=True, default=uuid.uuid4)
    caption = db.Column(db.Text, nullable=True)
    url = db.Column(db.Text, nullable=True)
    event_id = db.Column(
        db.Uuid, db.ForeignKey("events.id", ondelete="CASCADE"), nullable=True
    )
    posted_by = db.Column(
        db.Uuid, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    created_at = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=db.func.now(),
    )
    updated_at = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
        server_default=db.func.now(),
    )

    event = db.relationship("Event", back_populates="photos")
    poster = db.relationship("User", back_populates="photos")

    def __repr__(self) -> str:
        return f"<Photo id={self.id} event_id={self.event_id} posted_by={self.posted_by}>"

    def to_dict(self) -> dict:
        """Serialize the photo into a dictionary."""

        return {
            "id": str(self.id),
            "caption": self.caption,
            "url": self.url,
            "event_id": str(self.event_id) if self.event_id else None,
            "posted_by": str(self.posted_by),
            "created_at": as_utc(self.created_at).isoformat() if self.created_at else None,
            "updated_at": as_utc(self.updated_at).isoformat() if self.updated_at else None,
        }
