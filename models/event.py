"""Event model."""

import uuid

from . import as_utc, db, utcnow


class Event(db.Model):
    """A scheduled community gathering."""

    __tablename__ = "events"
    __table_args__ = (
        db.Index("idx_events_posted_by", "posted_by"),
        db.Index("idx_events_title", "title"),
        db.Index("idx_events_starts_at", "starts_at"),
        db.Index("idx_events_created_at", "created_at"),
    )

    id = db.Column(db.Uuid, primary_key=True, default=uuid.uuid4)
    title = db.Column(db.Text, nullable=False)
    starts_at = db.Column(db.DateTime(timezone=True), nullable=False)
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

    poster = db.relationship("User", back_populates="events")
    photos = db.relationship(
        "Photo",
        back_populates="event",
        cascade="all, delete",
        passive_deletes=True,
    )

    def to_dict(self) -> dict:
        """Serialize the event."""

        return {
            "id": str(self.id),
            "title": self.title,
            "starts_at": as_utc(self.starts_at).isoformat() if self.starts_at else None,
            "posted_by": str(self.posted_by),
            "created_at": as_utc(self.created_at).isoformat() if self.created_at else None,
            "updated_at": as_utc(self.updated_at).isoformat() if self.updated_at else None,
        }
