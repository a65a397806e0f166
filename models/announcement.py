"""Announcement model."""

import uuid

from . import as_utc, db, utcnow


class Announcement(db.Model):
    __tablename__ = "announcements"
    __table_args__ = (
        db.Index("idx_announcements_posted_by", "posted_by"),
        db.Index("idx_announcements_title", "title"),
        db.Index("idx_announcements_created_at", "created_at"),
    )

    id = db.Column(db.Uuid, primary_key=True, default=uuid.uuid4)
    title = db.Column(db.Text, nullable=False)
    body = db.Column(db.Text, nullable=True)
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

    poster = db.relationship("User", back_populates="announcements")

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "title": self.title,
            "body": self.body,
            "posted_by": str(self.posted_by),
            "created_at": as_utc(self.created_at).isoformat() if self.created_at else None,
            "updated_at": as_utc(self.updated_at).isoformat() if self.updated_at else None,
        }
