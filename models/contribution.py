"""Contribution model."""

import uuid

from . import as_utc, db, utcnow
from .types import money_type


class Contribution(db.Model):
    """A dues or levy that members are expected to pay by a due date."""

    __tablename__ = "contributions"
    __table_args__ = (
        db.Index("idx_contributions_created_by", "created_by"),
        db.Index("idx_contributions_title", "title"),
        db.Index("idx_contributions_due_date", "due_date"),
        db.Index("idx_contributions_created_at", "created_at"),
    )

    id = db.Column(db.Uuid, primary_key=True, default=uuid.uuid4)
    title = db.Column(db.Text, nullable=False)
    description = db.Column(db.Text, nullable=True)
    amount = db.Column(money_type(), nullable=True)
    due_date = db.Column(db.Date, nullable=False)
    created_by = db.Column(
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

    creator = db.relationship("User", back_populates="contributions")
    payments = db.relationship(
        "Payment",
        back_populates="contribution",
        cascade="all, delete",
        passive_deletes=True,
    )

    def to_dict(self) -> dict:
        """Serialize the contribution."""

        return {
            "id": str(self.id),
            "title": self.title,
            "description": self.description,
            "amount": str(self.amount) if self.amount is not None else None,
            "due_date": self.due_date.isoformat() if self.due_date else None,
            "created_by": str(self.created_by),
            "created_at": as_utc(self.created_at).isoformat() if self.created_at else None,
            "updated_at": as_utc(self.updated_at).isoformat() if self.updated_at else None,
        }
