"""Payment model definition."""

import uuid

from . import as_utc, db, utcnow
from .types import money_type


PAYMENT_STATUSES = ("pending", "verified")
DEFAULT_PAYMENT_STATUS = "verified"


class Payment(db.Model):
    """A member's payment towards a contribution."""

    __tablename__ = "payments"
    __table_args__ = (
        db.Index("idx_payments_user_id", "user_id"),
        db.Index("idx_payments_contribution_id", "contribution_id"),
        db.Index("idx_payments_status", "status"),
        db.Index("idx_payments_created_at", "created_at"),
    )

    id = db.Column(db.Uuid, primary_key=True, default=uuid.uuid4)
    user_id = db.Column(
        db.Uuid, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    contribution_id = db.Column(
        db.Uuid, db.ForeignKey("contributions.id", ondelete="CASCADE"), nullable=False
    )
    amount = db.Column(money_type(), nullable=False)
    receipt_url = db.Column(db.Text, nullable=True)
    status = db.Column(
        db.Enum(*PAYMENT_STATUSES, name="payment_status", create_constraint=True),
        nullable=False,
        default=DEFAULT_PAYMENT_STATUS,
        server_default=db.text("'verified'"),
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

    user = db.relationship("User", back_populates="payments")
    contribution = db.relationship("Contribution", back_populates="payments")

    def __repr__(self) -> str:
        return f"<Payment id={self.id} user_id={self.user_id} status={self.status}>"

    def to_dict(self) -> dict:
        """Serialize the payment into a dictionary."""

        return {
            "id": str(self.id),
            "user_id": str(self.user_id),
            "contribution_id": str(self.contribution_id),
            "amount": str(self.amount) if self.amount is not None else None,
            "receipt_url": self.receipt_url,
            "status": self.status,
            "created_at": as_utc(self.created_at).isoformat() if self.created_at else None,
            "updated_at": as_utc(self.updated_at).isoformat() if self.updated_at else None,
        }
