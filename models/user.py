"""User model definition."""

import secrets
import string
import uuid
from datetime import datetime, timedelta

from werkzeug.security import check_password_hash, generate_password_hash

from . import as_utc, db, utcnow


USER_ROLES = ("superadmin", "admin", "member", "treasurer")
DEFAULT_USER_ROLE = "member"
VERIFICATION_CODE_ALPHABET = string.ascii_letters + string.digits


class User(db.Model):
    """Represents a member of the community portal."""

    __tablename__ = "users"
    __table_args__ = (
        db.UniqueConstraint("email", name="users_email_key"),
        db.Index("idx_users_fullname", "fullname"),
        db.Index("idx_users_email", "email"),
        db.Index("idx_users_is_active", "is_active"),
        db.Index("idx_users_user_role", "user_role"),
        db.Index("idx_users_created_at", "created_at"),
        db.Index("idx_users_updated_at", "updated_at"),
    )

    id = db.Column(db.Uuid, primary_key=True, default=uuid.uuid4)
    fullname = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    phone = db.Column(db.String(25), nullable=True)
    user_role = db.Column(
        db.Enum(*USER_ROLES, name="user_roles", create_constraint=True),
        nullable=False,
        default=DEFAULT_USER_ROLE,
        server_default=db.text("'member'"),
    )
    dob = db.Column(db.Date, nullable=True)
    photo_url = db.Column(db.Text, nullable=True)
    email_verification_code = db.Column(db.String(255), nullable=True)
    email_verification_expires_at = db.Column(db.DateTime(timezone=True), nullable=True)
    is_email_verified = db.Column(
        db.Boolean,
        nullable=False,
        default=False,
        server_default=db.false(),
    )
    is_active = db.Column(
        db.Boolean,
        nullable=False,
        default=False,
        server_default=db.false(),
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

    contributions = db.relationship(
        "Contribution",
        back_populates="creator",
        cascade="all, delete",
        passive_deletes=True,
    )
    payments = db.relationship(
        "Payment",
        back_populates="user",
        cascade="all, delete",
        passive_deletes=True,
    )
    announcements = db.relationship(
        "Announcement",
        back_populates="poster",
        cascade="all, delete",
        passive_deletes=True,
    )
    events = db.relationship(
        "Event",
        back_populates="poster",
        cascade="all, delete",
        passive_deletes=True,
    )
    photos = db.relationship(
        "Photo",
        back_populates="poster",
        cascade="all, delete",
        passive_deletes=True,
    )

    def set_password(self, password: str) -> None:
        """Hash and store the password."""

        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        """Verify a password against the stored hash."""

        return check_password_hash(self.password_hash, password)

    def issue_verification_code(self, ttl_hours: int = 24, length: int = 32) -> str:
        """Generate a fresh email verification code and its expiry."""

        code = "".join(secrets.choice(VERIFICATION_CODE_ALPHABET) for _ in range(length))
        self.email_verification_code = code
        self.email_verification_expires_at = utcnow() + timedelta(hours=ttl_hours)
        return code

    def verification_code_expired(self, now: datetime | None = None) -> bool:
        """Return True when the pending verification code is past its expiry."""

        expires_at = as_utc(self.email_verification_expires_at)
        if expires_at is None:
            return False
        return (now or utcnow()) > expires_at

    def mark_email_verified(self) -> None:
        """Flag the email as verified and discard the verification code."""

        self.is_email_verified = True
        self.email_verification_code = None
        self.email_verification_expires_at = None

    def to_dict(self) -> dict:
        """Serialize the user without credentials or verification secrets."""

        return {
            "id": str(self.id),
            "fullname": self.fullname,
            "email": self.email,
            "phone": self.phone,
            "user_role": self.user_role,
            "dob": self.dob.isoformat() if self.dob else None,
            "photo_url": self.photo_url,
            "is_email_verified": self.is_email_verified,
            "is_active": self.is_active,
            "created_at": as_utc(self.created_at).isoformat() if self.created_at else None,
            "updated_at": as_utc(self.updated_at).isoformat() if self.updated_at else None,
        }

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<User {self.email}>"
