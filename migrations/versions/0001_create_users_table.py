"""Create users table and the user_roles enum.

Revision ID: 0001_create_users
Revises:
Create Date: 2025-01-06 00:00:00.000000
"""

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision = "0001_create_users"
down_revision = None
branch_labels = None
depends_on = None


USER_ROLES_ENUM = "user_roles"
USER_ROLES = ("superadmin", "admin", "member", "treasurer")

INDEXES = (
    ("idx_users_fullname", ["fullname"]),
    ("idx_users_email", ["email"]),
    ("idx_users_is_active", ["is_active"]),
    ("idx_users_user_role", ["user_role"]),
    ("idx_users_created_at", ["created_at"]),
    ("idx_users_updated_at", ["updated_at"]),
)


def _user_roles_type():
    # The native type is created explicitly below so re-runs can check first.
    return sa.Enum(*USER_ROLES, name=USER_ROLES_ENUM, create_constraint=True).with_variant(
        postgresql.ENUM(*USER_ROLES, name=USER_ROLES_ENUM, create_type=False),
        "postgresql",
    )


def upgrade() -> None:
    """Create the users table unless it already exists."""

    bind = op.get_bind()
    inspector = inspect(bind)

    if bind.dialect.name == "postgresql":
        postgresql.ENUM(*USER_ROLES, name=USER_ROLES_ENUM).create(bind, checkfirst=True)

    if "users" not in inspector.get_table_names():
        op.create_table(
            "users",
            sa.Column("id", sa.Uuid(), nullable=False),
            sa.Column("fullname", sa.String(length=255), nullable=False),
            sa.Column("email", sa.String(length=255), nullable=False),
            sa.Column("password_hash", sa.String(length=255), nullable=False),
            sa.Column("phone", sa.String(length=25), nullable=True),
            sa.Column(
                "user_role",
                _user_roles_type(),
                nullable=False,
                server_default=sa.text("'member'"),
            ),
            sa.Column("dob", sa.Date(), nullable=True),
            sa.Column("photo_url", sa.Text(), nullable=True),
            sa.Column("email_verification_code", sa.String(length=255), nullable=True),
            sa.Column(
                "email_verification_expires_at",
                sa.DateTime(timezone=True),
                nullable=True,
            ),
            sa.Column(
                "is_email_verified",
                sa.Boolean(),
                nullable=False,
                server_default=sa.false(),
            ),
            sa.Column(
                "is_active",
                sa.Boolean(),
                nullable=False,
                server_default=sa.false(),
            ),
            sa.Column(
                "created_at",
                sa.DateTime(timezone=True),
                nullable=False,
                server_default=sa.func.now(),
            ),
            sa.Column(
                "updated_at",
                sa.DateTime(timezone=True),
                nullable=False,
                server_default=sa.func.now(),
            ),
            sa.PrimaryKeyConstraint("id"),
            sa.UniqueConstraint("email", name="users_email_key"),
        )

    existing_indexes = {index["name"] for index in inspector.get_indexes("users")}
    for name, columns in INDEXES:
        if name not in existing_indexes:
            op.create_index(name, "users", columns, unique=False)


def downgrade() -> None:
    """Drop the users table and its enum type."""

    bind = op.get_bind()
    inspector = inspect(bind)

    if "users" in inspector.get_table_names():
        existing_indexes = {index["name"] for index in inspector.get_indexes("users")}
        for name, _ in reversed(INDEXES):
            if name in existing_indexes:
                op.drop_index(name, table_name="users")
        op.drop_table("users")

    if bind.dialect.name == "postgresql":
        postgresql.ENUM(name=USER_ROLES_ENUM).drop(bind, checkfirst=True)
