"""Create payments table and the payment_status enum.

Revision ID: 0003_create_payments
Revises: 0002_create_contributions
Create Date: 2025-01-06 00:10:00.000000
"""

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect
from sqlalchemy.dialects import postgresql

from models.types import money_type


# revision identifiers, used by Alembic.
revision = "0003_create_payments"
down_revision = "0002_create_contributions"
branch_labels = None
depends_on = None


PAYMENT_STATUS_ENUM = "payment_status"
PAYMENT_STATUSES = ("pending", "verified")

INDEXES = (
    ("idx_payments_user_id", ["user_id"]),
    ("idx_payments_contribution_id", ["contribution_id"]),
    ("idx_payments_status", ["status"]),
    ("idx_payments_created_at", ["created_at"]),
)


def _payment_status_type():
    return sa.Enum(
        *PAYMENT_STATUSES, name=PAYMENT_STATUS_ENUM, create_constraint=True
    ).with_variant(
        postgresql.ENUM(*PAYMENT_STATUSES, name=PAYMENT_STATUS_ENUM, create_type=False),
        "postgresql",
    )


def upgrade() -> None:
    """Create the payments table; status defaults to the 'verified' literal."""

    bind = op.get_bind()
    inspector = inspect(bind)

    if bind.dialect.name == "postgresql":
        postgresql.ENUM(*PAYMENT_STATUSES, name=PAYMENT_STATUS_ENUM).create(
            bind, checkfirst=True
        )

    if "payments" not in inspector.get_table_names():
        op.create_table(
            "payments",
            sa.Column("id", sa.Uuid(), nullable=False),
            sa.Column("user_id", sa.Uuid(), nullable=False),
            sa.Column("contribution_id", sa.Uuid(), nullable=False),
            sa.Column("amount", money_type(), nullable=False),
            sa.Column("receipt_url", sa.Text(), nullable=True),
            sa.Column(
                "status",
                _payment_status_type(),
                nullable=False,
                server_default=sa.text("'verified'"),
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
            sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
            sa.ForeignKeyConstraint(
                ["contribution_id"], ["contributions.id"], ondelete="CASCADE"
            ),
            sa.PrimaryKeyConstraint("id"),
        )

    existing_indexes = {index["name"] for index in inspector.get_indexes("payments")}
    for name, columns in INDEXES:
        if name not in existing_indexes:
            op.create_index(name, "payments", columns, unique=False)


def downgrade() -> None:
    """Drop the payments table and its enum type."""

    bind = op.get_bind()
    inspector = inspect(bind)

    if "payments" in inspector.get_table_names():
        existing_indexes = {index["name"] for index in inspector.get_indexes("payments")}
        for name, _ in reversed(INDEXES):
            if name in existing_indexes:
                op.drop_index(name, table_name="payments")
        op.drop_table("payments")

    if bind.dialect.name == "postgresql":
        postgresql.ENUM(name=PAYMENT_STATUS_ENUM).drop(bind, checkfirst=True)
