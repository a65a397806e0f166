"""Create announcements table.

Revision ID: 0004_create_announcements
Revises: 0003_create_payments
Create Date: 2025-01-06 00:15:00.000000
"""

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect


# revision identifiers, used by Alembic.
revision = "0004_create_announcements"
down_revision = "0003_create_payments"
branch_labels = None
depends_on = None


INDEXES = (
    ("idx_announcements_posted_by", ["posted_by"]),
    ("idx_announcements_title", ["title"]),
    ("idx_announcements_created_at", ["created_at"]),
)


def upgrade():
    inspector = inspect(op.get_bind())

    if "announcements" not in inspector.get_table_names():
        op.create_table(
            "announcements",
            sa.Column("id", sa.Uuid(), nullable=False),
            sa.Column("title", sa.Text(), nullable=False),
            sa.Column("body", sa.Text(), nullable=True),
            sa.Column("posted_by", sa.Uuid(), nullable=False),
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
            sa.ForeignKeyConstraint(["posted_by"], ["users.id"], ondelete="CASCADE"),
            sa.PrimaryKeyConstraint("id"),
        )

    existing_indexes = {index["name"] for index in inspector.get_indexes("announcements")}
    for name, columns in INDEXES:
        if name not in existing_indexes:
            op.create_index(name, "announcements", columns, unique=False)


def downgrade():
    inspector = inspect(op.get_bind())
    if "announcements" not in inspector.get_table_names():
        return

    existing_indexes = {index["name"] for index in inspector.get_indexes("announcements")}
    for name, _ in reversed(INDEXES):
        if name in existing_indexes:
            op.drop_index(name, table_name="announcements")
    op.drop_table("announcements")
