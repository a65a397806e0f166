"""Create events table.

Revision ID: 0005_create_events
Revises: 0004_create_announcements
Create Date: 2025-01-06 00:20:00.000000
"""

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect


# revision identifiers, used by Alembic.
revision = "0005_create_events"
down_revision = "0004_create_announcements"
branch_labels = None
depends_on = None


INDEXES = (
    ("idx_events_posted_by", ["posted_by"]),
    ("idx_events_title", ["title"]),
    ("idx_events_starts_at", ["starts_at"]),
    ("idx_events_created_at", ["created_at"]),
)


def upgrade():
    inspector = inspect(op.get_bind())

    if "events" not in inspector.get_table_names():
        op.create_table(
            "events",
            sa.Column("id", sa.Uuid(), nullable=False),
            sa.Column("title", sa.Text(), nullable=False),
            sa.Column("starts_at", sa.DateTime(timezone=True), nullable=False),
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

    existing_indexes = {index["name"] for index in inspector.get_indexes("events")}
    for name, columns in INDEXES:
        if name not in existing_indexes:
            op.create_index(name, "events", columns, unique=False)


def downgrade():
    inspector = inspect(op.get_bind())
    if "events" not in inspector.get_table_names():
        return

    existing_indexes = {index["name"] for index in inspector.get_indexes("events")}
    for name, _ in reversed(INDEXES):
        if name in existing_indexes:
            op.drop_index(name, table_name="events")
    op.drop_table("events")
