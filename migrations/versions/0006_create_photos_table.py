"""Create photos table.

Revision ID: 0006_create_photos
Revises: 0005_create_events
Create Date: 2025-01-06 00:25:00.000000
"""

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect


# revision identifiers, used by Alembic.
revision = "0006_create_photos"
down_revision = "0005_create_events"
branch_labels = None
depends_on = None


INDEXES = (
    ("idx_photos_posted_by", ["posted_by"]),
    ("idx_photos_caption", ["caption"]),
    ("idx_photos_event_id", ["event_id"]),
    ("idx_photos_created_at", ["created_at"]),
)


def upgrade():
    inspector = inspect(op.get_bind())

    if "photos" not in inspector.get_table_names():
        op.create_table(
            "photos",
            sa.Column("id", sa.Uuid(), nullable=False),
            sa.Column("caption", sa.Text(), nullable=True),
            sa.Column("url", sa.Text(), nullable=True),
            sa.Column("event_id", sa.Uuid(), nullable=True),
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
            sa.ForeignKeyConstraint(["event_id"], ["events.id"], ondelete="CASCADE"),
            sa.ForeignKeyConstraint(["posted_by"], ["users.id"], ondelete="CASCADE"),
            sa.PrimaryKeyConstraint("id"),
        )

    existing_indexes = {index["name"] for index in inspector.get_indexes("photos")}
    for name, columns in INDEXES:
        if name not in existing_indexes:
            op.create_index(name, "photos", columns, unique=False)


def downgrade():
    inspector = inspect(op.get_bind())
    if "photos" not in inspector.get_table_names():
        return

    existing_indexes = {index["name"] for index in inspector.get_indexes("photos")}
    for name, _ in reversed(INDEXES):
        if name in existing_indexes:
            op.drop_index(name, table_name="photos")
    op.drop_table("photos")
