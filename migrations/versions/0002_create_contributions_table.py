"""Create contributions table.

Revision ID: 0002_create_contributions
Revises: 0001_create_users
Create Date: 2025-01-06 00:05:00.000000
"""

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect

from models.types import money_type


# revision identifiers, used by Alembic.
revision = "0002_create_contributions"
down_revision = "0001_create_users"
branch_labels = None
depends_on = None


INDEXES = (
    ("idx_contributions_created_by", ["created_by"]),
    ("idx_contributions_title", ["title"]),
    ("idx_contributions_due_date", ["due_date"]),
    ("idx_contributions_created_at", ["created_at"]),
)


def upgrade():
    inspector = inspect(op.get_bind())

    if "contributions" not in inspector.get_table_names():
        op.create_table(
            "contributions",
            sa.Column("id", sa.Uuid(), nullable=False),
            sa.Column("title", sa.Text(), nullable=False),
            sa.Column("description", sa.Text(), nullable=True),
            sa.Column("amount", money_type(), nullable=True),
            sa.Column("due_date", sa.Date(), nullable=False),
            sa.Column("created_by", sa.Uuid(), nullable=False),
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
            sa.ForeignKeyConstraint(["created_by"], ["users.id"], ondelete="CASCADE"),
            sa.PrimaryKeyConstraint("id"),
        )

    existing_indexes = {index["name"] for index in inspector.get_indexes("contributions")}
    for name, columns in INDEXES:
        if name not in existing_indexes:
            op.create_index(name, "contributions", columns, unique=False)


def downgrade():
    inspector = inspect(op.get_bind())
    if "contributions" not in inspector.get_table_names():
        return

    existing_indexes = {index["name"] for index in inspector.get_indexes("contributions")}
    for name, _ in reversed(INDEXES):
        if name in existing_indexes:
            op.drop_index(name, table_name="contributions")
    op.drop_table("contributions")
