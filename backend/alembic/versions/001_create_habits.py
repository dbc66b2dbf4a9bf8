"""Initial schema: habits table.

Revision ID: 001_create_habits
Revises: None
Create Date: 2025-01-01

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_create_habits"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "habits",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("owner_id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.String(1000), nullable=True),
        sa.Column("type", sa.String(50), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("completed", sa.Boolean, nullable=False, server_default=sa.false()),
    )
    op.create_index("ix_habits_owner_id", "habits", ["owner_id"])


def downgrade() -> None:
    op.drop_index("ix_habits_owner_id", table_name="habits")
    op.drop_table("habits")
