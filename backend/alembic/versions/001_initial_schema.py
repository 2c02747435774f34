"""Initial schema - adopters and dogs.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

Dogs keep existing when their adopter is deleted: adopter_id is ON DELETE SET NULL.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "adopters",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(128), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "dogs",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(128), nullable=False),
        sa.Column("breed", sa.String(128), nullable=True),
        sa.Column(
            "adopter_id", sa.Integer,
            sa.ForeignKey("adopters.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_dogs_adopter_id", "dogs", ["adopter_id"])


def downgrade() -> None:
    op.drop_index("ix_dogs_adopter_id", table_name="dogs")
    op.drop_table("dogs")
    op.drop_table("adopters")
