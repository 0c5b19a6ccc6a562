"""Initial schema: users and tasks

Revision ID: 3f1c2a9b7d10
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f1c2a9b7d10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create app_user and task tables."""
    op.create_table(
        "app_user",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("name", sa.String(length=255), server_default="", nullable=False),
        sa.Column("surname", sa.String(length=255), server_default="", nullable=False),
        sa.Column("patronymic", sa.String(length=255), server_default="", nullable=False),
        sa.Column("address", sa.String(length=500), server_default="", nullable=False),
        sa.Column("passport_serie", sa.Integer(), nullable=False),
        sa.Column("passport_number", sa.Integer(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("passport_serie", "passport_number", name="uq_user_passport"),
    )

    op.create_table(
        "task",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("user_id", sa.String(length=36), nullable=False),
        sa.Column("title", sa.String(length=500), nullable=False),
        sa.Column("description", sa.Text(), server_default="", nullable=False),
        sa.Column("done", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        sa.Column("started_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("done_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("duration", sa.Float(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.CheckConstraint(
            "(done_at IS NULL) = (duration IS NULL)", name="ck_task_done_at_duration"
        ),
        sa.CheckConstraint("done = (done_at IS NOT NULL)", name="ck_task_done_flag"),
        sa.CheckConstraint(
            "done_at IS NULL OR started_at IS NOT NULL",
            name="ck_task_started_before_done",
        ),
        sa.ForeignKeyConstraint(["user_id"], ["app_user.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_task_user_id"), "task", ["user_id"], unique=False)
    op.create_index("ix_task_user_created", "task", ["user_id", "created_at"], unique=False)


def downgrade() -> None:
    """Drop task and app_user tables."""
    op.drop_index("ix_task_user_created", table_name="task")
    op.drop_index(op.f("ix_task_user_id"), table_name="task")
    op.drop_table("task")
    op.drop_table("app_user")
