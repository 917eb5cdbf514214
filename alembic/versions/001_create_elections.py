"""electionsテーブルを作成.

Revision ID: 001
Revises:
Create Date: 2026-10-19

候補者と投票済み投票者はJSON列として選挙と同じ行に保存する。
version列は楽観的ロックに使う。
"""

import sqlalchemy as sa

from alembic import op


revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Apply migration: create elections table."""
    op.create_table(
        "elections",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("start_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("status", sa.String(16), nullable=False, server_default="Pending"),
        sa.Column("eligible_voters", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("total_votes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("candidates", sa.JSON(), nullable=False),
        sa.Column("voters", sa.JSON(), nullable=False),
        sa.Column("created_by", sa.String(64), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("version", sa.Integer(), nullable=False, server_default="1"),
        sa.CheckConstraint("start_at < end_at", name="ck_elections_start_before_end"),
        sa.CheckConstraint(
            "status IN ('Pending', 'Ongoing', 'Completed')",
            name="ck_elections_status",
        ),
    )
    op.create_index("ix_elections_created_at", "elections", ["created_at"])


def downgrade() -> None:
    """Rollback migration: drop elections table."""
    op.drop_index("ix_elections_created_at", table_name="elections")
    op.drop_table("elections")
