"""Add article_views and article_likes with per-actor uniqueness.

Revision ID: 002_engagement_facts
Revises: 001_initial
Create Date: 2026-10-19

UNIQUE (article_id, actor_key) on both tables. Counters move only when
INSERT ... ON CONFLICT DO NOTHING wrote a row.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "002_engagement_facts"
down_revision: Union[str, None] = "001_initial"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


# (table, unique constraint name)
_FACT_TABLES = [
    ("article_views", "uq_article_views_actor"),
    ("article_likes", "uq_article_likes_actor"),
]


def upgrade() -> None:
    for table, constraint in _FACT_TABLES:
        op.create_table(
            table,
            sa.Column("id", sa.Uuid, primary_key=True),
            sa.Column(
                "article_id", sa.Uuid,
                sa.ForeignKey("articles.id", ondelete="CASCADE"), nullable=False,
            ),
            sa.Column("actor_key", sa.String(255), nullable=False),
            sa.Column("user_id", sa.String(64), nullable=True),
            sa.Column("ip_address", sa.String(64), nullable=True),
            sa.Column("user_agent", sa.String(500), nullable=True),
            sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
            sa.UniqueConstraint("article_id", "actor_key", name=constraint),
        )


def downgrade() -> None:
    for table, _ in reversed(_FACT_TABLES):
        op.drop_table(table)
