"""Initial schema: articles, article_versions, article_comments.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

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
        "articles",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("body", sa.Text, nullable=False, server_default=""),
        sa.Column("preview", sa.String(500), nullable=False, server_default=""),
        sa.Column("language", sa.String(50), nullable=False, server_default="english"),
        sa.Column("images", sa.JSON, nullable=False),
        sa.Column("is_published", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("published_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("override_published_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("like_count", sa.Integer, nullable=False, server_default="0"),
        sa.Column("comment_count", sa.Integer, nullable=False, server_default="0"),
        sa.Column("view_count", sa.Integer, nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "article_versions",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column(
            "article_id", sa.Uuid,
            sa.ForeignKey("articles.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("body", sa.Text, nullable=False),
        sa.Column("language", sa.String(50), nullable=False),
        sa.Column("images", sa.JSON, nullable=False),
        sa.Column("is_pending", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index(
        "ix_article_versions_article_created",
        "article_versions",
        ["article_id", "created_at"],
    )

    op.create_table(
        "article_comments",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column(
            "article_id", sa.Uuid,
            sa.ForeignKey("articles.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("author_name", sa.String(255), nullable=False, server_default="Anonymous"),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("body", sa.Text, nullable=False),
        sa.Column("is_anonymous", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("ip_address", sa.String(64), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )


def downgrade() -> None:
    op.drop_table("article_comments")
    op.drop_index("ix_article_versions_article_created", table_name="article_versions")
    op.drop_table("article_versions")
    op.drop_table("articles")
