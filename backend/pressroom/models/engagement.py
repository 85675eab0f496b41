"""Engagement Fact ORM: View and Like records used for per-actor dedup.

Invariants:
    - UNIQUE (article_id, actor_key) on each table: at most one View and one Like
      per actor per article, enforced by the store across processes
    - actor_key is ActorIdentity.actor_key ("user:<id>" or "ip:<address>")
    - Views are never deleted by normal operation; Likes are deleted by unlike

Design Decisions:
    - user_id / ip_address kept alongside actor_key for moderation queries
    - Shared mixin: both fact tables carry identical columns
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from pressroom.db.base import Base


class _EngagementColumns:
    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    article_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("articles.id", ondelete="CASCADE"), nullable=False,
    )
    actor_key: Mapped[str] = mapped_column(String(255), nullable=False)
    user_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    ip_address: Mapped[str | None] = mapped_column(String(64), nullable=True)
    user_agent: Mapped[str | None] = mapped_column(String(500), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )


class ArticleView(_EngagementColumns, Base):
    """One counted view per (article, actor)."""
    __tablename__ = "article_views"
    __table_args__ = (
        UniqueConstraint("article_id", "actor_key", name="uq_article_views_actor"),
    )


class ArticleLike(_EngagementColumns, Base):
    """One like per (article, authenticated actor)."""
    __tablename__ = "article_likes"
    __table_args__ = (
        UniqueConstraint("article_id", "actor_key", name="uq_article_likes_actor"),
    )
