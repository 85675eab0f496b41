"""ArticleVersion ORM: snapshot of an Article's editable fields.

Invariants:
    - Always belongs to an Article (article_id FK, cascade on delete)
    - Content columns are written once; the only later change is is_pending True -> False
    - is_pending=True: proposed edit; is_pending=False: applied or historical snapshot
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, Boolean, DateTime, JSON, ForeignKey, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from pressroom.db.base import Base


class ArticleVersion(Base):
    """Version ledger entry."""
    __tablename__ = "article_versions"
    __table_args__ = (
        Index("ix_article_versions_article_created", "article_id", "created_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    article_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("articles.id", ondelete="CASCADE"), nullable=False,
    )
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    language: Mapped[str] = mapped_column(String(50), nullable=False)
    images: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    is_pending: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
