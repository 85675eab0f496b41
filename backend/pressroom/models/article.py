"""Article ORM: the live, publicly visible unit of content.

Invariants:
    - id is UUID primary key (client-side default)
    - is_published == (published_at is not None); maintained by services/publication.py
    - preview is always summarize(body); only written alongside body
    - like_count / comment_count / view_count change only through atomic
      UPDATE ... SET col = col + delta statements, never read-modify-write

Design Decisions:
    - JSON column for images: ordered list of references stored as-is
    - override_published_at kept separate from published_at so unpublish can clear
      the effective timestamp without losing the admin's chosen date
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, Boolean, DateTime, JSON, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from pressroom.core.domain_types import DEFAULT_LANGUAGE
from pressroom.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Article(Base):
    """Article aggregate root, owns versions, engagement facts and comments."""
    __tablename__ = "articles"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False, default="")
    preview: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    language: Mapped[str] = mapped_column(
        String(50), nullable=False, default=DEFAULT_LANGUAGE,
    )
    images: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    # Publication
    is_published: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    published_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    override_published_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )

    # Counters
    like_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    comment_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    view_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow,
    )
