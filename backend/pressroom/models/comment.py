"""Comment ORM: reader comments on published articles.

Invariants:
    - Always belongs to an Article (article_id FK, cascade on delete)
    - Blank author_name is stored as "Anonymous" with is_anonymous=True
    - ip_address is kept for moderation and never serialized
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, Boolean, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from pressroom.db.base import Base

ANONYMOUS_AUTHOR = "Anonymous"


class Comment(Base):
    __tablename__ = "article_comments"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    article_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("articles.id", ondelete="CASCADE"), nullable=False,
    )
    author_name: Mapped[str] = mapped_column(
        String(255), nullable=False, default=ANONYMOUS_AUTHOR,
    )
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    is_anonymous: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    ip_address: Mapped[str | None] = mapped_column(String(64), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
