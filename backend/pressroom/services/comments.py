"""Comment Service: reader comments on published articles.

Invariants:
    - Comments attach only to published articles
    - Blank author names become "Anonymous" with is_anonymous=True
    - comment_count moves by atomic UPDATE in the same transaction as the insert
"""

import logging

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from pressroom.core.domain_types import ArticleId
from pressroom.models.article import Article
from pressroom.models.comment import ANONYMOUS_AUTHOR, Comment
from pressroom.schemas.comment import CommentCreate
from pressroom.services.articles import load_article

logger = logging.getLogger(__name__)


class CommentService:

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(
        self, article_id: ArticleId, body: CommentCreate, ip_address: str | None,
    ) -> Comment:
        await load_article(self.db, article_id, published_only=True)
        author = (body.author_name or "").strip()
        anonymous = body.is_anonymous or not author
        comment = Comment(
            article_id=article_id,
            author_name=ANONYMOUS_AUTHOR if anonymous else author,
            email=body.email,
            body=body.body,
            is_anonymous=anonymous,
            ip_address=ip_address,
        )
        self.db.add(comment)
        await self.db.execute(
            update(Article)
            .where(Article.id == article_id)
            .values({
                Article.comment_count: Article.comment_count + 1,
                Article.updated_at: Article.updated_at,
            }),
        )
        await self.db.commit()
        logger.info("Comment created", extra={"article_id": article_id})
        return comment

    async def list_for_article(self, article_id: ArticleId) -> list[Comment]:
        """Oldest first."""
        result = await self.db.execute(
            select(Comment)
            .where(Comment.article_id == article_id)
            .order_by(Comment.created_at.asc()),
        )
        return list(result.scalars().all())
