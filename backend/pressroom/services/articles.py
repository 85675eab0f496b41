"""Article Catalogue: create, read, list and delete articles.

Invariants:
    - New articles start as Draft with preview = summarize(body)
    - Public reads never see drafts (ResourceNotFoundError, same as unknown id)
    - Listing order always ends with COALESCE(published_at, created_at) DESC
    - Deletion removes versions, comments, likes and views in the same transaction

Design Decisions:
    - load_article is the single lookup used by every service (one NotFound shape)
    - Child rows deleted explicitly before the article: correct even on SQLite
      connections where foreign-key cascades are not enforced
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from pressroom.core.domain_types import ArticleId, ArticleSort, DEFAULT_LANGUAGE
from pressroom.core.errors import (
    ErrorContext, ResourceNotFoundError, ValidationFailedError,
)
from pressroom.core.summarize import summarize
from pressroom.models.article import Article
from pressroom.models.article_version import ArticleVersion
from pressroom.models.comment import Comment
from pressroom.models.engagement import ArticleLike, ArticleView
from pressroom.schemas.article import ArticleCreate, ArticleListQuery

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


async def load_article(
    db: AsyncSession, article_id: ArticleId, published_only: bool = False,
) -> Article:
    """Fetch an article or raise ResourceNotFoundError."""
    query = select(Article).where(Article.id == article_id)
    if published_only:
        query = query.where(Article.is_published.is_(True))
    result = await db.execute(query)
    article = result.scalar_one_or_none()
    if article is None:
        raise ResourceNotFoundError(
            "Article", str(article_id),
            ErrorContext(article_id=str(article_id)),
        )
    return article


@dataclass
class ArticlePage:
    items: list[Article]
    page: int
    limit: int
    total: int

    @property
    def total_pages(self) -> int:
        return (self.total + self.limit - 1) // self.limit


_SORT_COLUMNS = {
    ArticleSort.MOST_COMMENTED: Article.comment_count,
    ArticleSort.MOST_LIKED: Article.like_count,
    ArticleSort.MOST_VIEWED: Article.view_count,
}


class ArticleCatalog:
    """Article CRUD outside the edit/publish/engagement paths."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, draft: ArticleCreate) -> Article:
        """Create a Draft article. Title and body are required."""
        title = (draft.title or "").strip()
        body = draft.body or ""
        if not title:
            raise ValidationFailedError("title is required", "title")
        if not body.strip():
            raise ValidationFailedError("body is required", "body")

        article = Article(
            title=title,
            body=body,
            preview=summarize(body),
            language=draft.language or DEFAULT_LANGUAGE,
            images=list(draft.images or []),
            is_published=False,
            override_published_at=draft.custom_date,
        )
        self.db.add(article)
        await self.db.commit()
        logger.info("Article created", extra={"article_id": article.id})
        return article

    async def get(
        self, article_id: ArticleId, include_drafts: bool = False,
    ) -> Article:
        return await load_article(
            self.db, article_id, published_only=not include_drafts,
        )

    async def list_page(self, query: ArticleListQuery) -> ArticlePage:
        """Paginated listing with optional published/language filters."""
        stmt = select(Article)
        count_stmt = select(func.count()).select_from(Article)
        if query.published_only:
            stmt = stmt.where(Article.is_published.is_(True))
            count_stmt = count_stmt.where(Article.is_published.is_(True))
        if query.language:
            stmt = stmt.where(Article.language == query.language)
            count_stmt = count_stmt.where(Article.language == query.language)

        recency = func.coalesce(Article.published_at, Article.created_at)
        sort_column = _SORT_COLUMNS.get(query.sort_by)
        if sort_column is not None:
            stmt = stmt.order_by(sort_column.desc(), recency.desc())
        else:
            stmt = stmt.order_by(recency.desc())

        offset = (query.page - 1) * query.limit
        total = (await self.db.execute(count_stmt)).scalar_one()
        result = await self.db.execute(stmt.limit(query.limit).offset(offset))
        return ArticlePage(
            items=list(result.scalars().all()),
            page=query.page,
            limit=query.limit,
            total=total,
        )

    async def delete(self, article_id: ArticleId) -> None:
        """Delete an article and everything it owns, in one transaction."""
        await load_article(self.db, article_id)
        for model in (ArticleVersion, Comment, ArticleLike, ArticleView):
            await self.db.execute(
                delete(model).where(model.article_id == article_id),
            )
        await self.db.execute(delete(Article).where(Article.id == article_id))
        await self.db.commit()
        logger.info("Article deleted", extra={"article_id": article_id})
