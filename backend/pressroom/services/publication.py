"""Publication Service: persists Draft/Published transitions computed by core/publication.py.

Invariants:
    - Every transition loads the article, applies a pure rule, and commits once
    - The publish moment is captured once per call via the injected clock
    - Unknown article ids raise ResourceNotFoundError; nothing else can fail

Design Decisions:
    - apply_publication_state / publication_state exported for the version ledger,
      which applies publish-date overrides as part of an edit
"""

import logging
from datetime import datetime
from typing import Callable

from sqlalchemy.ext.asyncio import AsyncSession

from pressroom.core import publication
from pressroom.core.domain_types import ArticleId
from pressroom.core.publication import PublicationState
from pressroom.models.article import Article
from pressroom.services.articles import load_article, utcnow

logger = logging.getLogger(__name__)


def publication_state(article: Article) -> PublicationState:
    return PublicationState(
        is_published=article.is_published,
        published_at=article.published_at,
        override_published_at=article.override_published_at,
    )


def apply_publication_state(article: Article, state: PublicationState) -> None:
    article.is_published = state.is_published
    article.published_at = state.published_at
    article.override_published_at = state.override_published_at


class PublicationService:
    """Draft/Published state machine over persisted articles."""

    def __init__(
        self, db: AsyncSession, clock: Callable[[], datetime] = utcnow,
    ):
        self.db = db
        self.clock = clock

    async def publish(self, article_id: ArticleId) -> Article:
        article = await load_article(self.db, article_id)
        was = publication_state(article)
        apply_publication_state(article, publication.publish(was, self.clock()))
        await self.db.commit()
        logger.info(
            f"Article published (was {was.state.value})",
            extra={"article_id": article.id},
        )
        return article

    async def unpublish(self, article_id: ArticleId) -> Article:
        article = await load_article(self.db, article_id)
        apply_publication_state(
            article, publication.unpublish(publication_state(article)),
        )
        await self.db.commit()
        logger.info("Article unpublished", extra={"article_id": article.id})
        return article

    async def set_override_timestamp(
        self, article_id: ArticleId, published_at: datetime,
    ) -> Article:
        """Correct the publish date; live articles move to it immediately."""
        article = await load_article(self.db, article_id)
        apply_publication_state(
            article,
            publication.set_override(publication_state(article), published_at),
        )
        await self.db.commit()
        return article
