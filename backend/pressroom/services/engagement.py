"""Engagement Deduplicator: at most one counted view and one like per actor per article.

Invariants:
    - The fact row is written with INSERT ... ON CONFLICT DO NOTHING against
      UNIQUE (article_id, actor_key); only a written row moves a counter
    - Counters move by atomic UPDATE ... SET col = col + delta, never in app memory
    - like/unlike require AuthenticatedActor; viewing accepts AnonymousActor
    - like_count never goes below 0, even when out of sync with the fact table
    - Counter updates leave Article.updated_at untouched (engagement is not an edit)

Design Decisions:
    - Fact insert and counter delta share one transaction: a failed increment
      rolls the fact back, so a retrying client is counted again rather than lost
    - like/unlike target only published articles (drafts are invisible to readers)
"""

import logging
from dataclasses import dataclass

from sqlalchemy import case, delete, exists, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from pressroom.core.domain_types import (
    ActorIdentity, AnonymousActor, ArticleId, AuthenticatedActor, RequestContext,
)
from pressroom.core.errors import (
    AuthenticationRequiredError, DuplicateEngagementError, ErrorContext,
    ResourceNotFoundError,
)
from pressroom.infrastructure.database import insert_ignoring_conflicts
from pressroom.models.article import Article
from pressroom.models.engagement import ArticleLike, ArticleView
from pressroom.services.articles import load_article

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewResult:
    counted: bool
    view_count: int


def _fact_values(
    article_id: ArticleId, actor: ActorIdentity, context: RequestContext,
) -> dict:
    values = {
        "article_id": article_id,
        "actor_key": actor.actor_key,
        "ip_address": context.client_address,
        "user_agent": context.user_agent,
    }
    if isinstance(actor, AuthenticatedActor):
        values["user_id"] = actor.user_id
    else:
        values["ip_address"] = actor.address
    return values


def _require_user(actor: ActorIdentity, action: str, article_id: ArticleId) -> AuthenticatedActor:
    if isinstance(actor, AnonymousActor):
        raise AuthenticationRequiredError(
            action, ErrorContext(article_id=str(article_id)),
        )
    return actor


class EngagementService:
    """View/like facts and their running counters."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def record_view(
        self,
        article_id: ArticleId,
        actor: ActorIdentity,
        context: RequestContext | None = None,
    ) -> ViewResult:
        """Count the first view per actor; later views are no-ops."""
        article = await load_article(self.db, article_id)
        written = await insert_ignoring_conflicts(
            self.db, ArticleView,
            _fact_values(article_id, actor, context or RequestContext()),
        )
        if not written:
            return ViewResult(counted=False, view_count=article.view_count)

        view_count = await self._add_to_counter(
            article_id, Article.view_count, Article.view_count + 1,
        )
        await self.db.commit()
        logger.debug(
            "View counted",
            extra={"article_id": article_id, "actor_kind": type(actor).__name__},
        )
        return ViewResult(counted=True, view_count=view_count)

    async def like(
        self,
        article_id: ArticleId,
        actor: ActorIdentity,
        context: RequestContext | None = None,
    ) -> int:
        """Add the actor's like. Returns the new like count."""
        user = _require_user(actor, "like", article_id)
        await load_article(self.db, article_id, published_only=True)
        written = await insert_ignoring_conflicts(
            self.db, ArticleLike,
            _fact_values(article_id, user, context or RequestContext()),
        )
        if not written:
            raise DuplicateEngagementError(
                "liked", ErrorContext(article_id=str(article_id)),
            )

        like_count = await self._add_to_counter(
            article_id, Article.like_count, Article.like_count + 1,
        )
        await self.db.commit()
        logger.info("Article liked", extra={"article_id": article_id})
        return like_count

    async def unlike(self, article_id: ArticleId, actor: ActorIdentity) -> int:
        """Remove the actor's like. Returns the new like count."""
        user = _require_user(actor, "unlike", article_id)
        await load_article(self.db, article_id, published_only=True)
        result = await self.db.execute(
            delete(ArticleLike)
            .where(ArticleLike.article_id == article_id)
            .where(ArticleLike.actor_key == user.actor_key),
        )
        if result.rowcount == 0:
            raise ResourceNotFoundError(
                "Like", user.actor_key, ErrorContext(article_id=str(article_id)),
            )

        like_count = await self._add_to_counter(
            article_id,
            Article.like_count,
            case((Article.like_count > 0, Article.like_count - 1), else_=0),
        )
        await self.db.commit()
        logger.info("Article unliked", extra={"article_id": article_id})
        return like_count

    async def like_status(self, article_id: ArticleId, actor: ActorIdentity) -> bool:
        """Whether the actor currently likes the article. Never raises."""
        if not isinstance(actor, AuthenticatedActor):
            return False
        result = await self.db.execute(
            select(
                exists()
                .where(ArticleLike.article_id == article_id)
                .where(ArticleLike.actor_key == actor.actor_key),
            ),
        )
        return bool(result.scalar())

    async def _add_to_counter(self, article_id: ArticleId, column, expression) -> int:
        result = await self.db.execute(
            update(Article)
            .where(Article.id == article_id)
            .values({column: expression, Article.updated_at: Article.updated_at})
            .returning(column),
        )
        return result.scalar_one()
