"""Engagement Deduplicator: views and likes counted at most once per actor.

Invariants:
    - view_count == number of distinct actors that viewed
    - like_count tracks like rows and never goes below zero
    - anonymous actors can view but cannot like
"""

from uuid import uuid4

import pytest
from sqlalchemy import func, select

from pressroom.core.domain_types import (
    AnonymousActor, AuthenticatedActor, RequestContext,
)
from pressroom.core.errors import (
    AuthenticationRequiredError, DuplicateEngagementError, ResourceNotFoundError,
)
from pressroom.models.article import Article
from pressroom.models.engagement import ArticleLike, ArticleView
from pressroom.services.engagement import EngagementService

ALICE = AuthenticatedActor(user_id="alice")
BOB = AuthenticatedActor(user_id="bob")


async def _count_rows(db, model, article_id):
    result = await db.execute(
        select(func.count()).select_from(model).where(model.article_id == article_id),
    )
    return result.scalar_one()


class TestRecordView:

    async def test_first_view_counts_once(self, test_db, published_article):
        service = EngagementService(test_db)
        first = await service.record_view(published_article.id, ALICE)
        second = await service.record_view(published_article.id, ALICE)

        assert first.counted is True
        assert first.view_count == 1
        assert second.counted is False
        assert second.view_count == 1
        assert await _count_rows(test_db, ArticleView, published_article.id) == 1

    async def test_distinct_anonymous_addresses_count_separately(self, test_db, published_article):
        service = EngagementService(test_db)
        await service.record_view(published_article.id, AnonymousActor("10.0.0.1"))
        result = await service.record_view(published_article.id, AnonymousActor("10.0.0.2"))
        assert result.view_count == 2

    async def test_user_and_address_are_distinct_actors(self, test_db, published_article):
        service = EngagementService(test_db)
        await service.record_view(published_article.id, AuthenticatedActor("10.0.0.1"))
        result = await service.record_view(published_article.id, AnonymousActor("10.0.0.1"))
        assert result.counted is True
        assert result.view_count == 2

    async def test_dedup_holds_across_sessions(self, test_session_factory, published_article):
        async with test_session_factory() as first:
            await EngagementService(first).record_view(published_article.id, BOB)
        async with test_session_factory() as second:
            result = await EngagementService(second).record_view(published_article.id, BOB)
        assert result.counted is False
        assert result.view_count == 1

    async def test_view_stores_request_signals(self, test_db, published_article):
        context = RequestContext(client_address="192.168.1.9", user_agent="pytest-agent")
        await EngagementService(test_db).record_view(published_article.id, ALICE, context)
        row = (await test_db.execute(select(ArticleView))).scalar_one()
        assert row.actor_key == "user:alice"
        assert row.user_id == "alice"
        assert row.ip_address == "192.168.1.9"
        assert row.user_agent == "pytest-agent"

    async def test_view_does_not_touch_updated_at(self, test_db, published_article):
        before = published_article.updated_at
        await EngagementService(test_db).record_view(published_article.id, ALICE)
        article = await test_db.get(Article, published_article.id, populate_existing=True)
        assert article.updated_at.replace(tzinfo=None) == before.replace(tzinfo=None)

    async def test_unknown_article_not_found(self, test_db):
        with pytest.raises(ResourceNotFoundError):
            await EngagementService(test_db).record_view(uuid4(), ALICE)


class TestLikes:

    async def test_like_unlike_like_sequence(self, test_db, published_article):
        service = EngagementService(test_db)
        assert published_article.like_count == 0
        assert await service.like(published_article.id, ALICE) == 1
        assert await service.unlike(published_article.id, ALICE) == 0
        assert await service.like(published_article.id, ALICE) == 1
        assert await _count_rows(test_db, ArticleLike, published_article.id) == 1

    async def test_second_like_conflicts(self, test_db, published_article):
        article_id = published_article.id
        service = EngagementService(test_db)
        await service.like(article_id, ALICE)
        with pytest.raises(DuplicateEngagementError):
            await service.like(article_id, ALICE)
        await test_db.rollback()

        article = await test_db.get(Article, article_id, populate_existing=True)
        assert article.like_count == 1

    async def test_two_users_like(self, test_db, published_article):
        service = EngagementService(test_db)
        await service.like(published_article.id, ALICE)
        assert await service.like(published_article.id, BOB) == 2

    @pytest.mark.parametrize("action", ["like", "unlike"])
    async def test_anonymous_cannot_like_or_unlike(self, test_db, published_article, action):
        service = EngagementService(test_db)
        with pytest.raises(AuthenticationRequiredError):
            await getattr(service, action)(published_article.id, AnonymousActor("10.0.0.1"))
        assert await _count_rows(test_db, ArticleLike, published_article.id) == 0

    async def test_unlike_without_like_not_found(self, test_db, published_article):
        with pytest.raises(ResourceNotFoundError) as exc:
            await EngagementService(test_db).unlike(published_article.id, ALICE)
        assert exc.value.resource_type == "Like"

    async def test_like_count_floors_at_zero(self, test_db, published_article):
        test_db.add(ArticleLike(
            article_id=published_article.id, actor_key=ALICE.actor_key, user_id="alice",
        ))
        await test_db.commit()

        # counter is 0 although a like row exists
        assert await EngagementService(test_db).unlike(published_article.id, ALICE) == 0

    async def test_draft_cannot_be_liked(self, test_db, draft_article):
        with pytest.raises(ResourceNotFoundError):
            await EngagementService(test_db).like(draft_article.id, ALICE)


class TestLikeStatus:

    async def test_reflects_current_like(self, test_db, published_article):
        service = EngagementService(test_db)
        assert await service.like_status(published_article.id, ALICE) is False
        await service.like(published_article.id, ALICE)
        assert await service.like_status(published_article.id, ALICE) is True
        assert await service.like_status(published_article.id, BOB) is False

    async def test_anonymous_is_never_liked(self, test_db, published_article):
        status = await EngagementService(test_db).like_status(
            published_article.id, AnonymousActor("10.0.0.1"),
        )
        assert status is False

    async def test_unknown_article_is_false(self, test_db):
        assert await EngagementService(test_db).like_status(uuid4(), ALICE) is False
