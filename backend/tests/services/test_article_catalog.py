"""Article Catalogue: creation, listing order, pagination and cascading delete."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest
from sqlalchemy import func, select

from pressroom.core.domain_types import AnonymousActor, ArticleSort, AuthenticatedActor
from pressroom.core.errors import ResourceNotFoundError, ValidationFailedError
from pressroom.models.article import Article
from pressroom.models.article_version import ArticleVersion
from pressroom.models.comment import Comment
from pressroom.models.engagement import ArticleLike, ArticleView
from pressroom.schemas.article import ArticleCreate, ArticleEdit, ArticleListQuery
from pressroom.schemas.comment import CommentCreate
from pressroom.services.articles import ArticleCatalog
from pressroom.services.comments import CommentService
from pressroom.services.engagement import EngagementService
from pressroom.services.version_ledger import VersionLedger


def _at(day: int) -> datetime:
    return datetime(2026, 1, day, 12, 0, tzinfo=timezone.utc)


class TestCreate:

    async def test_new_article_is_draft_with_preview(self, test_db):
        body = "word " * 60
        article = await ArticleCatalog(test_db).create(
            ArticleCreate(title="  Spaced  ", body=body),
        )
        assert article.title == "Spaced"
        assert article.is_published is False
        assert article.published_at is None
        assert article.language == "english"
        assert article.preview == body[:200] + "..."
        assert article.like_count == article.view_count == article.comment_count == 0

    async def test_custom_date_recorded_as_override(self, test_db):
        article = await ArticleCatalog(test_db).create(
            ArticleCreate(title="t", body="b", custom_date=_at(3)),
        )
        assert article.override_published_at == _at(3)
        assert article.published_at is None

    async def test_blank_body_rejected(self, test_db):
        draft = ArticleCreate.model_construct(title="Title", body="   ", images=[])
        with pytest.raises(ValidationFailedError) as exc:
            await ArticleCatalog(test_db).create(draft)
        assert exc.value.field == "body"

    async def test_blank_title_rejected(self, test_db):
        draft = ArticleCreate.model_construct(title="", body="Body", images=[])
        with pytest.raises(ValidationFailedError) as exc:
            await ArticleCatalog(test_db).create(draft)
        assert exc.value.field == "title"


class TestGet:

    async def test_draft_hidden_from_public_reads(self, test_db, draft_article):
        catalog = ArticleCatalog(test_db)
        with pytest.raises(ResourceNotFoundError):
            await catalog.get(draft_article.id)
        found = await catalog.get(draft_article.id, include_drafts=True)
        assert found.id == draft_article.id

    async def test_unknown_id(self, test_db):
        with pytest.raises(ResourceNotFoundError):
            await ArticleCatalog(test_db).get(uuid4(), include_drafts=True)


class TestListPage:

    async def test_recent_order_and_draft_filter(self, test_db, make_article):
        old = await make_article(title="old", is_published=True, published_at=_at(1))
        new = await make_article(title="new", is_published=True, published_at=_at(9))
        await make_article(title="draft")

        page = await ArticleCatalog(test_db).list_page(ArticleListQuery())
        assert [a.id for a in page.items] == [new.id, old.id]
        assert page.total == 2

    async def test_admin_listing_includes_drafts(self, test_db, draft_article, published_article):
        page = await ArticleCatalog(test_db).list_page(
            ArticleListQuery(published_only=False),
        )
        assert {a.id for a in page.items} == {draft_article.id, published_article.id}

    async def test_most_liked_with_recency_tiebreak(self, test_db, make_article):
        a = await make_article(title="a", is_published=True, published_at=_at(1), like_count=5)
        b = await make_article(title="b", is_published=True, published_at=_at(2), like_count=9)
        c = await make_article(title="c", is_published=True, published_at=_at(3), like_count=5)

        page = await ArticleCatalog(test_db).list_page(
            ArticleListQuery(sort_by=ArticleSort.MOST_LIKED),
        )
        assert [x.id for x in page.items] == [b.id, c.id, a.id]

    async def test_most_viewed_and_most_commented(self, test_db, make_article):
        a = await make_article(title="a", is_published=True, published_at=_at(1), view_count=3, comment_count=0)
        b = await make_article(title="b", is_published=True, published_at=_at(2), view_count=1, comment_count=4)
        catalog = ArticleCatalog(test_db)

        viewed = await catalog.list_page(ArticleListQuery(sort_by=ArticleSort.MOST_VIEWED))
        commented = await catalog.list_page(ArticleListQuery(sort_by=ArticleSort.MOST_COMMENTED))
        assert [x.id for x in viewed.items] == [a.id, b.id]
        assert [x.id for x in commented.items] == [b.id, a.id]

    async def test_language_filter(self, test_db, make_article):
        await make_article(title="en", is_published=True, published_at=_at(1))
        es = await make_article(title="es", language="spanish", is_published=True, published_at=_at(2))
        page = await ArticleCatalog(test_db).list_page(ArticleListQuery(language="spanish"))
        assert [a.id for a in page.items] == [es.id]

    async def test_pagination(self, test_db, make_article):
        for day in range(1, 6):
            await make_article(title=f"p{day}", is_published=True, published_at=_at(day))

        page = await ArticleCatalog(test_db).list_page(ArticleListQuery(page=2, limit=2))
        assert [a.title for a in page.items] == ["p3", "p2"]
        assert page.total == 5
        assert page.total_pages == 3

    async def test_empty_page_beyond_end(self, test_db, published_article):
        page = await ArticleCatalog(test_db).list_page(ArticleListQuery(page=4, limit=10))
        assert page.items == []
        assert page.total == 1


class TestDelete:

    async def test_delete_removes_everything_owned(self, test_db, published_article):
        article_id = published_article.id
        await VersionLedger(test_db).propose_edit(article_id, ArticleEdit(title="v2"))
        await CommentService(test_db).create(article_id, CommentCreate(body="nice"), "10.0.0.1")
        engagement = EngagementService(test_db)
        await engagement.like(article_id, AuthenticatedActor("alice"))
        await engagement.record_view(article_id, AnonymousActor("10.0.0.1"))

        await ArticleCatalog(test_db).delete(article_id)

        for model in (ArticleVersion, Comment, ArticleLike, ArticleView):
            count = (await test_db.execute(
                select(func.count()).select_from(model).where(model.article_id == article_id),
            )).scalar_one()
            assert count == 0, model.__tablename__
        assert (await test_db.execute(select(func.count()).select_from(Article))).scalar_one() == 0

    async def test_delete_leaves_other_articles_alone(self, test_db, draft_article, published_article):
        await ArticleCatalog(test_db).delete(draft_article.id)
        remaining = (await test_db.execute(select(Article.id))).scalars().all()
        assert remaining == [published_article.id]

    async def test_delete_unknown(self, test_db):
        with pytest.raises(ResourceNotFoundError):
            await ArticleCatalog(test_db).delete(uuid4())
