"""Comment Service: anonymity rules and comment_count bookkeeping."""

from uuid import uuid4

import pytest

from pressroom.core.errors import ResourceNotFoundError
from pressroom.models.article import Article
from pressroom.schemas.comment import CommentCreate
from pressroom.services.comments import CommentService


async def test_named_comment(test_db, published_article):
    comment = await CommentService(test_db).create(
        published_article.id,
        CommentCreate(author_name="  Ana ", email="ana@example.com", body="Great read"),
        "10.0.0.5",
    )
    assert comment.author_name == "Ana"
    assert comment.is_anonymous is False
    assert comment.ip_address == "10.0.0.5"


@pytest.mark.parametrize("payload", [
    {"body": "hi"},
    {"author_name": "   ", "body": "hi"},
    {"author_name": "Ana", "body": "hi", "is_anonymous": True},
])
async def test_anonymous_comment(test_db, published_article, payload):
    comment = await CommentService(test_db).create(
        published_article.id, CommentCreate(**payload), None,
    )
    assert comment.author_name == "Anonymous"
    assert comment.is_anonymous is True


async def test_comment_count_increments(test_db, published_article):
    service = CommentService(test_db)
    await service.create(published_article.id, CommentCreate(body="one"), None)
    await service.create(published_article.id, CommentCreate(body="two"), None)
    article = await test_db.get(Article, published_article.id, populate_existing=True)
    assert article.comment_count == 2


async def test_list_oldest_first(test_db, published_article):
    service = CommentService(test_db)
    await service.create(published_article.id, CommentCreate(body="first"), None)
    await service.create(published_article.id, CommentCreate(body="second"), None)
    comments = await service.list_for_article(published_article.id)
    assert [c.body for c in comments] == ["first", "second"]


async def test_draft_rejects_comments(test_db, draft_article):
    with pytest.raises(ResourceNotFoundError):
        await CommentService(test_db).create(
            draft_article.id, CommentCreate(body="early"), None,
        )


async def test_unknown_article_rejects_comments(test_db):
    with pytest.raises(ResourceNotFoundError):
        await CommentService(test_db).create(uuid4(), CommentCreate(body="x"), None)
