"""Database Session Manager: error mapping, rollback, conditional insert."""

import pytest
from sqlalchemy import select, text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

import pressroom.models  # noqa: F401
from pressroom.core.errors import DatabaseError
from pressroom.db.base import Base
from pressroom.infrastructure.database import (
    DatabaseSessionManager, insert_ignoring_conflicts,
)
from pressroom.models.article import Article
from pressroom.models.engagement import ArticleView


@pytest.fixture
async def manager():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    mgr = DatabaseSessionManager.__new__(DatabaseSessionManager)
    mgr.engine = engine
    mgr._session_factory = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
    yield mgr
    await engine.dispose()


async def test_health_check_ok(manager):
    assert await manager.health_check() is True


async def test_sqlalchemy_errors_become_database_error(manager):
    with pytest.raises(DatabaseError) as exc:
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM no_such_table"))
    assert exc.value.http_status == 503


async def test_failed_session_rolls_back(manager):
    with pytest.raises(DatabaseError):
        async with manager.session() as db:
            db.add(Article(title="never", body="b", preview="b"))
            await db.flush()
            await db.execute(text("SELECT * FROM no_such_table"))
    async with manager.session() as db:
        rows = (await db.execute(select(Article))).scalars().all()
    assert rows == []


async def test_insert_ignoring_conflicts_reports_first_write_only(manager):
    async with manager.session() as db:
        article = Article(title="t", body="b", preview="b")
        db.add(article)
        await db.commit()
        values = {"article_id": article.id, "actor_key": "ip:1.1.1.1"}
        assert await insert_ignoring_conflicts(db, ArticleView, values) is True
        assert await insert_ignoring_conflicts(db, ArticleView, values) is False
        await db.commit()
        rows = (await db.execute(select(ArticleView))).scalars().all()
    assert len(rows) == 1
