"""Service test fixtures: async DB + FastAPI test client + signed tokens.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB engine
    - Tokens are real HS256 JWTs signed with the test secret

Design Decisions:
    - SQLite in-memory: fast, no external dependency; ON CONFLICT DO NOTHING and
      UPDATE ... RETURNING behave as on PostgreSQL
"""

from datetime import datetime, timezone

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

import pressroom.models  # noqa: F401
from pressroom.db.base import Base
from pressroom.infrastructure.auth_tokens import issue_token
from pressroom.infrastructure.database import get_db
from pressroom.main import app
from pressroom.models.article import Article


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    token = issue_token("admin-1", username="admin", is_admin=True)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def reader_headers():
    token = issue_token("reader-1", username="reader")
    return {"Authorization": f"Bearer {token}"}


async def _insert_article(db, **fields) -> Article:
    values = {
        "title": "Hello",
        "body": "Hello world",
        "preview": "Hello world",
        "language": "english",
        "images": [],
    }
    values.update(fields)
    article = Article(**values)
    db.add(article)
    await db.commit()
    await db.refresh(article)
    return article


@pytest.fixture
async def draft_article(test_db):
    return await _insert_article(test_db)


@pytest.fixture
async def published_article(test_db):
    return await _insert_article(
        test_db,
        title="Live post",
        is_published=True,
        published_at=datetime(2026, 1, 5, 9, 30, tzinfo=timezone.utc),
    )


@pytest.fixture
def make_article(test_db):
    """Factory for articles with arbitrary column values."""
    async def _make(**fields) -> Article:
        return await _insert_article(test_db, **fields)
    return _make
