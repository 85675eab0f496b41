"""Admin Articles: authoring, versioning and publication endpoints.

Invariants:
    - Every route requires a bearer token with the admin flag (router dependency)
    - PUT creates a pending version; content goes live only via .../apply
    - Admin reads never record views

Design Decisions:
    - Publish-date correction has its own endpoint; PUT custom_date reaches the
      same core rule through the version ledger
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from pressroom.api.dependencies import require_admin
from pressroom.api.routes.articles import build_list_response
from pressroom.core.domain_types import ArticleId, ArticleSort, VersionId
from pressroom.infrastructure.database import get_db
from pressroom.schemas.article import (
    AdminArticleDetailResponse, ArticleCreate, ArticleEdit, ArticleListQuery,
    ArticleListResponse, ArticleResponse, ProposedEditResponse,
    PublishDateUpdate, VersionResponse,
)
from pressroom.services.articles import ArticleCatalog
from pressroom.services.publication import PublicationService
from pressroom.services.version_ledger import VersionLedger

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/v1/admin/articles", tags=["admin"],
    dependencies=[Depends(require_admin)],
)


@router.get("", response_model=ArticleListResponse)
async def list_all_articles(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    language: str | None = Query(None),
    sort_by: ArticleSort = Query(ArticleSort.RECENT),
    db: AsyncSession = Depends(get_db),
):
    """List articles including drafts."""
    query = ArticleListQuery(
        page=page, limit=limit, published_only=False,
        language=language, sort_by=sort_by,
    )
    return build_list_response(await ArticleCatalog(db).list_page(query))


@router.post(
    "", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED,
)
async def create_article(
    body: ArticleCreate, db: AsyncSession = Depends(get_db),
):
    article = await ArticleCatalog(db).create(body)
    return ArticleResponse.model_validate(article)


@router.get("/{article_id}", response_model=AdminArticleDetailResponse)
async def get_article(
    article_id: UUID, db: AsyncSession = Depends(get_db),
):
    """Article (draft or live) with its full version history."""
    article = await ArticleCatalog(db).get(
        ArticleId(article_id), include_drafts=True,
    )
    versions = await VersionLedger(db).list_versions(ArticleId(article_id))
    return AdminArticleDetailResponse(
        article=ArticleResponse.model_validate(article),
        versions=[VersionResponse.model_validate(v) for v in versions],
    )


@router.put("/{article_id}", response_model=ProposedEditResponse)
async def propose_edit(
    article_id: UUID, body: ArticleEdit, db: AsyncSession = Depends(get_db),
):
    proposed = await VersionLedger(db).propose_edit(ArticleId(article_id), body)
    return ProposedEditResponse(
        version=VersionResponse.model_validate(proposed.version),
        article=ArticleResponse.model_validate(proposed.article),
    )


@router.delete("/{article_id}")
async def delete_article(
    article_id: UUID, db: AsyncSession = Depends(get_db),
):
    await ArticleCatalog(db).delete(ArticleId(article_id))
    return {"message": "Article deleted"}


@router.get("/{article_id}/versions", response_model=list[VersionResponse])
async def list_versions(
    article_id: UUID, db: AsyncSession = Depends(get_db),
):
    versions = await VersionLedger(db).list_versions(ArticleId(article_id))
    return [VersionResponse.model_validate(v) for v in versions]


@router.post(
    "/{article_id}/versions/{version_id}/apply", response_model=ArticleResponse,
)
async def apply_version(
    article_id: UUID, version_id: UUID, db: AsyncSession = Depends(get_db),
):
    article = await VersionLedger(db).apply_version(
        ArticleId(article_id), VersionId(version_id),
    )
    return ArticleResponse.model_validate(article)


@router.post("/{article_id}/publish", response_model=ArticleResponse)
async def publish_article(
    article_id: UUID, db: AsyncSession = Depends(get_db),
):
    article = await PublicationService(db).publish(ArticleId(article_id))
    return ArticleResponse.model_validate(article)


@router.post("/{article_id}/unpublish", response_model=ArticleResponse)
async def unpublish_article(
    article_id: UUID, db: AsyncSession = Depends(get_db),
):
    article = await PublicationService(db).unpublish(ArticleId(article_id))
    return ArticleResponse.model_validate(article)


@router.put("/{article_id}/publish-date", response_model=ArticleResponse)
async def set_publish_date(
    article_id: UUID, body: PublishDateUpdate, db: AsyncSession = Depends(get_db),
):
    article = await PublicationService(db).set_override_timestamp(
        ArticleId(article_id), body.published_at,
    )
    return ArticleResponse.model_validate(article)
