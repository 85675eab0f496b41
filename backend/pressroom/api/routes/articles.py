"""Public Articles: published listing and single-article reads that record views.

Invariants:
    - Drafts are invisible here (404, same as unknown ids)
    - A read returns the article with its comments, oldest first
    - Every successful read goes through EngagementService.record_view, which
      counts at most once per actor
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from pressroom.api.dependencies import get_actor, get_request_context
from pressroom.core.domain_types import (
    ActorIdentity, ArticleId, ArticleSort, RequestContext,
)
from pressroom.infrastructure.database import get_db
from pressroom.schemas.article import (
    ArticleDetailResponse, ArticleListQuery, ArticleListResponse,
    ArticleResponse, Pagination,
)
from pressroom.schemas.comment import CommentResponse
from pressroom.services.articles import ArticleCatalog, ArticlePage
from pressroom.services.comments import CommentService
from pressroom.services.engagement import EngagementService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/articles", tags=["articles"])


def build_list_response(page: ArticlePage) -> ArticleListResponse:
    """Shared by the public and admin listings."""
    return ArticleListResponse(
        articles=[ArticleResponse.model_validate(a) for a in page.items],
        pagination=Pagination(
            page=page.page, limit=page.limit,
            total=page.total, total_pages=page.total_pages,
        ),
    )


@router.get("", response_model=ArticleListResponse)
async def list_published_articles(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    language: str | None = Query(None),
    sort_by: ArticleSort = Query(ArticleSort.RECENT),
    db: AsyncSession = Depends(get_db),
):
    """List published articles with pagination and sorting."""
    query = ArticleListQuery(
        page=page, limit=limit, published_only=True,
        language=language, sort_by=sort_by,
    )
    return build_list_response(await ArticleCatalog(db).list_page(query))


@router.get("/{article_id}", response_model=ArticleDetailResponse)
async def read_article(
    article_id: UUID,
    actor: ActorIdentity = Depends(get_actor),
    context: RequestContext = Depends(get_request_context),
    db: AsyncSession = Depends(get_db),
):
    """Read a published article, counting one view per actor."""
    article = await ArticleCatalog(db).get(ArticleId(article_id))
    view = await EngagementService(db).record_view(
        ArticleId(article_id), actor, context,
    )
    comments = await CommentService(db).list_for_article(ArticleId(article_id))
    return ArticleDetailResponse(
        article=ArticleResponse.model_validate(article),
        comments=[CommentResponse.model_validate(c) for c in comments],
        view_counted=view.counted,
    )
