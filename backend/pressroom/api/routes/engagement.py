"""Engagement Routes: like, unlike and like-status for the current actor."""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from pressroom.api.dependencies import get_actor, get_request_context
from pressroom.core.domain_types import ActorIdentity, ArticleId, RequestContext
from pressroom.infrastructure.database import get_db
from pressroom.schemas.engagement import LikeResponse, LikeStatusResponse
from pressroom.services.engagement import EngagementService

router = APIRouter(prefix="/api/v1/articles", tags=["engagement"])


@router.post(
    "/{article_id}/like", response_model=LikeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def like_article(
    article_id: UUID,
    actor: ActorIdentity = Depends(get_actor),
    context: RequestContext = Depends(get_request_context),
    db: AsyncSession = Depends(get_db),
):
    like_count = await EngagementService(db).like(
        ArticleId(article_id), actor, context,
    )
    return LikeResponse(message="Article liked", like_count=like_count)


@router.delete("/{article_id}/like", response_model=LikeResponse)
async def unlike_article(
    article_id: UUID,
    actor: ActorIdentity = Depends(get_actor),
    db: AsyncSession = Depends(get_db),
):
    like_count = await EngagementService(db).unlike(ArticleId(article_id), actor)
    return LikeResponse(message="Like removed", like_count=like_count)


@router.get("/{article_id}/like-status", response_model=LikeStatusResponse)
async def like_status(
    article_id: UUID,
    actor: ActorIdentity = Depends(get_actor),
    db: AsyncSession = Depends(get_db),
):
    liked = await EngagementService(db).like_status(ArticleId(article_id), actor)
    return LikeStatusResponse(liked=liked)
