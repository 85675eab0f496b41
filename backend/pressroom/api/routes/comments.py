"""Comment Routes: list and create comments on published articles."""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from pressroom.api.dependencies import get_request_context
from pressroom.core.domain_types import ArticleId, RequestContext
from pressroom.infrastructure.database import get_db
from pressroom.schemas.comment import CommentCreate, CommentResponse
from pressroom.services.comments import CommentService

router = APIRouter(prefix="/api/v1/articles", tags=["comments"])


@router.get("/{article_id}/comments")
async def list_comments(
    article_id: UUID, db: AsyncSession = Depends(get_db),
):
    comments = await CommentService(db).list_for_article(ArticleId(article_id))
    return {
        "comments": [
            CommentResponse.model_validate(c).model_dump(mode="json")
            for c in comments
        ],
    }


@router.post(
    "/{article_id}/comments", response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    article_id: UUID,
    body: CommentCreate,
    context: RequestContext = Depends(get_request_context),
    db: AsyncSession = Depends(get_db),
):
    comment = await CommentService(db).create(
        ArticleId(article_id), body, context.client_address,
    )
    return CommentResponse.model_validate(comment)
