"""Article Schemas: field-level validation for article and version payloads.

Invariants:
    - ArticleCreate.title / body: required, stripped, non-empty
    - ArticleEdit: every field optional; empty values mean "keep current"
    - custom_date / published_at: naive datetimes are interpreted as UTC
    - Responses never expose engagement fact rows, only counters

Design Decisions:
    - Accepts both "YYYY-MM-DDTHH:MM" and RFC 3339 for dates (pydantic parses both)
"""

from datetime import datetime, timezone
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pressroom.core.domain_types import ArticleSort
from pressroom.schemas.comment import CommentResponse


def _as_utc(v: datetime | None) -> datetime | None:
    if v is not None and v.tzinfo is None:
        return v.replace(tzinfo=timezone.utc)
    return v


class ArticleCreate(BaseModel):
    """Article creation: title and body required, starts as Draft."""
    title: str = Field(min_length=1, max_length=500)
    body: str = Field(min_length=1)
    language: str | None = Field(None, max_length=50)
    images: list[str] = Field(default_factory=list)
    custom_date: datetime | None = None

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty or whitespace")
        return v

    @field_validator("custom_date")
    @classmethod
    def assume_utc(cls, v: datetime | None) -> datetime | None:
        return _as_utc(v)


class ArticleEdit(BaseModel):
    """Partial edit: becomes a pending version; language/custom_date apply immediately."""
    title: str | None = Field(None, max_length=500)
    body: str | None = None
    language: str | None = Field(None, max_length=50)
    images: list[str] | None = None
    custom_date: datetime | None = None

    @field_validator("custom_date")
    @classmethod
    def assume_utc(cls, v: datetime | None) -> datetime | None:
        return _as_utc(v)


class PublishDateUpdate(BaseModel):
    published_at: datetime

    @field_validator("published_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        return _as_utc(v)


class ArticleListQuery(BaseModel):
    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1, le=100)
    published_only: bool = True
    language: str | None = None
    sort_by: ArticleSort = ArticleSort.RECENT


class ArticleResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    body: str
    preview: str
    language: str
    images: list[str]
    is_published: bool
    published_at: datetime | None
    custom_date: datetime | None = Field(None, validation_alias="override_published_at")
    like_count: int
    comment_count: int
    view_count: int
    created_at: datetime
    updated_at: datetime


class VersionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    article_id: UUID
    title: str
    body: str
    language: str
    images: list[str]
    is_pending: bool
    created_at: datetime


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int


class ArticleListResponse(BaseModel):
    articles: list[ArticleResponse]
    pagination: Pagination


class ArticleDetailResponse(BaseModel):
    """Public read: the article, its comments, and whether this request counted as a view."""
    article: ArticleResponse
    comments: list[CommentResponse] = Field(default_factory=list)
    view_counted: bool


class AdminArticleDetailResponse(BaseModel):
    article: ArticleResponse
    versions: list[VersionResponse]


class ProposedEditResponse(BaseModel):
    message: str = "Draft version created"
    version: VersionResponse
    article: ArticleResponse
