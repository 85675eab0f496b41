"""Comment Schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CommentCreate(BaseModel):
    author_name: str | None = Field(None, max_length=255)
    email: str | None = Field(None, max_length=255)
    body: str = Field(min_length=1, max_length=5000)
    is_anonymous: bool = False

    @field_validator("body")
    @classmethod
    def strip_body(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("comment cannot be empty or whitespace")
        return v


class CommentResponse(BaseModel):
    """Public comment shape. Never includes ip_address."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    article_id: UUID
    author_name: str
    body: str
    is_anonymous: bool
    created_at: datetime
