"""Engagement Schemas: like/unlike/like-status payloads."""

from pydantic import BaseModel


class LikeResponse(BaseModel):
    message: str
    like_count: int


class LikeStatusResponse(BaseModel):
    liked: bool
