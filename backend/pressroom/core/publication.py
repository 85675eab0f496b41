"""Publication Rules: pure Draft/Published transitions and the effective publish timestamp.

Invariants:
    - is_published == True  <=> published_at is not None
    - When published, published_at equals override_published_at if one is set,
      otherwise the moment publication occurred (captured once, never recomputed)
    - Transitions are unconditional on current state; none can fail
    - Functions are PURE: they return a new PublicationState, the shell persists it

Design Decisions:
    - Re-publishing an already published article without an override keeps the
      existing timestamp; the timestamp refreshes only on Draft -> Published or
      when an override is present
    - `now` is injected so the caller captures the transition moment exactly once
"""

from dataclasses import dataclass, replace
from datetime import datetime

from pressroom.core.domain_types import ArticleState


@dataclass(frozen=True)
class PublicationState:
    """The publication-relevant slice of an Article."""
    is_published: bool = False
    published_at: datetime | None = None
    override_published_at: datetime | None = None

    @property
    def state(self) -> ArticleState:
        return ArticleState.PUBLISHED if self.is_published else ArticleState.DRAFT


def publish(current: PublicationState, now: datetime) -> PublicationState:
    """Draft/Published -> Published."""
    if current.override_published_at is not None:
        effective = current.override_published_at
    elif current.is_published and current.published_at is not None:
        effective = current.published_at
    else:
        effective = now
    return replace(current, is_published=True, published_at=effective)


def unpublish(current: PublicationState) -> PublicationState:
    """Published/Draft -> Draft. Clears the effective timestamp unconditionally."""
    return replace(current, is_published=False, published_at=None)


def set_override(current: PublicationState, override: datetime) -> PublicationState:
    """Record an admin publish date; live articles move to it immediately."""
    if current.is_published:
        return replace(
            current, override_published_at=override, published_at=override,
        )
    return replace(current, override_published_at=override)


def satisfies_invariant(current: PublicationState) -> bool:
    """True when the published flag and effective timestamp agree."""
    if current.is_published != (current.published_at is not None):
        return False
    if current.is_published and current.override_published_at is not None:
        return current.published_at == current.override_published_at
    return True
