"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - ArticleId, VersionId, UserId wrap primitives; never use bare strings for actors
    - ActorIdentity is a closed union: AuthenticatedActor | AnonymousActor
    - actor_key is the canonical string stored in engagement facts ("user:<id>" / "ip:<addr>")
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - Frozen dataclasses for the actor union: call sites pattern-match on the type
      instead of inspecting an overloaded nullable string
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

ArticleId = NewType("ArticleId", UUID)
VersionId = NewType("VersionId", UUID)
UserId = NewType("UserId", str)

UNKNOWN_ADDRESS = "unknown"
DEFAULT_LANGUAGE = "english"


# ─── Actor Identity ──────────────────────────────────────────────

@dataclass(frozen=True)
class AuthenticatedActor:
    """Actor resolved from a verified token."""
    user_id: UserId

    @property
    def actor_key(self) -> str:
        return f"user:{self.user_id}"


@dataclass(frozen=True)
class AnonymousActor:
    """Actor known only by network address. Spoofable, best-effort."""
    address: str = UNKNOWN_ADDRESS

    @property
    def actor_key(self) -> str:
        return f"ip:{self.address}"


ActorIdentity = AuthenticatedActor | AnonymousActor


@dataclass(frozen=True)
class RequestContext:
    """Transport-independent view of the identity signals on a request."""
    authorization: str | None = None
    client_address: str | None = None
    user_agent: str | None = None


# ─── Enums ───────────────────────────────────────────────────────

class ArticleState(str, Enum):
    """Publication lifecycle states. Both transitions are reversible."""
    DRAFT = "draft"
    PUBLISHED = "published"


class ArticleSort(str, Enum):
    """Listing orders; every order is tie-broken by recency."""
    RECENT = "recent"
    MOST_COMMENTED = "most_commented"
    MOST_LIKED = "most_liked"
    MOST_VIEWED = "most_viewed"
