"""Boundary Protocols: contracts between core and the auth collaborator.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Token verification accessed only through TokenVerifier
    - verify() either returns TokenClaims or raises InvalidTokenError

Design Decisions:
    - Protocol over ABC: structural subtyping, tests substitute a fake verifier
"""

from dataclasses import dataclass
from typing import Protocol

from pressroom.core.domain_types import UserId


@dataclass(frozen=True)
class TokenClaims:
    """What the auth service tells us about a bearer."""
    user_id: UserId
    username: str = ""
    is_admin: bool = False


class TokenVerifier(Protocol):
    """Contract for token verification, implemented by infrastructure."""
    def verify(self, token: str) -> TokenClaims: ...
