"""Identity Resolver: derives the actor identity used for engagement dedup.

Invariants:
    - resolve_actor NEVER raises: absent, malformed or rejected tokens all fall
      back to AnonymousActor(address)
    - A missing client address becomes AnonymousActor("unknown"), not an error

Design Decisions:
    - The address fallback is best-effort and spoofable (proxies, NAT, forged
      headers); it deduplicates casual repeat views, it does not authenticate
"""

import logging

from pressroom.core.auth_protocols import TokenVerifier
from pressroom.core.domain_types import (
    ActorIdentity, AnonymousActor, AuthenticatedActor, RequestContext,
    UNKNOWN_ADDRESS,
)
from pressroom.core.errors import InvalidTokenError

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the token from an 'Authorization: Bearer <token>' value."""
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX):].strip()
    return token or None


def resolve_actor(
    context: RequestContext, verifier: TokenVerifier,
) -> ActorIdentity:
    """User id when a valid token is present, else the client address."""
    token = extract_bearer_token(context.authorization)
    if token is not None:
        try:
            claims = verifier.verify(token)
            return AuthenticatedActor(user_id=claims.user_id)
        except InvalidTokenError as e:
            logger.info(f"Ignoring invalid token, falling back to address: {e.message}")
    return AnonymousActor(address=context.client_address or UNKNOWN_ADDRESS)
