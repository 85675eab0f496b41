"""Request Dependencies: identity signals, actor resolution and admin guard.

Invariants:
    - get_actor never fails (anonymous fallback)
    - require_admin: missing token -> 401, invalid token -> 401, non-admin -> 403

Design Decisions:
    - get_token_verifier is a dependency so tests override it without patching settings
"""

from fastapi import Depends, Request

from pressroom.config import get_settings
from pressroom.core.auth_protocols import TokenClaims, TokenVerifier
from pressroom.core.domain_types import ActorIdentity, RequestContext
from pressroom.core.errors import (
    AuthenticationRequiredError, PermissionDeniedError,
)
from pressroom.infrastructure.auth_tokens import JWTTokenVerifier
from pressroom.services.identity import extract_bearer_token, resolve_actor


def get_token_verifier() -> TokenVerifier:
    return JWTTokenVerifier.from_settings(get_settings())


def get_request_context(request: Request) -> RequestContext:
    return RequestContext(
        authorization=request.headers.get("Authorization"),
        client_address=request.client.host if request.client else None,
        user_agent=request.headers.get("User-Agent"),
    )


def get_actor(
    context: RequestContext = Depends(get_request_context),
    verifier: TokenVerifier = Depends(get_token_verifier),
) -> ActorIdentity:
    return resolve_actor(context, verifier)


def require_admin(
    context: RequestContext = Depends(get_request_context),
    verifier: TokenVerifier = Depends(get_token_verifier),
) -> TokenClaims:
    token = extract_bearer_token(context.authorization)
    if token is None:
        raise AuthenticationRequiredError("manage articles")
    claims = verifier.verify(token)
    if not claims.is_admin:
        raise PermissionDeniedError()
    return claims
