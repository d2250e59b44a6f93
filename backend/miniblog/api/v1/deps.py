# miniblog/api/v1/deps.py
from fastapi import Depends, Header, Request

from miniblog.core.errors import AuthRequired
from miniblog.core.security import TokenClaims, decode_access_token, get_token_service
from miniblog.repositories.accounts import AccountStore
from miniblog.repositories.comments import CommentStore
from miniblog.repositories.posts import PostStore
from miniblog.services.auth import AuthService
from miniblog.services.comments import CommentService
from miniblog.services.posts import PostService

async def get_current_actor(
    request: Request,
    authorization: str | None = Header(default=None),
) -> TokenClaims | None:
    """
    FastAPI dependency returning the verified claims of the caller, or None.

    The token is read from either:
    1. Authorization header (Bearer token) - preferred method
    2. HttpOnly cookie (accessToken) - fallback method

    Returns:
        TokenClaims: Verified identity claims, or None when no token was sent

    Raises:
        TokenRejected (401): If a token was sent but is invalid or expired
    """
    token = None
    # 1) Prioritize Authorization: Bearer xxx
    if authorization and authorization.lower().startswith("bearer "):
        token = authorization.split(" ", 1)[1].strip()
    # 2) Secondly HttpOnly Cookie: accessToken
    if not token:
        token = request.cookies.get("accessToken")

    if not token:
        return None
    return decode_access_token(token)

async def require_actor(actor: TokenClaims | None = Depends(get_current_actor)) -> TokenClaims:
    """
    FastAPI dependency for endpoints that need an authenticated caller.

    Raises:
        AuthRequired (401): If no token was provided
    """
    if actor is None:
        raise AuthRequired()
    return actor

def get_auth_service() -> AuthService:
    return AuthService(AccountStore(), get_token_service())

def get_post_service() -> PostService:
    return PostService(PostStore(), AccountStore())

def get_comment_service() -> CommentService:
    return CommentService(CommentStore(), PostStore(), AccountStore())
