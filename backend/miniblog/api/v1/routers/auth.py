# miniblog/api/v1/routers/auth.py
from fastapi import APIRouter, Depends, Response

from miniblog.api.v1.deps import get_auth_service, require_actor
from miniblog.core.security import TokenClaims
from miniblog.schemas.auth import LoginRequest, RegisterIn, to_user_out
from miniblog.services.auth import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/register")
async def register(body: RegisterIn, service: AuthService = Depends(get_auth_service)):
    """
    Register a new user account.

    Creates the account, hashes the password before storage and returns a
    token so the client is logged in straight away.

    Returns:
        dict: success flag and AuthResponse data (token, expiresAt, user)

    Error codes:
        - USERNAME_EXISTS (409): Username already taken
        - EMAIL_EXISTS (409): Email already registered
    """
    result = await service.register(body.username, body.email, body.password, body.displayName)
    return {"success": True, "message": "User registered successfully", "data": result}

@router.post("/login")
async def login(payload: LoginRequest, response: Response, service: AuthService = Depends(get_auth_service)):
    """
    Authenticate user and create access token.

    The token is returned in the response body and also set as an HttpOnly
    cookie for browser-based clients.

    Error codes:
        - AUTH_INVALID_CREDENTIALS (401): Unknown username or wrong password
    """
    result = await service.login(payload.username, payload.password)
    response.set_cookie("accessToken", result.token, httponly=True, secure=False, samesite="lax")
    return {"success": True, "message": "Login successful", "data": result}

@router.get("/me")
async def me(actor: TokenClaims = Depends(require_actor), service: AuthService = Depends(get_auth_service)):
    """
    Get the account of the caller (never includes the password hash).
    """
    user = await service.current_account(actor)
    return {"success": True, "data": to_user_out(user)}

@router.post("/logout")
async def logout(response: Response):
    """
    Clear the access token cookie.

    Note:
        The token itself stays valid until it expires; there is no server-side session to end.
    """
    response.delete_cookie("accessToken")
    return {"success": True}
