# miniblog/services/auth.py
"""
Authentication flow: registration and login.

Stateless: nothing is kept server-side after a call; every later request
proves its identity again with the bearer token returned here.
"""
import logging

from tortoise.exceptions import IntegrityError

from miniblog.core.errors import (
    AuthRequired,
    DuplicateEmail,
    DuplicateUsername,
    InvalidCredentials,
    NotFound,
)
from miniblog.core.security import (
    TokenClaims,
    TokenService,
    dummy_verify,
    hash_password,
    verify_password,
)
from miniblog.models.user import User
from miniblog.repositories.accounts import AccountStore
from miniblog.schemas.auth import AuthResponse, to_user_out

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, accounts: AccountStore, tokens: TokenService):
        self.accounts = accounts
        self.tokens = tokens

    async def register(self, username: str, email: str, password: str, display_name: str) -> AuthResponse:
        """
        Create an account and log it in.

        Raises:
            DuplicateUsername: If the username is taken (checked first)
            DuplicateEmail: If the email is already registered
        """
        await self._ensure_available(username, email)
        user = User(
            username=username,
            email=email,
            display_name=display_name,
            password_hash=hash_password(password),
        )
        try:
            await self.accounts.records.add(user)
        except IntegrityError:
            # Lost a race against a concurrent registration; report which field collided
            await self._ensure_available(username, email)
            raise
        logger.info("New user registered: %s", user.username)
        return self._auth_response(user)

    async def login(self, username: str, password: str) -> AuthResponse:
        """
        Raises:
            InvalidCredentials: Same error whether the username is unknown or the password is wrong
        """
        user = await self.accounts.get_by_username(username)
        if user is None:
            dummy_verify()  # Keep timing similar to a real password check
            logger.warning("Failed login attempt for user: %s", username)
            raise InvalidCredentials()
        if not verify_password(password, user.password_hash):
            logger.warning("Failed login attempt for user: %s", username)
            raise InvalidCredentials()
        logger.info("User logged in: %s", user.username)
        return self._auth_response(user)

    async def current_account(self, actor: TokenClaims | None) -> User:
        if actor is None:
            raise AuthRequired()
        user = await self.accounts.records.get_by_id(actor.subject_id)
        if user is None:
            raise NotFound("User", actor.subject_id)
        return user

    async def _ensure_available(self, username: str, email: str) -> None:
        if await self.accounts.username_exists(username):
            raise DuplicateUsername()
        if await self.accounts.email_exists(email):
            raise DuplicateEmail()

    def _auth_response(self, user: User) -> AuthResponse:
        issued = self.tokens.issue(user.id, user.username, user.email)
        return AuthResponse(token=issued.token, expiresAt=issued.expires_at, user=to_user_out(user))
