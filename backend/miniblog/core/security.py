# miniblog/core/security.py
"""
Security module for authentication.
Handles password hashing and issuing/verifying signed JWT bearer tokens.
"""
import datetime as dt
import uuid

import jwt  # PyJWT
from passlib.context import CryptContext
from pydantic import BaseModel

from miniblog.config import settings
from miniblog.core.errors import MalformedHash, TokenRejected, TokenRejectReason

# Password hashing context
# The hash string embeds its own parameters and salt
pwd_context = CryptContext(
    schemes=["argon2"],  # Use Argon2 for password hashing
    deprecated="auto",   # Automatically handle deprecated schemes
)

JWT_ALG = "HS256"  # JWT signing algorithm (HMAC SHA-256)

# Claims every accepted token must carry
REQUIRED_CLAIMS = ["sub", "jti", "iat", "exp", "iss", "aud"]


def hash_password(plain: str) -> str:
    """
    Hash a plain text password using Argon2.

    Args:
        plain: Plain text password to hash

    Returns:
        Hashed password string (safe to store in database). Hashing the same
        password twice gives two different strings because the salt is random.
    """
    return pwd_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    """
    Verify a plain text password against a hashed password.

    Args:
        plain: Plain text password to verify
        hashed: Hashed password from database

    Returns:
        True if password matches, False otherwise

    Raises:
        MalformedHash: If the stored hash cannot be identified or parsed
    """
    try:
        return pwd_context.verify(plain, hashed)
    except (ValueError, TypeError) as exc:
        raise MalformedHash() from exc


def dummy_verify() -> None:
    """Spend the same effort as a real verification (used when the user does not exist)."""
    pwd_context.dummy_verify()


class TokenClaims(BaseModel):
    """Verified identity claims extracted from a bearer token."""
    subject_id: int
    username: str
    email: str
    token_id: str
    issued_at: dt.datetime
    expires_at: dt.datetime


class IssuedToken(BaseModel):
    token: str
    expires_at: dt.datetime


class TokenService:
    """
    Issues and verifies HS256-signed access tokens.

    Verification is strict: issuer and audience must match exactly and a token
    stops being valid at its exp instant (no clock-skew leeway).
    """

    def __init__(self, secret: str, issuer: str, audience: str, expire_minutes: int):
        self.secret = secret
        self.issuer = issuer
        self.audience = audience
        self.expire_minutes = expire_minutes

    def issue(self, subject_id: int, username: str, email: str) -> IssuedToken:
        """
        Create a signed token for an account.

        Token payload includes:
            - sub: Subject (account ID, as a string)
            - username / email: identity claims
            - jti: Unique token id (fresh for every call)
            - iat / exp: Issued-at and expiration timestamps
            - iss / aud: Issuer and audience
        """
        # JWT timestamps have second precision; keep expires_at consistent with exp
        now = dt.datetime.now(dt.timezone.utc).replace(microsecond=0)
        expires_at = now + dt.timedelta(minutes=self.expire_minutes)
        payload = {
            "sub": str(subject_id),
            "username": username,
            "email": email,
            "jti": uuid.uuid4().hex,
            "iat": now,
            "exp": expires_at,
            "iss": self.issuer,
            "aud": self.audience,
        }
        token = jwt.encode(payload, self.secret, algorithm=JWT_ALG)
        return IssuedToken(token=token, expires_at=expires_at)

    def verify(self, token: str) -> TokenClaims:
        """
        Decode and validate a token.

        Raises:
            TokenRejected: With the reason the token was not accepted
        """
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[JWT_ALG],
                issuer=self.issuer,
                audience=self.audience,
                leeway=0,
                options={"require": REQUIRED_CLAIMS},
            )
        # Subclasses must be caught before the InvalidTokenError catch-all
        except jwt.ExpiredSignatureError as exc:
            raise TokenRejected(TokenRejectReason.EXPIRED) from exc
        except jwt.InvalidSignatureError as exc:
            raise TokenRejected(TokenRejectReason.BAD_SIGNATURE) from exc
        except jwt.InvalidAudienceError as exc:
            raise TokenRejected(TokenRejectReason.AUDIENCE_MISMATCH) from exc
        except jwt.InvalidIssuerError as exc:
            raise TokenRejected(TokenRejectReason.ISSUER_MISMATCH) from exc
        except jwt.InvalidTokenError as exc:
            raise TokenRejected(TokenRejectReason.MALFORMED) from exc

        try:
            return TokenClaims(
                subject_id=int(payload["sub"]),
                username=payload["username"],
                email=payload["email"],
                token_id=payload["jti"],
                issued_at=dt.datetime.fromtimestamp(payload["iat"], dt.timezone.utc),
                expires_at=dt.datetime.fromtimestamp(payload["exp"], dt.timezone.utc),
            )
        except (KeyError, ValueError, TypeError) as exc:
            raise TokenRejected(TokenRejectReason.MALFORMED) from exc


def get_token_service() -> TokenService:
    """Token service bound to the process configuration."""
    return TokenService(
        secret=settings.jwt_secret,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        expire_minutes=settings.jwt_expire_minutes,
    )


def create_access_token(user_id: int, username: str, email: str) -> IssuedToken:
    return get_token_service().issue(user_id, username, email)


def decode_access_token(token: str) -> TokenClaims:
    return get_token_service().verify(token)
