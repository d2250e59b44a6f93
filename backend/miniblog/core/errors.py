# miniblog/core/errors.py
"""
Domain error taxonomy.

Every business-rule violation raised by the core is a subclass of MiniBlogError.
Each kind carries a stable error code and the HTTP status the API layer maps it to,
so routers never have to translate errors themselves.
"""
from enum import Enum


class MiniBlogError(Exception):
    """Base class for all recognized (client-facing) errors."""

    code: str = "BAD_REQUEST"
    status_code: int = 400
    message: str = "Bad request"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class DuplicateUsername(MiniBlogError):
    code = "USERNAME_EXISTS"
    status_code = 409
    message = "Username already exists"


class DuplicateEmail(MiniBlogError):
    code = "EMAIL_EXISTS"
    status_code = 409
    message = "Email already registered"


class InvalidCredentials(MiniBlogError):
    # Same message for unknown username and wrong password (no user enumeration)
    code = "AUTH_INVALID_CREDENTIALS"
    status_code = 401
    message = "Incorrect username or password"


class AuthRequired(MiniBlogError):
    code = "AUTH_REQUIRED"
    status_code = 401
    message = "Authentication required"


class TokenRejectReason(str, Enum):
    """Why a bearer token was not accepted."""

    BAD_SIGNATURE = "BadSignature"
    ISSUER_MISMATCH = "IssuerMismatch"
    AUDIENCE_MISMATCH = "AudienceMismatch"
    EXPIRED = "Expired"
    MALFORMED = "Malformed"


class TokenRejected(MiniBlogError):
    code = "AUTH_INVALID_TOKEN"
    status_code = 401
    message = "Invalid or expired token"

    def __init__(self, reason: TokenRejectReason):
        super().__init__(f"Token rejected: {reason.value}")
        self.reason = reason


class MalformedHash(MiniBlogError):
    # A stored password hash could not be parsed; this is a server-side data problem
    code = "MALFORMED_HASH"
    status_code = 500
    message = "Stored password hash is malformed"


class NotFound(MiniBlogError):
    code = "NOT_FOUND"
    status_code = 404
    message = "Resource not found"

    def __init__(self, resource: str, key):
        super().__init__(f"{resource} with key '{key}' was not found")
        self.resource = resource
        self.key = key


class Forbidden(MiniBlogError):
    code = "FORBIDDEN"
    status_code = 403
    message = "You can only modify your own resources"


class DeleteRestricted(MiniBlogError):
    code = "DELETE_RESTRICTED"
    status_code = 409
    message = "Resource is still referenced and cannot be deleted"


class InvalidInput(MiniBlogError):
    code = "INVALID_INPUT"
    status_code = 400
    message = "Invalid input"
