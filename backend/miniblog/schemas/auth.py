"""
Pydantic schemas for authentication endpoints.
Defines request/response models for register, login and the current user.
"""
import datetime as dt
from typing import Optional

from pydantic import BaseModel, Field

from miniblog.models.user import User

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

class RegisterIn(BaseModel):
    """
    Request model for user registration.
    """
    username: str = Field(min_length=3, max_length=50)  # Unique login name
    email: str = Field(max_length=100, pattern=EMAIL_PATTERN)  # Unique email address
    password: str = Field(min_length=6)  # Plain text, hashed server-side
    displayName: str = Field(min_length=1, max_length=100)  # Public name

class LoginRequest(BaseModel):
    """
    Request model for user login endpoint.
    Contains credentials for authentication.
    """
    username: str = Field(min_length=1)  # User login name
    password: str = Field(min_length=1)  # User password (plain text, verified against stored hash)

class UserOut(BaseModel):
    """
    Public account view returned in authentication responses.
    Deliberately has no password hash field.
    """
    id: int
    username: str
    email: str
    displayName: str
    profileImagePath: Optional[str] = None
    createdAt: dt.datetime

class AuthResponse(BaseModel):
    """
    Response model for successful register/login.
    """
    token: str  # JWT access token for API authentication
    expiresAt: dt.datetime  # Instant the token stops being accepted
    user: UserOut

def to_user_out(u: User) -> UserOut:
    return UserOut(
        id=u.id,
        username=u.username,
        email=u.email,
        displayName=u.display_name,
        profileImagePath=u.profile_image_path,
        createdAt=u.created_at,
    )
