"""
Pydantic schemas for identity API request/response validation.

These schemas enforce input validation and define the API contract.
No business logic belongs here.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from app.application.identity.dtos import UserProfile
from app.interfaces.schemas import CamelModel

USERNAME_MIN_LEN = 3
USERNAME_MAX_LEN = 50
PASSWORD_MIN_LEN = 6


class RegisterRequest(CamelModel):
    """Request schema for registration.

    Attributes:
        username: 3-50 characters.
        password: At least 6 characters.
    """

    username: str = Field(..., min_length=USERNAME_MIN_LEN, max_length=USERNAME_MAX_LEN)
    password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=128)


class LoginRequest(CamelModel):
    """Request schema for login. Length rules are not re-checked here."""

    username: str = Field(..., min_length=1, max_length=USERNAME_MAX_LEN)
    password: str = Field(..., min_length=1, max_length=128)


class UpdateProfileRequest(CamelModel):
    """Partial profile update; omitted fields are left unchanged."""

    display_name: Optional[str] = Field(None, max_length=100)
    bio: Optional[str] = Field(None, max_length=2000)
    avatar_url: Optional[str] = Field(None, max_length=2048)
    education: Optional[str] = Field(None, max_length=500)
    occupation: Optional[str] = Field(None, max_length=500)
    alpaca_api_key: Optional[str] = Field(None, max_length=256)
    alpaca_secret_key: Optional[str] = Field(None, max_length=256)


class UserResponse(CamelModel):
    """Public view of a user. Brokerage keys appear only as a flag."""

    id: int
    username: str
    display_name: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    education: Optional[str] = None
    occupation: Optional[str] = None
    xp: int
    level: int
    has_brokerage_keys: bool
    created_at: Optional[datetime] = None

    @classmethod
    def from_profile(cls, profile: UserProfile) -> "UserResponse":
        return cls(
            id=profile.id,
            username=profile.username,
            display_name=profile.display_name,
            bio=profile.bio,
            avatar_url=profile.avatar_url,
            education=profile.education,
            occupation=profile.occupation,
            xp=profile.xp,
            level=profile.level,
            has_brokerage_keys=profile.has_brokerage_keys,
            created_at=profile.created_at,
        )


class AuthResponse(CamelModel):
    """Response schema for register and login."""

    message: str
    user: UserResponse
