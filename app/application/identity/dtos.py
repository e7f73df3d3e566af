"""
Data Transfer Objects for the identity application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from app.domain.identity.entities import User


@dataclass(frozen=True)
class CredentialsCommand:
    """Input DTO for registration and login.

    Attributes:
        username: 3 to 50 characters (enforced at the interface layer).
        password: At least 6 characters, plain text; never stored.
    """

    username: str
    password: str


@dataclass(frozen=True)
class UpdateProfileCommand:
    """Input DTO for a partial profile update. None leaves a field as is."""

    user_id: int
    display_name: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    education: Optional[str] = None
    occupation: Optional[str] = None
    alpaca_api_key: Optional[str] = None
    alpaca_secret_key: Optional[str] = None


@dataclass(frozen=True)
class UserProfile:
    """Output DTO: the public view of a user.

    Brokerage keys are reduced to a flag; the password hash never leaves
    the domain.
    """

    id: int
    username: str
    display_name: Optional[str]
    bio: Optional[str]
    avatar_url: Optional[str]
    education: Optional[str]
    occupation: Optional[str]
    xp: int
    level: int
    has_brokerage_keys: bool
    created_at: Optional[datetime] = None

    @classmethod
    def from_user(cls, user: User) -> "UserProfile":
        return cls(
            id=user.id,
            username=user.username,
            display_name=user.display_name,
            bio=user.bio,
            avatar_url=user.avatar_url,
            education=user.education,
            occupation=user.occupation,
            xp=user.xp,
            level=user.level,
            has_brokerage_keys=user.has_brokerage_keys,
            created_at=user.created_at,
        )
