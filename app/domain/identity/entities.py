"""
Domain entities for the identity bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Optional


@dataclass
class User:
    """A registered platform user.

    The password field always holds a hash, never the plain text.
    """

    id: int
    username: str
    password_hash: str
    display_name: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    education: Optional[str] = None
    occupation: Optional[str] = None
    alpaca_api_key: Optional[str] = None
    alpaca_secret_key: Optional[str] = None
    xp: int = 0
    level: int = 1
    created_at: Optional[datetime] = None

    @property
    def has_brokerage_keys(self) -> bool:
        """True when the user stored their own brokerage credentials."""
        return bool(self.alpaca_api_key and self.alpaca_secret_key)


@dataclass(frozen=True)
class ProfileChanges:
    """A partial profile update. None means "leave unchanged"."""

    display_name: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    education: Optional[str] = None
    occupation: Optional[str] = None
    alpaca_api_key: Optional[str] = None
    alpaca_secret_key: Optional[str] = None

    def as_dict(self) -> dict[str, str]:
        """Return only the fields that were provided."""
        return {
            name: value
            for name, value in asdict(self).items()
            if value is not None
        }
