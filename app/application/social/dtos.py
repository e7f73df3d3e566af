"""
Data Transfer Objects for the social application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CreatePostCommand:
    """Input DTO for publishing a post.

    Attributes:
        type: Post kind, e.g. "text" or "trade".
        stock_symbol, trade_type, shares, price, profit_loss: Trade details,
            set only for trade posts.
    """

    author_id: int
    content: str
    type: str = "text"
    stock_symbol: Optional[str] = None
    trade_type: Optional[str] = None
    shares: Optional[float] = None
    price: Optional[float] = None
    profit_loss: Optional[float] = None


@dataclass(frozen=True)
class AddCommentCommand:
    """Input DTO for commenting on a post."""

    post_id: int
    author_id: int
    content: str


@dataclass(frozen=True)
class LikeCommand:
    """Input DTO for like and unlike."""

    post_id: int
    user_id: int
