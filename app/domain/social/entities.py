"""
Domain entities for the social bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from app.domain.social.errors import EmptyContentError


@dataclass(frozen=True)
class Author:
    """Public projection of the user who wrote a post or comment."""

    id: int
    username: str
    display_name: Optional[str] = None


@dataclass(frozen=True)
class Comment:
    """A comment attached to a post."""

    id: int
    post_id: int
    author: Author
    content: str
    created_at: datetime


@dataclass(frozen=True)
class Post:
    """A feed post, optionally describing a trade.

    Attributes:
        type: Free-form post kind chosen by the client ("text", "trade", ...).
        like_count: Denormalised number of likes.
        liked_by_me: Whether the viewing user has liked the post.
    """

    id: int
    author: Author
    content: str
    type: str
    created_at: datetime
    stock_symbol: Optional[str] = None
    trade_type: Optional[str] = None
    shares: Optional[float] = None
    price: Optional[float] = None
    profit_loss: Optional[float] = None
    like_count: int = 0
    liked_by_me: bool = False
    comments: list[Comment] = field(default_factory=list)

    @property
    def comment_count(self) -> int:
        return len(self.comments)


@dataclass(frozen=True)
class NewPost:
    """A post about to be published."""

    content: str
    type: str
    stock_symbol: Optional[str] = None
    trade_type: Optional[str] = None
    shares: Optional[float] = None
    price: Optional[float] = None
    profit_loss: Optional[float] = None

    def __post_init__(self) -> None:
        if not self.content.strip():
            raise EmptyContentError("post")


@dataclass(frozen=True)
class LikeState:
    """Like status of a post after a like/unlike."""

    post_id: int
    like_count: int
    liked: bool
