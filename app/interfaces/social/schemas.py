"""
Pydantic schemas for social API request/response validation.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from app.domain.social.entities import Author, Comment, LikeState, Post
from app.interfaces.schemas import CamelModel


class CreatePostRequest(CamelModel):
    """Request schema for publishing a post.

    Trade fields are optional and only meaningful for trade posts.
    """

    content: str = Field(..., max_length=5000)
    type: str = Field("text", max_length=20)
    stock_symbol: Optional[str] = Field(None, max_length=10)
    trade_type: Optional[str] = Field(None, max_length=10)
    shares: Optional[float] = None
    price: Optional[float] = None
    profit_loss: Optional[float] = None


class CreateCommentRequest(CamelModel):
    content: str = Field(..., max_length=2000)


class AuthorResponse(CamelModel):
    id: int
    username: str
    display_name: Optional[str] = None

    @classmethod
    def from_entity(cls, author: Author) -> "AuthorResponse":
        return cls(id=author.id, username=author.username, display_name=author.display_name)


class CommentResponse(CamelModel):
    id: int
    post_id: int
    content: str
    created_at: datetime
    author: AuthorResponse

    @classmethod
    def from_entity(cls, comment: Comment) -> "CommentResponse":
        return cls(
            id=comment.id,
            post_id=comment.post_id,
            content=comment.content,
            created_at=comment.created_at,
            author=AuthorResponse.from_entity(comment.author),
        )


class PostResponse(CamelModel):
    id: int
    content: str
    type: str
    created_at: datetime
    stock_symbol: Optional[str] = None
    trade_type: Optional[str] = None
    shares: Optional[float] = None
    price: Optional[float] = None
    profit_loss: Optional[float] = None
    author: AuthorResponse
    comments: list[CommentResponse]
    comment_count: int
    like_count: int
    liked_by_me: bool

    @classmethod
    def from_entity(cls, post: Post) -> "PostResponse":
        return cls(
            id=post.id,
            content=post.content,
            type=post.type,
            created_at=post.created_at,
            stock_symbol=post.stock_symbol,
            trade_type=post.trade_type,
            shares=post.shares,
            price=post.price,
            profit_loss=post.profit_loss,
            author=AuthorResponse.from_entity(post.author),
            comments=[CommentResponse.from_entity(c) for c in post.comments],
            comment_count=post.comment_count,
            like_count=post.like_count,
            liked_by_me=post.liked_by_me,
        )


class LikeStateResponse(CamelModel):
    post_id: int
    like_count: int
    liked: bool

    @classmethod
    def from_entity(cls, state: LikeState) -> "LikeStateResponse":
        return cls(post_id=state.post_id, like_count=state.like_count, liked=state.liked)
