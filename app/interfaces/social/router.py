"""
FastAPI router for the social bounded context.

Feed, posts, comments and likes. Every route requires a session.
"""

from fastapi import APIRouter, Depends, Path, status

from app.application.social.add_comment import AddCommentUseCase
from app.application.social.create_post import CreatePostUseCase
from app.application.social.dtos import AddCommentCommand, CreatePostCommand, LikeCommand
from app.application.social.get_feed import GetFeedUseCase
from app.application.social.like_post import LikePostUseCase, UnlikePostUseCase
from app.domain.social.ports import PostRepository
from app.interfaces.dependencies import get_current_user_id
from app.interfaces.schemas import ErrorResponse
from app.interfaces.social.dependencies import get_post_repository
from app.interfaces.social.schemas import (
    CommentResponse,
    CreateCommentRequest,
    CreatePostRequest,
    LikeStateResponse,
    PostResponse,
)

router = APIRouter(tags=["social"])

_POST_ERRORS = {401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}


@router.get(
    "/feed",
    response_model=list[PostResponse],
    responses={401: {"model": ErrorResponse}},
    summary="Community feed, newest first",
)
def feed(
    user_id: int = Depends(get_current_user_id),
    repo: PostRepository = Depends(get_post_repository),
) -> list[PostResponse]:
    return [PostResponse.from_entity(post) for post in GetFeedUseCase(repo).execute(user_id)]


@router.post(
    "/posts",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
    summary="Publish a post",
)
def create_post(
    body: CreatePostRequest,
    user_id: int = Depends(get_current_user_id),
    repo: PostRepository = Depends(get_post_repository),
) -> PostResponse:
    post = CreatePostUseCase(repo).execute(
        CreatePostCommand(
            author_id=user_id,
            content=body.content,
            type=body.type,
            stock_symbol=body.stock_symbol,
            trade_type=body.trade_type,
            shares=body.shares,
            price=body.price,
            profit_loss=body.profit_loss,
        )
    )
    return PostResponse.from_entity(post)


@router.post(
    "/posts/{post_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, **_POST_ERRORS},
    summary="Comment on a post",
)
def add_comment(
    body: CreateCommentRequest,
    post_id: int = Path(..., ge=1),
    user_id: int = Depends(get_current_user_id),
    repo: PostRepository = Depends(get_post_repository),
) -> CommentResponse:
    comment = AddCommentUseCase(repo).execute(
        AddCommentCommand(post_id=post_id, author_id=user_id, content=body.content)
    )
    return CommentResponse.from_entity(comment)


@router.post(
    "/posts/{post_id}/like",
    response_model=LikeStateResponse,
    responses=_POST_ERRORS,
    summary="Like a post",
    description="Idempotent: liking twice leaves the count unchanged.",
)
def like_post(
    post_id: int = Path(..., ge=1),
    user_id: int = Depends(get_current_user_id),
    repo: PostRepository = Depends(get_post_repository),
) -> LikeStateResponse:
    state = LikePostUseCase(repo).execute(LikeCommand(post_id=post_id, user_id=user_id))
    return LikeStateResponse.from_entity(state)


@router.delete(
    "/posts/{post_id}/like",
    response_model=LikeStateResponse,
    responses=_POST_ERRORS,
    summary="Unlike a post",
)
def unlike_post(
    post_id: int = Path(..., ge=1),
    user_id: int = Depends(get_current_user_id),
    repo: PostRepository = Depends(get_post_repository),
) -> LikeStateResponse:
    state = UnlikePostUseCase(repo).execute(LikeCommand(post_id=post_id, user_id=user_id))
    return LikeStateResponse.from_entity(state)
