"""
Adapter: Feed persistence.

Implements the PostRepository port on posts, comments and post_likes.
Like and unlike adjust `posts.like_count` with a SQL-side +1/-1 in the
same transaction as the post_likes insert/delete, so concurrent
requests never lose an update.
"""

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload, sessionmaker

from app.domain.social.entities import Author, Comment, LikeState, NewPost, Post
from app.domain.social.errors import PostNotFoundError
from app.domain.social.ports import PostRepository
from app.infrastructure.persistence.models import (
    CommentModel,
    PostLikeModel,
    PostModel,
    UserModel,
)

logger = logging.getLogger(__name__)


def _author(row: UserModel) -> Author:
    return Author(id=row.id, username=row.username, display_name=row.display_name)


def _comment(row: CommentModel) -> Comment:
    return Comment(
        id=row.id,
        post_id=row.post_id,
        author=_author(row.author),
        content=row.content,
        created_at=row.created_at,
    )


def _post(row: PostModel, liked_by_me: bool, comments: list[Comment]) -> Post:
    return Post(
        id=row.id,
        author=_author(row.author),
        content=row.content,
        type=row.type,
        created_at=row.created_at,
        stock_symbol=row.stock_symbol,
        trade_type=row.trade_type,
        shares=row.shares,
        price=row.price,
        profit_loss=row.profit_loss,
        like_count=row.like_count,
        liked_by_me=liked_by_me,
        comments=comments,
    )


class PostRepositoryAdapter(PostRepository):
    """SQLAlchemy adapter for the social feed."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def feed(self, viewer_id: int) -> list[Post]:
        with self._session_factory() as session:
            rows = session.scalars(
                select(PostModel)
                .options(
                    selectinload(PostModel.author),
                    selectinload(PostModel.comments).selectinload(CommentModel.author),
                )
                .order_by(PostModel.created_at.desc(), PostModel.id.desc())
            ).all()
            liked = set(
                session.scalars(
                    select(PostLikeModel.post_id).where(PostLikeModel.user_id == viewer_id)
                )
            )
            return [
                _post(row, row.id in liked, [_comment(c) for c in row.comments])
                for row in rows
            ]

    def create(self, author_id: int, post: NewPost) -> Post:
        with self._session_factory.begin() as session:
            row = PostModel(
                user_id=author_id,
                content=post.content,
                type=post.type,
                stock_symbol=post.stock_symbol,
                trade_type=post.trade_type,
                shares=post.shares,
                price=post.price,
                profit_loss=post.profit_loss,
                like_count=0,
            )
            session.add(row)
            session.flush()
            return _post(row, liked_by_me=False, comments=[])

    def add_comment(self, post_id: int, author_id: int, content: str) -> Comment:
        with self._session_factory.begin() as session:
            if session.get(PostModel, post_id) is None:
                raise PostNotFoundError(post_id)
            row = CommentModel(post_id=post_id, user_id=author_id, content=content)
            session.add(row)
            session.flush()
            return _comment(row)

    def like(self, post_id: int, user_id: int) -> LikeState:
        try:
            with self._session_factory.begin() as session:
                self._require_post(session, post_id)
                already = session.scalar(
                    select(PostLikeModel.id).where(
                        PostLikeModel.post_id == post_id, PostLikeModel.user_id == user_id
                    )
                )
                if already is None:
                    session.add(PostLikeModel(post_id=post_id, user_id=user_id))
                    session.flush()
                    session.execute(
                        update(PostModel)
                        .where(PostModel.id == post_id)
                        .values(like_count=PostModel.like_count + 1)
                    )
                return LikeState(
                    post_id=post_id, like_count=self._count(session, post_id), liked=True
                )
        except IntegrityError:
            # a concurrent request inserted the same like first and counted it
            logger.debug("Concurrent like on post id=%d by user id=%d", post_id, user_id)
            with self._session_factory() as session:
                return LikeState(
                    post_id=post_id, like_count=self._count(session, post_id), liked=True
                )

    def unlike(self, post_id: int, user_id: int) -> LikeState:
        with self._session_factory.begin() as session:
            self._require_post(session, post_id)
            result = session.execute(
                delete(PostLikeModel).where(
                    PostLikeModel.post_id == post_id, PostLikeModel.user_id == user_id
                )
            )
            if result.rowcount:
                session.execute(
                    update(PostModel)
                    .where(PostModel.id == post_id, PostModel.like_count > 0)
                    .values(like_count=PostModel.like_count - 1)
                )
            return LikeState(post_id=post_id, like_count=self._count(session, post_id), liked=False)

    @staticmethod
    def _require_post(session: Session, post_id: int) -> None:
        if session.scalar(select(PostModel.id).where(PostModel.id == post_id)) is None:
            raise PostNotFoundError(post_id)

    @staticmethod
    def _count(session: Session, post_id: int) -> int:
        return session.scalar(select(PostModel.like_count).where(PostModel.id == post_id)) or 0
