"""
Port interfaces (ABCs) for the social bounded context.

Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod

from app.domain.social.entities import Comment, LikeState, NewPost, Post


class PostRepository(ABC):
    """Port for the feed's posts, comments and likes."""

    @abstractmethod
    def feed(self, viewer_id: int) -> list[Post]:
        """Return every post newest first, with comments oldest first.

        `liked_by_me` is computed for `viewer_id`.
        """
        raise NotImplementedError

    @abstractmethod
    def create(self, author_id: int, post: NewPost) -> Post:
        """Persist a post and return it."""
        raise NotImplementedError

    @abstractmethod
    def add_comment(self, post_id: int, author_id: int, content: str) -> Comment:
        """Attach a comment to a post.

        Raises:
            PostNotFoundError: If the post does not exist.
        """
        raise NotImplementedError

    @abstractmethod
    def like(self, post_id: int, user_id: int) -> LikeState:
        """Record a like and increment the count, at most once per user.

        Runs in one transaction. Liking twice is a no-op.

        Raises:
            PostNotFoundError: If the post does not exist.
        """
        raise NotImplementedError

    @abstractmethod
    def unlike(self, post_id: int, user_id: int) -> LikeState:
        """Remove a like and decrement the count.

        Runs in one transaction. Unliking a post not liked is a no-op.

        Raises:
            PostNotFoundError: If the post does not exist.
        """
        raise NotImplementedError
