"""
Use case: Like or unlike a post.

Input: LikeCommand (post_id, user_id)
Output: LikeState (post_id, like_count, liked)
Side effects: Inserts/deletes a post_likes row and adjusts posts.like_count
    in the same transaction.
Failure cases: PostNotFoundError.

Both operations are idempotent per user: the count moves at most once.
"""

import logging

from app.application.social.dtos import LikeCommand
from app.domain.social.entities import LikeState
from app.domain.social.ports import PostRepository

logger = logging.getLogger(__name__)


class LikePostUseCase:
    def __init__(self, post_repo: PostRepository) -> None:
        self._post_repo = post_repo

    def execute(self, command: LikeCommand) -> LikeState:
        state = self._post_repo.like(command.post_id, command.user_id)
        logger.debug("Post id=%d like_count=%d", state.post_id, state.like_count)
        return state


class UnlikePostUseCase:
    def __init__(self, post_repo: PostRepository) -> None:
        self._post_repo = post_repo

    def execute(self, command: LikeCommand) -> LikeState:
        state = self._post_repo.unlike(command.post_id, command.user_id)
        logger.debug("Post id=%d like_count=%d", state.post_id, state.like_count)
        return state
