"""
Use case: Comment on a post.

Input: AddCommentCommand (post_id, author_id, content)
Output: Comment
Side effects: Inserts a row in comments.
Failure cases: EmptyContentError, PostNotFoundError.
"""

import logging

from app.application.social.dtos import AddCommentCommand
from app.domain.social.entities import Comment
from app.domain.social.errors import EmptyContentError
from app.domain.social.ports import PostRepository

logger = logging.getLogger(__name__)


class AddCommentUseCase:
    def __init__(self, post_repo: PostRepository) -> None:
        self._post_repo = post_repo

    def execute(self, command: AddCommentCommand) -> Comment:
        content = command.content.strip()
        if not content:
            raise EmptyContentError("comment")
        comment = self._post_repo.add_comment(command.post_id, command.author_id, content)
        logger.info(
            "User id=%d commented on post id=%d", command.author_id, command.post_id
        )
        return comment
