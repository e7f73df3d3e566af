"""
Use case: Publish a post to the feed.

Input: CreatePostCommand
Output: Post
Side effects: Inserts a row in posts.
Failure cases: EmptyContentError.
"""

import logging

from app.application.social.dtos import CreatePostCommand
from app.domain.social.entities import NewPost, Post
from app.domain.social.ports import PostRepository

logger = logging.getLogger(__name__)


class CreatePostUseCase:
    def __init__(self, post_repo: PostRepository) -> None:
        self._post_repo = post_repo

    def execute(self, command: CreatePostCommand) -> Post:
        new_post = NewPost(
            content=command.content.strip(),
            type=command.type,
            stock_symbol=command.stock_symbol.upper() if command.stock_symbol else None,
            trade_type=command.trade_type,
            shares=command.shares,
            price=command.price,
            profit_loss=command.profit_loss,
        )
        post = self._post_repo.create(command.author_id, new_post)
        logger.info("User id=%d published post id=%d", command.author_id, post.id)
        return post
