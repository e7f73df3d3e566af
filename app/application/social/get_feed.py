"""
Use case: The social feed.

Input: viewer id
Output: list[Post], newest first
Side effects: None.
Failure cases: None.
"""

from app.domain.social.entities import Post
from app.domain.social.ports import PostRepository


class GetFeedUseCase:
    """Reverse-chronological feed; no ranking beyond the timestamp."""

    def __init__(self, post_repo: PostRepository) -> None:
        self._post_repo = post_repo

    def execute(self, viewer_id: int) -> list[Post]:
        return self._post_repo.feed(viewer_id)
