"""
Domain-specific errors for the social bounded context.

These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from app.domain.errors import NotFoundError, RuleViolationError


class PostNotFoundError(NotFoundError):
    """Raised when a post id does not resolve to a post."""

    def __init__(self, post_id: int) -> None:
        super().__init__("Post not found")
        self.post_id = post_id


class EmptyContentError(RuleViolationError):
    """Raised when a post or comment has no text."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"The {kind} content cannot be empty")
        self.kind = kind
