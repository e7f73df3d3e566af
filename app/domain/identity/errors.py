"""
Domain-specific errors for the identity bounded context.

These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from app.domain.errors import AuthenticationError, NotFoundError, RuleViolationError


class UsernameTakenError(RuleViolationError):
    """Raised when registering a username that already exists."""

    def __init__(self, username: str) -> None:
        super().__init__("Username already exists")
        self.username = username


class InvalidCredentialsError(RuleViolationError):
    """Raised when a login attempt fails.

    The message tells the client which half of the credentials was wrong,
    matching what the login form displays.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class NotAuthenticatedError(AuthenticationError):
    """Raised when a request needs a session and has none."""

    def __init__(self) -> None:
        super().__init__("Not logged in")


class UserNotFoundError(NotFoundError):
    """Raised when a user id does not resolve to a user."""

    def __init__(self, user_id: int) -> None:
        super().__init__(f"User not found: {user_id}")
        self.user_id = user_id
