"""
XP bookkeeping shared by the learning repositories.

Runs inside the caller's transaction; the user row is locked
(SELECT ... FOR UPDATE where the database supports it) so concurrent
awards serialise instead of overwriting each other.
"""

from sqlalchemy.orm import Session

from app.domain.identity.errors import UserNotFoundError
from app.domain.learning.progression import level_for_xp
from app.infrastructure.persistence.models import UserModel


def lock_user(session: Session, user_id: int) -> UserModel:
    user = session.get(UserModel, user_id, with_for_update=True)
    if user is None:
        raise UserNotFoundError(user_id)
    return user


def award_xp(user: UserModel, amount: int, xp_per_level: int) -> None:
    """Add XP to a locked user row and recompute the level."""
    user.xp = user.xp + amount
    user.level = level_for_xp(user.xp, xp_per_level)
