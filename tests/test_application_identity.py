"""
Tests for the identity application layer (use cases).

Repositories and the password hasher are mocked.
"""

from unittest.mock import MagicMock

import pytest

from app.application.identity.authenticate_user import AuthenticateUserUseCase
from app.application.identity.dtos import CredentialsCommand, UpdateProfileCommand
from app.application.identity.get_current_user import GetCurrentUserUseCase
from app.application.identity.register_user import RegisterUserUseCase
from app.application.identity.update_profile import UpdateProfileUseCase
from app.domain.identity.entities import User
from app.domain.identity.errors import (
    InvalidCredentialsError,
    NotAuthenticatedError,
    UsernameTakenError,
)
from app.domain.identity.ports import PasswordHasher, UserRepository


def _user(**overrides) -> User:
    values = dict(id=1, username="alice", password_hash="hashed")
    values.update(overrides)
    return User(**values)


@pytest.fixture
def repo() -> MagicMock:
    return MagicMock(spec=UserRepository)


@pytest.fixture
def hasher() -> MagicMock:
    fake = MagicMock(spec=PasswordHasher)
    fake.hash.return_value = "hashed"
    fake.verify.side_effect = lambda password, hashed: password == "right-password"
    return fake


class TestRegisterUserUseCase:
    """Tests for RegisterUserUseCase."""

    def test_stores_hash_not_password(self, repo: MagicMock, hasher: MagicMock) -> None:
        """Only the hash reaches the repository."""
        repo.get_by_username.return_value = None
        repo.create.return_value = _user()
        profile = RegisterUserUseCase(repo, hasher).execute(
            CredentialsCommand("alice", "right-password")
        )
        repo.create.assert_called_once_with(username="alice", password_hash="hashed")
        assert profile.username == "alice"
        assert not hasattr(profile, "password_hash")

    def test_taken_username_rejected(self, repo: MagicMock, hasher: MagicMock) -> None:
        repo.get_by_username.return_value = _user()
        with pytest.raises(UsernameTakenError):
            RegisterUserUseCase(repo, hasher).execute(CredentialsCommand("alice", "x" * 8))
        repo.create.assert_not_called()


class TestAuthenticateUserUseCase:
    """Tests for AuthenticateUserUseCase."""

    def test_unknown_username(self, repo: MagicMock, hasher: MagicMock) -> None:
        repo.get_by_username.return_value = None
        with pytest.raises(InvalidCredentialsError, match="Incorrect username."):
            AuthenticateUserUseCase(repo, hasher).execute(CredentialsCommand("bob", "pw"))

    def test_wrong_password(self, repo: MagicMock, hasher: MagicMock) -> None:
        repo.get_by_username.return_value = _user()
        with pytest.raises(InvalidCredentialsError, match="Incorrect password."):
            AuthenticateUserUseCase(repo, hasher).execute(CredentialsCommand("alice", "nope"))

    def test_success_returns_profile(self, repo: MagicMock, hasher: MagicMock) -> None:
        repo.get_by_username.return_value = _user(xp=1200, level=2)
        profile = AuthenticateUserUseCase(repo, hasher).execute(
            CredentialsCommand("alice", "right-password")
        )
        assert profile.level == 2


class TestGetCurrentUserUseCase:
    """Tests for GetCurrentUserUseCase."""

    def test_no_session(self, repo: MagicMock) -> None:
        with pytest.raises(NotAuthenticatedError):
            GetCurrentUserUseCase(repo).execute(None)

    def test_dangling_session(self, repo: MagicMock) -> None:
        """A session pointing at a deleted user counts as logged out."""
        repo.get_by_id.return_value = None
        with pytest.raises(NotAuthenticatedError):
            GetCurrentUserUseCase(repo).execute(42)


class TestUpdateProfileUseCase:
    """Tests for UpdateProfileUseCase."""

    def test_only_provided_fields_change(self, repo: MagicMock) -> None:
        """None fields are dropped from the change set."""
        repo.update_profile.return_value = _user(
            bio="Trader", alpaca_api_key="k", alpaca_secret_key="s"
        )
        profile = UpdateProfileUseCase(repo).execute(
            UpdateProfileCommand(user_id=1, bio="Trader", alpaca_api_key="k", alpaca_secret_key="s")
        )
        user_id, changes = repo.update_profile.call_args.args
        assert user_id == 1
        assert changes.as_dict() == {
            "bio": "Trader",
            "alpaca_api_key": "k",
            "alpaca_secret_key": "s",
        }
        assert profile.has_brokerage_keys is True
