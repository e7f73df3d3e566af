"""
Dependency injection for the identity bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
"""

from fastapi import Depends
from sqlalchemy.orm import Session, sessionmaker

from app.application.identity.authenticate_user import AuthenticateUserUseCase
from app.application.identity.get_current_user import GetCurrentUserUseCase
from app.application.identity.register_user import RegisterUserUseCase
from app.application.identity.update_profile import UpdateProfileUseCase
from app.core.config import settings
from app.domain.identity.ports import PasswordHasher
from app.infrastructure.identity.bcrypt_hasher import BcryptPasswordHasher
from app.infrastructure.identity.user_repository import UserRepositoryAdapter
from app.interfaces.dependencies import get_session_factory


def get_password_hasher() -> PasswordHasher:
    return BcryptPasswordHasher(rounds=settings.bcrypt_rounds)


def get_register_user_use_case(
    session_factory: sessionmaker[Session] = Depends(get_session_factory),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> RegisterUserUseCase:
    """Build RegisterUserUseCase with its infrastructure dependencies."""
    return RegisterUserUseCase(UserRepositoryAdapter(session_factory), hasher)


def get_authenticate_user_use_case(
    session_factory: sessionmaker[Session] = Depends(get_session_factory),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> AuthenticateUserUseCase:
    """Build AuthenticateUserUseCase with its infrastructure dependencies."""
    return AuthenticateUserUseCase(UserRepositoryAdapter(session_factory), hasher)


def get_current_user_use_case(
    session_factory: sessionmaker[Session] = Depends(get_session_factory),
) -> GetCurrentUserUseCase:
    """Build GetCurrentUserUseCase with its infrastructure dependencies."""
    return GetCurrentUserUseCase(UserRepositoryAdapter(session_factory))


def get_update_profile_use_case(
    session_factory: sessionmaker[Session] = Depends(get_session_factory),
) -> UpdateProfileUseCase:
    """Build UpdateProfileUseCase with its infrastructure dependencies."""
    return UpdateProfileUseCase(UserRepositoryAdapter(session_factory))
