"""
FastAPI router for the identity bounded context.

Registration, login/logout against a signed session cookie, the
current-user check and profile updates. All routes delegate to use
cases; error mapping is handled by centralized error handlers.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request

from app.application.identity.authenticate_user import AuthenticateUserUseCase
from app.application.identity.dtos import CredentialsCommand, UpdateProfileCommand
from app.application.identity.get_current_user import GetCurrentUserUseCase
from app.application.identity.register_user import RegisterUserUseCase
from app.application.identity.update_profile import UpdateProfileUseCase
from app.interfaces.dependencies import (
    SESSION_USER_KEY,
    get_current_user_id,
    get_session_user_id,
)
from app.interfaces.identity.dependencies import (
    get_authenticate_user_use_case,
    get_current_user_use_case,
    get_register_user_use_case,
    get_update_profile_use_case,
)
from app.interfaces.identity.schemas import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    UpdateProfileRequest,
    UserResponse,
)
from app.interfaces.schemas import ErrorResponse, MessageResponse

router = APIRouter(tags=["identity"])


@router.post(
    "/register",
    response_model=AuthResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Register",
    description="Create an account and log it in.",
)
def register(
    body: RegisterRequest,
    request: Request,
    use_case: RegisterUserUseCase = Depends(get_register_user_use_case),
) -> AuthResponse:
    profile = use_case.execute(CredentialsCommand(username=body.username, password=body.password))
    request.session.clear()
    request.session[SESSION_USER_KEY] = profile.id
    return AuthResponse(message="Registration successful", user=UserResponse.from_profile(profile))


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Log in",
)
def login(
    body: LoginRequest,
    request: Request,
    use_case: AuthenticateUserUseCase = Depends(get_authenticate_user_use_case),
) -> AuthResponse:
    profile = use_case.execute(CredentialsCommand(username=body.username, password=body.password))
    request.session.clear()
    request.session[SESSION_USER_KEY] = profile.id
    return AuthResponse(message="Login successful", user=UserResponse.from_profile(profile))


@router.post("/logout", response_model=MessageResponse, summary="Log out")
def logout(request: Request) -> MessageResponse:
    request.session.clear()
    return MessageResponse(message="Logout successful")


@router.get(
    "/user",
    response_model=UserResponse,
    responses={401: {"model": ErrorResponse}},
    summary="Current user",
)
def current_user(
    user_id: Optional[int] = Depends(get_session_user_id),
    use_case: GetCurrentUserUseCase = Depends(get_current_user_use_case),
) -> UserResponse:
    return UserResponse.from_profile(use_case.execute(user_id))


@router.put(
    "/user/profile",
    response_model=UserResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
    summary="Update profile",
    description="Change only the provided profile fields, including brokerage keys.",
)
def update_profile(
    body: UpdateProfileRequest,
    user_id: int = Depends(get_current_user_id),
    use_case: UpdateProfileUseCase = Depends(get_update_profile_use_case),
) -> UserResponse:
    profile = use_case.execute(
        UpdateProfileCommand(
            user_id=user_id,
            display_name=body.display_name,
            bio=body.bio,
            avatar_url=body.avatar_url,
            education=body.education,
            occupation=body.occupation,
            alpaca_api_key=body.alpaca_api_key,
            alpaca_secret_key=body.alpaca_secret_key,
        )
    )
    return UserResponse.from_profile(profile)
