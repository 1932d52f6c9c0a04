"""Registration, login and current-user endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.api.deps import get_current_user, get_user_repository
from app.core.config import Settings, get_settings
from app.models.user import User
from app.repositories.users import UserRepository
from app.schemas.auth import AuthResponse, LoginRequest, MeResponse, RegisterRequest, UserOut
from app.schemas.movies import ErrorResponse
from app.services import identity

router = APIRouter()


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
def register(
    body: RegisterRequest,
    users: Annotated[UserRepository, Depends(get_user_repository)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AuthResponse:
    """
    Create an account. Returns the user and a token valid for
    REGISTER_TOKEN_EXPIRE_MINUTES (1 hour by default).
    """
    result = identity.register(
        users,
        settings,
        username=body.username,
        email=body.email,
        password=body.password,
        confirm_password=body.confirm_password,
    )
    return AuthResponse(user=UserOut.model_validate(result.user), token=result.token)


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
def login(
    body: LoginRequest,
    users: Annotated[UserRepository, Depends(get_user_repository)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AuthResponse:
    """
    Authenticate with username and password; returns the user and a token valid
    for LOGIN_TOKEN_EXPIRE_MINUTES (7 days by default).
    Include the token in the Authorization header as: Bearer <token>
    """
    result = identity.login(users, settings, username=body.username, password=body.password)
    return AuthResponse(user=UserOut.model_validate(result.user), token=result.token)


@router.get("/me", response_model=MeResponse, responses={401: {"model": ErrorResponse}})
def me(current_user: Annotated[User, Depends(get_current_user)]) -> MeResponse:
    """Return the authenticated user."""
    return MeResponse(user=UserOut.model_validate(current_user))
