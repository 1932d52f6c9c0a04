"""Shared FastAPI dependencies: store adapters, catalog client, and the current user."""

from typing import Annotated

from fastapi import Depends, Request, Security
from fastapi.security import APIKeyHeader
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.models.user import User
from app.repositories.saved_movies import SavedMovieRepository
from app.repositories.users import UserRepository
from app.services.catalog import CatalogClient
from app.services.token_verifier import resolve_user

# Raw header so the exact "Bearer " prefix check stays in the token verifier.
authorization_header = APIKeyHeader(
    name="Authorization",
    auto_error=False,
    description="Bearer <token> from /register or /login",
)


def get_user_repository(db: Annotated[Session, Depends(get_db)]) -> UserRepository:
    return UserRepository(db)


def get_saved_movie_repository(
    db: Annotated[Session, Depends(get_db)],
) -> SavedMovieRepository:
    return SavedMovieRepository(db)


def get_catalog_client(request: Request) -> CatalogClient:
    """Process-wide TMDB client created in the app lifespan."""
    return request.app.state.catalog


def get_current_user(
    authorization: Annotated[str | None, Security(authorization_header)],
    users: Annotated[UserRepository, Depends(get_user_repository)],
) -> User:
    """Dependency: require a valid Bearer JWT and return the user. Raises AuthError (401) otherwise."""
    return resolve_user(authorization, users)
