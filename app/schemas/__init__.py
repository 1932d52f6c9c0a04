"""Pydantic request/response schemas."""

from app.schemas.auth import (
    AuthResponse,
    LoginRequest,
    MeResponse,
    RegisterRequest,
    UserOut,
)
from app.schemas.health import HealthResponse
from app.schemas.movies import (
    ErrorResponse,
    MessageResponse,
    MovieDetails,
    MovieListResponse,
    MovieSummary,
    SavedMovieOut,
    SavedMoviesResponse,
    SaveMovieRequest,
    SaveMovieResponse,
)

__all__ = [
    "AuthResponse",
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "MeResponse",
    "MessageResponse",
    "MovieDetails",
    "MovieListResponse",
    "MovieSummary",
    "RegisterRequest",
    "SaveMovieRequest",
    "SaveMovieResponse",
    "SavedMovieOut",
    "SavedMoviesResponse",
    "UserOut",
]
