"""Saved-movie list endpoints; every operation is scoped to the authenticated user."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.api.deps import get_current_user, get_saved_movie_repository
from app.models.user import User
from app.repositories.saved_movies import SavedMovieRepository
from app.schemas.movies import (
    ErrorResponse,
    MessageResponse,
    SavedMovieOut,
    SavedMoviesResponse,
    SaveMovieRequest,
    SaveMovieResponse,
)
from app.services import saved_movies

router = APIRouter()


@router.post(
    "/movies/save",
    response_model=SaveMovieResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
def save_movie(
    body: SaveMovieRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    repo: Annotated[SavedMovieRepository, Depends(get_saved_movie_repository)],
) -> SaveMovieResponse:
    """Add a catalog movie to the current user's list."""
    row = saved_movies.save_movie(
        repo,
        current_user,
        movie_id=body.movie_id,
        title=body.title,
        year=body.year,
        poster=body.poster,
    )
    return SaveMovieResponse(movie=SavedMovieOut.model_validate(row))


@router.get("/mymovies", response_model=SavedMoviesResponse, responses={401: {"model": ErrorResponse}})
def list_my_movies(
    current_user: Annotated[User, Depends(get_current_user)],
    repo: Annotated[SavedMovieRepository, Depends(get_saved_movie_repository)],
) -> SavedMoviesResponse:
    """Current user's saved movies, newest first."""
    rows = saved_movies.list_movies(repo, current_user)
    return SavedMoviesResponse(movies=[SavedMovieOut.model_validate(r) for r in rows])


@router.delete(
    "/movies/{movie_id}",
    response_model=MessageResponse,
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def delete_movie(
    movie_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    repo: Annotated[SavedMovieRepository, Depends(get_saved_movie_repository)],
) -> MessageResponse:
    """Remove a movie (by TMDB id) from the current user's list."""
    saved_movies.delete_movie(repo, current_user, movie_id)
    return MessageResponse(message="movie removed")
