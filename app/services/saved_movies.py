"""Saved-list manager: a user's personal list of catalog movies."""

import logging

from sqlalchemy.exc import SQLAlchemyError

from app.core.errors import InternalError, NotFoundError, ValidationError
from app.models.saved_movie import SavedMovie
from app.models.user import User
from app.repositories.saved_movies import SavedMovieRepository

logger = logging.getLogger(__name__)


def save_movie(
    repo: SavedMovieRepository,
    user: User,
    movie_id: int | None,
    title: str | None,
    year: str | None = None,
    poster: str | None = None,
) -> SavedMovie:
    """Add a movie to user's list. movie_id and title are required."""
    if not movie_id or not title or not title.strip():
        errors = []
        if not movie_id:
            errors.append({"field": "movie_id", "message": "movie_id is required"})
        if not title or not title.strip():
            errors.append({"field": "title", "message": "title is required"})
        raise ValidationError("movie_id & title required", errors=errors)
    try:
        row = repo.add(
            user_id=user.id,
            movie_id=movie_id,
            title=title.strip(),
            year=year or None,
            poster=poster or None,
        )
    except SQLAlchemyError as e:
        logger.exception(
            "Save movie failed: user_id=%s movie_id=%s",
            user.id,
            movie_id,
            extra={"user_id": user.id, "movie_id": movie_id},
        )
        raise InternalError("save failed") from e
    logger.info(
        "Movie saved: user_id=%s movie_id=%s",
        user.id,
        movie_id,
        extra={"user_id": user.id, "movie_id": movie_id},
    )
    return row


def list_movies(repo: SavedMovieRepository, user: User) -> list[SavedMovie]:
    """All movies saved by user, newest first."""
    try:
        return repo.list_for_user(user.id)
    except SQLAlchemyError as e:
        logger.exception("Fetch saved movies failed: user_id=%s", user.id, extra={"user_id": user.id})
        raise InternalError("fetch failed") from e


def delete_movie(repo: SavedMovieRepository, user: User, movie_id: int) -> None:
    """
    Remove movie_id from user's list.

    Raises NotFoundError when user has no such row, including when the row
    belongs to someone else.
    """
    try:
        deleted = repo.delete_for_user(user.id, movie_id)
    except SQLAlchemyError as e:
        logger.exception(
            "Delete movie failed: user_id=%s movie_id=%s",
            user.id,
            movie_id,
            extra={"user_id": user.id, "movie_id": movie_id},
        )
        raise InternalError("delete failed") from e
    if deleted == 0:
        raise NotFoundError("movie not found")
    logger.info(
        "Movie removed: user_id=%s movie_id=%s",
        user.id,
        movie_id,
        extra={"user_id": user.id, "movie_id": movie_id},
    )
