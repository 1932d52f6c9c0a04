"""Saved-movie rows, always scoped by owning user id."""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.saved_movie import SavedMovie


class SavedMovieRepository:
    def __init__(self, session: Session) -> None:
        self._session = session

    def add(
        self,
        user_id: int,
        movie_id: int,
        title: str,
        year: str | None,
        poster: str | None,
    ) -> SavedMovie:
        row = SavedMovie(
            user_id=user_id,
            movie_id=movie_id,
            title=title,
            year=year,
            poster=poster,
        )
        try:
            self._session.add(row)
            self._session.commit()
        except SQLAlchemyError:
            self._session.rollback()
            raise
        self._session.refresh(row)
        return row

    def list_for_user(self, user_id: int) -> list[SavedMovie]:
        """Rows owned by user_id, newest first."""
        return (
            self._session.query(SavedMovie)
            .filter(SavedMovie.user_id == user_id)
            .order_by(SavedMovie.created_at.desc(), SavedMovie.id.desc())
            .all()
        )

    def delete_for_user(self, user_id: int, movie_id: int) -> int:
        """Delete rows matching both user_id and movie_id; return how many were removed."""
        try:
            deleted = (
                self._session.query(SavedMovie)
                .filter(SavedMovie.user_id == user_id, SavedMovie.movie_id == movie_id)
                .delete(synchronize_session=False)
            )
            self._session.commit()
        except SQLAlchemyError:
            self._session.rollback()
            raise
        return deleted
