"""ORM model for a movie saved to a user's personal list."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, func

from app.models.base import Base


class SavedMovie(Base):
    """
    Association between one user and one TMDB movie id.

    Ownership (user_id) never changes; reads and deletes always filter by it.
    """

    __tablename__ = "saved_movies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    movie_id = Column(Integer, nullable=False, index=True)
    title = Column(String(512), nullable=False)
    year = Column(String(16), nullable=True)
    poster = Column(String(1024), nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
