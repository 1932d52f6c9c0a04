"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.saved_movie import SavedMovie
from app.models.user import User

__all__ = ["Base", "SavedMovie", "User"]
