"""Store adapters: parameterized reads and writes against the users and saved_movies tables."""

from app.repositories.saved_movies import SavedMovieRepository
from app.repositories.users import UserRepository

__all__ = ["SavedMovieRepository", "UserRepository"]
