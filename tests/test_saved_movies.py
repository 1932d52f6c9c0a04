"""Unit tests for app.services.saved_movies: owner scoping, ordering and not-found semantics."""

import unittest
from unittest.mock import MagicMock

from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.errors import InternalError, NotFoundError, ValidationError
from app.models import Base, User
from app.repositories.saved_movies import SavedMovieRepository
from app.services.saved_movies import delete_movie, list_movies, save_movie


def _session_factory() -> sessionmaker:
    """Fresh in-memory SQLite database with the app schema."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


class _SavedMoviesTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.db = _session_factory()()
        self.repo = SavedMovieRepository(self.db)
        self.alice = self._user("alice", "a@x.com")
        self.bob = self._user("bob", "b@x.com")

    def tearDown(self) -> None:
        self.db.close()

    def _user(self, username: str, email: str) -> User:
        user = User(username=username, email=email, password_hash="x", display_name=username)
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user


class TestSaveMovie(_SavedMoviesTestCase):
    def test_saves_row_for_user(self) -> None:
        row = save_movie(self.repo, self.alice, 603, "The Matrix", "1999", None)
        self.assertEqual(row.user_id, self.alice.id)
        self.assertEqual(row.movie_id, 603)
        self.assertEqual(row.title, "The Matrix")
        self.assertEqual(row.year, "1999")
        self.assertIsNone(row.poster)
        self.assertIsNotNone(row.created_at)

    def test_requires_movie_id_and_title(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            save_movie(self.repo, self.alice, None, "  ")
        self.assertEqual(ctx.exception.message, "movie_id & title required")
        self.assertEqual([e["field"] for e in ctx.exception.errors], ["movie_id", "title"])
        self.assertEqual(list_movies(self.repo, self.alice), [])

    def test_store_fault_is_internal_error(self) -> None:
        repo = MagicMock()
        repo.add.side_effect = OperationalError("INSERT", {}, Exception("down"))
        with self.assertRaises(InternalError) as ctx:
            save_movie(repo, self.alice, 603, "The Matrix")
        self.assertEqual(ctx.exception.message, "save failed")


class TestListMovies(_SavedMoviesTestCase):
    def test_newest_first(self) -> None:
        save_movie(self.repo, self.alice, 1, "First")
        save_movie(self.repo, self.alice, 2, "Second")
        save_movie(self.repo, self.alice, 3, "Third")
        self.assertEqual([r.movie_id for r in list_movies(self.repo, self.alice)], [3, 2, 1])

    def test_never_returns_other_users_rows(self) -> None:
        save_movie(self.repo, self.alice, 603, "The Matrix")
        save_movie(self.repo, self.bob, 13, "Forrest Gump")
        alice_rows = list_movies(self.repo, self.alice)
        self.assertEqual([r.movie_id for r in alice_rows], [603])
        self.assertTrue(all(r.user_id == self.alice.id for r in alice_rows))


class TestDeleteMovie(_SavedMoviesTestCase):
    def test_owner_can_delete(self) -> None:
        save_movie(self.repo, self.alice, 603, "The Matrix")
        delete_movie(self.repo, self.alice, 603)
        self.assertEqual(list_movies(self.repo, self.alice), [])

    def test_other_user_gets_not_found_and_row_survives(self) -> None:
        save_movie(self.repo, self.alice, 603, "The Matrix")
        with self.assertRaises(NotFoundError) as ctx:
            delete_movie(self.repo, self.bob, 603)
        self.assertEqual(ctx.exception.message, "movie not found")
        self.assertEqual(len(list_movies(self.repo, self.alice)), 1)

    def test_missing_row_is_not_found(self) -> None:
        with self.assertRaises(NotFoundError) as ctx:
            delete_movie(self.repo, self.alice, 42)
        self.assertEqual(ctx.exception.message, "movie not found")

    def test_ids_are_in_log_message(self) -> None:
        save_movie(self.repo, self.alice, 603, "The Matrix")
        with self.assertLogs("app.services.saved_movies", level="INFO") as logs:
            delete_movie(self.repo, self.alice, 603)
        self.assertIn(f"user_id={self.alice.id} movie_id=603", logs.output[-1])


if __name__ == "__main__":
    unittest.main()
