"""Tests for the create_user CLI script."""

import unittest
from unittest.mock import patch

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.models import Base, User
from app.scripts import create_user


class TestCreateUserScript(unittest.TestCase):
    def setUp(self) -> None:
        engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(engine)
        self.session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
        patcher = patch.object(create_user, "SessionLocal", self.session_factory)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_creates_user(self) -> None:
        self.assertEqual(create_user.main(["alice", "a@x.com", "secret1"]), 0)
        db = self.session_factory()
        try:
            user = db.query(User).filter(User.username == "alice").one()
            self.assertEqual(user.display_name, "alice")
            self.assertNotEqual(user.password_hash, "secret1")
        finally:
            db.close()

    def test_duplicate_username_fails(self) -> None:
        create_user.main(["alice", "a@x.com", "secret1"])
        self.assertEqual(create_user.main(["alice", "other@x.com", "secret1"]), 1)

    def test_short_password_fails(self) -> None:
        self.assertEqual(create_user.main(["alice", "a@x.com", "123"]), 1)


if __name__ == "__main__":
    unittest.main()
