"""User lookups and inserts."""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.user import User


class UserRepository:
    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, user_id: int) -> User | None:
        return self._session.query(User).filter(User.id == user_id).first()

    def get_by_username(self, username: str) -> User | None:
        return self._session.query(User).filter(User.username == username).first()

    def get_by_email(self, email: str) -> User | None:
        return self._session.query(User).filter(User.email == email).first()

    def create(
        self,
        username: str,
        email: str,
        password_hash: str,
        display_name: str | None,
    ) -> User:
        """
        Insert one user in its own transaction and return it with id and created_at loaded.

        Rolls back and re-raises on any store error (IntegrityError for a
        duplicate username or email).
        """
        user = User(
            username=username,
            email=email,
            password_hash=password_hash,
            display_name=display_name,
        )
        try:
            self._session.add(user)
            self._session.commit()
        except SQLAlchemyError:
            self._session.rollback()
            raise
        self._session.refresh(user)
        return user
