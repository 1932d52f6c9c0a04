"""ORM model for registered users."""

from sqlalchemy import Column, DateTime, Integer, String, func

from app.models.base import Base


class User(Base):
    """
    Registered account for JWT authentication.

    username and email are each unique; the database constraint is the
    authoritative guard against concurrent duplicate registrations.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    display_name = Column(String(255), nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
