"""Identity service: account registration, login, and token issuance."""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING

from pydantic import EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.core.errors import AuthError, ConflictError, InternalError, ValidationError
from app.core.security import (
    EMAIL_MAX_LEN,
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
    create_access_token,
    hash_password,
    verify_password,
)
from app.models.user import User
from app.repositories.users import UserRepository

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)

USERNAME_TAKEN = "username already taken"
EMAIL_TAKEN = "email already used"
INVALID_CREDENTIALS = "invalid credentials"

_email_adapter = TypeAdapter(EmailStr)


@lru_cache(maxsize=1)
def _dummy_password_hash() -> str:
    """Hash verified against for unknown usernames; both login failures then cost one bcrypt check."""
    return hash_password("marquee-dummy-password")


@dataclass(frozen=True)
class AuthResult:
    """Authenticated user and the bearer token issued for it."""

    user: User
    token: str


def _field_error(field: str, message: str) -> dict[str, str]:
    return {"field": field, "message": message}


def _is_valid_email(email: str) -> bool:
    try:
        _email_adapter.validate_python(email)
    except PydanticValidationError:
        return False
    return True


def validate_registration(
    username: str | None,
    email: str | None,
    password: str | None,
    confirm_password: str | None,
) -> list[dict[str, str]]:
    """Return every structural violation in a registration form (empty list when valid)."""
    errors: list[dict[str, str]] = []
    if not username or len(username.strip()) < USERNAME_MIN_LEN:
        errors.append(_field_error("username", f"username min {USERNAME_MIN_LEN} chars"))
    elif len(username.strip()) > USERNAME_MAX_LEN:
        errors.append(_field_error("username", f"username max {USERNAME_MAX_LEN} chars"))
    if not email or len(email.strip()) > EMAIL_MAX_LEN or not _is_valid_email(email.strip()):
        errors.append(_field_error("email", "invalid email"))
    if not password or len(password) < PASSWORD_MIN_LEN:
        errors.append(_field_error("password", f"password min {PASSWORD_MIN_LEN} chars"))
    elif len(password) > PASSWORD_MAX_LEN:
        errors.append(_field_error("password", f"password max {PASSWORD_MAX_LEN} chars"))
    if confirm_password is None:
        errors.append(_field_error("confirmPassword", "confirmPassword is required"))
    elif password != confirm_password:
        errors.append(_field_error("confirmPassword", "passwords do not match"))
    return errors


def _raise_if_taken(users: UserRepository, username: str, email: str) -> None:
    if users.get_by_username(username) is not None:
        raise ConflictError(USERNAME_TAKEN)
    if users.get_by_email(email) is not None:
        raise ConflictError(EMAIL_TAKEN)


def register(
    users: UserRepository,
    settings: "Settings",
    username: str | None,
    email: str | None,
    password: str | None,
    confirm_password: str | None,
) -> AuthResult:
    """
    Create an account and issue a short-lived token.

    Raises ValidationError (all violations at once) before touching the store,
    ConflictError for a taken username or email, InternalError on store faults.
    """
    errors = validate_registration(username, email, password, confirm_password)
    if errors:
        raise ValidationError("validation failed", errors=errors)
    username = username.strip()
    email = email.strip()

    try:
        # Fast path only; the unique constraints below are what actually guarantee uniqueness.
        _raise_if_taken(users, username, email)
        password_hash = hash_password(password)
        user = users.create(
            username=username,
            email=email,
            password_hash=password_hash,
            display_name=username,
        )
    except IntegrityError as e:
        # Lost a race with a concurrent registration; report which field collided.
        _raise_if_taken(users, username, email)
        logger.exception("User insert violated a constraint with no visible duplicate")
        raise InternalError("internal error") from e
    except SQLAlchemyError as e:
        logger.exception("User registration failed on the store")
        raise InternalError("internal error") from e

    token = create_access_token(
        sub=user.id, expires_minutes=settings.REGISTER_TOKEN_EXPIRE_MINUTES
    )
    logger.info("User registered: user_id=%s", user.id, extra={"user_id": user.id})
    return AuthResult(user=user, token=token)


def login(
    users: UserRepository,
    settings: "Settings",
    username: str | None,
    password: str | None,
) -> AuthResult:
    """
    Verify credentials and issue a long-lived token.

    Unknown username and wrong password raise the same AuthError so callers
    cannot tell which one was wrong.
    """
    errors: list[dict[str, str]] = []
    if not username:
        errors.append(_field_error("username", "username is required"))
    if not password:
        errors.append(_field_error("password", "password is required"))
    if errors:
        raise ValidationError("validation failed", errors=errors)

    try:
        user = users.get_by_username(username)
    except SQLAlchemyError as e:
        logger.exception("User lookup failed on the store")
        raise InternalError("internal error") from e
    if user is None:
        verify_password(password, _dummy_password_hash())
        logger.info("Login rejected: unknown_username", extra={"reason": "unknown_username"})
        raise AuthError(INVALID_CREDENTIALS)
    if not verify_password(password, user.password_hash):
        logger.info("Login rejected: wrong_password", extra={"reason": "wrong_password"})
        raise AuthError(INVALID_CREDENTIALS)

    token = create_access_token(
        sub=user.id, expires_minutes=settings.LOGIN_TOKEN_EXPIRE_MINUTES
    )
    logger.info("User logged in: user_id=%s", user.id, extra={"user_id": user.id})
    return AuthResult(user=user, token=token)
