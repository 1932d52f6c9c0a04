"""Resolve an Authorization header value to the user it was issued for."""

import logging

import jwt
from sqlalchemy.exc import SQLAlchemyError

from app.core.errors import AuthError, InternalError
from app.core.security import BEARER_PREFIX, decode_access_token
from app.models.user import User
from app.repositories.users import UserRepository

logger = logging.getLogger(__name__)

NO_TOKEN = "no token"
INVALID_TOKEN = "invalid token"


def extract_bearer_token(authorization: str | None) -> str:
    """Return the token part of 'Bearer <token>'. Raises AuthError('no token') otherwise."""
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise AuthError(NO_TOKEN)
    token = authorization[len(BEARER_PREFIX):].strip()
    if not token:
        raise AuthError(NO_TOKEN)
    return token


def _user_id_from_token(token: str) -> int:
    try:
        payload = decode_access_token(token)
    except jwt.PyJWTError as e:
        logger.info("Token rejected: %s", type(e).__name__, extra={"reason": type(e).__name__})
        raise AuthError(INVALID_TOKEN) from e
    try:
        return int(payload["sub"])
    except (KeyError, TypeError, ValueError) as e:
        logger.info("Token rejected: bad_subject", extra={"reason": "bad_subject"})
        raise AuthError(INVALID_TOKEN) from e


def resolve_user(authorization: str | None, users: UserRepository) -> User:
    """
    Verify a bearer token and load its subject.

    Malformed, expired, wrongly-signed tokens and tokens for users that no
    longer exist all raise the same AuthError('invalid token').
    """
    token = extract_bearer_token(authorization)
    user_id = _user_id_from_token(token)
    try:
        user = users.get_by_id(user_id)
    except SQLAlchemyError as e:
        logger.exception("User lookup failed on the store")
        raise InternalError("internal error") from e
    if user is None:
        logger.info("Token rejected: unknown_subject", extra={"reason": "unknown_subject"})
        raise AuthError(INVALID_TOKEN)
    return user
