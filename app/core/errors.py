"""Error taxonomy shared by services; HTTP status mapping happens only in app.main."""

from enum import Enum


class ErrorKind(str, Enum):
    """Category of a failed operation."""

    VALIDATION = "validation"
    CONFLICT = "conflict"
    AUTH = "auth"
    NOT_FOUND = "not_found"
    UPSTREAM = "upstream"
    INTERNAL = "internal"


class AppError(Exception):
    """Base class for expected failures raised by services."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(
        self,
        message: str,
        errors: list[dict[str, str]] | None = None,
    ) -> None:
        self.message = message
        self.errors = errors or []
        super().__init__(message)


class ValidationError(AppError):
    """Malformed or missing input. `errors` lists every violation found."""

    kind = ErrorKind.VALIDATION


class ConflictError(AppError):
    """Uniqueness violation (username or email already registered)."""

    kind = ErrorKind.CONFLICT


class AuthError(AppError):
    """Bad credentials or a missing, invalid or expired bearer token."""

    kind = ErrorKind.AUTH


class NotFoundError(AppError):
    """No matching resource owned by the caller."""

    kind = ErrorKind.NOT_FOUND


class UpstreamError(AppError):
    """The remote movie catalog failed; details are logged, never returned."""

    kind = ErrorKind.UPSTREAM


class InternalError(AppError):
    """Store fault or other unexpected failure."""

    kind = ErrorKind.INTERNAL
