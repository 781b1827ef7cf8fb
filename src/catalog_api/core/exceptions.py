"""Application error taxonomy translated to HTTP responses in main.py."""

from typing import Iterable


class AppError(Exception):
    """Base class for errors that carry an HTTP status and error code."""

    status_code: int = 500
    error_code: str = "INTERNAL_SERVER_ERROR"

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error_code: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        if error_code is not None:
            self.error_code = error_code


class ValidationError(AppError):
    """Client input violated one or more rules. Never retried."""

    status_code = 400
    error_code = "VALIDATION_ERROR"

    def __init__(self, errors: Iterable[str] | str):
        if isinstance(errors, str):
            errors = [errors]
        self.errors: list[str] = list(errors)
        super().__init__("Validation failed")

    def __str__(self) -> str:
        return "; ".join(self.errors)


class BadRequestError(AppError):
    status_code = 400
    error_code = "BAD_REQUEST"


class NotFoundError(AppError):
    status_code = 404
    error_code = "NOT_FOUND"


class InternalError(AppError):
    status_code = 500
    error_code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str = "An unexpected error occurred."):
        super().__init__(message)
