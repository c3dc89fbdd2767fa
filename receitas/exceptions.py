"""Domain errors raised by the services and rendered by the HTTP layer."""

from fastapi import status


class ReceitasError(Exception):
    """Base exception for the recipes API"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationFailed(ReceitasError):
    """One or more required fields are missing or malformed."""

    status_code = 422

    def __init__(self, messages: list[str]):
        self.messages = list(messages)
        super().__init__("; ".join(self.messages))


class Unauthorized(ReceitasError):
    """Missing, unknown or mismatched credentials."""

    status_code = status.HTTP_401_UNAUTHORIZED


class NotFound(ReceitasError):
    """No record matched the id or filter."""

    status_code = status.HTTP_404_NOT_FOUND


class Conflict(ReceitasError):
    """A unique field (user email, recipe title) is already taken."""

    status_code = status.HTTP_409_CONFLICT


class StoreFault(ReceitasError):
    """The database failed while serving the request."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
