"""Service-layer exceptions shared by every app.

Each category maps to one client-visible HTTP status.
"""


class ServiceError(Exception):
    """Base exception for domain service errors."""

    status_code = 400

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(ServiceError):
    """A requested record does not exist."""

    status_code = 404


class InvalidInputError(ServiceError):
    """Request data is well-formed but not acceptable (e.g. a quantity below 1)."""

    status_code = 400


class ConflictError(ServiceError):
    """Request conflicts with the current state of a record."""

    status_code = 409
