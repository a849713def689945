"""
Service error contract.

Every error the service wants a client to see is a ServiceError:
it declares an HTTP status and a message. Anything else raised
while handling a request is an unexpected fault.

The distinction is carried by an explicit ErrorKind on the error
itself so the transport layer never inspects exception types.
No framework imports allowed.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """How the transport layer must report an error."""

    CLASSIFIED = "classified"
    UNCLASSIFIED = "unclassified"


def error_kind(error: BaseException) -> ErrorKind:
    """Return the kind declared by ``error``; undeclared means unclassified."""
    kind = getattr(error, "kind", ErrorKind.UNCLASSIFIED)
    if isinstance(kind, ErrorKind):
        return kind
    return ErrorKind.UNCLASSIFIED


class ServiceError(Exception):
    """Base error for all client-facing errors.

    Attributes:
        status: HTTP status code reported to the client.
        message: Human readable message reported to the client.
        id: Optional identifier of this error occurrence.
    """

    kind = ErrorKind.CLASSIFIED

    def __init__(
        self, message: str, status: int = 500, error_id: Optional[str] = None
    ) -> None:
        self.message = message
        self.status = status
        self.id = error_id
        super().__init__(self.message)


class BadRequestError(ServiceError):
    """Raised when a request cannot be processed as sent."""

    def __init__(self, message: str, error_id: Optional[str] = None) -> None:
        super().__init__(message, status=400, error_id=error_id)


class NotFoundError(ServiceError):
    """Raised when the addressed resource does not exist."""

    def __init__(self, message: str = "not found", error_id: Optional[str] = None) -> None:
        super().__init__(message, status=404, error_id=error_id)


class RequestTooLargeError(ServiceError):
    """Raised when a request body exceeds the configured size limit."""

    def __init__(self, limit: int) -> None:
        super().__init__(
            f"Request body exceeds the {limit} byte limit", status=413
        )
        self.limit = limit


class DecodeError(BadRequestError):
    """Raised when a request body cannot be decoded with its media type."""

    def __init__(self, media_type: str, reason: str) -> None:
        super().__init__(f"invalid request body: {reason}")
        self.media_type = media_type
        self.reason = reason
