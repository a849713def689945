"""
Error response schema.

Classified errors are reported to clients with this body, encoded
with whichever codec the request negotiated.
"""

from typing import Optional

from pydantic import BaseModel

from account.domain.errors import ServiceError


class ErrorResponse(BaseModel):
    """Body returned for every classified error.

    Attributes:
        status: HTTP status code of the response.
        message: Client-facing error message.
        id: Identifier of the error occurrence, omitted when unknown.
    """

    status: int
    message: str
    id: Optional[str] = None

    @classmethod
    def from_error(
        cls, error: ServiceError, status: Optional[int] = None
    ) -> "ErrorResponse":
        """Build the response body for a classified error.

        Args:
            error: The classified error.
            status: Status actually sent, when it differs from the declared one.
        """
        return cls(
            status=error.status if status is None else status,
            message=error.message,
            id=error.id,
        )
