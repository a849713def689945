"""
Centralized error handlers for FastAPI.

Maps errors to HTTP responses through the negotiated ErrorEncoder:
- ServiceError and framework HTTP errors are classified: their status
  and message are sent as an ErrorResponse in the format the client
  accepts.
- Anything else is unclassified: an opaque 500 with a correlation id
  that is also logged.

No stack traces or internal details are exposed to clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from account.domain.errors import ServiceError
from account.shared.transport.encoding import ErrorEncoder

logger = logging.getLogger(__name__)

HTTP_422 = 422
VALIDATION_FAILED_MESSAGE = "request validation failed"


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(ServiceError)
    async def handle_service_error(request: Request, exc: ServiceError) -> Response:
        """Report a classified service error."""
        logger.warning("Service error %d: %s", exc.status, exc.message)
        return ErrorEncoder.for_request(request, logger).encode(exc)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> Response:
        """Report routing and framework HTTP errors (404, 405, ...)."""
        error = ServiceError(str(exc.detail), status=exc.status_code)
        response = ErrorEncoder.for_request(request, logger).encode(error)
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> Response:
        """Report request validation failures without echoing the input."""
        logger.warning("Request validation failed: %d error(s)", len(exc.errors()))
        error = ServiceError(VALIDATION_FAILED_MESSAGE, status=HTTP_422)
        return ErrorEncoder.for_request(request, logger).encode(error)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> Response:
        """Catch-all for unexpected errors, reported with a correlation id."""
        return ErrorEncoder.for_request(request, logger).encode(exc)
