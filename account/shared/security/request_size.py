"""
Request body size limit middleware.

Rejects requests whose declared Content-Length exceeds the
configured maximum before the body is read, and counts the bytes
of bodies sent without a length (chunked) as they stream in.
The 413 error body is encoded in the format the client accepts.
"""

import logging

from starlette.requests import Request
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from account.domain.errors import BadRequestError, RequestTooLargeError
from account.shared.transport.encoding import ErrorEncoder

logger = logging.getLogger(__name__)


class RequestSizeLimitMiddleware:
    """ASGI middleware enforcing a maximum request body size.

    A declared Content-Length over the limit is answered directly.
    Otherwise the body is counted while the application reads it;
    crossing the limit raises RequestTooLargeError from ``receive``,
    which the registered error handlers turn into a 413.

    Args:
        app: The wrapped ASGI application.
        max_bytes: Largest accepted body size.
    """

    def __init__(self, app: ASGIApp, max_bytes: int) -> None:
        self.app = app
        self.max_bytes = max_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request = Request(scope)
        declared = request.headers.get("content-length")
        if declared is not None:
            try:
                length = int(declared)
            except ValueError:
                response = ErrorEncoder.for_request(request, logger).encode(
                    BadRequestError("invalid Content-Length header")
                )
                await response(scope, receive, send)
                return
            if length > self.max_bytes:
                logger.warning(
                    "Rejected request body of %d bytes (limit %d)", length, self.max_bytes
                )
                response = ErrorEncoder.for_request(request, logger).encode(
                    RequestTooLargeError(self.max_bytes)
                )
                await response(scope, receive, send)
                return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_bytes:
                    logger.warning(
                        "Rejected streamed request body over %d bytes", self.max_bytes
                    )
                    raise RequestTooLargeError(self.max_bytes)
            return message

        await self.app(scope, limited_receive, send)
