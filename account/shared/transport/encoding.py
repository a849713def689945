"""
HTTP content negotiation.

Selects the request body decoder from the Content-Type header and
the response encoder from the Accept header. The supported media
types are:

- application/json
- application/xml
- application/gob

A missing header, a header that does not parse, or an unsupported
media type all select JSON. Negotiation never fails.

Errors are encoded with ErrorEncoder: classified errors become a
structured ErrorResponse in the negotiated format, anything else
becomes an opaque plain text 500 tagged with a correlation id that
is also logged.
"""

import logging
import secrets
from collections.abc import Mapping
from http import HTTPStatus
from typing import Any, Optional

from starlette.requests import Request
from starlette.responses import Response

from account.domain.errors import ErrorKind, error_kind
from account.shared.errors.schemas import ErrorResponse
from account.shared.logging import kv
from account.shared.transport.codecs import CODECS, JSON, Decoder, Encoder
from account.shared.transport.media_types import (
    DEFAULT_MEDIA_TYPE,
    MEDIA_TEXT,
    SUPPORTED_MEDIA_TYPES,
    normalize_media_type,
)

logger = logging.getLogger(__name__)

CORRELATION_ID_BYTES = 6


def _header(headers: Mapping[str, str], name: str) -> Optional[str]:
    """Case-insensitive lookup that also works on plain dicts."""
    value = headers.get(name)
    if value is not None:
        return value
    lowered = name.lower()
    for key, item in headers.items():
        if key.lower() == lowered:
            return item
    return None


def select_decoder(request_headers: Mapping[str, str]) -> Decoder:
    """Return the decoder for the request's Content-Type.

    Args:
        request_headers: Incoming request headers.

    Returns:
        The codec registered for the media type, JSON otherwise.
    """
    content_type = normalize_media_type(_header(request_headers, "Content-Type"))
    return CODECS.get(content_type, JSON)


def select_encoder(accept: Optional[str]) -> Encoder:
    """Return the encoder for an Accept header value.

    Args:
        accept: Raw Accept header value, None when absent.

    Returns:
        The codec registered for the media type, JSON otherwise.
    """
    return CODECS.get(normalize_media_type(accept), JSON)


def response_content_type(accept: Optional[str]) -> str:
    """Return the Content-Type to send for an Accept header value.

    Encoders never set headers; callers use this value so the
    header always agrees with the encoder picked by select_encoder.
    """
    media_type = normalize_media_type(accept)
    if media_type in SUPPORTED_MEDIA_TYPES:
        return media_type
    return DEFAULT_MEDIA_TYPE


def http_status(status: Any) -> int:
    """Map a declared error status onto a registered HTTP status code.

    Anything that is not a known HTTP status becomes 500.
    """
    try:
        return HTTPStatus(int(status)).value
    except (TypeError, ValueError):
        return HTTPStatus.INTERNAL_SERVER_ERROR.value


def new_correlation_id() -> str:
    """Return 6 random bytes as unpadded URL-safe base64 (8 characters)."""
    return secrets.token_urlsafe(CORRELATION_ID_BYTES)


def encode_error(
    error: BaseException,
    encoder: Encoder,
    logger: logging.Logger = logger,
    context: Optional[Mapping[str, Any]] = None,
) -> Response:
    """Build the HTTP response reporting ``error``.

    Classified errors are answered with their declared status and an
    ErrorResponse body encoded with ``encoder``. If that encoding
    fails the failure is logged and the body is left empty.

    Any other error is answered with a 500 whose plain text body is
    ``"<id>: <error message>"``; the id and message are logged.

    Args:
        error: The error raised while handling the request.
        encoder: Encoder negotiated for the response.
        logger: Sink for error events.
        context: Extra key/value pairs added to every log record.

    Returns:
        The response to send.
    """
    fields = dict(context or {})

    if error_kind(error) is ErrorKind.CLASSIFIED:
        status = http_status(getattr(error, "status", None))
        content_type = response_content_type(encoder.media_type)
        body = ErrorResponse.from_error(error, status=status)
        try:
            content = encoder.encode(body)
        except Exception as exc:
            # Status and headers are already decided; report and send them.
            logger.error("encoding %s", kv(**{**fields, "error": exc}), exc_info=True)
            content = b""
        return Response(
            content=content, status_code=status, headers={"Content-Type": content_type}
        )

    error_id = new_correlation_id()
    message = str(error)
    response = Response(
        content=f"{error_id}: {message}".encode("utf-8"),
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR.value,
        headers={"Content-Type": MEDIA_TEXT},
    )
    logger.error("unhandled %s", kv(**{**fields, "id": error_id, "error": message}))
    return response


class ErrorEncoder:
    """Encodes errors for one request using its negotiated encoder.

    Attributes:
        encoder: Encoder selected from the request's Accept header.
        logger: Sink for error events.
        context: Key/value pairs identifying the request in logs.
    """

    def __init__(
        self,
        accept: Optional[str],
        logger: logging.Logger = logger,
        context: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.encoder = select_encoder(accept)
        self.logger = logger
        self.context = dict(context or {})

    @classmethod
    def for_request(
        cls, request: Request, logger: logging.Logger = logger
    ) -> "ErrorEncoder":
        """Bind an error encoder to an incoming request."""
        return cls(
            request.headers.get("accept"),
            logger,
            context={"method": request.method, "path": request.url.path},
        )

    def encode(self, error: BaseException) -> Response:
        """Return the response reporting ``error``."""
        return encode_error(error, self.encoder, self.logger, self.context)
