"""
FastAPI/Starlette glue for negotiated request and response bodies.

Routers return NegotiatedResponse (or call negotiated_response) to
encode payloads per the Accept header, and depend on
decode_request_body to read bodies per the Content-Type header.
"""

from typing import Any, Mapping, Optional

from starlette.background import BackgroundTask
from starlette.requests import Request
from starlette.responses import Response

from account.shared.transport.encoding import (
    response_content_type,
    select_decoder,
    select_encoder,
)


class NegotiatedResponse(Response):
    """Response whose body is encoded with the codec the client accepts."""

    def __init__(
        self,
        content: Any,
        status_code: int = 200,
        headers: Optional[Mapping[str, str]] = None,
        accept: Optional[str] = None,
        background: Optional[BackgroundTask] = None,
    ) -> None:
        # render() runs inside Response.__init__ and needs the encoder.
        self.encoder = select_encoder(accept)
        super().__init__(
            content=content,
            status_code=status_code,
            headers=headers,
            media_type=response_content_type(accept),
            background=background,
        )

    def render(self, content: Any) -> bytes:
        return self.encoder.encode(content)


def negotiated_response(
    request: Request, content: Any, status_code: int = 200
) -> NegotiatedResponse:
    """Encode ``content`` for the client that sent ``request``."""
    return NegotiatedResponse(
        content, status_code=status_code, accept=request.headers.get("accept")
    )


async def decode_request_body(request: Request) -> Any:
    """FastAPI dependency returning the decoded request body.

    The body is read once. An empty body decodes to None.

    Raises:
        DecodeError: The body does not match its Content-Type.
    """
    data = await request.body()
    if not data:
        return None
    return select_decoder(request.headers).decode(data)
