"""
Transport package.

HTTP content negotiation for the service:
- media_types: media type constants and header parsing
- codecs: JSON, XML and gob body codecs
- encoding: decoder/encoder selection and error encoding
- responses: FastAPI/Starlette integration
"""

from account.shared.transport.encoding import (
    ErrorEncoder,
    encode_error,
    response_content_type,
    select_decoder,
    select_encoder,
)

__all__ = [
    "ErrorEncoder",
    "encode_error",
    "response_content_type",
    "select_decoder",
    "select_encoder",
]
