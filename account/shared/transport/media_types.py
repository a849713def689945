"""
Media types understood by the transport layer.

A media type (MIME type) is normalized to its lowercase
``type/subtype`` form, parameters stripped. Parsing follows the
RFC 2045 / RFC 7231 grammar: tokens for type, subtype and parameter
names, tokens or quoted strings for parameter values.

SEE https://developer.mozilla.org/en-US/docs/Web/HTTP/Basics_of_HTTP/MIME_types
"""

import re
from typing import Final, Optional

MEDIA_JSON: Final[str] = "application/json"
MEDIA_GOB: Final[str] = "application/gob"
MEDIA_XML: Final[str] = "application/xml"
MEDIA_TEXT: Final[str] = "text/plain"

DEFAULT_MEDIA_TYPE: Final[str] = MEDIA_JSON
SUPPORTED_MEDIA_TYPES: Final[frozenset[str]] = frozenset(
    {MEDIA_JSON, MEDIA_GOB, MEDIA_XML}
)

_TSPECIALS = frozenset('()<>@,;:\\"/[]?=')

_PARAMETER = re.compile(
    r';\s*(?P<name>[^\s;=]+)\s*=\s*(?P<value>"(?:[^"\\]|\\.)*"|[^\s;",]+)\s*'
)
_QUOTED_PAIR = re.compile(r"\\(.)")


class MediaTypeError(ValueError):
    """Raised when a header value is not a well-formed media type."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(f"invalid media type {value!r}: {reason}")
        self.value = value
        self.reason = reason


def _is_token(text: str) -> bool:
    return bool(text) and all(
        33 <= ord(char) <= 126 and char not in _TSPECIALS for char in text
    )


def parse_media_type(value: str) -> tuple[str, dict[str, str]]:
    """Split a Content-Type or Accept value into media type and parameters.

    Args:
        value: Raw header value, e.g. ``application/json; charset=utf-8``.

    Returns:
        The lowercase ``type/subtype`` and a dict of parameters with
        lowercase names.

    Raises:
        MediaTypeError: The value does not follow the media type grammar.
            A comma separated list of media types is not a single media
            type and is rejected as well.
    """
    head = value.split(";", 1)[0]
    mtype, slash, subtype = head.strip().lower().partition("/")
    if not _is_token(mtype):
        raise MediaTypeError(value, "expected token for type")
    if not slash or not _is_token(subtype):
        raise MediaTypeError(value, "expected token after slash")

    params: dict[str, str] = {}
    rest = value[len(head):]
    pos = 0
    while rest[pos:].strip() not in ("", ";"):
        match = _PARAMETER.match(rest, pos)
        if match is None:
            raise MediaTypeError(value, "invalid media parameter")
        name = match["name"].lower()
        raw = match["value"]
        if raw.startswith('"'):
            param = _QUOTED_PAIR.sub(r"\1", raw[1:-1])
        elif _is_token(raw):
            param = raw
        else:
            raise MediaTypeError(value, f"invalid value for parameter {name!r}")
        if not _is_token(name):
            raise MediaTypeError(value, f"invalid parameter name {name!r}")
        if name in params:
            raise MediaTypeError(value, f"duplicate parameter {name!r}")
        params[name] = param
        pos = match.end()

    return f"{mtype}/{subtype}", params


def normalize_media_type(header: Optional[str]) -> str:
    """Reduce a header value to its media type.

    Missing or empty headers yield the default media type. A value
    that cannot be parsed is returned unchanged so that it falls
    through any exact-match lookup.
    """
    if not header:
        return DEFAULT_MEDIA_TYPE
    try:
        media_type, _ = parse_media_type(header)
    except MediaTypeError:
        return header
    return media_type
