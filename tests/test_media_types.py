"""
Tests for media type parsing and normalization.

Pure functions; no application or IO required.
"""

import pytest

from account.shared.transport.media_types import (
    DEFAULT_MEDIA_TYPE,
    MEDIA_JSON,
    MEDIA_XML,
    MediaTypeError,
    normalize_media_type,
    parse_media_type,
)


class TestParseMediaType:
    """Tests for parse_media_type."""

    def test_plain_media_type(self) -> None:
        """A bare type/subtype parses with no parameters."""
        assert parse_media_type("application/json") == ("application/json", {})

    def test_parameters_are_split_off(self) -> None:
        """Parameters are returned separately from the media type."""
        media_type, params = parse_media_type("application/json; charset=utf-8")
        assert media_type == "application/json"
        assert params == {"charset": "utf-8"}

    def test_type_and_parameter_names_are_lowercased(self) -> None:
        """Type, subtype and parameter names are case-insensitive."""
        media_type, params = parse_media_type("Application/XML; Charset=UTF-8")
        assert media_type == "application/xml"
        assert params == {"charset": "UTF-8"}

    def test_quoted_parameter_value(self) -> None:
        """Quoted strings are unquoted and unescaped."""
        _, params = parse_media_type('text/plain; title="a \\"quoted\\" value"')
        assert params == {"title": 'a "quoted" value'}

    def test_multiple_parameters(self) -> None:
        """Several parameters are all collected."""
        _, params = parse_media_type("application/json;charset=utf-8; version=2")
        assert params == {"charset": "utf-8", "version": "2"}

    def test_trailing_semicolon_is_ignored(self) -> None:
        """A dangling semicolon does not invalidate the value."""
        assert parse_media_type("application/json;") == ("application/json", {})

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "json",
            "application/",
            "/json",
            "application/json, text/plain",
            "application/json; charset",
            "application/json; a=1 b=2",
            "application/json; a=1; a=2",
            "application/js on",
        ],
    )
    def test_malformed_values_raise(self, value: str) -> None:
        """Values outside the media type grammar raise MediaTypeError."""
        with pytest.raises(MediaTypeError):
            parse_media_type(value)

    def test_media_type_error_is_value_error(self) -> None:
        """MediaTypeError can be handled as a ValueError."""
        with pytest.raises(ValueError, match="invalid media type"):
            parse_media_type("nonsense")


class TestNormalizeMediaType:
    """Tests for normalize_media_type."""

    def test_missing_header_uses_default(self) -> None:
        """None selects the default media type."""
        assert normalize_media_type(None) == DEFAULT_MEDIA_TYPE == MEDIA_JSON

    def test_empty_header_uses_default(self) -> None:
        """An empty string selects the default media type."""
        assert normalize_media_type("") == DEFAULT_MEDIA_TYPE

    def test_parameters_are_stripped(self) -> None:
        """Only the base media type is kept."""
        assert normalize_media_type("application/xml; charset=utf-8") == MEDIA_XML

    def test_unparseable_value_is_returned_unchanged(self) -> None:
        """A value that does not parse is kept as-is."""
        assert normalize_media_type("text/html, */*") == "text/html, */*"
