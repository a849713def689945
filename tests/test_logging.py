"""
Tests for logging configuration and key/value rendering.
"""

import logging

from account.shared.logging import configure_logging, kv


class TestKv:
    """Tests for kv."""

    def test_pairs_in_order(self) -> None:
        """Pairs are rendered in argument order."""
        assert kv(id="abc", error="boom") == "id=abc error=boom"

    def test_whitespace_is_quoted(self) -> None:
        """Values containing whitespace are quoted."""
        assert kv(error="two words") == "error='two words'"

    def test_empty_value_is_quoted(self) -> None:
        """Empty values stay visible."""
        assert kv(path="") == "path=''"

    def test_non_string_values(self) -> None:
        """Values are converted with str."""
        assert kv(status=404) == "status=404"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_level_is_applied(self) -> None:
        """The root logger takes the requested level."""
        configure_logging("debug")
        assert logging.getLogger().level == logging.DEBUG
        configure_logging("INFO")

    def test_unknown_level_falls_back_to_info(self) -> None:
        """Unknown level names configure INFO."""
        configure_logging("chatty")
        assert logging.getLogger().level == logging.INFO

    def test_server_loggers_are_quieted(self) -> None:
        """Server access logs only report warnings."""
        configure_logging()
        assert logging.getLogger("uvicorn.access").level == logging.WARNING
