"""
Tests for application settings.
"""

from account.core.config import Settings
from account.shared.logging import LOG_FORMAT


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self) -> None:
        """Defaults are usable without any environment."""
        config = Settings(_env_file=None)
        assert config.debug is False
        assert config.api_prefix == "/api/v1"
        assert config.max_request_size_bytes == 1_048_576

    def test_log_format_defaults_to_logging_format(self) -> None:
        """The default log format is the one the logging module defines."""
        assert Settings(_env_file=None).log_format == LOG_FORMAT

    def test_environment_override(self, monkeypatch) -> None:
        """Values are read from ACCOUNT_-prefixed environment variables."""
        monkeypatch.setenv("ACCOUNT_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("ACCOUNT_MAX_REQUEST_SIZE_BYTES", "2048")
        config = Settings(_env_file=None)
        assert config.log_level == "DEBUG"
        assert config.max_request_size_bytes == 2048
