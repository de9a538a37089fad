"""
Configuration settings for the application.
"""

import os

from dotenv import load_dotenv

from osrs_mcp.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

DEFAULT_WIKI_API_URL = "https://oldschool.runescape.wiki/api.php"


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.data_dir: str = os.path.abspath(
            os.path.expanduser(self._get_env("OSRS_DATA_DIR", "data"))
        )
        self.wiki_api_url: str = self._get_env("OSRS_WIKI_API_URL", DEFAULT_WIKI_API_URL)
        self.wiki_timeout: int = self._get_positive_int_env("OSRS_WIKI_TIMEOUT", 15)
        self.wiki_user_agent: str = self._get_env(
            "OSRS_WIKI_USER_AGENT", "mcp-osrs/0.1.0"
        )
        self.log_level: str = self._get_env("LOG_LEVEL", "INFO").upper()
        self.host: str = self._get_env("HOST", "127.0.0.1")
        self.port: int = self._get_positive_int_env("PORT", 8000)
        self.reload: bool = self._get_env("RELOAD", "0").strip().lower() in {"1", "true", "yes"}

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_positive_int_env(self, key: str, default: int) -> int:
        """Get a positive integer environment variable, raise error if malformed."""
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(f"Environment variable {key} must be an integer, got {raw!r}")
        if value < 1:
            raise ConfigurationError(f"Environment variable {key} must be positive, got {value}")
        return value


# Global settings instance
settings = Settings()
