"""Settings dataclass for DIFFY-SETUP configuration.

This module defines the Settings dataclass that holds all configuration
values: service endpoints, the hosting platform cache location and the
HTTP timeout.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_DIFFY_API_URL = "https://app.diffy.website/api"
DEFAULT_GITHUB_API_URL = "https://api.github.com"
DEFAULT_CIRCLECI_API_URL = "https://circleci.com"
DEFAULT_HTTP_TIMEOUT_SECONDS = 30.0

# Sub-directory of the platform cache holding build-tools entries
BUILD_TOOLS_DIR_NAME = "build-tools"


@dataclass
class Settings:
    """Configuration settings for DIFFY-SETUP.

    All settings have sensible defaults and can be overridden from the
    configuration file (~/.diffy-setup-config) or environment variables.

    Attributes:
        terminus_cache_dir: Hosting platform CLI cache directory
        diffy_api_url: Base URL of the Diffy API
        github_api_url: Base URL of the GitHub API
        circleci_api_url: Base URL of CircleCI
        http_timeout_seconds: Per-request timeout for every HTTP call
        diffy_user_id: Overrides the user id read from the platform session
    """

    terminus_cache_dir: str = str(Path.home() / ".terminus" / "cache")
    diffy_api_url: str = DEFAULT_DIFFY_API_URL
    github_api_url: str = DEFAULT_GITHUB_API_URL
    circleci_api_url: str = DEFAULT_CIRCLECI_API_URL
    http_timeout_seconds: float = DEFAULT_HTTP_TIMEOUT_SECONDS
    diffy_user_id: str = ""

    # Config key to attribute mapping
    _key_mapping: dict[str, str] = field(
        default_factory=lambda: {
            "TERMINUS_CACHE_DIR": "terminus_cache_dir",
            "DIFFY_API_URL": "diffy_api_url",
            "GITHUB_API_URL": "github_api_url",
            "CIRCLECI_API_URL": "circleci_api_url",
            "HTTP_TIMEOUT_SECONDS": "http_timeout_seconds",
            "DIFFY_USER_ID": "diffy_user_id",
        },
        repr=False,
    )

    def get_attribute_for_key(self, key: str) -> str | None:
        """Get the attribute name for a config key.

        Args:
            key: Configuration key (e.g., "DIFFY_API_URL")

        Returns:
            Attribute name or None if key is unknown
        """
        return self._key_mapping.get(key)

    @classmethod
    def get_config_keys(cls) -> list[str]:
        """Get list of all valid configuration keys."""
        temp = cls()
        return list(temp._key_mapping.keys())

    @property
    def build_tools_dir(self) -> Path:
        """Directory holding cached build-tools values and Diffy credentials."""
        return Path(self.terminus_cache_dir).expanduser() / BUILD_TOOLS_DIR_NAME

    @property
    def session_file(self) -> Path:
        """Hosting platform session file carrying the logged-in user id."""
        return Path(self.terminus_cache_dir).expanduser() / "session"


# Default configuration file path
CONFIG_FILE = Path.home() / ".diffy-setup-config"
