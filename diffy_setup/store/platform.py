"""Prerequisite configuration cached by the hosting platform CLI.

The build-tools plugin of the hosting platform CLI caches the GitHub
token, the CircleCI token and the site name in its cache directory under
file names containing GITHUB_TOKEN, CIRCLE_TOKEN and SITE_NAME. The
logged-in user's id lives in the CLI's session file.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from diffy_setup.store.file_store import FileStore

logger = logging.getLogger(__name__)

GITHUB_TOKEN_MARKER = "GITHUB_TOKEN"
CIRCLE_TOKEN_MARKER = "CIRCLE_TOKEN"
SITE_NAME_MARKER = "SITE_NAME"


@dataclass(frozen=True)
class PlatformConfig:
    """Platform values required before Diffy credentials can be pushed.

    Attributes:
        github_token: Cached GitHub token, or None if not cached
        circle_token: Cached CircleCI token, or None if not cached
        site_name: Cached site name, or None if not cached
    """

    github_token: str | None = None
    circle_token: str | None = None
    site_name: str | None = None

    @property
    def is_complete(self) -> bool:
        """True only when all three values are present and non-empty."""
        return bool(self.github_token and self.circle_token and self.site_name)

    @property
    def missing(self) -> list[str]:
        """Names of the values that are absent, for diagnostics."""
        names = []
        if not self.github_token:
            names.append(GITHUB_TOKEN_MARKER)
        if not self.circle_token:
            names.append(CIRCLE_TOKEN_MARKER)
        if not self.site_name:
            names.append(SITE_NAME_MARKER)
        return names


def _as_text(value: object) -> str | None:
    """Keep only non-empty scalar values, as strings."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (str, int, float)):
        text = str(value).strip()
        return text or None
    return None


def load_platform_config(store: FileStore) -> PlatformConfig:
    """Find the cached GitHub token, CircleCI token and site name.

    Every entry whose name contains one of the marker substrings is
    decoded; when several entries match the same marker, the last one in
    name order wins.

    Args:
        store: Store over the build-tools cache directory

    Returns:
        PlatformConfig with whatever values were found
    """
    found: dict[str, str | None] = {
        GITHUB_TOKEN_MARKER: None,
        CIRCLE_TOKEN_MARKER: None,
        SITE_NAME_MARKER: None,
    }
    for name, value in store.items():
        for marker in found:
            if marker in name:
                found[marker] = _as_text(value)

    config = PlatformConfig(
        github_token=found[GITHUB_TOKEN_MARKER],
        circle_token=found[CIRCLE_TOKEN_MARKER],
        site_name=found[SITE_NAME_MARKER],
    )
    if not config.is_complete:
        logger.debug("Platform configuration incomplete, missing: %s", ", ".join(config.missing))
    return config


def load_user_id(session_file: Path) -> str | None:
    """Read the logged-in user id from the platform CLI session file.

    Returns:
        The user id as a string, or None if there is no usable session
    """
    if not session_file.is_file():
        return None
    try:
        data = json.loads(session_file.read_text())
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Failed to read session file {session_file}: {e}")
        return None
    if not isinstance(data, dict):
        return None
    return _as_text(data.get("user_id"))


__all__ = [
    "PlatformConfig",
    "load_platform_config",
    "load_user_id",
    "GITHUB_TOKEN_MARKER",
    "CIRCLE_TOKEN_MARKER",
    "SITE_NAME_MARKER",
]
