"""Configuration manager for DIFFY-SETUP.

This module provides the ConfigManager class for loading configuration
values with a cascading hierarchy:

    1. Environment Variables (highest priority)
    2. Global Config (~/.diffy-setup-config)
    3. Built-in Defaults (lowest priority)
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from diffy_setup.config.settings import CONFIG_FILE, Settings
from diffy_setup.utils.console import console, print_header, print_info
from diffy_setup.utils.logging import log_message

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages configuration loading with cascading hierarchy.

    Configuration Precedence (highest to lowest):
    1. Environment Variables - CI/CD, temporary overrides
    2. Global Config (~/.diffy-setup-config) - User defaults
    3. Built-in Defaults - Fallback values

    The config file is parsed line by line (no eval/exec); only
    KEY=VALUE, KEY="VALUE" and KEY='VALUE' lines are read.

    Attributes:
        settings: Current settings instance
        global_config_path: Path to the global config file
    """

    def __init__(self, global_config_path: Path | None = None) -> None:
        """Initialize the configuration manager.

        Args:
            global_config_path: Optional custom path to global config file.
                                Defaults to ~/.diffy-setup-config.
        """
        self.global_config_path = global_config_path or CONFIG_FILE
        self.settings = Settings()
        self._raw_values: dict[str, str] = {}
        self._config_sources: dict[str, str] = {}

    def load(self) -> Settings:
        """Load configuration from all sources with cascading precedence.

        This method is idempotent: each call starts from clean defaults.

        Returns:
            Settings instance with loaded values
        """
        self.settings = Settings()
        self._raw_values = {}
        self._config_sources = {}

        if self.global_config_path.exists():
            log_message(f"Loading global configuration from {self.global_config_path}")
            self._load_file(self.global_config_path, source="global")

        self._load_environment()

        for key, value in self._raw_values.items():
            self._apply_value_to_settings(key, value)

        log_message(f"Configuration loaded successfully ({len(self._raw_values)} keys)")
        return self.settings

    def _load_file(self, path: Path, source: str = "file") -> None:
        """Load key=value pairs from a config file.

        Args:
            path: Path to the config file
            source: Source identifier for debugging
        """
        pattern = re.compile(r"^([a-zA-Z_][a-zA-Z0-9_]*)=(.*)$")

        with path.open() as f:
            for line in f:
                line = line.strip()

                # Skip empty lines and comments
                if not line or line.startswith("#"):
                    continue

                match = pattern.match(line)
                if match:
                    key, value = match.groups()

                    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
                        value = value[1:-1]

                    self._raw_values[key] = value
                    self._config_sources[key] = source

    def _load_environment(self) -> None:
        """Override config with environment variables for known keys only."""
        for key in Settings.get_config_keys():
            env_value = os.environ.get(key)
            if env_value is not None:
                self._raw_values[key] = env_value
                self._config_sources[key] = "environment"

    def _apply_value_to_settings(self, key: str, value: str) -> None:
        """Apply a raw config value to the settings object.

        Args:
            key: Configuration key
            value: Raw string value from file or environment
        """
        attr = self.settings.get_attribute_for_key(key)
        if attr is None:
            return  # Unknown key, ignore

        current_value = getattr(self.settings, attr)

        if isinstance(current_value, bool):
            setattr(self.settings, attr, value.lower() in ("true", "1", "yes"))
        elif isinstance(current_value, (int, float)):
            try:
                parsed = type(current_value)(value)
            except ValueError:
                logger.warning("Invalid value for %s: %r, keeping default", key, value)
                return
            if parsed <= 0:
                logger.warning("%s must be positive, keeping default", key)
                return
            setattr(self.settings, attr, parsed)
        else:
            setattr(self.settings, attr, value)

    def get(self, key: str, default: str = "") -> str:
        """Get a raw configuration value.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        return self._raw_values.get(key, default)

    def get_source(self, key: str) -> str:
        """Describe where a configuration value came from."""
        return self._config_sources.get(key, "default")

    def show(self) -> None:
        """Display current configuration using Rich formatting."""
        print_header("Current Configuration")
        print_info(f"Global config: {self.global_config_path}")
        console.print()

        s = self.settings

        console.print("  [bold]Hosting Platform:[/bold]")
        console.print(
            f"    Cache Directory: {s.terminus_cache_dir} "
            f"({self.get_source('TERMINUS_CACHE_DIR')})"
        )
        console.print(
            f"    User Id Override: {s.diffy_user_id or '(from session)'} "
            f"({self.get_source('DIFFY_USER_ID')})"
        )
        console.print()

        console.print("  [bold]Services:[/bold]")
        console.print(f"    Diffy API: {s.diffy_api_url} ({self.get_source('DIFFY_API_URL')})")
        console.print(f"    GitHub API: {s.github_api_url} ({self.get_source('GITHUB_API_URL')})")
        console.print(
            f"    CircleCI: {s.circleci_api_url} ({self.get_source('CIRCLECI_API_URL')})"
        )
        console.print(
            f"    HTTP Timeout: {s.http_timeout_seconds}s "
            f"({self.get_source('HTTP_TIMEOUT_SECONDS')})"
        )
        console.print()


__all__ = [
    "ConfigManager",
]
