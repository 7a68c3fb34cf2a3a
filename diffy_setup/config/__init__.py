"""Configuration management for DIFFY-SETUP.

This package contains:
- settings: Settings dataclass with configuration fields
- manager: ConfigManager for loading configuration
"""

from diffy_setup.config.manager import ConfigManager
from diffy_setup.config.settings import CONFIG_FILE, Settings

__all__ = [
    "Settings",
    "ConfigManager",
    "CONFIG_FILE",
]
