"""Local storage for DIFFY-SETUP.

This package contains:
- file_store: FileStore key/value cache of JSON-encoded scalars
- platform: Prerequisite platform values and session user id lookup
"""

from diffy_setup.store.file_store import FileStore
from diffy_setup.store.platform import PlatformConfig, load_platform_config, load_user_id

__all__ = [
    "FileStore",
    "PlatformConfig",
    "load_platform_config",
    "load_user_id",
]
