"""State record carried through the credential setup workflow."""

from __future__ import annotations

from dataclasses import dataclass

from diffy_setup.store.platform import PlatformConfig

KEY_CACHE_SUFFIX = "diffy-key"
PROJECT_CACHE_SUFFIX = "diffy-project"


@dataclass(frozen=True)
class WorkflowState:
    """Values resolved so far during one command run.

    Each step returns a new instance (dataclasses.replace) instead of
    mutating this one.

    Attributes:
        user_id: Hosting platform user id, used to namespace cache keys
        platform: Prerequisite platform values
        api_key: Validated Diffy API key
        session_token: Diffy session token from key validation (never persisted)
        project_id: Validated Diffy project id
    """

    user_id: str
    platform: PlatformConfig
    api_key: str | None = None
    session_token: str | None = None
    project_id: str | None = None

    @property
    def key_cache_key(self) -> str:
        return f"{self.user_id}-{KEY_CACHE_SUFFIX}"

    @property
    def project_cache_key(self) -> str:
        return f"{self.user_id}-{PROJECT_CACHE_SUFFIX}"

    def __repr__(self) -> str:
        # Secrets stay out of tracebacks and debug logs
        return (
            f"WorkflowState(user_id={self.user_id!r}, "
            f"site={self.platform.site_name!r}, "
            f"has_key={self.api_key is not None}, "
            f"project_id={self.project_id!r})"
        )


__all__ = ["WorkflowState", "KEY_CACHE_SUFFIX", "PROJECT_CACHE_SUFFIX"]
