"""External service clients for DIFFY-SETUP.

This package contains:
- http: Shared ServiceClient base over httpx
- diffy: Diffy API key validation and project lookups
- github: GitHub login lookup
- circleci: CircleCI project environment variables
"""

from diffy_setup.integrations.circleci import CircleCIClient
from diffy_setup.integrations.diffy import (
    DiffyClient,
    KeyValidation,
    KeyValidationResult,
    LookupStatus,
    Project,
    ProjectListResult,
    ProjectLookupResult,
)
from diffy_setup.integrations.github import GitHubClient

__all__ = [
    "CircleCIClient",
    "DiffyClient",
    "GitHubClient",
    "KeyValidation",
    "KeyValidationResult",
    "LookupStatus",
    "Project",
    "ProjectListResult",
    "ProjectLookupResult",
]
