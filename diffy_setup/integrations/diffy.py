"""Diffy REST API client.

Covers the three calls the setup workflow needs: exchanging an API key
for a session token, listing projects page by page, and fetching one
project to confirm the user can access it.

Failures are reported as typed results rather than exceptions, so a
rejected key, a missing project and a network outage stay distinguishable
in logs and tests. Only key validation escalates transport failures to
DiffyServiceError.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import httpx

from diffy_setup.config.settings import DEFAULT_DIFFY_API_URL, DEFAULT_HTTP_TIMEOUT_SECONDS
from diffy_setup.integrations.http import ServiceClient, is_client_error, json_body
from diffy_setup.utils.errors import DiffyServiceError

logger = logging.getLogger(__name__)

KEYS_PAGE_URL = "https://app.diffy.website/#/keys"
API_DOCS_URL = "https://diffy.website/documentation/getting-started-apis"


class KeyValidation(Enum):
    """Outcome of checking an API key."""

    ACCEPTED = "accepted"
    REJECTED = "rejected"


class LookupStatus(Enum):
    """Outcome of a lookup that may legitimately find nothing."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    TRANSPORT_ERROR = "transport_error"


@dataclass(frozen=True)
class KeyValidationResult:
    """Result of POST /auth/key.

    Attributes:
        status: Whether Diffy accepted the key
        token: Session token, set only when accepted
    """

    status: KeyValidation
    token: str | None = None

    @property
    def accepted(self) -> bool:
        return self.status is KeyValidation.ACCEPTED


@dataclass(frozen=True)
class Project:
    """A Diffy project as shown in the picker."""

    id: str
    name: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Project | None:
        """Build a Project from an API record, or None if it has no id."""
        project_id = data.get("id")
        if project_id is None or isinstance(project_id, bool):
            return None
        return cls(id=str(project_id), name=str(data.get("name", "")))


@dataclass(frozen=True)
class ProjectListResult:
    """One page of the project listing.

    Attributes:
        page: Page index that was requested
        projects: Projects on that page (empty past the last page)
        error: Description of a transport or decoding failure, if any
    """

    page: int
    projects: list[Project] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class ProjectLookupResult:
    """Result of GET /projects/{id}."""

    status: LookupStatus
    project: dict[str, Any] | None = None
    error: str | None = None

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND


class DiffyClient(ServiceClient):
    """Client for the Diffy API (https://app.diffy.website/api)."""

    def __init__(
        self,
        base_url: str = DEFAULT_DIFFY_API_URL,
        *,
        timeout_seconds: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
        http_client: httpx.Client | None = None,
    ) -> None:
        super().__init__(base_url, timeout_seconds=timeout_seconds, http_client=http_client)

    @staticmethod
    def _bearer(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}

    def validate_key(self, api_key: str) -> KeyValidationResult:
        """Exchange an API key for a session token.

        API endpoint: POST /auth/key

        Args:
            api_key: Key as entered by the user (already trimmed)

        Returns:
            ACCEPTED with the token, or REJECTED on a 4xx response or a
            success response without a token

        Raises:
            DiffyServiceError: On connection failure, timeout or 5xx
        """
        try:
            response = self._request("POST", "/auth/key", json_data={"key": api_key})
        except httpx.RequestError as e:
            raise DiffyServiceError(f"Could not reach the Diffy API: {e}") from e

        if is_client_error(response):
            logger.debug("Diffy rejected API key with HTTP %s", response.status_code)
            return KeyValidationResult(KeyValidation.REJECTED)
        if response.is_error:
            raise DiffyServiceError(
                f"Key validation failed with HTTP {response.status_code}"
            )

        token = json_body(response).get("token")
        if token is None:
            logger.debug("Diffy key validation response had no token")
            return KeyValidationResult(KeyValidation.REJECTED)
        return KeyValidationResult(KeyValidation.ACCEPTED, token=str(token))

    def list_projects(self, token: str, page: int) -> ProjectListResult:
        """Fetch one page of the user's projects.

        API endpoint: GET /projects?page=N

        Never raises for HTTP or transport failures; those come back as a
        result with ``error`` set and no projects.
        """
        try:
            response = self._request(
                "GET", "/projects", headers=self._bearer(token), params={"page": page}
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("Listing Diffy projects (page %d) failed: %s", page, e)
            return ProjectListResult(page=page, error=str(e))

        records = json_body(response).get("projects")
        if not isinstance(records, list):
            return ProjectListResult(page=page, error="Response has no 'projects' list")

        projects = [
            project
            for project in (Project.from_dict(r) for r in records if isinstance(r, dict))
            if project is not None
        ]
        return ProjectListResult(page=page, projects=projects)

    def get_project(self, token: str, project_id: str) -> ProjectLookupResult:
        """Fetch one project to confirm it exists and is accessible.

        API endpoint: GET /projects/{id}

        A project counts as found only if the response carries a name.
        """
        try:
            response = self._request(
                "GET", f"/projects/{project_id}", headers=self._bearer(token)
            )
        except httpx.RequestError as e:
            logger.warning("Looking up Diffy project %s failed: %s", project_id, e)
            return ProjectLookupResult(LookupStatus.TRANSPORT_ERROR, error=str(e))

        if is_client_error(response):
            return ProjectLookupResult(LookupStatus.NOT_FOUND)
        if response.is_error:
            logger.warning(
                "Looking up Diffy project %s returned HTTP %s", project_id, response.status_code
            )
            return ProjectLookupResult(
                LookupStatus.TRANSPORT_ERROR, error=f"HTTP {response.status_code}"
            )

        body = json_body(response)
        if "name" not in body:
            return ProjectLookupResult(LookupStatus.NOT_FOUND)
        return ProjectLookupResult(LookupStatus.FOUND, project=body)


__all__ = [
    "DiffyClient",
    "KeyValidation",
    "KeyValidationResult",
    "LookupStatus",
    "Project",
    "ProjectListResult",
    "ProjectLookupResult",
    "KEYS_PAGE_URL",
    "API_DOCS_URL",
]
