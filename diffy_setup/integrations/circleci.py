"""CircleCI API v1.1 client for project environment variables."""

from __future__ import annotations

from urllib.parse import quote

import httpx

from diffy_setup.config.settings import DEFAULT_CIRCLECI_API_URL, DEFAULT_HTTP_TIMEOUT_SECONDS
from diffy_setup.integrations.http import ServiceClient
from diffy_setup.utils.errors import CircleCIServiceError


class CircleCIClient(ServiceClient):
    """Client for CircleCI project settings.

    Authenticates with the API token as the basic-auth username and an
    empty password.
    """

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_CIRCLECI_API_URL,
        *,
        timeout_seconds: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
        http_client: httpx.Client | None = None,
    ) -> None:
        super().__init__(base_url, timeout_seconds=timeout_seconds, http_client=http_client)
        self._auth = (token, "")

    @staticmethod
    def envvar_path(github_login: str, site_name: str) -> str:
        """Path of the env var endpoint for a GitHub-hosted project."""
        return (
            f"/api/v1.1/project/gh/{quote(github_login, safe='')}"
            f"/{quote(site_name, safe='')}/envvar"
        )

    def set_env_var(self, github_login: str, site_name: str, name: str, value: str) -> None:
        """Create or overwrite one environment variable on the project.

        API endpoint: POST /api/v1.1/project/gh/{login}/{site}/envvar

        Raises:
            CircleCIServiceError: On any transport or HTTP failure
        """
        try:
            response = self._request(
                "POST",
                self.envvar_path(github_login, site_name),
                headers={"Content-Type": "application/json"},
                json_data={"name": name, "value": value},
                auth=self._auth,
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise CircleCIServiceError(f"Could not set {name}: {e}") from e


__all__ = ["CircleCIClient"]
