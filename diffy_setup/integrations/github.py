"""GitHub REST API client, used only to resolve the token owner's login."""

from __future__ import annotations

import httpx

from diffy_setup.config.settings import DEFAULT_GITHUB_API_URL, DEFAULT_HTTP_TIMEOUT_SECONDS
from diffy_setup.integrations.http import ServiceClient, json_body
from diffy_setup.utils.errors import GitHubServiceError


class GitHubClient(ServiceClient):
    """Handler for GitHub REST API v3."""

    def __init__(
        self,
        base_url: str = DEFAULT_GITHUB_API_URL,
        *,
        timeout_seconds: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
        http_client: httpx.Client | None = None,
    ) -> None:
        super().__init__(base_url, timeout_seconds=timeout_seconds, http_client=http_client)

    def get_login(self, token: str) -> str:
        """Return the login of the user owning token.

        API endpoint: GET /user

        Raises:
            GitHubServiceError: On any transport or HTTP failure, or when
                the response has no login
        """
        try:
            response = self._request(
                "GET",
                "/user",
                headers={"Authorization": f"token {token}"},
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise GitHubServiceError(f"Could not look up the GitHub user: {e}") from e

        login = json_body(response).get("login")
        if not login:
            raise GitHubServiceError("GitHub user response did not include a login")
        return str(login)


__all__ = ["GitHubClient"]
