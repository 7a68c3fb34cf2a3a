"""Command orchestration for ``diffy-setup project-create``.

Checks the cached platform prerequisites, runs key entry and project
selection, then pushes the resolved values to the site's CircleCI
project as environment variables.
"""

from __future__ import annotations

import logging
from contextlib import ExitStack

import httpx

from diffy_setup.config.settings import Settings
from diffy_setup.integrations.circleci import CircleCIClient
from diffy_setup.integrations.diffy import DiffyClient
from diffy_setup.integrations.github import GitHubClient
from diffy_setup.store.file_store import FileStore
from diffy_setup.store.platform import PlatformConfig, load_platform_config, load_user_id
from diffy_setup.utils.console import print_header, print_step, print_success
from diffy_setup.utils.errors import (
    CircleCIServiceError,
    EnvVarPushError,
    PartialPushError,
    PrerequisiteMissingError,
)
from diffy_setup.utils.logging import log_message
from diffy_setup.workflow.key_entry import enter_api_key
from diffy_setup.workflow.project_selection import select_project
from diffy_setup.workflow.state import WorkflowState

logger = logging.getLogger(__name__)

API_KEY_VARIABLE = "DIFFY_API_KEY"
PROJECT_ID_VARIABLE = "DIFFY_PROJECT_ID"

MISSING_PLATFORM_MESSAGE = (
    "Sorry, looks like you are not using Github, CircleCI or your cached "
    "configuration does not have site name. We can not set your DIFFY "
    "credentials automatically."
)
MISSING_USER_MESSAGE = (
    "Could not determine your hosting platform user id. Log in with the "
    "platform CLI first or set DIFFY_USER_ID."
)


def check_prerequisites(settings: Settings, store: FileStore) -> WorkflowState:
    """Resolve the user id and cached platform values.

    Returns:
        Initial workflow state

    Raises:
        PrerequisiteMissingError: If any prerequisite is absent
    """
    platform = load_platform_config(store)
    if not platform.is_complete:
        log_message(f"Missing platform configuration: {', '.join(platform.missing)}")
        raise PrerequisiteMissingError(MISSING_PLATFORM_MESSAGE)

    user_id = settings.diffy_user_id or load_user_id(settings.session_file)
    if not user_id:
        raise PrerequisiteMissingError(MISSING_USER_MESSAGE)

    return WorkflowState(user_id=user_id, platform=platform)


def push_variables(
    circleci: CircleCIClient,
    github_login: str,
    site_name: str,
    variables: dict[str, str],
) -> list[str]:
    """Set each variable on the CircleCI project, in order.

    Pushes are not transactional: a failure stops the loop and leaves
    earlier variables in place.

    Returns:
        Names of the variables that were set

    Raises:
        EnvVarPushError: If the first variable fails
        PartialPushError: If a later variable fails after others were set
    """
    pushed: list[str] = []
    for name, value in variables.items():
        try:
            circleci.set_env_var(github_login, site_name, name, value)
        except CircleCIServiceError as e:
            if pushed:
                raise PartialPushError(
                    f"Failed to set {name} for site {site_name} "
                    f"({', '.join(pushed)} was already set): {e}",
                    variable=name,
                    already_set=tuple(pushed),
                ) from e
            raise EnvVarPushError(
                f"Failed to set {name} for site {site_name}: {e}",
                variable=name,
            ) from e
        pushed.append(name)
        log_message(f"CircleCI variable {name} set for {github_login}/{site_name}")
    return pushed


def run_project_create(
    settings: Settings,
    *,
    http_client: httpx.Client | None = None,
) -> WorkflowState:
    """Run the full Diffy credential setup.

    Args:
        settings: Loaded configuration
        http_client: Optional shared client for all services (tests)

    Returns:
        Final workflow state

    Raises:
        PrerequisiteMissingError: If cached platform values are absent
        ServiceError: If a service call fails fatally
        UserCancelledError: If the user aborts a prompt
    """
    store = FileStore(settings.build_tools_dir)
    state = check_prerequisites(settings, store)
    platform: PlatformConfig = state.platform
    site_name = platform.site_name or ""

    timeout = settings.http_timeout_seconds
    with ExitStack() as stack:
        diffy = stack.enter_context(
            DiffyClient(settings.diffy_api_url, timeout_seconds=timeout, http_client=http_client)
        )

        print_header("Diffy API Key")
        state = enter_api_key(state, diffy, store)

        print_header("Diffy Project")
        state = select_project(state, diffy, store)

        github = stack.enter_context(
            GitHubClient(settings.github_api_url, timeout_seconds=timeout, http_client=http_client)
        )
        print_step("Looking up GitHub user")
        github_login = github.get_login(platform.github_token or "")

        circleci = stack.enter_context(
            CircleCIClient(
                platform.circle_token or "",
                settings.circleci_api_url,
                timeout_seconds=timeout,
                http_client=http_client,
            )
        )
        print_step(f"Setting CircleCI variables for {github_login}/{site_name}")
        push_variables(
            circleci,
            github_login,
            site_name,
            {
                API_KEY_VARIABLE: state.api_key or "",
                PROJECT_ID_VARIABLE: state.project_id or "",
            },
        )

    print_success(f"Variables set for site {site_name}")
    return state


__all__ = [
    "run_project_create",
    "check_prerequisites",
    "push_variables",
    "API_KEY_VARIABLE",
    "PROJECT_ID_VARIABLE",
    "MISSING_PLATFORM_MESSAGE",
    "MISSING_USER_MESSAGE",
]
