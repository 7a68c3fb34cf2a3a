"""Diffy API key entry step.

Prompts with masked input until Diffy accepts the key. There is no retry
limit; the user leaves the loop with an accepted key or by cancelling.
"""

from __future__ import annotations

import dataclasses
import logging

from diffy_setup.integrations.diffy import API_DOCS_URL, KEYS_PAGE_URL, DiffyClient
from diffy_setup.store.file_store import FileStore
from diffy_setup.ui.prompts import prompt_secret
from diffy_setup.utils.console import console, print_error
from diffy_setup.utils.logging import log_message
from diffy_setup.workflow.state import WorkflowState

logger = logging.getLogger(__name__)

KEY_PROMPT = (
    "Please generate a Diffy personal API key by visiting the page:\n\n"
    f"    {KEYS_PAGE_URL}\n\n"
    " For more information, see:\n\n"
    f"    {API_DOCS_URL}.\n"
)


def enter_api_key(state: WorkflowState, diffy: DiffyClient, store: FileStore) -> WorkflowState:
    """Ask for an API key until Diffy accepts one, then cache it.

    Args:
        state: Current workflow state
        diffy: Diffy API client
        store: Credential store the key is written to

    Returns:
        New state with api_key and session_token set

    Raises:
        DiffyServiceError: If the Diffy API cannot be reached
        UserCancelledError: If the user aborts the prompt
        CacheWriteError: If the accepted key cannot be cached
    """
    attempts = 0
    while True:
        console.print("\n")
        api_key = prompt_secret(KEY_PROMPT).strip()
        attempts += 1

        result = diffy.validate_key(api_key)
        if result.accepted:
            store.set(state.key_cache_key, api_key)
            log_message(f"Diffy API key accepted after {attempts} attempt(s)")
            return dataclasses.replace(state, api_key=api_key, session_token=result.token)

        logger.debug("API key attempt %d rejected", attempts)
        print_error("Provided API Key is invalid")


__all__ = ["enter_api_key", "KEY_PROMPT"]
