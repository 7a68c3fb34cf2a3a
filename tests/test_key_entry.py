"""Tests for diffy_setup.workflow.key_entry module."""

from unittest.mock import MagicMock, patch

import pytest

from diffy_setup.integrations.diffy import KeyValidation, KeyValidationResult
from diffy_setup.store.file_store import FileStore
from diffy_setup.utils.errors import CacheWriteError, DiffyServiceError, UserCancelledError
from diffy_setup.workflow.key_entry import KEY_PROMPT, enter_api_key
from diffy_setup.workflow.state import WorkflowState

ACCEPTED = KeyValidationResult(KeyValidation.ACCEPTED, token="tok1")
REJECTED = KeyValidationResult(KeyValidation.REJECTED)


@pytest.fixture
def diffy() -> MagicMock:
    return MagicMock()


@pytest.fixture
def spy_store(store: FileStore) -> MagicMock:
    return MagicMock(wraps=store)


class TestEnterApiKey:
    @patch("diffy_setup.workflow.key_entry.print_error")
    @patch("diffy_setup.workflow.key_entry.prompt_secret")
    def test_accepted_key_is_persisted_once(
        self, mock_prompt, mock_error, diffy, spy_store, workflow_state: WorkflowState
    ):
        mock_prompt.return_value = "GOODKEY"
        diffy.validate_key.return_value = ACCEPTED

        state = enter_api_key(workflow_state, diffy, spy_store)

        assert state.api_key == "GOODKEY"
        assert state.session_token == "tok1"
        spy_store.set.assert_called_once_with("u1-diffy-key", "GOODKEY")
        assert spy_store.get("u1-diffy-key") == "GOODKEY"
        mock_error.assert_not_called()

    @patch("diffy_setup.workflow.key_entry.print_error")
    @patch("diffy_setup.workflow.key_entry.prompt_secret")
    def test_rejected_keys_reprompt_until_accepted(
        self, mock_prompt, mock_error, diffy, spy_store, workflow_state
    ):
        mock_prompt.side_effect = ["BAD1", "BAD2", "BAD3", "GOODKEY"]
        diffy.validate_key.side_effect = [REJECTED, REJECTED, REJECTED, ACCEPTED]

        state = enter_api_key(workflow_state, diffy, spy_store)

        assert state.api_key == "GOODKEY"
        assert mock_prompt.call_count == 4
        assert mock_error.call_count == 3
        mock_error.assert_called_with("Provided API Key is invalid")
        spy_store.set.assert_called_once_with("u1-diffy-key", "GOODKEY")

    @patch("diffy_setup.workflow.key_entry.print_error")
    @patch("diffy_setup.workflow.key_entry.prompt_secret")
    def test_rejected_key_is_never_persisted(
        self, mock_prompt, mock_error, diffy, store, workflow_state
    ):
        mock_prompt.side_effect = ["BADKEY", UserCancelledError("stop")]
        diffy.validate_key.return_value = REJECTED

        with pytest.raises(UserCancelledError):
            enter_api_key(workflow_state, diffy, store)

        assert store.get("u1-diffy-key") is None

    @patch("diffy_setup.workflow.key_entry.prompt_secret")
    def test_key_is_trimmed(self, mock_prompt, diffy, store, workflow_state):
        mock_prompt.return_value = "  GOODKEY \n"
        diffy.validate_key.return_value = ACCEPTED

        state = enter_api_key(workflow_state, diffy, store)

        diffy.validate_key.assert_called_once_with("GOODKEY")
        assert state.api_key == "GOODKEY"

    @patch("diffy_setup.workflow.key_entry.prompt_secret")
    def test_prompt_uses_masked_input_with_instructions(
        self, mock_prompt, diffy, store, workflow_state
    ):
        mock_prompt.return_value = "GOODKEY"
        diffy.validate_key.return_value = ACCEPTED

        enter_api_key(workflow_state, diffy, store)

        mock_prompt.assert_called_once_with(KEY_PROMPT)
        assert "https://app.diffy.website/#/keys" in KEY_PROMPT

    @patch("diffy_setup.workflow.key_entry.prompt_secret")
    def test_service_failure_propagates(self, mock_prompt, diffy, store, workflow_state):
        mock_prompt.return_value = "KEY"
        diffy.validate_key.side_effect = DiffyServiceError("down")

        with pytest.raises(DiffyServiceError):
            enter_api_key(workflow_state, diffy, store)

        assert store.get("u1-diffy-key") is None

    @patch("diffy_setup.workflow.key_entry.prompt_secret")
    def test_cache_write_failure_propagates(self, mock_prompt, diffy, spy_store, workflow_state):
        mock_prompt.return_value = "GOODKEY"
        diffy.validate_key.return_value = ACCEPTED
        spy_store.set.side_effect = CacheWriteError("Could not write cache entry u1-diffy-key")

        with pytest.raises(CacheWriteError):
            enter_api_key(workflow_state, diffy, spy_store)

        assert mock_prompt.call_count == 1

    @patch("diffy_setup.workflow.key_entry.prompt_secret")
    def test_input_state_is_not_mutated(self, mock_prompt, diffy, store, workflow_state):
        mock_prompt.return_value = "GOODKEY"
        diffy.validate_key.return_value = ACCEPTED

        enter_api_key(workflow_state, diffy, store)

        assert workflow_state.api_key is None
        assert workflow_state.session_token is None
