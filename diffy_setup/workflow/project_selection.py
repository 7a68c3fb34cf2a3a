"""Diffy project selection step.

A small state machine drives the picker:

    Browsing(page) --numeric input--> Validating(candidate, page)
    Browsing(page) --"N"/"P"--------> Browsing(page +/- 1, floored at 0)
    Browsing(page) --anything else--> Browsing(page)
    Validating     --project found--> Resolved(project_id)
    Validating     --otherwise------> Browsing(page)

There is no upper bound on the page index; pages past the end simply
list no projects.
"""

from __future__ import annotations

import dataclasses
import logging
import re
from dataclasses import dataclass
from enum import Enum

from diffy_setup.integrations.diffy import DiffyClient
from diffy_setup.store.file_store import FileStore
from diffy_setup.ui.prompts import prompt_input
from diffy_setup.utils.console import console, print_error, print_warning
from diffy_setup.utils.logging import log_message
from diffy_setup.workflow.state import WorkflowState

logger = logging.getLogger(__name__)

SELECTION_PROMPT = "Enter id of the project (N - Next page. P - Previous page)"
INVALID_COMMAND_MESSAGE = "Invalid command entered"
INACCESSIBLE_PROJECT_MESSAGE = (
    "Entered project either does not exist or you do not have access to it."
)

_NUMERIC = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")


class SelectionCommand(Enum):
    """Meaning of one line typed at the project prompt."""

    PROJECT_ID = "project_id"
    NEXT = "N"
    PREVIOUS = "P"
    INVALID = "invalid"


@dataclass(frozen=True)
class Browsing:
    page: int = 0


@dataclass(frozen=True)
class Validating:
    candidate_id: str
    page: int


@dataclass(frozen=True)
class Resolved:
    project_id: str


SelectionState = Browsing | Validating | Resolved


def is_numeric(value: str) -> bool:
    """True if value is a plain decimal or exponent-notation number."""
    return bool(_NUMERIC.match(value))


def parse_selection(raw: str) -> SelectionCommand:
    """Classify user input as a project id or a navigation command."""
    value = raw.strip()
    if is_numeric(value):
        return SelectionCommand.PROJECT_ID
    command = value.upper()
    if command == SelectionCommand.NEXT.value:
        return SelectionCommand.NEXT
    if command == SelectionCommand.PREVIOUS.value:
        return SelectionCommand.PREVIOUS
    return SelectionCommand.INVALID


def next_page(page: int, command: SelectionCommand) -> int:
    """Apply a navigation command to a page index.

    The index never drops below zero and has no upper bound.
    """
    if command is SelectionCommand.NEXT:
        return page + 1
    if command is SelectionCommand.PREVIOUS:
        return max(page - 1, 0)
    return page


class ProjectSelector:
    """Runs the project picker until a valid project id is chosen.

    Args:
        state: Workflow state; must carry a session token
        diffy: Diffy API client
        store: Credential store the project id is written to
    """

    def __init__(self, state: WorkflowState, diffy: DiffyClient, store: FileStore) -> None:
        if not state.session_token:
            raise ValueError("Project selection requires a validated Diffy session token")
        self._state = state
        self._diffy = diffy
        self._store = store

    def run(self, start: SelectionState | None = None) -> WorkflowState:
        """Drive the state machine to Resolved and return the updated state.

        Raises:
            UserCancelledError: If the user aborts the prompt
            CacheWriteError: If the chosen project id cannot be cached
        """
        current: SelectionState = start or Browsing(0)
        while not isinstance(current, Resolved):
            current = self.step(current)
        return dataclasses.replace(self._state, project_id=current.project_id)

    def step(self, current: SelectionState) -> SelectionState:
        """Perform one transition of the state machine."""
        if isinstance(current, Browsing):
            return self._browse(current)
        if isinstance(current, Validating):
            return self._validate(current)
        return current

    def _browse(self, current: Browsing) -> SelectionState:
        console.print("\n")
        self._render_page(current.page)

        raw = prompt_input(SELECTION_PROMPT)
        console.print(f"Entered: {raw}", markup=False)

        command = parse_selection(raw)
        if command is SelectionCommand.PROJECT_ID:
            return Validating(candidate_id=raw.strip(), page=current.page)
        if command is SelectionCommand.INVALID:
            print_error(INVALID_COMMAND_MESSAGE)
        return Browsing(next_page(current.page, command))

    def _render_page(self, page: int) -> None:
        result = self._diffy.list_projects(self._state.session_token or "", page)
        if not result.ok:
            log_message(f"Project listing for page {page} failed: {result.error}")
            print_warning("Could not load the project list. You can still enter a project id.")

        console.print(f"Available projects (page {page}):")
        for project in result.projects:
            console.print(f"[{project.id}] {project.name}", markup=False)

    def _validate(self, current: Validating) -> SelectionState:
        lookup = self._diffy.get_project(self._state.session_token or "", current.candidate_id)
        if lookup.found:
            self._store.set(self._state.project_cache_key, current.candidate_id)
            log_message(f"Diffy project {current.candidate_id} selected")
            return Resolved(current.candidate_id)

        logger.debug(
            "Project %s rejected (%s)", current.candidate_id, lookup.status.value
        )
        print_error(INACCESSIBLE_PROJECT_MESSAGE)
        return Browsing(current.page)


def select_project(state: WorkflowState, diffy: DiffyClient, store: FileStore) -> WorkflowState:
    """Let the user pick a Diffy project and cache its id.

    Returns:
        New state with project_id set
    """
    return ProjectSelector(state, diffy, store).run()


__all__ = [
    "Browsing",
    "Validating",
    "Resolved",
    "SelectionCommand",
    "ProjectSelector",
    "is_numeric",
    "parse_selection",
    "next_page",
    "select_project",
    "SELECTION_PROMPT",
    "INVALID_COMMAND_MESSAGE",
    "INACCESSIBLE_PROJECT_MESSAGE",
]
