"""Credential setup workflow for DIFFY-SETUP.

This package contains:
- state: WorkflowState record passed between steps
- key_entry: API key prompt and validation loop
- project_selection: Paginated project picker
- runner: Command orchestration and CircleCI push
"""

from diffy_setup.workflow.key_entry import enter_api_key
from diffy_setup.workflow.project_selection import ProjectSelector, select_project
from diffy_setup.workflow.runner import check_prerequisites, push_variables, run_project_create
from diffy_setup.workflow.state import WorkflowState

__all__ = [
    "WorkflowState",
    "enter_api_key",
    "ProjectSelector",
    "select_project",
    "check_prerequisites",
    "push_variables",
    "run_project_create",
]
