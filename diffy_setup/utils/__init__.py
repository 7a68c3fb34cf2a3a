"""Utility modules for DIFFY-SETUP.

This package contains:
- console: Rich-based terminal output utilities
- errors: Custom exceptions and exit codes
- logging: Logging configuration
"""

from diffy_setup.utils.console import (
    console,
    print_error,
    print_header,
    print_info,
    print_step,
    print_success,
    print_warning,
)
from diffy_setup.utils.errors import (
    CacheWriteError,
    CircleCIServiceError,
    DiffyServiceError,
    DiffySetupError,
    EnvVarPushError,
    ExitCode,
    GitHubServiceError,
    PartialPushError,
    PrerequisiteMissingError,
    ServiceError,
    UserCancelledError,
)
from diffy_setup.utils.logging import log_message, log_request, setup_logging

__all__ = [
    # Console
    "console",
    "print_error",
    "print_success",
    "print_warning",
    "print_info",
    "print_header",
    "print_step",
    # Errors
    "ExitCode",
    "DiffySetupError",
    "PrerequisiteMissingError",
    "ServiceError",
    "DiffyServiceError",
    "GitHubServiceError",
    "CircleCIServiceError",
    "EnvVarPushError",
    "PartialPushError",
    "CacheWriteError",
    "UserCancelledError",
    # Logging
    "setup_logging",
    "log_message",
    "log_request",
]
