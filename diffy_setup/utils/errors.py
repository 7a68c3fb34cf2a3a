"""Custom exceptions and exit codes for DIFFY-SETUP.

This module defines the exit codes and exception hierarchy used throughout
the application. Rejected keys and unknown projects are not exceptions;
they are reported as typed results by the integration clients and handled
by the interactive loops.
"""

from enum import IntEnum
from typing import ClassVar


class ExitCode(IntEnum):
    """Exit codes for the diffy-setup CLI.

    These codes are used for consistent error reporting and can be
    checked by calling scripts or CI systems.
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    PREREQUISITES_MISSING = 2
    SERVICE_ERROR = 3
    USER_CANCELLED = 4


class DiffySetupError(Exception):
    """Base exception for DIFFY-SETUP errors.

    All custom exceptions in this application should inherit from this class.
    Each exception type has an associated exit code for proper error reporting.
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.GENERAL_ERROR

    def __init__(self, message: str, exit_code: ExitCode | None = None) -> None:
        """Initialize the exception."""
        super().__init__(message)
        self._exit_code = exit_code

    @property
    def exit_code(self) -> ExitCode:
        """Get the exit code for this exception."""
        if self._exit_code is not None:
            return self._exit_code
        return self.__class__._default_exit_code


class PrerequisiteMissingError(DiffySetupError):
    """Required cached platform configuration is absent.

    Raised when:
    - No cached GitHub token is found
    - No cached CircleCI token is found
    - The cached site name is missing or empty
    - The hosting platform session has no user id
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.PREREQUISITES_MISSING


class ServiceError(DiffySetupError):
    """An external HTTP service failed in a way that ends the command.

    Attributes:
        service: Human-readable service name
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.SERVICE_ERROR
    service: ClassVar[str] = "service"

    def __init__(self, message: str, exit_code: ExitCode | None = None) -> None:
        if not message.startswith(f"[{self.service}]"):
            message = f"[{self.service}] {message}"
        super().__init__(message, exit_code)


class DiffyServiceError(ServiceError):
    """Diffy API could not be reached or answered with a server error."""

    service: ClassVar[str] = "Diffy"


class GitHubServiceError(ServiceError):
    """GitHub user lookup failed."""

    service: ClassVar[str] = "GitHub"


class CircleCIServiceError(ServiceError):
    """CircleCI API call failed."""

    service: ClassVar[str] = "CircleCI"


class EnvVarPushError(CircleCIServiceError):
    """An environment variable could not be set on the CircleCI project.

    Attributes:
        variable: Name of the variable that failed
        already_set: Variables pushed successfully before the failure
    """

    def __init__(
        self,
        message: str,
        variable: str,
        already_set: tuple[str, ...] = (),
    ) -> None:
        super().__init__(message)
        self.variable = variable
        self.already_set = already_set


class PartialPushError(EnvVarPushError):
    """A variable failed after at least one other variable was set.

    Earlier pushes are not rolled back.
    """


class CacheWriteError(DiffySetupError):
    """A value could not be written to the local credential cache.

    Raised when the build-tools cache directory cannot be created or
    an entry file cannot be replaced (read-only disk, wrong owner).
    """


class UserCancelledError(DiffySetupError):
    """User cancelled the operation.

    Raised when:
    - User presses Ctrl+C
    - A prompt is aborted and returns no answer
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.USER_CANCELLED


__all__ = [
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
]
