"""Tests for diffy_setup.utils.errors module."""

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


class TestExitCode:
    """Tests for ExitCode enum."""

    def test_exit_code_values(self):
        assert ExitCode.SUCCESS == 0
        assert ExitCode.GENERAL_ERROR == 1
        assert ExitCode.PREREQUISITES_MISSING == 2
        assert ExitCode.SERVICE_ERROR == 3
        assert ExitCode.USER_CANCELLED == 4


class TestDiffySetupError:
    """Tests for base DiffySetupError exception."""

    def test_default_exit_code(self):
        error = DiffySetupError("Test error")
        assert error.exit_code == ExitCode.GENERAL_ERROR

    def test_custom_exit_code(self):
        error = DiffySetupError("Test error", exit_code=ExitCode.SERVICE_ERROR)
        assert error.exit_code == ExitCode.SERVICE_ERROR

    def test_message(self):
        assert str(DiffySetupError("Test error message")) == "Test error message"


class TestSubclassExitCodes:
    def test_prerequisite_missing(self):
        assert PrerequisiteMissingError("x").exit_code == ExitCode.PREREQUISITES_MISSING

    def test_user_cancelled(self):
        assert UserCancelledError("x").exit_code == ExitCode.USER_CANCELLED

    def test_cache_write_is_general_error(self):
        error = CacheWriteError("x")
        assert isinstance(error, DiffySetupError)
        assert error.exit_code == ExitCode.GENERAL_ERROR

    def test_service_errors(self):
        for cls in (DiffyServiceError, GitHubServiceError, CircleCIServiceError):
            error = cls("boom")
            assert isinstance(error, ServiceError)
            assert error.exit_code == ExitCode.SERVICE_ERROR


class TestServiceErrorPrefix:
    def test_adds_service_prefix(self):
        assert str(GitHubServiceError("lookup failed")) == "[GitHub] lookup failed"

    def test_does_not_duplicate_prefix(self):
        assert str(DiffyServiceError("[Diffy] down")) == "[Diffy] down"


class TestEnvVarPushError:
    def test_carries_variable_and_already_set(self):
        error = PartialPushError(
            "Failed to set DIFFY_PROJECT_ID",
            variable="DIFFY_PROJECT_ID",
            already_set=("DIFFY_API_KEY",),
        )
        assert isinstance(error, EnvVarPushError)
        assert isinstance(error, CircleCIServiceError)
        assert error.variable == "DIFFY_PROJECT_ID"
        assert error.already_set == ("DIFFY_API_KEY",)
        assert str(error).startswith("[CircleCI] ")

    def test_first_variable_failure_has_nothing_set(self):
        error = EnvVarPushError("Failed", variable="DIFFY_API_KEY")
        assert error.already_set == ()
