"""Unit tests for command decorators."""

from unittest.mock import patch

import pytest
import typer

from siteupdater.commands.decorators import AppError, command_wrapper, exit_code_for
from siteupdater.models.exceptions import (
    InvalidConfigurationError,
    MissingDependencyError,
    PermissionDeniedError,
    RoutineNotFoundError,
    RoutineRegistryError,
    SiteNotFoundError,
    SiteUpdaterError,
)
from siteupdater.utils import exit_codes


class TestExitCodeFor:
    @pytest.mark.parametrize(
        "error, code",
        [
            (PermissionDeniedError("activate_plugins"), exit_codes.ERROR_PERMISSION_DENIED),
            (MissingDependencyError("shop"), exit_codes.ERROR_DEPENDENCY),
            (RoutineNotFoundError(2), exit_codes.ERROR_UPDATE_FAILED),
            (RoutineRegistryError("gap"), exit_codes.ERROR_UPDATE_FAILED),
            (SiteNotFoundError(3), exit_codes.ERROR_NOT_FOUND),
            (InvalidConfigurationError("bad"), exit_codes.ERROR_INVALID_ARGS),
            (SiteUpdaterError("other"), exit_codes.ERROR_GENERAL),
        ],
    )
    def test_mapping(self, error, code):
        assert exit_code_for(error) == code


class TestAppError:
    def test_default_exit_code(self):
        assert AppError("boom").exit_code == exit_codes.ERROR_GENERAL

    def test_custom_exit_code(self):
        error = AppError("boom", exit_codes.ERROR_NOT_FOUND)
        assert str(error) == "boom"
        assert error.exit_code == exit_codes.ERROR_NOT_FOUND


class TestCommandWrapper:
    def test_returns_result(self):
        @command_wrapper
        def ok():
            return 42

        assert ok() == 42

    def test_preserves_name(self):
        @command_wrapper
        def my_command():
            pass

        assert my_command.__name__ == "my_command"

    def test_app_error_uses_its_exit_code(self):
        @command_wrapper
        def failing():
            raise AppError("nope", exit_codes.ERROR_INVALID_ARGS)

        with patch("siteupdater.commands.decorators.format_error") as mock_error:
            with pytest.raises(typer.Exit) as exc_info:
                failing()

        assert exc_info.value.exit_code == exit_codes.ERROR_INVALID_ARGS
        mock_error.assert_called_once_with("nope")

    def test_domain_error_mapped(self):
        @command_wrapper
        def failing():
            raise PermissionDeniedError("activate_plugins", "denied")

        with patch("siteupdater.commands.decorators.format_error"):
            with pytest.raises(typer.Exit) as exc_info:
                failing()

        assert exc_info.value.exit_code == exit_codes.ERROR_PERMISSION_DENIED

    def test_typer_exit_passes_through(self):
        @command_wrapper
        def exiting():
            raise typer.Exit(0)

        with pytest.raises(typer.Exit) as exc_info:
            exiting()
        assert exc_info.value.exit_code == 0

    def test_unexpected_error(self):
        @command_wrapper
        def crashing():
            raise KeyError("x")

        with patch("siteupdater.commands.decorators.format_error") as mock_error:
            with pytest.raises(typer.Exit) as exc_info:
                crashing()

        assert exc_info.value.exit_code == exit_codes.ERROR_GENERAL
        assert "unexpected" in mock_error.call_args[0][0]

    def test_failure_is_logged(self, tmp_path):
        @command_wrapper
        def failing():
            raise AppError("logged failure", exit_codes.ERROR_NOT_FOUND)

        with patch("siteupdater.commands.decorators.format_error"):
            with pytest.raises(typer.Exit):
                failing()

        log_text = (tmp_path / "logs" / "siteupdater.log").read_text()
        assert "command started: failing" in log_text
        assert "logged failure" in log_text
        assert "[ERROR_NOT_FOUND]" in log_text
