"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

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
from siteupdater.utils.logger import get_logger
from siteupdater.utils.ui.formatters import format_error


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = exit_codes.ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


def exit_code_for(error: SiteUpdaterError) -> int:
    """Map a domain error to its semantic exit code."""
    if isinstance(error, PermissionDeniedError):
        return exit_codes.ERROR_PERMISSION_DENIED
    if isinstance(error, MissingDependencyError):
        return exit_codes.ERROR_DEPENDENCY
    if isinstance(error, (RoutineNotFoundError, RoutineRegistryError)):
        return exit_codes.ERROR_UPDATE_FAILED
    if isinstance(error, SiteNotFoundError):
        return exit_codes.ERROR_NOT_FOUND
    if isinstance(error, InvalidConfigurationError):
        return exit_codes.ERROR_INVALID_ARGS
    return exit_codes.ERROR_GENERAL


def command_wrapper(func: Callable) -> Callable:
    """Wrap a command with logging and error-to-exit-code translation."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except (AppError, SiteUpdaterError) as e:
            elapsed = time.monotonic() - start
            code = e.exit_code if isinstance(e, AppError) else exit_code_for(e)
            logger.error(
                "command failed: %s (%.3fs) [%s] - %s",
                cmd,
                elapsed,
                exit_codes.get_exit_code_name(code),
                str(e),
            )
            format_error(str(e))
            raise typer.Exit(code=code) from e

        except typer.Exit:
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=exit_codes.ERROR_GENERAL) from e

    return wrapper
