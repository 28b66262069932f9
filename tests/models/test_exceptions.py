"""Unit tests for domain exceptions."""

from siteupdater.models.exceptions import (
    MissingDependencyError,
    PermissionDeniedError,
    RoutineNotFoundError,
    SiteNotFoundError,
    SiteUpdaterError,
)


def test_routine_not_found_carries_version():
    error = RoutineNotFoundError(3)
    assert isinstance(error, SiteUpdaterError)
    assert error.version == 3
    assert str(error) == "Update routine not found for database version 3"


def test_permission_denied_default_message():
    error = PermissionDeniedError("activate_plugins")
    assert error.capability == "activate_plugins"
    assert "activate_plugins" in str(error)


def test_permission_denied_custom_message():
    error = PermissionDeniedError("activate_plugins", "nope")
    assert str(error) == "nope"


def test_missing_dependency_messages():
    assert str(MissingDependencyError("shop")) == "This plugin requires shop to be active!"
    error = MissingDependencyError("shop", 4)
    assert str(error) == "This plugin requires shop to be active on site: 4"
    assert error.site_id == 4


def test_site_not_found():
    assert SiteNotFoundError(9).site_id == 9
