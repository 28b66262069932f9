"""Unit tests for config management commands (view, get, set, reset)."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from siteupdater.commands.config import _parse_value, app
from siteupdater.services.config_service import ConfigService

runner = CliRunner()


@pytest.fixture()
def service(tmp_path):
    """Real ConfigService rooted in tmp_path, patched into the command module."""
    with (
        patch(
            "siteupdater.services.config_service.user_config_dir",
            return_value=str(tmp_path / "config"),
        ),
        patch(
            "siteupdater.services.config_service.user_data_dir",
            return_value=str(tmp_path / "data"),
        ),
    ):
        svc = ConfigService()
        with patch("siteupdater.commands.config.get_config_service", return_value=svc):
            yield svc


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class TestParseValue:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("true", True),
            ("False", False),
            ("42", 42),
            ("a, b,c", ["a", "b", "c"]),
            ("shop", "shop"),
        ],
    )
    def test_parse(self, raw, expected):
        assert _parse_value(raw) == expected


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


class TestViewConfig:
    def test_json(self, service):
        result = runner.invoke(app, ["view", "-o", "json"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["plugin_slug"] == "plugin-name"

    def test_uses_configured_format(self, service):
        service.set("output.format", "json")
        result = runner.invoke(app, ["view"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["output"] == {"format": "json"}


class TestGetConfig:
    def test_existing_key(self, service):
        result = runner.invoke(app, ["get", "output.format"])
        assert result.exit_code == 0
        assert "table" in result.output

    def test_missing_key(self, service):
        result = runner.invoke(app, ["get", "nope"])
        assert result.exit_code == 1
        assert "not found" in result.output


class TestSetConfig:
    def test_bool(self, service):
        result = runner.invoke(app, ["set", "multisite", "true"])
        assert result.exit_code == 0, result.output
        assert service.config.multisite is True

    def test_int(self, service):
        runner.invoke(app, ["set", "network_id", "2"])
        assert service.config.network_id == 2

    def test_single_value_for_list_key(self, service):
        runner.invoke(app, ["set", "required_components", "payments"])
        assert service.config.required_components == ["payments"]

    def test_list(self, service):
        runner.invoke(app, ["set", "capabilities", "activate_plugins,manage_network_plugins"])
        assert service.config.capabilities == ["activate_plugins", "manage_network_plugins"]

    def test_unknown_key(self, service):
        result = runner.invoke(app, ["set", "nope", "1"])
        assert result.exit_code == 1
        assert "Failed to set config" in result.output

    def test_unknown_output_format(self, service):
        result = runner.invoke(app, ["set", "output.format", "xml"])
        assert result.exit_code == 1
        assert service.get("output.format") == "table"

    def test_invalid_value(self, service):
        result = runner.invoke(app, ["set", "network_id", "0"])
        assert result.exit_code == 1
        assert service.config.network_id == 1


class TestResetConfig:
    def test_reset_key(self, service):
        service.set("time_limit", 60)
        result = runner.invoke(app, ["reset", "time_limit", "--yes"])
        assert result.exit_code == 0
        assert service.config.time_limit == 30

    def test_reset_all_confirmed(self, service):
        service.set("multisite", True)
        result = runner.invoke(app, ["reset"], input="y\n")
        assert result.exit_code == 0
        assert service.config.multisite is False

    def test_reset_cancelled(self, service):
        service.set("multisite", True)
        result = runner.invoke(app, ["reset"], input="n\n")
        assert result.exit_code == 0
        assert "Cancelled" in result.output
        assert service.config.multisite is True
