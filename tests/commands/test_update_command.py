"""Tests for the update and status commands."""

from __future__ import annotations

import json

from typer.testing import CliRunner

from siteupdater.main import app
from siteupdater.updater.registry import RoutineRegistry, UpdateRoutine
from siteupdater.updater.routines import DATABASE_VERSION
from siteupdater.utils import exit_codes

runner = CliRunner()

OPTION = "plugin-name-configuration"


# ---------------------------------------------------------------------------
# update
# ---------------------------------------------------------------------------


class TestUpdateCommand:
    def test_help(self):
        result = runner.invoke(app, ["update", "--help"])
        assert result.exit_code == 0
        assert "--target" in result.output

    def test_updates_to_latest(self, patch_host):
        host = patch_host()
        result = runner.invoke(app, ["update"])

        assert result.exit_code == 0, result.output
        assert "applied routine(s) 1, 2" in result.output
        assert host.options.get_option(OPTION) == {"db-version": DATABASE_VERSION}

    def test_second_run_reports_up_to_date(self, patch_host):
        patch_host()
        runner.invoke(app, ["update"])
        result = runner.invoke(app, ["update"])

        assert result.exit_code == 0
        assert "nothing to apply" in result.output
        assert f"database version {DATABASE_VERSION}" in result.output

    def test_lower_target_reports_stored_version(self, patch_host):
        host = patch_host()
        runner.invoke(app, ["update"])

        result = runner.invoke(app, ["update", "--target", "0"])

        assert result.exit_code == 0
        assert f"network:1: nothing to apply (database version {DATABASE_VERSION})" in result.output
        assert "version 0" not in result.output
        assert host.options.get_option(OPTION) == {"db-version": DATABASE_VERSION}

    def test_partial_target(self, patch_host):
        host = patch_host()
        result = runner.invoke(app, ["update", "--target", "1"])

        assert result.exit_code == 0
        assert host.options.get_option(OPTION) == {"db-version": 1}

    def test_negative_target_rejected(self, patch_host):
        patch_host()
        result = runner.invoke(app, ["update", "--target", "-1"])
        assert result.exit_code == 2

    def test_missing_routine_exit_code(self, patch_host):
        host = patch_host()
        result = runner.invoke(app, ["update", "--target", "5"])

        assert result.exit_code == exit_codes.ERROR_UPDATE_FAILED
        assert "not found for database version 3" in result.output
        assert host.options.get_option(OPTION) == {"db-version": 2}

    def test_failing_routine_exit_code(self, patch_host):
        host = patch_host()

        def broken(context):
            raise RuntimeError("disk on fire")

        host.registry = RoutineRegistry([UpdateRoutine(1, "broken", broken)])
        result = runner.invoke(app, ["update", "--target", "1"])

        assert result.exit_code == exit_codes.ERROR_UPDATE_FAILED
        assert "disk on fire" in result.output

    def test_multisite_reports_each_site(self, patch_host):
        host = patch_host(multisite=True)
        host.sites.add_site("two.example.com")

        result = runner.invoke(app, ["update"])

        assert result.exit_code == 0, result.output
        assert "site:1" in result.output
        assert "site:2" in result.output


# ---------------------------------------------------------------------------
# status
# ---------------------------------------------------------------------------


class TestStatusCommand:
    def test_single_site_json(self, patch_host):
        patch_host()
        result = runner.invoke(app, ["status", "--output", "json"])

        assert result.exit_code == 0, result.output
        rows = json.loads(result.output)
        assert rows == [
            {
                "scope": "network:1",
                "db_version": 0,
                "target": DATABASE_VERSION,
                "pending": DATABASE_VERSION,
            }
        ]

    def test_multisite_lists_sites(self, patch_host):
        host = patch_host(multisite=True)
        host.sites.add_site("two.example.com")
        host.options.update_blog_option(2, OPTION, {"db-version": DATABASE_VERSION})

        result = runner.invoke(app, ["status", "-o", "json"])

        rows = json.loads(result.output)
        assert [row["scope"] for row in rows] == ["site:1", "site:2"]
        assert [row["pending"] for row in rows] == [DATABASE_VERSION, 0]

    def test_configured_output_format_is_default(self, patch_host):
        patch_host(output={"format": "json"})
        result = runner.invoke(app, ["status"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)[0]["scope"] == "network:1"

    def test_output_option_overrides_configured_format(self, patch_host):
        patch_host(output={"format": "json"})
        result = runner.invoke(app, ["status", "-o", "table"])

        assert result.exit_code == 0
        assert "Scope" in result.output

    def test_table_output(self, patch_host):
        patch_host()
        result = runner.invoke(app, ["status"])
        assert result.exit_code == 0
        assert "network:1" in result.output
