"""Unit tests for Runtime."""

import pytest

from siteupdater.core.runtime import ACTIVATE_PLUGINS, DEFAULT_TIME_LIMIT, Runtime


# ---------------------------------------------------------------------------
# Site switching
# ---------------------------------------------------------------------------


class TestSiteSwitching:
    def test_starts_on_main_site(self):
        runtime = Runtime(main_site_id=5)
        assert runtime.current_site_id == 5
        assert runtime.restore_current_site() is False

    def test_switch_and_restore_nest(self):
        runtime = Runtime()
        runtime.switch_to_site(2)
        runtime.switch_to_site(3)
        assert runtime.current_site_id == 3

        assert runtime.restore_current_site() is True
        assert runtime.current_site_id == 2
        assert runtime.restore_current_site() is True
        assert runtime.current_site_id == 1
        assert runtime.restore_current_site() is False

    def test_context_manager_restores(self):
        runtime = Runtime()
        with runtime.switched_to_site(4) as site_id:
            assert site_id == 4
            assert runtime.current_site_id == 4
        assert runtime.current_site_id == 1

    def test_context_manager_restores_on_error(self):
        runtime = Runtime()
        with pytest.raises(KeyError):
            with runtime.switched_to_site(4):
                raise KeyError("boom")
        assert runtime.current_site_id == 1
        assert runtime.restore_current_site() is False


# ---------------------------------------------------------------------------
# Capabilities
# ---------------------------------------------------------------------------


class TestCapabilities:
    def test_current_user_can(self):
        runtime = Runtime(capabilities=[ACTIVATE_PLUGINS])
        assert runtime.current_user_can(ACTIVATE_PLUGINS)
        assert not runtime.current_user_can("manage_network_plugins")

    def test_no_capabilities_by_default(self):
        assert not Runtime().current_user_can(ACTIVATE_PLUGINS)


# ---------------------------------------------------------------------------
# Execution time
# ---------------------------------------------------------------------------


class TestTimeLimit:
    def test_default(self):
        assert Runtime().time_limit == DEFAULT_TIME_LIMIT

    def test_set_returns_previous(self):
        runtime = Runtime(time_limit=10)
        assert runtime.set_time_limit(20) == 10
        assert runtime.time_limit == 20

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            Runtime().set_time_limit(-1)

    def test_unlimited_block(self):
        runtime = Runtime(time_limit=45)
        with runtime.unlimited_execution_time():
            assert runtime.time_limit == 0
        assert runtime.time_limit == 45

    def test_unlimited_block_restores_on_error(self):
        runtime = Runtime(time_limit=45)
        with pytest.raises(RuntimeError):
            with runtime.unlimited_execution_time():
                raise RuntimeError("boom")
        assert runtime.time_limit == 45
