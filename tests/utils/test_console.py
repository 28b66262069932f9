"""Unit tests for the shared console."""

from siteupdater.utils.ui.console import get_console


def test_one_console_per_highlight_setting():
    assert get_console() is get_console()
    assert get_console(highlight=False) is not get_console()


def test_long_messages_are_not_wrapped(capsys):
    domain = "a-very-long-subdomain." * 6 + "example.com"
    get_console().print(f"site:2: {domain}")
    assert f"site:2: {domain}\n" in capsys.readouterr().out
