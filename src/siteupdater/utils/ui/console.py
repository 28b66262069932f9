"""Shared Rich consoles for siteupdater output."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=2)
def get_console(highlight: bool = True) -> Console:
    """Return the shared console for the given ``highlight`` setting.

    Messages soft-wrap so long domains and option names stay on one line when
    output is piped. Tables still fit the console width.
    """
    return Console(highlight=highlight, soft_wrap=True)
