"""Sanitizers for submitted setting values.

These follow the host's rules for keys, single-line text and multi-line text.
"""

from __future__ import annotations

import re
from typing import Any

_KEY_DISALLOWED = re.compile(r"[^a-z0-9_\-]")
_SCRIPT_STYLE = re.compile(r"<(script|style)[^>]*?>.*?</\1>", re.IGNORECASE | re.DOTALL)
_TAG = re.compile(r"<[^>]*>")
_LESS_THAN = re.compile(r"<[^>]*?((?=<)|>|$)")
_OCTET = re.compile(r"%[a-f0-9]{2}", re.IGNORECASE)
_WHITESPACE_RUN = re.compile(r"[\r\n\t ]+")
_SPACE_RUN = re.compile(r" +")


def _as_text(value: Any) -> str:
    if value is None or isinstance(value, (dict, list, tuple, set)):
        return ""
    if isinstance(value, bool):
        return "1" if value else ""
    return str(value)


def sanitize_key(value: Any) -> str:
    """Lowercase and keep only ``[a-z0-9_-]``."""
    return _KEY_DISALLOWED.sub("", _as_text(value).lower())


def strip_all_tags(text: str) -> str:
    """Remove script/style blocks and every HTML tag."""
    return _TAG.sub("", _SCRIPT_STYLE.sub("", text))


def _escape_lone_less_than(text: str) -> str:
    # '<' that never closes is text, not the start of a tag
    def replace(match: re.Match[str]) -> str:
        chunk = match.group(0)
        return chunk if chunk.endswith(">") else chunk.replace("<", "&lt;")

    return _LESS_THAN.sub(replace, text)


def _sanitize_text(value: Any, keep_newlines: bool) -> str:
    text = _as_text(value)

    if "<" in text:
        text = strip_all_tags(_escape_lone_less_than(text))

    if not keep_newlines:
        text = _WHITESPACE_RUN.sub(" ", text)
    text = text.strip()

    found = False
    while match := _OCTET.search(text):
        text = text.replace(match.group(0), "")
        found = True
    if found:
        text = _SPACE_RUN.sub(" ", text).strip()

    return text


def sanitize_text_field(value: Any) -> str:
    """Single-line text: no tags, line breaks, tabs, octets or extra spaces."""
    return _sanitize_text(value, keep_newlines=False)


def sanitize_textarea_field(value: Any) -> str:
    """Like :func:`sanitize_text_field` but line breaks are preserved."""
    return _sanitize_text(value, keep_newlines=True)
