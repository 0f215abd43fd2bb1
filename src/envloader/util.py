"""Shared utilities for rendering parsed values."""

from __future__ import annotations

_NEEDS_QUOTES = set(" \t\r\n\"'\\$#=")

_DOTENV_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "$": "\\$",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def mask(value: str) -> str:
    """Hide all but the first and last three characters of a value."""
    if len(value) <= 6:
        return "****"
    return value[:3] + "****" + value[-3:]


def format_env_value(value: str) -> str:
    """Format a value for .env so that parsing it back yields *value* unchanged.

    Plain values are written bare. Anything with whitespace, quotes, ``$``,
    ``#``, ``=`` or backslashes is double-quoted with those characters escaped.
    """
    if not value:
        return '""'
    if not any(c in _NEEDS_QUOTES for c in value):
        return value
    body = "".join(_DOTENV_ESCAPES.get(c, c) for c in value)
    if body.endswith("\\"):
        # A backslash right before a single closing quote would escape it.
        return '"""' + body + '"""'
    return '"' + body + '"'


def shell_escape(value: str) -> str:
    """Escape for Unix sh: single-quote wrapped, internal ' -> '\\''."""
    if not value or any(c in value for c in " \t\n'\"\\$`!#&|;(){}*?<>~"):
        return "'" + value.replace("'", "'\\''") + "'"
    return value


def powershell_escape(value: str) -> str:
    """Escape for PowerShell single-quoted string: ' -> ''."""
    return value.replace("'", "''")
