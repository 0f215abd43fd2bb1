"""Parse .env files into key-value dicts.

Handles:
  - blank lines and ``#`` comments (full-line and after values)
  - ``export KEY=VALUE`` prefix
  - unquoted values, with escape decoding and ``${NAME}`` substitution
  - single-quoted values, taken literally
  - double-quoted values, with escape decoding and substitution
  - triple-quoted (``\"\"\"`` / ``'''``) values spanning several lines
  - values with ``=`` in them (only first ``=`` splits)

Parsing is all-or-nothing: the first problem raises one of the
:mod:`envloader.errors` kinds and no mapping is returned.
"""

from __future__ import annotations

import re
from collections import ChainMap
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path

from envloader.errors import (
    EnvFileError,
    InvalidKey,
    InvalidLine,
    UnexpectedCharacters,
    UnterminatedMultiLine,
    UnterminatedQuote,
)

_KEY_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

_SUBSTITUTE_RE = re.compile(
    r"""
    (?P<escaped>\\)?                # backslash suppresses substitution
    \$
    (?:
        \((?P<paren>[A-Z0-9_]+)\)?  # $(NAME)
      | \{(?P<brace>[A-Z0-9_]+)\}?  # ${NAME}
      | (?P<bare>[A-Z0-9_]+)        # $NAME
    )
    """,
    re.VERBOSE,
)

_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)
_ESCAPES = {"n": "\n", "r": "\r", "t": "\t", "f": "\f", "b": "\b"}

_INLINE_COMMENT_RE = re.compile(r"(?<!\\)#")

_EXPORT_PREFIX = "export "
_TRIPLE_MARKERS = ('"""', "'''")


class _LineSource:
    """Forward-only line iterator that remembers the current line number."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: Iterator[str] = iter(lines)
        self.lineno = 0

    def __iter__(self) -> _LineSource:
        return self

    def __next__(self) -> str:
        line = next(self._lines)
        self.lineno += 1
        # One terminator only: "\n", optionally preceded by "\r".
        return line.removesuffix("\n").removesuffix("\r")


def parse(lines: Iterable[str], prior: Mapping[str, str] | None = None) -> dict[str, str]:
    """Parse env-file lines and return a dict of key-value pairs.

    *lines* is consumed in order and only once; line terminators are
    stripped if present, so an open text file works as well as a list.

    Substitutions look up variables assigned earlier in the same input
    first, then *prior*. Entries of *prior* are never copied into the
    result.
    """
    result: dict[str, str] = {}
    lookup: Mapping[str, str] = ChainMap(result, dict(prior)) if prior else result
    source = _LineSource(lines)

    for line in source:
        stripped = line.lstrip()
        if not stripped or stripped.startswith("#"):
            continue
        lineno = source.lineno

        if stripped.startswith(_EXPORT_PREFIX):
            stripped = stripped[len(_EXPORT_PREFIX):]

        key, sep, raw = stripped.partition("=")
        if not sep:
            raise InvalidLine(lineno=lineno)

        key = key.strip()
        if not _KEY_RE.fullmatch(key):
            raise InvalidKey(key=key, lineno=lineno)

        try:
            result[key] = _extract_value(raw, source, lookup)
        except EnvFileError as exc:
            raise exc.add_context(key=key, lineno=lineno)

    return result


def parse_string(text: str, prior: Mapping[str, str] | None = None) -> dict[str, str]:
    """Parse the contents of an env file held in memory."""
    return parse(text.split("\n"), prior)


def parse_env_file(path: str | Path, prior: Mapping[str, str] | None = None) -> dict[str, str]:
    """Read a .env file and return an ordered dict of key-value pairs."""
    with Path(path).open(encoding="utf-8", newline="\n") as f:
        try:
            return parse(f, prior)
        except EnvFileError as exc:
            raise exc.add_context(path=path)


# ---------------------------------------------------------------------------
# Value extraction
# ---------------------------------------------------------------------------

def _extract_value(raw: str, source: _LineSource, lookup: Mapping[str, str]) -> str:
    value = raw.lstrip()
    if value.startswith(_TRIPLE_MARKERS):
        return _extract_multiline(value, source, lookup)
    if value.startswith(("'", '"')):
        return _extract_quoted(value, lookup)

    # Unquoted: everything up to an unescaped ``#`` is the value.
    value = _INLINE_COMMENT_RE.split(value, 1)[0].strip()
    return _decode_escapes(_substitute(value, lookup))


def _extract_multiline(value: str, source: _LineSource, lookup: Mapping[str, str]) -> str:
    """Collect a triple-quoted value, pulling lines until the closing marker."""
    marker = value[:3]
    interpolate = marker == '"""'

    def decode(text: str) -> str:
        if interpolate:
            text = _substitute(text, lookup)
        return _decode_escapes(text)

    opening = value[3:]
    if opening.endswith(marker):
        return decode(opening[: -len(marker)])

    parts: list[str] = []
    if opening.strip():
        parts.append(decode(opening) + "\n")
    for line in source:
        if line.endswith(marker):
            parts.append(decode(line[: -len(marker)]))
            return "".join(parts).removesuffix("\n")
        parts.append(decode(line) + "\n")

    raise UnterminatedMultiLine()


def _extract_quoted(value: str, lookup: Mapping[str, str]) -> str:
    """Extract a single-line ``'...'`` or ``"..."`` value."""
    quote = value[0]
    end = _find_closing_quote(value, quote)
    if end < 0:
        raise UnterminatedQuote()

    inner = value[1:end]
    remaining = value[end + 1:].strip()
    if remaining and not remaining.startswith("#"):
        raise UnexpectedCharacters()

    if quote == '"':
        return _decode_escapes(_substitute(inner, lookup))
    return inner.replace("\\'", "'")


def _find_closing_quote(value: str, quote: str) -> int:
    """Index of the first *quote* after position 0 not preceded by a backslash, or -1."""
    for index in range(1, len(value)):
        if value[index] == quote and value[index - 1] != "\\":
            return index
    return -1


# ---------------------------------------------------------------------------
# Escapes and substitution
# ---------------------------------------------------------------------------

def _decode_escapes(text: str) -> str:
    r"""Resolve ``\n \r \t \f \b``; any other ``\x`` becomes ``x``."""
    return _ESCAPE_RE.sub(lambda m: _ESCAPES.get(m.group(1), m.group(1)), text)


def _substitute(text: str, lookup: Mapping[str, str]) -> str:
    """Replace ``$NAME``, ``${NAME}`` and ``$(NAME)`` with known values (unknown -> "")."""

    def replace(match: re.Match[str]) -> str:
        if match.group("escaped"):
            return match.group(0)
        name = match.group("paren") or match.group("brace") or match.group("bare")
        return lookup.get(name, "")

    return _SUBSTITUTE_RE.sub(replace, text)
