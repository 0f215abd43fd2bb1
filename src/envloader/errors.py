"""Errors raised while reading and parsing .env files.

Every error is an :class:`EnvFileError` (and therefore a ``ValueError``), with
one subclass per failure kind so callers can match on the kind directly.
Context (key, line number, file path) is attached while the error propagates
and is rendered by ``str()``.
"""

from __future__ import annotations

from pathlib import Path


class EnvFileError(ValueError):
    """Base class for all .env parsing failures."""

    message: str = "invalid env file"
    key_label: str = " for key"

    def __init__(
        self,
        message: str | None = None,
        *,
        key: str | None = None,
        lineno: int | None = None,
        path: str | Path | None = None,
    ) -> None:
        self.message = message or self.message
        self.key = key
        self.lineno = lineno
        self.path = str(path) if path is not None else None
        super().__init__(self.message)

    def add_context(
        self,
        *,
        key: str | None = None,
        lineno: int | None = None,
        path: str | Path | None = None,
    ) -> EnvFileError:
        """Fill in context that is not already set and return ``self`` for re-raising."""
        if self.key is None and key is not None:
            self.key = key
        if self.lineno is None and lineno is not None:
            self.lineno = lineno
        if self.path is None and path is not None:
            self.path = str(path)
        return self

    def __str__(self) -> str:
        text = self.message
        if self.key is not None:
            text += f"{self.key_label} {self.key!r}"
        where = []
        if self.path is not None:
            where.append(self.path)
        if self.lineno is not None:
            where.append(f"line {self.lineno}")
        if where:
            text += f" ({', '.join(where)})"
        return text


class InvalidFileExtension(EnvFileError):
    message = "invalid file extension"


class InvalidLine(EnvFileError):
    message = "invalid line"


class InvalidKey(EnvFileError):
    message = "invalid key"
    key_label = ""


class UnterminatedMultiLine(EnvFileError):
    message = "unterminated multiline value"


class UnterminatedQuote(EnvFileError):
    message = "unterminated quoted value"


class UnexpectedCharacters(EnvFileError):
    message = "unexpected characters after value"
