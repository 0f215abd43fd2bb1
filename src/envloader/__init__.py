# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Envloader -- parse .env files and load them into the process environment."""

from envloader.env_file import parse, parse_env_file, parse_string
from envloader.errors import (
    EnvFileError,
    InvalidFileExtension,
    InvalidKey,
    InvalidLine,
    UnexpectedCharacters,
    UnterminatedMultiLine,
    UnterminatedQuote,
)
from envloader.sdk import dotenv_values, load, load_dotenv, read

__all__ = [
    "__version__",
    "parse",
    "parse_string",
    "parse_env_file",
    "read",
    "load",
    "load_dotenv",
    "dotenv_values",
    "EnvFileError",
    "InvalidFileExtension",
    "InvalidLine",
    "InvalidKey",
    "UnterminatedMultiLine",
    "UnterminatedQuote",
    "UnexpectedCharacters",
]
__version__ = "0.1.0"
