"""Read .env files and load them into the environment (python-dotenv style)."""

from __future__ import annotations

import logging
import os
from collections.abc import MutableMapping, Sequence
from pathlib import Path

from envloader.config import EnvloaderConfig, load_config
from envloader.env_file import parse_env_file
from envloader.errors import InvalidFileExtension

ENV_EXTENSION = ".env"

_log = logging.getLogger(__name__)


def _extension(path: str | Path) -> str:
    """Return the final extension of *path*, counting a leading dot (``.env`` -> ``.env``)."""
    name = Path(path).name
    index = name.rfind(".")
    return name[index:] if index >= 0 else ""


def resolve_files(
    files: Sequence[str | Path] | None = None,
    cfg: EnvloaderConfig | None = None,
) -> list[str]:
    """Resolve which env files to read.

    Order: explicit *files*, then ``ENVLOADER_FILES`` (``os.pathsep``
    separated), then ``files`` from ``.envloader.toml``, then ``[".env"]``.
    """
    if files:
        return [str(f) for f in files]
    from_env = os.environ.get("ENVLOADER_FILES")
    if from_env:
        return [f for f in from_env.split(os.pathsep) if f]
    return (cfg or load_config()).files


def read(*paths: str | Path, extension: str = ENV_EXTENSION) -> dict[str, str]:
    """Parse each file in order and merge the results (later files win).

    Every path is checked for the *extension* before anything is opened.
    Each file is parsed on its own: substitutions in one file do not see
    variables defined in another.

    Raises
    ------
    InvalidFileExtension
        A path does not end in *extension*.
    EnvFileError
        Any parse failure, with the offending path attached.
    OSError
        A file could not be opened.
    """
    for path in paths:
        if _extension(path) != extension:
            raise InvalidFileExtension(path=path)

    env_vars: dict[str, str] = {}
    for path in paths:
        _log.info("reading file %s", path)
        values = parse_env_file(path)
        _log.debug("parsed %d variable(s) from %s", len(values), path)
        env_vars.update(values)
    return env_vars


def apply(
    values: dict[str, str],
    override: bool = True,
    environ: MutableMapping[str, str] | None = None,
) -> int:
    """Write *values* into *environ* (default ``os.environ``); return how many were set.

    With ``override=False`` keys already present are left untouched. The
    first failing write (e.g. a value holding a NUL byte) propagates.
    """
    target = os.environ if environ is None else environ
    count = 0
    for key, value in values.items():
        if key in target and not override:
            continue
        target[key] = value
        count += 1
    return count


def load(*paths: str | Path, override: bool = True) -> bool:
    """Read *paths* and load the variables into ``os.environ``.

    Returns True if at least one variable was set, False otherwise.
    """
    return apply(read(*paths), override=override) > 0


def dotenv_values(path: str | Path = ".env") -> dict[str, str]:
    """Return the variables in *path* as a dict without modifying os.environ.

    Examples
    --------
    >>> from envloader import dotenv_values
    >>> dotenv_values("settings.env")["DATABASE_URL"]
    'postgres://localhost/app'
    """
    return read(path)


def load_dotenv(path: str | Path = ".env", override: bool = True) -> bool:
    """Load *path* into os.environ (python-dotenv compatible API).

    Parameters
    ----------
    path : str, default ".env"
        Env file to read. Must carry the ``.env`` extension.
    override : bool, default True
        If True, overwrite existing keys in os.environ. If False, only set
        keys that are not already set (matches python-dotenv semantics).

    Returns
    -------
    bool
        True if at least one variable was set, False otherwise.
    """
    return load(path, override=override)
