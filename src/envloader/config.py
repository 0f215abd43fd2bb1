""".envloader.toml configuration loading.

Searches upward from cwd for ``.envloader.toml`` and merges with CLI flags.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

CONFIG_FILENAME = ".envloader.toml"
DEFAULT_FILES = [".env"]


@dataclass
class EnvloaderConfig:
    """Resolved configuration for the current invocation."""

    files: list[str] = field(default_factory=lambda: list(DEFAULT_FILES))
    override: bool = True
    config_path: Path | None = None


def find_config_file(start: Path | None = None) -> Path | None:
    """Walk upward from *start* (default cwd) looking for ``.envloader.toml``."""
    cur = (start or Path.cwd()).resolve()
    while True:
        candidate = cur / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if cur.parent == cur:
            return None
        cur = cur.parent


def load_config(path: Path | None = None) -> EnvloaderConfig:
    """Load and return config.  Returns defaults if no file found.

    Relative entries in ``files`` are resolved against the directory that
    holds the config file, so the CLI behaves the same from any subdirectory.
    """
    if path is None:
        path = find_config_file()
    if path is None:
        return EnvloaderConfig()

    raw: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    section = raw.get("envloader", {})

    files = section.get("files", DEFAULT_FILES)
    if isinstance(files, str):
        files = [files]
    base = path.parent
    resolved = [str(f) if Path(f).is_absolute() else str(base / f) for f in files]

    return EnvloaderConfig(
        files=resolved,
        override=bool(section.get("override", True)),
        config_path=path,
    )
