# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Envloader CLI -- inspect, export and apply .env files.

The CLI is split into per-command modules under this package.  The ``cli``
click group and shared helpers (``console``, ``_read_values``, etc.) live
here so every command module can import them.
"""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from envloader import __version__
from envloader.config import load_config
from envloader.errors import EnvFileError
from envloader.sdk import read, resolve_files

try:
    import yaml
    HAS_YAML = True
except ImportError:
    HAS_YAML = False

console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_time=False, show_path=False)],
        force=True,
    )


def _read_values(ctx: click.Context, files: tuple[str, ...] = ()) -> dict[str, str]:
    """Read and merge the env files for this invocation, as a click error on failure."""
    paths = resolve_files(files or ctx.obj["files"], ctx.obj["config"])
    try:
        return read(*paths)
    except EnvFileError as e:
        raise click.ClickException(str(e))
    except OSError as e:
        raise click.ClickException(f"Cannot read {e.filename}: {e.strerror}")


# ---------------------------------------------------------------------------
# Top-level click group
# ---------------------------------------------------------------------------

@click.group()
@click.option(
    "--file", "-f", "files", multiple=True,
    help="Env file to read (repeatable). Default: ENVLOADER_FILES, config, else .env.",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output.")
@click.version_option(__version__)
@click.pass_context
def cli(ctx: click.Context, files: tuple[str, ...], verbose: bool) -> None:
    """Parse .env files and load them into the environment."""
    _configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["config"] = load_config()
    ctx.obj["files"] = files
    ctx.obj["verbose"] = verbose


# ---------------------------------------------------------------------------
# Register all command modules (import triggers @cli.command registration)
# ---------------------------------------------------------------------------

from envloader.cli import (  # noqa: E402, F401
    check_cmd,
    export_cmd,
    get_cmd,
    list_cmd,
    run_cmd,
)
