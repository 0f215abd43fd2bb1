# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envloader run`` -- run a command with the parsed variables in its environment."""

from __future__ import annotations

import logging
import os
import subprocess

import click

from envloader.cli import _read_values, cli
from envloader.sdk import apply

_log = logging.getLogger(__name__)


@cli.command("run", context_settings={"ignore_unknown_options": True})
@click.option(
    "--override/--no-override", default=None,
    help="Replace variables already set in the environment (default: from config, else override).",
)
@click.argument("command", nargs=-1, required=True, type=click.UNPROCESSED)
@click.pass_context
def run(ctx: click.Context, override: bool | None, command: tuple[str, ...]) -> None:
    """Run COMMAND with the env files applied to its environment.

    The current process environment is not modified. Use ``--`` to separate
    envloader options from the command's own: envloader run -- pytest -x
    """
    values = _read_values(ctx)
    if override is None:
        override = ctx.obj["config"].override

    env = dict(os.environ)
    count = apply(values, override=override, environ=env)
    _log.info("applied %d variable(s), running %s", count, command[0])

    try:
        completed = subprocess.run(list(command), env=env)
    except FileNotFoundError:
        raise click.ClickException(f"Command not found: {command[0]}")
    ctx.exit(completed.returncode)
