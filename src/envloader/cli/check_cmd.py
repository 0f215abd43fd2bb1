# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envloader check`` command."""

from __future__ import annotations

import click

from envloader.cli import _read_values, cli, console
from envloader.sdk import resolve_files


@cli.command("check")
@click.argument("files", nargs=-1, type=click.Path(exists=False))
@click.pass_context
def check(ctx: click.Context, files: tuple[str, ...]) -> None:
    """Validate env files without loading them.

    Each file is parsed on its own; the first error stops the check with a
    non-zero exit status.
    """
    for path in resolve_files(files or ctx.obj["files"], ctx.obj["config"]):
        values = _read_values(ctx, (path,))
        console.print(f"[green]{path}: OK ({len(values)} variable(s))[/green]")
