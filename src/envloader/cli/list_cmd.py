# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envloader list`` command."""

from __future__ import annotations

import click
from rich.table import Table

from envloader.cli import _read_values, cli, console
from envloader.util import mask


@cli.command("list")
@click.option("--show-values", is_flag=True, help="Print values in clear text instead of masked.")
@click.pass_context
def list_keys(ctx: click.Context, show_values: bool) -> None:
    """List parsed variable names."""
    values = _read_values(ctx)
    table = Table(title="Variables")
    table.add_column("Key", style="white")
    table.add_column("Value" if show_values else "Value (masked)", style="dim")
    if not values:
        table.add_row("(empty)", "(empty)")
    else:
        for key, val in sorted(values.items()):
            shown = val if show_values else (mask(val) if val else "(empty)")
            table.add_row(key, shown)
    console.print(table)
