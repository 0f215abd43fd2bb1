"""``envloader get`` command."""

from __future__ import annotations

import click

from envloader.cli import _read_values, cli


@cli.command("get")
@click.argument("key")
@click.pass_context
def get(ctx: click.Context, key: str) -> None:
    """Print the parsed value of KEY."""
    values = _read_values(ctx)
    if key not in values:
        raise click.ClickException(f"Key '{key}' not found.")
    click.echo(values[key])
