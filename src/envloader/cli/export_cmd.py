"""``envloader export`` command."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from envloader.cli import HAS_YAML, _read_values, cli, console
from envloader.util import format_env_value, powershell_escape, shell_escape

if HAS_YAML:
    import yaml


@cli.command("export")
@click.option(
    "--format", "fmt",
    type=click.Choice(["dotenv", "unix", "win", "json", "yaml"]),
    default="dotenv",
    help="Output format: dotenv (default, KEY=value), unix (export KEY=value), win (PowerShell), json, yaml.",
)
@click.option(
    "--output", "-o",
    type=click.Path(exists=False),
    default=None,
    help="Output file path (default: stdout).",
)
@click.pass_context
def export(ctx: click.Context, fmt: str, output: str | None) -> None:
    """Export the parsed variables to stdout or file.

    Default format is dotenv, quoted so the output parses back to the same
    values. Use --format unix for shell sourcing:
    eval "$(envloader export --format unix)". Use --format win for
    PowerShell: envloader export --format win | Invoke-Expression (or iex).
    """
    if fmt == "yaml" and not HAS_YAML:
        raise click.ClickException("PyYAML is not installed. Install with: pip install pyyaml")

    pairs = _read_values(ctx)

    if output:
        path = Path(output)
        with path.open("w") as f:
            if fmt == "json":
                f.write(json.dumps(pairs, indent=2))
                f.write("\n")
            elif fmt == "yaml":
                yaml.dump(pairs, f, default_flow_style=False, sort_keys=True)
            else:
                for line in _format_export_lines(pairs, fmt):
                    f.write(line + "\n")
        console.print(f"[green]Exported {len(pairs)} variable(s) to {output}[/green]")
    else:
        if fmt == "json":
            click.echo(json.dumps(pairs, indent=2))
        elif fmt == "yaml":
            yaml.dump(pairs, sys.stdout, default_flow_style=False, sort_keys=True)
        else:
            for line in _format_export_lines(pairs, fmt):
                click.echo(line)


def _format_export_lines(pairs: dict[str, str], fmt: str) -> list[str]:
    lines: list[str] = []
    for key, value in sorted(pairs.items()):
        if fmt == "unix":
            lines.append(f"export {key}={shell_escape(value)}")
        elif fmt == "win":
            lines.append(f"$env:{key} = '{powershell_escape(value)}'")
        else:
            lines.append(f"{key}={format_env_value(value)}")
    return lines
