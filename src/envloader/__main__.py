# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Entry point for the envloader CLI (run via ``envloader`` or ``python -m envloader``)."""

from __future__ import annotations

from envloader.cli import cli


def main() -> None:
    """Run the CLI."""
    cli(prog_name="envloader")


if __name__ == "__main__":
    main()
