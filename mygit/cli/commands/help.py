"""CLI for the static command manual."""

from __future__ import annotations

import typer

from ...core.manual import lookup


def show_help(topic: str | None = typer.Argument(None, help="Command to describe")):
    """List commands or show the entry for one command."""
    typer.echo(lookup(topic))
