"""Shared helpers for the command layer."""

from __future__ import annotations

from typing import NoReturn

import typer

from ..core.errors import MygitError


def fail(error: MygitError) -> NoReturn:
    """Report a MygitError on stderr and exit 1."""
    typer.secho(f"Error: {error.message}", fg=typer.colors.RED, err=True)
    if error.hint:
        typer.secho(error.hint, fg=typer.colors.YELLOW, err=True)
    raise typer.Exit(code=1)
