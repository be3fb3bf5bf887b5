"""CLI for the interactive GitHub release workflow."""

from __future__ import annotations

import typer

from ...config.settings import get_settings
from ...core.errors import MygitError
from ...core.github_client import GitHubClient
from ...core.semver import parse_increment
from ...services.release import run_release
from ..utils import fail


def _prompt(text: str) -> str:
    try:
        return typer.prompt(text, default="", show_default=False, err=True)
    except typer.Abort:
        # EOF / Ctrl-C at the prompt counts as "no"
        return ""


def release(
    increment: str | None = typer.Argument(None, metavar="<major|minor|patch>", help="Version part to bump"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the gh command instead of creating the release"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt"),
):
    """Create the next GitHub release for the current repository.

    Examples:
      mygit release patch        # v1.2.3 -> v1.2.4
      mygit release minor        # v0.9.5 -> v0.10.0
      mygit release major --dry-run
    """
    s = get_settings()
    try:
        inc = parse_increment(increment)
        outcome = run_release(
            inc,
            hosting=GitHubClient(gh_bin=s.gh_bin, debug=s.debug),
            editor=s.editor,
            ask=(lambda _text: "y") if yes else _prompt,
            marker=s.comment_marker,
            dry_run=dry_run,
        )
    except MygitError as e:
        fail(e)

    if not outcome.published:
        typer.echo(outcome.message, err=True)
        raise typer.Exit(code=0)
    if dry_run:
        typer.echo(outcome.message)
        return
    typer.secho(f"Released {outcome.version} on '{outcome.target}'.", fg=typer.colors.GREEN)
