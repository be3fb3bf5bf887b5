"""CLI for cloning a repository into an owner-named directory."""

from __future__ import annotations

import typer

from ...config.settings import get_settings
from ...core.errors import MygitError
from ...core.git_client import GitClient
from ...services.clone import clone_into_owner_dir
from ..utils import fail


def clone(
    url: str | None = typer.Argument(None, help="Repository URL (https://host/owner/repo or git@host:owner/repo)"),
    root: str | None = typer.Option(None, "--root", help="Directory to create the owner folder in (default: cwd)"),
):
    """Clone a repository into ./<owner>/<repo>."""
    s = get_settings()
    git = GitClient(git_bin=s.git_bin, debug=s.debug)
    try:
        dest = clone_into_owner_dir(url, root=root or s.clone_root, git=git)
    except MygitError as e:
        fail(e)
    typer.secho(f"Cloned into '{dest}'.", fg=typer.colors.GREEN, err=True)
    typer.echo(dest)
