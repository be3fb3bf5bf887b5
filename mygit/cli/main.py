"""CLI entrypoint: built-in commands via Typer, everything else straight to git."""

from __future__ import annotations

import sys
from collections.abc import Sequence

import click
import typer

from ..config.settings import get_settings
from ..core.constants import PROG_NAME
from ..core.git_client import GitClient
from ..core.manual import lookup
from ..core.types import Command
from .commands.clone import clone
from .commands.help import show_help
from .commands.release import release

app = typer.Typer(add_completion=False, help="git with a few extra commands; anything else goes to git.")

app.command(name=Command.clone.value, help="Clone a repository into ./<owner>/<repo>")(clone)
app.command(name=Command.release.value, help="Create the next GitHub release")(release)
app.command(name=Command.help.value, help="Show mygit commands")(show_help)

BUILTINS = frozenset(c.value for c in Command)


def passthrough(argv: Sequence[str]) -> int:
    s = get_settings()
    return GitClient(git_bin=s.git_bin, debug=s.debug).passthrough(argv)


def run_builtin(args: list[str]) -> int:
    """Run a built-in command and return its exit status (help 0, failures 1)."""
    try:
        # non-standalone Click hands back the code of typer.Exit instead of exiting
        rv = app(args=args, prog_name=PROG_NAME, standalone_mode=False)
    except (click.exceptions.Exit, typer.Exit) as e:
        return e.exit_code
    except click.UsageError as e:
        if args[0] == Command.help.value:
            topic = args[1] if len(args) > 1 and not args[1].startswith("-") else None
            typer.echo(lookup(topic))
            return 0
        typer.secho(f"Error: {e.format_message()}", fg=typer.colors.RED, err=True)
        if e.ctx is not None:
            typer.echo(e.ctx.get_usage(), err=True)
        typer.echo(f"See '{PROG_NAME} help {args[0]}'.", err=True)
        return 1
    except click.Abort:
        typer.echo("Aborted!", err=True)
        return 1
    except click.ClickException as e:
        e.show()
        return 1
    return rv if isinstance(rv, int) else 0


def main(argv: Sequence[str] | None = None) -> None:
    args = list(sys.argv[1:] if argv is None else argv)
    if args and args[0] in BUILTINS:
        raise SystemExit(run_builtin(args))
    raise SystemExit(passthrough(args))
