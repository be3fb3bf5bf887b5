"""Release notes collected through the user's editor and a scoped temp file."""

from __future__ import annotations

import contextlib
import os
import shlex
import shutil
import subprocess
import tempfile
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from .constants import DEFAULT_COMMENT_MARKER, EDITOR_EXAMPLE, NOTES_PREFIX, NOTES_SUFFIX
from .errors import EditorFailed, EditorNotConfigured, EditorNotFound, EmptyReleaseNotes
from .types import EditorLauncher


@dataclass(frozen=True, slots=True)
class ReleaseNotes:
    text: str
    path: str  # comment-free copy of text, valid only inside the collecting context


def launch_editor(argv: list[str], path: str) -> int:
    """Run the editor in the foreground and wait for it; no timeout."""
    return subprocess.call([*argv, path])


def strip_comments(content: str, marker: str = DEFAULT_COMMENT_MARKER) -> str:
    lines = [line for line in content.splitlines() if not line.startswith(marker)]
    return "\n".join(lines).strip()


def resolve_editor(editor: str | None, which: Callable[[str], str | None] = shutil.which) -> list[str]:
    """Split the configured editor command and check it exists on this system."""
    if not editor or not editor.strip():
        raise EditorNotConfigured(
            "No editor configured for release notes.",
            hint=f"Set EDITOR (or MYGIT_EDITOR) in your shell profile, e.g.\n    {EDITOR_EXAMPLE}",
        )
    try:
        argv = shlex.split(editor)
    except ValueError as e:
        raise EditorNotConfigured(
            f"Could not parse editor command {editor!r}: {e}",
            hint=f"Fix the quoting in EDITOR, e.g.\n    {EDITOR_EXAMPLE}",
        ) from e
    if not argv or which(argv[0]) is None:
        raise EditorNotFound(
            f"Editor '{editor}' was not found on this system.",
            hint=f"Install it or point EDITOR at an editor on your PATH, e.g.\n    {EDITOR_EXAMPLE}",
        )
    return argv


def _template(version: str, marker: str) -> str:
    return (
        "\n"
        f"{marker} Write the release notes for {version}.\n"
        f"{marker} Lines starting with '{marker}' are ignored; an empty message aborts the release.\n"
    )


@contextlib.contextmanager
def collect_release_notes(
    editor: str | None,
    *,
    version: str,
    marker: str = DEFAULT_COMMENT_MARKER,
    launcher: EditorLauncher = launch_editor,
    which: Callable[[str], str | None] = shutil.which,
) -> Iterator[ReleaseNotes]:
    """Yield the notes typed by the user; the temp file is removed on every exit path."""
    argv = resolve_editor(editor, which=which)

    fd, path = tempfile.mkstemp(prefix=NOTES_PREFIX, suffix=NOTES_SUFFIX)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(_template(version, marker))

        try:
            status = launcher(argv, path)
        except OSError as e:
            raise EditorFailed(f"Could not start editor '{argv[0]}': {e}") from e
        if status != 0:
            raise EditorFailed(f"Editor '{argv[0]}' exited with status {status}; release aborted.")

        with open(path, encoding="utf-8") as fh:
            text = strip_comments(fh.read(), marker)
        if not text:
            raise EmptyReleaseNotes("Release notes are empty; release aborted.")

        # hand the hosting client the comment-free notes
        with open(path, "w", encoding="utf-8") as fh:
            fh.write(text + "\n")

        yield ReleaseNotes(text=text, path=path)
    finally:
        with contextlib.suppress(FileNotFoundError):
            os.remove(path)
