"""Service running the interactive release workflow against GitHub."""

from __future__ import annotations

import shutil
import sys
from collections.abc import Callable
from dataclasses import dataclass

from ..core.constants import DEFAULT_COMMENT_MARKER
from ..core.errors import ReleaseCreationFailed
from ..core.notes import collect_release_notes, launch_editor
from ..core.semver import next_version
from ..core.types import EditorLauncher, HostingPlatformClient, Increment


@dataclass(frozen=True, slots=True)
class ReleaseOutcome:
    version: str
    target: str
    published: bool
    message: str = ""


def is_affirmative(answer: str | None) -> bool:
    # only an explicit y/Y publishes; empty input declines
    return (answer or "").strip() in ("y", "Y")


def run_release(
    increment: Increment,
    *,
    hosting: HostingPlatformClient,
    editor: str | None,
    ask: Callable[[str], str],
    marker: str = DEFAULT_COMMENT_MARKER,
    dry_run: bool = False,
    launcher: EditorLauncher = launch_editor,
    which: Callable[[str], str | None] = shutil.which,
) -> ReleaseOutcome:
    """Resolve branch, compute the next version, collect notes, confirm, publish.

    Each step runs only if the previous one succeeded. Failures raise a
    MygitError; a declined confirmation returns an unpublished outcome.
    """
    hosting.ensure_available()
    hosting.ensure_authenticated()

    # 1. target branch
    target = hosting.default_branch()
    print(f"Target branch: {target}", file=sys.stderr)

    # 2. version
    latest = hosting.latest_release_tag()
    version = next_version(latest, increment).to_tag()
    print(f"Latest release: {latest or '(none)'} -> next {increment.value}: {version}", file=sys.stderr)

    # 3. notes; the temp file lives until the end of this block
    with collect_release_notes(editor, version=version, marker=marker, launcher=launcher, which=which) as notes:
        # 4. confirm and publish
        print("", file=sys.stderr)
        print(f"About to create release {version} on branch '{target}' with notes:", file=sys.stderr)
        print(notes.text, file=sys.stderr)
        if not is_affirmative(ask(f"Create release {version}? [y/N]")):
            return ReleaseOutcome(version=version, target=target, published=False, message="Release cancelled.")

        ok, msg = hosting.create_release(
            tag=version, title=version, notes_file=notes.path, target=target, dry_run=dry_run
        )
        if not ok:
            raise ReleaseCreationFailed(
                f"Creating release {version} failed. {msg}",
                hint="Nothing was retried; check 'gh release list' before running again.",
            )
        return ReleaseOutcome(version=version, target=target, published=True, message=msg)
