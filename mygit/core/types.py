"""Small types and Enums used by mygit."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import Enum
from typing import Protocol


class Command(str, Enum):
    """Built-in command names; anything else is passed through to git."""

    help = "help"
    clone = "clone"
    release = "release"


class Increment(str, Enum):
    """Which part of a semantic version a release bumps."""

    major = "major"
    minor = "minor"
    patch = "patch"


class VersionControlClient(Protocol):
    def passthrough(self, argv: Sequence[str]) -> int: ...

    def can_list_remote(self, url: str) -> tuple[bool, str]: ...

    def clone(self, url: str, cwd: str) -> tuple[bool, str | None]: ...


class HostingPlatformClient(Protocol):
    def ensure_available(self) -> None: ...

    def ensure_authenticated(self) -> None: ...

    def latest_release_tag(self) -> str | None: ...

    def default_branch(self) -> str: ...

    def create_release(
        self,
        *,
        tag: str,
        title: str,
        notes_file: str,
        target: str,
        dry_run: bool = False,
    ) -> tuple[bool, str]: ...


# (argv, path) -> exit status of the editor process
EditorLauncher = Callable[[list[str], str], int]
