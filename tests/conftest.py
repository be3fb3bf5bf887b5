from __future__ import annotations

import os
from collections.abc import Sequence

import pytest

from mygit.core.errors import BranchResolutionFailed, HostingClientMissing, NotAuthenticated


class FakeGit:
    def __init__(self, *, reachable: bool = True, clone_ok: bool = True, exit_code: int = 0) -> None:
        self.reachable = reachable
        self.clone_ok = clone_ok
        self.exit_code = exit_code
        self.calls: list[tuple] = []

    def passthrough(self, argv: Sequence[str]) -> int:
        self.calls.append(("passthrough", list(argv)))
        return self.exit_code

    def can_list_remote(self, url: str) -> tuple[bool, str]:
        self.calls.append(("ls-remote", url))
        if self.reachable:
            return True, "abc123\tHEAD"
        return False, "fatal: repository not found"

    def clone(self, url: str, cwd: str) -> tuple[bool, str | None]:
        self.calls.append(("clone", url, cwd))
        return (True, None) if self.clone_ok else (False, "exit status 128")


class FakeHosting:
    def __init__(
        self,
        *,
        branch: str | None = "main",
        latest: str | None = None,
        create_ok: bool = True,
        available: bool = True,
        authenticated: bool = True,
    ) -> None:
        self.branch = branch
        self.latest = latest
        self.create_ok = create_ok
        self.available = available
        self.authenticated = authenticated
        self.calls: list[str] = []
        self.created: list[dict] = []

    def ensure_available(self) -> None:
        self.calls.append("ensure_available")
        if not self.available:
            raise HostingClientMissing("GitHub CLI 'gh' not found.")

    def ensure_authenticated(self) -> None:
        self.calls.append("ensure_authenticated")
        if not self.authenticated:
            raise NotAuthenticated("GitHub CLI is not authenticated.")

    def latest_release_tag(self) -> str | None:
        self.calls.append("latest_release_tag")
        return self.latest

    def default_branch(self) -> str:
        self.calls.append("default_branch")
        if self.branch is None:
            raise BranchResolutionFailed("Could not determine the repository's default branch.")
        return self.branch

    def create_release(self, *, tag, title, notes_file, target, dry_run=False) -> tuple[bool, str]:
        self.calls.append("create_release")
        with open(notes_file, encoding="utf-8") as fh:
            notes = fh.read()
        self.created.append(
            {"tag": tag, "title": title, "notes_file": notes_file, "notes": notes, "target": target, "dry_run": dry_run}
        )
        if not self.create_ok:
            return False, "gh failed: HTTP 422"
        return True, f"https://github.com/acme/widget/releases/tag/{tag}"


class FakeEditor:
    """Appends text to the notes file, the way a user typing would."""

    def __init__(self, text: str = "Fixed the widget.\n", status: int = 0) -> None:
        self.text = text
        self.status = status
        self.calls: list[tuple[list[str], str]] = []

    def __call__(self, argv: list[str], path: str) -> int:
        self.calls.append((argv, path))
        with open(path, "a", encoding="utf-8") as fh:
            fh.write(self.text)
        return self.status

    @property
    def paths(self) -> list[str]:
        return [p for _, p in self.calls]


def which_all(name: str) -> str | None:
    return f"/usr/bin/{name}"


def which_none(name: str) -> str | None:
    return None


@pytest.fixture
def fake_git() -> FakeGit:
    return FakeGit()


@pytest.fixture
def fake_editor() -> FakeEditor:
    return FakeEditor()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # covers anything a stray .env loaded into os.environ at import
    for var in list(os.environ):
        if var == "EDITOR" or var.startswith("MYGIT_"):
            monkeypatch.delenv(var, raising=False)
