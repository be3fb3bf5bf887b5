"""GitHub metadata and release creation through the gh CLI."""

from __future__ import annotations

import shlex
import shutil
import subprocess
import sys
from collections.abc import Sequence

from .constants import DEFAULT_GH_BIN
from .errors import BranchResolutionFailed, HostingClientMissing, NotAuthenticated


class GitHubClient:
    """Thin wrapper over `gh`, bound to the repository in `cwd` (default: current directory)."""

    def __init__(self, gh_bin: str = DEFAULT_GH_BIN, cwd: str | None = None, debug: bool = False) -> None:
        self.gh_bin = gh_bin
        self.cwd = cwd
        self.debug = debug

    # ---------- process helpers ----------
    def _echo_cmd(self, cmd: Sequence[str]) -> None:
        if self.debug:
            print(f"$ {shlex.join(cmd)}", file=sys.stderr)

    def _run_out(self, cmd: list[str]) -> tuple[bool, str]:
        """Run cmd capturing stdout; on failure return its stderr instead."""
        self._echo_cmd(cmd)
        try:
            proc = subprocess.run(cmd, cwd=self.cwd, capture_output=True, text=True)
        except OSError as e:
            return False, f"could not run {cmd[0]}: {e}"
        if proc.returncode != 0:
            return False, (proc.stderr or proc.stdout).strip()
        return True, proc.stdout.strip()

    # ---------- preconditions ----------
    def ensure_available(self) -> None:
        if not shutil.which(self.gh_bin):
            raise HostingClientMissing(
                f"GitHub CLI '{self.gh_bin}' not found.",
                hint="Install https://cli.github.com/ and run 'gh auth login'.",
            )

    def ensure_authenticated(self) -> None:
        ok, out = self._run_out([self.gh_bin, "auth", "status"])
        if not ok:
            raise NotAuthenticated(
                "GitHub CLI is not authenticated." + (f"\n{out}" if out else ""),
                hint="Run 'gh auth login' and try again.",
            )

    # ---------- metadata ----------
    def latest_release_tag(self) -> str | None:
        """Most recent release tag, or None when there are no releases (or gh cannot tell)."""
        ok, out = self._run_out(
            [self.gh_bin, "release", "list", "--limit", "1", "--json", "tagName", "--jq", ".[0].tagName // empty"]
        )
        if not ok or not out:
            return None
        return out.splitlines()[0].strip() or None

    def default_branch(self) -> str:
        ok, out = self._run_out(
            [self.gh_bin, "repo", "view", "--json", "defaultBranchRef", "--jq", ".defaultBranchRef.name"]
        )
        branch = out.strip() if ok else ""
        if not branch:
            raise BranchResolutionFailed(
                "Could not determine the repository's default branch." + (f"\n{out}" if out and not ok else ""),
                hint="Run this inside a clone with a GitHub 'origin' remote ('gh repo view' must work).",
            )
        return branch

    # ---------- gh release backend ----------
    def create_release(
        self,
        *,
        tag: str,
        title: str,
        notes_file: str,
        target: str,
        dry_run: bool = False,
    ) -> tuple[bool, str]:
        """Create a GitHub release via the gh CLI. Returns (ok, message)."""
        cmd = [self.gh_bin, "release", "create", tag, "--title", title, "--notes-file", notes_file, "--target", target]

        if dry_run:
            return True, f"[dry-run] {shlex.join(cmd)}"

        ok, out = self._run_out(cmd)
        if ok:
            return True, out or f"[released] {tag}"
        return False, f"gh failed: {out}" if out else "gh failed"
