"""Small helpers for running the wrapped git binary."""

from __future__ import annotations

import os
import shlex
import subprocess
import sys
from collections.abc import Sequence

from .constants import DEFAULT_GIT_BIN


class GitClient:
    def __init__(self, git_bin: str = DEFAULT_GIT_BIN, debug: bool = False) -> None:
        self.git_bin = git_bin
        self.debug = debug

    # ---------- process helpers ----------
    def _echo_cmd(self, cmd: Sequence[str], cwd: str | None) -> None:
        if self.debug:
            where = f" (in {cwd})" if cwd else ""
            print(f"$ {shlex.join(cmd)}{where}", file=sys.stderr)

    def _run(self, cmd: list[str], cwd: str | None = None) -> tuple[bool, str | None]:
        self._echo_cmd(cmd, cwd)
        try:
            subprocess.check_call(cmd, cwd=cwd)
            return True, None
        except subprocess.CalledProcessError as e:
            return False, f"{e}"
        except OSError as e:
            return False, f"could not run {cmd[0]}: {e}"

    def _run_out(
        self, cmd: list[str], cwd: str | None = None, env: dict[str, str] | None = None
    ) -> tuple[bool, str]:
        self._echo_cmd(cmd, cwd)
        try:
            out = subprocess.check_output(cmd, cwd=cwd, env=env, stderr=subprocess.STDOUT)
            return True, out.decode("utf-8", "ignore").strip()
        except subprocess.CalledProcessError as e:
            return False, e.output.decode("utf-8", "ignore").strip()
        except OSError as e:
            return False, f"could not run {cmd[0]}: {e}"

    # ---------- passthrough ----------
    def passthrough(self, argv: Sequence[str]) -> int:
        """Run git with argv untouched, inheriting stdio; return its exit status."""
        cmd = [self.git_bin, *argv]
        self._echo_cmd(cmd, None)
        try:
            return subprocess.call(cmd)
        except OSError as e:
            print(f"Error: could not run {self.git_bin}: {e}", file=sys.stderr)
            return 127

    # ---------- remote ----------
    def can_list_remote(self, url: str) -> tuple[bool, str]:
        """True when `git ls-remote` can enumerate the remote; otherwise git's output."""
        # fail instead of prompting for credentials on an unknown remote
        env = {**os.environ, "GIT_TERMINAL_PROMPT": "0"}
        return self._run_out([self.git_bin, "ls-remote", url, "HEAD"], env=env)

    def clone(self, url: str, cwd: str) -> tuple[bool, str | None]:
        return self._run([self.git_bin, "clone", "--", url], cwd=cwd)
