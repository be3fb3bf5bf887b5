"""Static help entries shown by `mygit help`."""

from __future__ import annotations

from types import MappingProxyType

from .constants import PROG_NAME

MANUAL = MappingProxyType(
    {
        "help": (
            f"{PROG_NAME} help [command]\n"
            "    List the available commands, or show the entry for one command."
        ),
        "clone": (
            f"{PROG_NAME} clone <url> [--root DIR]\n"
            "    Clone a repository into a folder named after its owner, e.g.\n"
            f"    '{PROG_NAME} clone https://github.com/google/guava' creates ./google/guava.\n"
            "    Accepts https://host/owner/repo and git@host:owner/repo."
        ),
        "release": (
            f"{PROG_NAME} release <major|minor|patch> [--dry-run] [--yes]\n"
            "    Create a GitHub release on the default branch. The next version is\n"
            "    computed from the latest release tag, notes are written in $EDITOR,\n"
            "    and nothing is published until you confirm with 'y'.\n"
            "    Requires the GitHub CLI (gh), logged in with 'gh auth login'."
        ),
        "status": f"{PROG_NAME} status\n    Passed through to 'git status'.",
        "add": f"{PROG_NAME} add <paths>\n    Passed through to 'git add'.",
        "commit": f"{PROG_NAME} commit -m <message>\n    Passed through to 'git commit'.",
        "push": f"{PROG_NAME} push\n    Passed through to 'git push'.",
        "pull": f"{PROG_NAME} pull\n    Passed through to 'git pull'.",
        "log": f"{PROG_NAME} log\n    Passed through to 'git log'.",
    }
)


def command_list() -> str:
    lines = [f"usage: {PROG_NAME} <command> [args]", "", "Commands:"]
    for name, entry in MANUAL.items():
        summary = entry.splitlines()[1].strip() if "\n" in entry else entry
        lines.append(f"  {name:<10} {summary}")
    lines += ["", f"Any other command is passed to git unchanged. See '{PROG_NAME} help <command>'."]
    return "\n".join(lines)


def lookup(topic: str | None) -> str:
    if not topic:
        return command_list()
    entry = MANUAL.get(topic)
    if entry is None:
        return f"No {PROG_NAME} manual entry for '{topic}'. Try 'git help {topic}'."
    return entry
