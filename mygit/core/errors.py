"""Exception hierarchy for mygit.

Services raise these; the CLI layer turns them into a message on stderr and
exit status 1.
"""

from __future__ import annotations


class MygitError(RuntimeError):
    """Base error carrying an optional remediation hint."""

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint


# ---------- user input ----------
class MissingReference(MygitError):
    pass


class UnparsableReference(MygitError):
    pass


class InvalidVersionType(MygitError):
    pass


# ---------- environment / configuration ----------
class EditorNotConfigured(MygitError):
    pass


class EditorNotFound(MygitError):
    pass


class HostingClientMissing(MygitError):
    pass


class NotAuthenticated(MygitError):
    pass


# ---------- external operations ----------
class UnreachableReference(MygitError):
    pass


class CloneFailed(MygitError):
    pass


class EditorFailed(MygitError):
    pass


class EmptyReleaseNotes(MygitError):
    pass


class BranchResolutionFailed(MygitError):
    pass


class ReleaseCreationFailed(MygitError):
    pass
