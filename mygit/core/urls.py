"""Owner extraction from repository URLs (web or scp-style SSH remotes)."""

from __future__ import annotations

import re

from .constants import ACCEPTED_URL_SHAPES, SCHEME_TOKENS
from .errors import UnparsableReference

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")
# git@github.com:owner/repo -> host part before the first ':' with no '/' in it
_SCP_RE = re.compile(r"^(?P<host>[^/:]+):(?P<path>.*)$")


def url_guidance() -> str:
    shapes = " or ".join(f"'{s}'" for s in ACCEPTED_URL_SHAPES)
    return f"Use a repository URL like {shapes}."


def normalize_reference(reference: str) -> str:
    """Return 'host/owner/repo' style path for either accepted URL shape."""
    ref = reference.strip()
    if _SCHEME_RE.match(ref):
        return _SCHEME_RE.sub("", ref, count=1)
    m = _SCP_RE.match(ref)
    if m:
        return f"{m.group('host')}/{m.group('path')}"
    return ref


def path_segments(reference: str) -> list[str]:
    """Path segments after the host; a bare 'owner/repo' has no host to drop."""
    ref = reference.strip()
    has_host = bool(_SCHEME_RE.match(ref) or _SCP_RE.match(ref))
    segments = normalize_reference(ref).rstrip("/").split("/")
    return segments[1:] if has_host else segments


def parse_owner(reference: str | None) -> str:
    """Return the owner (second-to-last path segment) of a repository reference.

    https://github.com/google/guava -> google
    git@github.com:google/guava     -> google
    """
    if not reference or not reference.strip():
        raise UnparsableReference("Empty repository reference.", hint=url_guidance())

    segments = path_segments(reference)
    if len(segments) < 2:
        raise UnparsableReference(
            f"Could not extract an owner from '{reference}'.", hint=url_guidance()
        )

    owner = segments[-2].strip()
    # scheme or host leaking into the owner slot means the extraction degenerated
    if not owner or owner.rstrip(":").lower() in SCHEME_TOKENS or "@" in owner or ":" in owner:
        raise UnparsableReference(
            f"Could not extract an owner from '{reference}'.", hint=url_guidance()
        )
    return owner
