"""Services for the clone command."""

from __future__ import annotations

import os
import sys

from ..core.errors import CloneFailed, MissingReference, UnreachableReference
from ..core.types import VersionControlClient
from ..core.urls import parse_owner, url_guidance


def clone_into_owner_dir(url: str | None, *, root: str, git: VersionControlClient) -> str:
    """Clone url into <root>/<owner>/ and return the owner directory.

    The owner directory is handed to git as its working directory; the calling
    process keeps its own cwd.
    """
    if not url or not url.strip():
        raise MissingReference("No repository URL given.", hint=f"Usage: mygit clone <url>\n{url_guidance()}")
    url = url.strip()

    ok, out = git.can_list_remote(url)
    if not ok:
        raise UnreachableReference(
            f"Cannot reach repository '{url}'." + (f"\n{out}" if out else ""),
            hint="Check the URL and that you have access to it.",
        )

    owner = parse_owner(url)
    dest = os.path.join(root, owner)
    try:
        os.makedirs(dest, exist_ok=True)
    except OSError as e:
        raise CloneFailed(f"Could not create directory '{dest}': {e}") from e

    print(f"Cloning '{url}' into '{dest}'...", file=sys.stderr)
    ok, err = git.clone(url, cwd=dest)
    if not ok:
        raise CloneFailed(f"git clone failed for '{url}'" + (f": {err}" if err else "."))
    return dest
