from __future__ import annotations

import pytest

from mygit.core.errors import UnparsableReference
from mygit.core.urls import normalize_reference, parse_owner, path_segments


@pytest.mark.parametrize(
    "url",
    [
        "https://github.com/google/guava",
        "git@github.com:google/guava",
        "https://github.com/google/guava.git",
        "https://github.com/google/guava/",
        "ssh://git@github.com/google/guava.git",
        "git@gitlab.example.org:google/guava.git",
    ],
)
def test_owner_from_web_and_ssh_urls(url: str) -> None:
    assert parse_owner(url) == "google"


def test_scp_style_separator_becomes_path_separator() -> None:
    assert normalize_reference("git@github.com:google/guava") == "git@github.com/google/guava"


@pytest.mark.parametrize(
    "url",
    [
        "",
        "   ",
        None,
        "guava",
        "https://guava",
        "http://",
        "https://github.com//guava",
        "git@github.com:guava",
        "https://github.com/guava",
        "http://localhost/repo.git",
    ],
)
def test_malformed_references_are_rejected(url: str | None) -> None:
    with pytest.raises(UnparsableReference) as exc:
        parse_owner(url)
    assert "https://host/owner/repo" in exc.value.hint
    assert "git@host:owner/repo" in exc.value.hint


def test_scheme_token_in_owner_slot_is_rejected() -> None:
    with pytest.raises(UnparsableReference):
        parse_owner("http://github.com/https/guava")


def test_host_is_not_counted_as_a_path_segment() -> None:
    assert path_segments("https://github.com/guava") == ["guava"]
    assert path_segments("git@github.com:google/guava") == ["google", "guava"]


def test_bare_owner_and_repo_without_host() -> None:
    assert parse_owner("google/guava") == "google"
