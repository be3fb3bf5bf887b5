"""Lenient tag parsing and next-version computation."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidVersionType
from .types import Increment


@dataclass(frozen=True, slots=True, order=True)
class SemVer:
    major: int = 0
    minor: int = 0
    patch: int = 0

    def to_tag(self) -> str:
        return f"v{self.major}.{self.minor}.{self.patch}"

    def __str__(self) -> str:
        return self.to_tag()

    def bump(self, increment: Increment) -> SemVer:
        match increment:
            case Increment.major:
                return SemVer(self.major + 1, 0, 0)
            case Increment.minor:
                return SemVer(self.major, self.minor + 1, 0)
            case Increment.patch:
                return SemVer(self.major, self.minor, self.patch + 1)
            case _:
                raise AssertionError(f"unexpected increment: {increment}")


def _component(part: str) -> int:
    part = part.strip()
    return int(part) if part.isascii() and part.isdigit() else 0


def parse_tag(tag: str) -> SemVer:
    """Parse 'v1.2.3' / '1.2' / 'v2' into a SemVer; missing or junk parts are 0."""
    text = tag.strip()
    if text.startswith("v"):
        text = text[1:]
    parts = (text.split(".") + ["", "", ""])[:3]
    return SemVer(*(_component(p) for p in parts))


def next_version(latest_tag: str | None, increment: Increment) -> SemVer:
    base = parse_tag(latest_tag) if latest_tag else SemVer()
    return base.bump(increment)


def parse_increment(token: str | None) -> Increment:
    allowed = ", ".join(i.value for i in Increment)
    try:
        return Increment(token or "")
    except ValueError:
        raise InvalidVersionType(
            f"Invalid version type '{token or ''}'. Expected one of: {allowed}.",
            hint="Usage: mygit release <major|minor|patch>",
        ) from None
