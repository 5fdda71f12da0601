"""Data models for specifier classification and version matching."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SpecifierKind(Enum):
    """Mutually exclusive specifier classes."""
    REMOTE = "remote"
    LOCAL = "local"
    BARE = "bare"


@dataclass(frozen=True)
class VersionedPathMatch:
    """A pinned ``name@version`` segment found inside a request path."""
    boundary_char: str  # last character of the package name, right before '@'
    version: str  # semver-like token (optionally 'v'-prefixed) or 10-char commit hash
    separator: str  # "/" or "" at end of string
    start: int
    end: int

    @property
    def is_commit_hash(self) -> bool:
        return len(self.version) == 10 and "." not in self.version


@dataclass(frozen=True)
class BareSpecifier:
    """A bare package reference split into its parts."""
    name: str  # includes the leading "@scope/" for scoped packages
    version: Optional[str]
    subpath: Optional[str]

    def __str__(self) -> str:
        s = self.name
        if self.version:
            s += "@" + self.version
        if self.subpath:
            s += "/" + self.subpath
        return s
