"""Strict semantic-version parsing and comparison.

Callers must pass exact, already-resolved versions. Ranges and partial
versions are programming errors and raise :class:`InvalidVersionError`;
there is no permissive fallback ordering.
"""
from __future__ import annotations

import semantic_version


class InvalidVersionError(ValueError):
    """Raised when a string is not a valid semantic version."""


def parse_semver(version: str) -> semantic_version.Version:
    """Parse ``version`` (optionally ``v``-prefixed) as SemVer 2.0."""
    raw = version[1:] if version.startswith("v") else version
    try:
        return semantic_version.Version(raw)
    except ValueError as e:
        raise InvalidVersionError(f"invalid semantic version {version!r}: {e}") from e


def semver_less_than(a: str, b: str) -> bool:
    """Return True if ``a`` has strictly lower precedence than ``b``.

    >>> semver_less_than("1.2.3", "1.10.0")
    True
    """
    return parse_semver(a) < parse_semver(b)
