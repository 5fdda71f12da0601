"""Semantic-version parsing and comparison."""

from .semver import InvalidVersionError, parse_semver, semver_less_than

__all__ = [
    "InvalidVersionError",
    "parse_semver",
    "semver_less_than",
]
