"""Version-aware path patterns and source-text recognizers.

All patterns are compiled once at import time and never mutated. Every
matcher is total: input that does not fit yields ``False``/``None`` and
never raises.
"""
from __future__ import annotations

import re
from typing import Optional, Tuple

from constants import Constants

from .models import VersionedPathMatch

# Exact "MAJOR.MINOR.PATCH" with an optional pre-release/build tail.
FULL_VERSION_PATTERN = re.compile(r"\A\d+\.\d+\.\d+[\w.+\-]*\Z", re.ASCII)

# Pinned "name@version" segment: semver (optionally v-prefixed) or a
# 10-char lowercase commit hash, followed by "/" or end of string.
FULL_VERSION_PATH_PATTERN = re.compile(
    r"(\w)@(v?\d+\.\d+\.\d+[\w.+\-]*|[0-9a-f]{10})(/|\Z)", re.ASCII
)

# Range-capable "name@range" segment, also terminated by "&" for query
# strings. The token must start (after any range operators or 'v') with a
# digit or '*', so arbitrary words are not taken for versions.
PATH_WITH_VERSION_PATTERN = re.compile(
    r"\w@(?=[*~^v]*[\d*])[*~^\w.+\-]+(/|\Z|&)", re.ASCII
)

LOCATION_SUFFIX_PATTERN = re.compile(r"(\.js):\d+:\d+\Z", re.ASCII)
JS_IDENT_PATTERN = re.compile(r"\A[a-zA-Z_$][\w$]*\Z", re.ASCII)
GLOBAL_IDENT_PATTERN = re.compile(r"__[a-zA-Z]+\$")
VAR_EQUAL_PATTERN = re.compile(r"var ([a-zA-Z]+)\s*=\s*([a-zA-Z]+)\Z")


def is_full_version(s: str) -> bool:
    """Return True if ``s`` is exactly a pinned semver string (e.g. ``1.2.3-beta.1``)."""
    return FULL_VERSION_PATTERN.match(s) is not None


def match_versioned_path(path: str) -> Optional[VersionedPathMatch]:
    """Find the first pinned ``name@version`` segment in ``path``.

    >>> m = match_versioned_path("react@18.2.0/jsx-runtime")
    >>> (m.boundary_char, m.version, m.separator)
    ('t', '18.2.0', '/')
    """
    m = FULL_VERSION_PATH_PATTERN.search(path)
    if m is None:
        return None
    return VersionedPathMatch(
        boundary_char=m.group(1),
        version=m.group(2),
        separator=m.group(3),
        start=m.start(),
        end=m.end(),
    )


def has_path_with_version(path: str) -> bool:
    """Return True if ``path`` carries a ``name@version-or-range`` segment."""
    return PATH_WITH_VERSION_PATTERN.search(path) is not None


def strip_module_ext(filename: str) -> str:
    for ext in Constants.MODULE_EXTENSIONS:
        if filename.endswith(ext):
            return filename[: -len(ext)]
    return filename


def strip_location_suffix(path: str) -> str:
    """Drop a trailing ``.js:LINE:COLUMN`` location, keeping the ``.js``."""
    return LOCATION_SUFFIX_PATTERN.sub(r"\1", path)


def is_js_identifier(s: str) -> bool:
    return JS_IDENT_PATTERN.match(s) is not None


def has_global_ident(s: str) -> bool:
    """Return True if ``s`` contains a generated ``__name$`` identifier."""
    return GLOBAL_IDENT_PATTERN.search(s) is not None


def match_var_equal(s: str) -> Optional[Tuple[str, str]]:
    """Match a trailing ``var NAME = OTHER`` statement.

    Returns:
        ``(NAME, OTHER)`` or None.
    """
    m = VAR_EQUAL_PATTERN.search(s)
    if m is None:
        return None
    return m.group(1), m.group(2)
