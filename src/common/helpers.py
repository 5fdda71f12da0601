"""Small sequence helpers."""
from __future__ import annotations

from typing import Callable, Iterable, List, Optional


def includes(values: Optional[Iterable[str]], value: str) -> bool:
    """Return True if ``value`` is a member of ``values`` (None is empty)."""
    if not values:
        return False
    return value in values


def filter_values(values: Optional[Iterable[str]], fn: Callable[[str], bool]) -> List[str]:
    """Order-preserving filter; None and empty inputs give an empty list."""
    if not values:
        return []
    return [v for v in values if fn(v)]


def ends_with(s: str, *suffixes: str) -> bool:
    """Return True if ``s`` ends with any of ``suffixes``."""
    return any(s.endswith(suffix) for suffix in suffixes)
