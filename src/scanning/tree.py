"""Recursive source-tree enumeration.

Reports files relative to the scan root with "/" separators, skipping any
directory named ``node_modules``. Symlinked directories are never followed.
Entries come back in directory-read order; callers that need a stable order
must sort.
"""
from __future__ import annotations

import logging
import os
import stat
from typing import Callable, List

from common.logging_utils import extra_context, is_debug_enabled, Timer
from constants import Constants

logger = logging.getLogger(__name__)


def find_files(root: str, prefix: str = "", fn: Callable[[str], bool] = lambda p: True) -> List[str]:
    """Collect files under ``root`` whose relative path satisfies ``fn``.

    Args:
        root: Directory to scan.
        prefix: Relative path of ``root`` within the overall scan; prepended
            to every reported path ("" for the top-level call).
        fn: Predicate receiving each relative path.

    Returns:
        Relative paths of matching files.

    Raises:
        OSError: if ``root`` or any directory below it cannot be read. The
            whole scan aborts; no partial list is returned.
    """
    with Timer() as t:
        root_dir = os.path.abspath(root)
        logger.debug("Scanning %s", root_dir)
        files = _walk(root_dir, prefix, fn)
    if is_debug_enabled(logger):
        logger.debug(
            "Scanned %s: %d file(s)",
            root_dir,
            len(files),
            extra=extra_context(
                event="scan_complete",
                component="scanner",
                root=root_dir,
                count=len(files),
                duration_ms=t.duration_ms(),
            ),
        )
    return files


def _walk(dir_path: str, prefix: str, fn: Callable[[str], bool]) -> List[str]:
    files: List[str] = []
    with os.scandir(dir_path) as entries:
        for entry in entries:
            rel = f"{prefix}/{entry.name}" if prefix else entry.name
            if entry.is_symlink():
                if entry.is_dir():
                    logger.debug("Skipping symlinked directory %s", rel)
                    continue
            elif entry.is_dir():
                if entry.name in Constants.EXCLUDED_DIRS:
                    logger.debug("Skipping excluded directory %s", rel)
                    continue
                files.extend(_walk(os.path.join(dir_path, entry.name), rel, fn))
                continue
            if fn(rel):
                files.append(rel)
    return files


def exists_dir(path: str) -> bool:
    """True if ``path`` is a directory (symlinks are not followed)."""
    try:
        return stat.S_ISDIR(os.lstat(path).st_mode)
    except OSError:
        return False


def exists_file(path: str) -> bool:
    """True if ``path`` exists and is not a directory (symlinks are not followed)."""
    try:
        return not stat.S_ISDIR(os.lstat(path).st_mode)
    except OSError:
        return False


def ensure_dir(path: str) -> None:
    """Create ``path`` and its parents when missing."""
    try:
        os.lstat(path)
    except FileNotFoundError:
        os.makedirs(path, mode=Constants.DIR_MODE, exist_ok=True)
