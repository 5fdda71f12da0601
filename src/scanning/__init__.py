"""Source-tree scanning utilities."""

from .tree import ensure_dir, exists_dir, exists_file, find_files

__all__ = [
    "ensure_dir",
    "exists_dir",
    "exists_file",
    "find_files",
]
