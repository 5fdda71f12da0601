"""Specifier classification and version-aware path matching."""

from .models import BareSpecifier, SpecifierKind, VersionedPathMatch
from .classifier import (
    classify_specifier,
    is_local_specifier,
    is_remote_specifier,
    module_key,
    split_bare_specifier,
)
from .patterns import (
    has_global_ident,
    has_path_with_version,
    is_full_version,
    is_js_identifier,
    match_var_equal,
    match_versioned_path,
    strip_location_suffix,
    strip_module_ext,
)

__all__ = [
    "BareSpecifier",
    "SpecifierKind",
    "VersionedPathMatch",
    "classify_specifier",
    "is_local_specifier",
    "is_remote_specifier",
    "module_key",
    "split_bare_specifier",
    "has_global_ident",
    "has_path_with_version",
    "is_full_version",
    "is_js_identifier",
    "match_var_equal",
    "match_versioned_path",
    "strip_location_suffix",
    "strip_module_ext",
]
