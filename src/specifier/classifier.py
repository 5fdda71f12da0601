"""Specifier classification and module-key normalization.

A specifier is a remote URL (``http://``/``https://``), a local path
(``file://``, ``/``, ``./``, ``../``, ``.`` or ``..``) or, failing both, a
bare package reference such as ``react@18.2.0/jsx-runtime``.
"""
from __future__ import annotations

import logging

from common.codec import remove_http_prefix
from constants import Constants

from .models import BareSpecifier, SpecifierKind
from .patterns import strip_module_ext

logger = logging.getLogger(__name__)


def is_remote_specifier(specifier: str) -> bool:
    """Returns True if the import path is a remote URL."""
    return specifier.startswith(Constants.HTTPS_PREFIX) or specifier.startswith(Constants.HTTP_PREFIX)


def is_local_specifier(specifier: str) -> bool:
    """Returns True if the import path is a local path."""
    return specifier.startswith(Constants.LOCAL_PREFIXES) or specifier in (".", "..")


def classify_specifier(specifier: str) -> SpecifierKind:
    if is_remote_specifier(specifier):
        return SpecifierKind.REMOTE
    if is_local_specifier(specifier):
        return SpecifierKind.LOCAL
    return SpecifierKind.BARE


def split_bare_specifier(specifier: str) -> BareSpecifier:
    """Split a bare specifier into package name, version and sub-path.

    Scoped names keep their ``@scope/`` prefix::

        "@scope/pkg@1.0.0/x" -> BareSpecifier("@scope/pkg", "1.0.0", "x")

    Raises:
        ValueError: if ``specifier`` is remote, local or empty.
    """
    kind = classify_specifier(specifier)
    if kind is not SpecifierKind.BARE:
        raise ValueError(f"not a bare specifier ({kind.value}): {specifier}")
    if not specifier:
        raise ValueError("empty specifier")

    scope = ""
    rest = specifier
    if rest.startswith("@"):
        scope, sep, rest = rest.partition("/")
        if not sep or not rest:
            raise ValueError(f"invalid scoped specifier: {specifier}")
        scope += "/"

    head, _, subpath = rest.partition("/")
    name, _, version = head.partition("@")
    if not name:
        raise ValueError(f"missing package name: {specifier}")
    return BareSpecifier(
        name=scope + name,
        version=version or None,
        subpath=subpath or None,
    )


def module_key(specifier: str) -> str:
    """Normalize a specifier into a canonical module key.

    Remote URLs lose their scheme, local paths and bare sub-paths lose a
    recognized module extension.
    """
    kind = classify_specifier(specifier)
    if kind is SpecifierKind.REMOTE:
        key = remove_http_prefix(specifier)
    elif kind is SpecifierKind.LOCAL:
        key = strip_module_ext(specifier)
    else:
        bare = split_bare_specifier(specifier)
        key = str(BareSpecifier(
            name=bare.name,
            version=bare.version,
            subpath=strip_module_ext(bare.subpath) if bare.subpath else None,
        ))
    logger.debug("Module key for %s (%s): %s", specifier, kind.value, key)
    return key
