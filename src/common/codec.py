"""URL-safe binary-to-text helpers for embedding opaque payloads in URL paths."""
from __future__ import annotations

import base64
import binascii
import re

from constants import Constants

_URL_SAFE_TOKEN = re.compile(r"^[A-Za-z0-9_-]*={0,3}$")


def btoa_url(data: bytes | str) -> str:
    """Encode bytes with the URL-safe base64 alphabet and strip ``=`` padding.

    Strings are encoded as UTF-8 first.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def atob_url(token: str) -> bytes:
    """Decode a token produced by :func:`btoa_url`.

    Padding is restored from the length before decoding. Characters outside
    the URL-safe alphabet raise ``binascii.Error``; no partial result is
    returned.
    """
    remainder = len(token) % 4
    if remainder:
        token += "=" * (4 - remainder)
    # urlsafe_b64decode silently drops '+', '/' and other stray characters
    if not _URL_SAFE_TOKEN.match(token):
        raise binascii.Error(f"invalid url-safe base64 token: {token!r}")
    return base64.urlsafe_b64decode(token)


def remove_http_prefix(url: str) -> str:
    """Return ``url`` without its ``http://`` or ``https://`` scheme.

    Raises:
        ValueError: if ``url`` carries neither scheme.
    """
    if url.startswith(Constants.HTTP_PREFIX):
        return url[len(Constants.HTTP_PREFIX):]
    if url.startswith(Constants.HTTPS_PREFIX):
        return url[len(Constants.HTTPS_PREFIX):]
    raise ValueError(f"not a http/https url: {url}")


def concat_bytes(a: bytes, b: bytes) -> bytes:
    return bytes(a) + bytes(b)
