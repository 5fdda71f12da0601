"""Tests for URL-safe base64 tokens and URL helpers."""

import binascii

import pytest

from common.codec import atob_url, btoa_url, concat_bytes, remove_http_prefix


class TestBtoaUrl:
    """Encoding."""

    @pytest.mark.parametrize("data,expected", [
        (b"", ""),
        (b"f", "Zg"),
        (b"fo", "Zm8"),
        (b"foo", "Zm9v"),
        (b"\xfb\xff", "-_8"),
    ])
    def test_known_values(self, data, expected):
        assert btoa_url(data) == expected

    def test_str_input_is_utf8(self):
        assert btoa_url("héllo") == btoa_url("héllo".encode("utf-8"))

    def test_output_alphabet(self):
        token = btoa_url(bytes(range(256)))
        assert "+" not in token
        assert "/" not in token
        assert "=" not in token


class TestAtobUrl:
    """Decoding with implicit padding recovery."""

    @pytest.mark.parametrize("data", [b"", b"a", b"ab", b"abc", b"abcd", bytes(range(256))])
    def test_round_trip(self, data):
        assert atob_url(btoa_url(data)) == data

    def test_padded_input_still_decodes(self):
        assert atob_url("Zg==") == b"f"

    @pytest.mark.parametrize("token", ["Zm9v+A", "Zm9v/A", "Zm 9v", "Zm9v!", "a=bc"])
    def test_invalid_characters(self, token):
        with pytest.raises(binascii.Error):
            atob_url(token)

    def test_impossible_length(self):
        with pytest.raises(binascii.Error):
            atob_url("Zm9vY")


class TestRemoveHttpPrefix:
    """Scheme stripping."""

    def test_https(self):
        assert remove_http_prefix("https://example.com/x") == "example.com/x"

    def test_http(self):
        assert remove_http_prefix("http://example.com") == "example.com"

    @pytest.mark.parametrize("url", ["ftp://x", "example.com", "HTTPS://x", ""])
    def test_other_schemes_fail(self, url):
        with pytest.raises(ValueError, match="not a http/https url"):
            remove_http_prefix(url)


def test_concat_bytes():
    a = b"ab"
    out = concat_bytes(a, b"cd")
    assert out == b"abcd"
    assert a == b"ab"
