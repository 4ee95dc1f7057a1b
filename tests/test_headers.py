# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Tests for HeaderBag and header name normalization.

Tests cover:
- normalize_header_name: canonical title case and the two special cases
- HeaderBag: get/has/set/remove with case-insensitive keys
- ASGI conversion: from_asgi, to_asgi, headers_from_scope
"""

import pytest

from genro_http.exceptions import InvalidHeaderError
from genro_http.headers import HeaderBag, headers_from_scope, normalize_header_name


class TestNormalizeHeaderName:
    """Test normalize_header_name function."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("content-type", "Content-Type"),
            ("CONTENT-TYPE", "Content-Type"),
            ("content_type", "Content-Type"),
            ("content type", "Content-Type"),
            ("x-forwarded-for", "X-Forwarded-For"),
            ("host", "Host"),
        ],
    )
    def test_title_case(self, raw, expected):
        """Words should be title-cased and joined with hyphens."""
        assert normalize_header_name(raw) == expected

    def test_etag(self):
        """ETag keeps its conventional capitalization."""
        assert normalize_header_name("etag") == "ETag"
        assert normalize_header_name("ETAG") == "ETag"

    def test_www_authenticate(self):
        """WWW-Authenticate keeps its conventional capitalization."""
        assert normalize_header_name("www-authenticate") == "WWW-Authenticate"
        assert normalize_header_name("www_authenticate") == "WWW-Authenticate"

    def test_no_other_special_cases(self):
        """Only ETag and WWW-Authenticate are special-cased."""
        assert normalize_header_name("content-md5") == "Content-Md5"
        assert normalize_header_name("dnt") == "Dnt"

    def test_strips_surrounding_whitespace(self):
        """Leading and trailing whitespace should be ignored."""
        assert normalize_header_name("  accept ") == "Accept"

    def test_idempotent(self):
        """Normalizing a canonical name should return it unchanged."""
        for name in ("Content-Type", "ETag", "WWW-Authenticate"):
            assert normalize_header_name(name) == name


class TestHeaderBag:
    """Test HeaderBag class."""

    def test_set_and_get_case_insensitive(self):
        """Values set under one case should be found under any other."""
        headers = HeaderBag()
        headers.set("X-Foo", "bar")
        assert headers.get("x-foo") == ["bar"]
        assert headers.get("X_FOO") == ["bar"]

    def test_append(self):
        """append=True should add to the existing values."""
        headers = HeaderBag()
        headers.set("X-Foo", "a")
        headers.set("X-Foo", "b", append=True)
        assert headers.get("X-Foo") == ["a", "b"]

    def test_append_to_missing(self):
        """append=True on a missing header should start a new list."""
        headers = HeaderBag()
        headers.set("Set-Cookie", "a=1", append=True)
        assert headers.get("set-cookie") == ["a=1"]

    def test_set_replaces(self):
        """set without append should replace existing values."""
        headers = HeaderBag({"Accept": "text/html"})
        headers.set("accept", "application/json")
        assert headers.get("Accept") == ["application/json"]

    def test_set_list_value(self):
        """A list value should be stored as the value list."""
        headers = HeaderBag()
        headers.set("Vary", ["Accept", "Origin"])
        assert headers.get("vary") == ["Accept", "Origin"]

    def test_set_none(self):
        """None should store an empty list."""
        headers = HeaderBag()
        headers.set("X-Empty", None)
        assert headers.has("x-empty")
        assert headers.get("x-empty") == []

    def test_missing(self):
        """Missing headers should report absent and return the default."""
        headers = HeaderBag()
        assert headers.has("missing") is False
        assert headers.get("missing") is None
        assert headers.get("missing", "d") == "d"

    def test_remove(self):
        """remove should delete regardless of case, and ignore missing keys."""
        headers = HeaderBag({"ETag": '"abc"'})
        headers.remove("etag")
        assert not headers.has("ETag")
        headers.remove("etag")
        assert len(headers) == 0

    def test_chaining(self):
        """Mutators should return the bag."""
        headers = HeaderBag()
        result = headers.set("a", "1").set("b", "2").remove("a")
        assert result is headers
        assert headers.keys() == ["B"]

    def test_keys_are_canonical(self):
        """Stored keys should be in canonical form, in insertion order."""
        headers = HeaderBag()
        headers.set("www-authenticate", "Bearer").set("etag", "x").set("content_length", "3")
        assert headers.keys() == ["WWW-Authenticate", "ETag", "Content-Length"]

    def test_mapping_protocol(self):
        """Item access, containment and iteration should normalize keys."""
        headers = HeaderBag()
        headers["content-type"] = "text/plain"
        assert headers["CONTENT-TYPE"] == ["text/plain"]
        assert "Content_Type" in headers
        assert 42 not in headers
        assert list(headers) == ["Content-Type"]
        del headers["content-type"]
        assert "content-type" not in headers

    def test_getitem_missing(self):
        """Item access on a missing header should raise KeyError."""
        with pytest.raises(KeyError):
            HeaderBag()["missing"]

    def test_first_and_line(self):
        """first should return one value, line should join them."""
        headers = HeaderBag()
        headers.set("Accept", "text/html").set("accept", "application/json", append=True)
        assert headers.first("accept") == "text/html"
        assert headers.line("accept") == "text/html, application/json"
        assert headers.first("missing", "d") == "d"
        assert headers.line("missing") is None

    def test_equality(self):
        """Bags should compare equal to bags or mappings with the same content."""
        headers = HeaderBag({"x-foo": "bar"})
        assert headers == HeaderBag({"X-Foo": ["bar"]})
        assert headers == {"X-FOO": "bar"}
        assert headers != HeaderBag({"x-foo": "baz"})

    def test_get_returns_copy(self):
        """Mutating a returned value list should not change the bag."""
        headers = HeaderBag({"x-foo": "a"})
        headers.get("x-foo").append("injected")
        headers["X-Foo"].append("injected")
        assert headers.get("X-Foo") == ["a"]

    def test_repr(self):
        """repr should show class name and canonical keys."""
        r = repr(HeaderBag({"etag": "x"}))
        assert "HeaderBag" in r
        assert "ETag" in r


class TestAsgiConversion:
    """Test conversion from and to ASGI raw headers."""

    def test_from_asgi(self):
        """Raw headers should be decoded and grouped by canonical name."""
        raw = [
            (b"content-type", b"application/json"),
            (b"set-cookie", b"a=1"),
            (b"Set-Cookie", b"b=2"),
        ]
        headers = HeaderBag.from_asgi(raw)
        assert headers.get("Content-Type") == ["application/json"]
        assert headers.get("Set-Cookie") == ["a=1", "b=2"]

    def test_from_asgi_latin1(self):
        """Values should be decoded as Latin-1 by default."""
        headers = HeaderBag.from_asgi([(b"x-name", "caf\xe9".encode("latin-1"))])
        assert headers.first("x-name") == "caf\xe9"

    def test_to_asgi(self):
        """Each value should become one lowercase raw pair."""
        headers = HeaderBag()
        headers.set("Content-Type", "text/plain").set("set-cookie", ["a=1", "b=2"])
        assert headers.to_asgi() == [
            (b"content-type", b"text/plain"),
            (b"set-cookie", b"a=1"),
            (b"set-cookie", b"b=2"),
        ]

    def test_to_asgi_stringifies_values(self):
        """Non-string values should be converted with str()."""
        headers = HeaderBag().set("Content-Length", 12)
        assert headers.to_asgi() == [(b"content-length", b"12")]

    @pytest.mark.parametrize("value", ["a\r\nb", "a\nb", "a\rb", "a\0b"])
    def test_to_asgi_rejects_control_characters(self, value):
        """Values with CR, LF or NUL should raise InvalidHeaderError."""
        headers = HeaderBag().set("X-Bad", value)
        with pytest.raises(InvalidHeaderError) as exc_info:
            headers.to_asgi()
        assert exc_info.value.name == "X-Bad"
        assert exc_info.value.value == value

    def test_to_asgi_rejects_empty_name(self):
        """An empty header name should raise InvalidHeaderError."""
        headers = HeaderBag().set("", "value")
        with pytest.raises(InvalidHeaderError):
            headers.to_asgi()

    def test_headers_from_scope(self):
        """headers_from_scope should read scope["headers"]."""
        scope = {"type": "http", "headers": [(b"host", b"example.com")]}
        assert headers_from_scope(scope).get("Host") == ["example.com"]

    def test_headers_from_scope_missing(self):
        """A scope without headers should give an empty bag."""
        assert len(headers_from_scope({"type": "http"})) == 0
