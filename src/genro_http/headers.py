# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Case-insensitive HTTP header collection with canonical names.

Purpose
=======
HTTP header names are case-insensitive per RFC 7230. ``HeaderBag`` stores
every name in its canonical title-case form, so ``content-type``,
``CONTENT_TYPE`` and ``Content Type`` all address ``Content-Type``. Each
header holds a list of values, since the same header can appear more than
once (e.g., Set-Cookie).

Processing Schema::

    Input key (any case, separators " ", "-", "_"):
    "www_authenticate"
                        ↓
          normalize_header_name()
                        ↓
    Title case, hyphen-joined:    "Www-Authenticate"
                        ↓
          Literal overrides
                        ↓
    Stored key:                   "WWW-Authenticate"

Only two overrides exist: "Etag" -> "ETag" and
"Www-Authenticate" -> "WWW-Authenticate".

ASGI Mapping::

    scope["headers"] = [(b"...", b"...")]  →  HeaderBag.from_asgi()
    HeaderBag.to_asgi()                    →  [(b"content-type", b"...")]

Definition::

    def normalize_header_name(key: str) -> str

    class HeaderBag(Bag):
        def key(self, key: str) -> str
        def get(self, key: str, default: Any = None) -> Any
        def has(self, key: str) -> bool
        def set(self, key: str, value: Any = None, append: bool = False) -> HeaderBag
        def remove(self, key: str) -> HeaderBag
        def first(self, key: str, default: str | None = None) -> str | None
        def line(self, key: str, default: str | None = None) -> str | None
        def to_asgi(self) -> list[tuple[bytes, bytes]]

        @classmethod
        def from_asgi(cls, raw_headers) -> HeaderBag

    def headers_from_scope(scope: Mapping[str, Any]) -> HeaderBag

Example::

    from genro_http.headers import HeaderBag

    headers = HeaderBag()
    headers.set("content-type", "text/html")
    headers.set("set_cookie", "a=1").set("Set-Cookie", "b=2", append=True)

    headers.get("CONTENT-TYPE")     # ["text/html"]
    headers.get("set-cookie")       # ["a=1", "b=2"]
    headers.get("missing", "d")     # "d"
    headers.keys()                  # ["Content-Type", "Set-Cookie"]

Design Notes
============
- ``get`` returns a copy of the value list; use ``first`` for a single value
- Setting ``None`` stores an empty list, a list or tuple is stored as-is
- Values are validated only when serialized by ``to_asgi``
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from typing import Any

from .bag import Bag
from .config import get_options
from .exceptions import InvalidHeaderError

__all__ = ["HeaderBag", "headers_from_scope", "normalize_header_name"]

logger = logging.getLogger("genro_http.headers")

_SEPARATORS = re.compile(r"[ _\-]")
_SPECIAL_CASES = {"Etag": "ETag", "Www-Authenticate": "WWW-Authenticate"}
_FORBIDDEN_VALUE_CHARS = ("\r", "\n", "\0")


def normalize_header_name(key: str) -> str:
    """
    Convert a header name to its canonical form.

    Words separated by spaces, hyphens or underscores are title-cased and
    joined with hyphens. Surrounding whitespace is ignored.

    Example:
        >>> normalize_header_name("content_type")
        'Content-Type'
        >>> normalize_header_name("ETAG")
        'ETag'
    """
    words = _SEPARATORS.split(key.strip())
    name = "-".join(word.capitalize() for word in words)
    return _SPECIAL_CASES.get(name, name)


class HeaderBag(Bag):
    """
    Mutable, case-insensitive HTTP headers with multi-value support.

    Keys are stored in canonical form (see ``normalize_header_name``),
    values as lists of strings.

    Example:
        >>> headers = HeaderBag({"x-foo": "bar"})
        >>> headers.get("X-FOO")
        ['bar']
        >>> headers.set("x-foo", "baz", append=True).get("x-foo")
        ['bar', 'baz']
        >>> "X_Foo" in headers
        True
    """

    __slots__ = ()

    def key(self, key: str) -> str:
        return normalize_header_name(key)

    def get(self, key: str, default: Any = None) -> Any:
        """Return a copy of the values of a header, or ``default``."""
        values = self._data.get(self.key(key))
        if values is None:
            return default
        return list(values)

    def __getitem__(self, key: str) -> list[Any]:
        return list(super().__getitem__(key))

    def set(self, key: str, value: Any = None, append: bool = False) -> HeaderBag:
        """
        Store a header value.

        Args:
            key: Header name (any case).
            value: A single value, a list/tuple of values, or None.
            append: Add ``value`` to the existing values instead of
                replacing them.

        Returns:
            The bag itself, for chaining.
        """
        if not append:
            if value is None:
                values: list[Any] = []
            elif isinstance(value, (list, tuple)):
                values = list(value)
            else:
                values = [value]
            super().set(key, values)
            return self

        current = list(self.get(key, []))
        current.append(value)
        super().set(key, current)
        return self

    def first(self, key: str, default: str | None = None) -> str | None:
        """Return the first value of a header, or ``default``."""
        values = self.get(key)
        if not values:
            return default
        return values[0]

    def line(self, key: str, default: str | None = None) -> str | None:
        """Return all values of a header joined by ", ", or ``default``."""
        values = self.get(key)
        if values is None:
            return default
        return ", ".join(str(value) for value in values)

    @classmethod
    def from_asgi(
        cls,
        raw_headers: Iterable[tuple[bytes, bytes]],
        encoding: str | None = None,
    ) -> HeaderBag:
        """
        Build headers from ASGI raw headers.

        Repeated names are appended in order of appearance.

        Args:
            raw_headers: Iterable of (name, value) byte pairs.
            encoding: Codec for names and values. Defaults to the
                ``header_encoding`` option.
        """
        encoding = encoding or get_options()["header_encoding"]
        headers = cls()
        for name, value in raw_headers:
            headers.set(name.decode(encoding), value.decode(encoding), append=True)
        return headers

    def to_asgi(self, encoding: str | None = None) -> list[tuple[bytes, bytes]]:
        """
        Serialize to ASGI raw headers, one pair per value.

        Names are lowercased as ASGI servers expect.

        Raises:
            InvalidHeaderError: If a name is empty or a value contains
                CR, LF or NUL.
        """
        encoding = encoding or get_options()["header_encoding"]
        raw: list[tuple[bytes, bytes]] = []
        for name, values in self.items():
            if not name:
                logger.warning("Rejected header with empty name")
                raise InvalidHeaderError(name, detail="Header name cannot be empty")
            for value in values:
                text = str(value)
                if any(char in text for char in _FORBIDDEN_VALUE_CHARS):
                    logger.warning(f"Rejected value for header {name}")
                    raise InvalidHeaderError(
                        name, text, detail=f"Header {name!r} contains a control character"
                    )
                raw.append((name.lower().encode(encoding), text.encode(encoding)))
        return raw


def headers_from_scope(scope: Mapping[str, Any]) -> HeaderBag:
    """
    Create a HeaderBag from an ASGI scope.

    Returns an empty bag if "headers" is not in scope.

    Example:
        >>> scope = {"type": "http", "headers": [(b"host", b"example.com")]}
        >>> headers_from_scope(scope).get("Host")
        ['example.com']
    """
    return HeaderBag.from_asgi(scope.get("headers", []))
