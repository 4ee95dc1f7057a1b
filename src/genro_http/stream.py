# Copyright 2025 Softwell S.r.l.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Binary resource streams for HTTP message bodies.

This module provides:
- ``Stream``: wrapper around an open binary file object with a metadata cache
- ``MemoryStream``: Stream over an in-memory ``io.BytesIO``
- ``FileStream``: Stream over a file opened from a path

Metadata Cache
==============
``build_cache()`` inspects the resource once and stores::

    mode      open mode without "b" ("r", "w+", ...), "" if unknown
    readable  mode not in ("w", "a", "x", "c")
    writable  mode != "r"
    seekable  resource.seekable()
    local     backed by a file on disk
    uri       file path, or None

When the resource carries no string ``mode`` (e.g. ``io.BytesIO``), the
readable/writable flags come from the resource's own ``readable()`` and
``writable()``.

Capability Rules
================
- ``read``/``write`` return None when the stream lacks the capability
- ``seek`` returns False on a non-seekable stream
- ``get_contents`` always reads from position 0 and restores the cursor
- ``close`` and ``detach`` clear the readable/writable flags

Example::

    from genro_http.stream import MemoryStream

    with MemoryStream(b"hello") as body:
        body.read(2)           # b"he"
        body.get_contents()    # b"hello", cursor still at 2
        body.get_size()        # 5
    body.is_readable()         # False, closed on exit
"""

from __future__ import annotations

import io
import logging
import os
from collections.abc import Iterator
from typing import IO, Any

from .config import get_options
from .exceptions import StreamError

__all__ = ["Stream", "MemoryStream", "FileStream"]

logger = logging.getLogger("genro_http.stream")

_WRITE_ONLY_MODES = ("w", "a", "x", "c")


class Stream:
    """Shared functionality for an HTTP resource stream."""

    __slots__ = ("_stream", "_cache")

    def __init__(self, stream: IO[bytes] | None = None) -> None:
        self._stream: IO[bytes] | None = None
        self._cache: dict[str, Any] = {}
        if stream is not None:
            self.set_stream(stream)

    def set_stream(self, stream: IO[bytes]) -> Stream:
        """Set a resource as the stream and rebuild the metadata cache."""
        self._stream = stream
        self.build_cache()
        return self

    def get_stream(self) -> IO[bytes] | None:
        """Return the raw resource, or None once detached."""
        return self._stream

    def _resource(self) -> IO[bytes]:
        if self._stream is None:
            raise StreamError("Stream has no resource attached")
        return self._stream

    def build_cache(self) -> Stream:
        """Build the metadata cache for the current resource."""
        resource = self._resource()
        raw_mode = getattr(resource, "mode", None)
        name = getattr(resource, "name", None)
        uri = name if isinstance(name, str) else None

        if isinstance(raw_mode, str):
            mode = raw_mode.replace("b", "")
            readable = mode not in _WRITE_ONLY_MODES
            writable = mode != "r"
        else:
            mode = ""
            readable = resource.readable()
            writable = resource.writable()

        self._cache = {
            "mode": mode,
            "readable": readable,
            "writable": writable,
            "seekable": resource.seekable(),
            "local": uri is not None and os.path.isfile(uri),
            "uri": uri,
        }
        return self

    def get_cache(self) -> dict[str, Any]:
        return dict(self._cache)

    def close(self) -> bool:
        """Close the resource. Returns False if it was already closed."""
        if self._stream is None or self._stream.closed:
            return False
        self._stream.close()
        self._cache["readable"] = False
        self._cache["writable"] = False
        self._cache["seekable"] = False
        logger.debug(f"Closed stream {self._cache.get('uri') or '<memory>'}")
        return True

    def detach(self) -> IO[bytes] | None:
        """Forget the resource without closing it and return it."""
        resource = self._stream
        self._stream = None
        self._cache["readable"] = False
        self._cache["writable"] = False
        self._cache["seekable"] = False
        return resource

    def eof(self) -> bool:
        """Return True if the cursor is at the end of the resource."""
        resource = self._resource()
        if resource.closed:
            return True
        if resource.seekable():
            position = resource.tell()
            end = resource.seek(0, io.SEEK_END)
            resource.seek(position)
            return position >= end
        peek = getattr(resource, "peek", None)
        if peek is not None:
            return not peek(1)
        return False

    def is_consumed(self) -> bool:
        """Alias for eof()."""
        return self.eof()

    def get_contents(self, max_length: int = -1) -> bytes:
        """
        Return the content of the resource from the beginning.

        The cursor position is restored afterwards on seekable streams.

        Args:
            max_length: Maximum number of bytes to return, -1 for all.
        """
        if not self.is_readable() or (not self.is_seekable() and self.eof()):
            return b""

        resource = self._resource()
        if not self.is_seekable():
            return resource.read(max_length)

        position = resource.tell()
        resource.seek(0)
        buffer = resource.read(max_length)
        resource.seek(position)
        return buffer

    def get_mode(self) -> str:
        return str(self._cache.get("mode", ""))

    def get_size(self) -> int:
        """Return the size in bytes of the resource."""
        resource = self._resource()
        if resource.closed:
            return 0
        try:
            fileno = resource.fileno()
        except (AttributeError, OSError):
            return len(self.get_contents())
        if self.is_writable():
            resource.flush()
        return os.fstat(fileno).st_size

    def is_local(self) -> bool:
        return bool(self._cache.get("local", False))

    def is_readable(self) -> bool:
        return bool(self._cache.get("readable", False))

    def is_repeatable(self) -> bool:
        """Return True if the stream can be re-read once EOF is reached."""
        return self.is_readable() and self.is_seekable()

    def is_seekable(self) -> bool:
        return bool(self._cache.get("seekable", False))

    def is_writable(self) -> bool:
        return bool(self._cache.get("writable", False))

    def read(self, length: int = -1) -> bytes | None:
        if not self.is_readable():
            return None
        return self._resource().read(length)

    def iter_chunks(self, chunk_size: int | None = None) -> Iterator[bytes]:
        """Yield the remaining content in chunks of ``chunk_size`` bytes."""
        size = chunk_size or get_options()["stream_chunk_size"]
        while True:
            chunk = self.read(size)
            if not chunk:
                break
            yield chunk

    def rewind(self) -> bool:
        """Move the cursor back to the beginning."""
        return self.seek(0)

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> bool:
        if not self.is_seekable():
            return False
        self._resource().seek(offset, whence)
        return True

    def tell(self) -> int | None:
        """Return the cursor position, or None if the resource cannot tell."""
        resource = self._resource()
        if resource.closed:
            return None
        try:
            return resource.tell()
        except OSError:
            return None

    def write(self, data: bytes) -> int | None:
        if not self.is_writable():
            return None
        return self._resource().write(data)

    def __bytes__(self) -> bytes:
        return self.get_contents()

    def __str__(self) -> str:
        return self.get_contents().decode("utf-8", errors="replace")

    def __enter__(self) -> Stream:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(mode={self.get_mode()!r}, uri={self._cache.get('uri')!r})"


class MemoryStream(Stream):
    """Readable, writable, seekable stream kept in memory."""

    __slots__ = ()

    def __init__(self, data: bytes = b"") -> None:
        super().__init__(io.BytesIO(data))


class FileStream(Stream):
    """Stream over a file opened from a filesystem path."""

    __slots__ = ()

    def __init__(self, path: str | os.PathLike[str], mode: str = "rb") -> None:
        if "b" not in mode:
            mode = f"{mode}b"
        super().__init__(open(os.fspath(path), mode))
        logger.debug(f"Opened stream {os.fspath(path)} ({mode})")
