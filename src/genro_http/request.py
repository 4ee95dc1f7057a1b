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
Incoming HTTP request built from an ASGI scope.

``AsgiRequest`` is the concrete request held by ``IncomingRequestAware``.
Headers are exposed as a ``HeaderBag`` and the body as a ``MemoryStream``.

Example:
    request = AsgiRequest(scope)
    await request.load_body(receive)

    request.method                    # "POST"
    request.headers.first("host")     # "example.com"
    request.body.get_contents()       # b'{"a": 1}'
"""

from __future__ import annotations

import logging

from .headers import HeaderBag, headers_from_scope
from .stream import MemoryStream
from .types import Receive, Scope

__all__ = ["AsgiRequest"]

logger = logging.getLogger("genro_http.request")


class AsgiRequest:
    """HTTP request adapter wrapping an ASGI scope."""

    __slots__ = ("_scope", "_headers", "_body")

    def __init__(self, scope: Scope) -> None:
        self._scope = scope
        self._headers: HeaderBag = headers_from_scope(scope)
        self._body = MemoryStream()

    @property
    def scope(self) -> Scope:
        return self._scope

    @property
    def method(self) -> str:
        return str(self._scope.get("method", "GET")).upper()

    @property
    def path(self) -> str:
        return str(self._scope.get("path", "/"))

    @property
    def scheme(self) -> str:
        return str(self._scope.get("scheme", "http"))

    @property
    def query_string(self) -> str:
        return bytes(self._scope.get("query_string", b"")).decode("latin-1")

    @property
    def client(self) -> tuple[str, int] | None:
        client = self._scope.get("client")
        if client is None:
            return None
        host, port = client
        return (host, port)

    @property
    def headers(self) -> HeaderBag:
        return self._headers

    @property
    def body(self) -> MemoryStream:
        return self._body

    async def load_body(self, receive: Receive) -> MemoryStream:
        """
        Read the request body from ASGI ``http.request`` messages.

        Stops at the first message without ``more_body`` or at
        ``http.disconnect``. Each call starts a fresh body stream, which is
        rewound afterwards.
        """
        self._body = MemoryStream()
        while True:
            message = await receive()
            if message["type"] == "http.disconnect":
                logger.debug(f"Client disconnected while reading {self.method} {self.path}")
                break
            self._body.write(message.get("body", b""))
            if not message.get("more_body", False):
                break
        self._body.rewind()
        return self._body

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} method={self.method} path={self.path!r}>"
