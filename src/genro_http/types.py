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

"""Type definitions for genro-http.

Scope : MutableMapping[str, Any]
    ASGI connection metadata (type, method, path, headers, ...).

Message : MutableMapping[str, Any]
    ASGI event dictionary, identified by its "type" key.

Receive : Callable[[], Awaitable[Message]]
    Async callable returning the next ASGI message.

IncomingRequest : Protocol
    Minimal shape of a request held by ``IncomingRequestAware``:
    ``method``, ``path`` and ``headers``. ``AsgiRequest`` satisfies it.

MutableMapping is used instead of TypedDict for Scope/Message because
ASGI allows server-specific extension keys.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Awaitable, Callable, MutableMapping, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .headers import HeaderBag

__all__ = ["Scope", "Message", "Receive", "IncomingRequest"]

Scope = MutableMapping[str, Any]
Message = MutableMapping[str, Any]
Receive = Callable[[], Awaitable[Message]]


@runtime_checkable
class IncomingRequest(Protocol):
    """What an incoming request exposes to code that holds it."""

    @property
    def method(self) -> str: ...

    @property
    def path(self) -> str: ...

    @property
    def headers(self) -> HeaderBag: ...
