# Copyright 2025 Softwell S.r.l.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Exception classes for genro-http.

Module Structure
----------------
Three exception classes, each inheriting from the builtin that matches
its meaning so callers can catch either the specific or the generic type:

1. InvalidStatusError (LookupError) - Undefined HTTP status code
2. InvalidHeaderError (ValueError) - Header that cannot be serialized
3. StreamError (OSError) - Operation on a stream without a resource

Design Decisions
----------------
- No common base: use tuple syntax to catch several,
  ``except (InvalidStatusError, InvalidHeaderError)``.
- No __slots__: exceptions are short-lived.

Example:
    >>> raise InvalidStatusError(999)
    >>> raise InvalidHeaderError("X-Foo", "a\\r\\nb")
    >>> raise StreamError("Stream is detached")
"""

__all__ = ["InvalidStatusError", "InvalidHeaderError", "StreamError"]


class InvalidStatusError(LookupError):
    """
    Raised for an HTTP status code that is not defined.

    Attributes:
        status_code: The rejected code.
    """

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"Invalid HTTP status code: {status_code}")

    def __repr__(self) -> str:
        return f"InvalidStatusError(status_code={self.status_code!r})"


class InvalidHeaderError(ValueError):
    """
    Raised when a header name or value cannot be put on the wire.

    Attributes:
        name: Header name as given.
        value: Offending value, or None when the name itself is invalid.
    """

    def __init__(self, name: str, value: str | None = None, detail: str = "") -> None:
        self.name = name
        self.value = value
        self.detail = detail or f"Invalid header {name!r}"
        super().__init__(self.detail)

    def __repr__(self) -> str:
        return f"InvalidHeaderError(name={self.name!r}, value={self.value!r})"


class StreamError(OSError):
    """Raised when a stream operation needs a resource and there is none."""
