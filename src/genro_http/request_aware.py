# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Mixin that lets a class hold an incoming request.

Example::

    class Controller(IncomingRequestAware):
        pass

    controller = Controller().set_request(request)
    controller.get_request() is request  # True

The request is not validated nor inspected. Any object shaped like
``genro_http.types.IncomingRequest`` is expected.
"""

from __future__ import annotations

from typing import TypeVar

from .types import IncomingRequest

__all__ = ["IncomingRequestAware"]

_T = TypeVar("_T", bound="IncomingRequestAware")


class IncomingRequestAware:
    """Permits a class to interact with an incoming request object."""

    request: IncomingRequest | None = None

    def get_request(self) -> IncomingRequest | None:
        """Return the request object, or None if none was set."""
        return self.request

    def set_request(self: _T, request: IncomingRequest) -> _T:
        """Set the request object. Returns self for chaining."""
        self.request = request
        return self
