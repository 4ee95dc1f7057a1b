# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
HTTP status codes and reason phrases.

The registry is built from ``http.HTTPStatus`` so it follows the codes
known to the running interpreter.

Example::

    get_reason_phrase(404)   # "Not Found"
    is_valid_status(299)     # False
    get_reason_phrase(299)   # raises InvalidStatusError
"""

from __future__ import annotations

from http import HTTPStatus

from .exceptions import InvalidStatusError

__all__ = ["STATUS_CODES", "get_reason_phrase", "is_valid_status"]

STATUS_CODES: dict[int, str] = {status.value: status.phrase for status in HTTPStatus}


def is_valid_status(code: int) -> bool:
    """Return True if ``code`` is a defined HTTP status code."""
    return code in STATUS_CODES


def get_reason_phrase(code: int) -> str:
    """
    Return the reason phrase for a status code.

    Raises:
        InvalidStatusError: If the code is not defined.
    """
    try:
        return STATUS_CODES[code]
    except KeyError:
        raise InvalidStatusError(code) from None
