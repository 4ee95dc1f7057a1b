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

"""genro-http - HTTP support structures for ASGI applications.

Main components:
    HeaderBag: Case-insensitive headers with canonical names ("Content-Type")
    IncomingRequestAware: Mixin holding an incoming request
    AsgiRequest: Incoming request built from an ASGI scope

Support:
    Bag: Generic key/value bag, base of HeaderBag
    Stream, MemoryStream, FileStream: Binary body streams
    get_reason_phrase: HTTP status registry

Usage:
    from genro_http import HeaderBag

    headers = HeaderBag().set("etag", '"abc"')
    headers.keys()  # ["ETag"]
"""

__version__ = "0.1.0"

from .bag import Bag
from .exceptions import InvalidHeaderError, InvalidStatusError, StreamError
from .headers import HeaderBag, headers_from_scope, normalize_header_name
from .request import AsgiRequest
from .request_aware import IncomingRequestAware
from .status import STATUS_CODES, get_reason_phrase, is_valid_status
from .stream import FileStream, MemoryStream, Stream
from .types import IncomingRequest, Message, Receive, Scope

__all__ = [
    "AsgiRequest",
    "Bag",
    "FileStream",
    "HeaderBag",
    "IncomingRequest",
    "IncomingRequestAware",
    "InvalidHeaderError",
    "InvalidStatusError",
    "MemoryStream",
    "Message",
    "Receive",
    "STATUS_CODES",
    "Scope",
    "Stream",
    "StreamError",
    "get_reason_phrase",
    "headers_from_scope",
    "is_valid_status",
    "normalize_header_name",
]
