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
Library options for genro-http.

Options are layered with genro-toolbox SmartOptions, later sources win:

    DEFAULTS < environment variables (GENRO_HTTP_*) < explicit overrides

Available options:
    header_encoding: codec used to decode/encode ASGI raw headers ("latin-1")
    stream_chunk_size: default chunk size for ``Stream.iter_chunks`` (65536)

Example:
    GENRO_HTTP_STREAM_CHUNK_SIZE=4096 python app.py

    from genro_http.config import get_options
    get_options()["stream_chunk_size"]  # 4096
"""

from __future__ import annotations

from genro_toolbox import SmartOptions  # type: ignore[import-untyped]

__all__ = ["DEFAULTS", "get_options", "load_options", "reset_options"]

DEFAULTS = {"header_encoding": "latin-1", "stream_chunk_size": 65536}

_options: SmartOptions | None = None


def _http_opts_spec(header_encoding: str, stream_chunk_size: int) -> None:
    """Reference function for SmartOptions type extraction (no defaults)."""


def load_options(
    header_encoding: str | None = None,
    stream_chunk_size: int | None = None,
) -> SmartOptions:
    """Build a fresh set of options from defaults, environment and arguments."""
    env_opts = SmartOptions(_http_opts_spec, env="GENRO_HTTP", argv=[])
    caller_opts = SmartOptions(
        dict(header_encoding=header_encoding, stream_chunk_size=stream_chunk_size),
        ignore_none=True,
    )
    return SmartOptions(DEFAULTS) + env_opts + caller_opts


def get_options() -> SmartOptions:
    """Return the process-wide options, loading them on first use."""
    global _options
    if _options is None:
        _options = load_options()
    return _options


def reset_options() -> None:
    """Drop cached options so the next ``get_options()`` reloads them."""
    global _options
    _options = None
