# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
bof-http package entrypoint.

An immutable request builder over httpx: configure headers, timeouts, proxies and
query parameters once, then issue JSON or form requests and read re-readable,
JSON-decodable responses. The transport is injectable, and ``Http.mock`` serves
queued responses for tests.
"""

from .builder import Http
from .config import HttpSettings, load_http_settings
from .errors import BofHttpError, DecodeError, TransportError
from .http import (
    HttpRequest,
    HttpTransport,
    HttpxTransport,
    MockTransport,
    MultipleProxies,
    create_default_transport,
)
from .log import setup_logging
from .response import HttpResponse
from .version import __version__

__all__ = [
    "BofHttpError",
    "DecodeError",
    "Http",
    "HttpRequest",
    "HttpResponse",
    "HttpSettings",
    "HttpTransport",
    "HttpxTransport",
    "MockTransport",
    "MultipleProxies",
    "TransportError",
    "create_default_transport",
    "load_http_settings",
    "setup_logging",
    "__version__",
]
