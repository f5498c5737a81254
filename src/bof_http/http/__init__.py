# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP transport exports."""

from .adapters import MockTransport
from .client import HttpTransport, create_default_transport
from .form import encode_form
from .headers import header_values, normalize_headers
from .httpx_transport import HttpxTransport, build_wire_request
from .models import (
    FormBody,
    Headers,
    HeaderValue,
    HttpRequest,
    JsonBody,
    MultipleProxies,
    Proxy,
    QueryParams,
    RawResponse,
)
from .url import with_query

__all__ = [
    "FormBody",
    "Headers",
    "HeaderValue",
    "HttpRequest",
    "HttpTransport",
    "HttpxTransport",
    "JsonBody",
    "MockTransport",
    "MultipleProxies",
    "Proxy",
    "QueryParams",
    "RawResponse",
    "build_wire_request",
    "create_default_transport",
    "encode_form",
    "header_values",
    "normalize_headers",
    "with_query",
]
