# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request data models handed to HttpTransport implementations."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol, Union

from .form import encode_form

HeaderValue = Union[str, tuple[str, ...]]
Headers = Mapping[str, HeaderValue]
QueryParams = Union[str, Mapping[str, Any]]

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


@dataclass(frozen=True)
class MultipleProxies:
    """Per-scheme proxies plus the domains that bypass them."""

    http: str
    https: str
    no: tuple[str, ...] = ()

    def as_dict(self) -> dict[str, Any]:
        return {"http": self.http, "https": self.https, "no": list(self.no)}


Proxy = Union[str, MultipleProxies]


@dataclass(frozen=True)
class JsonBody:
    data: Any
    content_type: str = JSON_CONTENT_TYPE

    def encode(self) -> bytes:
        return json.dumps(self.data, separators=(",", ":")).encode("utf-8")


@dataclass(frozen=True)
class FormBody:
    data: Mapping[Any, Any] | Sequence[Any]
    content_type: str = FORM_CONTENT_TYPE

    def encode(self) -> bytes:
        return encode_form(self.data).encode("ascii")


@dataclass(frozen=True)
class HttpRequest:
    """Fully merged request configuration consumed by HttpTransport implementations."""

    url: str
    method: str = "GET"
    headers: Headers = field(default_factory=dict)
    timeout: float = 5.0
    connect_timeout: float = 3.0
    proxy: Proxy | None = None
    query: QueryParams | None = None
    body: JsonBody | FormBody | None = None

    def options(self) -> dict[str, Any]:
        """Return the transport options in their plain-mapping form."""
        proxy: Any = self.proxy.as_dict() if isinstance(self.proxy, MultipleProxies) else self.proxy
        return {
            "connect_timeout": self.connect_timeout,
            "headers": dict(self.headers),
            "proxy": proxy,
            "query": self.query,
            "timeout": self.timeout,
        }


class RawResponse(Protocol):
    """Response capabilities HttpResponse needs from a transport (httpx.Response satisfies it)."""

    status_code: int

    @property
    def headers(self) -> Any: ...

    @property
    def http_version(self) -> str: ...

    @property
    def reason_phrase(self) -> str: ...

    def read(self) -> bytes: ...
