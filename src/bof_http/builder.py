# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Immutable request builder.

Every ``with_*`` method returns a new ``Http`` and leaves the receiver untouched, so a
configured builder can be shared across threads and specialised per call site:

    api = Http().with_header("Authorization", "Bearer ...").with_timeout(10, 2)
    users = api.with_query_params({"page": 2}).get("https://api.example.com/users").data()
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

from .config import HttpSettings, load_http_settings
from .errors import TransportError
from .http.adapters import MockTransport, QueuedResponse
from .http.client import HttpTransport, create_default_transport
from .http.headers import coerce_header_value, merge_header
from .http.models import FormBody, Headers, HttpRequest, JsonBody, MultipleProxies, Proxy, QueryParams
from .response import HttpResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Http:
    """Request configuration (headers, timeouts, proxy, query) plus the transport it is sent with."""

    transport: HttpTransport = field(default_factory=create_default_transport, repr=False, compare=False)
    headers: Headers = field(default_factory=dict)
    request_timeout: float = 5.0
    connect_timeout: float = 3.0
    proxy: Proxy | None = None
    query_params: QueryParams | None = None

    def __post_init__(self) -> None:
        # Each instance owns read-only copies of its containers.
        headers = {name: coerce_header_value(value) for name, value in self.headers.items()}
        object.__setattr__(self, "headers", MappingProxyType(headers))
        if self.query_params is not None and not isinstance(self.query_params, str):
            object.__setattr__(self, "query_params", MappingProxyType(copy.deepcopy(dict(self.query_params))))

    @classmethod
    def from_settings(cls, settings: HttpSettings | None = None, transport: HttpTransport | None = None) -> Http:
        """Build an Http whose timeouts and transport follow ``settings`` (environment by default)."""
        settings = settings or load_http_settings()
        return cls(
            transport=transport or create_default_transport(settings),
            request_timeout=settings.request_timeout,
            connect_timeout=settings.connect_timeout,
        )

    @classmethod
    def mock(cls, responses: Iterable[QueuedResponse]) -> Http:
        """Build an Http that answers from a queue instead of the network."""
        return cls(transport=MockTransport(responses))

    def get(self, url: str) -> HttpResponse:
        return self._send("GET", url)

    def delete(self, url: str) -> HttpResponse:
        return self._send("DELETE", url)

    def post_json(self, url: str, data: Any) -> HttpResponse:
        return self._send("POST", url, JsonBody(data))

    def put_json(self, url: str, data: Any) -> HttpResponse:
        return self._send("PUT", url, JsonBody(data))

    def patch_json(self, url: str, data: Any) -> HttpResponse:
        return self._send("PATCH", url, JsonBody(data))

    def post_form(self, url: str, data: Mapping[Any, Any] | Sequence[Any]) -> HttpResponse:
        return self._send("POST", url, FormBody(data))

    def put_form(self, url: str, data: Mapping[Any, Any] | Sequence[Any]) -> HttpResponse:
        return self._send("PUT", url, FormBody(data))

    def with_header(self, name: str, value: str | Sequence[str]) -> Http:
        """Set ``name``; a sequence of strings sends one header line per value."""
        return replace(self, headers=merge_header(self.headers, name, value))

    def with_timeout(self, request_timeout: float, connect_timeout: float) -> Http:
        """
        Set both timeouts in seconds; 0 waits indefinitely.

        httpx has no whole-response deadline, so ``request_timeout`` bounds each read,
        write and pool wait separately. A server that keeps trickling data can take
        longer than ``request_timeout`` in total.
        """
        return replace(self, request_timeout=float(request_timeout), connect_timeout=float(connect_timeout))

    def with_single_proxy(self, proxy: str) -> Http:
        return replace(self, proxy=proxy)

    def with_multiple_proxies(self, http_proxy: str, https_proxy: str, excluded_domains: Iterable[str]) -> Http:
        proxies = MultipleProxies(http=http_proxy, https=https_proxy, no=tuple(excluded_domains))
        return replace(self, proxy=proxies)

    def with_query_params(self, query_params: QueryParams) -> Http:
        """Replace the query string of every request; accepts ``"a=b"`` or a mapping."""
        return replace(self, query_params=query_params)

    def build_request(self, method: str, url: str, body: JsonBody | FormBody | None = None) -> HttpRequest:
        """Merge the current configuration into a transport request."""
        return HttpRequest(
            url=url,
            method=method,
            headers=dict(self.headers),
            timeout=self.request_timeout,
            connect_timeout=self.connect_timeout,
            proxy=self.proxy,
            query=self.query_params,
            body=body,
        )

    def _send(self, method: str, url: str, body: JsonBody | FormBody | None = None) -> HttpResponse:
        request = self.build_request(method, url, body)
        logger.debug("%s %s", method, url)
        try:
            raw = self.transport.request(request)
        except TransportError as exc:
            logger.debug("%s %s failed: %s", method, url, exc)
            raise
        response = HttpResponse(raw)
        logger.debug("%s %s -> %s", method, url, response.status_code)
        return response

    def close(self) -> None:
        """Close the transport; builders derived from this one share it."""
        self.transport.close()

    def __enter__(self) -> Http:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()


__all__ = ["Http"]
