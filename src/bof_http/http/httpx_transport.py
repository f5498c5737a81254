# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpTransport implementation."""

from __future__ import annotations

import threading

import httpx

from ..config import HttpSettings, load_http_settings
from .client import HttpTransport
from .headers import has_header, header_pairs
from .models import HttpRequest, MultipleProxies, Proxy
from .url import with_query


def build_timeout(request: HttpRequest) -> httpx.Timeout:
    """Map request/connect timeouts onto httpx; 0 disables the corresponding limit."""
    return httpx.Timeout(request.timeout or None, connect=request.connect_timeout or None)


def build_wire_request(request: HttpRequest, user_agent: str | None = None) -> httpx.Request:
    """Turn an HttpRequest into the httpx.Request that goes on the wire."""
    headers = header_pairs(request.headers)
    content: bytes | None = None
    if request.body is not None:
        content = request.body.encode()
        if not has_header(request.headers, "Content-Type"):
            headers.append(("Content-Type", request.body.content_type))
    if user_agent and not has_header(request.headers, "User-Agent"):
        headers.append(("User-Agent", user_agent))

    return httpx.Request(
        request.method,
        with_query(request.url, request.query),
        headers=headers,
        content=content,
        extensions={"timeout": build_timeout(request).as_dict()},
    )


def proxy_mounts(proxies: MultipleProxies, verify: bool = True) -> dict[str, httpx.BaseTransport | None]:
    """
    Build httpx mounts routing http/https traffic through separate proxies.

    Excluded domains map to ``None`` so they use the client's direct transport:
    - ``*`` disables proxying entirely
    - ``.example.com`` matches subdomains of example.com only
    - ``example.com`` matches example.com and its subdomains
    """
    excluded = [domain.strip() for domain in proxies.no if domain and domain.strip()]
    if "*" in excluded:
        return {"all://": None}

    mounts: dict[str, httpx.BaseTransport | None] = {}
    if proxies.http:
        mounts["http://"] = httpx.HTTPTransport(proxy=proxies.http, verify=verify)
    if proxies.https:
        mounts["https://"] = httpx.HTTPTransport(proxy=proxies.https, verify=verify)
    for domain in excluded:
        mounts[f"all://*{domain}"] = None
    return mounts


class HttpxTransport(HttpTransport):
    """Synchronous httpx transport keeping one client per proxy configuration."""

    def __init__(self, settings: HttpSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or load_http_settings()
        self._clients: dict[Proxy | None, httpx.Client] = {}
        if client is not None:
            self._clients[None] = client
        self._lock = threading.Lock()

    def request(self, request: HttpRequest) -> httpx.Response:
        wire_request = build_wire_request(request, user_agent=self.settings.user_agent)
        client = self._client_for(request.proxy)
        return client.send(wire_request, follow_redirects=self.settings.allow_redirects)

    def _client_for(self, proxy: Proxy | None) -> httpx.Client:
        with self._lock:
            client = self._clients.get(proxy)
            if client is None:
                client = self._create_client(proxy)
                self._clients[proxy] = client
            return client

    def _create_client(self, proxy: Proxy | None) -> httpx.Client:
        if isinstance(proxy, MultipleProxies):
            return httpx.Client(
                follow_redirects=self.settings.allow_redirects,
                verify=self.settings.verify_ssl,
                mounts=proxy_mounts(proxy, verify=self.settings.verify_ssl),
            )
        if proxy:
            return httpx.Client(
                follow_redirects=self.settings.allow_redirects,
                verify=self.settings.verify_ssl,
                proxy=proxy,
            )
        return httpx.Client(
            follow_redirects=self.settings.allow_redirects,
            verify=self.settings.verify_ssl,
        )

    def close(self) -> None:
        with self._lock:
            clients = list(self._clients.values())
            self._clients.clear()
        for client in clients:
            client.close()
