# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP transport abstraction and factory."""

from typing import Protocol

from ..config import HttpSettings, load_http_settings
from .models import HttpRequest, RawResponse


class HttpTransport(Protocol):
    """Minimal protocol for executing a fully configured HttpRequest."""

    def request(self, request: HttpRequest) -> RawResponse: ...

    def close(self) -> None:  # pragma: no cover - optional for test doubles
        ...


def create_default_transport(settings: HttpSettings | None = None) -> HttpTransport:
    """Factory for the default httpx-backed transport."""
    from .httpx_transport import HttpxTransport

    return HttpxTransport(settings or load_http_settings())
