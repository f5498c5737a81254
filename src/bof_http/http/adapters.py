# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Test doubles implementing the HttpTransport protocol."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable
from typing import Union

import httpx

from .client import HttpTransport
from .httpx_transport import build_wire_request
from .models import HttpRequest, RawResponse

ResponseFactory = Callable[[httpx.Request, HttpRequest], RawResponse]
QueuedResponse = Union[RawResponse, BaseException, ResponseFactory]


class MockTransport(HttpTransport):
    """
    Deterministic, programmable HttpTransport for tests.

    Each request consumes the next queued entry:
    - a response object is returned as-is
    - an exception instance or class is raised
    - a callable receives the httpx.Request that would have been sent (encoded body,
      headers, final URL) plus the HttpRequest carrying timeouts and proxy, and
      returns the response
    """

    def __init__(self, responses: Iterable[QueuedResponse] = ()):
        self._queue: deque[QueuedResponse] = deque(responses)
        self.requests: list[HttpRequest] = []

    def append(self, *responses: QueuedResponse) -> None:
        self._queue.extend(responses)

    def __len__(self) -> int:
        return len(self._queue)

    @property
    def last_request(self) -> HttpRequest | None:
        return self.requests[-1] if self.requests else None

    def request(self, request: HttpRequest) -> RawResponse:
        self.requests.append(request)
        if not self._queue:
            raise IndexError("Mock queue is empty")
        queued = self._queue.popleft()
        if isinstance(queued, BaseException) or (isinstance(queued, type) and issubclass(queued, BaseException)):
            raise queued
        if callable(queued):
            return queued(build_wire_request(request), request)
        return queued

    def close(self) -> None:
        return None
