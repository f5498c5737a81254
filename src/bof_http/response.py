# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Re-readable response view with JSON decoding."""

from __future__ import annotations

import io
import json
from typing import Any

from .errors import DecodeError
from .http.headers import header_values, normalize_headers
from .http.models import RawResponse


class HttpResponse:
    """
    Wraps a transport response and buffers its body on construction.

    ``body`` is a single-pass stream like the transport's own, so reading it twice
    yields an empty second read. ``body_as_string()`` and ``data()`` always work from
    the buffered bytes and return the full content no matter what was read before.
    """

    __slots__ = ("_raw", "_content", "_headers", "_body")

    def __init__(self, raw: RawResponse):
        self._raw = raw
        self._content = bytes(raw.read() or b"")
        self._headers = normalize_headers(raw.headers)
        self._body = io.BytesIO(self._content)

    @property
    def raw(self) -> RawResponse:
        return self._raw

    @property
    def status_code(self) -> int:
        return int(self._raw.status_code)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def reason_phrase(self) -> str:
        return self._raw.reason_phrase or ""

    @property
    def protocol_version(self) -> str:
        """HTTP version without the scheme prefix, e.g. ``"1.1"`` or ``"2"``."""
        version = self._raw.http_version or ""
        return version[len("HTTP/"):] if version.upper().startswith("HTTP/") else version

    @property
    def headers(self) -> dict[str, list[str]]:
        return {name: list(values) for name, values in self._headers.items()}

    def header(self, name: str) -> list[str]:
        return header_values(self._headers, name)

    def header_line(self, name: str) -> str:
        return ", ".join(self.header(name))

    @property
    def body(self) -> io.BytesIO:
        return self._body

    @property
    def content(self) -> bytes:
        return self._content

    def body_as_string(self) -> str:
        encoding = getattr(self._raw, "encoding", None) or "utf-8"
        try:
            return self._content.decode(encoding, errors="replace")
        except LookupError:
            return self._content.decode("utf-8", errors="replace")

    def data(self) -> Any:
        """Decode the body as JSON.

        Raises:
            DecodeError: the body is not valid JSON.
        """
        text = self.body_as_string()
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise DecodeError(f"Response body is not valid JSON: {exc.msg}", body=text) from exc

    def __repr__(self) -> str:
        return f"<HttpResponse [{self.status_code}]>"


__all__ = ["HttpResponse"]
