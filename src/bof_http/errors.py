# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error kinds surfaced by bof-http.

Network failures (connection refused, timeouts, proxy errors) are raised by httpx and
reach callers unchanged; ``TransportError`` is re-exported so callers need not import
httpx to catch them. HTTP error statuses are ordinary responses, not exceptions.
"""

import httpx

TransportError = httpx.TransportError


class BofHttpError(Exception):
    """Base class for errors raised by bof-http itself."""


class DecodeError(BofHttpError, ValueError):
    """Raised when a response body is not valid JSON."""

    def __init__(self, message: str, body: str = ""):
        self.body = body
        super().__init__(message)


__all__ = ["BofHttpError", "DecodeError", "TransportError"]
