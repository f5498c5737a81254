# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL helpers for request building."""

from __future__ import annotations

from urllib.parse import urlsplit, urlunsplit

from .form import encode_form
from .models import QueryParams


def encode_query(query: QueryParams) -> str:
    """Return ``query`` as a query string; raw strings pass through without a leading ``?``."""
    if isinstance(query, str):
        return query[1:] if query.startswith("?") else query
    return encode_form(query)


def with_query(url: str, query: QueryParams | None) -> str:
    """
    Replace the query component of ``url``.

    Example:
      with_query("http://host/p?a=1", {"foo": "bar"}) -> http://host/p?foo=bar

    ``None`` keeps the URL as given.
    """
    if query is None:
        return url
    parsed = urlsplit(str(url))
    return urlunsplit(parsed._replace(query=encode_query(query)))


__all__ = ["encode_query", "with_query"]
