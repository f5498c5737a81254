# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header normalization utilities.

HTTP header field names are case-insensitive (RFC 9110), and a field may carry
several values. Builders keep headers as ``name -> str | tuple[str, ...]``; responses
expose them as ``name -> list[str]``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from .models import Headers, HeaderValue


def coerce_header_value(value: str | Sequence[str]) -> HeaderValue:
    """Return ``value`` as a string or an immutable tuple of strings."""
    if isinstance(value, str):
        return value
    return tuple(str(item) for item in value)


def merge_header(headers: Headers, name: str, value: str | Sequence[str]) -> dict[str, HeaderValue]:
    """Return a copy of ``headers`` with ``name`` set, dropping other casings of the same name."""
    lower = name.lower()
    merged = {key: existing for key, existing in headers.items() if key.lower() != lower}
    merged[name] = coerce_header_value(value)
    return merged


def has_header(headers: Headers, name: str) -> bool:
    lower = name.lower()
    return any(key.lower() == lower for key in headers)


def header_pairs(headers: Headers) -> list[tuple[str, str]]:
    """Expand multi-valued headers into (name, value) pairs, one per value."""
    pairs: list[tuple[str, str]] = []
    for name, value in headers.items():
        if isinstance(value, str):
            pairs.append((name, value))
        else:
            pairs.extend((name, item) for item in value)
    return pairs


def _raw_items(headers: Any) -> list[tuple[object, object]]:
    """
    Best-effort extraction of (name, value) pairs from a response header container.

    Supports httpx.Headers (``multi_items``), mappings of name to a value or list of
    values, and iterables of pairs.
    """
    if not headers:
        return []
    multi_items = getattr(headers, "multi_items", None)
    if callable(multi_items):
        return list(multi_items())
    if isinstance(headers, Mapping):
        items: list[tuple[object, object]] = []
        for key, value in headers.items():
            if isinstance(value, (list, tuple)):
                items.extend((key, item) for item in value)
            else:
                items.append((key, value))
        return items
    return list(headers)


def normalize_headers(headers: Any) -> dict[str, list[str]]:
    """Group response headers by name, keeping first-seen casing and value order."""
    out: dict[str, list[str]] = {}
    names: dict[str, str] = {}
    for key, value in _raw_items(headers):
        if key is None:
            continue
        name = key.decode("latin-1") if isinstance(key, bytes) else str(key)
        text = value.decode("latin-1") if isinstance(value, bytes) else ("" if value is None else str(value))
        canonical = names.setdefault(name.lower(), name)
        out.setdefault(canonical, []).append(text)
    return out


def header_values(headers: Mapping[str, list[str]], name: str) -> list[str]:
    """Return every value of ``name`` using case-insensitive matching."""
    if name in headers:
        return list(headers[name])
    lower = name.lower()
    for key, values in headers.items():
        if key.lower() == lower:
            return list(values)
    return []


__all__ = [
    "coerce_header_value",
    "has_header",
    "header_pairs",
    "header_values",
    "merge_header",
    "normalize_headers",
]
