# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``application/x-www-form-urlencoded`` encoding with bracket-indexed nesting.

Nested values flatten into ``key[0]=..&key[1]=..`` (sequences) or ``key[sub]=..``
(mappings). Keys and values are percent-encoded per RFC 3986, so a space becomes
``%20`` and reserved characters such as ``!*'()`` are always escaped.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any
from urllib.parse import quote


def _quote(value: str | bytes) -> str:
    return quote(value, safe="")


def _scalar(value: Any) -> str | bytes:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    return str(value)


def _items(value: Any):
    if isinstance(value, Mapping):
        return value.items()
    return enumerate(value)


def _is_container(value: Any) -> bool:
    if isinstance(value, Mapping):
        return True
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _flatten(pairs: list[tuple[str, str | bytes]], prefix: str | None, value: Any) -> None:
    for key, item in _items(value):
        name = str(key) if prefix is None else f"{prefix}[{key}]"
        if item is None:
            continue
        if _is_container(item):
            _flatten(pairs, name, item)
        else:
            pairs.append((name, _scalar(item)))


def form_pairs(data: Mapping[Any, Any] | Sequence[Any]) -> list[tuple[str, str | bytes]]:
    """Flatten ``data`` into ordered (bracketed key, scalar value) pairs."""
    if not _is_container(data):
        raise TypeError(f"form data must be a mapping or sequence, got {type(data).__name__}")
    pairs: list[tuple[str, str | bytes]] = []
    _flatten(pairs, None, data)
    return pairs


def encode_form(data: Mapping[Any, Any] | Sequence[Any]) -> str:
    """Encode ``data`` as a form/query string."""
    return "&".join(f"{_quote(key)}={_quote(value)}" for key, value in form_pairs(data))


__all__ = ["encode_form", "form_pairs"]
