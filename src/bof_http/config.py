# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for bof-http."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_USER_AGENT = f"bof-http/{__version__}"


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _timeout_env(name: str, default: float) -> float:
    value = _float_env(name, default)
    return value if value >= 0 else default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class HttpSettings:
    """HTTP client defaults. Timeouts are in seconds, 0 waits indefinitely."""

    request_timeout: float = 5.0
    connect_timeout: float = 3.0
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = True
    verify_ssl: bool = True

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        return cls(
            request_timeout=_timeout_env("BOF_HTTP_TIMEOUT", cls.request_timeout),
            connect_timeout=_timeout_env("BOF_HTTP_CONNECT_TIMEOUT", cls.connect_timeout),
            user_agent=os.getenv("BOF_HTTP_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("BOF_HTTP_REDIRECTS", cls.allow_redirects),
            verify_ssl=_bool_env("BOF_HTTP_VERIFY_SSL", cls.verify_ssl),
        )


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()
