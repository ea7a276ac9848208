"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts, headers and TLS policy for every gate call.
- Eases testing: a `transport` (e.g. `httpx.MockTransport`) can be injected.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create an `httpx.Client` bound to the gate endpoint.

    Why a builder:
    - Centralizes timeouts/headers so every request behaves the same.
    - The patch command is synchronous, so a blocking client is enough.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    headers.update(settings.default_headers)
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        base_url=settings.gate_endpoint,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        verify=not settings.insecure,
        transport=transport,
    )
