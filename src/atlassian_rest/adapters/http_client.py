"""Fábrica del transporte httpx por defecto.

Centraliza timeouts, redirecciones y headers base para que todos los clientes
de producto se comporten igual cuando el llamador no inyecta su propio
`httpx.Client`.

Nota: sin caché, reintentos ni rate-limiting; el pool de conexiones es el de httpx.
"""

from __future__ import annotations

import httpx

from atlassian_rest.core.config import AppSettings


def build_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` con defaults seguros.

    `transport` permite sustituir la red (p.ej. `httpx.MockTransport` en tests).
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {}
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=settings.follow_redirects,
        headers=headers,
        transport=transport,
    )
