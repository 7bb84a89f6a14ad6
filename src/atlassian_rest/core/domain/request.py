"""Descriptor de petición: la petición httpx ya construida más su contexto."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from atlassian_rest.core.context import Context

if TYPE_CHECKING:  # pragma: no cover
    import httpx


@dataclass(frozen=True)
class PreparedRequest:
    ctx: Context
    request: httpx.Request

    @property
    def method(self) -> str:
        return self.request.method

    @property
    def url(self) -> str:
        return str(self.request.url)

    @property
    def headers(self) -> httpx.Headers:
        return self.request.headers

    @property
    def content(self) -> bytes:
        return self.request.content
