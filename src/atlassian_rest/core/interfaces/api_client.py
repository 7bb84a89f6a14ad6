"""Contrato del núcleo de transporte.

Los servicios por recurso dependen de este Protocol y no de una clase
concreta: cualquier cliente de producto (Jira, Agile, Service Management,
Confluence) lo satisface, y los tests pueden sustituirlo por un doble.
"""

from __future__ import annotations

from typing import IO, Any, Protocol, TypeVar, runtime_checkable

from atlassian_rest.core.context import Context
from atlassian_rest.core.domain.request import PreparedRequest
from atlassian_rest.core.domain.response import ResponseScheme

T = TypeVar("T")

Body = bytes | IO[bytes]


@runtime_checkable
class ApiClient(Protocol):
    """Contrato mínimo que consumen los servicios.

    Reglas:
    - `new_request`/`new_form_request` no hacen I/O.
    - `call` devuelve siempre el sobre salvo en fallos de transporte.
    """

    def new_request(
        self,
        ctx: Context | None,
        method: str,
        path: str,
        body: Body | None = None,
    ) -> PreparedRequest: ...

    def new_form_request(
        self,
        ctx: Context | None,
        method: str,
        path: str,
        content_type: str,
        body: Body | None,
    ) -> PreparedRequest: ...

    def call(
        self,
        prepared: PreparedRequest,
        result_type: type[T] | Any | None = None,
    ) -> tuple[T | None, ResponseScheme]: ...

    def encode_payload(self, value: object) -> IO[bytes]: ...
