"""Sobre de respuesta normalizado.

Nota:
- `body` contiene siempre los bytes crudos de la respuesta, leídos antes de
  clasificar el código HTTP o de intentar decodificar. Así, incluso en una
  respuesta de error, el llamador puede inspeccionar el cuerpo.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover
    import httpx


@dataclass(frozen=True)
class ResponseScheme:
    """Registro de un intercambio HTTP completado."""

    code: int
    endpoint: str
    method: str
    body: bytes = b""
    response: httpx.Response | None = field(default=None, repr=False, compare=False)

    @property
    def ok(self) -> bool:
        return 200 <= self.code < 300

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def json(self) -> Any:
        """Decodifica el body como JSON sin esquema (consultas ad-hoc)."""

        return json.loads(self.body)
