"""Base de los servicios por recurso.

Un servicio solo combina formato de path, codificación de query y tipo de
decodificación; todo lo demás lo resuelve el `ApiClient` que recibe.
"""

from __future__ import annotations

from atlassian_rest.core.errors import PreconditionError
from atlassian_rest.core.interfaces import ApiClient


def require(value: object, message: str) -> None:
    """Lanza `PreconditionError` si `value` está vacío (None, "", 0, [])."""

    if not value:
        raise PreconditionError(message)


class Service:
    def __init__(self, client: ApiClient, version: str) -> None:
        require(version, "the API version is required")
        self._c = client
        self._version = version

    @property
    def version(self) -> str:
        return self._version
