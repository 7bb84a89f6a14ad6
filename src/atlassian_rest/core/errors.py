"""Jerarquía de errores del cliente.

Categorías (de la más temprana a la más tardía en una llamada):
- Precondición: falta un identificador/campo requerido (lo lanzan los servicios).
- Construcción: el path relativo o el contexto son inválidos; no hay red.
- Transporte: fallo de red, timeout o cancelación; no hay sobre de respuesta.
- Protocolo / decodificación: hay sobre (`ResponseScheme`) con el body crudo.
- Codificación: payload ausente o de tipo no estructurado.

Ningún error se reintenta ni se silencia aquí: todos llegan al llamador.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from atlassian_rest.core.domain.response import ResponseScheme

__all__ = [
    "AtlassianError",
    "PreconditionError",
    "ConfigurationError",
    "RequestConstructionError",
    "InvalidPathError",
    "MissingContextError",
    "TransportError",
    "ContextCancelledError",
    "DeadlineExceededError",
    "ResponseError",
    "UnexpectedStatusError",
    "DecodeError",
    "PayloadError",
    "MissingPayloadError",
    "PayloadTypeError",
]


class AtlassianError(RuntimeError):
    """Base de todos los errores emitidos por el cliente."""


class PreconditionError(AtlassianError, ValueError):
    """Falta un identificador o campo requerido antes de construir la petición."""


class ConfigurationError(AtlassianError):
    """La configuración del cliente (site, credenciales) no es utilizable."""


class RequestConstructionError(AtlassianError):
    """No se pudo construir la petición; no se intentó ninguna I/O."""


class InvalidPathError(RequestConstructionError):
    """El path relativo no se puede interpretar como referencia URI."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"invalid relative path {path!r}: {reason}")
        self.path = path
        self.reason = reason


class MissingContextError(RequestConstructionError):
    """Se pidió una petición sin contexto de llamada."""

    def __init__(self) -> None:
        super().__init__("a call context is required, use Context.background()")


class TransportError(AtlassianError):
    """El transporte falló antes de producir una respuesta."""


class ContextCancelledError(TransportError):
    """El contexto de la llamada fue cancelado."""


class DeadlineExceededError(TransportError):
    """El deadline del contexto expiró antes de completar la llamada."""


class ResponseError(AtlassianError):
    """Hubo respuesta HTTP, pero no es utilizable.

    `response` conserva el sobre completo (código, endpoint, método, body crudo)
    para diagnóstico.
    """

    def __init__(self, message: str, response: ResponseScheme) -> None:
        super().__init__(message)
        self.response = response


class UnexpectedStatusError(ResponseError):
    """Código HTTP fuera del rango [200, 300)."""

    def __init__(self, response: ResponseScheme) -> None:
        super().__init__(
            f"unexpected status code {response.code} for {response.method} {response.endpoint}",
            response,
        )


class DecodeError(ResponseError):
    """Respuesta exitosa cuyo body no se pudo decodificar al tipo pedido."""


class PayloadError(AtlassianError):
    """El payload de una petición no es codificable."""


class MissingPayloadError(PayloadError, ValueError):
    """Se pidió codificar un payload `None`."""

    def __init__(self) -> None:
        super().__init__("the payload cannot be None")


class PayloadTypeError(PayloadError, TypeError):
    """El payload no es un valor estructurado por referencia."""

    def __init__(self, value: object) -> None:
        kind = value.__name__ if isinstance(value, type) else type(value).__name__
        super().__init__(
            f"the payload must be a model instance, dataclass instance, mapping or list, got {kind}"
        )
