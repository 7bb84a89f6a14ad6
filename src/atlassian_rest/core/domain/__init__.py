"""Modelos y entidades del dominio.

Aquí viven las estructuras de datos puras (Pydantic v2 y dataclasses).
El dominio no importa HTTP en tiempo de ejecución: solo describe recursos de
Atlassian y el sobre de respuesta.
"""

from atlassian_rest.core.domain.request import PreparedRequest
from atlassian_rest.core.domain.response import ResponseScheme

__all__ = ["PreparedRequest", "ResponseScheme"]
