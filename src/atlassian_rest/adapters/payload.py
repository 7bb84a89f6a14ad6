"""Codificación de cuerpos de petición.

JSON:
- El payload debe ser un valor estructurado por referencia: instancia de modelo
  pydantic, instancia de dataclass, mapping o lista. Una *clase* de modelo, un
  escalar o una tupla se rechazan con `PayloadTypeError`.
- Los modelos se serializan con alias (camelCase) y sin campos `None`.
- Los fallos de serialización (ciclos, tipos no soportados) se propagan tal cual.

Multipart:
- `encode_multipart` arma cuerpos `multipart/form-data` para los endpoints de
  adjuntos; el llamador los envía con `Client.new_form_request`.
"""

from __future__ import annotations

import dataclasses
import io
import json
from collections.abc import Mapping
from typing import IO, Any

import httpx
from pydantic import BaseModel

from atlassian_rest.core.errors import MissingPayloadError, PayloadTypeError

FileField = tuple[str, bytes | IO[bytes]]


def _is_structured(value: object) -> bool:
    if isinstance(value, type):
        return False
    if isinstance(value, BaseModel):
        return True
    if dataclasses.is_dataclass(value):
        return True
    return isinstance(value, (Mapping, list))


def _default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_payload(value: object) -> io.BytesIO:
    """Codifica `value` como JSON compacto listo para enviarse."""

    if value is None:
        raise MissingPayloadError()
    if not _is_structured(value):
        raise PayloadTypeError(value)

    if isinstance(value, BaseModel):
        data = value.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")
    else:
        data = json.dumps(
            dataclasses.asdict(value) if dataclasses.is_dataclass(value) else value,
            default=_default,
            separators=(",", ":"),
            ensure_ascii=False,
        ).encode("utf-8")
    return io.BytesIO(data)


def encode_multipart(
    files: Mapping[str, FileField],
    fields: Mapping[str, str] | None = None,
) -> tuple[bytes, str]:
    """Construye un cuerpo multipart y devuelve `(body, content_type)`.

    `files` mapea nombre de campo -> (nombre de fichero, contenido).
    El boundary lo genera httpx; el content type lo incluye.
    """

    staged = httpx.Request(
        "POST",
        "http://multipart.invalid/",
        data=dict(fields or {}),
        files={name: (file_name, content) for name, (file_name, content) in files.items()},
    )
    body = staged.read()
    return body, staged.headers["Content-Type"]
