"""Núcleo de transporte compartido por todos los productos.

Flujo de una operación:
    servicio -> `new_request` / `new_form_request` (sin I/O)
             -> `call` (envío, lectura completa del body, clasificación,
                decodificación opcional) -> `(resultado, ResponseScheme)`.

Garantías:
- Salvo fallo de transporte, toda llamada produce un `ResponseScheme`; en los
  errores de protocolo/decodificación viaja en `exc.response`.
- El body se lee completo antes de clasificar el código HTTP.
- El contexto se consulta antes del envío, entre chunks del body y al final;
  cancelación o deadline vencido abortan la llamada con un `TransportError`.
- Sin reintentos: cualquier error llega al llamador.
"""

from __future__ import annotations

import logging
import re
from types import TracebackType
from typing import IO, Any, TypeVar
from urllib.parse import urlencode, urljoin, urlsplit

import httpx
from pydantic import TypeAdapter, ValidationError

from atlassian_rest.adapters.auth import AuthenticationService, Credentials
from atlassian_rest.adapters.http_client import build_client
from atlassian_rest.adapters.payload import encode_payload
from atlassian_rest.core.config import AppSettings
from atlassian_rest.core.context import Context
from atlassian_rest.core.domain.request import PreparedRequest
from atlassian_rest.core.domain.response import ResponseScheme
from atlassian_rest.core.errors import (
    ConfigurationError,
    DeadlineExceededError,
    DecodeError,
    InvalidPathError,
    MissingContextError,
    TransportError,
    UnexpectedStatusError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

_CONTROL_CHARS_RE = re.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def encode_query(params: dict[str, Any]) -> str:
    """Codifica parámetros de query con claves en orden alfabético.

    Los valores `None` se omiten; las listas generan una clave repetida.
    """

    items = sorted((k, v) for k, v in params.items() if v is not None)
    return urlencode(items, doseq=True)


def with_query(endpoint: str, params: dict[str, Any]) -> str:
    query = encode_query(params)
    return f"{endpoint}?{query}" if query else endpoint


def _normalize_site(site: str) -> str:
    if not site.endswith("/"):
        site += "/"
    try:
        parts = urlsplit(site)
    except ValueError as exc:
        raise ConfigurationError(f"invalid site {site!r}: {exc}") from exc
    if not parts.scheme or not parts.netloc:
        raise ConfigurationError(f"invalid site {site!r}: scheme and host are required")
    return site


def _transport_error(exc: httpx.HTTPError, ctx: Context) -> TransportError:
    if isinstance(exc, httpx.TimeoutException) and ctx.err() is not None:
        return DeadlineExceededError("context deadline exceeded")
    return TransportError(f"{type(exc).__name__}: {exc}")


def _read_body(body: bytes | IO[bytes] | None) -> bytes | None:
    if body is None or isinstance(body, bytes):
        return body
    return body.read()


class Client:
    """Raíz de composición: site base, transporte inyectado y autenticación.

    El site y el transporte no cambian tras la construcción. Si el cliente
    creó su propio `httpx.Client`, `close()` lo cierra; uno inyectado por el
    llamador queda a su cargo.
    """

    def __init__(
        self,
        site: str,
        http: httpx.Client | None = None,
        auth: AuthenticationService | None = None,
        *,
        settings: AppSettings | None = None,
    ) -> None:
        self._site = _normalize_site(site)
        self._owns_http = http is None
        self._http = http if http is not None else build_client(settings)
        self._auth = auth if auth is not None else AuthenticationService()

    @classmethod
    def from_settings(cls, settings: AppSettings | None = None, http: httpx.Client | None = None):
        settings = settings or AppSettings()
        if not settings.site:
            raise ConfigurationError("site is not configured (ATLASSIAN_REST_SITE)")
        return cls(
            settings.site,
            http=http,
            auth=AuthenticationService.from_settings(settings),
            settings=settings,
        )

    @property
    def site(self) -> str:
        return self._site

    @property
    def http(self) -> httpx.Client:
        return self._http

    @property
    def auth(self) -> AuthenticationService:
        return self._auth

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self):
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Construcción de peticiones
    # ------------------------------------------------------------------

    def resolve(self, path: str) -> str:
        """Resuelve `path` contra el site (RFC 3986)."""

        if _CONTROL_CHARS_RE.search(path):
            raise InvalidPathError(path, "invalid control character in URL")
        if _BAD_ESCAPE_RE.search(path):
            raise InvalidPathError(path, "invalid URL escape")
        try:
            urlsplit(path)
            return urljoin(self._site, path)
        except ValueError as exc:
            raise InvalidPathError(path, str(exc)) from exc

    def _apply_auth(self, headers: dict[str, str], creds: Credentials) -> None:
        if creds.has_basic_auth:
            headers["Authorization"] = creds.basic_auth_header()
        if creds.user_agent is not None:
            headers["User-Agent"] = creds.user_agent
        if creds.experimental:
            headers["X-ExperimentalApi"] = "opt-in"

    def _build(
        self,
        ctx: Context | None,
        method: str,
        path: str,
        headers: dict[str, str],
        content: bytes | None,
    ) -> PreparedRequest:
        if ctx is None:
            raise MissingContextError()
        endpoint = self.resolve(path)

        self._apply_auth(headers, self._auth.snapshot())

        extra: dict[str, Any] = {}
        remaining = ctx.remaining()
        if remaining is not None:
            extra["timeout"] = httpx.Timeout(remaining)

        try:
            request = self._http.build_request(method, endpoint, headers=headers, content=content, **extra)
        except httpx.InvalidURL as exc:
            raise InvalidPathError(path, str(exc)) from exc

        logger.debug(
            "request built",
            extra={"method": method, "endpoint": endpoint, "has_body": content is not None},
        )
        return PreparedRequest(ctx=ctx, request=request)

    def new_request(
        self,
        ctx: Context | None,
        method: str,
        path: str,
        body: bytes | IO[bytes] | None = None,
    ) -> PreparedRequest:
        headers = {"Accept": "application/json"}
        content = _read_body(body)
        if content is not None:
            headers["Content-Type"] = "application/json"
        return self._build(ctx, method, path, headers, content)

    def new_form_request(
        self,
        ctx: Context | None,
        method: str,
        path: str,
        content_type: str,
        body: bytes | IO[bytes] | None,
    ) -> PreparedRequest:
        headers = {
            "Content-Type": content_type,
            "Accept": "application/json",
            "X-Atlassian-Token": "no-check",
        }
        return self._build(ctx, method, path, headers, _read_body(body))

    def encode_payload(self, value: object) -> IO[bytes]:
        return encode_payload(value)

    # ------------------------------------------------------------------
    # Ejecución y normalización
    # ------------------------------------------------------------------

    def _send(self, prepared: PreparedRequest) -> httpx.Response:
        ctx = prepared.ctx
        err = ctx.err()
        if err is not None:
            raise err

        # El deadline se mide al enviar, no al construir.
        remaining = ctx.remaining()
        if remaining is not None:
            prepared.request.extensions["timeout"] = httpx.Timeout(remaining).as_dict()

        try:
            return self._http.send(prepared.request, stream=True)
        except httpx.HTTPError as exc:
            raise _transport_error(exc, ctx) from exc

    def _read(self, response: httpx.Response, ctx: Context) -> bytes:
        """Lee el body por chunks; aborta en cuanto el contexto expira o se cancela."""

        chunks: list[bytes] = []
        try:
            for chunk in response.iter_bytes():
                chunks.append(chunk)
                err = ctx.err()
                if err is not None:
                    raise err
        except httpx.HTTPError as exc:
            raise _transport_error(exc, ctx) from exc
        finally:
            response.close()
        return b"".join(chunks)

    def call(
        self,
        prepared: PreparedRequest,
        result_type: type[T] | Any | None = None,
    ) -> tuple[T | None, ResponseScheme]:
        """Ejecuta la petición y normaliza la respuesta.

        `result_type` acepta cualquier tipo que entienda `pydantic.TypeAdapter`
        (modelos, `list[Modelo]`, `dict[str, Any]`). Sin `result_type` el
        resultado es `None` y el body queda solo en el sobre.
        """

        response = self._send(prepared)
        body = self._read(response, prepared.ctx)

        envelope = ResponseScheme(
            code=response.status_code,
            endpoint=str(response.request.url),
            method=response.request.method,
            body=body,
            response=response,
        )

        err = prepared.ctx.err()
        if err is not None:
            raise err

        if not envelope.ok:
            logger.warning(
                "unexpected status code",
                extra={"code": envelope.code, "method": envelope.method, "endpoint": envelope.endpoint},
            )
            raise UnexpectedStatusError(envelope)

        logger.debug(
            "response received",
            extra={"code": envelope.code, "method": envelope.method, "endpoint": envelope.endpoint},
        )

        if result_type is None:
            return None, envelope

        try:
            result = TypeAdapter(result_type).validate_json(body)
        except ValidationError as exc:
            raise DecodeError(f"unable to decode response body: {exc}", envelope) from exc
        return result, envelope
