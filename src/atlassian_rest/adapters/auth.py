"""Estrategia de autenticación compartida por todas las peticiones de un cliente.

Reglas:
- Se configura una vez al arrancar y se pasa al `Client` en su construcción.
- No valida entradas: strings vacíos producen un header basic auth vacío.
- Cada petición toma un `Credentials` inmutable (`snapshot`). Si se rotan las
  credenciales en caliente, una petición ya construida conserva las anteriores.
"""

from __future__ import annotations

import base64
import threading
from dataclasses import dataclass, replace

from atlassian_rest.core.config import AppSettings


@dataclass(frozen=True)
class Credentials:
    """Vista inmutable del estado de autenticación en un instante dado."""

    identity: str | None = None
    secret: str | None = None
    user_agent: str | None = None
    experimental: bool = False

    @property
    def has_basic_auth(self) -> bool:
        return self.identity is not None

    def basic_auth_header(self) -> str:
        raw = f"{self.identity or ''}:{self.secret or ''}".encode("utf-8")
        return "Basic " + base64.b64encode(raw).decode("ascii")


class AuthenticationService:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._credentials = Credentials()

    @classmethod
    def from_settings(cls, settings: AppSettings) -> AuthenticationService:
        auth = cls()
        if settings.has_credentials:
            auth.set_basic_auth(settings.email or "", settings.api_token or "")
        if settings.user_agent:
            auth.set_user_agent(settings.user_agent)
        if settings.experimental_api:
            auth.set_experimental_flag()
        return auth

    def _replace(self, **changes: object) -> None:
        with self._lock:
            self._credentials = replace(self._credentials, **changes)

    def snapshot(self) -> Credentials:
        with self._lock:
            return self._credentials

    def set_basic_auth(self, identity: str, secret: str) -> None:
        self._replace(identity=identity, secret=secret)

    def get_basic_auth(self) -> tuple[str, str]:
        creds = self.snapshot()
        return creds.identity or "", creds.secret or ""

    def has_basic_auth(self) -> bool:
        return self.snapshot().has_basic_auth

    def set_user_agent(self, agent: str) -> None:
        self._replace(user_agent=agent)

    def get_user_agent(self) -> str:
        return self.snapshot().user_agent or ""

    def has_user_agent(self) -> bool:
        return self.snapshot().user_agent is not None

    def set_experimental_flag(self) -> None:
        self._replace(experimental=True)

    def has_experimental_flag(self) -> bool:
        return self.snapshot().experimental
