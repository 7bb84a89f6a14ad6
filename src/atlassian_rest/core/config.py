"""Configuración del Core.

Responsabilidad:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (transporte HTTP, autenticación) lean la config de
  forma consistente.

Orden de carga: variables de entorno, luego `.env` del proyecto y por último el
`.env` global del usuario (el que escribe `doctor setup`).
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio donde `doctor setup` guarda el `.env` con site y credenciales."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "atlassian-rest"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "atlassian-rest"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "atlassian-rest"
    return Path.home() / ".config" / "atlassian-rest"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    """`CLAVE=valor` por línea; ignora comentarios y líneas sin `=`."""

    data: dict[str, str] = {}
    for line in map(str.strip, text.splitlines()):
        if line.startswith("#") or "=" not in line:
            continue
        key, _, value = line.partition("=")
        if key.strip():
            data[key.strip()] = value.strip().strip("\"'")
    return data


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Guarda site y credenciales en el `.env` del usuario (lo usa `doctor setup`).

    Contiene el API token en claro: permisos 0600. Las claves existentes se
    conservan y los valores `None` no se escriben.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    merged = _parse_env_lines(env_path.read_text(encoding="utf-8")) if env_path.exists() else {}
    merged.update((k, v) for k, v in values.items() if v is not None)

    body = "".join(f"{key}={merged[key]}\n" for key in sorted(merged))
    env_path.write_text(f"# atlassian-rest user config (.env)\n{body}", encoding="utf-8")
    env_path.chmod(0o600)
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Un único contrato de configuración para la CLI y para
    `Client.from_settings`.
    """

    model_config = SettingsConfigDict(
        env_prefix="ATLASSIAN_REST_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    site: str | None = Field(
        default=None,
        description="URL base del sitio (p.ej. https://example.atlassian.net).",
    )
    email: str | None = Field(
        default=None,
        description="Identidad para basic auth (email de la cuenta Atlassian).",
    )
    api_token: str | None = Field(
        default=None,
        description="API token asociado al email.",
    )
    user_agent: str | None = Field(
        default="atlassian-rest/0.1",
        description="User-Agent enviado en cada petición (None para omitirlo).",
    )
    experimental_api: bool = Field(
        default=False,
        description="Envía `X-ExperimentalApi: opt-in` (endpoints experimentales de Service Management).",
    )

    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    follow_redirects: bool = Field(
        default=False,
        description="Seguir redirecciones HTTP en el transporte por defecto.",
    )

    @property
    def has_credentials(self) -> bool:
        return self.email is not None and self.api_token is not None
