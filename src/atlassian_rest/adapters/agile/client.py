"""Raíz de composición de Jira Software (Agile 1.0)."""

from __future__ import annotations

import httpx

from atlassian_rest.adapters.agile.sprint import SprintService
from atlassian_rest.adapters.auth import AuthenticationService
from atlassian_rest.adapters.transport import Client
from atlassian_rest.core.config import AppSettings


class AgileClient(Client):
    api_version = "1.0"

    def __init__(
        self,
        site: str,
        http: httpx.Client | None = None,
        auth: AuthenticationService | None = None,
        *,
        settings: AppSettings | None = None,
    ) -> None:
        super().__init__(site, http, auth, settings=settings)
        self.sprint = SprintService(self, self.api_version)
