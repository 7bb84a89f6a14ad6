"""Raíz de composición de Confluence."""

from __future__ import annotations

import httpx

from atlassian_rest.adapters.auth import AuthenticationService
from atlassian_rest.adapters.confluence.attachment import ContentAttachmentService
from atlassian_rest.adapters.transport import Client
from atlassian_rest.core.config import AppSettings


class ConfluenceClient(Client):
    api_version = "1"

    def __init__(
        self,
        site: str,
        http: httpx.Client | None = None,
        auth: AuthenticationService | None = None,
        *,
        settings: AppSettings | None = None,
    ) -> None:
        super().__init__(site, http, auth, settings=settings)
        self.content_attachment = ContentAttachmentService(self, self.api_version)
