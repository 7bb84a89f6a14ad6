"""Raíz de composición de Jira Service Management.

Los endpoints experimentales de `servicedeskapi` exigen
`X-ExperimentalApi: opt-in`; se activa con `auth.set_experimental_flag()`
(o `ATLASSIAN_REST_EXPERIMENTAL_API=true`).
"""

from __future__ import annotations

import httpx

from atlassian_rest.adapters.auth import AuthenticationService
from atlassian_rest.adapters.sm.attachment import RequestAttachmentService
from atlassian_rest.adapters.sm.organization import OrganizationService
from atlassian_rest.adapters.sm.service_desk import ServiceDeskService
from atlassian_rest.adapters.transport import Client
from atlassian_rest.core.config import AppSettings


class ServiceManagementClient(Client):
    api_version = "latest"

    def __init__(
        self,
        site: str,
        http: httpx.Client | None = None,
        auth: AuthenticationService | None = None,
        *,
        settings: AppSettings | None = None,
    ) -> None:
        super().__init__(site, http, auth, settings=settings)

        self.organization = OrganizationService(self, self.api_version)
        self.request_attachment = RequestAttachmentService(self, self.api_version)
        self.service_desk = ServiceDeskService(self, self.api_version)
