"""Jira Service Management: organizaciones.

Rutas bajo /rest/servicedeskapi/organization y
/rest/servicedeskapi/servicedesk/{serviceDeskId}/organization.
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import Field

from atlassian_rest.adapters.service import Service, require
from atlassian_rest.adapters.transport import with_query
from atlassian_rest.core.context import Context
from atlassian_rest.core.domain.base import AtlassianModel
from atlassian_rest.core.domain.response import ResponseScheme
from atlassian_rest.core.domain.sm import (
    OrganizationPageScheme,
    OrganizationScheme,
    OrganizationUsersPageScheme,
)

_NO_ORGANIZATION_ID = "the organization id is required"
_NO_SERVICE_DESK_ID = "the service desk id is required"
_NO_ACCOUNTS = "the account id list cannot be empty"


class _OrganizationNamePayload(AtlassianModel):
    name: str


class _AccountsPayload(AtlassianModel):
    account_ids: list[str] = Field(default_factory=list)


class _OrganizationIdPayload(AtlassianModel):
    organization_id: int


class OrganizationService(Service):
    def gets(
        self,
        ctx: Context | None,
        account_id: str | None = None,
        start: int = 0,
        limit: int = 50,
    ) -> tuple[OrganizationPageScheme, ResponseScheme]:
        params = {"start": start, "limit": limit, "accountId": account_id or None}
        request = self._c.new_request(ctx, "GET", with_query("rest/servicedeskapi/organization", params))
        return self._c.call(request, OrganizationPageScheme)

    def get(self, ctx: Context | None, organization_id: int) -> tuple[OrganizationScheme, ResponseScheme]:
        require(organization_id, _NO_ORGANIZATION_ID)

        request = self._c.new_request(ctx, "GET", f"rest/servicedeskapi/organization/{organization_id}")
        return self._c.call(request, OrganizationScheme)

    def delete(self, ctx: Context | None, organization_id: int) -> ResponseScheme:
        """Borra la organización aunque tenga asociaciones (p.ej. service desks)."""

        require(organization_id, _NO_ORGANIZATION_ID)

        request = self._c.new_request(ctx, "DELETE", f"rest/servicedeskapi/organization/{organization_id}")
        _, response = self._c.call(request)
        return response

    def create(self, ctx: Context | None, name: str) -> tuple[OrganizationScheme, ResponseScheme]:
        require(name, "the organization name is required")
        reader = self._c.encode_payload(_OrganizationNamePayload(name=name))

        request = self._c.new_request(ctx, "POST", "rest/servicedeskapi/organization", reader)
        return self._c.call(request, OrganizationScheme)

    def users(
        self,
        ctx: Context | None,
        organization_id: int,
        start: int = 0,
        limit: int = 50,
    ) -> tuple[OrganizationUsersPageScheme, ResponseScheme]:
        require(organization_id, _NO_ORGANIZATION_ID)

        endpoint = with_query(
            f"rest/servicedeskapi/organization/{organization_id}/user",
            {"start": start, "limit": limit},
        )
        request = self._c.new_request(ctx, "GET", endpoint)
        return self._c.call(request, OrganizationUsersPageScheme)

    def _members(
        self,
        ctx: Context | None,
        method: str,
        organization_id: int,
        account_ids: Sequence[str],
    ) -> ResponseScheme:
        require(organization_id, _NO_ORGANIZATION_ID)
        require(account_ids, _NO_ACCOUNTS)
        reader = self._c.encode_payload(_AccountsPayload(account_ids=list(account_ids)))

        request = self._c.new_request(
            ctx, method, f"rest/servicedeskapi/organization/{organization_id}/user", reader
        )
        _, response = self._c.call(request)
        return response

    def add(self, ctx: Context | None, organization_id: int, account_ids: Sequence[str]) -> ResponseScheme:
        return self._members(ctx, "POST", organization_id, account_ids)

    def remove(self, ctx: Context | None, organization_id: int, account_ids: Sequence[str]) -> ResponseScheme:
        return self._members(ctx, "DELETE", organization_id, account_ids)

    def project(
        self,
        ctx: Context | None,
        service_desk_id: int,
        account_id: str | None = None,
        start: int = 0,
        limit: int = 50,
    ) -> tuple[OrganizationPageScheme, ResponseScheme]:
        """Organizaciones asociadas a un service desk."""

        require(service_desk_id, _NO_SERVICE_DESK_ID)

        endpoint = with_query(
            f"rest/servicedeskapi/servicedesk/{service_desk_id}/organization",
            {"start": start, "limit": limit, "accountId": account_id or None},
        )
        request = self._c.new_request(ctx, "GET", endpoint)
        return self._c.call(request, OrganizationPageScheme)

    def _desk_link(self, ctx: Context | None, method: str, service_desk_id: int, organization_id: int) -> ResponseScheme:
        require(service_desk_id, _NO_SERVICE_DESK_ID)
        require(organization_id, _NO_ORGANIZATION_ID)
        reader = self._c.encode_payload(_OrganizationIdPayload(organization_id=organization_id))

        request = self._c.new_request(
            ctx, method, f"rest/servicedeskapi/servicedesk/{service_desk_id}/organization", reader
        )
        _, response = self._c.call(request)
        return response

    def associate(self, ctx: Context | None, service_desk_id: int, organization_id: int) -> ResponseScheme:
        """Si ya estaba asociada, Jira responde 204 sin cambios."""

        return self._desk_link(ctx, "POST", service_desk_id, organization_id)

    def detach(self, ctx: Context | None, service_desk_id: int, organization_id: int) -> ResponseScheme:
        return self._desk_link(ctx, "DELETE", service_desk_id, organization_id)
