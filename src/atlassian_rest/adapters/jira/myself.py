"""Jira: usuario autenticado (`/myself`)."""

from __future__ import annotations

from collections.abc import Sequence

from atlassian_rest.adapters.service import Service
from atlassian_rest.adapters.transport import with_query
from atlassian_rest.core.context import Context
from atlassian_rest.core.domain.jira import UserScheme
from atlassian_rest.core.domain.response import ResponseScheme


class MySelfService(Service):
    def details(
        self,
        ctx: Context | None,
        expand: Sequence[str] | None = None,
    ) -> tuple[UserScheme, ResponseScheme]:
        """Devuelve el usuario de las credenciales en uso.

        GET /rest/api/{2-3}/myself
        """

        params = {"expand": ",".join(expand)} if expand else {}
        endpoint = with_query(f"rest/api/{self._version}/myself", params)

        request = self._c.new_request(ctx, "GET", endpoint)
        return self._c.call(request, UserScheme)
