from __future__ import annotations

from atlassian_rest.adapters.service import Service
from atlassian_rest.core.context import Context
from atlassian_rest.core.domain.jira import ServerInformationScheme
from atlassian_rest.core.domain.response import ResponseScheme


class ServerService(Service):
    def info(self, ctx: Context | None) -> tuple[ServerInformationScheme, ResponseScheme]:
        """GET /rest/api/{2-3}/serverInfo"""

        request = self._c.new_request(ctx, "GET", f"rest/api/{self._version}/serverInfo")
        return self._c.call(request, ServerInformationScheme)
