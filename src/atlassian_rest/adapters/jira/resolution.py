from __future__ import annotations

from atlassian_rest.adapters.service import Service, require
from atlassian_rest.core.context import Context
from atlassian_rest.core.domain.jira import ResolutionScheme
from atlassian_rest.core.domain.response import ResponseScheme


class ResolutionService(Service):
    def gets(self, ctx: Context | None) -> tuple[list[ResolutionScheme], ResponseScheme]:
        """GET /rest/api/{2-3}/resolution"""

        request = self._c.new_request(ctx, "GET", f"rest/api/{self._version}/resolution")
        return self._c.call(request, list[ResolutionScheme])

    def get(self, ctx: Context | None, resolution_id: str) -> tuple[ResolutionScheme, ResponseScheme]:
        """GET /rest/api/{2-3}/resolution/{id}"""

        require(resolution_id, "the resolution id is required")

        request = self._c.new_request(ctx, "GET", f"rest/api/{self._version}/resolution/{resolution_id}")
        return self._c.call(request, ResolutionScheme)
