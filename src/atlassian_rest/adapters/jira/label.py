from __future__ import annotations

from atlassian_rest.adapters.service import Service
from atlassian_rest.adapters.transport import with_query
from atlassian_rest.core.context import Context
from atlassian_rest.core.domain.jira import IssueLabelsScheme
from atlassian_rest.core.domain.response import ResponseScheme


class LabelService(Service):
    def gets(
        self,
        ctx: Context | None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[IssueLabelsScheme, ResponseScheme]:
        """Lista paginada de etiquetas.

        GET /rest/api/{2-3}/label
        """

        endpoint = with_query(
            f"rest/api/{self._version}/label",
            {"startAt": start_at, "maxResults": max_results},
        )
        request = self._c.new_request(ctx, "GET", endpoint)
        return self._c.call(request, IssueLabelsScheme)
