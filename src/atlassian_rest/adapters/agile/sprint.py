"""Jira Software: sprints.

Rutas: /rest/agile/{version}/sprint[/{sprintId}[/issue]]

`start` y `close` son actualizaciones parciales (POST) que solo envían `state`.
"""

from __future__ import annotations

from atlassian_rest.adapters.service import Service, require
from atlassian_rest.adapters.transport import with_query
from atlassian_rest.core.context import Context
from atlassian_rest.core.domain.agile import (
    IssueOptionScheme,
    SprintIssuePageScheme,
    SprintPayloadScheme,
    SprintScheme,
)
from atlassian_rest.core.domain.response import ResponseScheme

_NO_SPRINT_ID = "the sprint id is required"


class SprintService(Service):
    def _endpoint(self, sprint_id: int | None = None) -> str:
        base = f"rest/agile/{self._version}/sprint"
        return base if sprint_id is None else f"{base}/{sprint_id}"

    def get(self, ctx: Context | None, sprint_id: int) -> tuple[SprintScheme, ResponseScheme]:
        require(sprint_id, _NO_SPRINT_ID)

        request = self._c.new_request(ctx, "GET", self._endpoint(sprint_id))
        return self._c.call(request, SprintScheme)

    def create(self, ctx: Context | None, payload: SprintPayloadScheme) -> tuple[SprintScheme, ResponseScheme]:
        """Crea un sprint futuro; `name` y `origin_board_id` son obligatorios para Jira."""

        reader = self._c.encode_payload(payload)

        request = self._c.new_request(ctx, "POST", self._endpoint(), reader)
        return self._c.call(request, SprintScheme)

    def update(
        self,
        ctx: Context | None,
        sprint_id: int,
        payload: SprintPayloadScheme,
    ) -> tuple[SprintScheme, ResponseScheme]:
        """Actualización completa (PUT): los campos ausentes quedan nulos."""

        require(sprint_id, _NO_SPRINT_ID)
        reader = self._c.encode_payload(payload)

        request = self._c.new_request(ctx, "PUT", self._endpoint(sprint_id), reader)
        return self._c.call(request, SprintScheme)

    def partial_update(
        self,
        ctx: Context | None,
        sprint_id: int,
        payload: SprintPayloadScheme,
    ) -> tuple[SprintScheme, ResponseScheme]:
        """Actualización parcial (POST): solo cambian los campos enviados."""

        require(sprint_id, _NO_SPRINT_ID)
        reader = self._c.encode_payload(payload)

        request = self._c.new_request(ctx, "POST", self._endpoint(sprint_id), reader)
        return self._c.call(request, SprintScheme)

    def delete(self, ctx: Context | None, sprint_id: int) -> ResponseScheme:
        require(sprint_id, _NO_SPRINT_ID)

        request = self._c.new_request(ctx, "DELETE", self._endpoint(sprint_id))
        _, response = self._c.call(request)
        return response

    def issues(
        self,
        ctx: Context | None,
        sprint_id: int,
        opts: IssueOptionScheme | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[SprintIssuePageScheme, ResponseScheme]:
        require(sprint_id, _NO_SPRINT_ID)

        params: dict[str, object] = {"startAt": start_at, "maxResults": max_results}
        if opts is not None:
            if not opts.validate_query:
                params["validateQuery"] = "false"
            if opts.jql:
                params["jql"] = opts.jql
            if opts.expand:
                params["expand"] = ",".join(opts.expand)
            if opts.fields:
                params["fields"] = ",".join(opts.fields)

        request = self._c.new_request(ctx, "GET", with_query(f"{self._endpoint(sprint_id)}/issue", params))
        return self._c.call(request, SprintIssuePageScheme)

    def _transition(self, ctx: Context | None, sprint_id: int, state: str) -> ResponseScheme:
        require(sprint_id, _NO_SPRINT_ID)
        reader = self._c.encode_payload(SprintPayloadScheme(state=state))

        request = self._c.new_request(ctx, "POST", self._endpoint(sprint_id), reader)
        _, response = self._c.call(request)
        return response

    def start(self, ctx: Context | None, sprint_id: int) -> ResponseScheme:
        return self._transition(ctx, sprint_id, "active")

    def close(self, ctx: Context | None, sprint_id: int) -> ResponseScheme:
        return self._transition(ctx, sprint_id, "closed")
