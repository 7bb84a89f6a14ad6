"""Jira: comentarios de incidencia.

Rutas: /rest/api/{2-3}/issue/{issueIdOrKey}/comment[/{id}]
"""

from __future__ import annotations

from collections.abc import Sequence

from atlassian_rest.adapters.service import Service, require
from atlassian_rest.adapters.transport import with_query
from atlassian_rest.core.context import Context
from atlassian_rest.core.domain.jira import (
    CommentPayloadScheme,
    IssueCommentPageScheme,
    IssueCommentScheme,
)
from atlassian_rest.core.domain.response import ResponseScheme


class CommentService(Service):
    def _base(self, issue_key_or_id: str) -> str:
        return f"rest/api/{self._version}/issue/{issue_key_or_id}/comment"

    def gets(
        self,
        ctx: Context | None,
        issue_key_or_id: str,
        order_by: str | None = None,
        expand: Sequence[str] | None = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> tuple[IssueCommentPageScheme, ResponseScheme]:
        require(issue_key_or_id, "the issue key or id is required")

        params: dict[str, object] = {"startAt": start_at, "maxResults": max_results}
        if order_by:
            params["orderBy"] = order_by
        if expand:
            params["expand"] = ",".join(expand)

        request = self._c.new_request(ctx, "GET", with_query(self._base(issue_key_or_id), params))
        return self._c.call(request, IssueCommentPageScheme)

    def get(
        self,
        ctx: Context | None,
        issue_key_or_id: str,
        comment_id: str,
    ) -> tuple[IssueCommentScheme, ResponseScheme]:
        require(issue_key_or_id, "the issue key or id is required")
        require(comment_id, "the comment id is required")

        request = self._c.new_request(ctx, "GET", f"{self._base(issue_key_or_id)}/{comment_id}")
        return self._c.call(request, IssueCommentScheme)

    def add(
        self,
        ctx: Context | None,
        issue_key_or_id: str,
        payload: CommentPayloadScheme,
        expand: Sequence[str] | None = None,
    ) -> tuple[IssueCommentScheme, ResponseScheme]:
        require(issue_key_or_id, "the issue key or id is required")

        reader = self._c.encode_payload(payload)
        params = {"expand": ",".join(expand)} if expand else {}

        request = self._c.new_request(ctx, "POST", with_query(self._base(issue_key_or_id), params), reader)
        return self._c.call(request, IssueCommentScheme)

    def delete(self, ctx: Context | None, issue_key_or_id: str, comment_id: str) -> ResponseScheme:
        require(issue_key_or_id, "the issue key or id is required")
        require(comment_id, "the comment id is required")

        request = self._c.new_request(ctx, "DELETE", f"{self._base(issue_key_or_id)}/{comment_id}")
        _, response = self._c.call(request)
        return response
