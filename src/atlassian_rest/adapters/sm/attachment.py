from __future__ import annotations

from collections.abc import Sequence

from pydantic import Field

from atlassian_rest.adapters.service import Service, require
from atlassian_rest.adapters.transport import with_query
from atlassian_rest.core.context import Context
from atlassian_rest.core.domain.base import AtlassianModel
from atlassian_rest.core.domain.response import ResponseScheme
from atlassian_rest.core.domain.sm import RequestAttachmentCreationScheme, RequestAttachmentPageScheme

_NO_ISSUE = "the issue key or id is required"


class _AttachmentCreatePayload(AtlassianModel):
    temporary_attachment_ids: list[str] = Field(default_factory=list)
    public: bool = False


class RequestAttachmentService(Service):
    def gets(
        self,
        ctx: Context | None,
        issue_key_or_id: str,
        start: int = 0,
        limit: int = 50,
    ) -> tuple[RequestAttachmentPageScheme, ResponseScheme]:
        """GET /rest/servicedeskapi/request/{issueIdOrKey}/attachment"""

        require(issue_key_or_id, _NO_ISSUE)

        endpoint = with_query(
            f"rest/servicedeskapi/request/{issue_key_or_id}/attachment",
            {"start": start, "limit": limit},
        )
        request = self._c.new_request(ctx, "GET", endpoint)
        return self._c.call(request, RequestAttachmentPageScheme)

    def create(
        self,
        ctx: Context | None,
        issue_key_or_id: str,
        temporary_attachment_ids: Sequence[str],
        public: bool,
    ) -> tuple[RequestAttachmentCreationScheme, ResponseScheme]:
        """Convierte ficheros temporales (ver `ServiceDeskService.attach`) en adjuntos.

        POST /rest/servicedeskapi/request/{issueIdOrKey}/attachment
        """

        require(issue_key_or_id, _NO_ISSUE)
        require(temporary_attachment_ids, "the temporary attachment id list cannot be empty")

        reader = self._c.encode_payload(
            _AttachmentCreatePayload(temporary_attachment_ids=list(temporary_attachment_ids), public=public)
        )
        request = self._c.new_request(ctx, "POST", f"rest/servicedeskapi/request/{issue_key_or_id}/attachment", reader)
        return self._c.call(request, RequestAttachmentCreationScheme)
