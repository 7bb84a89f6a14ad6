from __future__ import annotations

from typing import IO

from atlassian_rest.adapters.payload import encode_multipart
from atlassian_rest.adapters.service import Service, require
from atlassian_rest.core.context import Context
from atlassian_rest.core.domain.jira import IssueAttachmentScheme
from atlassian_rest.core.domain.response import ResponseScheme
from atlassian_rest.core.errors import PreconditionError


class AttachmentService(Service):
    def add(
        self,
        ctx: Context | None,
        issue_key_or_id: str,
        file_name: str,
        file: bytes | IO[bytes] | None,
    ) -> tuple[list[IssueAttachmentScheme], ResponseScheme]:
        """Adjunta un fichero a la incidencia (multipart, campo `file`).

        POST /rest/api/{2-3}/issue/{issueIdOrKey}/attachments
        """

        require(issue_key_or_id, "the issue key or id is required")
        require(file_name, "the file name is required")
        if file is None:
            raise PreconditionError("the file reader cannot be None")

        body, content_type = encode_multipart({"file": (file_name, file)})

        request = self._c.new_form_request(
            ctx,
            "POST",
            f"rest/api/{self._version}/issue/{issue_key_or_id}/attachments",
            content_type,
            body,
        )
        return self._c.call(request, list[IssueAttachmentScheme])
