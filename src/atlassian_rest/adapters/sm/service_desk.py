from __future__ import annotations

from typing import IO

from atlassian_rest.adapters.payload import encode_multipart
from atlassian_rest.adapters.service import Service, require
from atlassian_rest.adapters.transport import with_query
from atlassian_rest.core.context import Context
from atlassian_rest.core.domain.response import ResponseScheme
from atlassian_rest.core.domain.sm import (
    ServiceDeskPageScheme,
    ServiceDeskScheme,
    ServiceDeskTemporaryFileScheme,
)
from atlassian_rest.core.errors import PreconditionError

_NO_SERVICE_DESK_ID = "the service desk id is required"


class ServiceDeskService(Service):
    def gets(
        self,
        ctx: Context | None,
        start: int = 0,
        limit: int = 50,
    ) -> tuple[ServiceDeskPageScheme, ResponseScheme]:
        endpoint = with_query("rest/servicedeskapi/servicedesk", {"start": start, "limit": limit})
        request = self._c.new_request(ctx, "GET", endpoint)
        return self._c.call(request, ServiceDeskPageScheme)

    def get(self, ctx: Context | None, service_desk_id: int) -> tuple[ServiceDeskScheme, ResponseScheme]:
        require(service_desk_id, _NO_SERVICE_DESK_ID)

        request = self._c.new_request(ctx, "GET", f"rest/servicedeskapi/servicedesk/{service_desk_id}")
        return self._c.call(request, ServiceDeskScheme)

    def attach(
        self,
        ctx: Context | None,
        service_desk_id: int,
        file_name: str,
        file: bytes | IO[bytes] | None,
    ) -> tuple[ServiceDeskTemporaryFileScheme, ResponseScheme]:
        """Sube un fichero temporal al service desk.

        POST /rest/servicedeskapi/servicedesk/{serviceDeskId}/attachTemporaryFile
        """

        require(service_desk_id, _NO_SERVICE_DESK_ID)
        require(file_name, "the file name is required")
        if file is None:
            raise PreconditionError("the file reader cannot be None")

        body, content_type = encode_multipart({"file": (file_name, file)})

        request = self._c.new_form_request(
            ctx,
            "POST",
            f"rest/servicedeskapi/servicedesk/{service_desk_id}/attachTemporaryFile",
            content_type,
            body,
        )
        return self._c.call(request, ServiceDeskTemporaryFileScheme)
