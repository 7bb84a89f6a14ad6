"""Confluence: adjuntos de contenido.

Las rutas son relativas (`rest/api/...`) para que un site con prefijo, p.ej.
`https://example.atlassian.net/wiki/`, conserve el prefijo al resolverse.
"""

from __future__ import annotations

from typing import IO

from atlassian_rest.adapters.payload import encode_multipart
from atlassian_rest.adapters.service import Service, require
from atlassian_rest.adapters.transport import with_query
from atlassian_rest.core.context import Context
from atlassian_rest.core.domain.confluence import ContentPageScheme, GetContentAttachmentsOptionsScheme
from atlassian_rest.core.domain.response import ResponseScheme
from atlassian_rest.core.errors import PreconditionError


class ContentAttachmentService(Service):
    def gets(
        self,
        ctx: Context | None,
        content_id: str,
        start: int = 0,
        limit: int = 25,
        options: GetContentAttachmentsOptionsScheme | None = None,
    ) -> tuple[ContentPageScheme, ResponseScheme]:
        """Adjuntos de un contenido (por defecto Confluence expande `metadata`)."""

        require(content_id, "the content id is required")

        params: dict[str, object] = {"start": start, "limit": limit}
        if options is not None:
            if options.expand:
                params["expand"] = ",".join(options.expand)
            if options.file_name:
                params["filename"] = options.file_name
            if options.media_type:
                params["mediaType"] = options.media_type

        endpoint = with_query(f"rest/api/content/{content_id}/child/attachment", params)
        request = self._c.new_request(ctx, "GET", endpoint)
        return self._c.call(request, ContentPageScheme)

    def _upload(
        self,
        ctx: Context | None,
        method: str,
        content_id: str,
        status: str | None,
        file_name: str,
        file: bytes | IO[bytes] | None,
    ) -> tuple[ContentPageScheme, ResponseScheme]:
        require(content_id, "the content id is required")
        require(file_name, "the file name is required")
        if file is None:
            raise PreconditionError("the file reader cannot be None")

        body, content_type = encode_multipart({"file": (file_name, file)}, {"minorEdit": "true"})
        endpoint = with_query(f"rest/api/content/{content_id}/child/attachment", {"status": status or None})

        request = self._c.new_form_request(ctx, method, endpoint, content_type, body)
        return self._c.call(request, ContentPageScheme)

    def create(
        self,
        ctx: Context | None,
        content_id: str,
        file_name: str,
        file: bytes | IO[bytes] | None,
        status: str | None = None,
    ) -> tuple[ContentPageScheme, ResponseScheme]:
        """Solo añade adjuntos nuevos; para versionar uno existente usar `create_or_update`."""

        return self._upload(ctx, "POST", content_id, status, file_name, file)

    def create_or_update(
        self,
        ctx: Context | None,
        content_id: str,
        file_name: str,
        file: bytes | IO[bytes] | None,
        status: str | None = None,
    ) -> tuple[ContentPageScheme, ResponseScheme]:
        """Si el adjunto ya existe, Confluence crea una versión nueva."""

        return self._upload(ctx, "PUT", content_id, status, file_name, file)
